"""Plain text transcript with a timestamp header per block.

WHY: This is the core output — the lines the chunker produces, written
verbatim one per line, ready to paste into any note.

HOW: Chunks with the configured threshold, renders the blocks to lines
(the same lines format_transcript() returns) and joins them, each
followed by a line break.

RULES:
- Header lines are bare ``M:SS`` labels
- Fragment text is written verbatim, one fragment per line
- Output suffix: "-transcript.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List, Sequence

from transcript_chunker.config import ChunkerSettings
from transcript_chunker.core.chunker import chunk_fragments, render_blocks
from transcript_chunker.core.ir import TimedFragment
from transcript_chunker.formatters.base import BaseFormatter, FormatterOutput, join_lines


class TimestampedTextFormatter(BaseFormatter):
    """Formatter producing the chunker's lines as a text document."""

    @property
    def name(self) -> str:
        return "Timestamped Text"

    @property
    def suffix(self) -> str:
        return "-transcript.txt"

    def format(
        self,
        fragments: Sequence[TimedFragment],
        settings: ChunkerSettings,
    ) -> List[FormatterOutput]:
        blocks = chunk_fragments(fragments, settings.threshold_seconds)
        lines = render_blocks(blocks)
        return [
            FormatterOutput(
                suffix=self.suffix,
                content=join_lines(lines),
                media_type="text/plain",
                lines=lines,
                block_count=len(blocks),
            )
        ]
