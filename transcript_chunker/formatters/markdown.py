"""Markdown transcript with bracketed timestamp headers.

WHY: Pasted into a Markdown note, a bare ``0:00`` line is easy to
mistake for transcript text. Wrapping headers in brackets, ``[0:00]``,
sets them apart while keeping them plain text.

HOW: Builds blocks with chunk_fragments(), then renders each header as
``[M:SS]`` followed by the block's fragment lines.

RULES:
- Same block boundaries as the timestamped_text formatter
- Header format: "[M:SS]" on its own line
- Output suffix: "-transcript.md"
- Media type: "text/markdown"
"""

from __future__ import annotations

from typing import List, Sequence

from transcript_chunker.config import ChunkerSettings
from transcript_chunker.core.chunker import chunk_fragments, format_timestamp
from transcript_chunker.core.ir import TimedFragment
from transcript_chunker.formatters.base import BaseFormatter, FormatterOutput, join_lines


class MarkdownFormatter(BaseFormatter):
    """Formatter producing bracketed-header Markdown."""

    @property
    def name(self) -> str:
        return "Markdown"

    @property
    def suffix(self) -> str:
        return "-transcript.md"

    def format(
        self,
        fragments: Sequence[TimedFragment],
        settings: ChunkerSettings,
    ) -> List[FormatterOutput]:
        blocks = chunk_fragments(fragments, settings.threshold_seconds)
        lines: List[str] = []
        for block in blocks:
            lines.append("[{}]".format(format_timestamp(block.start_offset_ms)))
            lines.extend(block.texts)

        return [
            FormatterOutput(
                suffix=self.suffix,
                content=join_lines(lines),
                media_type="text/markdown",
                lines=lines,
                block_count=len(blocks),
            )
        ]
