"""Transcript with a timestamp header every N fragments.

WHY: The "timestamp interval" setting is described to users as a line
count ("1 - every line, 10 - every 10 lines"), while the block chunker
groups by seconds of speech. Rather than silently reinterpret either,
both are offered: this formatter takes the setting literally.

HOW: Walks fragments in order and emits a header before fragment 0,
N, 2N, ... using the same M:SS encoding as the block chunker.

RULES:
- settings.timestamp_interval is the number of fragments per header
- An interval below 1 is treated as 1 (a header before every fragment)
- Output suffix: "-interval.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List, Sequence

from transcript_chunker.config import ChunkerSettings
from transcript_chunker.core.chunker import format_timestamp
from transcript_chunker.core.ir import TimedFragment
from transcript_chunker.formatters.base import BaseFormatter, FormatterOutput, join_lines


class LineIntervalFormatter(BaseFormatter):
    """Formatter emitting a header every ``timestamp_interval`` fragments."""

    @property
    def name(self) -> str:
        return "Line Interval"

    @property
    def suffix(self) -> str:
        return "-interval.txt"

    def format(
        self,
        fragments: Sequence[TimedFragment],
        settings: ChunkerSettings,
    ) -> List[FormatterOutput]:
        interval = max(1, settings.timestamp_interval)
        lines: List[str] = []
        headers = 0
        for index, fragment in enumerate(fragments):
            if index % interval == 0:
                headers += 1
                lines.append(format_timestamp(fragment.offset_ms))
            lines.append(fragment.text)

        return [
            FormatterOutput(
                suffix=self.suffix,
                content=join_lines(lines),
                media_type="text/plain",
                lines=lines,
                block_count=headers,
            )
        ]
