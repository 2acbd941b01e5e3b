"""Duration-based block chunking and compact timestamp headers.

WHY: A transcript pasted fragment by fragment has no landmarks. Grouping
fragments into blocks of about N seconds of speech, each under an
``M:SS`` header, turns it into something a reader can skim and cite.

HOW: A single left-to-right pass. Each fragment's duration is added to a
running total. When the total reaches the threshold, or when nothing has
been emitted yet, a header for the current fragment's offset is emitted
and the total is reset. The fragment text always follows as its own line.

RULES:
- The first fragment always opens a block
- A header is emitted on the fragment whose duration makes the running
  total reach the threshold, so a block closes *before* that fragment
- The running total is float seconds (duration_ms / 1000 per fragment),
  so ten 100 ms fragments sum to just under 1 s and do not close a 1 s block
- threshold_seconds <= 0 puts every fragment in its own block
- Headers fold hours into minutes: 1:05:09 → "65:09"
- Headers are computed arithmetically, so offsets past 24h never wrap
- Fragment order and non-negative timing are caller preconditions;
  violating them changes header order but never raises
- Pure functions: no I/O, no shared state, safe to call concurrently
"""

from __future__ import annotations

import math
from typing import Iterable, List

from transcript_chunker.core.ir import Block, Number, TimedFragment


def format_timestamp(offset_ms: Number) -> str:
    """Encode a millisecond offset as a ``minutes:seconds`` header.

    WHY: Clock-style ``HH:MM:SS`` headers are noisy for recordings under
    an hour and jump format at the hour mark. Folding hours into the
    minute count keeps every header in one monotonic ``M:SS`` shape.

    HOW: Floor the offset to whole seconds, then split into hours,
    minutes and seconds with integer arithmetic and recombine hours and
    minutes into one total.

    RULES:
    - Minutes have no leading zero; seconds are always two digits
    - Sub-second remainders are truncated, never rounded

    Args:
        offset_ms: Offset from the start of the recording in milliseconds.

    Returns:
        The header label, e.g. ``"0:00"``, ``"4:07"``, ``"61:05"``.
    """
    total_seconds = math.floor(offset_ms / 1000)
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    return "{}:{:02d}".format(hours * 60 + minutes, seconds)


def chunk_fragments(
    fragments: Iterable[TimedFragment],
    threshold_seconds: float,
) -> List[Block]:
    """Group fragments into blocks by accumulated spoken duration.

    Args:
        fragments: Fragments in transcript order.
        threshold_seconds: Minimum accumulated duration, in seconds,
            before the next fragment boundary starts a new block.

    Returns:
        Blocks in order. Empty input gives an empty list.
    """
    blocks: List[Block] = []
    block_duration_s = 0.0

    for fragment in fragments:
        block_duration_s += fragment.duration_s

        if block_duration_s >= threshold_seconds or not blocks:
            blocks.append(Block(start_offset_ms=fragment.offset_ms))
            block_duration_s = 0.0

        blocks[-1].fragments.append(fragment)

    return blocks


def render_blocks(blocks: Iterable[Block]) -> List[str]:
    """Flatten blocks into output lines: header, then one line per fragment."""
    lines: List[str] = []
    for block in blocks:
        lines.append(format_timestamp(block.start_offset_ms))
        lines.extend(block.texts)
    return lines


def format_transcript(
    fragments: Iterable[TimedFragment],
    threshold_seconds: float,
) -> List[str]:
    """Produce the timestamped output lines for a transcript.

    WHY: This is the operation every surface (CLI, HTTP, formatters)
    ultimately needs — a list of strings ready to insert into a document,
    one string per line.

    Args:
        fragments: Fragments in transcript order. May be empty.
        threshold_seconds: Block threshold in seconds.

    Returns:
        Header lines interleaved with fragment text. An empty result
        means there is nothing to insert.
    """
    return render_blocks(chunk_fragments(fragments, threshold_seconds))


class TranscriptChunker:
    """Chunker bound to one threshold.

    WHY: Callers that format many transcripts with the same settings
    (the HTTP app, formatters) hold a configured instance instead of
    threading the threshold through every call.
    """

    def __init__(self, threshold_seconds: float) -> None:
        self.threshold_seconds = threshold_seconds

    def blocks(self, fragments: Iterable[TimedFragment]) -> List[Block]:
        return chunk_fragments(fragments, self.threshold_seconds)

    def format(self, fragments: Iterable[TimedFragment]) -> List[str]:
        return format_transcript(fragments, self.threshold_seconds)
