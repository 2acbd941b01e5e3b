"""Intermediate representation dataclasses for timed transcripts.

WHY: Transcript sources return a flat list of caption fragments, each a
short piece of text with a start offset and a duration. The chunker,
the formatters, the CLI and the HTTP API all need the same typed view
of that list, plus the derived grouping into blocks.

HOW: Two dataclasses:
  TimedFragment — one fragment of transcript text with timing
  Block         — a contiguous run of fragments under one header

RULES:
- TimedFragment is immutable (frozen) — the chunker never rewrites input
- Times are kept in milliseconds as supplied; seconds are derived
- offset_ms is expected to be non-decreasing across a transcript, but
  nothing here verifies it
- Blocks exist only for the duration of one formatting call
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

Number = Union[int, float]


@dataclass(frozen=True)
class TimedFragment:
    """A single timed piece of transcript text.

    WHY: Caption tracks split speech into short fragments of a few
    seconds each. The fragment is the atomic unit every block is built
    from.

    RULES:
    - text: the fragment text, emitted verbatim as one output line
    - offset_ms: start of the fragment relative to the recording
    - duration_ms: length of the fragment
    """

    text: str
    offset_ms: Number
    duration_ms: Number

    @property
    def duration_s(self) -> float:
        return self.duration_ms / 1000

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TimedFragment:
        """Build a fragment from a transcript source entry.

        WHY: The transcript source names its fields ``offset`` and
        ``duration``; hand-written files often use the explicit
        ``offset_ms`` / ``duration_ms`` names. Both are accepted.

        Args:
            data: Dict with ``text`` and either ``offset``/``duration`` or
                  ``offset_ms``/``duration_ms`` (milliseconds).

        Returns:
            A new TimedFragment.
        """
        offset = data["offset_ms"] if "offset_ms" in data else data["offset"]
        duration = data["duration_ms"] if "duration_ms" in data else data["duration"]
        return cls(text=data["text"], offset_ms=offset, duration_ms=duration)


@dataclass
class Block:
    """A contiguous run of fragments grouped under one timestamp header.

    WHY: Readers navigate a transcript by time. Grouping fragments into
    blocks of roughly equal spoken duration gives one timestamp per
    paragraph instead of one per caption.

    RULES:
    - start_offset_ms is the offset of the first fragment
    - fragments is never empty once the chunker has built the block
    - duration_s is the sum of the block's own fragment durations; the
      chunker's threshold check instead counts from the second fragment
      of a block through the first fragment of the next one
    """

    start_offset_ms: Number
    fragments: List[TimedFragment] = field(default_factory=list)

    @property
    def duration_s(self) -> float:
        return sum(f.duration_s for f in self.fragments)

    @property
    def texts(self) -> List[str]:
        return [f.text for f in self.fragments]
