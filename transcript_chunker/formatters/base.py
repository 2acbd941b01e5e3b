"""Abstract base formatter and output container.

WHY: Every output format consumes the same fragment list but produces
different document content. This base class enforces a consistent
interface so the CLI and HTTP layers can work with any formatter
generically.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list — every current formatter returns one item
- ``suffix`` starts with a hyphen, e.g. ``"-transcript.txt"``
- The caller is responsible for prepending the source filename stem
- Empty fragment input gives empty content, never an error
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence

from transcript_chunker.config import ChunkerSettings
from transcript_chunker.core.ir import TimedFragment


@dataclass
class FormatterOutput:
    """One output document produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-transcript.txt"`` → ``"lecture-transcript.txt"``.
        content: The document text.
        media_type: MIME type for the content, e.g. ``"text/markdown"``.
        lines: The lines the content was built from, without line breaks.
        block_count: Number of timestamp headers in the document.
    """

    suffix: str
    content: str
    media_type: str
    lines: List[str]
    block_count: int = 0


def join_lines(lines: Sequence[str]) -> str:
    """Join output lines into a document, each followed by a line break."""
    return "".join("{}\n".format(line) for line in lines)


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Timestamped Text'."""

    @property
    @abstractmethod
    def suffix(self) -> str:
        """File suffix of the produced document, e.g. '-transcript.txt'."""

    @abstractmethod
    def format(
        self,
        fragments: Sequence[TimedFragment],
        settings: ChunkerSettings,
    ) -> List[FormatterOutput]:
        """Convert fragments into one or more output documents.

        Args:
            fragments: Fragments in transcript order.
            settings: Threshold and interval settings for this call.

        Returns:
            List of FormatterOutput objects.
        """
