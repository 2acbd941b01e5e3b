"""Output formatter registry — pluggable format hub.

WHY: The CLI and HTTP layers need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["markdown"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API requests)
- Values are BaseFormatter subclasses (not instances)
- DEFAULT_FORMAT is the chunker's own verbatim line output
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from transcript_chunker.formatters.line_interval import LineIntervalFormatter
from transcript_chunker.formatters.markdown import MarkdownFormatter
from transcript_chunker.formatters.timestamped_text import TimestampedTextFormatter

if TYPE_CHECKING:
    from transcript_chunker.formatters.base import BaseFormatter

DEFAULT_FORMAT = "timestamped_text"

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "timestamped_text": TimestampedTextFormatter,
    "markdown": MarkdownFormatter,
    "line_interval": LineIntervalFormatter,
}
