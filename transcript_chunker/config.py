"""Configuration defaults, settings record, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. The chunker itself never reads configuration —
callers build a ChunkerSettings value and pass it in, which keeps the
core pure and testable.

HOW: python-dotenv loads the .env file on import. Defaults are
module-level constants. load_settings() reads the environment at call
time and returns a ChunkerSettings record.

RULES:
- TRANSCRIPT_THRESHOLD_SECONDS: seconds of speech per block (default 10)
- TRANSCRIPT_TIMESTAMP_INTERVAL: fragments per header for the
  line_interval formatter (default 5); non-integers fall back to 5
- TRANSCRIPT_LANG / TRANSCRIPT_COUNTRY: preferred transcript language,
  kept for whatever fetches transcripts upstream
- Settings are never stored in module-level mutable state
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Optional, Union

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_THRESHOLD_SECONDS = 10.0
"""Emit a header roughly every 10 seconds of accumulated speech."""

DEFAULT_TIMESTAMP_INTERVAL = 5
DEFAULT_LANG = "en"
DEFAULT_COUNTRY = "EN"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class ChunkerSettings:
    """Settings record passed explicitly into formatting calls.

    RULES:
    - threshold_seconds drives the duration-based chunker
    - timestamp_interval counts fragments, not seconds; only the
      line_interval formatter uses it
    - lang / country are not used by the chunker
    """

    threshold_seconds: float = DEFAULT_THRESHOLD_SECONDS
    timestamp_interval: int = DEFAULT_TIMESTAMP_INTERVAL
    lang: str = DEFAULT_LANG
    country: str = DEFAULT_COUNTRY


def parse_threshold(value: Union[str, float, int, None]) -> float:
    """Parse a threshold in seconds.

    Zero and negative values are accepted; they make every fragment its
    own block.

    Raises:
        ValueError: If the value is not a finite number ("nan" and "inf"
            included).
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return DEFAULT_THRESHOLD_SECONDS
    try:
        threshold = float(value)
    except (TypeError, ValueError):
        threshold = math.nan
    if not math.isfinite(threshold):
        raise ValueError(
            "Threshold must be a finite number of seconds, got {!r}".format(value)
        )
    return threshold


def parse_timestamp_interval(value: Union[str, int, None]) -> int:
    """Parse the per-line timestamp interval.

    Mirrors a settings text field: anything that does not parse as an
    integer falls back to the default instead of raising.
    """
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return DEFAULT_TIMESTAMP_INTERVAL


def load_settings(
    threshold_seconds: Optional[float] = None,
    timestamp_interval: Optional[int] = None,
) -> ChunkerSettings:
    """Build settings from the environment, with explicit overrides.

    Args:
        threshold_seconds: Overrides TRANSCRIPT_THRESHOLD_SECONDS when given.
        timestamp_interval: Overrides TRANSCRIPT_TIMESTAMP_INTERVAL when given.

    Raises:
        ValueError: If the threshold (explicit or TRANSCRIPT_THRESHOLD_SECONDS)
            is not a finite number.
    """
    if threshold_seconds is None:
        threshold_seconds = parse_threshold(os.getenv("TRANSCRIPT_THRESHOLD_SECONDS"))
    else:
        threshold_seconds = parse_threshold(threshold_seconds)
    if timestamp_interval is None:
        timestamp_interval = parse_timestamp_interval(
            os.getenv("TRANSCRIPT_TIMESTAMP_INTERVAL")
        )
    return ChunkerSettings(
        threshold_seconds=threshold_seconds,
        timestamp_interval=timestamp_interval,
        lang=os.getenv("TRANSCRIPT_LANG", DEFAULT_LANG),
        country=os.getenv("TRANSCRIPT_COUNTRY", DEFAULT_COUNTRY),
    )


def log_level() -> str:
    return os.getenv("TRANSCRIPT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
