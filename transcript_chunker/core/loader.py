"""Fragment JSON loading and schema validation.

WHY: Fragments arrive from outside the package — a JSON file saved from
the transcript source, stdin, or an HTTP body. Malformed entries (missing
text, string offsets) must be rejected with a message that points at the
offending entry, before they reach the chunker.

HOW: The decoded JSON is validated against fragments_schema.json with
jsonschema. The best-matching validation error is turned into a
TranscriptFormatError carrying its JSON path. Valid entries become
TimedFragment objects via TimedFragment.from_dict.

RULES:
- Accepts a bare array of fragments, or an object with a "lines" array
- Each fragment needs "text" plus offset/duration in milliseconds
  ("offset"/"duration" or "offset_ms"/"duration_ms")
- Ordering and non-negative values are NOT checked — they are caller
  preconditions of the chunker
- Files are read as UTF-8
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema
from jsonschema.exceptions import best_match

from transcript_chunker.core.ir import TimedFragment

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "fragments_schema.json"

_schema_cache: Optional[Dict[str, Any]] = None


class TranscriptFormatError(ValueError):
    """Raised when a fragment document does not match the expected shape.

    Attributes:
        path: JSON path of the first offending value, e.g. ``"$[2].text"``.
    """

    def __init__(self, message: str, path: str = "$") -> None:
        self.path = path
        super().__init__("{} (at {})".format(message, path))


def load_schema() -> Dict[str, Any]:
    """Load and cache the fragment JSON schema."""
    global _schema_cache
    if _schema_cache is None:
        with open(SCHEMA_PATH, encoding="utf-8") as f:
            _schema_cache = json.load(f)
    return _schema_cache


def _json_path(error: jsonschema.ValidationError, root: str) -> str:
    path = root
    for part in error.absolute_path:
        if isinstance(part, int):
            path += "[{}]".format(part)
        else:
            path += ".{}".format(part)
    return path


def load_fragments(data: Any) -> List[TimedFragment]:
    """Validate a decoded JSON value and build fragments from it.

    Args:
        data: The decoded JSON — a list of fragment dicts, or a dict
              with a ``lines`` list.

    Returns:
        Fragments in document order.

    Raises:
        TranscriptFormatError: If the value does not match the schema.
    """
    if isinstance(data, dict) and "lines" in data:
        entries, root = data["lines"], "$.lines"
    else:
        entries, root = data, "$"

    validator = jsonschema.Draft7Validator(load_schema())
    error = best_match(validator.iter_errors(entries))
    if error is not None:
        raise TranscriptFormatError(error.message, _json_path(error, root))

    fragments = [TimedFragment.from_dict(entry) for entry in entries]
    logger.debug("Loaded %d fragments", len(fragments))
    return fragments


def loads_fragments(text: str) -> List[TimedFragment]:
    """Parse fragment JSON from a string.

    Raises:
        TranscriptFormatError: If the text is not JSON or fails validation.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TranscriptFormatError(
            "Invalid JSON: {}".format(exc.msg),
            "line {} column {}".format(exc.lineno, exc.colno),
        ) from exc
    return load_fragments(data)


def load_fragments_file(path: Union[str, Path]) -> List[TimedFragment]:
    """Read and validate a fragment JSON file.

    Raises:
        OSError: If the file cannot be read.
        TranscriptFormatError: If the content is not valid fragment JSON.
    """
    text = Path(path).read_text(encoding="utf-8")
    return loads_fragments(text)
