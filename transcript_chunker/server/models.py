"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: Each endpoint pair (request + response) has its own model. All
models include Field descriptions for rich OpenAPI docs.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Fragment fields use the transcript source names: text, offset, duration;
  offset_ms / duration_ms are accepted too, as in the fragment loader
- Offsets and durations are milliseconds; ordering is not validated
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import AliasChoices, BaseModel, Field

from transcript_chunker.core.ir import TimedFragment
from transcript_chunker.formatters import DEFAULT_FORMAT


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class FragmentModel(BaseModel):
    """One timed transcript fragment."""

    text: str = Field(min_length=1, description="Fragment text, emitted verbatim.")
    offset: Union[int, float] = Field(
        validation_alias=AliasChoices("offset", "offset_ms"),
        description="Start of the fragment relative to the recording, in milliseconds.",
    )
    duration: Union[int, float] = Field(
        validation_alias=AliasChoices("duration", "duration_ms"),
        description="Length of the fragment in milliseconds.",
    )

    def to_fragment(self) -> TimedFragment:
        return TimedFragment(text=self.text, offset_ms=self.offset, duration_ms=self.duration)


class FormatRequest(BaseModel):
    """Fragments plus the settings for one formatting call.

    RULES:
    - fragments may be empty; the result is then empty ("nothing to insert")
    - threshold_seconds / timestamp_interval fall back to server settings
    - output_format defaults to the timestamped_text formatter
    """

    fragments: List[FragmentModel] = Field(
        description="Fragments in transcript order (non-decreasing offset).",
    )
    threshold_seconds: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        description="Seconds of speech per block. Values <= 0 give one block per fragment.",
    )
    timestamp_interval: Optional[int] = Field(
        default=None,
        description="Fragments per header, used only by the line_interval format.",
    )
    output_format: str = Field(
        default=DEFAULT_FORMAT,
        description="Formatter key. See GET /formats.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "fragments": [
                    {"text": "Hello", "offset": 0, "duration": 2000},
                    {"text": "world", "offset": 2000, "duration": 9000},
                ],
                "threshold_seconds": 10,
                "output_format": "timestamped_text",
            }
        ]
    }}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class FormatResponse(BaseModel):
    """A formatted transcript document."""

    format: str = Field(description="Formatter key used.")
    lines: List[str] = Field(description="Output lines, without line breaks.")
    content: str = Field(description="The document: each line followed by a line break.")
    media_type: str = Field(description="MIME type of the content.")
    block_count: int = Field(description="Number of timestamp headers in the document.")
    fragment_count: int = Field(description="Number of input fragments.")


class BlockModel(BaseModel):
    """One block of fragments under a timestamp header."""

    header: str = Field(description="Timestamp label, e.g. '61:05'.")
    start_offset_ms: Union[int, float] = Field(description="Offset of the block's first fragment.")
    texts: List[str] = Field(description="Fragment texts in order.")


class BlocksResponse(BaseModel):
    """Block structure of a transcript."""

    threshold_seconds: float = Field(description="Threshold used for chunking.")
    blocks: List[BlockModel] = Field(description="Blocks in transcript order.")


class FormatInfo(BaseModel):
    """Description of an available output format."""

    key: str = Field(description="Format identifier used in API requests.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix produced (e.g. '-transcript.txt').")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
