"""FastAPI application exposing the chunker over HTTP.

WHY: Clients that cannot import the package (editor plugins, n8n, curl)
need to submit fragments and get a timestamped document back. FastAPI
provides request validation and automatic OpenAPI documentation.

HOW: A single FastAPI app exposes four endpoints grouped by tags. The
chunker is pure and fast, so requests are answered inline — there is no
job store or background processing.

RULES:
- All endpoints have OpenAPI descriptions on every response
- Error responses use a consistent ErrorResponse schema
- Request settings override the environment settings per call only;
  nothing is stored between requests
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException

from transcript_chunker import __version__
from transcript_chunker.config import ChunkerSettings, load_settings, log_level
from transcript_chunker.core.chunker import chunk_fragments, format_timestamp
from transcript_chunker.formatters import FORMATTERS
from transcript_chunker.server.models import (
    BlockModel,
    BlocksResponse,
    ErrorResponse,
    FormatInfo,
    FormatRequest,
    FormatResponse,
    HealthResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Transcript Chunker API",
    description=(
        "REST API that groups timed transcript fragments into blocks and "
        "prefixes each block with a compact M:SS timestamp. Submit fragments, "
        "get back lines ready to insert into a document."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _settings_for(request: FormatRequest) -> ChunkerSettings:
    """Merge per-request overrides onto the environment settings."""
    try:
        return load_settings(
            threshold_seconds=request.threshold_seconds,
            timestamp_interval=request.timestamp_interval,
        )
    except ValueError as exc:
        logger.exception("Invalid server configuration")
        raise HTTPException(status_code=500, detail=str(exc))


# ---------------------------------------------------------------------------
# Endpoints: Transcripts
# ---------------------------------------------------------------------------


@app.post(
    "/transcripts/format",
    response_model=FormatResponse,
    tags=["transcripts"],
    summary="Format a transcript",
    description=(
        "Group fragments into timestamped blocks and render them with the "
        "selected formatter. An empty fragment list returns empty lines."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Unknown output format"},
    },
)
async def format_transcript_endpoint(request: FormatRequest) -> FormatResponse:
    if request.output_format not in FORMATTERS:
        available = ", ".join(sorted(FORMATTERS.keys()))
        raise HTTPException(
            status_code=400,
            detail="Unknown output format '{}'. Available: {}".format(
                request.output_format, available
            ),
        )

    settings = _settings_for(request)
    fragments = [f.to_fragment() for f in request.fragments]
    formatter = FORMATTERS[request.output_format]()
    output = formatter.format(fragments, settings)[0]

    logger.info(
        "Formatted %d fragments as %s (threshold %.1fs)",
        len(fragments), request.output_format, settings.threshold_seconds,
    )
    return FormatResponse(
        format=request.output_format,
        lines=output.lines,
        content=output.content,
        media_type=output.media_type,
        block_count=output.block_count,
        fragment_count=len(fragments),
    )


@app.post(
    "/transcripts/blocks",
    response_model=BlocksResponse,
    tags=["transcripts"],
    summary="Chunk a transcript into blocks",
    description="Return the block structure (header, start offset, texts) without rendering.",
)
async def chunk_transcript_endpoint(request: FormatRequest) -> BlocksResponse:
    settings = _settings_for(request)
    fragments = [f.to_fragment() for f in request.fragments]
    blocks = chunk_fragments(fragments, settings.threshold_seconds)
    return BlocksResponse(
        threshold_seconds=settings.threshold_seconds,
        blocks=[
            BlockModel(
                header=format_timestamp(block.start_offset_ms),
                start_offset_ms=block.start_offset_ms,
                texts=block.texts,
            )
            for block in blocks
        ],
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available output formats",
    description="Returns all supported output formats with their identifiers, names, and file suffixes.",
)
async def list_formats() -> List[FormatInfo]:
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        result.append(FormatInfo(key=key, name=formatter.name, suffix=formatter.suffix))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the transcript-chunker-api console script."""
    import uvicorn

    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.info("Starting Transcript Chunker API v%s", __version__)
    uvicorn.run(app, host="0.0.0.0", port=8000)
