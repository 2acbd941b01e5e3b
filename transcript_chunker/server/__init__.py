"""HTTP API for the Transcript Chunker.

WHY: Editors, note-taking plugins and automation tools want to send a
fragment list over HTTP and get a formatted document back, without
installing the package locally.

HOW: app.py defines the FastAPI application; models.py holds the
pydantic request/response schemas.
"""
