"""
api.py — FastAPI REST API for yt-transcript-scraper.

Endpoints:
    GET /transcript/{video_id}   — Fetch a transcript (text, JSON or markdown).
    GET /tracks/{video_id}       — List the caption tracks a video offers.
    GET /health                  — Simple health-check for load balancers / monitoring.

Run with:
    uvicorn yt_transcript_scraper.api:app

The global exception handler catches any TranscriptError and converts it to
the appropriate HTTP response using the status code stored on the exception.
"""

from __future__ import annotations

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from yt_transcript_scraper.errors import TranscriptError
from yt_transcript_scraper.extractor import extract_async
from yt_transcript_scraper.pipeline import TranscriptPipeline

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

app = FastAPI(
    title="YouTube Transcript Scraper API",
    description="Extract YouTube video transcripts from the public watch page "
                "as plain text, structured JSON or a markdown document.",
    version="0.1.0",
)


# ---------------------------------------------------------------------------
# Global error handler
# ---------------------------------------------------------------------------

@app.exception_handler(TranscriptError)
async def transcript_error_handler(request: Request, exc: TranscriptError) -> JSONResponse:
    """
    Translate any TranscriptError (or subclass) into an HTTP error response.

    The http_status on the exception drives the response code, so endpoint
    code just raises the right library exception.
    """
    return JSONResponse(
        status_code=exc.http_status,
        content={"error": exc.message},
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

# response_model=None is required because we return different Response subclasses
# (PlainTextResponse or JSONResponse) depending on the format param.
@app.get("/transcript/{video_id}", response_model=None)
async def get_transcript(
    video_id: str,
    format: str = Query(
        default="text",
        description="Output format: 'text' for plain transcript, 'json' for structured data with timestamps, 'doc' for readable markdown document.",
        pattern="^(text|json|doc)$",
    ),
    lang: str = Query(
        default="",
        description="Exact caption language code (e.g. 'fr'). Empty selects the video's first track.",
    ),
) -> PlainTextResponse | JSONResponse:
    """
    Fetch the transcript for a single YouTube video.

    **video_id** is the 11-character YouTube video identifier
    (e.g. `dQw4w9WgXcQ`).
    """
    result = await extract_async(video_id, lang=lang or None, fmt=format)

    if isinstance(result, dict):
        return JSONResponse(content=result)
    return PlainTextResponse(content=result)


@app.get("/tracks/{video_id}")
async def list_tracks(video_id: str) -> JSONResponse:
    """
    List the caption tracks available for a video.

    Track URLs are signed and short-lived, so they are not included.
    """
    track_list = await TranscriptPipeline().list_tracks(video_id)

    return JSONResponse(content={
        "video_id": video_id,
        "tracks": [
            {
                "language_code": t.language_code,
                "name": t.name,
                "kind": t.kind,
                "is_generated": t.is_generated,
            }
            for t in track_list
        ],
    })


@app.get("/health")
async def health() -> dict:
    """
    Minimal health-check endpoint.

    Returns HTTP 200 with {"status": "ok"}.
    """
    return {"status": "ok"}
