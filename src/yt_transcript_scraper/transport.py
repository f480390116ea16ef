"""
transport.py — The two HTTP requests a retrieval makes.

    fetch_watch_page()  GET https://www.youtube.com/watch?v=VIDEO_ID
    fetch_timed_text()  GET a caption track's base URL

Both send a fixed desktop-browser User-Agent and, when a language is
requested, an Accept-Language header.

Each call opens its own httpx.AsyncClient unless one is passed in.  To share
a connection pool across retrievals, bind a client with functools.partial
and hand the result to TranscriptPipeline:

    async with httpx.AsyncClient() as client:
        pipeline = TranscriptPipeline(
            fetch_page=partial(fetch_watch_page, client=client),
            fetch_payload=partial(fetch_timed_text, client=client),
        )

No timeout or retry policy is applied here beyond httpx's own defaults.
"""

from __future__ import annotations

import logging

import httpx

from yt_transcript_scraper.errors import NoTranscriptsAvailable, TranscriptError
from yt_transcript_scraper.models import TranscriptConfig

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_4) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/85.0.4183.83 Safari/537.36,gzip(gfe)"
)


def build_headers(config: TranscriptConfig) -> dict[str, str]:
    """Headers sent with every request for this retrieval."""
    headers = {"User-Agent": USER_AGENT}
    if config.lang:
        headers["Accept-Language"] = config.lang
    return headers


async def _get(
    url: str,
    config: TranscriptConfig,
    client: httpx.AsyncClient | None,
) -> httpx.Response:
    """
    GET a URL with the retrieval's headers.

    Transport-level failures (DNS, connection refused, broken streams) are
    wrapped in TranscriptError with HTTP 502 so callers only need to catch
    our hierarchy.  Redirects are followed, including on a shared client.
    HTTP error statuses are NOT raised here.
    """
    headers = build_headers(config)
    try:
        if client is not None:
            return await client.get(url, headers=headers, follow_redirects=True)
        async with httpx.AsyncClient(follow_redirects=True) as own_client:
            return await own_client.get(url, headers=headers)
    except httpx.HTTPError as exc:
        raise TranscriptError(f"Request to {url} failed: {exc}", http_status=502) from exc


async def fetch_watch_page(
    video_id: str,
    config: TranscriptConfig,
    *,
    client: httpx.AsyncClient | None = None,
) -> str:
    """
    Download the watch page HTML for a video.

    The body is returned whatever the status code; extract_caption_tracks()
    works out what went wrong from its contents.

    Args:
        video_id: The 11-character video ID.
        config:   Retrieval options (drives Accept-Language).
        client:   Optional shared httpx client.

    Returns:
        The page body as text.

    Raises:
        TranscriptError: On transport failure (http_status 502).
    """
    url = WATCH_URL.format(video_id=video_id)
    logger.debug("Fetching watch page %s", url)
    response = await _get(url, config, client)
    logger.debug("Watch page for %s returned HTTP %d", video_id, response.status_code)
    return response.text


async def fetch_timed_text(
    url: str,
    video_id: str,
    config: TranscriptConfig,
    *,
    client: httpx.AsyncClient | None = None,
) -> str:
    """
    Download a caption track's timed-text payload.

    Args:
        url:      The track's base URL, used verbatim.
        video_id: The video ID, used in error messages only.
        config:   Retrieval options (drives Accept-Language).
        client:   Optional shared httpx client.

    Returns:
        The payload as text.

    Raises:
        NoTranscriptsAvailable: The server answered with a non-2xx status.
        TranscriptError:        On transport failure (http_status 502).
    """
    logger.debug("Fetching timed text for %s", video_id)
    response = await _get(url, config, client)
    if not response.is_success:
        logger.info(
            "Timed text for %s returned HTTP %d", video_id, response.status_code,
        )
        raise NoTranscriptsAvailable(video_id)
    return response.text
