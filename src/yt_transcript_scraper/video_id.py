"""
video_id.py — Turn user input into a YouTube video ID.

A single regex covers every URL shape we accept:
    - https://www.youtube.com/watch?v=VIDEO_ID   (v= anywhere in the query)
    - https://www.youtube.com/embed/VIDEO_ID
    - https://www.youtube.com/v/VIDEO_ID
    - https://www.youtube.com/e/VIDEO_ID
    - https://youtu.be/VIDEO_ID
The ID is captured as exactly 11 characters that aren't a quote, "&", "?",
"/" or whitespace.  Anything after those 11 characters is ignored, so
".../watch?v=OAROO-kM8m8c" still resolves to "OAROO-kM8m8".
"""

from __future__ import annotations

import logging
import re

from yt_transcript_scraper.errors import IdentifierNotFound

logger = logging.getLogger(__name__)

# YouTube video IDs are always this long.
VIDEO_ID_LENGTH = 11

_YOUTUBE_URL_PATTERN = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)"
    r"([^\"&?/\s]{11})",
    re.IGNORECASE,
)


def resolve_video_id(url_or_id: str) -> str:
    """
    Extract a YouTube video ID from a URL, or pass an 11-char ID through.

    Any 11-character input is accepted as-is without checking its alphabet.
    The input is not stripped, so " dQw4w9WgXcQ" (12 characters) is treated
    as a URL attempt and fails.

    Args:
        url_or_id: A YouTube URL or a raw video ID.

    Returns:
        The 11-character video ID.

    Raises:
        IdentifierNotFound: If the input isn't 11 characters long and no
            supported URL shape matches it.
    """
    if len(url_or_id) == VIDEO_ID_LENGTH:
        return url_or_id

    match = _YOUTUBE_URL_PATTERN.search(url_or_id)
    if match:
        video_id = match.group(1)
        logger.debug("Resolved video ID %s from %r", video_id, url_or_id)
        return video_id

    raise IdentifierNotFound(url_or_id)
