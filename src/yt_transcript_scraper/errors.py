"""
errors.py — Custom exception hierarchy for yt-transcript-scraper.

Every exception carries an `http_status` attribute so the FastAPI error
handler can translate library-level errors directly into the correct HTTP
response code without a separate mapping table.

Each pipeline stage raises the most specific error it can determine from
its own input; nothing is retried or recovered inside the library.

Hierarchy:
    TranscriptError (base, 500; 502 for wrapped transport failures)
    ├── IdentifierNotFound (400)
    ├── TooManyRequests (429)
    ├── VideoUnavailable (404)
    ├── CaptionsDisabled (404)
    ├── NoTranscriptsAvailable (404)
    └── LanguageNotAvailable (400)
"""

from __future__ import annotations

# Prefix shared by every error message so log lines are easy to grep.
_MESSAGE_PREFIX = "[YoutubeTranscript] "


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class TranscriptError(Exception):
    """
    Root exception for all transcript-related errors.

    Attributes:
        message:     Human-readable description of what went wrong.
        http_status: Suggested HTTP status code for the API layer.
    """

    def __init__(self, message: str, http_status: int = 500) -> None:
        message = f"{_MESSAGE_PREFIX}{message}"
        super().__init__(message)
        self.message = message
        self.http_status = http_status


# ---------------------------------------------------------------------------
# Stage-specific error cases
# ---------------------------------------------------------------------------

class IdentifierNotFound(TranscriptError):
    """
    Raised when the input is neither an 11-character ID nor a recognised
    YouTube URL.

    `video_id` holds the raw input so callers can echo it back.
    Maps to HTTP 400.
    """

    def __init__(self, video_id: str) -> None:
        super().__init__(
            message="Impossible to retrieve Youtube video ID.",
            http_status=400,
        )
        self.video_id = video_id


class TooManyRequests(TranscriptError):
    """
    Raised when the watch page is a reCAPTCHA challenge instead of a video.

    YouTube serves this to IPs it considers abusive.  Retrying right away
    won't help.  Maps to HTTP 429.
    """

    def __init__(self) -> None:
        super().__init__(
            message=(
                "YouTube is receiving too many requests from this IP and now "
                "requires solving a captcha to continue"
            ),
            http_status=429,
        )


class VideoUnavailable(TranscriptError):
    """
    Raised when the watch page has no playability status at all.

    Possible causes: the video was removed, is private, or is blocked in
    the requester's region.  Maps to HTTP 404.
    """

    def __init__(self, video_id: str) -> None:
        super().__init__(
            message=f"The video is no longer available ({video_id})",
            http_status=404,
        )
        self.video_id = video_id


class CaptionsDisabled(TranscriptError):
    """
    Raised when the video plays but carries no captions object, or the
    embedded captions object can't be decoded.

    Maps to HTTP 404.
    """

    def __init__(self, video_id: str) -> None:
        super().__init__(
            message=f"Transcript is disabled on this video ({video_id})",
            http_status=404,
        )
        self.video_id = video_id


class NoTranscriptsAvailable(TranscriptError):
    """
    Raised when the captions object lists no usable tracks, or when the
    chosen track's timed-text payload can't be downloaded.

    Maps to HTTP 404.
    """

    def __init__(self, video_id: str) -> None:
        super().__init__(
            message=f"No transcripts are available for this video ({video_id})",
            http_status=404,
        )
        self.video_id = video_id


class LanguageNotAvailable(TranscriptError):
    """
    Raised when the video has caption tracks, but none in the requested
    language.

    The match is exact and case-sensitive: asking for "en" won't pick up an
    "en-GB" track.  Maps to HTTP 400 because it's a client-side request
    issue: the resource exists, just not in that language.
    """

    def __init__(self, lang: str, available_langs: list[str], video_id: str) -> None:
        langs = ", ".join(available_langs)
        super().__init__(
            message=(
                f"No transcripts are available in {lang} this video ({video_id}). "
                f"Available languages: {langs}"
            ),
            http_status=400,
        )
        self.lang = lang
        self.available_langs = available_langs
        self.video_id = video_id
