"""
yt_transcript_scraper — Scrape YouTube video transcripts from the watch page.

Public API:
    fetch_transcript()        One-shot async retrieval (URL or ID → segments).
    TranscriptPipeline        The retrieval stages, each one replaceable.
    resolve_video_id()        Parse a YouTube URL or pass a bare ID through.
    fetch_watch_page()        Download the watch page HTML.
    extract_caption_tracks()  Read the caption tracks out of the page.
    select_track_url()        Pick a track by language.
    fetch_timed_text()        Download a track's timed-text payload.
    parse_timed_text()        Parse the payload into segments.
    extract() / extract_async()  Fetch and format as text, JSON or markdown.

Exception hierarchy (all importable from this package):
    TranscriptError              Base exception; also wraps network failures.
    ├── IdentifierNotFound       Input isn't a video ID or YouTube URL.
    ├── TooManyRequests          YouTube answered with a captcha.
    ├── VideoUnavailable         Video removed, private or region-blocked.
    ├── CaptionsDisabled         Video has no captions object.
    ├── NoTranscriptsAvailable   No usable tracks, or payload download failed.
    └── LanguageNotAvailable     Requested language not offered.

Usage:
    import asyncio
    from yt_transcript_scraper import TranscriptConfig, fetch_transcript

    segments = asyncio.run(
        fetch_transcript("https://youtu.be/dQw4w9WgXcQ", TranscriptConfig(lang="en"))
    )
"""

from yt_transcript_scraper.captions import (
    extract_caption_tracks,
    select_track_url,
)
from yt_transcript_scraper.errors import (
    CaptionsDisabled,
    IdentifierNotFound,
    LanguageNotAvailable,
    NoTranscriptsAvailable,
    TooManyRequests,
    TranscriptError,
    VideoUnavailable,
)
from yt_transcript_scraper.extractor import (
    extract,
    extract_async,
    format_doc,
    format_json,
    format_text,
)
from yt_transcript_scraper.models import (
    CaptionTrack,
    TranscriptConfig,
    TranscriptSegment,
)
from yt_transcript_scraper.pipeline import (
    TranscriptPipeline,
    fetch_transcript,
)
from yt_transcript_scraper.timedtext import parse_timed_text
from yt_transcript_scraper.transport import (
    fetch_timed_text,
    fetch_watch_page,
)
from yt_transcript_scraper.video_id import resolve_video_id

__all__ = [
    "fetch_transcript",
    "TranscriptPipeline",
    "resolve_video_id",
    "fetch_watch_page",
    "extract_caption_tracks",
    "select_track_url",
    "fetch_timed_text",
    "parse_timed_text",
    "extract",
    "extract_async",
    "format_text",
    "format_json",
    "format_doc",
    "CaptionTrack",
    "TranscriptConfig",
    "TranscriptSegment",
    "TranscriptError",
    "IdentifierNotFound",
    "TooManyRequests",
    "VideoUnavailable",
    "CaptionsDisabled",
    "NoTranscriptsAvailable",
    "LanguageNotAvailable",
]
