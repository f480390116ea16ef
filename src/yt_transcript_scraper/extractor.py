"""
extractor.py — High-level helpers on top of the retrieval pipeline.

This is what the CLI and the REST API call.  It exposes:

    1. Formatting output            → format_text(), format_json(), format_doc()
    2. One-call convenience         → extract_async(), extract()

Only single-video extraction is supported (no playlists).
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

from yt_transcript_scraper.models import TranscriptConfig, TranscriptSegment
from yt_transcript_scraper.pipeline import fetch_transcript
from yt_transcript_scraper.video_id import resolve_video_id

# Output formats accepted by extract() / extract_async().
FORMATS = ("text", "json", "doc")


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def format_text(segments: Iterable[TranscriptSegment]) -> str:
    """
    Convert transcript segments into plain text, one line per segment.

    Useful for feeding into summarisers, search indexes, or reading directly.
    """
    return "\n".join(segment.text for segment in segments)


def format_json(segments: list[TranscriptSegment], video_id: str) -> dict:
    """
    Build a structured JSON-serialisable dict from transcript segments.

    Args:
        segments: Transcript segments, in order.
        video_id: The video ID (included in the output for traceability).

    Returns:
        A dict with keys: video_id, segment_count, segments.
        Each segment has: text, duration, offset, lang.
    """
    return {
        "video_id": video_id,
        "segment_count": len(segments),
        "segments": [segment.to_dict() for segment in segments],
    }


# Paragraph boundary interval for the "doc" format.  A new paragraph starts
# once a segment begins this many seconds after the paragraph's first one.
_DOC_PARAGRAPH_INTERVAL_SECS = 30


def _seconds_to_mmss(seconds: float) -> str:
    """
    Convert a float timestamp (in seconds) to a MM:SS string.

    Values above 59:59 keep counting minutes (e.g. 3661.0 → "61:01").
    """
    total = int(seconds)
    mins, secs = divmod(total, 60)
    return f"{mins:02d}:{secs:02d}"


def format_doc(segments: Iterable[TranscriptSegment]) -> str:
    """
    Convert transcript segments into a readable markdown document.

    Segments are joined with spaces into flowing paragraphs, with a new
    paragraph starting every ~30 seconds.  Each paragraph is prefixed with
    a bold **[MM:SS]** timestamp marking the start of that time window.
    Paragraphs are separated by blank lines.

    Returns:
        A markdown string, or an empty string if there are no segments.
    """
    paragraphs: list[str] = []
    current_texts: list[str] = []
    paragraph_start: float | None = None

    for segment in segments:
        if paragraph_start is None:
            paragraph_start = segment.offset
            current_texts.append(segment.text)
        elif segment.offset - paragraph_start >= _DOC_PARAGRAPH_INTERVAL_SECS:
            timestamp = _seconds_to_mmss(paragraph_start)
            paragraphs.append(f"**[{timestamp}]** {' '.join(current_texts)}")
            paragraph_start = segment.offset
            current_texts = [segment.text]
        else:
            current_texts.append(segment.text)

    if current_texts and paragraph_start is not None:
        timestamp = _seconds_to_mmss(paragraph_start)
        paragraphs.append(f"**[{timestamp}]** {' '.join(current_texts)}")

    return "\n\n".join(paragraphs)


# ---------------------------------------------------------------------------
# High-level convenience functions (main public API)
# ---------------------------------------------------------------------------

async def extract_async(
    url_or_id: str,
    lang: str | None = None,
    fmt: str = "text",
) -> str | dict:
    """
    One-call interface: resolve URL → fetch transcript → format output.

    Args:
        url_or_id: A YouTube URL or raw video ID.
        lang:      Optional exact caption language code (e.g. "de").
        fmt:       Output format: "text" for plain text, "json" for a dict
                   with timestamps, "doc" for a markdown document with
                   timestamped paragraphs.

    Returns:
        A plain-text string (fmt="text"), a dict (fmt="json"), or a markdown
        string (fmt="doc").

    Raises:
        ValueError:      If fmt is not "text", "json", or "doc".
        TranscriptError: (or subclass) on any extraction failure.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format {fmt!r}; expected 'text', 'json', or 'doc'")

    video_id = resolve_video_id(url_or_id)
    segments = await fetch_transcript(video_id, TranscriptConfig(lang=lang))

    if fmt == "json":
        return format_json(segments, video_id)

    if fmt == "doc":
        return format_doc(segments)

    return format_text(segments)


def extract(
    url_or_id: str,
    lang: str | None = None,
    fmt: str = "text",
) -> str | dict:
    """
    Blocking wrapper around extract_async() for scripts and the CLI.

    Must not be called from inside a running event loop; use
    `await extract_async(...)` there instead.
    """
    return asyncio.run(extract_async(url_or_id, lang=lang, fmt=fmt))
