"""
captions.py — Read the caption manifest out of a watch page and pick a track.

The watch page embeds the player configuration as a big JSON blob.  Inside
it, the fragment we care about looks like:

    "captions":{"playerCaptionsTracklistRenderer":{"captionTracks":[
        {"baseUrl":"https://www.youtube.com/api/timedtext?...",
         "name":{"simpleText":"English"},"languageCode":"en","kind":"asr"},
        ...
    ], ...}},"videoDetails":{...

Only the text between `"captions":` and `,"videoDetails` is decoded as JSON.
"""

from __future__ import annotations

import json
import logging

from yt_transcript_scraper.errors import (
    CaptionsDisabled,
    LanguageNotAvailable,
    NoTranscriptsAvailable,
    TooManyRequests,
    TranscriptError,
    VideoUnavailable,
)
from yt_transcript_scraper.models import CaptionTrack, TranscriptConfig

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page markers
# ---------------------------------------------------------------------------

_CAPTIONS_MARKER = '"captions":'
_VIDEO_DETAILS_MARKER = ',"videoDetails'
_RECAPTCHA_MARKER = 'class="g-recaptcha"'
_PLAYABILITY_MARKER = '"playabilityStatus":'


# ---------------------------------------------------------------------------
# Manifest extraction
# ---------------------------------------------------------------------------

def _missing_captions_error(html: str, video_id: str) -> TranscriptError:
    """Pick the error explaining why the page has no captions marker."""
    if _RECAPTCHA_MARKER in html:
        return TooManyRequests()
    if _PLAYABILITY_MARKER not in html:
        return VideoUnavailable(video_id)
    return CaptionsDisabled(video_id)


def _track_from_raw(raw: object) -> CaptionTrack | None:
    """
    Build a CaptionTrack from one `captionTracks` entry.

    Returns None when the entry doesn't have the shape we need (a string
    languageCode and baseUrl).
    """
    if not isinstance(raw, dict):
        return None
    language_code = raw.get("languageCode")
    base_url = raw.get("baseUrl")
    if not isinstance(language_code, str) or not isinstance(base_url, str):
        return None

    name = raw.get("name")
    if isinstance(name, dict):
        name = name.get("simpleText")
    kind = raw.get("kind")

    return CaptionTrack(
        language_code=language_code,
        base_url=base_url,
        kind=kind if isinstance(kind, str) else None,
        name=name if isinstance(name, str) else None,
    )


def extract_caption_tracks(html: str, video_id: str) -> list[CaptionTrack]:
    """
    Find the caption tracks listed in a watch page.

    Args:
        html:     Full HTML of the watch page.
        video_id: The video ID, used in error messages only.

    Returns:
        The caption tracks in the order the page lists them (never empty).

    Raises:
        TooManyRequests:        The page is a reCAPTCHA challenge.
        VideoUnavailable:       The page has no playability status.
        CaptionsDisabled:       No captions object, or it isn't valid JSON.
        NoTranscriptsAvailable: The captions object lists no usable tracks.
    """
    _, marker, after = html.partition(_CAPTIONS_MARKER)
    if not marker:
        raise _missing_captions_error(html, video_id)

    fragment = after.split(_VIDEO_DETAILS_MARKER)[0].replace("\n", "")
    try:
        captions = json.loads(fragment)
    except json.JSONDecodeError:
        logger.info("Captions fragment for %s is not valid JSON", video_id)
        raise CaptionsDisabled(video_id)

    renderer = captions.get("playerCaptionsTracklistRenderer") if isinstance(captions, dict) else None
    if not isinstance(renderer, dict):
        raise CaptionsDisabled(video_id)

    if "captionTracks" not in renderer:
        raise NoTranscriptsAvailable(video_id)

    raw_tracks = renderer["captionTracks"]
    if not isinstance(raw_tracks, list) or not raw_tracks:
        raise NoTranscriptsAvailable(video_id)

    tracks: list[CaptionTrack] = []
    for raw in raw_tracks:
        track = _track_from_raw(raw)
        if track is None:
            logger.warning("Malformed caption track entry for %s: %r", video_id, raw)
            raise NoTranscriptsAvailable(video_id)
        tracks.append(track)

    logger.debug(
        "Found %d caption track(s) for %s: %s",
        len(tracks), video_id, ", ".join(t.language_code for t in tracks),
    )
    return tracks


# ---------------------------------------------------------------------------
# Track selection
# ---------------------------------------------------------------------------

def select_track_url(
    tracks: list[CaptionTrack],
    config: TranscriptConfig,
    video_id: str,
) -> str:
    """
    Pick the timed-text URL to download.

    With a language preference, the first track whose language code equals
    it exactly wins.  Without one, the first track is used, since YouTube
    lists its preferred track first.

    Args:
        tracks:   Caption tracks as returned by extract_caption_tracks().
        config:   Retrieval options (only `lang` is read).
        video_id: The video ID, used in error messages only.

    Returns:
        The selected track's base URL.

    Raises:
        LanguageNotAvailable: `config.lang` is set and no track matches it.
    """
    if not config.lang:
        return tracks[0].base_url

    for track in tracks:
        if track.language_code == config.lang:
            return track.base_url

    raise LanguageNotAvailable(
        config.lang,
        [track.language_code for track in tracks],
        video_id,
    )
