"""
pipeline.py — Drive the retrieval stages in order.

    resolve_video_id ─► fetch_page ─► extract_tracks ─► select_track
                                                           │
                         segments ◄─ parse_payload ◄─ fetch_payload

TranscriptPipeline holds one callable per stage.  The defaults scrape
YouTube over HTTP; any stage can be swapped for another callable with the
same signature, e.g. to route requests through a different HTTP stack:

    pipeline = TranscriptPipeline(fetch_page=my_page_fetcher)
    segments = await pipeline.fetch("https://youtu.be/OAROO-kM8m8")

Stages pass their results to each other as arguments, so one pipeline
instance can serve any number of concurrent retrievals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from yt_transcript_scraper.captions import extract_caption_tracks, select_track_url
from yt_transcript_scraper.models import CaptionTrack, TranscriptConfig, TranscriptSegment
from yt_transcript_scraper.timedtext import parse_timed_text
from yt_transcript_scraper.transport import fetch_timed_text, fetch_watch_page
from yt_transcript_scraper.video_id import resolve_video_id

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Stage signatures
# ---------------------------------------------------------------------------

PageFetcher = Callable[[str, TranscriptConfig], Awaitable[str]]
TrackExtractor = Callable[[str, str], list[CaptionTrack]]
TrackSelector = Callable[[list[CaptionTrack], TranscriptConfig, str], str]
PayloadFetcher = Callable[[str, str, TranscriptConfig], Awaitable[str]]
PayloadParser = Callable[[str, list[CaptionTrack], TranscriptConfig], list[TranscriptSegment]]


@dataclass(frozen=True)
class TranscriptPipeline:
    """
    The retrieval stages, composed in a fixed order.

    Attributes:
        fetch_page:     (video_id, config) -> watch page HTML.
        extract_tracks: (html, video_id) -> caption tracks.
        select_track:   (tracks, config, video_id) -> timed-text URL.
        fetch_payload:  (url, video_id, config) -> timed-text payload.
        parse_payload:  (payload, tracks, config) -> transcript segments.
    """
    fetch_page: PageFetcher = fetch_watch_page
    extract_tracks: TrackExtractor = extract_caption_tracks
    select_track: TrackSelector = select_track_url
    fetch_payload: PayloadFetcher = fetch_timed_text
    parse_payload: PayloadParser = parse_timed_text

    async def list_tracks(
        self,
        url_or_id: str,
        config: TranscriptConfig | None = None,
    ) -> list[CaptionTrack]:
        """
        Resolve the video and return the caption tracks its page lists.

        Runs only the first three stages; no timed text is downloaded.
        """
        config = config or TranscriptConfig()
        video_id = resolve_video_id(url_or_id)
        html = await self.fetch_page(video_id, config)
        return self.extract_tracks(html, video_id)

    async def run(self, video_id: str, config: TranscriptConfig) -> list[TranscriptSegment]:
        """
        Fetch and parse the transcript of an already-resolved video ID.

        Raises:
            TranscriptError: (or subclass) from whichever stage failed.
        """
        html = await self.fetch_page(video_id, config)
        tracks = self.extract_tracks(html, video_id)
        url = self.select_track(tracks, config, video_id)
        payload = await self.fetch_payload(url, video_id, config)
        segments = self.parse_payload(payload, tracks, config)
        logger.debug("Parsed %d segment(s) for %s", len(segments), video_id)
        return segments

    async def fetch(
        self,
        url_or_id: str,
        config: TranscriptConfig | None = None,
    ) -> list[TranscriptSegment]:
        """Resolve a URL or ID, then run the full pipeline."""
        video_id = resolve_video_id(url_or_id)
        return await self.run(video_id, config or TranscriptConfig())


async def fetch_transcript(
    url_or_id: str,
    config: TranscriptConfig | None = None,
) -> list[TranscriptSegment]:
    """
    Fetch a video's transcript with the default YouTube pipeline.

    Args:
        url_or_id: A YouTube URL or an 11-character video ID.
        config:    Optional retrieval options (e.g. TranscriptConfig(lang="fr")).

    Returns:
        The transcript segments in the order they appear in the captions.

    Raises:
        TranscriptError: (or subclass) on any retrieval failure.
    """
    return await TranscriptPipeline().fetch(url_or_id, config)
