"""
timedtext.py — Parse YouTube's timed-text XML into transcript segments.

A timed-text payload looks like:

    <transcript>
      <text start="0" dur="3.359">[Music]</text>
      <text start="0.359" dur="3">away</text>
      ...
    </transcript>

The payload is scanned with a regex instead of an XML parser, and the text
of each element is kept byte-for-byte: "I&amp;#39;m ready" stays
"I&amp;#39;m ready".
"""

from __future__ import annotations

import re

from yt_transcript_scraper.models import CaptionTrack, TranscriptConfig, TranscriptSegment

_TEXT_ELEMENT_PATTERN = re.compile(r'<text start="([^"]*)" dur="([^"]*)">([^<]*)</text>')


def parse_timed_text(
    payload: str,
    tracks: list[CaptionTrack],
    config: TranscriptConfig,
) -> list[TranscriptSegment]:
    """
    Turn a timed-text payload into segments, in payload order.

    Every segment is tagged with `config.lang` when set, otherwise with the
    language of the first listed track, which is the track select_track_url()
    picks when no language is requested.  An empty `config.lang` counts as
    unset, the same as in select_track_url(), so segments are never tagged
    with "".

    Args:
        payload: Raw timed-text document.
        tracks:  Caption tracks from the watch page (only the first is read,
                 and only when `config.lang` is unset).
        config:  Retrieval options.

    Returns:
        One TranscriptSegment per <text> element.  Elements with nested
        markup don't match the pattern and are skipped.

    Raises:
        ValueError: If a start or dur attribute isn't a number.
    """
    lang = config.lang or tracks[0].language_code
    return [
        TranscriptSegment(
            text=match.group(3),
            offset=float(match.group(1)),
            duration=float(match.group(2)),
            lang=lang,
        )
        for match in _TEXT_ELEMENT_PATTERN.finditer(payload)
    ]
