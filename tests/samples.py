"""
samples.py — Sample watch pages and timed-text payloads for the tests.

They mimic what YouTube actually serves: a watch page with the player
response inlined in a <script> tag, and a timed-text XML document.
"""

from __future__ import annotations

import json

VIDEO_ID = "OAROO-kM8m8"

URL_EN = "https://www.youtube.com/api/timedtext?v=OAROO-kM8m8&lang=en"
URL_FR = "https://www.youtube.com/api/timedtext?v=OAROO-kM8m8&lang=fr"

TRACKS_EN_FR = [
    {
        "baseUrl": URL_EN,
        "name": {"simpleText": "English (auto-generated)"},
        "vssId": "a.en",
        "languageCode": "en",
        "kind": "asr",
        "isTranslatable": True,
    },
    {
        "baseUrl": URL_FR,
        "name": {"simpleText": "French"},
        "vssId": ".fr",
        "languageCode": "fr",
        "isTranslatable": True,
    },
]

TIMED_TEXT = (
    '<?xml version="1.0" encoding="utf-8" ?><transcript>'
    '<text start="0" dur="3.359">[Music]</text>'
    '<text start="0.359" dur="3">away</text>'
    '<text start="5.52" dur="3">inside</text>'
    '<text start="10.03" dur="14.99">[Music]</text>'
    '<text start="20.6" dur="4.42">give it to me saturated</text>'
    '<text start="28.32" dur="3.109">[Music]</text>'
    '<text start="37.3" dur="5.669">[Music]</text>'
    '<text start="47.25" dur="3.149">[Music]</text>'
    '<text start="51.62" dur="6.769">I&amp;#39;m ready</text>'
    '<text start="53.28" dur="5.109">[Music]</text>'
    "</transcript>"
)

# (text, offset, duration) of every element in TIMED_TEXT, in order.
EXPECTED_SEGMENTS = [
    ("[Music]", 0.0, 3.359),
    ("away", 0.359, 3.0),
    ("inside", 5.52, 3.0),
    ("[Music]", 10.03, 14.99),
    ("give it to me saturated", 20.6, 4.42),
    ("[Music]", 28.32, 3.109),
    ("[Music]", 37.3, 5.669),
    ("[Music]", 47.25, 3.149),
    ("I&amp;#39;m ready", 51.62, 6.769),
    ("[Music]", 53.28, 5.109),
]


def build_watch_page(captions_json: str, playable: bool = True) -> str:
    """
    Wrap a raw captions JSON fragment in a minimal watch page.

    The fragment is inserted verbatim after `"captions":`, so callers can
    pass deliberately broken JSON.
    """
    playability = '"playabilityStatus":{"status":"OK"},' if playable else ""
    return (
        "<!DOCTYPE html><html><head><title>Video - YouTube</title></head><body>"
        "<script>var ytInitialPlayerResponse = {"
        '"responseContext":{"serviceTrackingParams":[]},'
        f"{playability}"
        f'"captions":{captions_json},'
        f'"videoDetails":{{"videoId":"{VIDEO_ID}","title":"Obsidian"}}'
        "};</script></body></html>"
    )


def build_captions_json(tracks: list[dict]) -> str:
    """Serialise a captions object holding the given captionTracks."""
    return json.dumps({
        "playerCaptionsTracklistRenderer": {
            "captionTracks": tracks,
            "audioTracks": [{"captionTrackIndices": [0]}],
            "defaultAudioTrackIndex": 0,
        },
    })
