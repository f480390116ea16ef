"""
models.py — Value types passed between the pipeline stages.

All of them are frozen dataclasses: each stage returns a fresh value and
hands it to the next stage, so nothing downstream can mutate what an
earlier stage produced.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TranscriptConfig:
    """
    Per-retrieval options supplied by the caller.

    Attributes:
        lang: Exact caption language code to select (e.g. "fr").  When None,
              the first track listed on the watch page is used.
    """
    lang: str | None = None


@dataclass(frozen=True)
class CaptionTrack:
    """
    One caption track listed in the watch page's captions manifest.

    Attributes:
        language_code: The track's language code as YouTube reports it
                       (e.g. "en", "pt-BR").
        base_url:      URL of the track's timed-text payload.
        kind:          "asr" for auto-generated tracks, None for tracks
                       uploaded by the creator.
        name:          Display name shown in the player's caption menu
                       (e.g. "English (auto-generated)"), when present.
    """
    language_code: str
    base_url: str
    kind: str | None = None
    name: str | None = None

    @property
    def is_generated(self) -> bool:
        """True when YouTube produced the track by speech recognition."""
        return self.kind == "asr"


@dataclass(frozen=True)
class TranscriptSegment:
    """
    A single timed line of a transcript.

    `text` is copied verbatim from the payload; entity sequences such as
    "&amp;#39;" are left exactly as YouTube sent them.

    Attributes:
        text:     The caption text.
        offset:   Start time in seconds.
        duration: Display duration in seconds.
        lang:     Language the segment is tagged with.
    """
    text: str
    offset: float
    duration: float
    lang: str | None = None

    def to_dict(self) -> dict:
        """Return a JSON-serialisable dict for this segment."""
        return {
            "text": self.text,
            "duration": self.duration,
            "offset": self.offset,
            "lang": self.lang,
        }
