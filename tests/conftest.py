"""
conftest.py — Shared fixtures.

No test in the default run touches the network; see samples.py for the
canned pages and payloads.
"""

from __future__ import annotations

import pytest

from samples import TIMED_TEXT, TRACKS_EN_FR, build_captions_json, build_watch_page


@pytest.fixture()
def watch_page() -> str:
    """A playable watch page listing an English and a French track."""
    return build_watch_page(build_captions_json(TRACKS_EN_FR))


@pytest.fixture()
def timed_text() -> str:
    """A ten-element timed-text payload."""
    return TIMED_TEXT
