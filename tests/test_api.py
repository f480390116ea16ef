"""
test_api.py — Tests for the FastAPI web API endpoints.

Uses FastAPI's TestClient (backed by httpx) so tests run in-process without
needing a live server.  Transcript fetching is mocked so these tests are
fast and don't require network access.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from yt_transcript_scraper.api import app
from yt_transcript_scraper.errors import (
    CaptionsDisabled,
    IdentifierNotFound,
    LanguageNotAvailable,
    NoTranscriptsAvailable,
    TooManyRequests,
    TranscriptError,
    VideoUnavailable,
)
from yt_transcript_scraper.models import CaptionTrack

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def client() -> TestClient:
    """Create a fresh TestClient for each test."""
    return TestClient(app)


_SAMPLE_TEXT = "Hello world\nSecond line"
_SAMPLE_JSON = {
    "video_id": "OAROO-kM8m8",
    "segment_count": 2,
    "segments": [
        {"text": "Hello world", "duration": 1.5, "offset": 0.0, "lang": "en"},
        {"text": "Second line", "duration": 2.0, "offset": 1.5, "lang": "en"},
    ],
}


# ---------------------------------------------------------------------------
# Health endpoint
# ---------------------------------------------------------------------------

class TestHealth:
    """Tests for GET /health."""

    def test_health_returns_ok(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


# ---------------------------------------------------------------------------
# Transcript endpoint — success cases
# ---------------------------------------------------------------------------

class TestTranscriptEndpoint:
    """Tests for GET /transcript/{video_id} with mocked extraction."""

    @patch("yt_transcript_scraper.api.extract_async", new_callable=AsyncMock)
    def test_text_format(self, mock_extract: AsyncMock, client: TestClient) -> None:
        mock_extract.return_value = _SAMPLE_TEXT

        resp = client.get("/transcript/OAROO-kM8m8")

        assert resp.status_code == 200
        assert resp.text == _SAMPLE_TEXT
        mock_extract.assert_awaited_once_with("OAROO-kM8m8", lang=None, fmt="text")

    @patch("yt_transcript_scraper.api.extract_async", new_callable=AsyncMock)
    def test_json_format(self, mock_extract: AsyncMock, client: TestClient) -> None:
        mock_extract.return_value = _SAMPLE_JSON

        resp = client.get("/transcript/OAROO-kM8m8?format=json")

        assert resp.status_code == 200
        assert resp.json() == _SAMPLE_JSON

    @patch("yt_transcript_scraper.api.extract_async", new_callable=AsyncMock)
    def test_language_param(self, mock_extract: AsyncMock, client: TestClient) -> None:
        mock_extract.return_value = _SAMPLE_TEXT

        resp = client.get("/transcript/OAROO-kM8m8?lang=fr&format=doc")

        assert resp.status_code == 200
        mock_extract.assert_awaited_once_with("OAROO-kM8m8", lang="fr", fmt="doc")

    def test_invalid_format_returns_422(self, client: TestClient) -> None:
        resp = client.get("/transcript/OAROO-kM8m8?format=xml")
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# Transcript endpoint — error cases
# ---------------------------------------------------------------------------

class TestTranscriptErrors:
    """Each TranscriptError subclass produces its own HTTP status."""

    @pytest.mark.parametrize("error, status", [
        (IdentifierNotFound("nope"), 400),
        (TooManyRequests(), 429),
        (VideoUnavailable("OAROO-kM8m8"), 404),
        (CaptionsDisabled("OAROO-kM8m8"), 404),
        (NoTranscriptsAvailable("OAROO-kM8m8"), 404),
        (LanguageNotAvailable("de", ["en", "fr"], "OAROO-kM8m8"), 400),
        (TranscriptError("Request failed", http_status=502), 502),
    ])
    def test_error_status(self, error: TranscriptError, status: int, client: TestClient) -> None:
        with patch("yt_transcript_scraper.api.extract_async", new=AsyncMock(side_effect=error)):
            resp = client.get("/transcript/OAROO-kM8m8")

        assert resp.status_code == status
        assert resp.json() == {"error": error.message}


# ---------------------------------------------------------------------------
# Tracks endpoint
# ---------------------------------------------------------------------------

class TestTracksEndpoint:
    """Tests for GET /tracks/{video_id}."""

    @patch("yt_transcript_scraper.api.TranscriptPipeline")
    def test_lists_tracks(self, MockPipeline: MagicMock, client: TestClient) -> None:
        MockPipeline.return_value.list_tracks = AsyncMock(return_value=[
            CaptionTrack(language_code="en", base_url="secret-a", kind="asr", name="English (auto-generated)"),
            CaptionTrack(language_code="fr", base_url="secret-b", name="French"),
        ])

        resp = client.get("/tracks/OAROO-kM8m8")

        assert resp.status_code == 200
        assert resp.json() == {
            "video_id": "OAROO-kM8m8",
            "tracks": [
                {"language_code": "en", "name": "English (auto-generated)", "kind": "asr", "is_generated": True},
                {"language_code": "fr", "name": "French", "kind": None, "is_generated": False},
            ],
        }
        assert "secret" not in resp.text

    @patch("yt_transcript_scraper.api.TranscriptPipeline")
    def test_error(self, MockPipeline: MagicMock, client: TestClient) -> None:
        MockPipeline.return_value.list_tracks = AsyncMock(side_effect=VideoUnavailable("OAROO-kM8m8"))

        resp = client.get("/tracks/OAROO-kM8m8")

        assert resp.status_code == 404
