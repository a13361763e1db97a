"""Test configuration and fixtures"""

import pytest
import tempfile
from pathlib import Path
from unittest.mock import Mock

from lyric_finder.config.settings import Settings
from lyric_finder.exceptions import CatalogUnavailable

ENV_VARS = [
    'LYRIC_FINDER_LOG_LEVEL',
    'LYRIC_FINDER_CATALOG_URL',
    'LYRIC_FINDER_LYRICS_URL',
    'LYRIC_FINDER_TIMEOUT',
    'LYRIC_FINDER_CARD_DIR',
]


class FakeCatalog:
    """Catalog stand-in returning fixed titles or raising"""

    def __init__(self, tracks=(), error=None):
        self.tracks = set(tracks)
        self.error = error
        self.calls = []

    def fetch_tracks(self, artist, limit):
        self.calls.append((artist, limit))
        if self.error:
            raise self.error
        return set(self.tracks)


class FakeLyrics:
    """Lyrics stand-in answering from a title -> text mapping"""

    def __init__(self, lyrics_by_title=None):
        self.lyrics_by_title = lyrics_by_title or {}
        self.calls = []

    def fetch_lyrics(self, artist, title):
        self.calls.append((artist, title))
        return self.lyrics_by_title.get(title)


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove LYRIC_FINDER_* overrides from the environment"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings(temp_dir, clean_env):
    """Settings with defaults only, isolated from any user config file"""
    config_file = temp_dir / "config.yaml"
    config_file.write_text("", encoding="utf-8")
    return Settings(config_path=str(config_file))


@pytest.fixture
def make_response():
    """Factory for fake requests responses"""
    def _make(status_code=200, json_data=None, json_error=False):
        response = Mock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 300
        if json_error:
            response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        else:
            response.json.return_value = json_data
        return response
    return _make


@pytest.fixture
def mock_session():
    """Fake requests session; set mock_session.get.return_value per test"""
    session = Mock()
    session.headers = {}
    return session


@pytest.fixture
def catalog_unavailable():
    return CatalogUnavailable("Catalog search failed: connection refused", details={'artist': 'Adele'})


@pytest.fixture
def sample_lyrics():
    """Lyrics body with short, medium and long lines"""
    return (
        "Hello\r\n"
        "It's me\n"
        "\n"
        "I was wondering if after all these years\r\n"
        "   You'd like to meet   \n"
        "To go over everything\r"
        "Hello from the other side\n"
    )
