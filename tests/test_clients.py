"""Test catalog and lyrics HTTP clients"""

import pytest
import requests
from unittest.mock import patch

from lyric_finder.catalog.itunes import ITunesCatalogClient
from lyric_finder.discovery.models import NotFoundReason
from lyric_finder.discovery.orchestrator import LyricDiscovery
from lyric_finder.exceptions import CatalogUnavailable
from lyric_finder.lyrics.lyricsovh import LyricsOvhProvider

from conftest import FakeCatalog


@pytest.fixture
def catalog(settings, mock_session):
    with patch('lyric_finder.catalog.itunes.get_settings', return_value=settings):
        return ITunesCatalogClient(session=mock_session)


@pytest.fixture
def provider(settings, mock_session):
    with patch('lyric_finder.lyrics.lyricsovh.get_settings', return_value=settings):
        return LyricsOvhProvider(session=mock_session)


class TestCatalogClient:
    """Test iTunes catalog client"""

    def test_request_parameters(self, catalog, mock_session, make_response):
        """One GET with term, entity=song and limit"""
        mock_session.get.return_value = make_response(json_data={'results': []})
        catalog.fetch_tracks("Adele", 60)

        assert mock_session.get.call_count == 1
        args, kwargs = mock_session.get.call_args
        assert args[0] == "https://itunes.apple.com/search"
        assert kwargs['params'] == {'term': "Adele", 'entity': "song", 'limit': 60}
        assert kwargs['timeout'] == 15
        assert mock_session.headers['User-Agent'] == "Lyric-Finder/1.0"

    def test_titles_deduplicated_and_filtered(self, catalog, mock_session, make_response):
        """Duplicates collapse, missing and empty titles are dropped"""
        mock_session.get.return_value = make_response(json_data={'results': [
            {'trackName': "Hello"},
            {'trackName': "Hello"},
            {'trackName': "Skyfall"},
            {'trackName': ""},
            {'trackName': None},
            {'trackName': 42},
            {'collectionName': "25"},
            "not an entry",
        ]})

        tracks = catalog.fetch_tracks("Adele", 60)

        assert tracks == {"Hello", "Skyfall"}
        assert "" not in tracks

    def test_missing_results(self, catalog, mock_session, make_response):
        """A body without results is an empty catalog, not an error"""
        mock_session.get.return_value = make_response(json_data={'resultCount': 0})
        assert catalog.fetch_tracks("Nobody", 60) == set()

    def test_results_not_a_list(self, catalog, mock_session, make_response):
        """A results field of the wrong type is an empty catalog"""
        for results in (5, "Hello", {"trackName": "Hello"}):
            mock_session.get.return_value = make_response(json_data={'results': results})
            assert catalog.fetch_tracks("Adele", 60) == set()

    def test_transport_failure(self, catalog, mock_session):
        """Network errors raise CatalogUnavailable"""
        mock_session.get.side_effect = requests.exceptions.ConnectionError("connection refused")

        with pytest.raises(CatalogUnavailable) as exc_info:
            catalog.fetch_tracks("Adele", 60)

        assert exc_info.value.details['artist'] == "Adele"
        assert exc_info.value.status_code is None

    def test_non_success_status(self, catalog, mock_session, make_response):
        """Non-2xx responses raise CatalogUnavailable with the status"""
        mock_session.get.return_value = make_response(status_code=503)

        with pytest.raises(CatalogUnavailable) as exc_info:
            catalog.fetch_tracks("Adele", 60)

        assert exc_info.value.status_code == 503

    def test_invalid_json(self, catalog, mock_session, make_response):
        """An unreadable body raises CatalogUnavailable"""
        mock_session.get.return_value = make_response(json_error=True)

        with pytest.raises(CatalogUnavailable):
            catalog.fetch_tracks("Adele", 60)

    def test_invalid_limit(self, catalog, mock_session):
        """limit must be a positive integer"""
        for limit in (0, -1, 2.5, True):
            with pytest.raises(ValueError):
                catalog.fetch_tracks("Adele", limit)
        mock_session.get.assert_not_called()


class TestLyricsOvhProvider:
    """Test lyrics.ovh provider"""

    def test_returns_lyrics(self, provider, mock_session, make_response):
        """Lyrics text is returned unchanged"""
        body = "Hello, it's me\nI was wondering\n"
        mock_session.get.return_value = make_response(json_data={'lyrics': body})

        assert provider.fetch_lyrics("Adele", "Hello") == body
        assert mock_session.get.call_args[0][0] == "https://api.lyrics.ovh/v1/Adele/Hello"

    def test_path_segments_encoded(self, provider):
        """Slashes, spaces and ampersands are percent-encoded"""
        url = provider.build_url("AC/DC", "Rock & Roll Ain't Noise Pollution")
        assert url == (
            "https://api.lyrics.ovh/v1/AC%2FDC/"
            "Rock%20%26%20Roll%20Ain%27t%20Noise%20Pollution"
        )

    def test_unencodable_title(self, provider, mock_session):
        """Titles with lone surrogates are absent, not errors"""
        assert provider.fetch_lyrics("Adele", "Bad \ud800 title") is None
        assert provider.fetch_lyrics("Ade\udfffle", "Hello") is None
        mock_session.get.assert_not_called()

    def test_unencodable_title_during_discovery(self, provider, settings):
        """Discovery keeps going past a title that cannot be requested"""
        discovery = LyricDiscovery(
            catalog=FakeCatalog(["Bad \ud800 title"]), lyrics=provider, settings=settings
        )
        result = discovery.discover("Adele")
        assert result.reason is NotFoundReason.NO_LYRIC_LINE_FOUND

    def test_not_found_status(self, provider, mock_session, make_response):
        """404 is an absent result"""
        mock_session.get.return_value = make_response(status_code=404, json_data={'error': "No lyrics found"})
        assert provider.fetch_lyrics("Adele", "Hello (Live)") is None

    def test_transport_error_absorbed(self, provider, mock_session):
        """Network errors never propagate"""
        mock_session.get.side_effect = requests.exceptions.Timeout("read timed out")
        assert provider.fetch_lyrics("Adele", "Hello") is None

    def test_malformed_bodies(self, provider, mock_session, make_response):
        """Invalid JSON, missing, empty or non-string lyrics are absent"""
        for response in (
            make_response(json_error=True),
            make_response(json_data=["lyrics"]),
            make_response(json_data={}),
            make_response(json_data={'lyrics': ""}),
            make_response(json_data={'lyrics': "  \n "}),
            make_response(json_data={'lyrics': 12}),
        ):
            mock_session.get.return_value = response
            assert provider.fetch_lyrics("Adele", "Hello") is None


class TestClientSingletons:
    """Test global client instances"""

    def test_reset_closes_and_rebuilds(self, settings):
        from lyric_finder.catalog import itunes
        from lyric_finder.lyrics import lyricsovh

        with patch('lyric_finder.catalog.itunes.get_settings', return_value=settings), \
                patch('lyric_finder.lyrics.lyricsovh.get_settings', return_value=settings):
            catalog = itunes.get_catalog_client()
            provider = lyricsovh.get_lyricsovh_provider()
            assert itunes.get_catalog_client() is catalog
            assert lyricsovh.get_lyricsovh_provider() is provider

            with patch.object(catalog, 'close') as catalog_close, \
                    patch.object(provider, 'close') as provider_close:
                itunes.reset_catalog_client()
                lyricsovh.reset_lyricsovh_provider()

            catalog_close.assert_called_once_with()
            provider_close.assert_called_once_with()
            assert itunes.get_catalog_client() is not catalog
            itunes.reset_catalog_client()
            lyricsovh.reset_lyricsovh_provider()
