"""
iTunes Search API integration for song catalog lookups

The catalog is the first step of every discovery run: one search request
returns candidate song titles for an artist. Unlike the lyrics provider, a
failure here cannot be worked around, so it surfaces as CatalogUnavailable.

Endpoint:
    GET https://itunes.apple.com/search?term=<artist>&entity=song&limit=<n>

Only the trackName field of each result is consumed. Titles are
deduplicated by exact string equality and returned as a set; the order in
which iTunes ranks results carries no meaning for discovery.
"""

import requests
from typing import Any, Optional, Set

from ..config.settings import get_settings
from ..exceptions import CatalogUnavailable
from ..utils.logger import get_logger


class ITunesCatalogClient:
    """iTunes Search API song catalog client"""

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Initialize catalog client

        Args:
            session: Optional pre-configured HTTP session (tests inject a mock)
        """
        self.settings = get_settings()
        self.logger = get_logger(__name__)

        self.base_url = self.settings.catalog.base_url
        self.entity = self.settings.catalog.entity
        self.timeout = self.settings.network.request_timeout

        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': self.settings.network.user_agent
        })

    def fetch_tracks(self, artist: str, limit: int) -> Set[str]:
        """
        Fetch distinct song titles for an artist

        Args:
            artist: Artist name as typed by the user
            limit: Maximum number of song entries to request

        Returns:
            Set of non-empty song titles (possibly empty)

        Raises:
            CatalogUnavailable: If the request fails, the status is not 2xx
                or the body is not JSON
            ValueError: If limit is not a positive integer
        """
        if not isinstance(limit, int) or isinstance(limit, bool) or limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")

        params = {
            'term': artist,
            'entity': self.entity,
            'limit': limit,
        }

        self.logger.debug(f"Catalog search: '{artist}' (limit {limit})")

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Catalog request failed for '{artist}': {e}")
            raise CatalogUnavailable(
                f"Catalog search failed: {e}",
                details={'artist': artist, 'original_error': str(e)}
            ) from e

        if not response.ok:
            self.logger.error(f"Catalog search for '{artist}' returned HTTP {response.status_code}")
            raise CatalogUnavailable(
                f"Catalog search failed with status {response.status_code}",
                details={'artist': artist, 'status_code': response.status_code}
            )

        try:
            data = response.json()
        except ValueError as e:
            self.logger.error(f"Catalog response for '{artist}' is not JSON: {e}")
            raise CatalogUnavailable(
                "Catalog returned an unreadable response",
                details={'artist': artist, 'status_code': response.status_code, 'original_error': str(e)}
            ) from e

        tracks = self._extract_titles(data)
        self.logger.info(f"Catalog returned {len(tracks)} distinct titles for '{artist}'")
        return tracks

    def _extract_titles(self, data: Any) -> Set[str]:
        """
        Collect trackName values from a search response

        Args:
            data: Decoded JSON body

        Returns:
            Set of non-empty titles
        """
        if not isinstance(data, dict):
            return set()

        results = data.get('results') or []
        if not isinstance(results, list):
            self.logger.warning(f"Ignoring catalog results of type {type(results).__name__}")
            return set()

        titles = set()
        for entry in results:
            if not isinstance(entry, dict):
                continue
            title = entry.get('trackName')
            if isinstance(title, str) and title:
                titles.add(title)
        return titles

    def close(self) -> None:
        """Close the underlying HTTP session, aborting pooled connections"""
        self.session.close()


# Global catalog client instance
_catalog_client: Optional[ITunesCatalogClient] = None


def get_catalog_client() -> ITunesCatalogClient:
    """Get global catalog client instance"""
    global _catalog_client
    if not _catalog_client:
        _catalog_client = ITunesCatalogClient()
    return _catalog_client


def reset_catalog_client() -> None:
    """Reset global catalog client instance"""
    global _catalog_client
    if _catalog_client:
        _catalog_client.close()
    _catalog_client = None
