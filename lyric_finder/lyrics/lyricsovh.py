"""
lyrics.ovh integration for per-song lyrics retrieval

Free lyrics source with no API key. Most catalog titles (live versions,
remasters, deluxe-edition extras) do not resolve, so a miss is the normal
case: every failure mode is folded into a None result and logged at debug
level. This provider never raises.

Endpoint:
    GET https://api.lyrics.ovh/v1/<artist>/<title>
    -> {"lyrics": "..."} on success, {"error": "No lyrics found"} with 404 otherwise
"""

import requests
from typing import Optional
from urllib.parse import quote

from ..config.settings import get_settings
from ..utils.logger import get_logger


class LyricsOvhProvider:
    """lyrics.ovh lyrics provider"""

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Initialize lyrics provider

        Args:
            session: Optional pre-configured HTTP session (tests inject a mock)
        """
        self.settings = get_settings()
        self.logger = get_logger(__name__)

        self.base_url = self.settings.lyrics.base_url.rstrip('/')
        self.timeout = self.settings.network.request_timeout

        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': self.settings.network.user_agent
        })

    def build_url(self, artist: str, title: str) -> str:
        """Build the lyrics URL with both path segments percent-encoded"""
        return f"{self.base_url}/{quote(artist, safe='')}/{quote(title, safe='')}"

    def fetch_lyrics(self, artist: str, title: str) -> Optional[str]:
        """
        Fetch full lyrics text for a song

        Args:
            artist: Artist name
            title: Song title as returned by the catalog

        Returns:
            Lyrics text or None if unavailable for any reason
        """
        try:
            url = self.build_url(artist, title)
            response = self.session.get(url, timeout=self.timeout)
        except (requests.exceptions.RequestException, UnicodeError) as e:
            self.logger.debug(f"Lyrics request failed for '{artist} - {title}': {e}")
            return None

        if not response.ok:
            self.logger.debug(f"No lyrics for '{artist} - {title}' (HTTP {response.status_code})")
            return None

        try:
            data = response.json()
        except ValueError:
            self.logger.debug(f"Unreadable lyrics response for '{artist} - {title}'")
            return None

        lyrics = data.get('lyrics') if isinstance(data, dict) else None
        if not isinstance(lyrics, str) or not lyrics.strip():
            self.logger.debug(f"Empty lyrics body for '{artist} - {title}'")
            return None

        self.logger.debug(f"Lyrics found for '{artist} - {title}' ({len(lyrics)} chars)")
        return lyrics

    def close(self) -> None:
        """Close the underlying HTTP session"""
        self.session.close()


# Global lyrics provider instance
_lyricsovh_provider: Optional[LyricsOvhProvider] = None


def get_lyricsovh_provider() -> LyricsOvhProvider:
    """Get global lyrics.ovh provider instance"""
    global _lyricsovh_provider
    if not _lyricsovh_provider:
        _lyricsovh_provider = LyricsOvhProvider()
    return _lyricsovh_provider


def reset_lyricsovh_provider() -> None:
    """Reset global lyrics.ovh provider instance"""
    global _lyricsovh_provider
    if _lyricsovh_provider:
        _lyricsovh_provider.close()
    _lyricsovh_provider = None
