"""
Lyric discovery: turn an artist name into one random lyric line

Discovery combines two unreliable sources. The catalog returns plenty of
titles, but most of them have no lyrics on the lyrics provider. The search
therefore runs as a small state machine:

    CATALOG   one catalog search (over-fetching 60 titles); empty -> DONE
    SAMPLING  up to min(20, titles) random draws with replacement
    FALLBACK  every title once, in order
    DONE      finding, or a not-found reason

Sampling gives varied results quickly for artists with many songs that have
lyrics. The fallback sweep guarantees a line is found whenever any title has
one, at the cost of one request per title.

Lyrics requests are issued strictly one at a time and discovery stops at the
first line found. Per-title misses are never reported; the only exception
that leaves discover() is CatalogUnavailable.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional

from ..catalog.itunes import get_catalog_client
from ..config.settings import get_settings
from ..lyrics.lyricsovh import get_lyricsovh_provider
from ..lyrics.selector import pick_line
from ..utils.logger import get_logger
from .models import DiscoveryPhase, DiscoveryResult, LyricFinding, NotFoundReason


@dataclass
class _DiscoveryRun:
    """Mutable state of one discover() call, never shared between calls"""
    artist: str
    prefer_long: bool
    tracks: List[str] = field(default_factory=list)
    attempts: int = 0
    phase: DiscoveryPhase = DiscoveryPhase.CATALOG


class LyricDiscovery:
    """
    Discovery orchestrator

    The instance itself holds only collaborators and configuration, so one
    instance can serve concurrent discover() calls.
    """

    def __init__(self, catalog=None, lyrics=None, rng=None, settings=None):
        """
        Initialize discovery orchestrator

        Args:
            catalog: Object with fetch_tracks(artist, limit), defaults to the iTunes client
            lyrics: Object with fetch_lyrics(artist, title), defaults to lyrics.ovh
            rng: Object with choice(), defaults to the random module
            settings: Settings instance, defaults to the global settings
        """
        self.settings = settings or get_settings()
        self.logger = get_logger(__name__)

        self.catalog = catalog if catalog is not None else get_catalog_client()
        self.lyrics = lyrics if lyrics is not None else get_lyricsovh_provider()
        self.rng = rng or random

        self.catalog_limit = self.settings.catalog.limit
        self.sample_attempts = self.settings.discovery.sample_attempts

    def discover(self, artist: str, prefer_long: Optional[bool] = None) -> DiscoveryResult:
        """
        Find a random lyric line for an artist

        Args:
            artist: Artist name
            prefer_long: Prefer lines of 30+ characters, defaults to the configured value

        Returns:
            DiscoveryResult holding either a LyricFinding or a NotFoundReason

        Raises:
            CatalogUnavailable: If the catalog search fails
            ValueError: If artist is empty after trimming
        """
        artist = (artist or "").strip()
        if not artist:
            raise ValueError("artist must be a non-empty string")
        if prefer_long is None:
            prefer_long = self.settings.discovery.prefer_long

        run = _DiscoveryRun(artist=artist, prefer_long=prefer_long)
        finding: Optional[LyricFinding] = None
        reason: Optional[NotFoundReason] = None

        while run.phase is not DiscoveryPhase.DONE:
            if run.phase is DiscoveryPhase.CATALOG:
                self.logger.console_info("Searching for songs…")
                run.tracks = list(self.catalog.fetch_tracks(artist, self.catalog_limit))
                if not run.tracks:
                    self.logger.info(f"No catalog titles for '{artist}'")
                    reason = NotFoundReason.NO_CANDIDATES
                    run.phase = DiscoveryPhase.DONE
                else:
                    self.logger.console_info(f"Found {len(run.tracks)} songs. Trying lyrics…")
                    run.phase = DiscoveryPhase.SAMPLING

            elif run.phase is DiscoveryPhase.SAMPLING:
                finding = self._sample(run)
                run.phase = DiscoveryPhase.DONE if finding else DiscoveryPhase.FALLBACK

            elif run.phase is DiscoveryPhase.FALLBACK:
                self.logger.info(f"Sampling exhausted for '{artist}', sweeping all {len(run.tracks)} titles")
                finding = self._sweep(run)
                if not finding:
                    reason = NotFoundReason.NO_LYRIC_LINE_FOUND
                run.phase = DiscoveryPhase.DONE

        if finding:
            self.logger.info(f"Line found for '{artist}' in '{finding.title}' after {run.attempts} attempts")
            return DiscoveryResult.success(finding, run.attempts)

        self.logger.info(f"No line for '{artist}': {reason.value} after {run.attempts} attempts")
        return DiscoveryResult.not_found(reason, run.attempts)

    def sample_budget(self, track_count: int) -> int:
        """Number of random draws for a catalog of track_count titles"""
        return min(self.sample_attempts, track_count)

    def _sample(self, run: _DiscoveryRun) -> Optional[LyricFinding]:
        """
        Random-sampling phase: draws with replacement, bounded budget

        Returns:
            First finding, or None once the budget is spent
        """
        budget = self.sample_budget(len(run.tracks))
        for attempt in range(budget):
            title = self.rng.choice(run.tracks)
            self.logger.info(f'Trying lyrics for "{title}" ({attempt + 1}/{budget})')
            finding = self._try_title(run, title)
            if finding:
                return finding
        return None

    def _sweep(self, run: _DiscoveryRun) -> Optional[LyricFinding]:
        """
        Exhaustive fallback phase: every title once, in order

        Returns:
            First finding, or None if no title yields a line
        """
        for title in run.tracks:
            finding = self._try_title(run, title)
            if finding:
                return finding
        return None

    def _try_title(self, run: _DiscoveryRun, title: str) -> Optional[LyricFinding]:
        run.attempts += 1
        lyrics = self.lyrics.fetch_lyrics(run.artist, title)
        if not lyrics:
            return None

        line = pick_line(lyrics, run.prefer_long, rng=self.rng)
        if not line:
            self.logger.debug(f"Lyrics for '{title}' contain no usable line")
            return None

        return LyricFinding(artist=run.artist, title=title, line=line, lyrics_raw=lyrics)


# Global discovery instance
_discovery: Optional[LyricDiscovery] = None


def get_discovery() -> LyricDiscovery:
    """Get global discovery orchestrator instance"""
    global _discovery
    if not _discovery:
        _discovery = LyricDiscovery()
    return _discovery


def reset_discovery() -> None:
    """Reset global discovery orchestrator instance"""
    global _discovery
    _discovery = None


def discover(artist: str, prefer_long: Optional[bool] = None) -> DiscoveryResult:
    """Find a random lyric line for an artist using the global orchestrator"""
    return get_discovery().discover(artist, prefer_long)
