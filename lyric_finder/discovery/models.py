"""
Data models for lyric discovery results

A discovery run ends in exactly one of three ways: a LyricFinding, a
not-found reason, or a CatalogUnavailable exception. The first two are
carried by DiscoveryResult so callers can show calm, specific messages for
"nothing found" instead of a generic error.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

SHARED_TITLE = "(shared)"


class DiscoveryPhase(Enum):
    """
    States of a single discovery run

    State Transitions:
    CATALOG -> DONE (no songs found)
    CATALOG -> SAMPLING -> DONE (line found while sampling)
    CATALOG -> SAMPLING -> FALLBACK -> DONE (line found, or candidates exhausted)
    """
    CATALOG = "catalog"     # Fetching candidate titles
    SAMPLING = "sampling"   # Bounded random draws with replacement
    FALLBACK = "fallback"   # Every title once, in order
    DONE = "done"


class NotFoundReason(Enum):
    """Why a discovery run produced no line"""
    NO_CANDIDATES = "no_candidates"
    NO_LYRIC_LINE_FOUND = "no_lyric_line_found"

    @property
    def message(self) -> str:
        """User-facing explanation"""
        return _REASON_MESSAGES[self]


_REASON_MESSAGES = {
    NotFoundReason.NO_CANDIDATES: "No songs found for this artist.",
    NotFoundReason.NO_LYRIC_LINE_FOUND: "Could not find lyrics for the artist after trying multiple songs.",
}


@dataclass(frozen=True)
class LyricFinding:
    """
    A lyric line and the song it came from

    Attributes:
        artist: Artist name as queried
        title: Song title as returned by the catalog, or "(shared)" for a
               finding restored from a share link
        line: Single trimmed lyric line
        lyrics_raw: Full lyrics text the line was taken from (None only for
                    restored findings)
    """
    artist: str
    title: str
    line: str
    lyrics_raw: Optional[str] = None

    @property
    def is_shared(self) -> bool:
        """True when restored from a share link rather than discovered"""
        return self.lyrics_raw is None and self.title == SHARED_TITLE

    @property
    def caption(self) -> str:
        """Song caption in "title — artist" form"""
        return f"{self.title} — {self.artist}"

    @property
    def source_label(self) -> str:
        if self.is_shared:
            return "Shared quote"
        return f"Source: {self.title} ({self.artist})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'artist': self.artist,
            'title': self.title,
            'line': self.line,
            'lyrics_raw': self.lyrics_raw,
        }


@dataclass(frozen=True)
class DiscoveryResult:
    """
    Outcome of a discovery run that did not fail

    Exactly one of finding and reason is set.

    Attributes:
        finding: The discovered line, if any
        reason: Why nothing was found, if nothing was
        attempts: Number of lyrics requests issued
    """
    finding: Optional[LyricFinding] = None
    reason: Optional[NotFoundReason] = None
    attempts: int = 0

    def __post_init__(self):
        if (self.finding is None) == (self.reason is None):
            raise ValueError("DiscoveryResult needs exactly one of finding or reason")

    @property
    def found(self) -> bool:
        return self.finding is not None

    @classmethod
    def success(cls, finding: LyricFinding, attempts: int) -> "DiscoveryResult":
        return cls(finding=finding, attempts=attempts)

    @classmethod
    def not_found(cls, reason: NotFoundReason, attempts: int) -> "DiscoveryResult":
        return cls(reason=reason, attempts=attempts)
