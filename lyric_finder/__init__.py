"""
lyric-finder: a random, shareable lyric line from any artist.

Architecture:
    catalog/    - Song catalog search (iTunes Search API)
    lyrics/     - Per-song lyrics lookup (lyrics.ovh) and line selection
    discovery/  - Two-phase search combining both sources
    share.py    - Share link encoding and restoration
    card.py     - PNG quote card export
    config/     - YAML and environment configuration
    utils/      - Logging and helpers
    main.py     - Command-line interface

Usage:
    Command Line:
        lyric-finder find "Adele"
        lyric-finder find "Adele" --prefer-long --save-card --theme dark
        lyric-finder restore "?artist=Adele&text=Hello%20from%20the%20other%20side"

    Python API:
        from lyric_finder import discover, CatalogUnavailable

        try:
            result = discover("Adele")
        except CatalogUnavailable:
            ...
        if result.found:
            print(result.finding.line, result.finding.title)
"""

__version__ = "0.1.0"
__author__ = "lyric-finder"
__license__ = "MIT"

from lyric_finder.exceptions import (
    CardExportError,
    CatalogUnavailable,
    ConfigError,
    LyricFinderError,
    ShareLinkError,
)
from lyric_finder.discovery import (
    DiscoveryResult,
    LyricDiscovery,
    LyricFinding,
    NotFoundReason,
    discover,
)

__all__ = [
    "__version__",
    # Exceptions
    "LyricFinderError",
    "CatalogUnavailable",
    "ConfigError",
    "ShareLinkError",
    "CardExportError",
    # Discovery
    "LyricDiscovery",
    "LyricFinding",
    "DiscoveryResult",
    "NotFoundReason",
    "discover",
]
