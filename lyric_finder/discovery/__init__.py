# lyric_finder/discovery/__init__.py
"""
Discovery package: the search that turns an artist name into a lyric line

Usage:
    from lyric_finder.discovery import discover

    result = discover("Adele", prefer_long=True)
    if result.found:
        print(result.finding.line)
    else:
        print(result.reason.message)
"""

from .models import (
    DiscoveryPhase,
    DiscoveryResult,
    LyricFinding,
    NotFoundReason,
    SHARED_TITLE
)
from .orchestrator import LyricDiscovery, discover, get_discovery, reset_discovery

__all__ = [
    'DiscoveryPhase',
    'DiscoveryResult',
    'LyricFinding',
    'NotFoundReason',
    'SHARED_TITLE',
    'LyricDiscovery',
    'discover',
    'get_discovery',
    'reset_discovery',
]
