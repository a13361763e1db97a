"""
Share links for lyric findings

A share link carries the artist and the line in its query string:

    ?artist=Adele&text=Hello%2520from%2520the%2520other%2520side

Restoring a link rebuilds the finding directly, with no network access and
no check that the line really belongs to the artist. The song title is not
carried, so restored findings use the "(shared)" placeholder.

The text is percent-encoded before it goes into the query, so it ends up
encoded twice, and restoring decodes it once more after query parsing. Any
line survives the round trip, including one with a literal %XX sequence.
Hand-written links with singly-encoded text also restore, unless that text
contains a literal %XX sequence.
"""

from typing import Optional
from urllib.parse import parse_qs, quote, unquote, urlencode

from .discovery.models import LyricFinding, SHARED_TITLE
from .exceptions import ShareLinkError
from .utils.logger import get_logger

logger = get_logger(__name__)


def build_share_query(finding: LyricFinding) -> str:
    """
    Encode a finding as a query string (without the leading "?")

    Args:
        finding: Finding to share

    Returns:
        Query string with artist and text parameters, the text encoded twice
    """
    params = {'artist': finding.artist, 'text': quote(finding.line, safe='')}
    return urlencode(params, safe='', quote_via=quote)


def build_share_url(finding: LyricFinding, base_url: str = "") -> str:
    """
    Build a share URL for a finding

    Args:
        finding: Finding to share
        base_url: Page URL to attach the query to; empty gives "?artist=..."

    Returns:
        Share URL
    """
    base = base_url.split('?', 1)[0].split('#', 1)[0]
    return f"{base}?{build_share_query(finding)}"


def _extract_query(query_or_url: str) -> str:
    value = (query_or_url or "").strip()
    if '?' in value:
        value = value.split('?', 1)[1]
    return value.split('#', 1)[0]


def _first_param(params: dict, name: str) -> Optional[str]:
    values = params.get(name)
    if not values:
        return None
    value = values[0].strip()
    return value or None


def artist_from_query(query_or_url: str) -> Optional[str]:
    """Return the artist parameter of a share link, if present"""
    params = parse_qs(_extract_query(query_or_url))
    return _first_param(params, 'artist')


def restore_from_query(query_or_url: str) -> Optional[LyricFinding]:
    """
    Rebuild a finding from a share link

    Args:
        query_or_url: Full URL, "?query" or bare query string

    Returns:
        Restored finding, or None when the link names only an artist (the
        caller should run a fresh discovery for that artist)

    Raises:
        ShareLinkError: If the link carries no artist
    """
    params = parse_qs(_extract_query(query_or_url))
    artist = _first_param(params, 'artist')
    text = _first_param(params, 'text')

    if not artist:
        raise ShareLinkError(
            "Share link has no artist",
            details={'query': query_or_url}
        )

    if not text:
        logger.debug(f"Share link for '{artist}' has no text, a new search is needed")
        return None

    line = unquote(text).strip()
    if not line:
        return None

    logger.debug(f"Restored shared line for '{artist}'")
    return LyricFinding(artist=artist, title=SHARED_TITLE, line=line, lyrics_raw=None)
