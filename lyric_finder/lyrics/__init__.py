# lyric_finder/lyrics/__init__.py
"""
Lyrics package: per-song lyrics retrieval and line selection

- LyricsOvhProvider: fetches full lyrics for an artist/title pair, returning
  None for every kind of miss
- pick_line: extracts one presentable line from a lyrics body

Usage:
    provider = get_lyricsovh_provider()
    lyrics = provider.fetch_lyrics(artist, title)
    line = pick_line(lyrics, prefer_long=True)
"""

from .lyricsovh import get_lyricsovh_provider, reset_lyricsovh_provider, LyricsOvhProvider
from .selector import (
    pick_line,
    split_lines,
    MIN_LINE_LENGTH,
    MIN_LONG_LINE_LENGTH,
    MAX_LINE_LENGTH
)

__all__ = [
    'get_lyricsovh_provider',
    'reset_lyricsovh_provider',
    'LyricsOvhProvider',
    'pick_line',
    'split_lines',
    'MIN_LINE_LENGTH',
    'MIN_LONG_LINE_LENGTH',
    'MAX_LINE_LENGTH',
]
