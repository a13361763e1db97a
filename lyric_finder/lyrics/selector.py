"""
Lyric line selection

Picks one presentable line out of a full lyrics body. Lines are judged by
length only: very short lines ("Oh", "Yeah yeah") and run-on paragraphs make
poor quote cards. When a song has no line inside the preferred range, any
non-empty line is accepted instead, so a song with lyrics always yields a line.
"""

import random
from typing import List, Optional

MIN_LINE_LENGTH = 10
MIN_LONG_LINE_LENGTH = 30
MAX_LINE_LENGTH = 200


def split_lines(text: Optional[str]) -> List[str]:
    """
    Split lyrics into trimmed, non-empty lines

    Args:
        text: Lyrics text

    Returns:
        Lines in original order
    """
    if not text:
        return []
    # Unicode line boundaries (U+2028, \x85, ...) split too
    lines = [line.strip() for line in text.splitlines()]
    return [line for line in lines if line]


def pick_line(text: Optional[str], prefer_long: bool = False, rng=None) -> Optional[str]:
    """
    Pick a random well-formed line from lyrics text

    Args:
        text: Lyrics text, or None when the provider had nothing
        prefer_long: Raise the minimum line length from 10 to 30 characters
        rng: Object with a choice() method, defaults to the random module

    Returns:
        A single line, or None if the text holds no non-empty line
    """
    lines = split_lines(text)
    if not lines:
        return None

    min_length = MIN_LONG_LINE_LENGTH if prefer_long else MIN_LINE_LENGTH
    good = [line for line in lines if min_length <= len(line) <= MAX_LINE_LENGTH]

    # Fallback pool drops both length bounds
    pool = good or lines
    return (rng or random).choice(pool)
