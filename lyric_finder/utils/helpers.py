"""
Utility functions and helpers for Lyric Finder
Common functions for file naming and directory handling
"""

import re
import unicodedata
from pathlib import Path
from typing import Union


def sanitize_filename(filename: str, max_length: int = 200, replace_spaces: bool = False) -> str:
    """
    Sanitize filename for cross-platform compatibility

    Args:
        filename: Original filename
        max_length: Maximum filename length
        replace_spaces: Whether to replace spaces with underscores

    Returns:
        Sanitized filename
    """
    if not filename:
        return "unknown"

    filename = filename.strip().strip('"\'').strip()
    if not filename:
        return "unknown"

    # NFC keeps accented artist names intact
    filename = unicodedata.normalize('NFC', filename)

    # Characters not allowed in Windows filenames plus control characters
    invalid_chars = r'[<>:"/\\|?*\x00-\x1f\x7f-\x9f]'
    filename = re.sub(invalid_chars, '', filename)

    # Emoji and other symbols that upset some filesystems; dashes are kept
    filename = re.sub(r'[^\w\s\-_.,()[\]{}!@#$%^&+=\'–—]', '', filename, flags=re.UNICODE)

    filename = re.sub(r'\s+', ' ', filename)

    if replace_spaces:
        filename = filename.replace(' ', '_')

    filename = filename.strip(' .')

    reserved_names = {
        'CON', 'PRN', 'AUX', 'NUL',
        'COM1', 'COM2', 'COM3', 'COM4', 'COM5', 'COM6', 'COM7', 'COM8', 'COM9',
        'LPT1', 'LPT2', 'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9'
    }

    name_part = filename.split('.')[0].upper() if '.' in filename else filename.upper()
    if name_part in reserved_names:
        filename = f"_{filename}"

    # Truncate if too long, preserving the extension
    if len(filename) > max_length:
        if '.' in filename:
            name, ext = filename.rsplit('.', 1)
            available_length = max_length - len(ext) - 1
            if available_length > 0:
                filename = f"{name[:available_length]}.{ext}"
            else:
                filename = filename[:max_length]
        else:
            filename = filename[:max_length]

    filename = filename.rstrip(' .')

    if not filename or filename in ['.', '..']:
        filename = "unknown"

    return filename


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure directory exists, create if necessary

    Args:
        path: Directory path

    Returns:
        Path object
    """
    path_obj = Path(path).expanduser()
    path_obj.mkdir(parents=True, exist_ok=True)
    return path_obj
