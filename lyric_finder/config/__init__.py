"""
Configuration package for Lyric Finder

Settings are loaded from YAML files and environment variables and accessed
through a process-wide singleton:

    from lyric_finder.config import get_settings

    settings = get_settings()
    settings.catalog.limit

Sources in order of precedence:
1. Environment variables (LYRIC_FINDER_*)
2. YAML configuration file
3. Dataclass defaults
"""

from .settings import get_settings, reload_settings, Settings

__all__ = [
    'get_settings',      # Factory function for singleton settings access
    'reload_settings',   # Re-read settings from files and environment
    'Settings',          # Settings class for direct instantiation
]
