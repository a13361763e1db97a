# lyric_finder/catalog/__init__.py
"""
Song catalog package

Looks up candidate song titles for an artist. A failed lookup raises
CatalogUnavailable, the one hard failure of a discovery run.
"""

from .itunes import get_catalog_client, reset_catalog_client, ITunesCatalogClient

__all__ = [
    'get_catalog_client',
    'reset_catalog_client',
    'ITunesCatalogClient',
]
