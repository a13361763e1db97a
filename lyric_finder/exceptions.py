"""
Exception classes for lyric-finder.

Exception Hierarchy:
    LyricFinderError (base)
        CatalogUnavailable - Song catalog search could not be completed
        ConfigError - Configuration file issues
        ShareLinkError - Share link has no artist
        CardExportError - Quote card could not be written

Lyrics lookups have no exception: a missing or failed lyrics fetch is an
expected outcome and is reported as None. Likewise "no songs found" and
"no usable line" are results, not errors (see discovery.models.NotFoundReason).
"""


class LyricFinderError(Exception):
    """
    Base exception for all lyric-finder errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context (artist, URL,
                 status code, the wrapped error).
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the error message for display."""
        return self.message


class CatalogUnavailable(LyricFinderError):
    """
    Raised when the song catalog search does not complete.

    This is the only error a discovery run propagates to its caller, and it
    is fatal for that run. No lyrics requests are made after it.

    Common causes:
        - Network connectivity issues or timeout
        - Non-2xx response from the search endpoint
        - Response body that is not JSON

    Example:
        raise CatalogUnavailable(
            "Catalog search failed with status 503",
            details={'artist': 'Adele', 'status_code': 503}
        )
    """

    @property
    def status_code(self) -> int | None:
        """HTTP status of the failed search, if a response was received."""
        return self.details.get('status_code')


class ConfigError(LyricFinderError):
    """
    Raised when there's an issue with the configuration.

    Common causes:
        - Invalid field values (e.g., zero catalog limit, unknown theme)
        - Config file cannot be written
    """
    pass


class ShareLinkError(LyricFinderError):
    """
    Raised when a share link has no artist.

    A link with an artist but no text is not an error: the caller runs a
    fresh search for that artist instead.
    """
    pass


class CardExportError(LyricFinderError):
    """Raised when a quote card image cannot be rendered or saved."""
    pass
