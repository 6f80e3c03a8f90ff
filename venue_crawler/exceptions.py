"""Custom exceptions for the venue-crawler library."""


class VenueCrawlerError(Exception):
    """Base exception for all venue-crawler errors."""
    pass


class ConfigurationError(VenueCrawlerError):
    """Raised when configuration is invalid or incomplete."""
    pass


class HostNotReadyError(VenueCrawlerError):
    """Raised when the host editor model (or its snapshot) is not available."""
    pass


class SearchError(VenueCrawlerError):
    """Raised when the search request cannot be completed."""
    pass


class SearchTimeoutError(SearchError):
    """Raised when the search request exceeds its timeout."""
    pass


class FetchError(VenueCrawlerError):
    """Raised when a venue website cannot be fetched."""

    def __init__(self, message: str, url: str = None):
        super().__init__(message)
        self.url = url


class FetchTimeoutError(FetchError):
    """Raised when a venue website fetch exceeds its timeout."""
    pass
