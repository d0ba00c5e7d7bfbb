"""Custom exceptions for Idea Scout."""

from __future__ import annotations


class IdeaScoutError(Exception):
    """Base exception for all Idea Scout errors."""
    pass


class ConfigurationError(IdeaScoutError):
    """Raised when required search credentials are missing."""
    pass


class ValidationError(IdeaScoutError):
    """Raised when input validation fails."""
    pass


class InvalidTimeRange(ValidationError):
    """Raised when a time range is not one of the recognised keys."""

    def __init__(self, time_range: str, message: str = "Invalid time range"):
        self.time_range = time_range
        super().__init__(message)


class MalformedLink(IdeaScoutError):
    """Raised when a search hit's link cannot be parsed into a hostname."""

    def __init__(self, link: str):
        self.link = link
        super().__init__(f"Malformed link: {link!r}")


class APIError(IdeaScoutError):
    """Base exception for external API failures."""
    pass


class UpstreamError(APIError):
    """Raised when the search provider fails or returns a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
