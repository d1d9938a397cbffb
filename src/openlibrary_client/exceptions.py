"""Exceptions raised by the Open Library client."""

from typing import Optional

from .schemas import Response


class OpenLibraryError(Exception):
    """Base exception for Open Library API errors."""

    pass


class OpenLibraryRequestError(OpenLibraryError):
    """Raised when Open Library answers with an HTTP error status."""

    def __init__(self, response: Response, message: Optional[str] = None):
        self.response = response
        super().__init__(message or f"HTTP error: {response.status}")

    @property
    def status(self) -> int:
        return self.response.status


class OpenLibraryRateLimitError(OpenLibraryRequestError):
    """Raised when rate limited by Open Library."""

    def __init__(self, response: Response):
        super().__init__(response, "Rate limited by Open Library")
