"""Client library for the Open Library API.

Provides typed lookups by OLID, ISBN, LCCN, OCLC number, author key and
work key, with responses normalized into a paginated envelope.
"""

from ._version import __version__
from .client import OpenLibraryClient
from .exceptions import (
    OpenLibraryError,
    OpenLibraryRateLimitError,
    OpenLibraryRequestError,
)
from .request_handler import RequestHandler
from .schemas import Pagination, Response, ResultPage

__all__ = [
    "__version__",
    "OpenLibraryClient",
    "OpenLibraryError",
    "OpenLibraryRateLimitError",
    "OpenLibraryRequestError",
    "RequestHandler",
    "Pagination",
    "Response",
    "ResultPage",
]
