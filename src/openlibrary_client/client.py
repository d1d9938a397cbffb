"""Open Library API client.

Open Library (openlibrary.org) provides free bibliographic data. This client
covers record lookups and edition queries:
- Book records by OLID
- Editions by ISBN, LCCN or OCLC number
- Authors by key
- Editions of a work

No API key required.
"""

import json
import logging
from typing import Any, Optional, Union

from .exceptions import OpenLibraryError, OpenLibraryRateLimitError, OpenLibraryRequestError
from .request_handler import RequestHandler
from .schemas import Response, ResultPage

logger = logging.getLogger(__name__)

EDITION_TYPE = "/type/edition"
DEFAULT_LIMIT = 20


class OpenLibraryClient:
    """Client for Open Library API."""

    def __init__(self, request_handler: Optional[RequestHandler] = None):
        """Initialize client.

        Args:
            request_handler: Custom request handler (a default one is created if omitted)
        """
        self._request_handler = request_handler or RequestHandler()

    @property
    def request_handler(self) -> RequestHandler:
        return self._request_handler

    # ========================================================================
    # Record Lookups
    # ========================================================================

    def get_book_by_olid(self, olid: str) -> Union[dict, list]:
        """Get a book by its Open Library ID.

        Args:
            olid: Open Library edition ID (e.g., "OL7353617M")

        Returns:
            The book record, or a one-element list if the body is not an object
        """
        return self.get_request(f"/books/{olid}.json")

    def get_author_by_key(self, author_key: str) -> Union[dict, list]:
        """Get an author by Open Library author key.

        Args:
            author_key: Author key (e.g., "OL23919A")

        Returns:
            The author record, or a one-element list if the body is not an object
        """
        return self.get_request(f"/authors/{author_key}.json")

    # ========================================================================
    # Edition Queries
    # ========================================================================

    def get_editions_by_isbn(
        self, isbn: str, limit: int = DEFAULT_LIMIT, page: int = 1
    ) -> ResultPage:
        """Get editions by International Standard Book Number.

        Args:
            isbn: ISBN-10 or ISBN-13, hyphens and spaces allowed
            limit: Number of results per page
            page: Page number (starting from 1)

        Returns:
            ResultPage with pagination information

        Raises:
            ValueError: If the ISBN is not 10 or 13 characters long
        """
        isbn = clean_isbn(isbn)
        validate_isbn(isbn)

        isbn_type = "isbn_10" if len(isbn) == 10 else "isbn_13"
        return self._query_editions({isbn_type: isbn}, limit, page)

    def get_editions_by_lccn(
        self, lccn: str, limit: int = DEFAULT_LIMIT, page: int = 1
    ) -> ResultPage:
        """Get editions by Library of Congress Control Number."""
        return self._query_editions({"lccn": lccn}, limit, page)

    def get_editions_by_oclc(
        self, oclc: str, limit: int = DEFAULT_LIMIT, page: int = 1
    ) -> ResultPage:
        """Get editions by Online Computer Library Center number."""
        return self._query_editions({"oclc_numbers": oclc}, limit, page)

    def get_editions_of_work(
        self, work_key: str, limit: int = DEFAULT_LIMIT, page: int = 1
    ) -> ResultPage:
        """Get editions of a work.

        Args:
            work_key: Open Library work key (e.g., "OL45804W")
            limit: Number of results per page (0 for all available)
            page: Page number (starting from 1)

        Returns:
            ResultPage with pagination information
        """
        return self._get_page(f"/works/{work_key}/editions.json", {}, limit, page)

    def _query_editions(self, criteria: dict[str, str], limit: int, page: int) -> ResultPage:
        """Run a query API request for editions matching ``criteria``."""
        return self._get_page("/query.json", {"type": EDITION_TYPE, **criteria}, limit, page)

    def _get_page(
        self, path: str, params: dict[str, Any], limit: int, page: int
    ) -> ResultPage:
        validate_paging(limit, page)

        options = {
            **params,
            "limit": limit,
            "offset": (page - 1) * limit,
            "*": "",
        }
        data = self.get_request(path, options)
        return ResultPage.from_normalized(data, limit, page)

    # ========================================================================
    # Request / Response Handling
    # ========================================================================

    def get_request(
        self, path: str, options: Optional[dict[str, Any]] = None
    ) -> Union[dict, list]:
        """Make a GET request to the given endpoint and return the normalized data.

        Args:
            path: Path to call, relative to the base url
            options: Query string parameters

        Returns:
            Normalized response data

        Raises:
            OpenLibraryRequestError: If the server answered with an error status
            OpenLibraryError: If the request failed or the body is not JSON
        """
        response = self._request_handler.request("GET", path, options or {})
        return self._parse_response(response)

    def _parse_response(self, response: Response) -> Union[dict, list]:
        """Check the status, decode the JSON body and normalize it."""
        if response.status == 429:
            raise OpenLibraryRateLimitError(response)
        if not response.ok:
            raise OpenLibraryRequestError(response)

        try:
            data = json.loads(response.body)
        except json.JSONDecodeError as e:
            raise OpenLibraryError(f"Invalid JSON in response: {e}")

        return normalize_response(data)


# ============================================================================
# Helpers
# ============================================================================


def normalize_response(data: Any) -> Union[dict, list]:
    """Normalize the different Open Library response shapes.

    - Content API lists (``{"entries": [...], "size": n, "links": {...}}``)
      become ``{"total", "items", "links"}``.
    - Query API arrays become the same envelope with ``links`` set to None.
    - Single objects are returned as they are.
    - Anything else is wrapped in a list.
    """
    if isinstance(data, dict) and "entries" in data:
        entries = data["entries"] or []
        size = data.get("size")
        logger.debug("Normalizing entries response (%d entries)", len(entries))
        return {
            "total": size if size is not None else len(entries),
            "items": entries,
            "links": data.get("links"),
        }

    if isinstance(data, list):
        logger.debug("Normalizing array response (%d items)", len(data))
        return {
            "total": len(data),
            "items": data,
            "links": None,
        }

    if isinstance(data, dict):
        return data

    return [data]


def clean_isbn(isbn: str) -> str:
    """Strip hyphens and spaces from an ISBN."""
    return isbn.replace("-", "").replace(" ", "")


def validate_isbn(isbn: str) -> None:
    """Validate ISBN length.

    Raises:
        ValueError: If the ISBN is not 10 or 13 characters long
    """
    if len(isbn) not in (10, 13):
        raise ValueError("ISBN must be 10 or 13 characters.")


def validate_paging(limit: int, page: int) -> None:
    """Reject paging arguments that would produce a negative offset or page size."""
    if limit < 0:
        raise ValueError(f"limit must be 0 or greater, got {limit}")
    if page < 1:
        raise ValueError(f"page must be 1 or greater, got {page}")
