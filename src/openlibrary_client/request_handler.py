"""HTTP transport for Open Library requests.

Issues one GET per call and hands back status, body and headers. HTTP
error statuses are returned, not raised; the client decides what they mean.
"""

import logging
from typing import Any, Optional

import requests

from .config import get_config
from .exceptions import OpenLibraryError
from .schemas import Response

logger = logging.getLogger(__name__)


class RequestHandler:
    """Thin wrapper around a ``requests.Session``."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the handler.

        Args:
            base_url: API root (uses config if not provided)
            timeout: Request timeout in seconds (uses config if not provided)
            user_agent: User-Agent header value (uses config if not provided)
            session: Session to send requests with
        """
        config = get_config()

        self.base_url = (base_url or config.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.timeout
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": user_agent or config.user_agent})

    def set_base_url(self, url: str) -> None:
        """Set the base url for this request handler."""
        self.base_url = url.rstrip("/")

    def request(
        self,
        method: str,
        path: str,
        options: Optional[dict[str, Any]] = None,
    ) -> Response:
        """Make a request with this request handler.

        Args:
            method: HTTP method, only GET is supported
            path: Path relative to the base url, with a leading slash
            options: Query string parameters

        Returns:
            Response with status, body and headers

        Raises:
            ValueError: If the method is not GET
            OpenLibraryError: If the request could not be completed
        """
        if method.upper() != "GET":
            raise ValueError(f"Unsupported HTTP method: {method}")

        options = options or {}
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, options)

        try:
            response = self._session.get(
                url,
                params=options,
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.exceptions.Timeout:
            raise OpenLibraryError("Request timed out")
        except requests.exceptions.RequestException as e:
            raise OpenLibraryError(f"Request failed: {e}")

        logger.debug("GET %s -> %s", url, response.status_code)

        return Response(
            status=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )
