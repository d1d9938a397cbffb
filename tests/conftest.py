"""Pytest configuration and shared fixtures.

Provides a clean configuration per test and mock transports so that no
test reaches the network.
"""

import json
from typing import Any, Generator, Optional
from unittest.mock import MagicMock

import pytest

from openlibrary_client.client import OpenLibraryClient
from openlibrary_client.config import reset_config
from openlibrary_client.request_handler import RequestHandler
from openlibrary_client.schemas import Response


ENV_VARS = (
    "OPENLIBRARY_BASE_URL",
    "OPENLIBRARY_TIMEOUT",
    "OPENLIBRARY_USER_AGENT",
    "OPENLIBRARY_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Reset global config and strip client environment variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


# ============================================================================
# Transport Fixtures
# ============================================================================


def _make_response(payload: Any = None, status: int = 200, body: Optional[str] = None) -> Response:
    """Build a transport Response with a JSON body."""
    if body is None:
        body = json.dumps(payload)
    return Response(status=status, body=body, headers={"Content-Type": "application/json"})


@pytest.fixture
def handler() -> MagicMock:
    """Create a mocked request handler."""
    return MagicMock(spec=RequestHandler)


@pytest.fixture
def client(handler: MagicMock) -> OpenLibraryClient:
    """Create a client backed by the mocked request handler."""
    return OpenLibraryClient(request_handler=handler)


@pytest.fixture
def session() -> MagicMock:
    """Create a mocked requests session."""
    session = MagicMock()
    session.headers = {}
    return session


# ============================================================================
# Sample Payloads
# ============================================================================


@pytest.fixture
def sample_edition() -> dict:
    """Edition record as returned by /books/{olid}.json."""
    return {
        "key": "/books/OL7353617M",
        "title": "Fantastic Mr. Fox",
        "authors": [{"key": "/authors/OL34184A"}],
        "isbn_10": ["0140328726"],
        "isbn_13": ["9780140328721"],
        "publishers": ["Puffin"],
        "number_of_pages": 96,
        "publish_date": "October 1, 1988",
    }


@pytest.fixture
def sample_author() -> dict:
    """Author record as returned by /authors/{key}.json."""
    return {
        "key": "/authors/OL34184A",
        "name": "Roald Dahl",
        "birth_date": "13 September 1916",
    }


@pytest.fixture
def sample_work_editions() -> dict:
    """Content API list as returned by /works/{key}/editions.json."""
    return {
        "links": {
            "self": "/works/OL45804W/editions.json",
            "work": "/works/OL45804W",
            "next": "/works/OL45804W/editions.json?offset=2",
        },
        "size": 5,
        "entries": [
            {"key": "/books/OL1M", "title": "Fantastic Mr. Fox"},
            {"key": "/books/OL2M", "title": "Fantastic Mr Fox"},
        ],
    }


@pytest.fixture
def make_response():
    """Factory for transport Responses with a JSON body."""
    return _make_response
