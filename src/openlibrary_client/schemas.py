"""Pydantic schemas for transport responses and normalized results.

Open Library answers in several shapes: the content API wraps lists in an
``entries`` object, the query API returns a bare array, and record lookups
return a single object. ``ResultPage`` is the uniform envelope the client
reshapes list-style answers into.
"""

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Response(BaseModel):
    """Raw HTTP response as returned by the request handler."""

    status: int = Field(..., ge=100)
    body: str = ""
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status < 400


class Pagination(BaseModel):
    """Pagination details derived from limit, page and total."""

    current_page: int = Field(..., ge=1)
    per_page: int = Field(..., ge=0)
    total_items: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=1)

    @classmethod
    def compute(cls, total_items: int, limit: int, page: int) -> "Pagination":
        """Build pagination for a page of ``limit`` items out of ``total_items``.

        A limit of 0 means "everything on one page".
        """
        total_items = max(0, total_items)
        total_pages = max(1, math.ceil(total_items / limit)) if limit > 0 else 1
        return cls(
            current_page=page,
            per_page=limit,
            total_items=total_items,
            total_pages=total_pages,
        )


class ResultPage(BaseModel):
    """Normalized list result with optional pagination.

    Single-object payloads on paginated endpoints land in ``record``; their
    keys that do not clash with the envelope fields are also kept as extras.
    """

    model_config = ConfigDict(extra="allow")

    total: int = Field(default=0, ge=0)
    items: list[Any] = Field(default_factory=list)
    links: Optional[Any] = None
    pagination: Optional[Pagination] = None
    record: Optional[dict[str, Any]] = None

    @classmethod
    def from_normalized(cls, data: Any, limit: int, page: int) -> "ResultPage":
        """Wrap a normalized payload and attach pagination information."""
        if is_envelope(data):
            fields: dict[str, Any] = dict(data)
        elif isinstance(data, dict):
            fields = {k: v for k, v in data.items() if k not in cls.model_fields}
            fields["record"] = data
        else:
            # Scalar payloads carry no total
            fields = {"items": list(data) if isinstance(data, list) else [data]}

        total = _coerce_total(fields.get("total"))
        fields["total"] = total
        fields["pagination"] = Pagination.compute(total, limit, page)
        return cls(**fields)


ENVELOPE_KEYS = frozenset({"total", "items", "links"})


def is_envelope(data: Any) -> bool:
    """True if ``data`` has the ``{total, items, links}`` shape of a normalized list."""
    return (
        isinstance(data, dict)
        and set(data) <= ENVELOPE_KEYS
        and isinstance(data.get("items"), list)
    )


def _coerce_total(value: Any) -> int:
    """Convert an upstream total to a non-negative int, defaulting to 0."""
    if value is None:
        return 0
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0
