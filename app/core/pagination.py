"""Pagination helpers for list endpoints.

Query parameters arrive untyped and untrusted, so nothing here raises:
malformed values fall back to defaults and oversized limits are capped.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal

from fastapi import Request
from pydantic import BaseModel, Field

SortOrder = Literal["asc", "desc"]

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100
DEFAULT_SORT_FIELD = "id"

# Leading integer of a string, the way a base-10 parseInt reads it
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


@dataclass(frozen=True)
class PaginationQuery:
    """Normalised `?page=1&limit=20&sortBy=id&order=asc`. Every field is in bounds."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: str = DEFAULT_SORT_FIELD
    order: SortOrder = "asc"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PaginationMeta(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int = Field(alias="totalPages")
    has_next: bool = Field(alias="hasNext")
    has_prev: bool = Field(alias="hasPrev")
    sort_by: str = Field(alias="sortBy")
    order: SortOrder

    model_config = {"populate_by_name": True}


def _parse_positive_int(value: Any, fallback: int) -> int:
    if not isinstance(value, str):
        return fallback
    match = _LEADING_INT.match(value)
    if match is None:
        return fallback
    n = int(match.group(1))
    return n if n >= 1 else fallback


def normalize_query(
    query: Mapping[str, Any], allowed_sort_fields: Iterable[str]
) -> PaginationQuery:
    """Turn raw query parameters into a bounded :class:`PaginationQuery`.

    Only string values are considered; anything else (a list from a repeated
    key, a number, ``None``) counts as absent. ``sortBy`` outside the
    whitelist falls back to ``id`` and any ``order`` other than ``desc`` is
    ascending.
    """
    page = _parse_positive_int(query.get("page"), DEFAULT_PAGE)
    limit = min(_parse_positive_int(query.get("limit"), DEFAULT_LIMIT), MAX_LIMIT)

    sort_by = query.get("sortBy")
    if not isinstance(sort_by, str) or sort_by not in set(allowed_sort_fields):
        sort_by = DEFAULT_SORT_FIELD

    order: SortOrder = "desc" if query.get("order") == "desc" else "asc"

    return PaginationQuery(page=page, limit=limit, sort_by=sort_by, order=order)


def build_meta(query: PaginationQuery, total: int) -> PaginationMeta:
    """Derive client-facing pagination metadata. ``totalPages`` is never below 1."""
    total_pages = max(1, math.ceil(total / query.limit))
    return PaginationMeta(
        page=query.page,
        limit=query.limit,
        total=total,
        total_pages=total_pages,
        has_next=query.page < total_pages,
        has_prev=query.page > 1,
        sort_by=query.sort_by,
        order=query.order,
    )


def raw_query_params(request: Request) -> dict[str, str | list[str]]:
    """Query string as a plain mapping; repeated keys become lists."""
    raw: dict[str, str | list[str]] = {}
    for key in request.query_params.keys():
        values = request.query_params.getlist(key)
        raw[key] = values[0] if len(values) == 1 else values
    return raw


class PaginationParams:
    """FastAPI dependency for `?page=1&limit=20&sortBy=id&order=asc`.

    Unlike declared ``Query`` parameters, bad values are never rejected with a
    422; they are normalised against ``allowed_sort_fields``.
    """

    def __init__(self, allowed_sort_fields: Iterable[str]):
        self.allowed_sort_fields = tuple(allowed_sort_fields)

    def __call__(self, request: Request) -> PaginationQuery:
        return normalize_query(raw_query_params(request), self.allowed_sort_fields)
