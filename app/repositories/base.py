"""Generic in-memory repository with integer ids, sorting, and pagination."""

from __future__ import annotations

import dataclasses
import threading
import unicodedata
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key
from numbers import Real
from typing import Any, Generic, TypeVar

from app.core.pagination import PaginationQuery

RecordT = TypeVar("RecordT")


@dataclass
class PageResult(Generic[RecordT]):
    """One page of records plus the size of the whole collection."""

    items: list[RecordT] = field(default_factory=list)
    total: int = 0


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

def _collation_key(text: str) -> tuple[str, str, str]:
    # Base letters first, then accents, then case (lowercase before uppercase).
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()
    return base, decomposed.casefold(), text.swapcase()


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_values(a: Any, b: Any) -> int:
    """Three-way comparison that never raises, whatever the value types."""
    if isinstance(a, str) and isinstance(b, str):
        return _cmp(_collation_key(a), _collation_key(b))
    if isinstance(a, bool) and isinstance(b, bool):
        return _cmp(a, b)
    if (
        isinstance(a, Real) and isinstance(b, Real)
        and not isinstance(a, bool) and not isinstance(b, bool)
    ):
        return _cmp(a, b)
    return _cmp(str(a), str(b))


def list_page(records: Sequence[RecordT], query: PaginationQuery) -> PageResult[RecordT]:
    """Sort a copy of ``records`` by ``query.sort_by`` then cut out one page.

    The sort is stable, so records comparing equal keep their relative order
    in both directions. A page past the end is empty; ``total`` always counts
    the whole collection.
    """
    total = len(records)
    sign = -1 if query.order == "desc" else 1

    def comparator(left: RecordT, right: RecordT) -> int:
        return sign * compare_values(
            getattr(left, query.sort_by, None), getattr(right, query.sort_by, None)
        )

    ordered = sorted(records, key=cmp_to_key(comparator))
    start = query.offset
    return PageResult(items=ordered[start:start + query.limit], total=total)


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------

class BaseRepository(Generic[RecordT]):
    """Generic CRUD repository over dataclass records keyed by an integer ``id``.

    Records live in an id -> record mapping in insertion order, and ids come
    from a counter that only moves forward. One lock guards every read
    snapshot and every write. Records handed out are always copies.
    """

    model: type[RecordT]

    def __init__(self, records: Iterable[RecordT] = ()):
        self._lock = threading.Lock()
        self._items: dict[int, RecordT] = {}
        for record in records:
            record_id = record.id  # type: ignore[attr-defined]
            if record_id in self._items:
                raise ValueError(f"Duplicate {self.model.__name__} id {record_id}")
            self._items[record_id] = dataclasses.replace(record)
        self._next_id = max(self._items, default=0) + 1

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _copy(record: RecordT) -> RecordT:
        return dataclasses.replace(record)  # type: ignore[type-var]

    def _snapshot(self) -> list[RecordT]:
        with self._lock:
            return [self._copy(r) for r in self._items.values()]

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def all(self) -> list[RecordT]:
        return self._snapshot()

    def get_by_id(self, entity_id: int) -> RecordT | None:
        with self._lock:
            record = self._items.get(entity_id)
            return self._copy(record) if record is not None else None

    def list(self, query: PaginationQuery) -> PageResult[RecordT]:
        """Return one sorted page plus the full collection size."""
        return list_page(self._snapshot(), query)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def create(self, **kwargs: Any) -> RecordT:
        kwargs.pop("id", None)
        with self._lock:
            instance = self.model(id=self._next_id, **kwargs)
            self._items[self._next_id] = instance
            self._next_id += 1
            return self._copy(instance)

    def update(self, entity_id: int, **kwargs: Any) -> RecordT | None:
        kwargs.pop("id", None)
        with self._lock:
            current = self._items.get(entity_id)
            if current is None:
                return None
            updated = dataclasses.replace(current, **kwargs)  # type: ignore[type-var]
            self._items[entity_id] = updated
            return self._copy(updated)

    def delete(self, entity_id: int) -> bool:
        with self._lock:
            return self._items.pop(entity_id, None) is not None
