"""
Paginated collections.

The server wraps collections in a HAL document::

    {"_links": {"next": {"href": ...}, ...},
     "_embedded": {"records": [ ... ]}}

`Records` keeps the parsed records in order. The cursor for the next page is
the paging token of the last record; fetching that page is the caller's job
(``endpoint.with_cursor(records.next_cursor)``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Mapping, Optional, Tuple, Type, TypeVar

from ..core import DeserializationError
from .base import Resource

T = TypeVar("T", bound=Resource)


@dataclass(frozen=True)
class Records(Generic[T]):
    """One page of records of a single resource type."""

    records: Tuple[T, ...]
    next_href: Optional[str] = None

    @classmethod
    def from_json(cls, payload: Any, resource: Type[T]) -> "Records[T]":
        name = f"Records[{resource.__name__}]"
        if not isinstance(payload, Mapping):
            raise DeserializationError(name, "expected a JSON object")
        embedded = payload.get("_embedded")
        if not isinstance(embedded, Mapping):
            raise DeserializationError(name, "required field is missing", field="_embedded")
        raw = embedded.get("records")
        if not isinstance(raw, list):
            raise DeserializationError(name, "expected an array", field="_embedded.records")
        records = tuple(resource.from_json(r) for r in raw)
        return cls(records=records, next_href=_next_href(payload))

    @property
    def next_cursor(self) -> Optional[str]:
        """Paging token of the last record, or None for an empty page."""
        if not self.records:
            return None
        return self.records[-1].paging_token  # type: ignore[attr-defined]

    def is_empty(self) -> bool:
        return not self.records

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[T]:
        return iter(self.records)

    def __getitem__(self, i: int) -> T:
        return self.records[i]


def _next_href(payload: Mapping[str, Any]) -> Optional[str]:
    links = payload.get("_links")
    if not isinstance(links, Mapping):
        return None
    nxt = links.get("next")
    if isinstance(nxt, Mapping) and isinstance(nxt.get("href"), str):
        return nxt["href"]
    return None


__all__ = ["Records"]
