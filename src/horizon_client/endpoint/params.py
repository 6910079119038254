"""
Optional query parameters shared by collection endpoints.

`PageParams` is the parameter bag every paged endpoint embeds. The
capability mixins (`Cursor`, `Limit`, `Order`) add the matching ``with_*``
builder and mark which keys an endpoint understands; an endpoint opts into
each one separately.

Builders never mutate: each call returns a new endpoint value.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Tuple, TypeVar, Union

E = TypeVar("E")


class Direction(str, Enum):
    """Sort direction of a collection; serialized as ``asc`` / ``desc``."""

    ASC = "asc"
    DESC = "desc"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PageParams:
    """cursor/order/limit, each None when unset.

    Unset parameters are left off the query string entirely.
    """

    cursor: Optional[str] = None
    order: Optional[Direction] = None
    limit: Optional[int] = None

    def is_empty(self) -> bool:
        return self.order is None and self.cursor is None and self.limit is None

    def pairs(self) -> List[Tuple[str, str]]:
        """Set parameters as (key, value) in wire order: order, cursor, limit."""
        out: List[Tuple[str, str]] = []
        if self.order is not None:
            out.append(("order", self.order.value))
        if self.cursor is not None:
            out.append(("cursor", self.cursor))
        if self.limit is not None:
            out.append(("limit", str(self.limit)))
        return out


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------

class Cursor:
    """Endpoint accepts ``cursor``: start after the record with this paging token."""

    def with_cursor(self: E, cursor: str) -> E:
        if not isinstance(cursor, str) or not cursor:
            raise ValueError("cursor must be a non-empty string")
        return replace(self, page=replace(self.page, cursor=cursor))  # type: ignore[attr-defined]


class Limit:
    """Endpoint accepts ``limit``: page size, bounded by the server."""

    def with_limit(self: E, limit: int) -> E:
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise TypeError(f"limit must be an int, got {type(limit).__name__}")
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        return replace(self, page=replace(self.page, limit=limit))  # type: ignore[attr-defined]


class Order:
    """Endpoint accepts ``order``: sort direction; the server default is ascending."""

    def with_order(self: E, direction: Union[Direction, str]) -> E:
        return replace(self, page=replace(self.page, order=Direction(direction)))  # type: ignore[attr-defined]


#: Capability -> query key, in wire order.
CAPABILITIES = (
    (Order, "order"),
    (Cursor, "cursor"),
    (Limit, "limit"),
)


__all__ = ["Direction", "PageParams", "Cursor", "Limit", "Order", "CAPABILITIES"]
