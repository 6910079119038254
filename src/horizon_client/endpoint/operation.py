"""Operation endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from ..resources import Effect, Operation
from .base import Endpoint, Paged
from .params import Cursor, Limit, Order


@dataclass(frozen=True)
class All(Paged, Cursor, Limit, Order):
    """``GET /operations``: every operation of every validated transaction."""

    path = ("operations",)
    resource = Operation


@dataclass(frozen=True)
class Details(Endpoint):
    """``GET /operations/{id}``."""

    path = ("operations", "{id}")
    resource = Operation

    id: int


@dataclass(frozen=True)
class Effects(Paged, Cursor, Limit, Order):
    """``GET /operations/{id}/effects``: effects caused by one operation."""

    path = ("operations", "{id}", "effects")
    resource = Effect

    id: int


__all__ = ["All", "Details", "Effects"]
