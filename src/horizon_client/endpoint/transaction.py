"""Transaction endpoints; the scoped ones take the transaction hash."""

from __future__ import annotations

from dataclasses import dataclass

from ..resources import Effect, Operation, Transaction
from .base import Endpoint, Paged
from .params import Cursor, Limit, Order


@dataclass(frozen=True)
class All(Paged, Cursor, Limit, Order):
    """``GET /transactions``: all validated transactions."""

    path = ("transactions",)
    resource = Transaction


@dataclass(frozen=True)
class Details(Endpoint):
    """``GET /transactions/{hash}``."""

    path = ("transactions", "{hash}")
    resource = Transaction

    hash: str


@dataclass(frozen=True)
class Payments(Paged, Cursor, Limit, Order):
    """``GET /transactions/{hash}/payments``."""

    path = ("transactions", "{hash}", "payments")
    resource = Operation

    hash: str


@dataclass(frozen=True)
class Operations(Paged, Cursor, Limit, Order):
    """``GET /transactions/{hash}/operations``."""

    path = ("transactions", "{hash}", "operations")
    resource = Operation

    hash: str


@dataclass(frozen=True)
class Effects(Paged, Cursor, Limit, Order):
    """``GET /transactions/{hash}/effects``."""

    path = ("transactions", "{hash}", "effects")
    resource = Effect

    hash: str


__all__ = ["All", "Details", "Payments", "Operations", "Effects"]
