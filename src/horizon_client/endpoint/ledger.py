"""
Ledger endpoints.

``ledger.All`` pages through every ledger; the others are scoped to one
ledger by its sequence number (the ledger's height in the chain).
"""

from __future__ import annotations

from dataclasses import dataclass

from ..resources import Effect, Ledger, Operation, Transaction
from .base import Endpoint, Paged
from .params import Cursor, Limit, Order


@dataclass(frozen=True)
class All(Paged, Cursor, Limit, Order):
    """``GET /ledgers``: all ledgers."""

    path = ("ledgers",)
    resource = Ledger


@dataclass(frozen=True)
class Details(Endpoint):
    """``GET /ledgers/{sequence}``: a single ledger.

    ``Details(12345)`` asks for the 12345th ledger of the chain.
    """

    path = ("ledgers", "{sequence}")
    resource = Ledger

    sequence: int


@dataclass(frozen=True)
class Payments(Paged, Cursor, Limit, Order):
    """``GET /ledgers/{sequence}/payments``: payment operations in a ledger."""

    path = ("ledgers", "{sequence}", "payments")
    resource = Operation

    sequence: int


@dataclass(frozen=True)
class Transactions(Paged, Cursor, Limit, Order):
    """``GET /ledgers/{sequence}/transactions``."""

    path = ("ledgers", "{sequence}", "transactions")
    resource = Transaction

    sequence: int


@dataclass(frozen=True)
class Effects(Paged, Cursor, Limit, Order):
    """``GET /ledgers/{sequence}/effects``."""

    path = ("ledgers", "{sequence}", "effects")
    resource = Effect

    sequence: int


@dataclass(frozen=True)
class Operations(Paged, Cursor, Limit, Order):
    """``GET /ledgers/{sequence}/operations``."""

    path = ("ledgers", "{sequence}", "operations")
    resource = Operation

    sequence: int


__all__ = ["All", "Details", "Payments", "Transactions", "Effects", "Operations"]
