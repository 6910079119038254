"""
Payment endpoints.

Payments are the operations that move value: ``create_account``,
``payment``, ``path_payment`` and ``account_merge``. They come back as
`Operation` records.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..resources import Operation
from .base import Paged
from .params import Cursor, Limit, Order

from .account import Payments as ForAccount
from .ledger import Payments as ForLedger
from .transaction import Payments as ForTransaction


@dataclass(frozen=True)
class All(Paged, Cursor, Limit, Order):
    """``GET /payments``: all payment operations in validated transactions."""

    path = ("payments",)
    resource = Operation


__all__ = ["All", "ForAccount", "ForLedger", "ForTransaction"]
