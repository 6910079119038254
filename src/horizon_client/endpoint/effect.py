"""Effect endpoints. Scoped variants live with their parent resource."""

from __future__ import annotations

from dataclasses import dataclass

from ..resources import Effect
from .base import Paged
from .params import Cursor, Limit, Order

from .account import Effects as ForAccount
from .ledger import Effects as ForLedger
from .operation import Effects as ForOperation
from .transaction import Effects as ForTransaction


@dataclass(frozen=True)
class All(Paged, Cursor, Limit, Order):
    """``GET /effects``: all effects."""

    path = ("effects",)
    resource = Effect


__all__ = ["All", "ForAccount", "ForLedger", "ForOperation", "ForTransaction"]
