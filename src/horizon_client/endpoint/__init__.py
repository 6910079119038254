"""
Endpoints of the Horizon HTTP API, one module per resource.

    from horizon_client.endpoint import ledger, Direction

    ep = ledger.Payments(123).with_limit(10).with_order(Direction.DESC)
    request = ep.into_request("https://horizon-testnet.stellar.org")
"""

from .base import Endpoint, Paged
from .params import Cursor, Direction, Limit, Order, PageParams

from . import account, effect, ledger, operation, payment, transaction
from .routes import ROUTES, resolve

__all__ = [
    "Endpoint",
    "Paged",
    "PageParams",
    "Direction",
    "Cursor",
    "Limit",
    "Order",
    "account",
    "effect",
    "ledger",
    "operation",
    "payment",
    "transaction",
    "ROUTES",
    "resolve",
]
