"""Account endpoints, all scoped to one account id (``G...`` public key)."""

from __future__ import annotations

from dataclasses import dataclass

from ..resources import Account, DataValue, Effect, Offer, Operation, Transaction
from .base import Endpoint, Paged
from .params import Cursor, Limit, Order


@dataclass(frozen=True)
class Details(Endpoint):
    """``GET /accounts/{account_id}``: balances, signers, flags and data."""

    path = ("accounts", "{account_id}")
    resource = Account

    account_id: str


@dataclass(frozen=True)
class Data(Endpoint):
    """``GET /accounts/{account_id}/data/{key}``: one data entry."""

    path = ("accounts", "{account_id}", "data", "{key}")
    resource = DataValue

    account_id: str
    key: str


@dataclass(frozen=True)
class Transactions(Paged, Cursor, Limit, Order):
    path = ("accounts", "{account_id}", "transactions")
    resource = Transaction

    account_id: str


@dataclass(frozen=True)
class Payments(Paged, Cursor, Limit, Order):
    path = ("accounts", "{account_id}", "payments")
    resource = Operation

    account_id: str


@dataclass(frozen=True)
class Operations(Paged, Cursor, Limit, Order):
    path = ("accounts", "{account_id}", "operations")
    resource = Operation

    account_id: str


@dataclass(frozen=True)
class Effects(Paged, Cursor, Limit, Order):
    path = ("accounts", "{account_id}", "effects")
    resource = Effect

    account_id: str


@dataclass(frozen=True)
class Offers(Paged, Cursor, Limit, Order):
    """``GET /accounts/{account_id}/offers``: the account's open offers."""

    path = ("accounts", "{account_id}", "offers")
    resource = Offer

    account_id: str


__all__ = [
    "Details",
    "Data",
    "Transactions",
    "Payments",
    "Operations",
    "Effects",
    "Offers",
]
