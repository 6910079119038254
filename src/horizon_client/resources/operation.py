"""
Operations and their type-specific details.

Every operation shares the envelope fields on `Operation`; the remaining
members depend on the operation ``type`` and are parsed into one of the
details classes below (`Operation.details`).
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Optional, Tuple, Type, Union

from ..core import Amount, DeserializationError
from .asset import AssetIdentifier
from .base import (
    Resource,
    as_amount,
    as_bool,
    as_datetime,
    as_int,
    as_int_str,
    as_str,
    json_field,
)
from .offer import PriceRatio


def _as_int_tuple(v: Any) -> Tuple[int, ...]:
    if not isinstance(v, list):
        raise TypeError(f"expected array, got {type(v).__name__}")
    return tuple(as_int(x) for x in v)


# ---------------------------------------------------------------------------
# Details per operation type
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CreateAccount(Resource):
    """Funds and creates a new account."""

    funder: str = json_field(parse=as_str)
    account: str = json_field(parse=as_str)
    starting_balance: Amount = json_field(parse=as_amount)


@dataclass(frozen=True)
class Payment(Resource):
    """Sends `amount` of `asset` between two accounts."""

    from_account: str = json_field("from", parse=as_str)
    to_account: str = json_field("to", parse=as_str)
    asset: AssetIdentifier = json_field(parse=AssetIdentifier.from_json, flatten=True)
    amount: Amount = json_field(parse=as_amount)


@dataclass(frozen=True)
class PathPayment(Resource):
    """Payment converted through the order books.

    `source_asset` is debited (at most `source_max`); `asset` is credited.
    """

    from_account: str = json_field("from", parse=as_str)
    to_account: str = json_field("to", parse=as_str)
    asset: AssetIdentifier = json_field(parse=AssetIdentifier.from_json, flatten=True)
    amount: Amount = json_field(parse=as_amount)
    source_asset: AssetIdentifier = json_field(parse=AssetIdentifier.prefixed("source_"), flatten=True)
    source_max: Amount = json_field(parse=as_amount)
    source_amount: Amount = json_field(parse=as_amount)


@dataclass(frozen=True)
class CreatePassiveOffer(Resource):
    amount: Amount = json_field(parse=as_amount)
    price: Amount = json_field(parse=as_amount)
    price_ratio: PriceRatio = json_field("price_r", parse=PriceRatio.from_json)
    buying: AssetIdentifier = json_field(parse=AssetIdentifier.prefixed("buying_"), flatten=True)
    selling: AssetIdentifier = json_field(parse=AssetIdentifier.prefixed("selling_"), flatten=True)


@dataclass(frozen=True)
class ManageOffer(CreatePassiveOffer):
    """Creates, updates or deletes (amount 0) the offer `offer_id`; 0 creates."""

    offer_id: int = json_field(parse=as_int_str)


@dataclass(frozen=True)
class SetOptions(Resource):
    """Account option changes; only the options that changed are present."""

    inflation_dest: Optional[str] = json_field(parse=as_str, optional=True)
    home_domain: Optional[str] = json_field(parse=as_str, optional=True)
    master_key_weight: Optional[int] = json_field(parse=as_int, optional=True)
    low_threshold: Optional[int] = json_field(parse=as_int, optional=True)
    med_threshold: Optional[int] = json_field(parse=as_int, optional=True)
    high_threshold: Optional[int] = json_field(parse=as_int, optional=True)
    signer_key: Optional[str] = json_field(parse=as_str, optional=True)
    signer_weight: Optional[int] = json_field(parse=as_int, optional=True)
    set_flags: Tuple[int, ...] = json_field(parse=_as_int_tuple, optional=True, default=())
    clear_flags: Tuple[int, ...] = json_field(parse=_as_int_tuple, optional=True, default=())


@dataclass(frozen=True)
class ChangeTrust(Resource):
    asset: AssetIdentifier = json_field(parse=AssetIdentifier.from_json, flatten=True)
    trustee: str = json_field(parse=as_str)
    trustor: str = json_field(parse=as_str)
    limit: Amount = json_field(parse=as_amount)


@dataclass(frozen=True)
class AllowTrust(Resource):
    asset: AssetIdentifier = json_field(parse=AssetIdentifier.from_json, flatten=True)
    trustee: str = json_field(parse=as_str)
    trustor: str = json_field(parse=as_str)
    authorize: bool = json_field(parse=as_bool)


@dataclass(frozen=True)
class AccountMerge(Resource):
    """Removes `account` and transfers its native balance `into` another."""

    account: str = json_field(parse=as_str)
    into: str = json_field(parse=as_str)


@dataclass(frozen=True)
class Inflation(Resource):
    pass


@dataclass(frozen=True)
class ManageData(Resource):
    """Set, modify or delete a data entry (name/value pair) for an account.

    `value` is base64 as sent by the server; it is absent when the entry is
    deleted.
    """

    name: str = json_field(parse=as_str)
    value: Optional[str] = json_field(parse=as_str, optional=True)

    @property
    def is_delete(self) -> bool:
        return self.value is None

    def decoded_value(self) -> Optional[bytes]:
        if self.value is None:
            return None
        try:
            return base64.b64decode(self.value, validate=True)
        except binascii.Error as exc:
            raise DeserializationError("ManageData", "value is not base64", field="value") from exc


OperationDetails = Union[
    CreateAccount,
    Payment,
    PathPayment,
    ManageOffer,
    CreatePassiveOffer,
    SetOptions,
    ChangeTrust,
    AllowTrust,
    AccountMerge,
    Inflation,
    ManageData,
]

OPERATION_KINDS: Dict[str, Type[Resource]] = {
    "create_account": CreateAccount,
    "payment": Payment,
    "path_payment": PathPayment,
    "manage_offer": ManageOffer,
    "create_passive_offer": CreatePassiveOffer,
    "set_options": SetOptions,
    "change_trust": ChangeTrust,
    "allow_trust": AllowTrust,
    "account_merge": AccountMerge,
    "inflation": Inflation,
    "manage_data": ManageData,
}


# ---------------------------------------------------------------------------
# Operation envelope
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Operation(Resource):
    """An individual action within a transaction.

    `details` holds the type-specific members, e.g. a `Payment` for
    ``type == "payment"``.
    """

    id: int = json_field(parse=as_int_str)
    paging_token: str = json_field(parse=as_str)
    source_account: str = json_field(parse=as_str)
    type: str = json_field(parse=as_str)
    type_i: int = json_field(parse=as_int)
    created_at: datetime = json_field(parse=as_datetime)
    transaction_hash: str = json_field(parse=as_str)
    details: Optional[OperationDetails] = field(default=None)

    @classmethod
    def from_json(cls, obj: Any) -> "Operation":
        op = super().from_json(obj)
        kind = OPERATION_KINDS.get(op.type)
        if kind is None:
            raise DeserializationError(cls.__name__, f"unknown operation type {op.type!r}", field="type")
        return replace(op, details=kind.from_json(obj))

    @property
    def transaction(self) -> str:
        """Hash of the transaction this operation belongs to."""
        return self.transaction_hash


__all__ = [
    "Operation",
    "OperationDetails",
    "OPERATION_KINDS",
    "CreateAccount",
    "Payment",
    "PathPayment",
    "ManageOffer",
    "CreatePassiveOffer",
    "SetOptions",
    "ChangeTrust",
    "AllowTrust",
    "AccountMerge",
    "Inflation",
    "ManageData",
]
