"""Account resource and the values nested in it."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from ..core import Amount, DeserializationError
from .asset import AssetIdentifier
from .base import (
    Resource,
    as_amount,
    as_bool,
    as_int,
    as_int_str,
    as_str,
    json_field,
    tuple_of,
)


def _as_data(v: Any) -> Mapping[str, str]:
    if not isinstance(v, dict):
        raise TypeError(f"expected data object, got {type(v).__name__}")
    return MappingProxyType({as_str(k): as_str(x) for k, x in v.items()})


@dataclass(frozen=True)
class Balance(Resource):
    """Holding of one asset. Credit balances also carry the trustline `limit`."""

    balance: Amount = json_field(parse=as_amount)
    asset: AssetIdentifier = json_field(parse=AssetIdentifier.from_json, flatten=True)
    limit: Optional[Amount] = json_field(parse=as_amount, optional=True)


@dataclass(frozen=True)
class Signer(Resource):
    key: str = json_field(parse=as_str)
    weight: int = json_field(parse=as_int)
    type: str = json_field(parse=as_str)


@dataclass(frozen=True)
class Thresholds(Resource):
    low_threshold: int = json_field(parse=as_int)
    med_threshold: int = json_field(parse=as_int)
    high_threshold: int = json_field(parse=as_int)


@dataclass(frozen=True)
class Flags(Resource):
    auth_required: bool = json_field(parse=as_bool)
    auth_revocable: bool = json_field(parse=as_bool)


@dataclass(frozen=True)
class Account(Resource):
    """Current state of an account: balances, signers and data entries.

    `data` maps entry names to their base64 values; use `data_value` to get
    the decoded bytes.
    """

    id: str = json_field(parse=as_str)
    paging_token: str = json_field(parse=as_str)
    account_id: str = json_field(parse=as_str)
    sequence: int = json_field(parse=as_int_str)
    subentry_count: int = json_field(parse=as_int)
    thresholds: Thresholds = json_field(parse=Thresholds.from_json)
    flags: Flags = json_field(parse=Flags.from_json)
    balances: Tuple[Balance, ...] = json_field(parse=tuple_of(Balance))
    signers: Tuple[Signer, ...] = json_field(parse=tuple_of(Signer))
    data: Mapping[str, str] = json_field(parse=_as_data, optional=True, default_factory=lambda: MappingProxyType({}), hash=False)

    def balance_of(self, asset_code: str) -> Optional[Amount]:
        """Balance held in the asset with `asset_code` (``XLM`` for native)."""
        for b in self.balances:
            if b.asset.code == asset_code:
                return b.balance
        return None

    def data_value(self, name: str) -> Optional[bytes]:
        raw = self.data.get(name)
        if raw is None:
            return None
        try:
            return base64.b64decode(raw, validate=True)
        except binascii.Error as exc:
            raise DeserializationError("Account", f"data entry {name!r} is not base64", field="data") from exc


@dataclass(frozen=True)
class DataValue(Resource):
    """A single account data entry as returned by ``/accounts/{id}/data/{key}``."""

    value: str = json_field(parse=as_str)

    def decoded(self) -> bytes:
        try:
            return base64.b64decode(self.value, validate=True)
        except binascii.Error as exc:
            raise DeserializationError("DataValue", "value is not base64", field="value") from exc


__all__ = ["Account", "Balance", "Signer", "Thresholds", "Flags", "DataValue"]
