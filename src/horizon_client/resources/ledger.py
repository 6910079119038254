"""Ledger resource."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core import Amount
from .base import Resource, as_amount, as_datetime, as_int, as_str, json_field


@dataclass(frozen=True)
class Ledger(Resource):
    """One closed ledger in the chain, identified by its `sequence`.

    `total_coins` and `fee_pool` are native-asset amounts; the base fee and
    reserve are reported directly in stroops.
    """

    id: str = json_field(parse=as_str)
    paging_token: str = json_field(parse=as_str)
    hash: str = json_field(parse=as_str)
    sequence: int = json_field(parse=as_int)
    transaction_count: int = json_field(parse=as_int)
    operation_count: int = json_field(parse=as_int)
    closed_at: datetime = json_field(parse=as_datetime)
    total_coins: Amount = json_field(parse=as_amount)
    fee_pool: Amount = json_field(parse=as_amount)
    base_fee: int = json_field("base_fee_in_stroops", parse=as_int)
    base_reserve: int = json_field("base_reserve_in_stroops", parse=as_int)
    max_tx_set_size: int = json_field(parse=as_int)
    protocol_version: int = json_field(parse=as_int)
    # Absent for the genesis ledger.
    prev_hash: Optional[str] = json_field(parse=as_str, optional=True)

    @property
    def base_reserve_amount(self) -> Amount:
        return Amount(self.base_reserve)


__all__ = ["Ledger"]
