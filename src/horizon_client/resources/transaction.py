"""Transaction resource."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from .base import (
    Resource,
    as_datetime,
    as_int,
    as_int_str,
    as_str,
    as_str_tuple,
    json_field,
)


@dataclass(frozen=True)
class Transaction(Resource):
    """A validated transaction and the ledger it was applied in.

    The XDR members are kept as the base64 strings the server sends; decoding
    them is left to the caller.
    """

    id: str = json_field(parse=as_str)
    paging_token: str = json_field(parse=as_str)
    hash: str = json_field(parse=as_str)
    ledger: int = json_field(parse=as_int)
    created_at: datetime = json_field(parse=as_datetime)
    source_account: str = json_field(parse=as_str)
    source_account_sequence: int = json_field(parse=as_int_str)
    fee_paid: int = json_field(parse=as_int)
    operation_count: int = json_field(parse=as_int)
    envelope_xdr: str = json_field(parse=as_str)
    result_xdr: str = json_field(parse=as_str)
    result_meta_xdr: str = json_field(parse=as_str)
    fee_meta_xdr: str = json_field(parse=as_str)
    memo_type: str = json_field(parse=as_str)
    signatures: Tuple[str, ...] = json_field(parse=as_str_tuple)
    # Not sent when memo_type is "none".
    memo: Optional[str] = json_field(parse=as_str, optional=True)


__all__ = ["Transaction"]
