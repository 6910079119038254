"""Effect resource."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .base import Resource, as_datetime, as_int, as_str, json_field

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class Effect(Resource):
    """A change to ledger state caused by an operation.

    There are dozens of effect types; the members specific to `type` are kept
    as a read-only mapping in `details` rather than modelled one by one.
    """

    id: str = json_field(parse=as_str)
    paging_token: str = json_field(parse=as_str)
    account: str = json_field(parse=as_str)
    type: str = json_field(parse=as_str)
    type_i: int = json_field(parse=as_int)
    created_at: Optional[datetime] = json_field(parse=as_datetime, optional=True)
    details: Mapping[str, Any] = field(default_factory=lambda: _EMPTY, hash=False)

    @classmethod
    def from_json(cls, obj: Any) -> "Effect":
        effect = super().from_json(obj)
        known = {f.metadata.get("json_key") or f.name for f in fields(cls)}
        extra = {k: v for k, v in obj.items() if k not in known and not k.startswith("_")}
        return replace(effect, details=MappingProxyType(extra))


__all__ = ["Effect"]
