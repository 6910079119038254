"""Asset identifiers as reported by the server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from .base import Resource, as_str, json_field

NATIVE = "native"
NATIVE_CODE = "XLM"


@dataclass(frozen=True)
class AssetIdentifier(Resource):
    """An asset: the native lumen or a credit issued by an account.

    Credits carry both `asset_code` and `asset_issuer`; the native asset
    carries neither.
    """

    asset_type: str = json_field(parse=as_str)
    asset_code: Optional[str] = json_field(parse=as_str, optional=True)
    asset_issuer: Optional[str] = json_field(parse=as_str, optional=True)

    def __post_init__(self):
        if self.asset_type != NATIVE and (self.asset_code is None or self.asset_issuer is None):
            raise ValueError(f"{self.asset_type} asset requires asset_code and asset_issuer")

    @property
    def is_native(self) -> bool:
        return self.asset_type == NATIVE

    @property
    def code(self) -> str:
        """Asset code, ``XLM`` for the native asset."""
        return NATIVE_CODE if self.is_native else str(self.asset_code)

    @classmethod
    def prefixed(cls, prefix: str) -> Callable[[Any], "AssetIdentifier"]:
        """Parser for assets inlined with a key prefix, e.g. ``send_asset_type``."""
        def parse(obj: Mapping[str, Any]) -> "AssetIdentifier":
            return cls.from_json({
                key[len(prefix):]: value
                for key, value in obj.items()
                if key.startswith(prefix + "asset_")
            })
        return parse

    def __str__(self) -> str:
        if self.is_native:
            return NATIVE_CODE
        return f"{self.asset_code}:{self.asset_issuer}"


__all__ = ["AssetIdentifier", "NATIVE"]
