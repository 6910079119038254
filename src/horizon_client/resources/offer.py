"""Offers and their price ratio."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, NamedTuple

from ..core import Amount
from .asset import AssetIdentifier
from .base import Resource, as_amount, as_int, as_str, json_field


class PriceRatio(NamedTuple):
    """Exact price as numerator/denominator (``price_r`` on the wire)."""

    numerator: int
    denominator: int

    @classmethod
    def from_json(cls, obj: Any) -> "PriceRatio":
        if not isinstance(obj, dict):
            raise TypeError(f"expected price object, got {type(obj).__name__}")
        try:
            n, d = obj["n"], obj["d"]
        except KeyError as exc:
            raise ValueError(f"price ratio missing {exc.args[0]!r}") from exc
        n, d = as_int(n), as_int(d)
        if d == 0:
            raise ValueError("price ratio denominator is zero")
        return cls(n, d)

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def to_decimal(self) -> Decimal:
        """Decimal form of the ratio, for display only."""
        return Decimal(self.numerator) / Decimal(self.denominator)


@dataclass(frozen=True)
class Offer(Resource):
    """A standing order to exchange `selling` for `buying`.

    `amount` is how much of `selling` is on offer; `price` is how many units
    of `buying` one unit of `selling` costs.
    """

    id: int = json_field(parse=as_int)
    paging_token: str = json_field(parse=as_str)
    seller: str = json_field(parse=as_str)
    selling: AssetIdentifier = json_field(parse=AssetIdentifier.from_json)
    buying: AssetIdentifier = json_field(parse=AssetIdentifier.from_json)
    amount: Amount = json_field(parse=as_amount)
    price_ratio: PriceRatio = json_field("price_r", parse=PriceRatio.from_json)
    price: Amount = json_field(parse=as_amount)


__all__ = ["Offer", "PriceRatio"]
