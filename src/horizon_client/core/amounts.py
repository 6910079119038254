"""
Amount primitive: fixed-point integer stroops.

- The server reports amounts as decimal strings with seven fractional digits
  (e.g. "23.6692509"); internally they are integers in stroops (236692509).
- Non-negative domain: negative values are rejected at input.
- Strings finer than one stroop are rejected rather than rounded, so a parsed
  amount always formats back to the value the server sent.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from .constants import AMOUNT_DECIMALS, AMOUNT_QUANTUM, STROOPS_PER_UNIT
from .exc import AmountDomainError


# ----------------------------
# Decimal bridges (I/O only)
# ----------------------------

def stroops_from_decimal(x: Decimal) -> int:
    """Convert a Decimal amount to whole stroops; it must sit on the stroop grid."""
    if x.is_nan() or x.is_infinite():
        raise AmountDomainError("stroops_from_decimal: invalid Decimal")
    if x < 0:
        raise AmountDomainError("stroops_from_decimal: negative not allowed")
    q = x / AMOUNT_QUANTUM
    if q != q.to_integral_value():
        raise AmountDomainError(
            f"stroops_from_decimal: {x} has more than {AMOUNT_DECIMALS} fractional digits"
        )
    return int(q)


def decimal_from_stroops(s: int) -> Decimal:
    """Return the Decimal amount for integer stroops (I/O/display only)."""
    if not isinstance(s, int):
        raise AmountDomainError("decimal_from_stroops: stroops must be int")
    if s < 0:
        raise AmountDomainError("decimal_from_stroops: stroops must be >= 0")
    return Decimal(s) * AMOUNT_QUANTUM


# ----------------------------
# Amount (integer stroops)
# ----------------------------

@dataclass(frozen=True, order=True)
class Amount:
    """Asset amount in integer stroops (non-negative domain)."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise AmountDomainError("Amount must be an integer number of stroops")
        if self.value < 0:
            raise AmountDomainError("Amount must be >= 0 stroops")

    @classmethod
    def from_str(cls, text: str) -> "Amount":
        """Parse the server's decimal representation, e.g. ``"7.7400000"``."""
        try:
            d = Decimal(text.strip())
        except (InvalidOperation, AttributeError) as exc:
            raise AmountDomainError(f"not a decimal amount: {text!r}") from exc
        return cls(stroops_from_decimal(d))

    @classmethod
    def from_units(cls, units: int) -> "Amount":
        """Whole asset units, e.g. ``Amount.from_units(10)`` is 10.0000000."""
        if units < 0:
            raise AmountDomainError(f"negative units not allowed: {units}")
        return cls(units * STROOPS_PER_UNIT)

    def is_zero(self) -> bool:
        return self.value == 0

    def to_decimal(self) -> Decimal:
        return decimal_from_stroops(self.value)

    def __str__(self) -> str:
        whole, frac = divmod(self.value, STROOPS_PER_UNIT)
        return f"{whole}.{frac:0{AMOUNT_DECIMALS}d}"

    # Basic arithmetic in integer domain
    def __add__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            raise AmountDomainError("Amount arithmetic requires Amount operands")
        return Amount(self.value + other.value)

    def __sub__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            raise AmountDomainError("Amount arithmetic requires Amount operands")
        if self.value < other.value:
            raise AmountDomainError("Amount subtraction underflow")
        return Amount(self.value - other.value)

    def mul_by_scalar(self, k: int) -> "Amount":
        if k < 0:
            raise AmountDomainError(f"negative scalar not allowed: k={k}")
        return Amount(self.value * k)


__all__ = [
    "Amount",
    "stroops_from_decimal",
    "decimal_from_stroops",
]
