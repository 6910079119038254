"""
Horizon Client Core
===================

Unified exports for the primitives shared by resources, endpoints and the
client: constants, the fixed-point `Amount`, and the exception hierarchy.
"""

from .constants import (
    HORIZON_PUBLIC_URL,
    HORIZON_TEST_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    AMOUNT_DECIMALS,
    STROOPS_PER_UNIT,
    AMOUNT_QUANTUM,
)

from .amounts import (
    Amount,
    stroops_from_decimal,
    decimal_from_stroops,
)

from .exc import (
    HorizonError,
    UriError,
    UriConstructionError,
    InvalidPath,
    PathParamParseError,
    DeserializationError,
    AmountDomainError,
    HorizonHttpError,
)

__all__ = [
    # constants
    "HORIZON_PUBLIC_URL",
    "HORIZON_TEST_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "AMOUNT_DECIMALS",
    "STROOPS_PER_UNIT",
    "AMOUNT_QUANTUM",
    # amounts
    "Amount",
    "stroops_from_decimal",
    "decimal_from_stroops",
    # exceptions
    "HorizonError",
    "UriError",
    "UriConstructionError",
    "InvalidPath",
    "PathParamParseError",
    "DeserializationError",
    "AmountDomainError",
    "HorizonHttpError",
]
