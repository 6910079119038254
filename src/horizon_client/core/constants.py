"""
Horizon Client Core Constants
=============================

Network hosts, transport defaults and the fixed-point amount scale. Decimal
quanta are only used at the string boundary; amounts are integers internally.
"""

from decimal import Decimal

# ---------------------------------------------------------------------------
# Networks
# ---------------------------------------------------------------------------

#: Horizon server for the public network.
HORIZON_PUBLIC_URL: str = "https://horizon.stellar.org"

#: Horizon server for the test network.
HORIZON_TEST_URL: str = "https://horizon-testnet.stellar.org"

#: Seconds before a request is abandoned by the transport.
DEFAULT_TIMEOUT: float = 30.0

DEFAULT_USER_AGENT: str = "horizon-client/0.3"


# ---------------------------------------------------------------------------
# Fixed-point amounts
# ---------------------------------------------------------------------------

#: Number of fractional digits the server uses for amounts.
AMOUNT_DECIMALS: int = 7

#: Integer bridge: number of stroops per whole unit of an asset.
STROOPS_PER_UNIT: int = 10 ** AMOUNT_DECIMALS

#: Smallest representable amount (1 stroop).
AMOUNT_QUANTUM: Decimal = Decimal("1e-7")


__all__ = [
    "HORIZON_PUBLIC_URL",
    "HORIZON_TEST_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "AMOUNT_DECIMALS",
    "STROOPS_PER_UNIT",
    "AMOUNT_QUANTUM",
]
