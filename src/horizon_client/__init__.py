"""
Top-level API for horizon_client.

Typed access to the Horizon HTTP API of the Stellar network:
  - endpoint: request builders, one module per resource (ledger, payment, ...)
  - resources: immutable records deserialized from the server's JSON
  - Client: synchronous executor over a `requests.Session`

Endpoints do no I/O; they can be used with any transport that accepts a
prepared `requests` request.
"""

from __future__ import annotations

from .client import Client, ClientConfig
from .core import (
    Amount,
    HorizonError,
    UriError,
    UriConstructionError,
    InvalidPath,
    PathParamParseError,
    DeserializationError,
    AmountDomainError,
    HorizonHttpError,
    HORIZON_PUBLIC_URL,
    HORIZON_TEST_URL,
)
from .endpoint import Direction, Endpoint, PageParams
from .resources import Records

__all__ = [
    "Client",
    "ClientConfig",
    "Endpoint",
    "PageParams",
    "Direction",
    "Records",
    "Amount",
    "HORIZON_PUBLIC_URL",
    "HORIZON_TEST_URL",
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
