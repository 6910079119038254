"""Resolve an incoming URI to the endpoint it addresses."""

from __future__ import annotations

from typing import Optional, Tuple, Type

from ..core import InvalidPath, PathParamParseError
from . import account, effect, ledger, operation, payment, transaction
from .base import Endpoint
from .uri import split_uri

#: Every endpoint class; templates are disjoint so order only matters for errors.
ROUTES: Tuple[Type[Endpoint], ...] = (
    ledger.All,
    ledger.Details,
    ledger.Payments,
    ledger.Transactions,
    ledger.Effects,
    ledger.Operations,
    payment.All,
    transaction.All,
    transaction.Details,
    transaction.Payments,
    transaction.Operations,
    transaction.Effects,
    operation.All,
    operation.Details,
    operation.Effects,
    effect.All,
    account.Details,
    account.Data,
    account.Transactions,
    account.Payments,
    account.Operations,
    account.Effects,
    account.Offers,
)


def resolve(uri: str) -> Endpoint:
    """Return the endpoint value for `uri`.

    A path that matches a template but carries a bad parameter (e.g.
    ``/ledgers/abc``) raises PathParamParseError; a path matching no
    template raises InvalidPath.
    """
    bad_param: Optional[PathParamParseError] = None
    for endpoint_cls in ROUTES:
        try:
            return endpoint_cls.try_from_uri(uri)
        except InvalidPath:
            continue
        except PathParamParseError as exc:
            bad_param = bad_param or exc
    if bad_param is not None:
        raise bad_param
    path, _ = split_uri(uri)
    raise InvalidPath(path, "any known endpoint")


__all__ = ["ROUTES", "resolve"]
