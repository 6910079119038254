"""
Endpoint request/response contract.

An endpoint is a frozen dataclass that declares:

- `path`: the path template, e.g. ``("ledgers", "{sequence}", "payments")``;
  every ``{name}`` is a dataclass field of the endpoint;
- `resource`: the resource type of the response;
- whether the response is a single resource or a page of `Records`
  (endpoints deriving from `Paged`).

From that declaration the base class provides the three operations shared by
every endpoint:

- ``into_request(host)`` -> prepared ``GET`` request;
- ``try_from_uri(uri)`` -> endpoint value (inverse of ``into_request``);
- ``parse_response(payload)`` -> resource or `Records` of resources.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Tuple, Type, TypeVar, Union, get_type_hints
from urllib.parse import urlsplit

import requests

from ..core import UriConstructionError
from ..resources import Records, Resource
from .params import CAPABILITIES, Direction, PageParams
from .uri import (
    capture_name,
    encode_query,
    fill_template,
    match_path,
    parse_path_param,
    split_uri,
)

EP = TypeVar("EP", bound="Endpoint")


def _parse_limit(raw: str) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise ValueError(f"not a limit: {raw!r}")
    return int(raw)


# Lenient readers for optional query values.
_QUERY_PARSERS = {
    "order": Direction,
    "cursor": str,
    "limit": _parse_limit,
}


class Endpoint:
    """Base of all endpoints. Subclasses are frozen dataclasses."""

    path: ClassVar[Tuple[str, ...]] = ()
    resource: ClassVar[Type[Resource]]
    paginated: ClassVar[bool] = False

    # ------------- building -------------

    def path_values(self) -> Dict[str, object]:
        return {name: getattr(self, name) for name in self._captures()}

    def query_string(self) -> str:
        page = getattr(self, "page", None)
        if page is None or page.is_empty():
            return ""
        return encode_query(page.pairs())

    def url(self, host: str) -> str:
        url = host.rstrip("/") + fill_template(self.path, self.path_values())
        query = self.query_string()
        if query:
            url = f"{url}?{query}"
        return url

    def into_request(self, host: str) -> requests.PreparedRequest:
        """Build the ``GET`` request for this endpoint on `host`.

        Raises UriConstructionError when the host is not an absolute http(s)
        URL or the assembled URL is rejected.
        """
        url = self.url(host)
        try:
            parts = urlsplit(host)
        except ValueError as exc:
            raise UriConstructionError(url, str(exc)) from exc
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise UriConstructionError(url, "host must be an absolute http(s) URL")
        if parts.query or parts.fragment:
            raise UriConstructionError(url, "host must not carry a query or fragment")
        try:
            return requests.Request("GET", url).prepare()
        except requests.exceptions.RequestException as exc:
            raise UriConstructionError(url, str(exc)) from exc

    # ------------- parsing -------------

    @classmethod
    def try_from_uri(cls: Type[EP], uri: str) -> EP:
        """Rebuild the endpoint a URI was made from.

        The path must match `path` exactly (InvalidPath otherwise) and path
        parameters must convert to their field type (PathParamParseError).
        Query parameters the endpoint understands are read leniently: an
        unparsable value is treated as absent.
        """
        path, params = split_uri(uri)
        captured = match_path(cls.path, path)
        hints = get_type_hints(cls)
        kwargs: Dict[str, Any] = {
            name: parse_path_param(name, raw, hints.get(name, str))
            for name, raw in captured.items()
        }
        if cls.paginated:
            page = {
                key: params.get_parse(key, _QUERY_PARSERS[key])
                for capability, key in CAPABILITIES
                if issubclass(cls, capability)
            }
            kwargs["page"] = PageParams(**page)
        return cls(**kwargs)

    def parse_response(self, payload: Any) -> Union[Resource, Records]:
        """Deserialize a decoded JSON body into this endpoint's response type."""
        if self.paginated:
            return Records.from_json(payload, self.resource)
        return self.resource.from_json(payload)

    @classmethod
    def _captures(cls) -> Tuple[str, ...]:
        return tuple(n for n in (capture_name(s) for s in cls.path) if n)


@dataclass(frozen=True)
class Paged(Endpoint):
    """Endpoint whose response is a page of `Records`."""

    paginated: ClassVar[bool] = True

    page: PageParams = field(default_factory=PageParams, kw_only=True)


__all__ = ["Endpoint", "Paged"]
