"""Synchronous client: send an endpoint's request and decode the response.

The client adds nothing to the request an endpoint builds besides the
headers and timeout from `ClientConfig`. It does not retry and does not
follow pagination; callers do that with ``endpoint.with_cursor(...)``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from .core import (
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    HORIZON_PUBLIC_URL,
    HORIZON_TEST_URL,
    DeserializationError,
    HorizonHttpError,
)
from .endpoint import Endpoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientConfig:
    """Client configuration.

    host: base URL of the server, without a trailing path.
    timeout: seconds, passed to the transport for connect and read.
    """
    host: str = HORIZON_TEST_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


class Client:
    """Runs endpoints against one server over a `requests.Session`."""

    def __init__(self, config: ClientConfig | None = None, session: Optional[requests.Session] = None):
        self.config = config or ClientConfig()
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    @classmethod
    def horizon_public(cls) -> "Client":
        return cls(ClientConfig(host=HORIZON_PUBLIC_URL))

    @classmethod
    def horizon_test(cls) -> "Client":
        return cls(ClientConfig(host=HORIZON_TEST_URL))

    def request(self, endpoint: Endpoint) -> Any:
        """Execute `endpoint` and return its declared response type.

        Raises
        ------
        UriConstructionError
            The endpoint could not be turned into a URL for the configured host.
        HorizonHttpError
            The server answered with a status >= 400.
        DeserializationError
            The body is not JSON or does not match the response type.
        """
        prepared = endpoint.into_request(self.config.host)
        prepared.headers["Accept"] = "application/hal+json, application/json"
        prepared.headers["User-Agent"] = self.config.user_agent

        logger.debug("GET %s", prepared.url)
        r = self.session.send(prepared, timeout=self.config.timeout)
        logger.debug("GET %s -> %s", prepared.url, r.status_code)

        if r.status_code >= 400:
            raise _http_error(r, prepared.url)
        try:
            body = r.json()
        except ValueError as exc:
            raise DeserializationError(type(endpoint).__name__, "response body is not JSON") from exc
        return endpoint.parse_response(body)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _http_error(r: requests.Response, url: Optional[str]) -> HorizonHttpError:
    # The server reports failures as problem documents with title/detail.
    title = detail = None
    try:
        problem = r.json()
    except ValueError:
        problem = None
    if isinstance(problem, dict):
        title = problem.get("title") if isinstance(problem.get("title"), str) else None
        detail = problem.get("detail") if isinstance(problem.get("detail"), str) else None
    return HorizonHttpError(r.status_code, url or "", title=title or r.reason, detail=detail)


__all__ = ["Client", "ClientConfig"]
