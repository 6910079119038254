from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"

HOST = "https://horizon-testnet.stellar.org"


# -----------------------------
# Test helpers
# -----------------------------


def load_fixture(name: str) -> Any:
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


class FakeResponse:
    """Minimal stand-in for requests.Response: status, reason and a JSON body."""

    def __init__(self, status_code: int = 200, body: Any = None, *, text: Optional[str] = None, reason: str = "OK") -> None:
        self.status_code = status_code
        self.reason = reason
        self._body = body
        self._text = text

    def json(self) -> Any:
        if self._text is not None:
            return json.loads(self._text)
        return self._body


class FakeSession:
    """Session stub recording every prepared request it is asked to send."""

    def __init__(self, response: FakeResponse) -> None:
        self.response = response
        self.sent: List[Any] = []
        self.timeouts: List[Any] = []
        self.closed = False

    def send(self, prepared, timeout=None):
        self.sent.append(prepared)
        self.timeouts.append(timeout)
        return self.response

    def close(self) -> None:
        self.closed = True


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def host() -> str:
    return HOST


@pytest.fixture()
def offer_json() -> dict:
    return load_fixture("offer.json")


@pytest.fixture()
def ledger_json() -> dict:
    return load_fixture("ledger.json")


@pytest.fixture()
def transaction_json() -> dict:
    return load_fixture("transaction.json")


@pytest.fixture()
def account_json() -> dict:
    return load_fixture("account.json")


@pytest.fixture()
def operations_page() -> dict:
    return load_fixture("operations_page.json")


@pytest.fixture()
def effects_page() -> dict:
    return load_fixture("effects_page.json")


@pytest.fixture()
def make_session():
    """Factory: make_session(status, body) -> FakeSession answering with that response."""
    def make(status_code: int = 200, body: Any = None, **kwargs) -> FakeSession:
        return FakeSession(FakeResponse(status_code, body, **kwargs))
    return make
