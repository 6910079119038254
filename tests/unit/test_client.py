import logging

import pytest
import requests

from horizon_client import Client, ClientConfig
from horizon_client.core import HORIZON_PUBLIC_URL, HORIZON_TEST_URL
from horizon_client.core.exc import DeserializationError, HorizonError, HorizonHttpError, UriConstructionError
from horizon_client.endpoint import ledger, payment
from horizon_client.resources import Ledger, Operation, Records


def _client(session, **config) -> Client:
    return Client(ClientConfig(**config), session=session)


def test_request_returns_the_declared_resource(make_session, ledger_json, host):
    session = make_session(200, ledger_json)
    got = _client(session, host=host).request(ledger.Details(69859))
    assert isinstance(got, Ledger)
    assert got.sequence == 69859
    assert session.sent[0].url == f"{host}/ledgers/69859"


def test_request_returns_records_for_collections(make_session, operations_page, host):
    session = make_session(200, operations_page)
    page = _client(session, host=host).request(payment.All().with_limit(4))
    assert isinstance(page, Records)
    assert all(isinstance(op, Operation) for op in page)
    assert session.sent[0].url == f"{host}/payments?limit=4"


def test_request_sets_headers_and_timeout(make_session, ledger_json):
    session = make_session(200, ledger_json)
    _client(session, timeout=2.5, user_agent="tests/1").request(ledger.Details(1))
    sent = session.sent[0]
    assert sent.method == "GET"
    assert sent.headers["User-Agent"] == "tests/1"
    assert "application/hal+json" in sent.headers["Accept"]
    assert session.timeouts == [2.5]


def test_problem_response_becomes_http_error(make_session):
    problem = {"type": "not_found", "title": "Resource Missing", "status": 404, "detail": "no such ledger"}
    session = make_session(404, problem, reason="Not Found")
    with pytest.raises(HorizonHttpError) as info:
        _client(session).request(ledger.Details(999999999))
    err = info.value
    print(f"[Client.request] 404 -> {err}")
    assert err.status_code == 404
    assert err.title == "Resource Missing"
    assert err.detail == "no such ledger"
    assert isinstance(err, HorizonError)


def test_http_error_without_problem_body_uses_reason(make_session):
    session = make_session(502, None, text="<html>bad gateway</html>", reason="Bad Gateway")
    with pytest.raises(HorizonHttpError) as info:
        _client(session).request(payment.All())
    assert info.value.title == "Bad Gateway"
    assert info.value.detail is None


def test_non_json_body_is_a_deserialization_error(make_session):
    session = make_session(200, None, text="not json")
    with pytest.raises(DeserializationError):
        _client(session).request(ledger.Details(1))


def test_body_of_the_wrong_shape_is_a_deserialization_error(make_session, ledger_json):
    session = make_session(200, ledger_json)
    with pytest.raises(DeserializationError):
        _client(session).request(ledger.All())


def test_bad_host_fails_before_sending(make_session):
    session = make_session(200, {})
    with pytest.raises(UriConstructionError):
        _client(session, host="www.google.com").request(ledger.All())
    assert session.sent == []


def test_request_is_logged_at_debug(make_session, ledger_json, caplog):
    session = make_session(200, ledger_json)
    with caplog.at_level(logging.DEBUG, logger="horizon_client.client"):
        _client(session).request(ledger.Details(69859))
    assert "/ledgers/69859" in caplog.text


def test_borrowed_session_is_not_closed(make_session):
    session = make_session()
    with _client(session):
        pass
    assert session.closed is False


def test_owned_session_is_closed():
    client = Client()
    assert isinstance(client.session, requests.Session)
    closed = []
    client.session.close = lambda: closed.append(True)
    with client:
        pass
    assert closed == [True]


def test_named_servers():
    assert Client.horizon_public().config.host == HORIZON_PUBLIC_URL
    assert Client.horizon_test().config.host == HORIZON_TEST_URL
    assert ClientConfig().host == HORIZON_TEST_URL
