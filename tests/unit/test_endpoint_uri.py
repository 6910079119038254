import logging

import pytest

from horizon_client.core.exc import InvalidPath, PathParamParseError, UriError
from horizon_client.endpoint import (
    ROUTES,
    Direction,
    PageParams,
    account,
    ledger,
    operation,
    payment,
    resolve,
    transaction,
)
from horizon_client.endpoint.uri import QueryParams, match_path

ACCOUNT = "GAIH3ULLFQ4DGSECF2AR555KZ4KNDGEKN4AFI4SU2M7B43MGK3QJZNSR"


# -----------------------------
# try_from_uri
# -----------------------------

def test_parses_query_params_from_uri():
    ep = ledger.All.try_from_uri("/ledgers?order=desc&cursor=CURSOR&limit=123")
    assert ep.page.order is Direction.DESC
    assert ep.page.cursor == "CURSOR"
    assert ep.page.limit == 123


def test_parses_ledger_payments_from_uri():
    ep = ledger.Payments.try_from_uri("/ledgers/123/payments?cursor=CURSOR&order=desc&limit=123")
    assert ep.sequence == 123
    assert ep.page.limit == 123
    assert ep.page.cursor == "CURSOR"
    assert ep.page.order is Direction.DESC


@pytest.mark.parametrize(
    "cls,uri,field,value",
    [
        (ledger.Transactions, "/ledgers/7/transactions", "sequence", 7),
        (ledger.Effects, "/ledgers/7/effects", "sequence", 7),
        (ledger.Operations, "/ledgers/7/operations", "sequence", 7),
        (transaction.Details, "/transactions/abc123", "hash", "abc123"),
        (operation.Details, "/operations/12884905985", "id", 12884905985),
        (account.Offers, f"/accounts/{ACCOUNT}/offers", "account_id", ACCOUNT),
    ],
)
def test_path_params_are_captured_with_their_type(cls, uri, field, value):
    ep = cls.try_from_uri(uri)
    assert getattr(ep, field) == value
    assert type(getattr(ep, field)) is type(value)


def test_absolute_uri_is_accepted(host):
    ep = ledger.Details.try_from_uri(f"{host}/ledgers/42")
    assert ep == ledger.Details(42)


def test_no_query_means_empty_page():
    assert ledger.Payments.try_from_uri("/ledgers/1/payments").page == PageParams()


# -----------------------------
# Failures
# -----------------------------

@pytest.mark.parametrize(
    "uri",
    [
        "/accounts/123/payments",
        "/ledgers/123",
        "/ledgers/123/payments/extra",
        "/ledgers",
        "/",
    ],
)
def test_path_mismatch_is_invalid_path(uri):
    print(f"[try_from_uri] ledger.Payments <- {uri!r}: expect InvalidPath")
    with pytest.raises(InvalidPath) as info:
        ledger.Payments.try_from_uri(uri)
    assert isinstance(info.value, UriError)


@pytest.mark.parametrize("seq", ["abc", "-1", "1.5", "+3", "12a", "\u0663", "\uff11\uff12"])
def test_non_numeric_sequence_is_a_path_param_error(seq):
    with pytest.raises(PathParamParseError) as info:
        ledger.Payments.try_from_uri(f"/ledgers/{seq}/payments")
    assert info.value.name == "sequence"


def test_all_ledgers_checks_its_path_too():
    with pytest.raises(InvalidPath):
        ledger.All.try_from_uri("/payments?limit=1")


# -----------------------------
# Lenient optional parameters
# -----------------------------

@pytest.mark.parametrize(
    "query,expected",
    [
        ("limit=abc", PageParams()),
        ("limit=-5", PageParams()),
        ("order=sideways", PageParams()),
        ("order=DESC", PageParams()),
        ("cursor=", PageParams()),
        ("order=sideways&limit=3", PageParams(limit=3)),
        ("limit=3&limit=9", PageParams(limit=3)),
        ("foo=bar&cursor=now", PageParams(cursor="now")),
        ("limit=\u0663", PageParams()),
        ("limit=\uff15", PageParams()),
    ],
)
def test_malformed_optional_values_are_silently_absent(query, expected):
    # Bad optional values do not raise; they read as "not set".
    ep = ledger.All.try_from_uri(f"/ledgers?{query}")
    assert ep.page == expected


def test_dropped_values_are_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="horizon_client.endpoint.uri"):
        ledger.All.try_from_uri("/ledgers?limit=abc")
    assert "limit" in caplog.text


def test_query_params_lookup():
    q = QueryParams("a=1&b=x")
    assert q.get("a") == "1"
    assert q.get_parse("a", int) == 1
    assert q.get_parse("b", int) is None
    assert q.get_parse("missing", int) is None


def test_match_path_decodes_segments():
    assert match_path(("accounts", "{account_id}"), "/accounts/G%41") == {"account_id": "GA"}


# -----------------------------
# Round trip
# -----------------------------

ROUND_TRIP = [
    ledger.All(),
    ledger.All().with_cursor("CURSOR").with_limit(123).with_order(Direction.DESC),
    ledger.Details(12345),
    ledger.Payments(123).with_cursor("12884905985-2"),
    ledger.Operations(1).with_order(Direction.ASC),
    payment.All().with_limit(200),
    ledger.All().with_limit(0),
    transaction.Effects("5fef21d5").with_cursor("now"),
    operation.Details(12884905985),
    account.Data(ACCOUNT, "my key/1"),
    account.Offers(ACCOUNT).with_cursor("a b&c").with_limit(1),
]


@pytest.mark.parametrize("ep", ROUND_TRIP)
def test_round_trip_through_request_uri(ep, host):
    url = ep.into_request(host).url
    back = type(ep).try_from_uri(url)
    print(f"[round-trip] {ep!r} -> {url} -> {back!r}")
    assert back == ep


@pytest.mark.parametrize("ep", ROUND_TRIP)
def test_resolve_finds_the_endpoint(ep, host):
    assert resolve(ep.into_request(host).url) == ep


def test_resolve_errors():
    with pytest.raises(InvalidPath):
        resolve("/nope/1")
    with pytest.raises(PathParamParseError):
        resolve("/ledgers/abc")


def test_route_templates_are_distinct():
    assert len({cls.path for cls in ROUTES}) == len(ROUTES)
