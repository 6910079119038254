import pytest

from horizon_client.core import Amount
from horizon_client.core.exc import DeserializationError
from horizon_client.endpoint import ledger, payment
from horizon_client.resources import (
    AccountMerge,
    CreateAccount,
    CreatePassiveOffer,
    Effect,
    ManageData,
    ManageOffer,
    Operation,
    PathPayment,
    Payment,
    Records,
    SetOptions,
)


def _records(page):
    return page["_embedded"]["records"]


# -----------------------------
# Operations
# -----------------------------

def test_operation_envelope(operations_page):
    op = Operation.from_json(_records(operations_page)[0])
    assert op.id == 12884905985
    assert op.type == "create_account"
    assert op.type_i == 0
    assert op.transaction == "3389e9f0f1a65f19736cacf544c2e825313e8447f569233bb8db39aa607c8889"


def test_operation_details_dispatch_on_type(operations_page):
    ops = [Operation.from_json(o) for o in _records(operations_page)]
    kinds = [type(op.details) for op in ops]
    print("[Operation.details] kinds ->", [k.__name__ for k in kinds])
    assert kinds == [CreateAccount, Payment, ManageData, ManageOffer]


def test_create_account_details(operations_page):
    details = Operation.from_json(_records(operations_page)[0]).details
    assert details.starting_balance == Amount.from_units(10_000)
    assert details.account == "GAIH3ULLFQ4DGSECF2AR555KZ4KNDGEKN4AFI4SU2M7B43MGK3QJZNSR"


def test_payment_details(operations_page):
    details = Operation.from_json(_records(operations_page)[1]).details
    assert details.from_account == "GAIH3ULLFQ4DGSECF2AR555KZ4KNDGEKN4AFI4SU2M7B43MGK3QJZNSR"
    assert details.to_account == "GDWNY2POLGK65VVKIH5KQSH7VWLKRTQ5M6ADLJAYC2UEHEBEARCZJWWI"
    assert details.asset.is_native
    assert details.amount == Amount.from_units(100)


def test_manage_data_details(operations_page):
    details = Operation.from_json(_records(operations_page)[2]).details
    assert details.name == "lang"
    assert details.value == "ZW4tVVM="
    assert details.decoded_value() == b"en-US"
    assert not details.is_delete


def test_manage_data_without_value_is_a_delete():
    md = ManageData.from_json({"name": "lang"})
    assert md.is_delete
    assert md.decoded_value() is None


def test_manage_offer_details(operations_page):
    details = Operation.from_json(_records(operations_page)[3]).details
    assert details.offer_id == 0
    assert details.price_ratio == (1, 4)
    assert details.buying.asset_code == "USD"
    assert details.selling.is_native
    assert isinstance(details, CreatePassiveOffer)


def test_path_payment_details():
    details = PathPayment.from_json({
        "from": "GA", "to": "GB",
        "asset_type": "credit_alphanum4", "asset_code": "EUR", "asset_issuer": "GI",
        "amount": "10.0000000",
        "source_asset_type": "native",
        "source_max": "12.0000000",
        "source_amount": "11.5000000",
    })
    assert details.asset.code == "EUR"
    assert details.source_asset.is_native
    assert details.source_amount == Amount.from_str("11.5")


def test_set_options_fields_are_optional():
    details = SetOptions.from_json({"home_domain": "example.com", "set_flags": [1, 2]})
    assert details.home_domain == "example.com"
    assert details.set_flags == (1, 2)
    assert details.clear_flags == ()
    assert details.signer_key is None


def test_account_merge_details():
    assert AccountMerge.from_json({"account": "GA", "into": "GB"}).into == "GB"


def test_unknown_operation_type_fails(operations_page):
    raw = dict(_records(operations_page)[0], type="bump_everything")
    with pytest.raises(DeserializationError) as info:
        Operation.from_json(raw)
    assert info.value.field == "type"


def test_operation_missing_type_specific_field_fails(operations_page):
    raw = dict(_records(operations_page)[1])
    del raw["amount"]
    with pytest.raises(DeserializationError):
        Operation.from_json(raw)


# -----------------------------
# Effects
# -----------------------------

def test_effect_keeps_type_specific_members(effects_page):
    first, second = (Effect.from_json(e) for e in _records(effects_page))
    assert first.type == "account_created"
    assert dict(first.details) == {"starting_balance": "10000.0000000"}
    assert first.created_at is not None
    assert second.created_at is None
    assert second.details["amount"] == "10000.0000000"
    with pytest.raises(TypeError):
        second.details["amount"] = "0"  # type: ignore[index]


def test_effect_missing_account_fails(effects_page):
    raw = dict(_records(effects_page)[0])
    del raw["account"]
    with pytest.raises(DeserializationError):
        Effect.from_json(raw)


def test_effects_are_hashable(effects_page):
    first, second = (Effect.from_json(e) for e in _records(effects_page))
    assert len({first, second, Effect.from_json(_records(effects_page)[0])}) == 2


# -----------------------------
# Records
# -----------------------------

def test_records_page(operations_page):
    page = Records.from_json(operations_page, Operation)
    assert len(page) == 4
    assert page[0].id == 12884905985
    assert [op.type for op in page] == ["create_account", "payment", "manage_data", "manage_offer"]
    assert page.next_cursor == "12884905988"
    assert page.next_href.endswith("cursor=12884905988")


def test_next_cursor_is_last_paging_token(effects_page):
    page = Records.from_json(effects_page, Effect)
    assert page.next_cursor == page.records[-1].paging_token == "12884905985-2"


def test_empty_page_has_no_cursor():
    page = Records.from_json({"_links": {}, "_embedded": {"records": []}}, Effect)
    assert page.is_empty()
    assert page.next_cursor is None
    assert page.next_href is None


def test_next_page_endpoint_from_cursor(effects_page, host):
    page = Records.from_json(effects_page, Effect)
    nxt = ledger.Effects(69859).with_limit(2).with_cursor(page.next_cursor)
    assert nxt.into_request(host).url.endswith("/ledgers/69859/effects?cursor=12884905985-2&limit=2")


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"_embedded": {}},
        {"_embedded": {"records": {}}},
        {"records": []},
    ],
)
def test_malformed_pages_fail(payload):
    with pytest.raises(DeserializationError):
        Records.from_json(payload, Operation)


def test_one_bad_record_fails_the_page(operations_page):
    del _records(operations_page)[2]["name"]
    with pytest.raises(DeserializationError):
        Records.from_json(operations_page, Operation)


def test_endpoint_parse_response(operations_page, offer_json):
    from horizon_client.endpoint import account

    page = payment.All().parse_response(operations_page)
    assert isinstance(page, Records)
    assert len(page) == 4
    offers = account.Offers("G").parse_response({"_embedded": {"records": [offer_json]}})
    assert offers[0].id == 121
