"""Unit tests for request encoding and response decoding."""

import base64

import pytest

from merchant_sandbox.core import (
    AccessTokenRequest,
    AccessTokenResponse,
    Amount,
    ApplicationContext,
    CheckoutOrderRequest,
    CreateOrderParams,
    MerchantConfig,
    Order,
    OrderIntent,
    ParsingError,
    ProcessOrderParams,
    PurchaseUnit,
    encode_body,
    to_snake_case,
)


@pytest.mark.parametrize(
    "key, expected",
    [
        ("purchaseUnits", "purchase_units"),
        ("orderID", "order_id"),
        ("myURLValue", "my_url_value"),
        ("currency_code", "currency_code"),
        ("intent", "intent"),
        ("_privateKey_", "_private_key_"),
        ("__", "__"),
    ],
)
def test_to_snake_case(key, expected):
    assert to_snake_case(key) == expected


def test_encode_body_drops_none_fields():
    params = CreateOrderParams(
        intent="CAPTURE",
        purchase_units=[PurchaseUnit(amount=Amount(currency_code="USD", value="10.00"))],
    )

    assert encode_body(params) == {
        "intent": "CAPTURE",
        "purchase_units": [{"amount": {"currency_code": "USD", "value": "10.00"}}],
    }


def test_encode_body_converts_nested_mapping_keys():
    body = {
        "purchaseUnits": [{"referenceId": "ref-1", "amount": {"currencyCode": "EUR"}}],
        "applicationContext": {"userAction": "PAY_NOW", "returnURL": None},
    }

    assert encode_body(body) == {
        "purchase_units": [{"reference_id": "ref-1", "amount": {"currency_code": "EUR"}}],
        "application_context": {"user_action": "PAY_NOW"},
    }


def test_checkout_order_request_normalizes_intent():
    request = CheckoutOrderRequest(
        intent="authorize",
        purchase_units=(PurchaseUnit(amount=Amount("USD", "5.00")),),
        application_context=ApplicationContext(shipping_preference="NO_SHIPPING"),
    )

    assert request.intent is OrderIntent.AUTHORIZE
    encoded = encode_body(request)
    assert encoded["intent"] == "AUTHORIZE"
    assert encoded["application_context"] == {"shipping_preference": "NO_SHIPPING"}


def test_checkout_order_request_requires_purchase_units():
    with pytest.raises(ValueError):
        CheckoutOrderRequest(intent=OrderIntent.CAPTURE, purchase_units=[])


@pytest.mark.parametrize(
    "intent, endpoint",
    [
        ("capture", "/capture-order"),
        ("Authorize", "/authorize-order"),
        (OrderIntent.AUTHORIZE, "/authorize-order"),
        (OrderIntent.CAPTURE, "/capture-order"),
    ],
)
def test_process_order_params_endpoint(intent, endpoint):
    assert ProcessOrderParams(order_id="ORDER-1", intent=intent).endpoint == endpoint


def test_process_order_params_rejects_blank_intent():
    with pytest.raises(ValueError):
        ProcessOrderParams(order_id="ORDER-1", intent="  ")


def test_order_from_response_keeps_raw_payload():
    payload = {"id": "ORDER-1", "status": "COMPLETED", "links": []}

    order = Order.from_response(payload)

    assert order.id == "ORDER-1"
    assert order.status == "COMPLETED"
    assert order.raw == payload


@pytest.mark.parametrize(
    "payload",
    [[], "ORDER-1", {"id": "ORDER-1"}, {"status": "CREATED"}, {"id": 7, "status": "CREATED"}],
)
def test_order_from_response_rejects_bad_shapes(payload):
    with pytest.raises(ParsingError):
        Order.from_response(payload)


def test_access_token_response_parses_expiry():
    response = AccessTokenResponse.from_response(
        {"access_token": "abc", "expires_in": "3600", "app_id": "APP-1"}
    )

    assert response.access_token == "abc"
    assert response.expires_in == 3600
    assert response.token_type == "Bearer"
    assert response.app_id == "APP-1"


@pytest.mark.parametrize(
    "payload",
    [None, {"token": "abc"}, {"access_token": ""}, {"access_token": "abc", "expires_in": "soon"}],
)
def test_access_token_response_rejects_bad_shapes(payload):
    with pytest.raises(ParsingError):
        AccessTokenResponse.from_response(payload)


def test_access_token_request_without_credentials():
    request = AccessTokenRequest.for_config(MerchantConfig())

    assert request.method == "POST"
    assert request.path == "/v1/oauth2/token"
    assert request.body == b"grant_type=client_credentials"
    assert "Authorization" not in request.headers


def test_access_token_request_with_credentials():
    config = MerchantConfig(client_id="id", client_secret="secret", token_path="/token")

    request = AccessTokenRequest.for_config(config)

    expected = base64.b64encode(b"id:secret").decode("ascii")
    assert request.headers["Authorization"] == f"Basic {expected}"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert request.path == "/token"
