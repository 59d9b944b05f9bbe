import json

import pytest

from checkout_buttons.errors import InvalidArgumentError
from checkout_buttons.integrations.clients.mocks.fixtures import (
    get_braintree_payment_method,
    get_checkout,
    get_googlepay_stripe_payment_method,
    get_shipping_address,
)
from checkout_buttons.integrations.contracts.interfaces import PickupOption
from checkout_buttons.strategies.wallets import (
    BraintreePaypalInitializer,
    GooglePayStripeInitializer,
    SetupContext,
    get_wallet_initializer,
)


def test_registry_returns_fresh_initializers():
    first = get_wallet_initializer("braintreepaypal")
    second = get_wallet_initializer("braintreepaypal")

    assert isinstance(first, BraintreePaypalInitializer)
    assert first is not second
    assert isinstance(get_wallet_initializer("googlepaystripe"), GooglePayStripeInitializer)


def test_registry_rejects_unknown_provider():
    with pytest.raises(InvalidArgumentError):
        get_wallet_initializer("applepay")


def test_braintree_setup_request_payload():
    request = BraintreePaypalInitializer().build_setup_request(
        SetupContext(
            amount="190.00",
            currency_code="USD",
            payment_method=get_braintree_payment_method(),
            shipping_address=get_shipping_address(),
        )
    )

    assert request.to_payload() == {
        "amount": "190.00",
        "currency": "USD",
        "flow": "checkout",
        "enableShippingAddress": True,
        "shippingAddressEditable": False,
        "shippingAddressOverride": {
            "line1": "12345 Testing Way",
            "line2": "",
            "city": "Some City",
            "state": "CA",
            "postalCode": "95555",
            "countryCode": "US",
            "phone": "555-555-5555",
            "recipientName": "Test Tester",
        },
        "offerCredit": False,
    }


def _googlepay_context(**overrides):
    values = dict(
        amount="190.00",
        currency_code="USD",
        payment_method=get_googlepay_stripe_payment_method(),
        checkout=get_checkout(),
    )
    values.update(overrides)
    return SetupContext(**values)


def test_googlepay_request_maps_networks_and_stripe_key():
    request = GooglePayStripeInitializer().build_setup_request(_googlepay_context())

    card = request["allowedPaymentMethods"][0]
    assert card["parameters"]["allowedCardNetworks"] == ["VISA", "MASTERCARD", "AMEX"]
    assert card["tokenizationSpecification"]["parameters"] == {
        "gateway": "stripe",
        "stripe:version": "2019-05-16",
        "stripe:publishableKey": "pk_test_key/acct_123",
    }
    assert request["merchantInfo"]["merchantName"] == "Mock Store"
    assert request["transactionInfo"] == {"currencyCode": "USD", "totalPriceStatus": "FINAL", "totalPrice": "190.00"}
    assert request["emailRequired"] is True
    assert request["shippingAddressRequired"] is True


def test_googlepay_does_not_require_shipping_when_address_known():
    request = GooglePayStripeInitializer().build_setup_request(_googlepay_context(shipping_address=get_shipping_address()))

    assert request["shippingAddressRequired"] is False


def test_googlepay_pickup_only_order_needs_no_shipping_address():
    method = get_googlepay_stripe_payment_method()
    method.initialization_data["bopis"] = {"enabled": True, "requiredAddress": "none"}
    checkout = get_checkout()
    checkout.consignments[0].selected_pickup_option = PickupOption(pickup_method_id=1, name="Store")

    request = GooglePayStripeInitializer().build_setup_request(_googlepay_context(payment_method=method, checkout=checkout))

    assert request["shippingAddressRequired"] is False


def test_googlepay_parses_stripe_token():
    token = {"id": "tok_123", "type": "card", "card": {"brand": "visa", "last4": "4242"}}
    payload = {"paymentMethodData": {"tokenizationData": {"token": json.dumps(token)}}}

    parsed = GooglePayStripeInitializer().parse_approval_payload(payload)

    assert parsed.nonce == "tok_123"
    assert parsed.type == "card"
    assert parsed.details.card_type == "visa"
    assert parsed.details.last_four == "4242"


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"paymentMethodData": {"tokenizationData": {"token": "{broken"}}},
        {"paymentMethodData": {"tokenizationData": {"token": json.dumps({"id": "tok_123"})}}},
    ],
)
def test_googlepay_rejects_unparseable_token(payload):
    with pytest.raises(InvalidArgumentError) as exc_info:
        GooglePayStripeInitializer().parse_approval_payload(payload)

    assert str(exc_info.value) == "Unable to parse response from Google Pay."
