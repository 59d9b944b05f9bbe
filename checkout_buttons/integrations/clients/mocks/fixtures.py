"""
Fixture data for mock clients and tests.

Shapes mirror what a storefront returns for a single-consignment checkout
paid through Braintree PayPal.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from checkout_buttons.integrations.contracts.interfaces import (
    Address,
    BuyNowCartRequestBody,
    BuyNowLineItem,
    Cart,
    CartSource,
    Checkout,
    Consignment,
    Currency,
    PaymentMethod,
    PaymentMethodConfig,
)

DEFAULT_DEVICE_DATA = '{"device_session_id":"mock-session","fraud_merchant_id":"mock-merchant"}'


def get_shipping_address() -> Address:
    return Address(
        first_name="Test",
        last_name="Tester",
        email="test@bigcommerce.com",
        company="Bigcommerce",
        address1="12345 Testing Way",
        address2="",
        city="Some City",
        state_or_province="California",
        state_or_province_code="CA",
        country="United States",
        country_code="US",
        postal_code="95555",
        phone="555-555-5555",
    )


def get_billing_address() -> Address:
    return Address(
        first_name="Test",
        last_name="Tester",
        email="test@bigcommerce.com",
        address1="12345 Testing Way",
        city="Some City",
        state_or_province="California",
        state_or_province_code="CA",
        country="United States",
        country_code="US",
        postal_code="95555",
        phone="555-555-5555",
    )


def get_cart(cart_id: str = "b20deef40f9699e48671bbc3fef6ca44dc80e3c7", amount: float = 190.0) -> Cart:
    return Cart(
        id=cart_id,
        currency=Currency(code="USD", name="US Dollar", symbol="$", decimal_places=2),
        cart_amount=amount,
        base_amount=200.0,
        email="foo@bar.com",
        line_items={
            "physicalItems": [
                {"id": "666", "productId": 103, "name": "Canvas Laundry Cart", "quantity": 1, "salePrice": 200},
            ],
        },
    )


def get_buy_now_cart(cart_id: str = "999", amount: float = 50.0) -> Cart:
    cart = get_cart(cart_id=cart_id, amount=amount)
    cart.source = CartSource.BUY_NOW
    return cart


def get_checkout(outstanding_balance: float = 190.0) -> Checkout:
    return Checkout(
        id="b20deef40f9699e48671bbc3fef6ca44dc80e3c7",
        cart=get_cart(),
        outstanding_balance=outstanding_balance,
        grand_total=190.0,
        consignments=[Consignment(id="55c96cda6f04c", shipping_address=get_shipping_address())],
        billing_address=get_billing_address(),
    )


def get_braintree_payment_method(test_mode: bool = True) -> PaymentMethod:
    return PaymentMethod(
        id="braintreepaypal",
        method="paypal",
        client_token="foo",
        config=PaymentMethodConfig(test_mode=test_mode, display_name="PayPal", merchant_id="merchant-1"),
        initialization_data={"isCreditEnabled": False},
        supported_cards=["VISA", "MC", "AMEX"],
    )


def get_googlepay_stripe_payment_method() -> PaymentMethod:
    return PaymentMethod(
        id="googlepaystripe",
        method="googlepay",
        client_token="foo",
        config=PaymentMethodConfig(test_mode=True, display_name="Google Pay"),
        initialization_data={
            "googleMerchantName": "Mock Store",
            "googleMerchantId": "12345678901234567890",
            "platformToken": "platformToken",
            "stripeVersion": "2019-05-16",
            "stripePublishableKey": "pk_test_key",
            "stripeConnectedAccount": "acct_123",
            "bopis": None,
        },
        supported_cards=["VISA", "MC", "AMEX"],
    )


def get_buy_now_cart_request_body() -> BuyNowCartRequestBody:
    return BuyNowCartRequestBody(
        line_items=[
            BuyNowLineItem(product_id=1, quantity=2, option_selections={"optionId": 11, "optionValue": 11}),
        ],
    )


def get_tokenize_payload() -> Dict[str, Any]:
    return {
        "nonce": "NONCE",
        "type": "PaypalAccount",
        "details": {
            "email": "foo@bar.com",
            "firstName": "Foo",
            "lastName": "Bar",
            "payerId": "PAYER_ID",
            "countryCode": "US",
            "billingAddress": {
                "line1": "56789 Testing Way",
                "line2": "Level 2",
                "city": "Some Other City",
                "state": "Arizona",
                "countryCode": "US",
                "postalCode": "96666",
            },
            "shippingAddress": {
                "recipientName": "Hello World",
                "line1": "12345 Testing Way",
                "line2": "Level 1",
                "city": "Some City",
                "state": "California",
                "countryCode": "US",
                "postalCode": "95555",
            },
        },
    }


def get_googlepay_payment_data() -> Dict[str, Any]:
    """Google Pay payment data carrying a Stripe card token."""
    token = {"id": "tok_1234", "type": "card", "card": {"brand": "visa", "last4": "4242"}}
    return {
        "apiVersion": 2,
        "apiVersionMinor": 0,
        "email": "foo@bar.com",
        "paymentMethodData": {
            "type": "CARD",
            "description": "Visa •••• 4242",
            "tokenizationData": {"type": "PAYMENT_GATEWAY", "token": json.dumps(token)},
        },
    }
