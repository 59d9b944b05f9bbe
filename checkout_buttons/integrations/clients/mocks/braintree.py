"""
Braintree SDK session: MOCK client.

⚠️  This is a mock implementation for development and testing.
    It stands in for the browser-loaded Braintree client, its PayPal checkout
    component and its data collector. Every call is recorded so tests can
    assert on it, and each step can be made to fail on demand.
"""

import copy
import logging
from typing import Any, Dict, List, Optional

from checkout_buttons.integrations.contracts.interfaces import DataCollector, ProviderCheckout, SdkSession

from .fixtures import DEFAULT_DEVICE_DATA, get_tokenize_payload

logger = logging.getLogger(__name__)


class MockPaypalCheckout(ProviderCheckout):
    """
    Parameters
    ----------
    order_token : str
        Token returned from every successful ``create_payment``.
    create_payment_error / tokenize_error : Exception, optional
        Raised instead of returning, to simulate provider failures.
    tokenize_payload : dict, optional
        Raw payload returned by ``tokenize_payment``. Defaults to the fixture payload.
    echo_shipping_override : bool
        If True, the tokenized payload's shipping address repeats the override
        from the latest ``create_payment`` call, as the provider does when the
        buyer keeps the address the merchant supplied.
    """

    def __init__(
        self,
        order_token: str = "ORDER_TOKEN",
        create_payment_error: Optional[Exception] = None,
        tokenize_error: Optional[Exception] = None,
        tokenize_payload: Optional[Dict[str, Any]] = None,
        echo_shipping_override: bool = False,
    ):
        self.order_token = order_token
        self.create_payment_error = create_payment_error
        self.tokenize_error = tokenize_error
        self.tokenize_payload = tokenize_payload
        self.echo_shipping_override = echo_shipping_override

        self.create_payment_calls: List[Any] = []
        self.tokenize_calls: List[Dict[str, Any]] = []

    async def create_payment(self, request: Any) -> str:
        self.create_payment_calls.append(request)
        logger.info("[BRAINTREE MOCK] create_payment call #%d", len(self.create_payment_calls))
        if self.create_payment_error is not None:
            raise self.create_payment_error
        return self.order_token

    async def tokenize_payment(self, approval_data: Dict[str, Any]) -> Any:
        self.tokenize_calls.append(approval_data)
        logger.info("[BRAINTREE MOCK] tokenize_payment call #%d", len(self.tokenize_calls))
        if self.tokenize_error is not None:
            raise self.tokenize_error

        payload = copy.deepcopy(self.tokenize_payload) if self.tokenize_payload is not None else get_tokenize_payload()
        if self.echo_shipping_override and self.create_payment_calls:
            override = getattr(self.create_payment_calls[-1], "shipping_address_override", None)
            details = payload.setdefault("details", {})
            if override is None:
                details.pop("shippingAddress", None)
            else:
                details["shippingAddress"] = override.to_payload()
        return payload


class MockBraintreeSdkSession(SdkSession):
    def __init__(
        self,
        paypal_checkout: Optional[MockPaypalCheckout] = None,
        checkout_creation_error: Optional[Exception] = None,
        device_data: Optional[str] = DEFAULT_DEVICE_DATA,
    ):
        self.paypal_checkout = paypal_checkout or MockPaypalCheckout()
        self.checkout_creation_error = checkout_creation_error
        self.device_data = device_data

        self.initialize_calls: List[str] = []
        self.checkout_component_calls: List[Dict[str, Any]] = []
        self.data_collector_calls: List[Dict[str, Any]] = []
        self.teardown_count = 0

    def initialize(self, client_token: str) -> None:
        logger.info("[BRAINTREE MOCK] Session initialised")
        self.initialize_calls.append(client_token)

    async def create_checkout_component(self, currency: str, is_credit_enabled: bool = False) -> ProviderCheckout:
        self.checkout_component_calls.append({"currency": currency, "is_credit_enabled": is_credit_enabled})
        if self.checkout_creation_error is not None:
            raise self.checkout_creation_error
        return self.paypal_checkout

    async def get_data_collector(self, paypal: bool = False) -> DataCollector:
        self.data_collector_calls.append({"paypal": paypal})
        return DataCollector(device_data=self.device_data)

    async def teardown(self) -> None:
        self.teardown_count += 1
        logger.info("[BRAINTREE MOCK] Session torn down")
