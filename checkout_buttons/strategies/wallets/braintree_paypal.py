from __future__ import annotations

from typing import Any

from checkout_buttons.integrations.contracts.payments import PaymentSetupRequest, ShippingAddressOverride
from checkout_buttons.integrations.policy.response_wrappers import TokenizePayloadModel, normalize_tokenize_payload

from .base import SetupContext


class BraintreePaypalInitializer:
    payment_type = "paypal"
    funding_source = "PAYPAL"
    data_collector_options = {"paypal": True}

    def build_setup_request(self, context: SetupContext) -> PaymentSetupRequest:
        address = context.shipping_address
        return PaymentSetupRequest(
            amount=context.amount,
            currency=context.currency_code,
            flow="checkout",
            enable_shipping_address=True,
            shipping_address_editable=False,
            shipping_address_override=ShippingAddressOverride.from_address(address) if address else None,
            offer_credit=False,
        )

    def parse_approval_payload(self, payload: Any) -> TokenizePayloadModel:
        return normalize_tokenize_payload(payload)

    async def teardown(self) -> None:
        return None
