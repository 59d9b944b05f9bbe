"""Google Pay payment-data requests tokenized through Stripe."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from pydantic import ValidationError

from checkout_buttons.errors import InvalidArgumentError
from checkout_buttons.integrations.policy.response_wrappers import TokenizePayloadModel

from .base import SetupContext

logger = logging.getLogger(__name__)

_CARD_NETWORK_ALIASES = {"MC": "MASTERCARD"}


class GooglePayStripeInitializer:
    payment_type = "googlepay"
    funding_source = "GOOGLEPAY"
    data_collector_options: Dict[str, Any] = {}

    def build_setup_request(self, context: SetupContext) -> Dict[str, Any]:
        data = context.payment_method.initialization_data
        consignments = context.checkout.consignments if context.checkout else []
        bopis = data.get("bopis") or {}
        is_pickup = all(consignment.selected_pickup_option for consignment in consignments)

        if bopis.get("enabled") and is_pickup and bopis.get("requiredAddress") == "none":
            shipping_address_required = False
        else:
            shipping_address_required = context.shipping_address is None

        return {
            "apiVersion": 2,
            "apiVersionMinor": 0,
            "merchantInfo": {
                "authJwt": data.get("platformToken"),
                "merchantId": data.get("googleMerchantId"),
                "merchantName": data.get("googleMerchantName"),
            },
            "allowedPaymentMethods": [
                {
                    "type": "CARD",
                    "parameters": {
                        "allowedAuthMethods": ["PAN_ONLY", "CRYPTOGRAM_3DS"],
                        "allowedCardNetworks": [
                            _CARD_NETWORK_ALIASES.get(card, card) for card in context.payment_method.supported_cards
                        ],
                        "billingAddressRequired": True,
                        "billingAddressParameters": {
                            "format": "FULL",
                            "phoneNumberRequired": True,
                        },
                    },
                    "tokenizationSpecification": {
                        "type": "PAYMENT_GATEWAY",
                        "parameters": {
                            "gateway": "stripe",
                            "stripe:version": data.get("stripeVersion"),
                            "stripe:publishableKey": f"{data.get('stripePublishableKey')}/{data.get('stripeConnectedAccount')}",
                        },
                    },
                },
            ],
            "transactionInfo": {
                "currencyCode": context.currency_code,
                "totalPriceStatus": "FINAL",
                "totalPrice": context.amount,
            },
            "emailRequired": True,
            "shippingAddressRequired": shipping_address_required,
            "shippingAddressParameters": {
                "phoneNumberRequired": True,
            },
        }

    def parse_approval_payload(self, payload: Any) -> TokenizePayloadModel:
        try:
            token = json.loads(payload["paymentMethodData"]["tokenizationData"]["token"])
            return TokenizePayloadModel(
                nonce=token["id"],
                type=token.get("type"),
                details={
                    "cardType": token["card"]["brand"],
                    "lastFour": token["card"]["last4"],
                },
            )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            logger.warning("Google Pay token could not be parsed: %s", type(exc).__name__)
            raise InvalidArgumentError("Unable to parse response from Google Pay.") from exc

    async def teardown(self) -> None:
        return None
