"""
Wallet initializers, keyed by provider id.

Each wallet supplies three operations (``build_setup_request``,
``parse_approval_payload``, ``teardown``) and the button strategy dispatches
on the provider id; it never branches on a concrete wallet.
"""

from typing import Callable, Dict

from checkout_buttons.errors import InvalidArgumentError

from .base import SetupContext, WalletInitializer
from .braintree_paypal import BraintreePaypalInitializer
from .googlepay_stripe import GooglePayStripeInitializer

WALLET_INITIALIZERS: Dict[str, Callable[[], WalletInitializer]] = {
    "braintreepaypal": BraintreePaypalInitializer,
    "googlepaystripe": GooglePayStripeInitializer,
}


def get_wallet_initializer(provider_id: str) -> WalletInitializer:
    try:
        factory = WALLET_INITIALIZERS[provider_id]
    except KeyError:
        raise InvalidArgumentError(f"No wallet initializer is registered for '{provider_id}'.") from None
    return factory()


__all__ = [
    "SetupContext", "WalletInitializer", "WALLET_INITIALIZERS", "get_wallet_initializer",
    "BraintreePaypalInitializer", "GooglePayStripeInitializer",
]
