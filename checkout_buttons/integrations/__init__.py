"""
Integrations layer.

This package contains all code used to communicate with systems outside the
button strategy:
- the provider SDK session and the button widget SDK (browser-loaded scripts)
- the storefront's cart, checkout and finalization endpoints

Key rule:
- Strategies MUST NOT call external APIs directly.
- Strategies depend on the interfaces in ``contracts`` and receive concrete
  clients (mock or real) from ``checkout_buttons.factory``.
"""

from .contracts.interfaces import (
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
from .contracts.payments import (
    ApprovalResult,
    CartContext,
    FinalizeOptions,
    PaymentSetupRequest,
    ShippingAddressOverride,
)

__all__ = [
    # interfaces
    "Address", "BuyNowCartRequestBody", "BuyNowLineItem", "Cart", "CartSource",
    "Checkout", "Consignment", "Currency", "PaymentMethod", "PaymentMethodConfig",
    # payments
    "ApprovalResult", "CartContext", "FinalizeOptions", "PaymentSetupRequest",
    "ShippingAddressOverride",
]
