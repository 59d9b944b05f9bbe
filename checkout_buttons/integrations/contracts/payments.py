"""
Payment contracts.

Defines the values that flow between the button strategy, the provider SDK
and the storefront:
- the cart a payment is made against
- the setup request handed to the provider on every order-creation event
- the normalised approval produced on every buyer-approval event
- the legacy flat address format the storefront expects on finalization

Both the mock and the real clients exchange these shapes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .interfaces import Address, Cart, CartSource


# ---------------------------------------------------------------------------
# Cart context
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CartContext:
    cart_id: str
    source: CartSource
    cart: Cart

    @property
    def is_buy_now(self) -> bool:
        return self.source is CartSource.BUY_NOW


# ---------------------------------------------------------------------------
# Payment setup
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ShippingAddressOverride:
    line1: str
    line2: str
    city: str
    state: str
    postal_code: str
    country_code: str
    phone: str
    recipient_name: str

    @classmethod
    def from_address(cls, address: Address) -> "ShippingAddressOverride":
        return cls(
            line1=address.address1,
            line2=address.address2,
            city=address.city,
            state=address.state_or_province_code,
            postal_code=address.postal_code,
            country_code=address.country_code,
            phone=address.phone,
            recipient_name=f"{address.first_name} {address.last_name}",
        )

    def to_payload(self) -> Dict[str, str]:
        return {
            "line1": self.line1,
            "line2": self.line2,
            "city": self.city,
            "state": self.state,
            "postalCode": self.postal_code,
            "countryCode": self.country_code,
            "phone": self.phone,
            "recipientName": self.recipient_name,
        }


@dataclass(frozen=True)
class PaymentSetupRequest:
    """Built fresh for every order-creation event. Never cached."""

    amount: str
    currency: str
    flow: str = "checkout"
    enable_shipping_address: bool = True
    shipping_address_editable: bool = False
    shipping_address_override: Optional[ShippingAddressOverride] = None
    offer_credit: bool = False

    def to_payload(self) -> Dict[str, Any]:
        override = self.shipping_address_override
        return {
            "amount": self.amount,
            "currency": self.currency,
            "flow": self.flow,
            "enableShippingAddress": self.enable_shipping_address,
            "shippingAddressEditable": self.shipping_address_editable,
            "shippingAddressOverride": override.to_payload() if override else None,
            "offerCredit": self.offer_credit,
        }


# ---------------------------------------------------------------------------
# Approval / finalization
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ApprovalResult:
    """One buyer approval, consumed by finalization and then dropped."""

    payer_reference: Optional[str]
    nonce: str
    device_data: Optional[str]
    billing_address: Optional[Address] = None
    shipping_address: Optional[Address] = None
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FinalizeOptions:
    payment_type: str
    provider: str
    should_process_payment: bool = False
    cart_id: Optional[str] = None

    @property
    def action(self) -> str:
        return "process_payment" if self.should_process_payment else "set_external_checkout"


def to_legacy_address(address: Address) -> Dict[str, Any]:
    """Flatten an address into the storefront's legacy field names.

    Fields without a value are dropped, matching what the storefront receives
    from the browser integration.
    """
    fields = {
        "email": address.email,
        "first_name": address.first_name,
        "last_name": address.last_name,
        "address_line_1": address.address1,
        "address_line_2": address.address2,
        "city": address.city,
        "state": address.state_or_province,
        "country_code": address.country_code,
        "postal_code": address.postal_code,
    }
    return {key: value for key, value in fields.items() if value is not None}
