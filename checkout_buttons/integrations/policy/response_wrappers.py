from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from checkout_buttons.errors import InvalidArgumentError
from checkout_buttons.integrations.contracts.interfaces import (
    Address,
    Cart,
    CartSource,
    Checkout,
    Consignment,
    Currency,
    PickupOption,
)


# ---------------------------------------------------------------------------
# Provider tokenization payloads
# ---------------------------------------------------------------------------

class ProviderAddressModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    recipient_name: Optional[str] = Field(default=None, alias="recipientName")
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = Field(default=None, alias="postalCode")
    country_code: Optional[str] = Field(default=None, alias="countryCode")
    phone: Optional[str] = None


class TokenizeDetailsModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    email: Optional[str] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    payer_id: Optional[str] = Field(default=None, alias="payerId")
    phone: Optional[str] = None
    country_code: Optional[str] = Field(default=None, alias="countryCode")
    billing_address: Optional[ProviderAddressModel] = Field(default=None, alias="billingAddress")
    shipping_address: Optional[ProviderAddressModel] = Field(default=None, alias="shippingAddress")
    card_type: Optional[str] = Field(default=None, alias="cardType")
    last_four: Optional[str] = Field(default=None, alias="lastFour")


class TokenizePayloadModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    nonce: str = Field(min_length=1)
    type: Optional[str] = None
    details: TokenizeDetailsModel = Field(default_factory=TokenizeDetailsModel)


def normalize_tokenize_payload(raw: Any) -> TokenizePayloadModel:
    if not isinstance(raw, dict):
        raise InvalidArgumentError(f"Tokenization payload must be an object; got {type(raw).__name__}.")
    return _build_model(TokenizePayloadModel, raw, raw)


def billing_address_from_details(details: TokenizeDetailsModel) -> Optional[Address]:
    """Billing falls back to the shipping address when the provider sent none."""
    source = details.billing_address or details.shipping_address
    if source is None and not (details.email or details.first_name or details.last_name):
        return None
    address = _to_address(source) if source else Address()
    address.email = details.email
    address.first_name = details.first_name or ""
    address.last_name = details.last_name or ""
    if not address.phone:
        address.phone = details.phone or ""
    return address


def shipping_address_from_details(details: TokenizeDetailsModel) -> Optional[Address]:
    if details.shipping_address is None:
        return None
    address = _to_address(details.shipping_address)
    # One free-text name from the provider: the first word is the first name, the rest the last name.
    first_name, _, last_name = (details.shipping_address.recipient_name or "").strip().partition(" ")
    address.first_name = first_name
    address.last_name = last_name.strip()
    address.email = details.email
    address.phone = details.phone or address.phone
    return address


def _to_address(model: ProviderAddressModel) -> Address:
    return Address(
        address1=model.line1 or "",
        address2=model.line2 or "",
        city=model.city or "",
        state_or_province=model.state or "",
        state_or_province_code=model.state or "",
        country_code=model.country_code or "",
        postal_code=model.postal_code or "",
        phone=model.phone or "",
    )


# ---------------------------------------------------------------------------
# Storefront responses
# ---------------------------------------------------------------------------

class CurrencyModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    code: str = Field(min_length=3, max_length=3)
    name: str = ""
    symbol: str = ""
    decimal_places: int = Field(default=2, alias="decimalPlaces", ge=0)


class CartResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    currency: CurrencyModel
    cart_amount: float = Field(alias="cartAmount", ge=0)
    base_amount: float = Field(default=0.0, alias="baseAmount")
    email: Optional[str] = None
    source: Optional[str] = None
    line_items: Dict[str, List[Dict[str, Any]]] = Field(default_factory=dict, alias="lineItems")


class AddressResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: Optional[str] = None
    company: str = ""
    address1: str = ""
    address2: str = ""
    city: str = ""
    state_or_province: str = Field(default="", alias="stateOrProvince")
    state_or_province_code: str = Field(default="", alias="stateOrProvinceCode")
    country: str = ""
    country_code: str = Field(default="", alias="countryCode")
    postal_code: str = Field(default="", alias="postalCode")
    phone: str = ""


class ConsignmentResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    shipping_address: Optional[AddressResponseModel] = Field(default=None, alias="shippingAddress")
    selected_pickup_option: Optional[Dict[str, Any]] = Field(default=None, alias="selectedPickupOption")


class CheckoutResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    cart: CartResponseModel
    outstanding_balance: float = Field(alias="outstandingBalance")
    grand_total: float = Field(default=0.0, alias="grandTotal")
    consignments: List[ConsignmentResponseModel] = Field(default_factory=list)
    billing_address: Optional[AddressResponseModel] = Field(default=None, alias="billingAddress")


def normalize_cart_response(raw: Dict[str, Any], *, fallback_source: CartSource = CartSource.EXISTING) -> Cart:
    model = _build_model(CartResponseModel, raw, raw)
    return _cart_from_model(model, fallback_source)


def normalize_checkout_response(raw: Dict[str, Any]) -> Checkout:
    model = _build_model(CheckoutResponseModel, raw, raw)
    return Checkout(
        id=model.id,
        cart=_cart_from_model(model.cart, CartSource.EXISTING),
        outstanding_balance=model.outstanding_balance,
        grand_total=model.grand_total,
        consignments=[
            Consignment(
                id=item.id,
                shipping_address=Address(**item.shipping_address.model_dump()) if item.shipping_address else None,
                selected_pickup_option=_pickup_option(item.selected_pickup_option),
            )
            for item in model.consignments
        ],
        billing_address=Address(**model.billing_address.model_dump()) if model.billing_address else None,
    )


def _cart_from_model(model: CartResponseModel, fallback_source: CartSource) -> Cart:
    try:
        source = CartSource(model.source) if model.source else fallback_source
    except ValueError:
        source = fallback_source
    return Cart(
        id=model.id,
        currency=Currency(**model.currency.model_dump()),
        cart_amount=model.cart_amount,
        base_amount=model.base_amount,
        email=model.email,
        source=source,
        line_items=model.line_items,
    )


def _pickup_option(raw: Optional[Dict[str, Any]]) -> Optional[PickupOption]:
    if not raw:
        return None
    return PickupOption(
        pickup_method_id=int(raw.get("pickupMethodId") or raw.get("pickup_method_id") or 0),
        name=str(raw.get("name") or ""),
    )


def _build_model(model_type, payload: Dict[str, Any], raw: Dict[str, Any]):
    try:
        return model_type.model_validate(payload)
    except ValidationError as exc:
        raise InvalidArgumentError(f"Response validation failed: {exc}", payload=raw) from exc
