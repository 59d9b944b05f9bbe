from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class CartSource(str, Enum):
    EXISTING = "Existing"
    BUY_NOW = "BuyNow"


class ButtonEnvironment(str, Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass
class Address:
    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None
    company: str = ""
    address1: str = ""
    address2: str = ""
    city: str = ""
    state_or_province: str = ""
    state_or_province_code: str = ""
    country: str = ""
    country_code: str = ""
    postal_code: str = ""
    phone: str = ""


@dataclass
class Currency:
    code: str
    name: str = ""
    symbol: str = ""
    decimal_places: int = 2


@dataclass
class Cart:
    id: str
    currency: Currency
    cart_amount: float
    base_amount: float = 0.0
    email: Optional[str] = None
    source: CartSource = CartSource.EXISTING
    line_items: Dict[str, List[Dict[str, Any]]] = field(default_factory=dict)


@dataclass
class PickupOption:
    pickup_method_id: int
    name: str = ""


@dataclass
class Consignment:
    id: str
    shipping_address: Optional[Address] = None
    selected_pickup_option: Optional[PickupOption] = None


@dataclass
class Checkout:
    id: str
    cart: Cart
    outstanding_balance: float
    grand_total: float = 0.0
    consignments: List[Consignment] = field(default_factory=list)
    billing_address: Optional[Address] = None


@dataclass
class PaymentMethodConfig:
    test_mode: bool = False
    display_name: str = ""
    merchant_id: Optional[str] = None


@dataclass
class PaymentMethod:
    id: str
    method: str
    config: PaymentMethodConfig = field(default_factory=PaymentMethodConfig)
    client_token: Optional[str] = None
    initialization_data: Dict[str, Any] = field(default_factory=dict)
    supported_cards: List[str] = field(default_factory=list)


@dataclass
class BuyNowLineItem:
    product_id: int
    quantity: int
    option_selections: Optional[Dict[str, Any]] = None


@dataclass
class BuyNowCartRequestBody:
    line_items: List[BuyNowLineItem]
    source: CartSource = CartSource.BUY_NOW


@dataclass
class DataCollector:
    device_data: Optional[str] = None


# ---------------------------------------------------------------------------
# Checkout state collaborators
# ---------------------------------------------------------------------------

class CheckoutStore(ABC):
    """Read access to the host checkout's state plus a reload trigger."""

    @abstractmethod
    def get_checkout(self) -> Optional[Checkout]:
        """Return the current checkout, or None if none is loaded."""

    @abstractmethod
    def get_checkout_or_throw(self) -> Checkout:
        """Return the current checkout or raise MissingDataError(MissingCheckout)."""

    @abstractmethod
    def get_cart_or_throw(self) -> Cart:
        """Return the current cart or raise MissingDataError(MissingCart)."""

    @abstractmethod
    def get_payment_method_or_throw(self, method_id: str) -> PaymentMethod:
        """Return a payment method or raise MissingDataError(MissingPaymentMethod)."""

    @abstractmethod
    def get_shipping_address(self) -> Optional[Address]:
        """Return the checkout's shipping address, if one exists."""

    @abstractmethod
    async def load_default_checkout(self) -> Checkout:
        """Reload the checkout from the storefront and return it."""


class CheckoutRequestSender(ABC):
    @abstractmethod
    async def load_default_checkout(self) -> Checkout:
        """Fetch the shopper's current checkout."""


class CartRequestSender(ABC):
    @abstractmethod
    async def create_buy_now_cart(self, body: BuyNowCartRequestBody) -> Cart:
        """Create a single-purpose cart. Not safe to retry."""


class FormPoster(ABC):
    @abstractmethod
    async def post_form(self, path: str, fields: Dict[str, Any]) -> None:
        """Submit a single form POST to the storefront."""


# ---------------------------------------------------------------------------
# Provider SDK collaborators
# ---------------------------------------------------------------------------

class ProviderCheckout(ABC):
    """Provider-side checkout component created by an SDK session."""

    @abstractmethod
    async def create_payment(self, request: Any) -> str:
        """Create a provider order and return its token."""

    @abstractmethod
    async def tokenize_payment(self, approval_data: Dict[str, Any]) -> Any:
        """Exchange buyer approval data for a raw tokenization payload."""


class SdkSession(ABC):
    """A loaded provider SDK, owned by exactly one strategy instance."""

    @abstractmethod
    def initialize(self, client_token: str) -> None:
        """Bind the session to a client token."""

    @abstractmethod
    async def create_checkout_component(self, currency: str, is_credit_enabled: bool = False) -> ProviderCheckout:
        """Build the provider checkout component used by the button callbacks."""

    @abstractmethod
    async def get_data_collector(self, paypal: bool = False) -> DataCollector:
        """Return device data for fraud screening."""

    @abstractmethod
    async def teardown(self) -> None:
        """Release every resource held by the session."""


class RenderableWidget(ABC):
    @abstractmethod
    def render(self, selector: str) -> None:
        """Render into the DOM element matched by ``selector``."""


class ButtonWidget(RenderableWidget):
    @abstractmethod
    def is_eligible(self) -> bool:
        """Whether the buyer can pay with this button."""

    @abstractmethod
    def close(self) -> None:
        """Remove the rendered button."""


class WidgetSdk(ABC):
    """The foreign button SDK once its script has been loaded."""

    @property
    @abstractmethod
    def funding_sources(self) -> Dict[str, str]:
        """Funding source identifiers keyed by name, e.g. ``{"PAYPAL": "paypal"}``."""

    @abstractmethod
    def buttons(self, options: Dict[str, Any]) -> ButtonWidget:
        """Construct (but do not render) a payment button."""

    @abstractmethod
    def messages(self, options: Dict[str, Any]) -> RenderableWidget:
        """Construct a messaging banner."""


class WidgetScriptLoader(ABC):
    @abstractmethod
    async def load(self) -> WidgetSdk:
        """Load the button SDK script and return it."""


# Widget callback slot signatures.
CreateOrderCallback = Callable[[], Awaitable[str]]
ApproveCallback = Callable[[Dict[str, Any]], Awaitable[None]]
