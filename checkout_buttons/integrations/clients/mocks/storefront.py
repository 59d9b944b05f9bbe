"""
Storefront: MOCK clients.

⚠️  These stand in for the storefront's cart, checkout and form endpoints.
    They keep everything in memory and never touch the network.
"""

import itertools
import logging
from typing import Any, Dict, List, Optional, Tuple

from checkout_buttons.integrations.contracts.interfaces import (
    BuyNowCartRequestBody,
    Cart,
    CartRequestSender,
    Checkout,
    CheckoutRequestSender,
    FormPoster,
)

from .fixtures import get_buy_now_cart, get_checkout

logger = logging.getLogger(__name__)


class MockCartRequestSender(CartRequestSender):
    def __init__(self, cart: Optional[Cart] = None, error: Optional[Exception] = None):
        self.cart = cart
        self.error = error
        self._ids = itertools.count(1000)
        self.requests: List[BuyNowCartRequestBody] = []

    async def create_buy_now_cart(self, body: BuyNowCartRequestBody) -> Cart:
        self.requests.append(body)
        if self.error is not None:
            raise self.error
        cart = self.cart or get_buy_now_cart(cart_id=str(next(self._ids)))
        logger.info("[STOREFRONT MOCK] Buy-now cart %s created (%d line items)", cart.id, len(body.line_items))
        return cart


class MockCheckoutRequestSender(CheckoutRequestSender):
    """Returns ``checkout`` (or the fixture checkout) and counts loads."""

    def __init__(self, checkout: Optional[Checkout] = None, error: Optional[Exception] = None):
        self.checkout = checkout or get_checkout()
        self.error = error
        self.load_count = 0

    async def load_default_checkout(self) -> Checkout:
        self.load_count += 1
        if self.error is not None:
            raise self.error
        return self.checkout


class RecordingFormPoster(FormPoster):
    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.posts: List[Tuple[str, Dict[str, Any]]] = []

    async def post_form(self, path: str, fields: Dict[str, Any]) -> None:
        self.posts.append((path, dict(fields)))
        logger.info("[STOREFRONT MOCK] Form posted to %s (%d fields)", path, len(fields))
        if self.error is not None:
            raise self.error
