"""Resolves the cart a button payment is made against."""

from __future__ import annotations

import logging

from checkout_buttons.errors import MissingDataError, MissingDataErrorType
from checkout_buttons.integrations.contracts.interfaces import CartRequestSender, CartSource, CheckoutStore
from checkout_buttons.integrations.contracts.payments import CartContext

from .options import StrategyConfig

logger = logging.getLogger(__name__)


class CartResolver:
    def __init__(self, store: CheckoutStore, cart_request_sender: CartRequestSender) -> None:
        self._store = store
        self._cart_request_sender = cart_request_sender

    async def resolve(self, config: StrategyConfig) -> CartContext:
        """
        Buy-now: create a single-purpose cart (one network call, never retried;
        transport errors propagate unchanged).

        Existing cart: read whatever cart the store holds right now. No side
        effects, so callers re-resolve on every order-creation event.
        """
        if config.buy_now_descriptor is None:
            cart = self._store.get_cart_or_throw()
            return CartContext(cart_id=cart.id, source=CartSource.EXISTING, cart=cart)

        body = config.buy_now_descriptor.get_buy_now_cart_request_body()
        if not body:
            raise MissingDataError(MissingDataErrorType.MISSING_CART)

        cart = await self._cart_request_sender.create_buy_now_cart(body)
        logger.info("Buy-now cart %s created for %s", cart.id, config.method_id)
        return CartContext(cart_id=cart.id, source=CartSource.BUY_NOW, cart=cart)
