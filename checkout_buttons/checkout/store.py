"""
In-memory checkout state store.

Holds the latest checkout snapshot and the available payment methods, and
reloads the snapshot through a ``CheckoutRequestSender``. Every read returns
the snapshot as it is at the moment of the call; nothing is cached by the
readers.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from checkout_buttons.errors import MissingDataError, MissingDataErrorType
from checkout_buttons.integrations.contracts.interfaces import (
    Address,
    Cart,
    Checkout,
    CheckoutRequestSender,
    CheckoutStore,
    PaymentMethod,
)

logger = logging.getLogger(__name__)


class CheckoutStateStore(CheckoutStore):
    def __init__(
        self,
        checkout_sender: CheckoutRequestSender,
        payment_methods: Iterable[PaymentMethod] = (),
        checkout: Optional[Checkout] = None,
    ) -> None:
        self._checkout_sender = checkout_sender
        self._checkout = checkout
        self._payment_methods: Dict[str, PaymentMethod] = {method.id: method for method in payment_methods}

    # --- Reads -------------------------------------------------------------

    def get_checkout(self) -> Optional[Checkout]:
        return self._checkout

    def get_checkout_or_throw(self) -> Checkout:
        if self._checkout is None:
            raise MissingDataError(MissingDataErrorType.MISSING_CHECKOUT)
        return self._checkout

    def get_cart_or_throw(self) -> Cart:
        if self._checkout is None:
            raise MissingDataError(MissingDataErrorType.MISSING_CART)
        return self._checkout.cart

    def get_payment_method_or_throw(self, method_id: str) -> PaymentMethod:
        method = self._payment_methods.get(method_id)
        if method is None:
            raise MissingDataError(MissingDataErrorType.MISSING_PAYMENT_METHOD)
        return method

    def get_shipping_address(self) -> Optional[Address]:
        if self._checkout is None:
            return None
        for consignment in self._checkout.consignments:
            if consignment.shipping_address is not None:
                return consignment.shipping_address
        return None

    # --- Writes ------------------------------------------------------------

    def set_payment_method(self, method: PaymentMethod) -> None:
        self._payment_methods[method.id] = method

    async def load_default_checkout(self) -> Checkout:
        checkout = await self._checkout_sender.load_default_checkout()
        self._checkout = checkout
        logger.debug("Checkout %s reloaded (outstanding_balance=%s)", checkout.id, checkout.outstanding_balance)
        return checkout
