"""
Wires a CheckoutButtonStrategy from configuration.

The browser-side collaborators (SDK session and widget script loader) always
come from the host. Storefront collaborators are the in-memory mocks when
``use_mocks`` is set, otherwise the httpx clients.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from checkout_buttons.checkout.store import CheckoutStateStore
from checkout_buttons.integrations.contracts.interfaces import (
    CartRequestSender,
    CheckoutRequestSender,
    FormPoster,
    PaymentMethod,
    SdkSession,
    WidgetScriptLoader,
)
from checkout_buttons.strategies import CheckoutButtonStrategy, FinalizationPoster, WidgetAdapter
from checkout_buttons.utils.config_loader import CheckoutButtonsConfig, load_buttons_config

logger = logging.getLogger(__name__)


def _storefront_clients(cfg: CheckoutButtonsConfig):
    if cfg.use_mocks:
        from checkout_buttons.integrations.clients.mocks import (
            MockCartRequestSender,
            MockCheckoutRequestSender,
            RecordingFormPoster,
        )

        logger.info("Using mock storefront clients")
        return MockCartRequestSender(), MockCheckoutRequestSender(), RecordingFormPoster()

    from checkout_buttons.integrations.clients.real_http import (
        HttpCartRequestSender,
        HttpCheckoutRequestSender,
        HttpFormPoster,
    )

    storefront = cfg.storefront
    common = dict(
        base_url=storefront.base_url,
        api_token=storefront.api_token,
        timeout_seconds=storefront.timeout_seconds,
    )
    logger.info("Using storefront at %s", storefront.base_url or "<unset>")
    return (
        HttpCartRequestSender(cart_path=storefront.cart_path, **common),
        HttpCheckoutRequestSender(checkout_load_path=storefront.checkout_load_path, **common),
        HttpFormPoster(**common),
    )


def create_checkout_button_strategy(
    sdk_session: SdkSession,
    script_loader: WidgetScriptLoader,
    *,
    payment_methods: Iterable[PaymentMethod] = (),
    provider_key: str = "braintreepaypal",
    cfg: Optional[CheckoutButtonsConfig] = None,
    cart_request_sender: Optional[CartRequestSender] = None,
    checkout_request_sender: Optional[CheckoutRequestSender] = None,
    form_poster: Optional[FormPoster] = None,
) -> CheckoutButtonStrategy:
    cfg = cfg or load_buttons_config()
    default_cart_sender, default_checkout_sender, default_form_poster = _storefront_clients(cfg)

    store = CheckoutStateStore(checkout_request_sender or default_checkout_sender, payment_methods)
    return CheckoutButtonStrategy(
        store=store,
        cart_request_sender=cart_request_sender or default_cart_sender,
        sdk_session=sdk_session,
        widget_adapter=WidgetAdapter(script_loader, cfg.button),
        finalization_poster=FinalizationPoster(form_poster or default_form_poster, cfg.storefront.checkout_path),
        provider_key=provider_key,
    )
