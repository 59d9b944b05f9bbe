"""
Real storefront HTTP clients.

Purpose:
- Create single-purpose buy-now carts
- Load the shopper's current checkout
- Submit the finalization form once a wallet payment has been approved

Implementation notes:
- httpx for async requests
- Responses are normalised into contract types before they leave this module
- No client retries: cart creation and finalization are not safe to repeat

Important:
- Keep these clients as the ONLY place where storefront HTTP calls are made.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import httpx

from checkout_buttons.integrations.contracts.interfaces import (
    BuyNowCartRequestBody,
    Cart,
    CartRequestSender,
    CartSource,
    Checkout,
    CheckoutRequestSender,
    FormPoster,
)
from checkout_buttons.integrations.policy.response_wrappers import (
    normalize_cart_response,
    normalize_checkout_response,
)

logger = logging.getLogger(__name__)

CHECKOUT_INCLUDES = (
    "cart.lineItems.physicalItems.options",
    "cart.lineItems.digitalItems.options",
    "customer",
    "promotions.banners",
)


class _StorefrontClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_token: Optional[str] = None,
        timeout_seconds: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("STOREFRONT_BASE_URL", "")).rstrip("/")
        self.api_token = api_token or os.getenv("STOREFRONT_API_TOKEN", "")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def _headers(self, **extra: str) -> Dict[str, str]:
        headers: Dict[str, str] = {"Accept": "application/json", **extra}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        return headers

    def _url(self, path: str) -> str:
        if not self.base_url:
            raise ValueError("STOREFRONT_BASE_URL is not configured.")
        return f"{self.base_url}{path}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport)


class HttpCartRequestSender(_StorefrontClient, CartRequestSender):
    def __init__(self, *args: Any, cart_path: str = "/api/storefront/carts", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.cart_path = cart_path

    async def create_buy_now_cart(self, body: BuyNowCartRequestBody) -> Cart:
        url = self._url(self.cart_path)
        payload = {
            "source": body.source.value,
            "lineItems": [
                {
                    key: value
                    for key, value in {
                        "productId": item.product_id,
                        "quantity": item.quantity,
                        "optionSelections": item.option_selections,
                    }.items()
                    if value is not None
                }
                for item in body.line_items
            ],
        }
        try:
            logger.info("Creating buy-now cart at %s (%d line items)", url, len(body.line_items))
            async with self._client() as client:
                response = await client.post(url, json=payload, headers=self._headers(**{"Content-Type": "application/json"}))
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("HTTP error creating buy-now cart: %s %s", e.response.status_code, e.response.text)
            raise
        except httpx.RequestError as e:
            logger.error("Request error creating buy-now cart: %s", e)
            raise

        return normalize_cart_response(data, fallback_source=CartSource.BUY_NOW)


class HttpCheckoutRequestSender(_StorefrontClient, CheckoutRequestSender):
    def __init__(self, *args: Any, checkout_load_path: str = "/api/storefront/checkout", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.checkout_load_path = checkout_load_path

    async def load_default_checkout(self) -> Checkout:
        url = self._url(self.checkout_load_path)
        params = {"include": ",".join(CHECKOUT_INCLUDES)}
        try:
            async with self._client() as client:
                response = await client.get(url, params=params, headers=self._headers())
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("HTTP error loading checkout: %s %s", e.response.status_code, e.response.text)
            raise
        except httpx.RequestError as e:
            logger.error("Request error loading checkout: %s", e)
            raise

        return normalize_checkout_response(data)


class HttpFormPoster(_StorefrontClient, FormPoster):
    async def post_form(self, path: str, fields: Dict[str, Any]) -> None:
        url = self._url(path)
        form = {key: _form_value(value) for key, value in fields.items() if value is not None}
        try:
            logger.info("Posting %d fields to %s", len(form), url)
            async with self._client() as client:
                response = await client.post(url, data=form, headers=self._headers())
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("HTTP error posting form to %s: %s", url, e.response.status_code)
            raise
        except httpx.RequestError as e:
            logger.error("Request error posting form to %s: %s", url, e)
            raise


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


