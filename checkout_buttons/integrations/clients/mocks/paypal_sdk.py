"""
PayPal button SDK: MOCK client.

⚠️  This is a mock implementation for development and testing.
    Buttons are never drawn; ``render`` only records the selector. Tests drive
    the widget the way a buyer would, through ``trigger_create_order`` and
    ``trigger_approve``, which invoke the callbacks the host registered.
"""

import logging
from typing import Any, Dict, List, Optional

from checkout_buttons.integrations.contracts.interfaces import (
    ButtonWidget,
    RenderableWidget,
    WidgetScriptLoader,
    WidgetSdk,
)

logger = logging.getLogger(__name__)

DEFAULT_FUNDING_SOURCES = {"PAYPAL": "paypal", "PAYLATER": "paylater", "CREDIT": "credit"}


class MockButtonWidget(ButtonWidget):
    def __init__(
        self,
        options: Dict[str, Any],
        eligible: bool = True,
        render_error: Optional[Exception] = None,
        close_error: Optional[Exception] = None,
    ):
        self.options = options
        self.eligible = eligible
        self.render_error = render_error
        self.close_error = close_error
        self.rendered_into: List[str] = []
        self.closed = False

    def is_eligible(self) -> bool:
        return self.eligible

    def render(self, selector: str) -> None:
        if self.render_error is not None:
            raise self.render_error
        self.rendered_into.append(selector)

    def close(self) -> None:
        if self.close_error is not None:
            raise self.close_error
        self.closed = True

    async def trigger_create_order(self) -> str:
        return await self.options["createOrder"]()

    async def trigger_approve(self, data: Optional[Dict[str, Any]] = None) -> None:
        return await self.options["onApprove"](data if data is not None else {"payerId": "PAYER_ID"})


class MockMessageWidget(RenderableWidget):
    def __init__(self, options: Dict[str, Any]):
        self.options = options
        self.rendered_into: List[str] = []

    def render(self, selector: str) -> None:
        self.rendered_into.append(selector)


class MockPaypalSdk(WidgetSdk):
    """
    ``funding_sources`` defaults to the PayPal set; pass a wider map to mount
    other wallets (e.g. ``{"GOOGLEPAY": "googlepay"}``).
    """

    def __init__(
        self,
        eligible: bool = True,
        render_error: Optional[Exception] = None,
        close_error: Optional[Exception] = None,
        funding_sources: Optional[Dict[str, str]] = None,
    ):
        self.eligible = eligible
        self.render_error = render_error
        self.close_error = close_error
        self._funding_sources = dict(funding_sources or DEFAULT_FUNDING_SOURCES)
        self.buttons_created: List[MockButtonWidget] = []
        self.messages_created: List[MockMessageWidget] = []

    @property
    def funding_sources(self) -> Dict[str, str]:
        return self._funding_sources

    @property
    def last_button(self) -> MockButtonWidget:
        if not self.buttons_created:
            raise AssertionError("No button has been created")
        return self.buttons_created[-1]

    def buttons(self, options: Dict[str, Any]) -> MockButtonWidget:
        widget = MockButtonWidget(
            options, eligible=self.eligible, render_error=self.render_error, close_error=self.close_error
        )
        self.buttons_created.append(widget)
        return widget

    def messages(self, options: Dict[str, Any]) -> MockMessageWidget:
        widget = MockMessageWidget(options)
        self.messages_created.append(widget)
        return widget


class MockWidgetScriptLoader(WidgetScriptLoader):
    def __init__(self, sdk: Optional[MockPaypalSdk] = None):
        self.sdk = sdk or MockPaypalSdk()
        self.load_count = 0

    async def load(self) -> MockPaypalSdk:
        self.load_count += 1
        logger.debug("[PAYPAL MOCK] Script load #%d", self.load_count)
        return self.sdk
