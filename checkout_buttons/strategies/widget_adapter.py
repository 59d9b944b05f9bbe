"""Mounts the foreign payment button and messaging widgets.

The adapter hands the SDK two callback slots (order creation and buyer
approval) exactly as it receives them. It never wraps them in error handling:
the SDK decides what its own UI shows from the outcome of those awaitables.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from checkout_buttons.errors import InvalidArgumentError
from checkout_buttons.integrations.contracts.interfaces import (
    ApproveCallback,
    ButtonEnvironment,
    ButtonWidget,
    CreateOrderCallback,
    WidgetScriptLoader,
    WidgetSdk,
)
from checkout_buttons.money import Number, format_amount
from checkout_buttons.utils.config_loader import ButtonConfig

from .options import ButtonStyle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WidgetBindings:
    create_order: CreateOrderCallback
    on_approve: ApproveCallback


@dataclass(frozen=True)
class WidgetHandle:
    """A rendered button. Only the adapter touches ``button``."""

    container_id: str
    environment: ButtonEnvironment
    button: ButtonWidget


def get_valid_button_style(style: Optional[ButtonStyle], button_config: Optional[ButtonConfig] = None) -> Dict[str, Any]:
    cfg = button_config or ButtonConfig()
    values = style.model_dump() if style else {}
    values["shape"] = values.get("shape") or cfg.default_shape
    values["height"] = _get_valid_height(values.get("height"), cfg)
    return {key: value for key, value in values.items() if value is not None}


def _get_valid_height(height: Any, cfg: ButtonConfig) -> float:
    if isinstance(height, bool) or not isinstance(height, (int, float)) or height > cfg.max_height:
        return cfg.default_height
    if height < cfg.min_height:
        return cfg.min_height
    return height


def selector_for(container_id: str) -> str:
    return f"#{container_id}"


class WidgetAdapter:
    def __init__(self, script_loader: WidgetScriptLoader, button_config: Optional[ButtonConfig] = None) -> None:
        self._script_loader = script_loader
        self._button_config = button_config or ButtonConfig()
        self._sdk: Optional[WidgetSdk] = None

    async def _load_sdk(self) -> WidgetSdk:
        if self._sdk is None:
            self._sdk = await self._script_loader.load()
        return self._sdk

    async def mount(
        self,
        container_id: str,
        bindings: WidgetBindings,
        style: Optional[ButtonStyle] = None,
        *,
        test_mode: bool,
        funding_source: str = "PAYPAL",
        on_eligibility_failure: Optional[Callable[[], Any]] = None,
    ) -> Optional[WidgetHandle]:
        """Render the button, or return None when the buyer is not eligible."""
        sdk = await self._load_sdk()
        if funding_source not in sdk.funding_sources:
            raise InvalidArgumentError(
                f"The payment button SDK does not support the '{funding_source}' funding source."
            )
        environment = ButtonEnvironment.SANDBOX if test_mode else ButtonEnvironment.PRODUCTION

        button = sdk.buttons({
            "env": environment.value,
            "commit": False,
            "fundingSource": sdk.funding_sources[funding_source],
            "style": get_valid_button_style(style, self._button_config),
            "createOrder": bindings.create_order,
            "onApprove": bindings.on_approve,
        })

        if not button.is_eligible():
            logger.warning("Payment button for #%s is not eligible; skipping render", container_id)
            if on_eligibility_failure is not None:
                result = on_eligibility_failure()
                if inspect.isawaitable(result):
                    await result
            return None

        button.render(selector_for(container_id))
        logger.info("Payment button rendered into #%s (env=%s)", container_id, environment.value)
        return WidgetHandle(container_id=container_id, environment=environment, button=button)

    async def mount_messaging(self, container_id: Optional[str], amount: Number, placement: Optional[str] = None) -> None:
        if not container_id:
            return
        sdk = await self._load_sdk()
        messages = sdk.messages({
            "amount": format_amount(amount),
            "placement": placement or self._button_config.messaging_placement,
        })
        messages.render(selector_for(container_id))

    async def unmount(self, handle: Optional[WidgetHandle]) -> None:
        if handle is None:
            return
        handle.button.close()
        logger.debug("Payment button removed from #%s", handle.container_id)
