"""Caller-facing initialization options and the validated StrategyConfig.

``initialize`` receives a plain mapping::

    {
        "method_id": "braintreepaypal",
        "container_id": "paypal-button",
        "braintreepaypal": {...provider options...},
    }

The provider options may be a dict or a ``ProviderOptions`` instance. They are
validated once into a frozen ``StrategyConfig`` which is read-only for the
rest of the strategy's life.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from checkout_buttons.errors import InvalidArgumentError
from checkout_buttons.integrations.contracts.interfaces import Address, BuyNowCartRequestBody

ErrorCallback = Callable[[BaseException], Any]


class ButtonStyle(BaseModel):
    model_config = ConfigDict(extra="forbid")

    color: Optional[str] = None
    height: Optional[float] = None
    label: Optional[str] = None
    layout: Optional[str] = None
    shape: Optional[str] = None
    size: Optional[str] = None
    tagline: Optional[bool] = None


class BuyNowInitializeOptions(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    get_buy_now_cart_request_body: Callable[[], Optional[BuyNowCartRequestBody]]


class ProviderOptions(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    messaging_container_id: Optional[str] = None
    style: Optional[ButtonStyle] = None
    currency_code: Optional[str] = None
    buy_now_initialize_options: Optional[BuyNowInitializeOptions] = None
    # None means "no shipping address"; leaving the field out means
    # "use the checkout's shipping address".
    shipping_address: Optional[Address] = None
    should_process_payment: bool = False
    on_error: Optional[ErrorCallback] = None
    on_payment_error: Optional[ErrorCallback] = None
    on_authorize_error: Optional[ErrorCallback] = None
    on_eligibility_failure: Optional[Callable[[], Any]] = None


class StrategyCallbacks(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    on_error: Optional[ErrorCallback] = None
    on_payment_error: Optional[ErrorCallback] = None
    on_authorize_error: Optional[ErrorCallback] = None
    on_eligibility_failure: Optional[Callable[[], Any]] = None


class StrategyConfig(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    method_id: str = Field(min_length=1)
    container_id: str = Field(min_length=1)
    messaging_container_id: Optional[str] = None
    style: Optional[ButtonStyle] = None
    currency_code: Optional[str] = None
    buy_now_descriptor: Optional[BuyNowInitializeOptions] = None
    shipping_address_override: Optional[Address] = None
    has_shipping_address_override: bool = False
    should_process_payment: bool = False
    callbacks: StrategyCallbacks = Field(default_factory=StrategyCallbacks)

    @model_validator(mode="after")
    def buy_now_requires_currency(self):
        if self.buy_now_descriptor is not None and not self.currency_code:
            raise ValueError("currency_code is required for the buy-now flow")
        return self

    @property
    def is_buy_now(self) -> bool:
        return self.buy_now_descriptor is not None


def build_strategy_config(options: Optional[Mapping[str, Any]], provider_key: str) -> StrategyConfig:
    if not options:
        raise InvalidArgumentError("Unable to initialize payment because no options were provided.")

    method_id = options.get("method_id")
    container_id = options.get("container_id")
    raw_provider = options.get(provider_key)

    if not method_id:
        raise InvalidArgumentError('Unable to initialize payment because "options.method_id" argument is not provided.')
    if not container_id:
        raise InvalidArgumentError('Unable to initialize payment because "options.container_id" argument is not provided.')
    if raw_provider is None:
        raise InvalidArgumentError(
            f'Unable to initialize payment because "options.{provider_key}" argument is not provided.'
        )

    try:
        provider = ProviderOptions.model_validate(raw_provider)
        return StrategyConfig(
            method_id=method_id,
            container_id=container_id,
            messaging_container_id=provider.messaging_container_id,
            style=provider.style,
            currency_code=provider.currency_code,
            buy_now_descriptor=provider.buy_now_initialize_options,
            shipping_address_override=provider.shipping_address,
            has_shipping_address_override="shipping_address" in provider.model_fields_set,
            should_process_payment=provider.should_process_payment,
            callbacks=StrategyCallbacks(
                on_error=provider.on_error,
                on_payment_error=provider.on_payment_error,
                on_authorize_error=provider.on_authorize_error,
                on_eligibility_failure=provider.on_eligibility_failure,
            ),
        )
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid {provider_key} options: {exc}") from exc
