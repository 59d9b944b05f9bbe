"""
Checkout button strategy.

Owns one mounted wallet button for its whole life:

    Uninitialized → Initializing → Ready ⇄ AwaitingApproval
                                     ↓
                               Deinitialized

The button's two callbacks are entry points the foreign widget calls when it
chooses to. The strategy never assumes their order; every order-creation
event rebuilds its request from the latest checkout snapshot.

Error routing:
- setup/validation errors reject ``initialize``
- widget construction/render errors go to ``on_error``
- order-creation errors go to ``on_payment_error`` and are re-raised so the
  widget's own error state activates
- approval/tokenization errors go to ``on_authorize_error``
- finalization transport errors propagate
"""

from __future__ import annotations

import inspect
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from checkout_buttons.errors import (
    InvalidArgumentError,
    MissingDataError,
    MissingDataErrorType,
    NotInitializedError,
)
from checkout_buttons.integrations.contracts.interfaces import (
    CartRequestSender,
    CheckoutStore,
    PaymentMethod,
    ProviderCheckout,
    SdkSession,
)
from checkout_buttons.integrations.contracts.payments import CartContext, FinalizeOptions
from checkout_buttons.money import format_amount, format_outstanding_balance

from .cart_resolver import CartResolver
from .finalization import FinalizationPoster
from .options import StrategyConfig, build_strategy_config
from .tokenization import TokenizationBridge
from .wallets import SetupContext, WalletInitializer, get_wallet_initializer
from .widget_adapter import WidgetAdapter, WidgetBindings, WidgetHandle

logger = logging.getLogger(__name__)

_PAYER_REFERENCE_KEYS = ("payerId", "payerID", "payer_reference")


class StrategyState(str, Enum):
    UNINITIALIZED = "Uninitialized"
    INITIALIZING = "Initializing"
    READY = "Ready"
    AWAITING_APPROVAL = "AwaitingApproval"
    DEINITIALIZED = "Deinitialized"


_ACTIVE_STATES = (StrategyState.READY, StrategyState.AWAITING_APPROVAL)


class CheckoutButtonStrategy:
    def __init__(
        self,
        store: CheckoutStore,
        cart_request_sender: CartRequestSender,
        sdk_session: SdkSession,
        widget_adapter: WidgetAdapter,
        finalization_poster: FinalizationPoster,
        provider_key: str = "braintreepaypal",
    ) -> None:
        self._store = store
        self._sdk_session = sdk_session
        self._widget_adapter = widget_adapter
        self._finalization_poster = finalization_poster
        self._cart_resolver = CartResolver(store, cart_request_sender)
        self._provider_key = provider_key

        self._state = StrategyState.UNINITIALIZED
        self._config: Optional[StrategyConfig] = None
        self._wallet: Optional[WalletInitializer] = None
        self._tokenizer: Optional[TokenizationBridge] = None
        self._payment_method: Optional[PaymentMethod] = None
        self._provider_checkout: Optional[ProviderCheckout] = None
        self._cart_context: Optional[CartContext] = None
        self._widget_handle: Optional[WidgetHandle] = None

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def state(self) -> StrategyState:
        return self._state

    @property
    def cart_context(self) -> Optional[CartContext]:
        return self._cart_context

    @property
    def widget_handle(self) -> Optional[WidgetHandle]:
        return self._widget_handle

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def initialize(self, options: Optional[Mapping[str, Any]]) -> None:
        if self._state in (StrategyState.INITIALIZING, *_ACTIVE_STATES):
            raise InvalidArgumentError("The checkout button strategy is already initialized.")

        config = build_strategy_config(options, self._provider_key)
        wallet = get_wallet_initializer(self._provider_key)

        self._state = StrategyState.INITIALIZING
        self._config = config
        self._wallet = wallet
        self._tokenizer = TokenizationBridge(wallet)
        session_started = False

        try:
            payment_method = self._store.get_payment_method_or_throw(config.method_id)
            if not payment_method.client_token:
                raise MissingDataError(MissingDataErrorType.MISSING_CLIENT_TOKEN)
            self._payment_method = payment_method

            self._sdk_session.initialize(payment_method.client_token)
            session_started = True

            if config.is_buy_now:
                self._cart_context = await self._resolve_buy_now_cart(config)
                currency = config.currency_code
            else:
                await self._store.load_default_checkout()
                currency = self._store.get_cart_or_throw().currency.code

            await self._mount_widgets(config, payment_method, wallet, currency)
        except Exception:
            logger.warning("Initialization of %s failed; releasing resources", config.method_id)
            if session_started:
                await self._release()
            else:
                self._reset()
            self._state = StrategyState.UNINITIALIZED
            raise

        self._state = StrategyState.READY
        logger.info("Checkout button %s initialised in #%s", config.method_id, config.container_id)

    async def deinitialize(self) -> None:
        """Unmount and release the session. A no-op unless the strategy is live."""
        if self._state not in _ACTIVE_STATES:
            return
        await self._release()
        self._state = StrategyState.DEINITIALIZED
        logger.info("Checkout button %s deinitialised", self._provider_key)

    async def _resolve_buy_now_cart(self, config: StrategyConfig) -> Optional[CartContext]:
        try:
            return await self._cart_resolver.resolve(config)
        except MissingDataError as error:
            if error.subtype is not MissingDataErrorType.MISSING_CART:
                raise
            # Surfaced through on_payment_error when the buyer clicks.
            logger.warning("No buy-now cart request body for %s", config.method_id)
            return None

    async def _mount_widgets(
        self,
        config: StrategyConfig,
        payment_method: PaymentMethod,
        wallet: WalletInitializer,
        currency: str,
    ) -> None:
        try:
            self._provider_checkout = await self._sdk_session.create_checkout_component(
                currency,
                is_credit_enabled=bool(payment_method.initialization_data.get("isCreditEnabled")),
            )
            self._widget_handle = await self._widget_adapter.mount(
                config.container_id,
                WidgetBindings(create_order=self._handle_create_order, on_approve=self._handle_approve),
                config.style,
                test_mode=payment_method.config.test_mode,
                funding_source=wallet.funding_source,
                on_eligibility_failure=config.callbacks.on_eligibility_failure,
            )

            if config.messaging_container_id:
                amount = self._messaging_amount()
                if amount is not None:
                    await self._widget_adapter.mount_messaging(config.messaging_container_id, amount)
        except Exception as error:
            if not await self._report(config.callbacks.on_error, error):
                raise

    def _messaging_amount(self) -> Optional[float]:
        if self._cart_context is not None:
            return self._cart_context.cart.cart_amount
        if self._config is not None and self._config.is_buy_now:
            return None
        return self._store.get_cart_or_throw().cart_amount

    async def _release(self) -> None:
        # Every step runs even when an earlier one fails; the session must be released.
        handle, wallet = self._widget_handle, self._wallet
        self._reset()
        await self._release_step("payment button", self._widget_adapter.unmount(handle))
        if wallet is not None:
            await self._release_step("wallet", wallet.teardown())
        await self._release_step("SDK session", self._sdk_session.teardown())

    async def _release_step(self, name: str, step: Awaitable[Any]) -> None:
        try:
            await step
        except Exception:
            logger.exception("Releasing the %s failed; continuing teardown", name)

    def _reset(self) -> None:
        self._widget_handle = None
        self._cart_context = None
        self._provider_checkout = None
        self._payment_method = None
        self._tokenizer = None
        self._wallet = None
        self._config = None

    # ------------------------------------------------------------------
    # Widget entry points
    # ------------------------------------------------------------------

    async def _handle_create_order(self) -> str:
        config = self._require_config()
        try:
            if config.is_buy_now:
                context = self._cart_context
                if context is None:
                    raise MissingDataError(MissingDataErrorType.MISSING_CART)
                checkout = None
                amount = format_amount(context.cart.cart_amount)
                shipping_address = config.shipping_address_override
            else:
                await self._store.load_default_checkout()
                context = await self._cart_resolver.resolve(config)
                checkout = self._store.get_checkout()
                amount = format_outstanding_balance(checkout)
                if config.has_shipping_address_override:
                    shipping_address = config.shipping_address_override
                else:
                    shipping_address = self._store.get_shipping_address()

            request = self._wallet.build_setup_request(
                SetupContext(
                    amount=amount,
                    currency_code=context.cart.currency.code,
                    payment_method=self._payment_method,
                    shipping_address=shipping_address,
                    checkout=checkout,
                )
            )
            order_token = await self._provider_checkout.create_payment(request)
        except Exception as error:
            await self._report(config.callbacks.on_payment_error, error)
            raise

        if self._state is StrategyState.READY:
            self._state = StrategyState.AWAITING_APPROVAL
        return order_token

    async def _handle_approve(self, data: Optional[Dict[str, Any]]) -> None:
        config = self._require_config()
        wallet = self._wallet
        try:
            data_collector = await self._sdk_session.get_data_collector(**wallet.data_collector_options)
            raw_payload = await self._provider_checkout.tokenize_payment(data)
            approval = self._tokenizer.tokenize(
                raw_payload,
                device_data=data_collector.device_data,
                payer_reference=_payer_reference(data),
            )
        except Exception as error:
            self._mark_ready()
            if not await self._report(config.callbacks.on_authorize_error, error):
                logger.warning("Approval for %s failed with no on_authorize_error callback: %s", config.method_id, error)
            return None

        context = self._cart_context
        try:
            await self._finalization_poster.finalize(
                approval,
                approval.billing_address,
                approval.shipping_address,
                FinalizeOptions(
                    payment_type=wallet.payment_type,
                    provider=config.method_id,
                    should_process_payment=config.should_process_payment,
                    cart_id=context.cart_id if context is not None and context.is_buy_now else None,
                ),
            )
        finally:
            self._mark_ready()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_config(self) -> StrategyConfig:
        if self._config is None or self._state not in _ACTIVE_STATES:
            raise NotInitializedError()
        return self._config

    def _mark_ready(self) -> None:
        if self._state is StrategyState.AWAITING_APPROVAL:
            self._state = StrategyState.READY

    async def _report(self, callback: Optional[Callable[[BaseException], Any]], error: BaseException) -> bool:
        if callback is None:
            return False
        logger.warning("Routing %s to caller callback", type(error).__name__)
        try:
            result = callback(error)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Error callback raised while handling %s", type(error).__name__)
        return True


def _payer_reference(data: Optional[Dict[str, Any]]) -> Optional[str]:
    if not data:
        return None
    for key in _PAYER_REFERENCE_KEYS:
        if data.get(key):
            return str(data[key])
    return None
