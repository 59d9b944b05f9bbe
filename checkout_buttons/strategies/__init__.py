"""Checkout button strategy and the components it orchestrates."""

from .button_strategy import CheckoutButtonStrategy, StrategyState
from .cart_resolver import CartResolver
from .finalization import CHECKOUT_FINALIZATION_PATH, FinalizationPoster
from .options import ButtonStyle, ProviderOptions, StrategyConfig, build_strategy_config
from .tokenization import TokenizationBridge
from .widget_adapter import WidgetAdapter, WidgetBindings, WidgetHandle, get_valid_button_style

__all__ = [
    "CheckoutButtonStrategy", "StrategyState",
    "CartResolver",
    "CHECKOUT_FINALIZATION_PATH", "FinalizationPoster",
    "ButtonStyle", "ProviderOptions", "StrategyConfig", "build_strategy_config",
    "TokenizationBridge",
    "WidgetAdapter", "WidgetBindings", "WidgetHandle", "get_valid_button_style",
]
