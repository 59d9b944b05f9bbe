"""Wallet checkout buttons: cart resolution, widget mounting, tokenization and finalization."""

from .errors import (
    CheckoutButtonError,
    InvalidArgumentError,
    MissingDataError,
    MissingDataErrorType,
    NotInitializedError,
)
from .factory import create_checkout_button_strategy
from .strategies import CheckoutButtonStrategy, StrategyState

__version__ = "0.1.0"

__all__ = [
    "CheckoutButtonError",
    "InvalidArgumentError",
    "MissingDataError",
    "MissingDataErrorType",
    "NotInitializedError",
    "CheckoutButtonStrategy",
    "StrategyState",
    "create_checkout_button_strategy",
]
