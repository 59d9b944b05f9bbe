"""Error taxonomy for checkout button strategies.

Callers distinguish three families:

- ``InvalidArgumentError``: malformed caller input or a malformed provider
  payload. Never retried.
- ``MissingDataError``: required upstream data is absent. The ``subtype``
  says which piece.
- Transport/provider errors: raised by the collaborators themselves and passed
  through unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class CheckoutButtonError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgumentError(CheckoutButtonError, ValueError):
    def __init__(self, message: str = "Invalid arguments have been provided.", *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload or {}


class NotInitializedError(CheckoutButtonError):
    def __init__(self, message: str = "The checkout button strategy has not been initialized.") -> None:
        super().__init__(message)
        self.message = message


class MissingDataErrorType(str, Enum):
    MISSING_CART = "MissingCart"
    MISSING_CHECKOUT = "MissingCheckout"
    MISSING_PAYMENT_METHOD = "MissingPaymentMethod"
    MISSING_CLIENT_TOKEN = "MissingClientToken"


_MISSING_DATA_MESSAGES = {
    MissingDataErrorType.MISSING_CART: "Unable to proceed because cart data is unavailable.",
    MissingDataErrorType.MISSING_CHECKOUT: "Unable to proceed because checkout data is unavailable.",
    MissingDataErrorType.MISSING_PAYMENT_METHOD: "Unable to proceed because payment method data is unavailable or not properly configured.",
    MissingDataErrorType.MISSING_CLIENT_TOKEN: "Unable to proceed because the client token required by the payment provider is missing.",
}


@dataclass(eq=False)
class MissingDataError(CheckoutButtonError):
    """Required data is not available.

    Two errors with the same subtype compare equal, which lets callers match
    on the subtype instead of the message text.
    """

    subtype: MissingDataErrorType

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return _MISSING_DATA_MESSAGES[self.subtype]

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MissingDataError):
            return NotImplemented
        return self.subtype is other.subtype

    def __hash__(self) -> int:
        return hash((type(self), self.subtype))

    def __reduce__(self):
        return (type(self), (self.subtype,))
