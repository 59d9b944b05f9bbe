"""Amount formatting for provider- and server-facing fields."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from checkout_buttons.errors import InvalidArgumentError
from checkout_buttons.integrations.contracts.interfaces import Checkout

Number = Union[int, float, str, Decimal]

_CENTS = Decimal("0.01")


def round_amount(value: Number) -> Decimal:
    """Round to two decimal places, half away from zero.

    Floats go through ``str`` first so that ``21.995`` rounds to ``22.00``
    rather than to the nearest binary approximation.
    """
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidArgumentError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidArgumentError(f"Invalid amount: {value!r}")
    return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_amount(value: Number) -> str:
    return f"{round_amount(value):.2f}"


def format_outstanding_balance(checkout: Optional[Checkout]) -> str:
    # An absent checkout has no balance to report; a zero balance is still "0.00".
    if checkout is None:
        return ""
    return format_amount(checkout.outstanding_balance)
