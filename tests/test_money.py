from decimal import Decimal

import pytest

from checkout_buttons.errors import InvalidArgumentError
from checkout_buttons.integrations.clients.mocks.fixtures import get_checkout
from checkout_buttons.money import format_amount, format_outstanding_balance, round_amount


@pytest.mark.parametrize(
    "value, expected",
    [
        (21.995, "22.00"),
        (0, "0.00"),
        (190, "190.00"),
        (1.005, "1.01"),
        (-2.345, "-2.35"),
        ("12.344", "12.34"),
        (Decimal("7.125"), "7.13"),
    ],
)
def test_format_amount_rounds_half_away_from_zero(value, expected):
    assert format_amount(value) == expected


def test_round_amount_returns_two_place_decimal():
    assert round_amount(3.1) == Decimal("3.10")


@pytest.mark.parametrize("value", ["abc", float("nan"), float("inf")])
def test_invalid_amounts_are_rejected(value):
    with pytest.raises(InvalidArgumentError):
        round_amount(value)


def test_outstanding_balance_without_checkout_is_empty():
    assert format_outstanding_balance(None) == ""


def test_zero_outstanding_balance_with_checkout():
    assert format_outstanding_balance(get_checkout(outstanding_balance=0)) == "0.00"
