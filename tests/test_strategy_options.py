import pytest
from pydantic import ValidationError

from checkout_buttons.errors import InvalidArgumentError
from checkout_buttons.integrations.clients.mocks.fixtures import get_buy_now_cart_request_body, get_shipping_address
from checkout_buttons.strategies.options import ProviderOptions, build_strategy_config


def _options(provider):
    return {"method_id": "braintreepaypal", "container_id": "paypal-button", "braintreepaypal": provider}


def test_minimal_options_build_an_existing_cart_config():
    config = build_strategy_config(_options({}), "braintreepaypal")

    assert config.method_id == "braintreepaypal"
    assert config.container_id == "paypal-button"
    assert config.is_buy_now is False
    assert config.has_shipping_address_override is False
    assert config.should_process_payment is False


def test_explicit_null_shipping_address_is_recorded_as_override():
    config = build_strategy_config(_options({"shipping_address": None}), "braintreepaypal")

    assert config.has_shipping_address_override is True
    assert config.shipping_address_override is None


def test_shipping_address_override_is_kept():
    config = build_strategy_config(_options({"shipping_address": get_shipping_address()}), "braintreepaypal")

    assert config.has_shipping_address_override is True
    assert config.shipping_address_override.address1 == "12345 Testing Way"


def test_provider_options_instance_is_accepted():
    provider = ProviderOptions(currency_code="USD", should_process_payment=True)

    config = build_strategy_config(_options(provider), "braintreepaypal")

    assert config.currency_code == "USD"
    assert config.should_process_payment is True


def test_buy_now_options_build_a_buy_now_config():
    config = build_strategy_config(
        _options({
            "currency_code": "USD",
            "buy_now_initialize_options": {"get_buy_now_cart_request_body": get_buy_now_cart_request_body},
        }),
        "braintreepaypal",
    )

    assert config.is_buy_now is True
    assert config.buy_now_descriptor.get_buy_now_cart_request_body().line_items[0].product_id == 1


def test_unknown_provider_option_is_rejected():
    with pytest.raises(InvalidArgumentError):
        build_strategy_config(_options({"colour": "gold"}), "braintreepaypal")


def test_provider_options_under_other_key_are_rejected():
    options = {"method_id": "braintreepaypal", "container_id": "paypal-button", "paypal": {}}

    with pytest.raises(InvalidArgumentError) as exc_info:
        build_strategy_config(options, "braintreepaypal")

    assert "options.braintreepaypal" in str(exc_info.value)


def test_config_is_read_only():
    config = build_strategy_config(_options({}), "braintreepaypal")

    with pytest.raises(ValidationError):
        config.container_id = "elsewhere"
