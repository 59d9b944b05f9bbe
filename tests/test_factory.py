import pytest

from checkout_buttons import StrategyState, create_checkout_button_strategy
from checkout_buttons.integrations.clients.mocks import (
    MockBraintreeSdkSession,
    MockWidgetScriptLoader,
    RecordingFormPoster,
)
from checkout_buttons.integrations.clients.mocks.fixtures import get_braintree_payment_method
from checkout_buttons.utils.config_loader import CheckoutButtonsConfig, StorefrontConfig


@pytest.mark.asyncio
async def test_mock_wiring_runs_a_full_payment_cycle():
    session = MockBraintreeSdkSession()
    loader = MockWidgetScriptLoader()
    form_poster = RecordingFormPoster()
    strategy = create_checkout_button_strategy(
        session,
        loader,
        payment_methods=[get_braintree_payment_method()],
        cfg=CheckoutButtonsConfig(use_mocks=True, storefront=StorefrontConfig(checkout_path="/custom/checkout")),
        form_poster=form_poster,
    )

    await strategy.initialize({"method_id": "braintreepaypal", "container_id": "paypal-button", "braintreepaypal": {}})
    await loader.sdk.last_button.trigger_create_order()
    await loader.sdk.last_button.trigger_approve()

    assert strategy.state is StrategyState.READY
    assert [path for path, _ in form_poster.posts] == ["/custom/checkout"]


@pytest.mark.asyncio
async def test_real_wiring_requires_a_storefront_url(monkeypatch):
    monkeypatch.delenv("STOREFRONT_BASE_URL", raising=False)
    session = MockBraintreeSdkSession()
    strategy = create_checkout_button_strategy(
        session,
        MockWidgetScriptLoader(),
        payment_methods=[get_braintree_payment_method()],
        cfg=CheckoutButtonsConfig(use_mocks=False),
    )

    with pytest.raises(ValueError):
        await strategy.initialize({"method_id": "braintreepaypal", "container_id": "paypal-button", "braintreepaypal": {}})

    assert session.teardown_count == 1
    assert strategy.state is StrategyState.UNINITIALIZED
