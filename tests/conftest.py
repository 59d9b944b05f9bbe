"""Pytest fixtures for checkout button strategy tests."""

import pytest

from checkout_buttons.checkout.store import CheckoutStateStore
from checkout_buttons.integrations.clients.mocks import (
    MockBraintreeSdkSession,
    MockCartRequestSender,
    MockCheckoutRequestSender,
    MockPaypalCheckout,
    MockPaypalSdk,
    MockWidgetScriptLoader,
    RecordingFormPoster,
)
from checkout_buttons.integrations.clients.mocks.fixtures import get_braintree_payment_method
from checkout_buttons.strategies import CheckoutButtonStrategy, FinalizationPoster, WidgetAdapter


@pytest.fixture
def paypal_checkout():
    return MockPaypalCheckout()


@pytest.fixture
def sdk_session(paypal_checkout):
    return MockBraintreeSdkSession(paypal_checkout=paypal_checkout)


@pytest.fixture
def paypal_sdk():
    return MockPaypalSdk()


@pytest.fixture
def script_loader(paypal_sdk):
    return MockWidgetScriptLoader(paypal_sdk)


@pytest.fixture
def checkout_sender():
    return MockCheckoutRequestSender()


@pytest.fixture
def cart_sender():
    return MockCartRequestSender()


@pytest.fixture
def form_poster():
    return RecordingFormPoster()


@pytest.fixture
def payment_method():
    return get_braintree_payment_method()


@pytest.fixture
def store(checkout_sender, payment_method):
    return CheckoutStateStore(checkout_sender, [payment_method])


@pytest.fixture
def strategy(store, cart_sender, sdk_session, script_loader, form_poster):
    return CheckoutButtonStrategy(
        store=store,
        cart_request_sender=cart_sender,
        sdk_session=sdk_session,
        widget_adapter=WidgetAdapter(script_loader),
        finalization_poster=FinalizationPoster(form_poster),
    )
