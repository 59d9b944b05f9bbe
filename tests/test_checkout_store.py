import pytest

from checkout_buttons.checkout.store import CheckoutStateStore
from checkout_buttons.errors import MissingDataError, MissingDataErrorType
from checkout_buttons.integrations.clients.mocks import MockCheckoutRequestSender
from checkout_buttons.integrations.clients.mocks.fixtures import get_braintree_payment_method, get_checkout
from checkout_buttons.integrations.contracts.interfaces import Consignment


def test_empty_store_raises_missing_data():
    store = CheckoutStateStore(MockCheckoutRequestSender())

    assert store.get_checkout() is None
    assert store.get_shipping_address() is None
    with pytest.raises(MissingDataError) as checkout_error:
        store.get_checkout_or_throw()
    with pytest.raises(MissingDataError) as cart_error:
        store.get_cart_or_throw()
    with pytest.raises(MissingDataError) as method_error:
        store.get_payment_method_or_throw("braintreepaypal")

    assert checkout_error.value.subtype is MissingDataErrorType.MISSING_CHECKOUT
    assert cart_error.value.subtype is MissingDataErrorType.MISSING_CART
    assert method_error.value.subtype is MissingDataErrorType.MISSING_PAYMENT_METHOD


@pytest.mark.asyncio
async def test_load_default_checkout_replaces_snapshot():
    sender = MockCheckoutRequestSender(checkout=get_checkout(outstanding_balance=12.5))
    store = CheckoutStateStore(sender, [get_braintree_payment_method()])

    checkout = await store.load_default_checkout()

    assert sender.load_count == 1
    assert store.get_checkout() is checkout
    assert store.get_cart_or_throw().currency.code == "USD"
    assert store.get_payment_method_or_throw("braintreepaypal").client_token == "foo"


def test_shipping_address_skips_consignments_without_one():
    checkout = get_checkout()
    checkout.consignments.insert(0, Consignment(id="pickup"))
    store = CheckoutStateStore(MockCheckoutRequestSender(), checkout=checkout)

    assert store.get_shipping_address().address1 == "12345 Testing Way"


def test_set_payment_method_registers_method():
    store = CheckoutStateStore(MockCheckoutRequestSender())
    store.set_payment_method(get_braintree_payment_method())

    assert store.get_payment_method_or_throw("braintreepaypal").id == "braintreepaypal"
