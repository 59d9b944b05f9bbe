import json

import pytest

from checkout_buttons.integrations.clients.mocks import RecordingFormPoster
from checkout_buttons.integrations.clients.mocks.fixtures import get_billing_address, get_shipping_address
from checkout_buttons.integrations.contracts.payments import ApprovalResult, FinalizeOptions
from checkout_buttons.strategies.finalization import CHECKOUT_FINALIZATION_PATH, FinalizationPoster


def _approval(**overrides):
    values = dict(payer_reference="PAYER_ID", nonce="NONCE", device_data="DEVICE")
    values.update(overrides)
    return ApprovalResult(**values)


@pytest.mark.asyncio
async def test_finalize_posts_once_to_checkout_endpoint():
    poster = RecordingFormPoster()
    finalization = FinalizationPoster(poster)

    await finalization.finalize(
        _approval(),
        get_billing_address(),
        get_shipping_address(),
        FinalizeOptions(payment_type="paypal", provider="braintreepaypal"),
    )

    assert len(poster.posts) == 1
    path, fields = poster.posts[0]
    assert path == CHECKOUT_FINALIZATION_PATH
    assert fields["payment_type"] == "paypal"
    assert fields["provider"] == "braintreepaypal"
    assert fields["action"] == "set_external_checkout"
    assert fields["nonce"] == "NONCE"
    assert fields["device_data"] == "DEVICE"
    assert json.loads(fields["shipping_address"]) == {
        "email": "test@bigcommerce.com",
        "first_name": "Test",
        "last_name": "Tester",
        "address_line_1": "12345 Testing Way",
        "address_line_2": "",
        "city": "Some City",
        "state": "California",
        "country_code": "US",
        "postal_code": "95555",
    }


def test_absent_values_are_omitted_not_sent_empty():
    fields = FinalizationPoster(RecordingFormPoster()).build_fields(
        _approval(device_data=None),
        get_billing_address(),
        None,
        FinalizeOptions(payment_type="paypal", provider="braintreepaypal"),
    )

    assert "shipping_address" not in fields
    assert "device_data" not in fields
    assert "cart_id" not in fields
    assert "billing_address" in fields


def test_process_payment_action_and_cart_id():
    fields = FinalizationPoster(RecordingFormPoster()).build_fields(
        _approval(),
        None,
        None,
        FinalizeOptions(payment_type="paypal", provider="braintreepaypal", should_process_payment=True, cart_id="999"),
    )

    assert fields["action"] == "process_payment"
    assert fields["cart_id"] == "999"


@pytest.mark.asyncio
async def test_transport_error_propagates_after_single_attempt():
    failure = ConnectionError("reset")
    poster = RecordingFormPoster(error=failure)

    with pytest.raises(ConnectionError):
        await FinalizationPoster(poster, "/custom/checkout").finalize(
            _approval(), None, None, FinalizeOptions(payment_type="paypal", provider="braintreepaypal")
        )

    assert [path for path, _ in poster.posts] == ["/custom/checkout"]
