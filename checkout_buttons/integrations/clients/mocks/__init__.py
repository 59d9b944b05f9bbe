"""
Mock integration clients.

These clients return fake (but realistic) responses without loading any
provider script or calling the storefront. They are used when:
- running the button strategy outside a browser
- testing the order-creation / approval cycle end-to-end

Important:
- Mock clients implement the SAME interfaces as the real clients
  (checkout_buttons/integrations/contracts/interfaces.py).

Switching to real:
The selection of mock vs real storefront clients happens in ONE place
(checkout_buttons/factory.py).
"""

from .braintree import MockBraintreeSdkSession, MockPaypalCheckout
from .paypal_sdk import MockButtonWidget, MockMessageWidget, MockPaypalSdk, MockWidgetScriptLoader
from .storefront import MockCartRequestSender, MockCheckoutRequestSender, RecordingFormPoster

__all__ = [
    "MockBraintreeSdkSession", "MockPaypalCheckout",
    "MockButtonWidget", "MockMessageWidget", "MockPaypalSdk", "MockWidgetScriptLoader",
    "MockCartRequestSender", "MockCheckoutRequestSender", "RecordingFormPoster",
]
