"""
Real HTTP integration clients.

These clients talk to the storefront over HTTP:
- buy-now cart creation
- default checkout loading
- finalization form submission

Important:
- Must implement the same interfaces as the mock clients
- Must return data shaped according to checkout_buttons/integrations/contracts/*

Switching:
The selection of mock vs real clients happens in checkout_buttons/factory.py only.
"""

from .storefront import HttpCartRequestSender, HttpCheckoutRequestSender, HttpFormPoster

__all__ = ["HttpCartRequestSender", "HttpCheckoutRequestSender", "HttpFormPoster"]
