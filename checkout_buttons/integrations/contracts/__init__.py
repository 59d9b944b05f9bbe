"""
Contracts (data models).

This folder defines the shapes exchanged with external collaborators:
- checkout state (cart, checkout, payment method, addresses)
- the provider SDK session, its checkout component and the button widget SDK
- storefront senders (cart creation, checkout loading, form posting)

Why this exists:
- Mock and real clients implement the same interfaces
- The button strategy depends on these contracts, never on a concrete client

Both mock and real HTTP clients should use these contracts.
"""
