#!/usr/bin/env python3
"""
Run a full checkout button cycle against the mock clients and print each
stage to the terminal: initialize, order creation, buyer approval,
finalization, teardown.

Usage (from repo root):
  python scripts/run_button_demo.py
  python scripts/run_button_demo.py --buy-now
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from checkout_buttons import create_checkout_button_strategy
from checkout_buttons.integrations.clients.mocks import (
    MockBraintreeSdkSession,
    MockWidgetScriptLoader,
    RecordingFormPoster,
)
from checkout_buttons.integrations.clients.mocks.fixtures import (
    get_braintree_payment_method,
    get_buy_now_cart_request_body,
)
from checkout_buttons.utils.config_loader import CheckoutButtonsConfig


def setup_logging():
    """Log to terminal at INFO so every stage is visible."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def print_stage(title: str, data):
    """Print a stage header and data to the terminal."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)
    if isinstance(data, (dict, list)):
        print(json.dumps(data, indent=2, default=str))
    else:
        print(data)
    print()


def report(label: str):
    def _callback(error: BaseException) -> None:
        print_stage(f"{label}", f"{type(error).__name__}: {error}")
    return _callback


async def main(buy_now: bool):
    setup_logging()

    session = MockBraintreeSdkSession()
    loader = MockWidgetScriptLoader()
    form_poster = RecordingFormPoster()
    strategy = create_checkout_button_strategy(
        session,
        loader,
        payment_methods=[get_braintree_payment_method()],
        cfg=CheckoutButtonsConfig(use_mocks=True),
        form_poster=form_poster,
    )

    provider = {
        "messaging_container_id": "paypal-message",
        "style": {"color": "gold", "height": 45},
        "on_error": report("ON_ERROR"),
        "on_payment_error": report("ON_PAYMENT_ERROR"),
        "on_authorize_error": report("ON_AUTHORIZE_ERROR"),
    }
    if buy_now:
        provider["currency_code"] = "USD"
        provider["buy_now_initialize_options"] = {"get_buy_now_cart_request_body": get_buy_now_cart_request_body}

    # --- Initialize ---
    await strategy.initialize({"method_id": "braintreepaypal", "container_id": "paypal-button", "braintreepaypal": provider})
    button = loader.sdk.last_button
    print_stage("BUTTON MOUNTED", {
        "state": strategy.state.value,
        "env": button.options["env"],
        "style": button.options["style"],
        "rendered_into": button.rendered_into,
        "cart_context": strategy.cart_context,
    })

    # --- Buyer clicks the button ---
    order_token = await button.trigger_create_order()
    request = session.paypal_checkout.create_payment_calls[-1]
    print_stage("ORDER CREATED", {"order_token": order_token, "request": request.to_payload()})

    # --- Buyer approves in the provider popup ---
    await button.trigger_approve({"payerId": "PAYER_ID"})
    path, fields = form_poster.posts[-1]
    print_stage(f"FINALIZATION POSTED TO {path}", fields)

    # --- Teardown ---
    await strategy.deinitialize()
    print_stage("DEINITIALIZED", {"state": strategy.state.value, "session_teardowns": session.teardown_count})


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run a mock checkout button payment cycle.")
    parser.add_argument("--buy-now", action="store_true", help="Pay for a single product through a buy-now cart")
    args = parser.parse_args()
    asyncio.run(main(args.buy_now))
