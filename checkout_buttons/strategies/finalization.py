"""Posts an approved wallet payment to the storefront's checkout endpoint."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from checkout_buttons.integrations.contracts.interfaces import Address, FormPoster
from checkout_buttons.integrations.contracts.payments import ApprovalResult, FinalizeOptions, to_legacy_address

logger = logging.getLogger(__name__)

CHECKOUT_FINALIZATION_PATH = "/checkout.php"


def serialize_address(address: Address) -> str:
    return json.dumps(to_legacy_address(address), separators=(",", ":"))


class FinalizationPoster:
    def __init__(self, form_poster: FormPoster, checkout_path: str = CHECKOUT_FINALIZATION_PATH) -> None:
        self._form_poster = form_poster
        self._checkout_path = checkout_path

    def build_fields(
        self,
        approval: ApprovalResult,
        billing_address: Optional[Address],
        shipping_address: Optional[Address],
        options: FinalizeOptions,
    ) -> Dict[str, Any]:
        fields: Dict[str, Any] = {
            "payment_type": options.payment_type,
            "provider": options.provider,
            "action": options.action,
            "nonce": approval.nonce,
        }
        if approval.device_data is not None:
            fields["device_data"] = approval.device_data
        if billing_address is not None:
            fields["billing_address"] = serialize_address(billing_address)
        if shipping_address is not None:
            fields["shipping_address"] = serialize_address(shipping_address)
        if options.cart_id is not None:
            fields["cart_id"] = options.cart_id
        return fields

    async def finalize(
        self,
        approval: ApprovalResult,
        billing_address: Optional[Address],
        shipping_address: Optional[Address],
        options: FinalizeOptions,
    ) -> None:
        """Single POST, no retry. Transport errors propagate to the caller."""
        fields = self.build_fields(approval, billing_address, shipping_address, options)
        await self._form_poster.post_form(self._checkout_path, fields)
        logger.info("Finalization posted for %s (action=%s)", options.provider, options.action)
