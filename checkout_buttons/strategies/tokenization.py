"""Normalises provider approval payloads into ``ApprovalResult``.

This is the single place an untrusted widget payload is validated before any
of it reaches the storefront.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from checkout_buttons.errors import InvalidArgumentError
from checkout_buttons.integrations.contracts.payments import ApprovalResult
from checkout_buttons.integrations.policy.response_wrappers import (
    billing_address_from_details,
    shipping_address_from_details,
)

from .wallets import WalletInitializer

logger = logging.getLogger(__name__)


class TokenizationBridge:
    def __init__(self, wallet: WalletInitializer) -> None:
        self._wallet = wallet

    def tokenize(
        self,
        provider_payload: Any,
        *,
        device_data: Optional[str] = None,
        payer_reference: Optional[str] = None,
    ) -> ApprovalResult:
        if isinstance(provider_payload, (str, bytes)):
            try:
                provider_payload = json.loads(provider_payload)
            except ValueError as exc:
                raise InvalidArgumentError("Unable to parse the payment provider's approval payload.") from exc

        try:
            payload = self._wallet.parse_approval_payload(provider_payload)
        except InvalidArgumentError:
            raise
        except (ValidationError, ValueError, TypeError, KeyError) as exc:
            raise InvalidArgumentError("Unable to parse the payment provider's approval payload.") from exc

        details = payload.details
        logger.debug("Approval payload parsed (type=%s, has_shipping=%s)", payload.type, details.shipping_address is not None)
        return ApprovalResult(
            payer_reference=payer_reference or details.payer_id,
            nonce=payload.nonce,
            device_data=device_data,
            billing_address=billing_address_from_details(details),
            shipping_address=shipping_address_from_details(details),
            details=details.model_dump(by_alias=True, exclude_none=True),
        )
