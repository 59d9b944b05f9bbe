from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from checkout_buttons.integrations.contracts.interfaces import Address, Checkout, PaymentMethod
from checkout_buttons.integrations.policy.response_wrappers import TokenizePayloadModel


@dataclass(frozen=True)
class SetupContext:
    """Everything a wallet needs to shape one setup request.

    ``amount`` is already rounded and formatted; wallets place it as-is.
    """

    amount: str
    currency_code: str
    payment_method: PaymentMethod
    shipping_address: Optional[Address] = None
    checkout: Optional[Checkout] = None


class WalletInitializer(Protocol):
    """Provider-specific payload shaping behind a uniform capability."""

    payment_type: str
    funding_source: str
    # Keyword arguments for SdkSession.get_data_collector on approval.
    data_collector_options: Dict[str, Any]

    def build_setup_request(self, context: SetupContext) -> Any:
        ...

    def parse_approval_payload(self, payload: Any) -> TokenizePayloadModel:
        ...

    async def teardown(self) -> None:
        ...
