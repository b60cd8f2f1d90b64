from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class CheckoutRequest:
    amount: Decimal
    reference: str
    type: str
    item_id: str
    success_url: str
    cancel_url: str


class PaymentPort(ABC):
    @abstractmethod
    async def create_checkout_session(self, request: CheckoutRequest) -> str:
        """Create a hosted checkout session. Returns the session id."""
        raise NotImplementedError

    @abstractmethod
    async def mark_as_paid(self, session_id: str, reference: str, type: str) -> dict[str, Any] | None:
        """Verify a completed checkout. Returns the paid booking row, or None if unknown."""
        raise NotImplementedError

    @abstractmethod
    async def verify_paypal_payment(
        self, payment_id: str, payer_id: str, reference: str, type: str
    ) -> dict[str, Any] | None:
        """Verify an approved PayPal payment. Returns the paid booking row when the function sends one back."""
        raise NotImplementedError
