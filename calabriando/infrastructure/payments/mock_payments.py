from __future__ import annotations

import logging
import uuid
from typing import Any

from calabriando.application.ports.payments import CheckoutRequest, PaymentPort
from calabriando.domain.entities.booking import PaymentStatus
from calabriando.domain.entities.item_kind import ItemKind, config_for
from calabriando.infrastructure.store.memory_backend import MemoryBackend


class MockPaymentGateway(PaymentPort):
    def __init__(self, backend: MemoryBackend) -> None:
        self._backend = backend
        self.sessions: dict[str, CheckoutRequest] = {}
        self.paypal_payments: list[tuple[str, str, str]] = []
        self._logger = logging.getLogger(__name__)

    async def create_checkout_session(self, request: CheckoutRequest) -> str:
        session_id = f"cs_mock_{uuid.uuid4().hex[:12]}"
        self.sessions[session_id] = request
        self._logger.info("Mock checkout session created", extra={"booking_id": request.reference})
        return session_id

    async def mark_as_paid(self, session_id: str, reference: str, type: str) -> dict[str, Any] | None:
        request = self.sessions.get(session_id)
        if request is None or request.reference != reference:
            return None
        table = config_for(ItemKind(type)).booking_table
        return await self._backend.update(table, reference, {"payment_status": PaymentStatus.paid.value})

    async def verify_paypal_payment(
        self, payment_id: str, payer_id: str, reference: str, type: str
    ) -> dict[str, Any] | None:
        self.paypal_payments.append((payment_id, payer_id, reference))
        table = config_for(ItemKind(type)).booking_table
        return await self._backend.update(table, reference, {"payment_status": PaymentStatus.paid.value})
