from __future__ import annotations

import logging
from typing import Any

import httpx

from calabriando.application.exceptions import PaymentError
from calabriando.application.ports.payments import CheckoutRequest, PaymentPort
from calabriando.infrastructure.supabase.functions_client import SupabaseFunctionsClient, error_message

_ITEM_ID_FIELDS = {
    "tour": "tourId",
    "adventure": "adventureId",
    "special_event": "eventId",
}


class EdgeFunctionPaymentGateway(PaymentPort):
    """Payment adapter backed by the `stripe-payment`, `mark-as-paid` and `paypal-payment` edge functions."""

    def __init__(
        self,
        client: SupabaseFunctionsClient,
        checkout_function: str = "stripe-payment",
        confirm_function: str = "mark-as-paid",
        paypal_function: str = "paypal-payment",
    ) -> None:
        self._client = client
        self._checkout_function = checkout_function
        self._confirm_function = confirm_function
        self._paypal_function = paypal_function
        self._logger = logging.getLogger(__name__)

    async def create_checkout_session(self, request: CheckoutRequest) -> str:
        payload: dict[str, Any] = {
            "amount": float(request.amount),
            "reference": request.reference,
            "type": request.type,
            "successUrl": request.success_url,
            "cancelUrl": request.cancel_url,
        }
        payload[_ITEM_ID_FIELDS.get(request.type, "itemId")] = request.item_id

        data = await self._call(self._checkout_function, payload, "Payment initialization failed")
        session_id = data.get("sessionId")
        if not session_id:
            raise PaymentError("No sessionId returned from payment function")
        return str(session_id)

    async def mark_as_paid(self, session_id: str, reference: str, type: str) -> dict[str, Any] | None:
        payload = {"session_id": session_id, "reference": reference, "type": type}
        data = await self._call(self._confirm_function, payload, "Payment verification failed")
        booking = data.get("booking")
        return booking if isinstance(booking, dict) else None

    async def verify_paypal_payment(
        self, payment_id: str, payer_id: str, reference: str, type: str
    ) -> dict[str, Any] | None:
        payload = {"paymentId": payment_id, "payerId": payer_id, "reference": reference, "type": type}
        data = await self._call(self._paypal_function, payload, "Failed to verify PayPal payment")
        self._logger.info("PayPal payment verified", extra={"booking_id": reference, "kind": type})
        booking = data.get("booking")
        return booking if isinstance(booking, dict) else None

    async def _call(self, function_name: str, payload: dict[str, Any], default_error: str) -> dict[str, Any]:
        try:
            resp = await self._client.invoke(function_name, payload)
        except httpx.HTTPError as e:
            self._logger.error("Payment function unreachable", extra={"error": str(e)})
            raise PaymentError(default_error) from e

        if resp.status_code >= 400:
            raise PaymentError(error_message(resp, default_error))

        try:
            data = resp.json()
        except ValueError as e:
            raise PaymentError(default_error) from e
        return data if isinstance(data, dict) else {}
