from __future__ import annotations

import logging
from typing import Any

import httpx

from calabriando.application.exceptions import NotificationError
from calabriando.application.ports.notifications import EmailDispatchRequest, NotificationPort
from calabriando.infrastructure.supabase.functions_client import SupabaseFunctionsClient, error_message


class EdgeFunctionNotifier(NotificationPort):
    def __init__(self, client: SupabaseFunctionsClient, function_name: str = "send-booking-email") -> None:
        self._client = client
        self._function_name = function_name
        self._logger = logging.getLogger(__name__)

    async def send_booking_email(self, request: EmailDispatchRequest) -> None:
        payload: dict[str, Any] = {
            "bookingId": request.booking_id,
            "type": request.type,
            "email": request.email,
        }
        if request.pdf_base64:
            payload["pdfBase64"] = request.pdf_base64
        if request.pdf_file_name:
            payload["pdfFileName"] = request.pdf_file_name

        try:
            resp = await self._client.invoke(self._function_name, payload)
        except httpx.HTTPError as e:
            raise NotificationError(f"Email dispatch failed: {e}") from e

        if resp.status_code >= 400:
            raise NotificationError(error_message(resp, "Email dispatch failed"))

        self._logger.info("Booking email dispatched", extra={"booking_id": request.booking_id})
