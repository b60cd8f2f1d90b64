from __future__ import annotations

import logging

from calabriando.application.ports.notifications import EmailDispatchRequest, NotificationPort


class MockNotifier(NotificationPort):
    def __init__(self) -> None:
        self.sent: list[EmailDispatchRequest] = []
        self._logger = logging.getLogger(__name__)

    async def send_booking_email(self, request: EmailDispatchRequest) -> None:
        self.sent.append(request)
        self._logger.info(
            "Mock booking email",
            extra={"booking_id": request.booking_id, "kind": request.type},
        )
