from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class EmailDispatchRequest:
    booking_id: str
    type: str
    email: str
    pdf_base64: str | None = None
    pdf_file_name: str | None = None


class NotificationPort(ABC):
    @abstractmethod
    async def send_booking_email(self, request: EmailDispatchRequest) -> None:
        """Dispatch a booking confirmation email. Raises NotificationError on failure."""
        raise NotImplementedError
