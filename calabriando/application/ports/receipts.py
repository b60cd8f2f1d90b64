from __future__ import annotations

from abc import ABC, abstractmethod

from calabriando.domain.entities.bookable_item import BookableItem
from calabriando.domain.entities.booking import Booking, Receipt


class ReceiptRendererPort(ABC):
    @abstractmethod
    def render(self, booking: Booking, item: BookableItem | None, language: str) -> Receipt:
        """Render a printable receipt. Raises ReceiptError on failure."""
        raise NotImplementedError
