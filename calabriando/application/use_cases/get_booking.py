from __future__ import annotations

import logging

from calabriando.application.exceptions import BookingNotFoundError, ItemNotFoundError
from calabriando.application.ports.backend import BackendPort
from calabriando.application.ports.receipts import ReceiptRendererPort
from calabriando.application.use_cases.catalog import CatalogUseCase
from calabriando.domain.entities.booking import Booking, Receipt
from calabriando.domain.entities.item_kind import ItemKind, config_for


class GetBookingUseCase:
    def __init__(self, backend: BackendPort, catalog: CatalogUseCase, receipts: ReceiptRendererPort) -> None:
        self._backend = backend
        self._catalog = catalog
        self._receipts = receipts
        self._logger = logging.getLogger(__name__)

    async def execute(self, kind: ItemKind, booking_id: str) -> Booking:
        row = await self._backend.get(config_for(kind).booking_table, booking_id)
        if row is None:
            raise BookingNotFoundError(booking_id)
        return Booking.from_row(kind, row)

    async def receipt(self, kind: ItemKind, booking_id: str, language: str) -> Receipt:
        """Re-render the receipt of a stored booking."""
        booking = await self.execute(kind, booking_id)
        try:
            item = await self._catalog.get_item(kind, booking.item_id)
        except ItemNotFoundError:
            # The receipt still carries every booking field without the item.
            self._logger.warning("Receipt item missing", extra={"booking_id": booking_id, "kind": kind.value})
            item = None
        return self._receipts.render(booking, item, language)
