from __future__ import annotations

import logging

from calabriando.application.exceptions import ItemNotFoundError
from calabriando.application.ports.backend import BackendPort
from calabriando.domain.entities.bookable_item import BookableItem
from calabriando.domain.entities.item_kind import ItemKind, config_for


class CatalogUseCase:
    def __init__(self, backend: BackendPort) -> None:
        self._backend = backend
        self._logger = logging.getLogger(__name__)

    async def list_items(self, kind: ItemKind) -> list[BookableItem]:
        rows = await self._backend.select(config_for(kind).item_table, order_by="created_at")
        return [BookableItem.from_row(kind, row) for row in rows]

    async def get_item(self, kind: ItemKind, item_id: str) -> BookableItem:
        row = await self._backend.get(config_for(kind).item_table, item_id)
        if row is None:
            self._logger.info("Bookable item not found", extra={"kind": kind.value, "item_id": item_id})
            raise ItemNotFoundError(f"{kind.value} {item_id} not found")
        return BookableItem.from_row(kind, row)
