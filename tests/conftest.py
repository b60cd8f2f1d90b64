from __future__ import annotations

import copy
from typing import Any

import pytest

from calabriando.application.exceptions import NotificationError, ReceiptError
from calabriando.application.ports.notifications import EmailDispatchRequest, NotificationPort
from calabriando.application.ports.receipts import ReceiptRendererPort
from calabriando.application.use_cases.book_item import BookItemUseCase
from calabriando.application.use_cases.catalog import CatalogUseCase
from calabriando.infrastructure.notifications.mock_notifier import MockNotifier
from calabriando.infrastructure.receipts.pdf_receipt import ReportlabReceiptRenderer
from calabriando.infrastructure.store.memory_backend import MemoryBackend

TOUR_ROW: dict[str, Any] = {
    "id": "tour-1",
    "title": "Tropea e Capo Vaticano",
    "description": "Costa degli Dei",
    "price": 45,
    "max_participants": 10,
    "created_at": "2024-01-01T00:00:00Z",
    "available_dates": [
        {"date": "2025-07-12", "time": ["09:00", "17:00"]},
        {"date": "2025-07-19", "time": ["10:00", "18:00"]},
    ],
    "translations": {
        "it": {"title": "Tropea e Capo Vaticano", "description": "Costa degli Dei"},
        "en": {"title": "Tropea and Capo Vaticano", "description": "Coast of the Gods"},
    },
}

ADVENTURE_ROW: dict[str, Any] = {
    "id": "adv-1",
    "title": "Rafting sul Lao",
    "description": "Gole del Lao",
    "price": "37.50",
    "adventure_type": "rafting",
    "created_at": "2024-02-01T00:00:00Z",
    "available_dates": [{"date": "2025-08-02", "time": ["10:00", "13:00"]}],
    "translations": {"en": {"title": "Rafting on the Lao", "description": "Lao gorges"}},
}

EVENT_ROW: dict[str, Any] = {
    "id": "evt-1",
    "date": "2025-09-06",
    "time": "18:00 - 23:00",
    "max_participants": 40,
    "created_at": "2024-03-01T00:00:00Z",
    "translations": {
        "it": {"title": "Festival del Peperoncino", "description": "Degustazioni"},
        "en": {"title": "Chili Pepper Festival", "description": "Tastings"},
    },
}


class FailingNotifier(NotificationPort):
    def __init__(self) -> None:
        self.calls = 0

    async def send_booking_email(self, request: EmailDispatchRequest) -> None:
        self.calls += 1
        raise NotificationError("smtp down")


class FailingReceipts(ReceiptRendererPort):
    def render(self, booking, item, language):
        raise ReceiptError("no fonts")


def seed_tables() -> dict[str, list[dict[str, Any]]]:
    return {
        "tours": [copy.deepcopy(TOUR_ROW)],
        "adventures": [copy.deepcopy(ADVENTURE_ROW)],
        "special_events": [copy.deepcopy(EVENT_ROW)],
    }


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend(seed_tables())


@pytest.fixture
def notifier() -> MockNotifier:
    return MockNotifier()


@pytest.fixture
def receipts() -> ReportlabReceiptRenderer:
    return ReportlabReceiptRenderer(business_name="Calabriando")


@pytest.fixture
def book_item(backend, notifier, receipts) -> BookItemUseCase:
    return BookItemUseCase(
        backend=backend,
        catalog=CatalogUseCase(backend),
        notifier=notifier,
        receipts=receipts,
    )
