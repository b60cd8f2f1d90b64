from __future__ import annotations

import json
from decimal import Decimal

import pytest

from calabriando.application.exceptions import ReceiptError
from calabriando.domain.entities.bookable_item import BookableItem
from calabriando.domain.entities.booking import Booking
from calabriando.domain.entities.item_kind import ItemKind
from calabriando.infrastructure.receipts import pdf_receipt
from calabriando.infrastructure.receipts.pdf_receipt import (
    ReportlabReceiptRenderer,
    format_date,
    qr_payload,
    receipt_filename,
)

from conftest import EVENT_ROW, TOUR_ROW


def _booking(kind=ItemKind.tour, **overrides) -> Booking:
    values = dict(
        id="BK-LOYW3V28-ABCDEFGH",
        kind=kind,
        item_id="tour-1",
        customer_name="Maria <Rossi> & Figli",
        customer_email="maria@example.com",
        customer_phone="+39 333 1234567",
        booking_date="2025-07-12",
        booking_time=("09:00", "17:00"),
        participants=2,
        total_price=Decimal("90"),
    )
    values.update(overrides)
    return Booking(**values)


def test_renders_pdf_with_filename():
    item = BookableItem.from_row(ItemKind.tour, TOUR_ROW)

    receipt = ReportlabReceiptRenderer().render(_booking(), item, "it")

    assert receipt.content.startswith(b"%PDF")
    assert receipt.filename == "Prenotazione_BK-LOYW3V28-ABCDEFGH.pdf"


def test_renders_without_item():
    receipt = ReportlabReceiptRenderer().render(_booking(), None, "en")
    assert receipt.content.startswith(b"%PDF")


def test_special_event_filename():
    booking = _booking(kind=ItemKind.special_event, id="SPE-1-X", total_price=Decimal("0"), item_title="Festival")
    assert receipt_filename(booking) == "Prenotazione_Evento_SPE-1-X.pdf"

    item = BookableItem.from_row(ItemKind.special_event, EVENT_ROW)
    receipt = ReportlabReceiptRenderer().render(booking, item, "it")
    assert receipt.content.startswith(b"%PDF")


def test_qr_payload_encodes_booking_metadata():
    payload = json.loads(qr_payload(_booking()))

    assert payload == {
        "bookingId": "BK-LOYW3V28-ABCDEFGH",
        "itemId": "tour-1",
        "date": "2025-07-12",
        "time": ["09:00", "17:00"],
        "participants": 2,
    }


def test_format_date():
    assert format_date("2025-07-12") == "12/07/2025"
    assert format_date("") == "N/A"


def test_render_failure_raises_receipt_error(monkeypatch):
    renderer = ReportlabReceiptRenderer()

    def boom(*args, **kwargs):
        raise RuntimeError("layout error")

    monkeypatch.setattr(renderer, "_build_pdf", boom)

    with pytest.raises(ReceiptError):
        renderer.render(_booking(), None, "en")


def test_qr_failure_still_renders_receipt(monkeypatch):
    def broken_widget(*args, **kwargs):
        raise ValueError("payload too long")

    monkeypatch.setattr(pdf_receipt, "QrCodeWidget", broken_widget)
    renderer = ReportlabReceiptRenderer()

    assert renderer._qr_drawing(_booking()) is None
    receipt = renderer.render(_booking(), None, "it")
    assert receipt.content.startswith(b"%PDF")
