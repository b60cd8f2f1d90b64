from __future__ import annotations

import json
import logging
from datetime import date
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.graphics.barcode.qr import QrCodeWidget
from reportlab.graphics.shapes import Drawing
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from calabriando.application.exceptions import ReceiptError
from calabriando.application.ports.receipts import ReceiptRendererPort
from calabriando.application.utils.messages import RECEIPT_LABELS
from calabriando.domain.entities.bookable_item import BookableItem
from calabriando.domain.entities.booking import Booking, Receipt
from calabriando.domain.entities.item_kind import ItemKind

KIND_TITLES: dict[ItemKind, dict[str, str]] = {
    ItemKind.tour: {"it": "Prenotazione Tour", "en": "Tour Booking"},
    ItemKind.adventure: {"it": "Prenotazione Avventura", "en": "Adventure Booking"},
    ItemKind.special_event: {"it": "Evento Speciale", "en": "Special Event"},
}

HEADER_BLUE = colors.Color(0, 87 / 255, 183 / 255)
QR_SIZE = 50 * mm

logger = logging.getLogger(__name__)


def receipt_filename(booking: Booking) -> str:
    if booking.kind is ItemKind.special_event:
        return f"Prenotazione_Evento_{booking.id}.pdf"
    return f"Prenotazione_{booking.id}.pdf"


def qr_payload(booking: Booking) -> str:
    return json.dumps(
        {
            "bookingId": booking.id,
            "itemId": booking.item_id,
            "date": booking.booking_date,
            "time": list(booking.booking_time),
            "participants": booking.participants,
        }
    )


def format_date(value: str) -> str:
    try:
        return date.fromisoformat(value).strftime("%d/%m/%Y")
    except ValueError:
        return value or "N/A"


class ReportlabReceiptRenderer(ReceiptRendererPort):
    def __init__(self, business_name: str = "Calabriando") -> None:
        self._business_name = business_name

    def render(self, booking: Booking, item: BookableItem | None, language: str) -> Receipt:
        try:
            content = self._build_pdf(booking, item, language)
        except Exception as e:
            raise ReceiptError(f"Could not render receipt for {booking.id}: {e}") from e
        return Receipt(filename=receipt_filename(booking), content=content)

    def _build_pdf(self, booking: Booking, item: BookableItem | None, language: str) -> bytes:
        labels = RECEIPT_LABELS.get(language, RECEIPT_LABELS["en"])
        styles = getSampleStyleSheet()

        buffer = BytesIO()
        doc = SimpleDocTemplate(buffer, pagesize=A4, title=f"{self._business_name} {booking.id}")
        story = []

        title = f"{self._business_name} {KIND_TITLES[booking.kind].get(language, KIND_TITLES[booking.kind]['en'])}"
        story.append(Paragraph(f"<b>{escape(title)}</b>", styles["Title"]))
        story.append(Spacer(1, 10))
        story.append(Paragraph(escape(labels["heading"]), styles["Heading3"]))

        table = Table(
            [[labels["item"], labels["detail"]]] + self._detail_rows(booking, item, language),
            colWidths=[60 * mm, 100 * mm],
        )
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), HEADER_BLUE),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#f2f2f2")]),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ]
            )
        )
        story.append(table)

        qr = self._qr_drawing(booking)
        if qr is not None:
            story.append(Spacer(1, 15))
            story.append(qr)
            story.append(Paragraph(escape(labels["scan"]), styles["Normal"]))

        doc.build(story)
        return buffer.getvalue()

    def _detail_rows(self, booking: Booking, item: BookableItem | None, language: str) -> list[list[str]]:
        labels = RECEIPT_LABELS.get(language, RECEIPT_LABELS["en"])
        item_title = (item.title_for(language) if item else None) or booking.item_title or "N/A"

        rows = [
            [labels["title"], item_title],
            [labels["date"], format_date(booking.booking_date)],
            [labels["time"], booking.time_display],
            [labels["participants"], str(booking.participants)],
        ]
        if booking.kind is not ItemKind.special_event or booking.total_price:
            rows.append([labels["total"], f"€{booking.total_price:.2f}"])
        rows += [
            [labels["reference"], booking.id],
            [labels["name"], booking.customer_name or "N/A"],
            [labels["email"], booking.customer_email or "N/A"],
            [labels["phone"], booking.customer_phone or "N/A"],
        ]
        return rows

    def _qr_drawing(self, booking: Booking) -> Drawing | None:
        try:
            widget = QrCodeWidget(qr_payload(booking))
            x1, y1, x2, y2 = widget.getBounds()
            width, height = x2 - x1, y2 - y1
            drawing = Drawing(QR_SIZE, QR_SIZE, transform=[QR_SIZE / width, 0, 0, QR_SIZE / height, 0, 0])
            drawing.add(widget)
            drawing.hAlign = "CENTER"
            return drawing
        except Exception as e:
            # Continue without QR code
            logger.error("Error generating QR code", extra={"booking_id": booking.id, "error": str(e)})
            return None
