#!/usr/bin/env python3
"""
Local booking harness (no HTTP, no Supabase).

Usage:
  python3 scripts/book_local.py [tour|adventure|special_event] [item_id] [date] [participants]

What it does:
- Books an item from the seed tables through the same BookItemUseCase the API uses
- Writes the PDF receipt next to the current directory
- Prints the stored row and the email that would have been sent
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

load_dotenv()

from calabriando.application.exceptions import BookingValidationError, ItemNotFoundError
from calabriando.application.use_cases.book_item import BookItemUseCase
from calabriando.application.use_cases.catalog import CatalogUseCase
from calabriando.core.config import settings
from calabriando.domain.entities.booking import BookingForm
from calabriando.domain.entities.item_kind import ItemKind, config_for
from calabriando.infrastructure.notifications.mock_notifier import MockNotifier
from calabriando.infrastructure.receipts.pdf_receipt import ReportlabReceiptRenderer
from calabriando.infrastructure.store.memory_backend import MemoryBackend
from calabriando.infrastructure.store.seed_data import SEED_TABLES

DEFAULTS = {
    ItemKind.tour: ("tour-tropea", "2025-07-12"),
    ItemKind.adventure: ("adv-rafting", "2025-08-02"),
    ItemKind.special_event: ("evt-peperoncino", "2025-09-06"),
}


async def main(argv: list[str]) -> int:
    kind = ItemKind(argv[0]) if argv else ItemKind.tour
    item_id, date = DEFAULTS[kind]
    if len(argv) > 1:
        item_id = argv[1]
    if len(argv) > 2:
        date = argv[2]
    participants = int(argv[3]) if len(argv) > 3 else 2

    backend = MemoryBackend(SEED_TABLES)
    notifier = MockNotifier()
    uc = BookItemUseCase(
        backend=backend,
        catalog=CatalogUseCase(backend),
        notifier=notifier,
        receipts=ReportlabReceiptRenderer(business_name=settings.BUSINESS_NAME),
    )
    form = BookingForm(
        name="Mario Rossi",
        email="mario.rossi@example.com",
        phone="+39 333 0000000",
        date=date,
        participants=participants,
    )

    try:
        confirmation = await uc.submit(kind, item_id, form, settings.DEFAULT_LANGUAGE)
    except (BookingValidationError, ItemNotFoundError) as e:
        print(f"Booking rejected: {getattr(e, 'message', e)}")
        return 1

    print(f"Booking reference: {confirmation.booking.id}")
    print(f"Stored row: {backend.rows(config_for(kind).booking_table)[0]}")
    print(f"Email sent: {confirmation.email_sent} ({len(notifier.sent)} queued)")
    print(f"Checkout required: {confirmation.checkout_required}")
    if confirmation.receipt:
        path = Path.cwd() / confirmation.receipt.filename
        path.write_bytes(confirmation.receipt.content)
        print(f"Receipt written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1:])))
