from __future__ import annotations

import base64
import logging
from typing import Callable

from calabriando.application.exceptions import BackendError, BookingValidationError
from calabriando.application.ports.backend import BackendPort
from calabriando.application.ports.notifications import EmailDispatchRequest, NotificationPort
from calabriando.application.ports.receipts import ReceiptRendererPort
from calabriando.application.use_cases.catalog import CatalogUseCase
from calabriando.application.utils.booking_ids import generate_booking_id
from calabriando.application.utils.messages import t
from calabriando.domain.entities.bookable_item import BookableItem
from calabriando.domain.entities.booking import (
    Booking,
    BookingConfirmation,
    BookingForm,
    PaymentStatus,
    Receipt,
)
from calabriando.domain.entities.item_kind import ItemKind, config_for


class BookItemUseCase:
    """
    Booking submission for tours, adventures and special events.

    The reservation row is the only thing that must succeed. Receipt rendering
    and the confirmation email run afterwards and their failures are logged,
    never raised.
    """

    def __init__(
        self,
        backend: BackendPort,
        catalog: CatalogUseCase,
        notifier: NotificationPort,
        receipts: ReceiptRendererPort,
        email_enabled: bool = True,
        id_generator: Callable[[str], str] = generate_booking_id,
    ) -> None:
        self._backend = backend
        self._catalog = catalog
        self._notifier = notifier
        self._receipts = receipts
        self._email_enabled = email_enabled
        self._generate_id = id_generator
        self._logger = logging.getLogger(__name__)

    async def submit(
        self,
        kind: ItemKind,
        item_id: str,
        form: BookingForm,
        language: str,
    ) -> BookingConfirmation:
        if not _has_required_fields(form):
            raise BookingValidationError(t("required_fields", language))

        item = await self._catalog.get_item(kind, item_id)

        if item.max_participants and form.participants > item.max_participants:
            raise BookingValidationError(t("too_many_participants", language, max=item.max_participants))

        time_range = item.time_range_for(form.date or "")
        if time_range is None:
            self._logger.info(
                "Rejected booking for unavailable date",
                extra={"kind": kind.value, "item_id": item_id, "reason": form.date},
            )
            raise BookingValidationError(t("time_not_found", language))

        config = config_for(kind)
        booking = Booking(
            id=self._generate_id(config.id_prefix),
            kind=kind,
            item_id=item.id,
            customer_name=form.name.strip(),
            customer_email=form.email.strip(),
            customer_phone=form.phone.strip(),
            booking_date=form.date or "",
            booking_time=time_range,
            participants=form.participants,
            total_price=item.unit_price * form.participants,
            payment_method=config.payment_method,
            payment_status=PaymentStatus.pending.value,
            item_title=item.title_for(language) if kind is ItemKind.special_event else None,
        )

        try:
            await self._backend.insert(config.booking_table, booking.to_row())
        except BackendError as e:
            self._logger.error(
                "Error creating booking",
                extra={"booking_id": booking.id, "kind": kind.value, "error": str(e)},
            )
            raise

        self._logger.info("Booking created", extra={"booking_id": booking.id, "kind": kind.value, "item_id": item.id})

        receipt = self._render_receipt(booking, item, language)
        email_sent = await self._send_email(booking, receipt)

        return BookingConfirmation(booking=booking, receipt=receipt, email_sent=email_sent)

    def _render_receipt(self, booking: Booking, item: BookableItem, language: str) -> Receipt | None:
        try:
            return self._receipts.render(booking, item, language)
        except Exception as e:
            self._logger.error("Error generating receipt", extra={"booking_id": booking.id, "error": str(e)})
            return None

    async def _send_email(self, booking: Booking, receipt: Receipt | None) -> bool:
        request = EmailDispatchRequest(
            booking_id=booking.id,
            type=config_for(booking.kind).notification_type,
            email=booking.customer_email,
            pdf_base64=base64.b64encode(receipt.content).decode("ascii") if receipt else None,
            pdf_file_name=receipt.filename if receipt else None,
        )

        if not self._email_enabled:
            self._logger.info("WOULD_SEND_EMAIL", extra={"booking_id": booking.id})
            return False

        try:
            await self._notifier.send_booking_email(request)
            return True
        except Exception as e:
            self._logger.error(
                "Error sending confirmation email",
                extra={"booking_id": booking.id, "error": str(e)},
            )
            return False


def _has_required_fields(form: BookingForm) -> bool:
    required = (form.name, form.email, form.phone, form.date)
    if any(not value or not str(value).strip() for value in required):
        return False
    return form.participants >= 1
