from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from calabriando.api.v1.schemas import BookingConfirmationSchema, BookingFormSchema, BookingSchema
from calabriando.application.exceptions import (
    BackendError,
    BookingNotFoundError,
    BookingValidationError,
    ItemNotFoundError,
    ReceiptError,
)
from calabriando.application.use_cases.book_item import BookItemUseCase
from calabriando.application.use_cases.get_booking import GetBookingUseCase
from calabriando.application.utils.messages import normalize_language, t
from calabriando.core.config import settings
from calabriando.domain.entities.booking import BookingForm
from calabriando.domain.entities.item_kind import ItemKind
from calabriando.wiring.dependencies import get_book_item_use_case, get_booking_lookup_use_case

router = APIRouter()
logger = logging.getLogger(__name__)


def receipt_path(kind: ItemKind, booking_id: str, language: str) -> str:
    return f"/api/v1/bookings/{kind.value}/{booking_id}/receipt?lang={language}"


@router.post("/bookings/{kind}/{item_id}", response_model=BookingConfirmationSchema, status_code=201)
async def create_booking(
    kind: ItemKind,
    item_id: str,
    form: BookingFormSchema,
    lang: str | None = Query(None),
    uc: BookItemUseCase = Depends(get_book_item_use_case),
):
    language = normalize_language(lang, settings.DEFAULT_LANGUAGE)
    try:
        confirmation = await uc.submit(kind, item_id, BookingForm(**form.model_dump()), language)
    except BookingValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ItemNotFoundError:
        raise HTTPException(status_code=404, detail=t("item_not_found", language))
    except BackendError:
        raise HTTPException(status_code=502, detail=t("booking_error", language))

    booking = confirmation.booking
    return BookingConfirmationSchema(
        booking_reference=booking.id,
        title=t("booking_confirmed_title", language),
        message=t("booking_confirmed_message", language),
        booking=BookingSchema.from_entity(booking),
        receipt_url=receipt_path(kind, booking.id, language) if confirmation.receipt else None,
        email_sent=confirmation.email_sent,
        checkout_required=confirmation.checkout_required,
    )


@router.get("/bookings/{kind}/{booking_id}", response_model=BookingSchema)
async def get_booking(
    kind: ItemKind,
    booking_id: str,
    lang: str | None = Query(None),
    uc: GetBookingUseCase = Depends(get_booking_lookup_use_case),
):
    language = normalize_language(lang, settings.DEFAULT_LANGUAGE)
    try:
        booking = await uc.execute(kind, booking_id)
    except BookingNotFoundError:
        raise HTTPException(status_code=404, detail=t("booking_not_found", language))
    except BackendError:
        raise HTTPException(status_code=502, detail=t("booking_error", language))
    return BookingSchema.from_entity(booking)


@router.get("/bookings/{kind}/{booking_id}/receipt")
async def download_receipt(
    kind: ItemKind,
    booking_id: str,
    lang: str | None = Query(None),
    uc: GetBookingUseCase = Depends(get_booking_lookup_use_case),
) -> Response:
    language = normalize_language(lang, settings.DEFAULT_LANGUAGE)
    try:
        receipt = await uc.receipt(kind, booking_id, language)
    except BookingNotFoundError:
        raise HTTPException(status_code=404, detail=t("booking_not_found", language))
    except BackendError:
        raise HTTPException(status_code=502, detail=t("booking_error", language))
    except ReceiptError as e:
        logger.exception("Receipt rendering failed", extra={"booking_id": booking_id, "error": str(e)})
        raise HTTPException(status_code=500, detail=t("booking_error", language))

    return Response(
        content=receipt.content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{receipt.filename}"'},
    )
