from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from calabriando.api.v1.bookings import receipt_path
from calabriando.api.v1.schemas import (
    BookingSchema,
    CheckoutRequestSchema,
    CheckoutResponseSchema,
    ConfirmPaymentRequestSchema,
    ConfirmPaymentResponseSchema,
    PayPalVerificationRequestSchema,
)
from calabriando.application.exceptions import (
    BackendError,
    BookingNotFoundError,
    BookingValidationError,
    PaymentError,
)
from calabriando.application.use_cases.payments import (
    ConfirmPaymentUseCase,
    StartCheckoutUseCase,
    VerifyPayPalPaymentUseCase,
)
from calabriando.application.utils.messages import normalize_language, t
from calabriando.core.config import settings
from calabriando.wiring.dependencies import (
    get_confirm_payment_use_case,
    get_paypal_use_case,
    get_start_checkout_use_case,
)

router = APIRouter()


@router.post("/payments/checkout", response_model=CheckoutResponseSchema)
async def start_checkout(
    req: CheckoutRequestSchema,
    lang: str | None = Query(None),
    uc: StartCheckoutUseCase = Depends(get_start_checkout_use_case),
):
    language = normalize_language(lang, settings.DEFAULT_LANGUAGE)
    try:
        session_id = await uc.execute(req.type, req.reference, language)
    except BookingNotFoundError:
        raise HTTPException(status_code=404, detail=t("booking_not_found", language))
    except BookingValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except (PaymentError, BackendError) as e:
        raise HTTPException(status_code=502, detail=str(e) or t("payment_error", language))
    return CheckoutResponseSchema(session_id=session_id)


@router.post("/payments/confirm", response_model=ConfirmPaymentResponseSchema)
async def confirm_payment(
    req: ConfirmPaymentRequestSchema,
    lang: str | None = Query(None),
    uc: ConfirmPaymentUseCase = Depends(get_confirm_payment_use_case),
):
    language = normalize_language(lang, settings.DEFAULT_LANGUAGE)
    try:
        booking = await uc.execute(req.session_id, req.reference, req.type, language)
    except BookingValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except PaymentError as e:
        raise HTTPException(status_code=502, detail=str(e) or t("payment_error", language))
    return ConfirmPaymentResponseSchema(
        booking=BookingSchema.from_entity(booking),
        receipt_url=receipt_path(booking.kind, booking.id, language),
    )


@router.post("/payments/paypal", response_model=ConfirmPaymentResponseSchema)
async def verify_paypal_payment(
    req: PayPalVerificationRequestSchema,
    lang: str | None = Query(None),
    uc: VerifyPayPalPaymentUseCase = Depends(get_paypal_use_case),
):
    language = normalize_language(lang, settings.DEFAULT_LANGUAGE)
    try:
        booking = await uc.execute(req.payment_id, req.payer_id, req.reference, req.type, language)
    except BookingValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except (PaymentError, BackendError) as e:
        raise HTTPException(status_code=502, detail=str(e) or t("payment_error", language))
    return ConfirmPaymentResponseSchema(
        booking=BookingSchema.from_entity(booking),
        receipt_url=receipt_path(booking.kind, booking.id, language),
    )
