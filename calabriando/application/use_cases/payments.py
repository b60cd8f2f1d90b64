from __future__ import annotations

import logging

from calabriando.application.exceptions import BookingNotFoundError, BookingValidationError, PaymentError
from calabriando.application.ports.payments import CheckoutRequest, PaymentPort
from calabriando.application.use_cases.get_booking import GetBookingUseCase
from calabriando.application.utils.messages import t
from calabriando.domain.entities.booking import Booking, PaymentStatus
from calabriando.domain.entities.item_kind import ItemKind

PAYABLE_KINDS = (ItemKind.tour, ItemKind.adventure)


class StartCheckoutUseCase:
    def __init__(self, payments: PaymentPort, bookings: GetBookingUseCase, site_url: str) -> None:
        self._payments = payments
        self._bookings = bookings
        self._site_url = site_url.rstrip("/")
        self._logger = logging.getLogger(__name__)

    async def execute(self, kind: ItemKind, reference: str, language: str) -> str:
        """Open a hosted checkout session for a stored booking. Returns the session id."""
        booking = await self._bookings.execute(kind, reference)
        if booking.payment_status == PaymentStatus.paid.value:
            raise BookingValidationError(t("already_paid", language))
        if kind not in PAYABLE_KINDS or booking.total_price <= 0:
            raise BookingValidationError(t("checkout_not_available", language))

        request = CheckoutRequest(
            amount=booking.total_price,
            reference=booking.id,
            type=kind.value,
            item_id=booking.item_id,
            success_url=self.success_url(kind, booking.id),
            cancel_url=f"{self._site_url}/payment-cancelled",
        )
        session_id = await self._payments.create_checkout_session(request)
        self._logger.info("Checkout session created", extra={"booking_id": booking.id, "kind": kind.value})
        return session_id

    def success_url(self, kind: ItemKind, reference: str) -> str:
        # {CHECKOUT_SESSION_ID} is filled in by the payment provider
        return (
            f"{self._site_url}/payment-success"
            f"?session_id={{CHECKOUT_SESSION_ID}}&reference={reference}&type={kind.value}"
        )


class ConfirmPaymentUseCase:
    def __init__(self, payments: PaymentPort) -> None:
        self._payments = payments
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        session_id: str | None,
        reference: str | None,
        type: str | None,
        language: str,
    ) -> Booking:
        if not session_id or not reference or not type:
            raise BookingValidationError(t("payment_params_missing", language))
        try:
            kind = ItemKind(type)
        except ValueError:
            raise BookingValidationError(t("payment_params_missing", language))

        row = await self._payments.mark_as_paid(session_id=session_id, reference=reference, type=kind.value)
        if not row:
            self._logger.error("Paid booking not returned", extra={"booking_id": reference, "kind": kind.value})
            raise PaymentError(t("payment_booking_missing", language))

        return Booking.from_row(kind, row)


class VerifyPayPalPaymentUseCase:
    """
    Verify a PayPal payment approved in the browser.

    The `paypal-payment` function checks the payment with PayPal and marks the
    booking paid. When it does not echo the booking back, the stored row is
    read instead.
    """

    def __init__(self, payments: PaymentPort, bookings: GetBookingUseCase) -> None:
        self._payments = payments
        self._bookings = bookings
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        payment_id: str | None,
        payer_id: str | None,
        reference: str | None,
        type: str | None,
        language: str,
    ) -> Booking:
        if not payment_id or not payer_id or not reference or not type:
            raise BookingValidationError(t("payment_params_missing", language))
        try:
            kind = ItemKind(type)
        except ValueError:
            raise BookingValidationError(t("payment_params_missing", language))
        if kind not in PAYABLE_KINDS:
            raise BookingValidationError(t("checkout_not_available", language))

        row = await self._payments.verify_paypal_payment(
            payment_id=payment_id, payer_id=payer_id, reference=reference, type=kind.value
        )
        if row:
            return Booking.from_row(kind, row)

        try:
            return await self._bookings.execute(kind, reference)
        except BookingNotFoundError:
            self._logger.error("PayPal booking not found", extra={"booking_id": reference, "kind": kind.value})
            raise PaymentError(t("payment_booking_missing", language))
