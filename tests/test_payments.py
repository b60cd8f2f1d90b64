from __future__ import annotations

import asyncio

import pytest

from calabriando.application.exceptions import BookingNotFoundError, BookingValidationError, PaymentError
from calabriando.application.use_cases.catalog import CatalogUseCase
from calabriando.application.use_cases.get_booking import GetBookingUseCase
from calabriando.application.use_cases.payments import (
    ConfirmPaymentUseCase,
    StartCheckoutUseCase,
    VerifyPayPalPaymentUseCase,
)
from calabriando.domain.entities.booking import BookingForm
from calabriando.domain.entities.item_kind import ItemKind
from calabriando.infrastructure.payments.mock_payments import MockPaymentGateway


@pytest.fixture
def gateway(backend) -> MockPaymentGateway:
    return MockPaymentGateway(backend=backend)


@pytest.fixture
def start_checkout(backend, gateway, receipts) -> StartCheckoutUseCase:
    lookup = GetBookingUseCase(backend=backend, catalog=CatalogUseCase(backend), receipts=receipts)
    return StartCheckoutUseCase(payments=gateway, bookings=lookup, site_url="https://calabriando.it/")


def _book_tour(book_item) -> str:
    form = BookingForm(name="Maria", email="maria@example.com", phone="333", date="2025-07-12", participants=3)
    return asyncio.run(book_item.submit(ItemKind.tour, "tour-1", form, "it")).booking.id


def test_checkout_passes_amount_and_return_urls(book_item, start_checkout, gateway):
    reference = _book_tour(book_item)

    session_id = asyncio.run(start_checkout.execute(ItemKind.tour, reference, "it"))

    request = gateway.sessions[session_id]
    assert request.amount == 135
    assert request.item_id == "tour-1"
    assert request.type == "tour"
    assert request.success_url == (
        f"https://calabriando.it/payment-success?session_id={{CHECKOUT_SESSION_ID}}&reference={reference}&type=tour"
    )
    assert request.cancel_url == "https://calabriando.it/payment-cancelled"


def test_checkout_for_unknown_booking(start_checkout):
    with pytest.raises(BookingNotFoundError):
        asyncio.run(start_checkout.execute(ItemKind.tour, "BK-NOPE", "en"))


def test_confirm_marks_booking_paid(book_item, start_checkout, gateway, backend):
    reference = _book_tour(book_item)
    session_id = asyncio.run(start_checkout.execute(ItemKind.tour, reference, "it"))

    booking = asyncio.run(ConfirmPaymentUseCase(gateway).execute(session_id, reference, "tour", "it"))

    assert booking.id == reference
    assert booking.payment_status == "paid"
    assert backend.rows("bookings")[0]["payment_status"] == "paid"


def test_paid_booking_cannot_start_checkout_again(book_item, start_checkout, gateway):
    reference = _book_tour(book_item)
    session_id = asyncio.run(start_checkout.execute(ItemKind.tour, reference, "it"))
    asyncio.run(ConfirmPaymentUseCase(gateway).execute(session_id, reference, "tour", "it"))

    with pytest.raises(BookingValidationError) as exc:
        asyncio.run(start_checkout.execute(ItemKind.tour, reference, "en"))
    assert exc.value.message == "This booking has already been paid."


@pytest.mark.parametrize(
    "session_id,reference,type",
    [(None, "BK-1", "tour"), ("cs_1", "", "tour"), ("cs_1", "BK-1", None), ("cs_1", "BK-1", "cruise")],
)
def test_confirm_rejects_missing_or_invalid_params(gateway, session_id, reference, type):
    with pytest.raises(BookingValidationError):
        asyncio.run(ConfirmPaymentUseCase(gateway).execute(session_id, reference, type, "en"))


def test_confirm_with_unknown_session_raises(gateway):
    with pytest.raises(PaymentError):
        asyncio.run(ConfirmPaymentUseCase(gateway).execute("cs_unknown", "BK-1", "tour", "en"))


def test_special_event_cannot_start_checkout(book_item, start_checkout, gateway):
    form = BookingForm(name="Maria", email="maria@example.com", phone="333", date="2025-09-06", participants=2)
    reference = asyncio.run(book_item.submit(ItemKind.special_event, "evt-1", form, "it")).booking.id

    with pytest.raises(BookingValidationError) as exc:
        asyncio.run(start_checkout.execute(ItemKind.special_event, reference, "en"))

    assert exc.value.message == "Online payment is not available for this booking."
    assert gateway.sessions == {}


def test_free_booking_cannot_start_checkout(backend, start_checkout, gateway):
    row = {
        "id": "BK-FREE",
        "tour_id": "tour-1",
        "user_name": "Maria",
        "user_email": "maria@example.com",
        "user_phone": "333",
        "booking_date": "2025-07-12",
        "booking_time": ["09:00", "17:00"],
        "participants": 1,
        "total_price": 0,
        "payment_method": "card",
        "payment_status": "pending",
    }
    asyncio.run(backend.insert("bookings", row))

    with pytest.raises(BookingValidationError):
        asyncio.run(start_checkout.execute(ItemKind.tour, "BK-FREE", "it"))
    assert gateway.sessions == {}


@pytest.fixture
def verify_paypal(backend, gateway, receipts) -> VerifyPayPalPaymentUseCase:
    lookup = GetBookingUseCase(backend=backend, catalog=CatalogUseCase(backend), receipts=receipts)
    return VerifyPayPalPaymentUseCase(payments=gateway, bookings=lookup)


def test_paypal_verification_marks_booking_paid(book_item, verify_paypal, gateway, backend):
    reference = _book_tour(book_item)

    booking = asyncio.run(verify_paypal.execute("PAY-1", "PAYER-1", reference, "tour", "it"))

    assert booking.id == reference
    assert booking.payment_status == "paid"
    assert gateway.paypal_payments == [("PAY-1", "PAYER-1", reference)]
    assert backend.rows("bookings")[0]["payment_status"] == "paid"


class _SilentPayPalGateway(MockPaymentGateway):
    async def verify_paypal_payment(self, payment_id, payer_id, reference, type):
        return None


def test_paypal_verification_reads_booking_when_not_returned(backend, book_item, receipts):
    reference = _book_tour(book_item)
    lookup = GetBookingUseCase(backend=backend, catalog=CatalogUseCase(backend), receipts=receipts)
    uc = VerifyPayPalPaymentUseCase(payments=_SilentPayPalGateway(backend), bookings=lookup)

    booking = asyncio.run(uc.execute("PAY-1", "PAYER-1", reference, "tour", "en"))
    assert booking.id == reference

    with pytest.raises(PaymentError):
        asyncio.run(uc.execute("PAY-1", "PAYER-1", "BK-NOPE", "tour", "en"))


@pytest.mark.parametrize(
    "payment_id,payer_id,type",
    [(None, "PAYER-1", "tour"), ("PAY-1", "", "tour"), ("PAY-1", "PAYER-1", "cruise"), ("PAY-1", "PAYER-1", "special_event")],
)
def test_paypal_verification_rejects_invalid_params(verify_paypal, gateway, payment_id, payer_id, type):
    with pytest.raises(BookingValidationError):
        asyncio.run(verify_paypal.execute(payment_id, payer_id, "BK-1", type, "en"))
    assert gateway.paypal_payments == []
