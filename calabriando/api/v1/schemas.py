from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from calabriando.domain.entities.bookable_item import BookableItem
from calabriando.domain.entities.booking import Booking
from calabriando.domain.entities.item_kind import ItemKind


class BookingFormSchema(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    date: str | None = None
    participants: int = 1


class BookingSchema(BaseModel):
    id: str
    kind: ItemKind
    item_id: str
    customer_name: str
    customer_email: str
    customer_phone: str
    booking_date: str
    booking_time: tuple[str, str]
    participants: int
    total_price: Decimal
    payment_method: str
    payment_status: str
    item_title: str | None = None

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingSchema":
        return cls(
            id=booking.id,
            kind=booking.kind,
            item_id=booking.item_id,
            customer_name=booking.customer_name,
            customer_email=booking.customer_email,
            customer_phone=booking.customer_phone,
            booking_date=booking.booking_date,
            booking_time=booking.booking_time,
            participants=booking.participants,
            total_price=booking.total_price,
            payment_method=booking.payment_method,
            payment_status=booking.payment_status,
            item_title=booking.item_title,
        )


class BookingConfirmationSchema(BaseModel):
    booking_reference: str
    title: str
    message: str
    booking: BookingSchema
    receipt_url: str | None = None
    email_sent: bool
    checkout_required: bool


class AvailableDateSchema(BaseModel):
    date: str
    time: tuple[str, str]


class BookableItemSchema(BaseModel):
    id: str
    kind: ItemKind
    title: str
    description: str
    price: Decimal
    max_participants: int | None = None
    location: str | None = None
    duration: str | None = None
    image_url: str | None = None
    available_dates: list[AvailableDateSchema] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, item: BookableItem, language: str) -> "BookableItemSchema":
        return cls(
            id=item.id,
            kind=item.kind,
            title=item.title_for(language),
            description=item.description_for(language),
            price=item.unit_price,
            max_participants=item.max_participants,
            location=item.location,
            duration=item.duration,
            image_url=item.image_url,
            available_dates=[AvailableDateSchema(date=d.date, time=d.time_range) for d in item.available_dates],
        )


class SiteContentSchema(BaseModel):
    contents: list[dict[str, Any]]
    adventures: list[dict[str, Any]]


class SearchResultSchema(BaseModel):
    id: str
    table_name: str
    label: str
    title: str
    description: str
    link: str


class SearchResponseSchema(BaseModel):
    query: str
    results: list[SearchResultSchema]


class CheckoutRequestSchema(BaseModel):
    reference: str
    type: ItemKind


class CheckoutResponseSchema(BaseModel):
    session_id: str


class ConfirmPaymentRequestSchema(BaseModel):
    session_id: str | None = None
    reference: str | None = None
    type: str | None = None


class ConfirmPaymentResponseSchema(BaseModel):
    booking: BookingSchema
    receipt_url: str


class PayPalVerificationRequestSchema(BaseModel):
    payment_id: str | None = None
    payer_id: str | None = None
    reference: str | None = None
    type: str | None = None
