from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from calabriando.domain.entities.bookable_item import parse_time_range
from calabriando.domain.entities.item_kind import ItemKind, config_for


class PaymentStatus(str, Enum):
    pending = "pending"
    paid = "paid"


class PaymentMethod(str, Enum):
    card = "card"
    cash = "cash"


@dataclass(frozen=True)
class BookingForm:
    name: str
    email: str
    phone: str
    date: str | None  # YYYY-MM-DD
    participants: int = 1


@dataclass(frozen=True)
class Booking:
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
    payment_method: str = PaymentMethod.cash.value
    payment_status: str = PaymentStatus.pending.value
    item_title: str | None = None

    @property
    def time_display(self) -> str:
        return f"{self.booking_time[0]} - {self.booking_time[1]}"

    def to_row(self) -> dict[str, Any]:
        config = config_for(self.kind)
        row: dict[str, Any] = {
            "id": self.id,
            config.foreign_key: self.item_id,
            "user_name": self.customer_name,
            "user_email": self.customer_email,
            "user_phone": self.customer_phone,
            "booking_date": self.booking_date,
            "participants": self.participants,
        }
        if self.kind is ItemKind.special_event:
            # special_event_bookings has no payment columns; it stores a denormalised title and a text time
            row["booking_time"] = self.time_display
            row["event_title"] = self.item_title
        else:
            row["booking_time"] = list(self.booking_time)
            row["total_price"] = float(self.total_price)
            row["payment_method"] = self.payment_method
            row["payment_status"] = self.payment_status
        return row

    @classmethod
    def from_row(cls, kind: ItemKind, row: dict[str, Any]) -> "Booking":
        config = config_for(kind)
        return cls(
            id=str(row["id"]),
            kind=kind,
            item_id=str(row.get(config.foreign_key) or ""),
            customer_name=row.get("user_name") or "",
            customer_email=row.get("user_email") or "",
            customer_phone=row.get("user_phone") or "",
            booking_date=str(row.get("booking_date") or ""),
            booking_time=parse_time_range(row.get("booking_time")),
            participants=int(row.get("participants") or 0),
            total_price=Decimal(str(row.get("total_price") or 0)),
            payment_method=row.get("payment_method") or config.payment_method,
            payment_status=row.get("payment_status") or PaymentStatus.pending.value,
            item_title=row.get("event_title"),
        )


@dataclass(frozen=True)
class Receipt:
    filename: str
    content: bytes


@dataclass(frozen=True)
class BookingConfirmation:
    booking: Booking
    receipt: Receipt | None
    email_sent: bool

    @property
    def checkout_required(self) -> bool:
        return self.booking.payment_method == PaymentMethod.card.value
