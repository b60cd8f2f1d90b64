from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ItemKind(str, Enum):
    tour = "tour"
    adventure = "adventure"
    special_event = "special_event"


@dataclass(frozen=True)
class KindConfig:
    item_table: str
    booking_table: str
    foreign_key: str
    id_prefix: str
    payment_method: str
    notification_type: str


KIND_CONFIG: dict[ItemKind, KindConfig] = {
    ItemKind.tour: KindConfig(
        item_table="tours",
        booking_table="bookings",
        foreign_key="tour_id",
        id_prefix="BK",
        payment_method="card",
        notification_type="tour",
    ),
    ItemKind.adventure: KindConfig(
        item_table="adventures",
        booking_table="adventure_bookings",
        foreign_key="adventure_id",
        id_prefix="BK",
        payment_method="cash",
        notification_type="adventure",
    ),
    ItemKind.special_event: KindConfig(
        item_table="special_events",
        booking_table="special_event_bookings",
        foreign_key="event_id",
        id_prefix="SPE",
        payment_method="cash",
        notification_type="special_event",
    ),
}


def config_for(kind: ItemKind) -> KindConfig:
    return KIND_CONFIG[kind]
