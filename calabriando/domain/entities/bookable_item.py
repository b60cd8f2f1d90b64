from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from calabriando.domain.entities.item_kind import ItemKind


@dataclass(frozen=True)
class AvailableDate:
    date: str  # YYYY-MM-DD
    time_range: tuple[str, str]


@dataclass(frozen=True)
class Translation:
    title: str = ""
    description: str = ""
    additional_details: str | None = None


@dataclass(frozen=True)
class BookableItem:
    id: str
    kind: ItemKind
    title: str = ""
    description: str = ""
    translations: dict[str, Translation] = field(default_factory=dict)
    unit_price: Decimal = Decimal("0")
    max_participants: int | None = None
    location: str | None = None
    duration: str | None = None
    image_url: str | None = None
    available_dates: tuple[AvailableDate, ...] = ()

    def title_for(self, language: str) -> str:
        translation = self.translations.get(language)
        if translation and translation.title:
            return translation.title
        return self.title or ""

    def description_for(self, language: str) -> str:
        translation = self.translations.get(language)
        if translation and translation.description:
            return translation.description
        return self.description or ""

    def time_range_for(self, date: str) -> tuple[str, str] | None:
        for available in self.available_dates:
            if available.date == date:
                return available.time_range
        return None

    @classmethod
    def from_row(cls, kind: ItemKind, row: dict[str, Any]) -> "BookableItem":
        translations = {
            lang: Translation(
                title=(value or {}).get("title") or "",
                description=(value or {}).get("description") or "",
                additional_details=(value or {}).get("additional_details"),
            )
            for lang, value in (row.get("translations") or {}).items()
        }

        available_dates = tuple(_parse_available_dates(row.get("available_dates")))
        # Special events without a date list are bookable on their single date.
        if not available_dates and row.get("date"):
            available_dates = (
                AvailableDate(date=str(row["date"]), time_range=parse_time_range(row.get("time"))),
            )

        max_participants = row.get("max_participants")
        return cls(
            id=str(row["id"]),
            kind=kind,
            title=row.get("title") or row.get("name") or "",
            description=row.get("description") or "",
            translations=translations,
            unit_price=_to_decimal(row.get("price")),
            max_participants=int(max_participants) if max_participants else None,
            location=row.get("location"),
            duration=row.get("duration"),
            image_url=row.get("image_url"),
            available_dates=available_dates,
        )


def parse_time_range(value: Any) -> tuple[str, str]:
    """Accepts ["09:00", "13:00"], "09:00 - 13:00" or a single "09:00"."""
    if isinstance(value, (list, tuple)) and len(value) >= 2:
        return (str(value[0]).strip(), str(value[1]).strip())
    if isinstance(value, str) and value.strip():
        if "-" in value:
            start, end = value.split("-", 1)
            return (start.strip(), end.strip())
        return (value.strip(), value.strip())
    return ("", "")


def _parse_available_dates(raw: Any) -> list[AvailableDate]:
    dates: list[AvailableDate] = []
    for entry in raw or []:
        if not isinstance(entry, dict) or not entry.get("date"):
            continue
        dates.append(AvailableDate(date=str(entry["date"]), time_range=parse_time_range(entry.get("time"))))
    return dates


def _to_decimal(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")
