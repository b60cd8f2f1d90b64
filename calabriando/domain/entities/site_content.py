from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ContentSection:
    title: str
    description: str
    image_url: str


@dataclass(frozen=True)
class SiteContent:
    contents: list[dict[str, Any]] = field(default_factory=list)
    adventures: list[dict[str, Any]] = field(default_factory=list)

    def section(self, name: str, language: str) -> ContentSection:
        row = next((c for c in self.contents if c.get("section") == name), None)
        if row is None:
            return ContentSection(title="", description="", image_url="")

        translation = (row.get("translations") or {}).get(language) or {}
        return ContentSection(
            title=translation.get("title") or row.get("title") or "",
            description=translation.get("description") or row.get("description") or "",
            image_url=row.get("image_url") or "",
        )
