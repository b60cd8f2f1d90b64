from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from calabriando.application.ports.backend import BackendPort
from calabriando.domain.entities.search_result import SearchResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchTableConfig:
    table: str
    columns: list[str]
    search_columns: list[str]


SEARCH_TABLES: tuple[SearchTableConfig, ...] = (
    SearchTableConfig("content", ["id", "title", "description", "section", "translations"], ["title", "description"]),
    SearchTableConfig(
        "adventures", ["id", "title", "description", "adventure_type", "translations"], ["title", "description"]
    ),
    SearchTableConfig("tours", ["id", "title", "description", "category", "translations"], ["title", "description"]),
    SearchTableConfig("cultural_sites", ["id", "name", "description", "type", "translations"], ["name", "description"]),
    SearchTableConfig("restaurants", ["id", "name", "description", "translations"], ["name", "description"]),
    SearchTableConfig("bb", ["id", "name", "description", "translations"], ["name", "description"]),
)

TABLE_LABELS: dict[str, dict[str, str]] = {
    "content": {"it": "Contenuto", "en": "Content"},
    "adventures": {"it": "Avventure", "en": "Adventures"},
    "tours": {"it": "Tour", "en": "Tours"},
    "cultural_sites": {"it": "Siti Culturali", "en": "Cultural Sites"},
    "restaurants": {"it": "Ristoranti", "en": "Restaurants"},
    "bb": {"it": "B&B", "en": "B&Bs"},
}


class FederatedSearchUseCase:
    def __init__(
        self,
        backend: BackendPort,
        tables: tuple[SearchTableConfig, ...] = SEARCH_TABLES,
        limit_per_table: int = 5,
    ) -> None:
        self._backend = backend
        self._tables = tables
        self._limit = limit_per_table

    async def execute(self, query: str, language: str) -> list[SearchResult]:
        normalized = query.strip()
        if not normalized:
            return []

        per_table = await asyncio.gather(*(self._search_table(config, normalized) for config in self._tables))

        results: list[SearchResult] = []
        for config, rows in zip(self._tables, per_table):
            for row in rows:
                result = _to_result(config.table, row, language)
                if result.title or result.description:
                    results.append(result)
        return results

    async def _search_table(self, config: SearchTableConfig, query: str) -> list[dict[str, Any]]:
        try:
            return await self._backend.search(
                config.table,
                columns=config.columns,
                search_columns=config.search_columns,
                query=query,
                limit=self._limit,
            )
        except Exception as e:
            logger.error("Error searching table", extra={"table": config.table, "error": str(e)})
            return []


def build_link(table_name: str, row: dict[str, Any]) -> str:
    item_id = row.get("id")

    if table_name == "content":
        section = row.get("section") or ""
        if section == "experience-food":
            return "/gastronomy"
        if section == "experience-culture":
            return "/culture"
        if section.startswith("tour-"):
            return f"/tours/{section[len('tour-'):]}"
        return "/"

    if table_name == "adventures":
        if item_id:
            return f"/adventures/item/{item_id}"
        if row.get("adventure_type"):
            return f"/adventures/{row['adventure_type']}"
        return "/adventures"

    if table_name == "tours":
        if item_id:
            return f"/tour/{item_id}"
        return "/tours"

    if table_name == "cultural_sites":
        return f"/culture#site-{item_id}"

    if table_name == "restaurants":
        return f"/restaurants#restaurant-{item_id}"

    if table_name == "bb":
        return f"/bb#bb-{item_id}"

    logger.warning("Unknown table for link generation", extra={"table": table_name})
    return "#"


def table_label(table_name: str, language: str) -> str:
    return TABLE_LABELS.get(table_name, {}).get(language) or table_name


def _to_result(table_name: str, row: dict[str, Any], language: str) -> SearchResult:
    translation = (row.get("translations") or {}).get(language) or {}
    return SearchResult(
        id=str(row.get("id") or ""),
        table_name=table_name,
        title=translation.get("title") or row.get("title") or row.get("name") or "",
        description=translation.get("description") or row.get("description") or "",
        link=build_link(table_name, row),
        label=table_label(table_name, language),
    )
