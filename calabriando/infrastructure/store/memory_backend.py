from __future__ import annotations

import asyncio
import copy
from typing import Any

from calabriando.application.ports.backend import BackendPort


class MemoryBackend(BackendPort):
    """In-process table store used in dev and tests."""

    def __init__(self, tables: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self._tables: dict[str, list[dict[str, Any]]] = copy.deepcopy(tables or {})
        self._lock = asyncio.Lock()

    def rows(self, table: str) -> list[dict[str, Any]]:
        return [dict(row) for row in self._tables.get(table, [])]

    async def select(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        ascending: bool = True,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        rows = [
            dict(row)
            for row in self._tables.get(table, [])
            if all(str(row.get(column)) == str(value) for column, value in (filters or {}).items())
        ]
        if order_by:
            # rows without the column sort last, as in Postgres ascending order
            rows.sort(
                key=lambda r: (r.get(order_by) is None, r.get(order_by) if r.get(order_by) is not None else 0),
                reverse=not ascending,
            )
        if limit is not None:
            rows = rows[:limit]
        return rows

    async def get(self, table: str, row_id: str) -> dict[str, Any] | None:
        rows = await self.select(table, filters={"id": row_id}, limit=1)
        return rows[0] if rows else None

    async def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        async with self._lock:
            stored = copy.deepcopy(row)
            self._tables.setdefault(table, []).append(stored)
            return dict(stored)

    async def update(self, table: str, row_id: str, changes: dict[str, Any]) -> dict[str, Any] | None:
        """Not part of BackendPort; stands in for updates done by edge functions."""
        async with self._lock:
            for row in self._tables.get(table, []):
                if str(row.get("id")) == str(row_id):
                    row.update(changes)
                    return dict(row)
        return None

    async def search(
        self,
        table: str,
        columns: list[str],
        search_columns: list[str],
        query: str,
        limit: int = 5,
    ) -> list[dict[str, Any]]:
        needle = query.lower()
        matches: list[dict[str, Any]] = []
        for row in self._tables.get(table, []):
            if any(needle in str(row.get(column) or "").lower() for column in search_columns):
                matches.append({column: row.get(column) for column in columns})
            if len(matches) >= limit:
                break
        return matches
