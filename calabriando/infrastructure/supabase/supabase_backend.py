from __future__ import annotations

from typing import Any

from calabriando.application.ports.backend import BackendPort
from calabriando.infrastructure.supabase.rest_client import SupabaseRestClient


class SupabaseBackend(BackendPort):
    def __init__(self, client: SupabaseRestClient) -> None:
        self._client = client

    async def select(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        ascending: bool = True,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        params: dict[str, str] = {"select": "*"}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{value}"
        if order_by:
            params["order"] = f"{order_by}.{'asc' if ascending else 'desc'}"
        if limit is not None:
            params["limit"] = str(limit)
        return await self._client.get_rows(table, params)

    async def get(self, table: str, row_id: str) -> dict[str, Any] | None:
        rows = await self.select(table, filters={"id": row_id}, limit=1)
        return rows[0] if rows else None

    async def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        return await self._client.insert_row(table, row)

    async def search(
        self,
        table: str,
        columns: list[str],
        search_columns: list[str],
        query: str,
        limit: int = 5,
    ) -> list[dict[str, Any]]:
        pattern = _quote(f"*{query}*")
        conditions = ",".join(f"{column}.ilike.{pattern}" for column in search_columns)
        params = {
            "select": ",".join(columns),
            "or": f"({conditions})",
            "limit": str(limit),
        }
        return await self._client.get_rows(table, params)


def _quote(value: str) -> str:
    # PostgREST reserves , . : ( ) inside logic trees; double quotes make them literal
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
