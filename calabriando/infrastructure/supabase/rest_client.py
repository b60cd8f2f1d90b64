from __future__ import annotations

import logging
from typing import Any

import httpx

from calabriando.application.exceptions import BackendError


class SupabaseRestClient:
    """Thin async client for the PostgREST API exposed by Supabase."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._rest_url = f"{base_url.rstrip('/')}/rest/v1"
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
        }
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    async def get_rows(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        url = f"{self._rest_url}/{table}"
        try:
            resp = await self._client.get(url, params=params, headers=self._headers)
        except httpx.HTTPError as e:
            self._logger.error("Supabase request failed", extra={"table": table, "error": str(e)})
            raise BackendError(f"Failed to query {table}: {e}") from e

        self._raise_for_status(resp, table)
        data = resp.json()
        return data if isinstance(data, list) else []

    async def insert_row(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        url = f"{self._rest_url}/{table}"
        headers = {**self._headers, "Prefer": "return=representation"}
        try:
            resp = await self._client.post(url, json=[row], headers=headers)
        except httpx.HTTPError as e:
            self._logger.error("Supabase insert failed", extra={"table": table, "error": str(e)})
            raise BackendError(f"Failed to insert into {table}: {e}") from e

        self._raise_for_status(resp, table)
        data = resp.json()
        if isinstance(data, list) and data:
            return data[0]
        return row

    async def aclose(self) -> None:
        await self._client.aclose()

    def _raise_for_status(self, resp: httpx.Response, table: str) -> None:
        if resp.status_code < 400:
            return
        try:
            error_json = resp.json()
            message = error_json.get("message") or resp.text
            code = error_json.get("code")
        except Exception:
            message = resp.text
            code = None

        self._logger.error(
            "Supabase returned an error",
            extra={"table": table, "status": resp.status_code, "error": message, "code": code},
        )
        raise BackendError(f"{table}: {resp.status_code} {message}")
