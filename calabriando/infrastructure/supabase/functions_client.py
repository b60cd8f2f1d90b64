from __future__ import annotations

import logging
from typing import Any

import httpx


class SupabaseFunctionsClient:
    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._functions_url = f"{base_url.rstrip('/')}/functions/v1"
        self._headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    async def invoke(self, name: str, payload: dict[str, Any]) -> httpx.Response:
        """POST `payload` to an edge function. Network errors propagate as httpx.HTTPError."""
        url = f"{self._functions_url}/{name}"
        resp = await self._client.post(url, json=payload, headers=self._headers)
        if resp.status_code >= 400:
            self._logger.error(
                "Edge function call failed",
                extra={"function": name, "status": resp.status_code, "error": resp.text[:500]},
            )
        return resp

    async def aclose(self) -> None:
        await self._client.aclose()


def error_message(resp: httpx.Response, default: str) -> str:
    try:
        data = resp.json()
    except Exception:
        return default
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return default
