from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Sequence

from calabriando.application.exceptions import ContentLoadError
from calabriando.application.ports.backend import BackendPort
from calabriando.application.utils.retry import RETRY_DELAYS, retry_operation
from calabriando.domain.entities.site_content import SiteContent


class LoadSiteContentUseCase:
    def __init__(
        self,
        backend: BackendPort,
        delays: Sequence[float] = RETRY_DELAYS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._backend = backend
        self._delays = tuple(delays)
        self._sleep = sleep
        self._logger = logging.getLogger(__name__)

    async def execute(self) -> SiteContent:
        content_result, adventures_result = await asyncio.gather(
            retry_operation(self._load_content, self._delays, self._sleep, label="content"),
            retry_operation(self._load_adventures, self._delays, self._sleep, label="adventures"),
            return_exceptions=True,
        )

        if isinstance(content_result, Exception):
            self._logger.error("Error loading content", extra={"error": str(content_result)})
            raise ContentLoadError("Failed to load content data") from content_result

        if isinstance(adventures_result, Exception):
            self._logger.error("Error loading adventures", extra={"error": str(adventures_result)})
            raise ContentLoadError("Failed to load adventures data") from adventures_result

        return SiteContent(contents=content_result, adventures=adventures_result)

    async def _load_content(self) -> list[dict[str, Any]]:
        return await self._backend.select("content", order_by="display_order")

    async def _load_adventures(self) -> list[dict[str, Any]]:
        return await self._backend.select("adventures", order_by="created_at")
