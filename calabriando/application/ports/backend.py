from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BackendPort(ABC):
    """Table-level access to the managed relational store."""

    @abstractmethod
    async def select(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        ascending: bool = True,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Return rows of `table` whose columns equal every value in `filters`."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, table: str, row_id: str) -> dict[str, Any] | None:
        """Return the row with the given id, or None."""
        raise NotImplementedError

    @abstractmethod
    async def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        """Insert one row and return it as stored."""
        raise NotImplementedError

    @abstractmethod
    async def search(
        self,
        table: str,
        columns: list[str],
        search_columns: list[str],
        query: str,
        limit: int = 5,
    ) -> list[dict[str, Any]]:
        """
        Case-insensitive "contains" search.

        Returns up to `limit` rows where any of `search_columns` contains `query`,
        projected to `columns`.
        """
        raise NotImplementedError
