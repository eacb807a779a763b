"""TheMealDB public recipe API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class MealDbClient(Protocol):
    """Interface for TheMealDB interactions."""

    async def filter_by_category(self, category: str) -> dict[str, object]:
        """List meals in a category and return raw API data."""

    async def lookup(self, meal_id: str) -> dict[str, object]:
        """Fetch a meal by id and return raw API data."""

    async def search(self, query: str) -> dict[str, object]:
        """Search meals by name and return raw API data."""


@dataclass
class HttpxMealDbClient(MealDbClient):
    """HTTPX-backed TheMealDB client."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxMealDbClient":
        """Create a client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient())

    async def filter_by_category(self, category: str) -> dict[str, object]:
        """List meals in a category."""
        return await self._get("filter.php", {"c": category})

    async def lookup(self, meal_id: str) -> dict[str, object]:
        """Fetch full meal details."""
        return await self._get("lookup.php", {"i": meal_id})

    async def search(self, query: str) -> dict[str, object]:
        """Search meals by name."""
        return await self._get("search.php", {"s": query})

    async def _get(self, path: str, params: dict[str, str]) -> dict[str, object]:
        response = await self.http_client.get(
            f"{self.base_url}/{path}", params=params, timeout=15
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
