"""USDA FoodData Central API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    async def search_foods(  # noqa: PLR0913
        self,
        query: str,
        page_size: int = 25,
        page_number: int = 1,
        data_types: list[str] | None = None,
        sort_by: str = "dataType.keyword",
        sort_order: str = "asc",
    ) -> dict[str, object]:
        """Search foods by query and return raw API data."""

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch a food by FDC id and return raw API data."""


@dataclass
class HttpxFdcClient(FdcClient):
    """FDC v1 client over a shared httpx session.

    The session carries the base URL and timeout, so request paths are
    relative. Error statuses raise ``httpx.HTTPStatusError``.
    """

    api_key: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout_seconds: float = 15
    ) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(
            api_key=api_key,
            http_client=httpx.AsyncClient(base_url=base_url, timeout=timeout_seconds),
        )

    async def search_foods(  # noqa: PLR0913
        self,
        query: str,
        page_size: int = 25,
        page_number: int = 1,
        data_types: list[str] | None = None,
        sort_by: str = "dataType.keyword",
        sort_order: str = "asc",
    ) -> dict[str, object]:
        payload: dict[str, object] = {
            "query": query,
            "pageSize": page_size,
            "pageNumber": page_number,
            "sortBy": sort_by,
            "sortOrder": sort_order,
        }
        if data_types:
            payload["dataType"] = data_types
        return await self._request("POST", "/foods/search", json=payload)

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        return await self._request("GET", f"/food/{fdc_id}")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _request(
        self, method: str, path: str, **kwargs: object
    ) -> dict[str, object]:
        response = await self.http_client.request(
            method, path, params={"api_key": self.api_key}, **kwargs
        )
        response.raise_for_status()
        return response.json()
