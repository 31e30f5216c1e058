"""Trefle API client.

This module provides the HTTP client for the Trefle botanical API.
The server-side token is injected into every upstream call.
"""

from typing import Any, Optional
from urllib.parse import quote

import httpx

from core.base import BaseClient
from core.config import Settings


class TrefleClient(BaseClient):
    """HTTP client for the Trefle plants endpoints."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the Trefle client.

        Args:
            settings: Application settings carrying the Trefle URL and token.
            transport: Optional httpx transport override.
        """
        super().__init__(
            name="Trefle",
            base_url=settings.trefle_api_url,
            timeout=settings.trefle_timeout,
            transport=transport,
        )
        self._token = settings.trefle_api_token

    async def list_plants(self, page: str = "1", q: str = "") -> Any:
        """List plants, forwarding pagination and search parameters verbatim.

        Args:
            page: Page number as received from the caller.
            q: Search query as received from the caller.

        Returns:
            Any: Trefle's JSON body, unchanged.
        """
        return await self._get_json(
            "plants",
            params={"token": self._token, "page": page, "q": q},
        )

    async def get_plant(self, plant_id: str) -> Any:
        """Fetch a single plant by id or slug.

        Args:
            plant_id: Trefle plant id or slug.

        Returns:
            Any: Trefle's JSON body.
        """
        return await self._get_json(
            f"plants/{quote(plant_id, safe='')}",
            params={"token": self._token},
        )
