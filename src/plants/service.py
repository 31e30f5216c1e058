"""Plant service.

Wraps the Trefle client and reshapes plant detail responses.
"""

from typing import Any, Dict, Optional

import structlog

from core.exceptions import UpstreamStatusError
from models.plants import GrowthConditions

from .client import TrefleClient

logger = structlog.get_logger(__name__)

PLANT_DETAILS_ERROR = "Failed to fetch plant details from Trefle API"


def _dig(value: Any, *keys: str) -> Optional[Any]:
    """Follow ``keys`` through nested dicts, returning None on any missing link."""
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def extract_growth_conditions(plant: Any) -> GrowthConditions:
    """Lift temperature and humidity ranges out of ``plant["growth"]``."""
    return GrowthConditions(
        min_temp=_dig(plant, "growth", "minimum_temperature", "deg_c"),
        max_temp=_dig(plant, "growth", "maximum_temperature", "deg_c"),
        min_humidity=_dig(plant, "growth", "minimum_relative_humidity"),
        max_humidity=_dig(plant, "growth", "maximum_relative_humidity"),
    )


def build_plant_details(payload: Any) -> Dict[str, Any]:
    """Flatten a Trefle plant detail payload.

    Returns a shallow copy of ``payload["data"]`` with ``min_temp``,
    ``max_temp``, ``min_humidity`` and ``max_humidity`` added. The added keys
    are always present (None when Trefle omits them) and override any
    same-named keys in ``data``.

    Args:
        payload: Trefle JSON body, normally ``{"data": {...}, "meta": {...}}``.

    Returns:
        Dict[str, Any]: Flattened plant details.
    """
    plant = _dig(payload, "data")
    details = dict(plant) if isinstance(plant, dict) else {}
    details.update(extract_growth_conditions(plant).model_dump())
    return details


class PlantService:
    """Service for plant list and detail lookups."""

    def __init__(self, client: TrefleClient) -> None:
        self.client = client

    async def list_plants(self, page: str = "1", q: str = "") -> Any:
        """Return Trefle's plant list unchanged."""
        return await self.client.list_plants(page=page, q=q)

    async def get_plant_details(self, plant_id: str) -> Dict[str, Any]:
        """Fetch a plant and flatten its growth conditions.

        Raises:
            UpstreamStatusError: With the upstream status and a generic message.
            ExternalServiceError: If Trefle cannot be reached or decoded.
        """
        try:
            payload = await self.client.get_plant(plant_id)
        except UpstreamStatusError as e:
            logger.error(
                "Trefle API error (plant details)",
                plant_id=plant_id,
                status_code=e.status_code,
                reason=e.reason,
            )
            raise e.with_message(PLANT_DETAILS_ERROR)

        return build_plant_details(payload)
