"""Plant dependencies for FastAPI."""

from typing import Optional

from core.config import get_settings

from .client import TrefleClient
from .service import PlantService

# Global plant service instance
_plant_service: Optional[PlantService] = None


def get_plant_service() -> PlantService:
    """Get the plant service instance.

    Returns:
        PlantService: Plant service instance.
    """
    global _plant_service
    if _plant_service is None:
        _plant_service = PlantService(TrefleClient(get_settings()))
    return _plant_service
