"""Plant router.

This module provides the FastAPI routes that proxy plant queries
to the Trefle API.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from models.common import ErrorResponse

from .dependencies import get_plant_service
from .service import PlantService

router = APIRouter()

_error_responses = {
    500: {"model": ErrorResponse, "description": "Trefle unreachable or returned an invalid body"},
}


@router.get("/plants", summary="List plants", responses=_error_responses)
async def list_plants(
    page: str = Query("1", description="Page number, forwarded to Trefle"),
    q: str = Query("", description="Search query, forwarded to Trefle"),
    plant_service: PlantService = Depends(get_plant_service),
) -> Any:
    """List plants with optional pagination and search.

    The Trefle response body is returned unchanged. Upstream errors are
    proxied with Trefle's status code.
    """
    return await plant_service.list_plants(page=page, q=q)


@router.get("/plants/{plant_id}", summary="Get plant details", responses=_error_responses)
async def get_plant(
    plant_id: str,
    plant_service: PlantService = Depends(get_plant_service),
) -> Dict[str, Any]:
    """Get a plant by id, with growth temperature and humidity flattened."""
    return await plant_service.get_plant_details(plant_id)
