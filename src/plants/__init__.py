"""Plants module.

This module proxies plant queries to the Trefle API, injecting the
server-side token and reshaping plant detail responses.
"""

from .client import TrefleClient
from .dependencies import get_plant_service
from .router import router
from .service import PlantService, build_plant_details

__all__ = [
    "PlantService",
    "TrefleClient",
    "build_plant_details",
    "get_plant_service",
    "router",
]
