"""Pydantic models for the application.

This module contains the data models used for response serialization
and API documentation.
"""

from .common import BaseModel, ErrorResponse, HealthResponse
from .plants import GrowthConditions

__all__ = [
    # Plant models
    "GrowthConditions",
    # Common models
    "BaseModel",
    "ErrorResponse",
    "HealthResponse",
]
