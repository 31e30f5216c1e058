"""Plant-related data models."""

from typing import Any, Optional

from pydantic import Field

from .common import BaseModel


class GrowthConditions(BaseModel):
    """Growth conditions lifted out of a Trefle plant's nested ``growth`` block.

    Values are passed through as Trefle reports them, without coercion.
    """

    min_temp: Optional[Any] = Field(None, description="Minimum temperature in deg C")
    max_temp: Optional[Any] = Field(None, description="Maximum temperature in deg C")
    min_humidity: Optional[Any] = Field(None, description="Minimum relative humidity")
    max_humidity: Optional[Any] = Field(None, description="Maximum relative humidity")
