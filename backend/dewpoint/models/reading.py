"""
Pydantic model for a validated temperature / relative humidity pair.
"""

from pydantic import BaseModel, ConfigDict, Field


class TemperatureHumidity(BaseModel):
    """
    Air temperature and relative humidity taken from a request path.

    Only the request parser builds these, after every range check has passed.
    """

    model_config = ConfigDict(frozen=True)

    t: float = Field(..., description="Dry-bulb temperature (°C)")
    rh: float = Field(..., description="Relative humidity (0-100%)")
