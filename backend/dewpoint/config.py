"""
Dew point service configuration and constants.
"""

import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Variant(str, Enum):
    MOULD = "mould"        # /{t}/{rh} → dewpoint + mould_index
    DEWPOINT = "dewpoint"  # /dewpoint/{t}/{rh} → dewpoint only


class ServerMode(str, Enum):
    SOCKET = "socket"  # raw TCP, exact wire format
    ASGI = "asgi"      # FastAPI app served by uvicorn


# Accepted input domain
T_MIN = -40.0  # °C
T_MAX = 80.0   # °C
RH_MIN = 0.0   # %
RH_MAX = 100.0  # %

# Magnus-Tetens coefficients (°C)
MAGNUS_B = 17.67
MAGNUS_C = 243.5

# Mould index is only defined for rounded temperatures in (0, 50] °C
MOULD_T_MIN = 0
MOULD_T_MAX = 50

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000

STATUS_REASONS = {
    200: "OK",
    400: "Bad Request",
    500: "Internal Server Error",
}


class Settings(BaseModel):
    """Process configuration, read once at startup."""

    host: str = Field(default=DEFAULT_HOST, description="Listen address")
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535, description="Listen port")
    variant: Variant = Field(default=Variant.MOULD, description="Path grammar and body shape")
    server: ServerMode = Field(default=ServerMode.SOCKET, description="Serving backend")
    read_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Seconds to wait for the request line; None blocks forever",
    )
    log_level: str = Field(default="INFO", description="Root logging level")


# Settings field → environment variable
_ENV_VARS = {
    "host": "HOST",
    "port": "PORT",
    "variant": "DEWPOINT_VARIANT",
    "server": "DEWPOINT_SERVER",
    "read_timeout": "DEWPOINT_READ_TIMEOUT",
    "log_level": "LOG_LEVEL",
}


def load_settings(environ: Optional[dict] = None) -> Settings:
    """
    Build Settings from environment variables.

    Unset or empty variables fall back to the defaults. Invalid values raise
    pydantic.ValidationError.
    """
    environ = os.environ if environ is None else environ
    values = {}
    for field, var in _ENV_VARS.items():
        raw = environ.get(var)
        if raw:
            values[field] = raw.lower() if field in ("variant", "server") else raw
    return Settings(**values)
