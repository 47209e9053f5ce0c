"""
Dew point service — FastAPI application entry point.

Run with: uvicorn dewpoint.main:app
"""

from fastapi import FastAPI

from dewpoint.api.router import router
from dewpoint.config import Variant, load_settings
from dewpoint.engine.variants.registry import get_variant


def create_app(variant: Variant = Variant.MOULD) -> FastAPI:
    application = FastAPI(
        title="Dew Point API",
        description="Dew point and mould index from temperature and relative humidity",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.state.variant = get_variant(variant)
    application.include_router(router)
    return application


app = create_app(load_settings().variant)
