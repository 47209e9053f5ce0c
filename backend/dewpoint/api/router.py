"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from dewpoint.api.calculation import router as calculation_router

router = APIRouter()
router.include_router(calculation_router)
