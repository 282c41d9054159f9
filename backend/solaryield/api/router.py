"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from solaryield.api.solar import router as solar_router
from solaryield.api.forecast import router as forecast_router

router = APIRouter()
router.include_router(solar_router)
router.include_router(forecast_router)
