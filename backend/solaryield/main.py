"""
SolarYield: FastAPI application entry point.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solaryield.api.router import router
from solaryield.config import settings
from solaryield.core.logging import RequestLoggingMiddleware, setup_logging

setup_logging(settings.log_level, json_format=settings.log_json)

app = FastAPI(
    title="SolarYield API",
    description="Solar yield forecasting engine for two-array PV systems",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "solaryield"}
