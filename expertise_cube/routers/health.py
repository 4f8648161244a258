"""
Health Check Router - Employee Expertise Cube
expertise_cube/routers/health.py
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from expertise_cube.config import Settings
from expertise_cube.core.dependencies import get_app_settings, get_storage
from expertise_cube.repositories.base import BaseStorage

router = APIRouter(tags=["Health"])



#  Schemas


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    employees: int



#  Routes


@router.get("/", summary="Root endpoint")
async def root(settings: Settings = Depends(get_app_settings)):
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


@router.get("/health", response_model=HealthResponse, summary="Service health")
async def health_check(
    settings: Settings = Depends(get_app_settings),
    storage: BaseStorage = Depends(get_storage),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        employees=len(storage.get_all_employees()),
    )
