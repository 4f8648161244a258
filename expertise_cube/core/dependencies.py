"""
Dependencies - Employee Expertise Cube
expertise_cube/core/dependencies.py

FastAPI dependency injection. The storage handle and aggregator are owned by
the application instance (set on app.state by create_app), so every app built
by the factory has its own isolated store.
"""

from fastapi import Request

from expertise_cube.config import Settings
from expertise_cube.repositories.base import BaseStorage
from expertise_cube.services.expertise_service import ExpertiseScoreAggregator


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_storage(request: Request) -> BaseStorage:
    """Storage handle of the running app."""
    return request.app.state.storage


def get_aggregator(request: Request) -> ExpertiseScoreAggregator:
    """Score aggregator bound to the running app's storage."""
    return request.app.state.aggregator
