from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from expertise_cube.config import Settings, get_settings
from expertise_cube.core.error_handlers import register_exception_handlers
from expertise_cube.core.logging_config import configure_logging
from expertise_cube.models.enumerations import MergePolicy
from expertise_cube.repositories.base import BaseStorage
from expertise_cube.repositories.memory import MemoryStorage
from expertise_cube.repositories.seed import seed_sample_data
from expertise_cube.services.expertise_service import ExpertiseScoreAggregator

# IMPORT ROUTERS
from expertise_cube.routers.health import router as health_router
from expertise_cube.routers.employees import router as employees_router
from expertise_cube.routers.evaluations import router as evaluations_router
from expertise_cube.routers.expertise import router as expertise_router

load_dotenv()

logger = structlog.get_logger(__name__)


# SWAGGER UI - tag display order
_OPENAPI_TAGS = [
    {"name": "Health"},
    {"name": "Employees"},
    {"name": "Evaluations"},
    {"name": "Expertise Scores"},
]


def create_app(
    storage: Optional[BaseStorage] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the API around an explicit storage handle.

    Args:
        storage: Storage backend. When omitted a MemoryStorage is created and,
                 if SEED_SAMPLE_DATA is set, populated with the sample employee.
        settings: Settings to use instead of the cached environment settings.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    if storage is None:
        storage = MemoryStorage()
        if settings.SEED_SAMPLE_DATA:
            seed_sample_data(storage)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        openapi_tags=_OPENAPI_TAGS,
    )

    app.state.settings = settings
    app.state.storage = storage
    app.state.aggregator = ExpertiseScoreAggregator(
        storage,
        merge_policy=MergePolicy(settings.EVALUATION_MERGE_POLICY),
        merge_weights=settings.merge_weights,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # REGISTER EXCEPTION HANDLERS
    register_exception_handlers(app)

    # REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
    app.include_router(health_router)
    app.include_router(employees_router, prefix=settings.API_PREFIX)
    app.include_router(evaluations_router, prefix=settings.API_PREFIX)
    app.include_router(expertise_router, prefix=settings.API_PREFIX)

    logger.info(
        "app_created",
        app_env=settings.APP_ENV,
        merge_policy=settings.EVALUATION_MERGE_POLICY,
        storage=type(storage).__name__,
    )
    return app


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "expertise_cube.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
