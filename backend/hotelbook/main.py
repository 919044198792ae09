"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.gzip import GZipMiddleware

from hotelbook import __version__
from hotelbook.api.v1 import router as api_v1_router
from hotelbook.config import Settings, get_settings
from hotelbook.database import Database
from hotelbook.errors import (
    ConstraintViolation,
    DuplicateKeyError,
    NotFoundError,
    ReferentialError,
    StoreError,
)
from hotelbook.services.seed import seed_database

logger = logging.getLogger(__name__)

# Most specific first
ERROR_STATUS = [
    (NotFoundError, 404),
    (DuplicateKeyError, 409),
    (ConstraintViolation, 409),
    (ReferentialError, 422),
]


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    for error_class, status_code in ERROR_STATUS:
        if isinstance(exc, error_class):
            return JSONResponse(status_code=status_code, content={"detail": str(exc)})
    logger.error(f"Unhandled store error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal storage error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application startup and shutdown."""
        logger.info("Starting %s...", settings.app_name)
        database = Database(settings.database_url, echo=settings.debug)
        await database.initialize()
        if settings.seed_demo_data:
            async with database.session() as session:
                await seed_database(session)
        app.state.database = database
        yield
        logger.info("Shutting down...")
        await database.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="Hotel discovery, reviews and saved lists",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(GZipMiddleware, minimum_size=500)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StoreError, store_error_handler)

    # Include API routers
    app.include_router(api_v1_router)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "app": settings.app_name}

    return app


logging.basicConfig(level=get_settings().log_level, format="%(asctime)s %(levelname)s %(message)s")
app = create_app()
