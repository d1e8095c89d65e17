"""
app.py: FastAPI application factory and startup lifecycle.

This is the ASGI application object imported by uvicorn.
It wires the repository and services, registers routers, and runs startup
initialization.

Usage (via launcher):
    python main.py

Usage (direct uvicorn):
    uvicorn app:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from hotel_backend.controllers.hotel_controller import router as hotel_router
from hotel_backend.controllers.responses import register_exception_handlers
from hotel_backend.controllers.room_controller import router as room_router
from hotel_backend.controllers.room_type_controller import router as room_type_router
from hotel_backend.repository.data_repository import DataRepository
from hotel_backend.services.hotel_service import HotelService
from hotel_backend.services.room_service import RoomService
from hotel_backend.services.room_type_service import RoomTypeService
from hotel_backend.utils.config import Settings, get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build and wire the FastAPI application.

    Services are instantiated here and exposed through app.state; controllers
    resolve them via the providers in hotel_backend.controllers.dependencies.
    """
    settings = settings or get_settings()

    # --- Repository (SQLite connection factory) ---
    repository = DataRepository(settings)

    # --- Services ---
    hotel_service = HotelService(repository=repository, settings=settings)
    room_type_service = RoomTypeService(repository=repository, settings=settings)
    room_service = RoomService(
        repository=repository,
        settings=settings,
        hotel_service=hotel_service,
        room_type_service=room_type_service,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Run startup initialization before accepting requests."""
        _startup(app, settings)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # --- Routers ---
    app.include_router(hotel_router)
    app.include_router(room_router)
    app.include_router(room_type_router)
    register_exception_handlers(app)

    app.state.repository = repository
    app.state.hotel_service = hotel_service
    app.state.room_type_service = room_type_service
    app.state.room_service = room_service

    return app


def _startup(app: FastAPI, settings: Settings) -> None:
    """
    Idempotent startup sequence. Safe to re-run on server restarts.

    Schema creation must precede the demo seed; the seed is skipped once any
    hotel exists.
    """
    repository: DataRepository = app.state.repository

    logger.info("Startup: initializing database schema")
    repository.initialize_database()

    if settings.seed_demo_data:
        logger.info("Startup: seeding demo hotels (skipped if Hotels table not empty)")
        repository.seed_demo_data_if_empty()

    logger.info("Startup complete, system ready")


# Module-level app object for uvicorn
app = create_app()
