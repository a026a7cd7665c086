"""Patient Service API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PatientServiceError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging and database initialized on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from patient_service.api.error_handlers import register_error_handlers
from patient_service.api.routes import health, patients
from patient_service.config import get_settings
from patient_service.infrastructure.database import close_db, init_db
from patient_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Patient service started")
    yield
    await close_db()
    logger.info("Patient service shutting down")


app = FastAPI(
    title="Patient Service API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(patients.router)

register_error_handlers(app)
