"""Logo Engine API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LogoEngineError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured once on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers in api/error_handlers.py: LogoEngineError (domain),
      RequestValidationError (Pydantic), Exception (catch-all)
    - Icon registry loaded lazily on first use, so a broken library file fails
      readiness instead of startup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from logo_engine.api.error_handlers import register_error_handlers
from logo_engine.api.routes import colors, health, logo_crop, logo_history, logo_render
from logo_engine.config import get_settings
from logo_engine.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Logo engine API started")
    yield
    logger.info("Logo engine API shutting down")


app = FastAPI(
    title="Logo Engine API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(logo_render.router)
app.include_router(logo_history.router)
app.include_router(logo_crop.router)
app.include_router(colors.router)

register_error_handlers(app)
