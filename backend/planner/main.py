"""
Planner API - FastAPI Application Entry Point.

Feature-based modular architecture:
  Each resource in planner/features/ has its own schemas, service and router,
  all built on the shared access contract in planner/core/.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from planner.config import get_settings
from planner.core.access import json_response
from planner.core.exceptions import AppBaseError

# ── Feature Routers ──────────────────────────────────────
from planner.features.tasks.router import router as tasks_router
from planner.features.appointments.router import router as appointments_router
from planner.features.vendors.router import router as vendors_router
from planner.features.notes.router import router as notes_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup & shutdown."""
    settings = get_settings()
    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} starting...")
    logger.info(f"Supabase: {settings.SUPABASE_URL[:40] or '(not configured)'}")
    if not settings.ADMIN_TOKEN:
        logger.warning("ADMIN_TOKEN is empty: every resource request will be rejected")
    yield
    logger.info("Shutting down...")


# ── Error Rendering ──────────────────────────────────────

async def app_error_handler(request: Request, exc: AppBaseError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.detail})")
    return json_response(exc.status_code, {"error": exc.message}, sanitize_error=True)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    messages = {404: "Not found", 405: "Method not allowed"}
    message = messages.get(exc.status_code, str(exc.detail))
    return json_response(exc.status_code, {"error": message}, sanitize_error=True)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return json_response(400, {"error": "Bad request"})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"{request.method} {request.url.path} crashed: {exc}", exc_info=exc)
    return json_response(500, {"error": "Unhandled error"}, sanitize_error=True)


def configure_logging(level: str, debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app() -> FastAPI:
    """Application factory."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, settings.DEBUG)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Personal planner: tasks, appointments, vendors and notes",
        lifespan=lifespan,
    )

    app.add_exception_handler(AppBaseError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # ── Register Feature Routers ─────────────────────────
    app.include_router(tasks_router, prefix="/api/tasks", tags=["Tasks"])
    app.include_router(appointments_router, prefix="/api/appointments", tags=["Appointments"])
    app.include_router(vendors_router, prefix="/api/vendors", tags=["Vendors"])
    app.include_router(notes_router, prefix="/api/notes", tags=["Notes"])

    # ── Health Check ─────────────────────────────────────
    @app.get("/health", tags=["System"])
    async def health_check():
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }

    return app


app = create_app()
