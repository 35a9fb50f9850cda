"""
Entrypoints for the parolee and rabbit counter services.

Each service is its own FastAPI application built by a factory.  The
factory owns the service's store: it creates an empty one (or takes
the one it is given) and attaches it to ``app.state`` together with
the settings in force.  Module‑level instances make the services
discoverable by uvicorn, e.g.::

    uvicorn rest_lab_api.app.main:parolee_app --port 10000
    uvicorn rest_lab_api.app.main:rabbit_app --port 10001
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import build_parolee_router, build_rabbit_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.fibonacci_service import FibonacciService
from .services.parolee_service import ParoleeService

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed request parameters with 400 instead of 422."""
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def _base_app(title: str, settings: Settings) -> FastAPI:
    setup_logging(
        settings.log_level,
        settings.log_file or None,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    app = FastAPI(title=title, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    return app


def create_parolee_app(
    settings: Optional[Settings] = None,
    service: Optional[ParoleeService] = None,
) -> FastAPI:
    """Create the parolee CRUD service.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use; defaults to the environment‑derived instance.
    service : Optional[ParoleeService]
        Record store to serve; a new empty store is created if omitted.
    """
    settings = settings or default_settings
    app = _base_app(f"{settings.project_name}: parolees", settings)
    app.state.parolee_service = service if service is not None else ParoleeService()
    app.include_router(build_parolee_router(settings))
    return app


def create_rabbit_app(
    settings: Optional[Settings] = None,
    service: Optional[FibonacciService] = None,
) -> FastAPI:
    """Create the rabbit counter (Fibonacci) service."""
    settings = settings or default_settings
    app = _base_app(f"{settings.project_name}: rabbit counter", settings)
    app.state.fibonacci_service = service if service is not None else FibonacciService()
    app.include_router(build_rabbit_router(settings))
    return app


parolee_app = create_parolee_app()
rabbit_app = create_rabbit_app()
