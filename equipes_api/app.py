"""Application factory for the equipes API."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from equipes_api.core.config import Settings, get_settings
from equipes_api.core.logging_config import setup_logging
from equipes_api.db.session import Database
from equipes_api.repositories.sql_repository import SQLRepository
from equipes_api.routers import data as data_router
from equipes_api.services.account_service import AccountService
from equipes_api.services.document_service import DocumentService
from equipes_api.services.errors import ServiceError

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Requête invalide."


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (anti clickjacking, nosniff, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse({"message": exc.message}, status_code=exc.status_code)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse({"message": INVALID_REQUEST}, status_code=400)


def _prepare_database(database: Database) -> None:
    """Connectivity check and idempotent table creation; failures are logged, startup goes on."""
    try:
        database.ping()
        logger.info("Connected to the %s database", database.dialect)
    except SQLAlchemyError:
        logger.exception("Could not connect to the database")
        return
    try:
        database.create_all()
        logger.info('Tables "users" and "user_data" checked/created')
    except SQLAlchemyError:
        logger.exception("Could not create the database tables")


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the app; usable with ``uvicorn --factory equipes_api.app:create_app``."""
    settings = settings or get_settings()
    setup_logging(settings)
    database = database or Database(settings.database_url, sslmode=settings.database_sslmode)

    repository = SQLRepository(database)
    account_service = AccountService(repository, placeholder_credential=settings.placeholder_credential)
    document_service = DocumentService(repository, account_service, save_mode=settings.save_mode)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _prepare_database(database)
        logger.info("Save mode: %s", settings.save_mode)
        yield
        database.dispose()

    app = FastAPI(title="Equipes API", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database
    app.state.account_service = account_service
    app.state.document_service = document_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)

    app.include_router(data_router.router)
    return app
