"""Exceptions raised by the services and their HTTP status codes."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors surfaced to API callers as ``{"message": ...}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Missing or empty required field."""

    status_code = 400


class AuthError(ServiceError):
    """Unknown user or wrong credential; the two cases are indistinguishable."""

    status_code = 401


class ConflictError(ServiceError):
    """Username already registered."""

    status_code = 409


class StoreError(ServiceError):
    """Backing database failed. Details are logged, never returned."""

    status_code = 500


@contextmanager
def store_errors(message: str) -> Iterator[None]:
    """Turn any SQLAlchemy failure inside the block into a StoreError(message)."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("%s", message)
        raise StoreError(message) from exc
