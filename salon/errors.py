# salon/errors.py
"""
Error taxonomy shared by services and routers.

Every error carries the HTTP status it maps to; `register_exception_handlers`
turns them into `{"error": message}` responses.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


class SalonError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationFailed(SalonError):
    status_code = 401
    default_message = "Incorrect password"


class Unauthorized(SalonError):
    status_code = 401
    default_message = "Not authenticated"


class Forbidden(SalonError):
    status_code = 403
    default_message = "Reveal the data first"


class Conflict(SalonError):
    # Public clients expect 400 for taken slots and duplicate reviews
    status_code = 400
    default_message = "Conflict"


class NotFound(SalonError):
    status_code = 404
    default_message = "Not found"


class ValidationFailed(SalonError):
    status_code = 400
    default_message = "Invalid data"


class InternalStoreError(SalonError):
    status_code = 500


def _error_response(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})


async def salon_error_handler(request: Request, exc: SalonError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return _error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{field}: {error.get('msg')}" if field else error.get("msg", ""))
    return _error_response(400, "; ".join(problems) or ValidationFailed.default_message)


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(f"Store error on {request.method} {request.url.path}")
    error = InternalStoreError(str(exc))
    return _error_response(error.status_code, error.message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SalonError, salon_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
