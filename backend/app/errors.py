"""
Application error types and their HTTP rendering.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> dict:
        return {"error": self.message}


class ValidationError(AppError):
    """Missing or invalid client input."""

    status_code = 400


class NotFoundError(AppError):
    """Requested transaction does not exist."""

    status_code = 404


class PersistenceError(AppError):
    """Failure originating from the storage layer."""

    status_code = 500

    def to_body(self) -> dict:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


def transaction_not_found(transaction_id: str) -> NotFoundError:
    return NotFoundError("Transaction not found", details=f"No transaction with id '{transaction_id}'")


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("[API] %s %s - Rejected malformed request: %s", request.method, request.url.path, exc.errors())
    in_body = any(error.get("loc", ("",))[0] == "body" for error in exc.errors())
    message = "Invalid request body" if in_body else "Invalid request parameters"
    return JSONResponse(status_code=400, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
