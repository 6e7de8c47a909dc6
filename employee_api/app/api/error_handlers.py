"""
Global exception handlers.

Every failure leaves the API as ``{"success": false, "message": ...}``:

* ``EmployeeError`` subclasses keep their own status (400/404)
* request validation errors (e.g. a body that is not a JSON object)
  become 400
* other HTTP errors raised by the framework (unknown route, wrong
  method) keep their status
* anything else becomes 500 with a generic message; details are only
  logged
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_api.app.core.errors import EmployeeError

logger = logging.getLogger(__name__)


def _failure(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(EmployeeError)
    async def employee_error_handler(request: Request, exc: EmployeeError):
        logger.info(
            "%s on %s %s: %s",
            type(exc).__name__, request.method, request.url.path, exc.message,
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return _failure(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _failure(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
