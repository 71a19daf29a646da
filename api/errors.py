"""
FastAPI exception handlers for the dosage endpoints.

Every handled error ends up as a JSON ``{"error": ...}`` body, except for
unknown routes which answer with a plain-text 404.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from calculator import DosageValidationError

logger = logging.getLogger("errors")

INVALID_REQUEST_FORMAT = "Invalid request format"
RESOURCE_NOT_FOUND = "Resource not found"


class MalformedRequestError(ValueError):
    """Raised when a request body is not a JSON object of numeric fields."""


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def dosage_validation_handler(request: Request, exc: DosageValidationError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return error_response(exc.message)


async def malformed_request_handler(request: Request, exc: MalformedRequestError) -> JSONResponse:
    logger.warning("Malformed request to %s: %s", request.url.path, exc)
    return error_response(INVALID_REQUEST_FORMAT)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return error_response(INVALID_REQUEST_FORMAT)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        return PlainTextResponse(RESOURCE_NOT_FOUND, status_code=404)
    return error_response(str(exc.detail), status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DosageValidationError, dosage_validation_handler)
    app.add_exception_handler(MalformedRequestError, malformed_request_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
