"""Translate service errors into JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from savefarm.domain.errors import SaveFarmError

_logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach handlers that render every failure as ``{"error": message}``."""

    @app.exception_handler(SaveFarmError)
    async def handle_savefarm_error(
        request: Request, exc: SaveFarmError
    ) -> JSONResponse:
        if exc.status_code >= 500:
            _logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400, content={"error": _describe_validation(exc)}
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        _logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def _describe_validation(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"Invalid request: {location} {message}".strip() if location else message
