"""Exception handlers: every error leaves the API as one JSON shape.

    {"error": CODE, "message": str, "details": ..., "request_id": str}

Register with register_exception_handlers(app).
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from inventory.core.config import get_settings
from inventory.domain.exceptions import InventoryException

logger = logging.getLogger(__name__)

DOMAIN_ERROR_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "REFERENCE_VALIDATION_ERROR": 400,
    "RESOURCE_NOT_FOUND": 404,
    "SUPPLIER_HAS_PRODUCTS": 409,
}


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: Any,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = {
        "error": error,
        "message": message,
        "details": details if details is not None else {},
        "request_id": request.scope.get("state", {}).get("request_id"),
    }
    return JSONResponse(
        status_code=status_code, content=jsonable_encoder(body), headers=headers
    )


async def handle_domain_error(request: Request, exc: InventoryException) -> JSONResponse:
    status_code = DOMAIN_ERROR_STATUS.get(exc.error_code, 400)
    logger.info(
        "%s %s -> %d %s", request.method, request.url.path, status_code, exc.error_code
    )
    return _error_response(request, status_code, exc.error_code, exc.message, exc.details)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error_response(
        request, 422, "VALIDATION_ERROR", "Request validation failed", exc.errors()
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(
        request,
        exc.status_code,
        "HTTP_ERROR",
        exc.detail,
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    """500 for anything unhandled; the exception text is only exposed in debug."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(request, 500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InventoryException, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected)
