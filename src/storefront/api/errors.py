"""Exception handlers that answer with the storefront response envelope."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.errors import error_message
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Internal server error"


def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return _envelope(404, error_message(exc))


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _envelope(400, error_message(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if not errors:
        return _envelope(400, "Invalid request")

    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    message = first.get("msg", "Invalid request")
    return _envelope(400, f"{field}: {message}" if field else message)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unexpected_api_error", method=request.method, path=request.url.path)
    return _envelope(500, UNEXPECTED_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
