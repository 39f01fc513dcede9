import logging
import time
from http import HTTPStatus
from typing import Callable, Dict, Sequence, Union

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from .config import Config
from .exceptions import (
    CommonsException,
    UnauthorizedAccessException,
    ValidationException,
)


logger = logging.getLogger(__name__)

_REQUEST_SOURCES = {"body", "query", "path", "header", "cookie"}
_PLAIN_TEXT_ERRORS = (UnauthorizedAccessException, ValidationException)


def _request_id(request: Request) -> str:
    return f"{int(time.time() * 1000)}-{id(request)}"


def _cors_origins(request: Request) -> list[str]:
    config = getattr(request.app.state, "config", None)
    if not isinstance(config, Config):
        return []
    return config.allowed_origins()


async def log_requests(request: Request, call_next: Callable):
    start_time = time.time()
    request_id = _request_id(request)

    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        # Only log slow requests (>1s) or errors
        if process_time > 1.0 or response.status_code >= 400:
            logger.info(f"[{request_id}] {request.method} {request.url.path} - {response.status_code} - {process_time:.2f}s")
        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(f"[{request_id}] {request.method} {request.url.path} - ERROR: {str(e)} - {process_time:.2f}s")
        raise


def error_body(exc: CommonsException) -> list[dict[str, str]]:
    status = HTTPStatus(exc.status_code)
    return [
        {
            "code": str(status.value),
            "detailedMessage": exc.message,
            "message": status.phrase,
        }
    ]


def error_response(exc: CommonsException) -> Response:
    """Translate a typed error into the response sent to the caller.

    Unauthorized and plain validation failures answer with the bare message;
    every other error answers with a one-element list describing it.
    """
    if isinstance(exc, _PLAIN_TEXT_ERRORS):
        return PlainTextResponse(exc.message, status_code=exc.status_code)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc))


def field_path(loc: Sequence[Union[str, int]]) -> str:
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _REQUEST_SOURCES:
        parts = parts[1:]
    path = ""
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


def validation_errors(exc: RequestValidationError) -> Dict[str, str]:
    # First violation reported for a field wins
    errors: Dict[str, str] = {}
    for error in exc.errors():
        # Unparseable JSON reports a byte offset, not a field
        field = "body" if error.get("type") == "json_invalid" else field_path(error.get("loc", ()))
        errors.setdefault(field, error.get("msg", "Invalid value"))
    return errors


async def commons_exception_handler(request: Request, exc: CommonsException):
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {type(exc).__name__}: {exc.message}")
    return error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content=validation_errors(exc))


async def global_exception_handler(request: Request, exc: Exception):
    request_id = _request_id(request)
    logger.error(f"[{request_id}] Unhandled exception in {request.method} {request.url.path}: {str(exc)}", exc_info=exc)

    origin = request.headers.get("origin")
    response = JSONResponse(status_code=500, content={"detail": "Internal server error"})
    if origin and origin in _cors_origins(request):
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, PATCH, DELETE, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "*"

    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CommonsException, commons_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)
