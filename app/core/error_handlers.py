"""Handlers globales de errores de la API.

Toda falla se responde con el mismo formato (``ApiErrorResponse``) y se
registra con el id de la petición para poder correlacionarla en los logs.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config.settings import settings
from app.core.exceptions import AcademicoException
from app.schemas.error import ApiErrorResponse, ErrorDetails

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_ID_HEADER = "X-Correlation-ID"

_HTTP_ERRORS = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    409: "Conflict",
    422: "Unprocessable Entity",
    429: "Too Many Requests",
}


def get_request_id(request: Request) -> str:
    return (
        request.headers.get(REQUEST_ID_HEADER)
        or request.headers.get(CORRELATION_ID_HEADER)
        or str(uuid.uuid4())
    )


def build_error_response(
    request: Request,
    status_code: int,
    error: str,
    message: Union[str, List[str]],
    exc: Optional[BaseException] = None,
    body_keys: Optional[List[str]] = None,
) -> JSONResponse:
    request_id = get_request_id(request)
    text = "; ".join(message) if isinstance(message, list) else message

    logger.error(
        "[%s] %s %s -> %s :: %s",
        request_id,
        request.method,
        request.url.path,
        status_code,
        text,
        exc_info=exc if (exc is not None and not settings.is_production) else None,
    )

    payload = ApiErrorResponse(
        timestamp=datetime.now(timezone.utc).isoformat(),
        path=str(request.url.path),
        status_code=status_code,
        error=error,
        message=message,
        request_id=request_id,
        details=(
            None
            if settings.is_production
            else ErrorDetails(
                method=request.method,
                body_keys=body_keys or [],
                header_keys=list(request.headers.keys()),
            )
        ),
    )
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(exclude_none=True),
        headers={REQUEST_ID_HEADER: request_id},
    )


async def academico_exception_handler(request: Request, exc: AcademicoException):
    trace = exc if exc.status_code >= 500 else None
    return build_error_response(request, exc.status_code, exc.error, exc.message, trace)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, (str, list)) else str(exc.detail)
    return build_error_response(
        request,
        exc.status_code,
        _HTTP_ERRORS.get(exc.status_code, "Error"),
        message,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg"))
    body_keys = list(exc.body.keys()) if isinstance(exc.body, dict) else []
    return build_error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Bad Request",
        messages,
        body_keys=body_keys,
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    message = "Internal server error" if settings.is_production else str(exc)
    return build_error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error" if settings.is_production else type(exc).__name__,
        message,
        exc,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AcademicoException, academico_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
