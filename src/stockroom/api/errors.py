"""Translate exceptions into the uniform error envelope.

Every error response has the shape
``{"error": {"code": ..., "message": ..., "details": [{"field": ..., "message": ...}]}}``.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from pydantic.alias_generators import to_camel
from starlette.exceptions import HTTPException as StarletteHTTPException

from stockroom.api.schemas import ErrorBody, ErrorDetail, ErrorResponse
from stockroom.exceptions import StockroomError
from stockroom.utils.logging import get_logger

logger = get_logger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
INVALID_REQUEST_MESSAGE = "Invalid request data"

_HTTP_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
}


def error_response(status_code: int, code: str, message: str, details: list[ErrorDetail] | None = None) -> JSONResponse:
    body = ErrorResponse(error=ErrorBody(code=code, message=message, details=details or []))
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _request_field(location: tuple) -> str:
    # Drop the leading "body"/"query"/"path" marker unless nothing named follows it
    parts = location[1:]
    if not any(isinstance(part, str) for part in parts):
        return str(location[0]) if location else "body"
    return ".".join(str(part) for part in parts)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [ErrorDetail(field=_request_field(tuple(error["loc"])), message=error["msg"]) for error in exc.errors()]
    return error_response(400, VALIDATION_ERROR, INVALID_REQUEST_MESSAGE, details)


async def domain_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    details = [
        ErrorDetail(field=to_camel(field), message=str(message))
        for field, messages in exc.messages.items()
        for message in (messages if isinstance(messages, list) else [messages])
    ]
    return error_response(400, VALIDATION_ERROR, INVALID_REQUEST_MESSAGE, details)


async def stockroom_error_handler(request: Request, exc: StockroomError) -> JSONResponse:
    return error_response(exc.status_code, exc.code, exc.message)


async def object_not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return error_response(404, "NOT_FOUND", "Resource not found")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _HTTP_CODES.get(exc.status_code, "INTERNAL_ERROR" if exc.status_code >= 500 else "BAD_REQUEST")
    return error_response(exc.status_code, code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", method=request.method, path=request.url.path, error=str(exc))
    return error_response(500, "INTERNAL_ERROR", "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error translators on `app`."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, domain_validation_handler)
    app.add_exception_handler(StockroomError, stockroom_error_handler)
    app.add_exception_handler(ObjectNotFoundError, object_not_found_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
