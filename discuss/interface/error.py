"""Interface layer errors and the JSON error envelope.

Every non-2xx response has the same shape:

    {"success": false,
     "error": {"code", "message", "statusCode", "details"},
     "meta": {"timestamp", "path", "method"}}
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from discuss.domain.error import (
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTH_TOKEN_MISSING = "AUTH_TOKEN_MISSING"
    AUTH_TOKEN_INVALID = "AUTH_TOKEN_INVALID"
    AUTH_ACCESS_DENIED = "AUTH_ACCESS_DENIED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    RESOURCE_INVALID_STATE = "RESOURCE_INVALID_STATE"
    SERVER_ERROR = "SERVER_ERROR"
    SERVER_DATABASE_ERROR = "SERVER_DATABASE_ERROR"


# Fallback codes for plain HTTP errors raised by the framework
_STATUS_CODES: dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION_ERROR,
    401: ErrorCode.AUTH_TOKEN_MISSING,
    403: ErrorCode.AUTH_ACCESS_DENIED,
    404: ErrorCode.RESOURCE_NOT_FOUND,
    409: ErrorCode.RESOURCE_INVALID_STATE,
}


class _EnvelopeModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorBody(_EnvelopeModel):
    """Error section of the envelope."""

    code: ErrorCode
    message: str
    status_code: int
    details: dict[str, Any] | None = None


class ErrorMeta(_EnvelopeModel):
    """Request metadata attached to every error."""

    timestamp: datetime
    path: str
    method: str


class ErrorResponse(_EnvelopeModel):
    """Error envelope."""

    success: bool = False
    error: ErrorBody
    meta: ErrorMeta


class InterfaceError(Exception):
    """Base interface error, rendered directly into the envelope."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: ErrorCode = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class AuthenticationError(InterfaceError):
    """Missing or unusable credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code


def build_error_response(
    request: Request,
    status_code: int,
    code: ErrorCode,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Render the error envelope for a request."""
    body = ErrorResponse(
        error=ErrorBody(
            code=code, message=message, status_code=status_code, details=details
        ),
        meta=ErrorMeta(
            timestamp=datetime.now(timezone.utc),
            path=request.url.path,
            method=request.method,
        ),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
    )


def _field_details(fields: dict[str, list[str]]) -> dict[str, Any]:
    return {"fields": fields}


def register_error_handlers(app: FastAPI) -> None:
    """Map domain, framework and store errors to the error envelope."""

    @app.exception_handler(InterfaceError)
    async def interface_error_handler(
        request: Request, exc: InterfaceError
    ) -> JSONResponse:
        logfire.warn(
            "Request rejected",
            code=exc.code.value,
            path=request.url.path,
            method=request.method,
        )
        return build_error_response(
            request, exc.status_code, exc.code, exc.message, exc.details
        )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logfire.warn("Validation failed", field=exc.field, error=exc.message)
        return build_error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            ErrorCode.VALIDATION_ERROR,
            exc.message,
            _field_details({exc.field: [exc.message]}),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        fields: dict[str, list[str]] = {}
        for error in exc.errors():
            loc = [str(part) for part in error.get("loc", ()) if part != "body"]
            name = loc[-1] if loc else "body"
            fields.setdefault(name, []).append(error.get("msg", "Invalid value"))

        logfire.warn("Request validation failed", fields=fields, path=request.url.path)
        return build_error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            ErrorCode.VALIDATION_ERROR,
            "Validation failed",
            _field_details(fields),
        )

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(
        request: Request, exc: NotFoundError
    ) -> JSONResponse:
        logfire.warn(
            "Resource not found", resource=exc.resource, identifier=exc.identifier
        )
        return build_error_response(
            request,
            status.HTTP_404_NOT_FOUND,
            ErrorCode.RESOURCE_NOT_FOUND,
            f"{exc.resource} not found",
        )

    @app.exception_handler(NotAuthorizedError)
    async def not_authorized_error_handler(
        request: Request, exc: NotAuthorizedError
    ) -> JSONResponse:
        logfire.warn(
            "Access denied",
            action=exc.action,
            resource=exc.resource,
            resource_id=exc.resource_id,
            user_id=exc.user_id,
        )
        return build_error_response(
            request,
            status.HTTP_403_FORBIDDEN,
            ErrorCode.AUTH_ACCESS_DENIED,
            f"Not authorized to {exc.action} this {exc.resource}",
        )

    @app.exception_handler(InvalidStateError)
    async def invalid_state_error_handler(
        request: Request, exc: InvalidStateError
    ) -> JSONResponse:
        logfire.warn(
            "Invalid resource state",
            resource=exc.resource,
            resource_id=exc.resource_id,
            reason=exc.reason,
        )
        return build_error_response(
            request,
            status.HTTP_409_CONFLICT,
            ErrorCode.RESOURCE_INVALID_STATE,
            f"Cannot modify {exc.resource}: {exc.reason}",
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        code = _STATUS_CODES.get(exc.status_code, ErrorCode.SERVER_ERROR)
        return build_error_response(request, exc.status_code, code, str(exc.detail))

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        logfire.error(
            "Database error",
            error=str(exc),
            path=request.url.path,
            method=request.method,
            _exc_info=exc,
        )
        return build_error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCode.SERVER_DATABASE_ERROR,
            "A database error occurred",
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logfire.error(
            "Unhandled error",
            error_type=type(exc).__name__,
            error=str(exc),
            path=request.url.path,
            method=request.method,
            _exc_info=exc,
        )
        return build_error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCode.SERVER_ERROR,
            "An unexpected error occurred",
        )
