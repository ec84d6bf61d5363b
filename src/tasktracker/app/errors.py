"""Application-level exception taxonomy and HTTP mapping."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Mapping

from fastapi import FastAPI, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import DuplicateKeyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from .core.context import REQUEST_ID_HEADER, bound_request_id
from .schemas.system import ErrorResponse

logger = logging.getLogger(__name__)


class ApplicationError(Exception):
    """Base class for domain-specific errors."""

    default_message = "Application error."
    default_code = "application_error"
    default_status = status.HTTP_400_BAD_REQUEST

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status_code: int | None = None,
        details: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        self.code = code or self.default_code
        self.status_code = status_code or self.default_status
        self.details = details
        self.headers = dict(headers) if headers else None


class ValidationError(ApplicationError):
    """Missing or malformed input."""

    default_message = "Validation failed."
    default_code = "validation_error"


class AuthError(ApplicationError):
    """Missing, invalid or expired credentials."""

    default_message = "Unauthorized"
    default_code = "unauthorized"
    default_status = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("headers", {"WWW-Authenticate": "Bearer"})
        super().__init__(message, **kwargs)


class ForbiddenError(ApplicationError):
    """Authenticated, but the role or ownership does not allow the action."""

    default_message = "Forbidden"
    default_code = "forbidden"
    default_status = status.HTTP_403_FORBIDDEN


class NotFoundError(ApplicationError):
    default_message = "Resource not found."
    default_code = "not_found"
    default_status = status.HTTP_404_NOT_FOUND


class InvalidIdError(ApplicationError):
    default_message = "Invalid ID"
    default_code = "invalid_id"


class ConflictError(ApplicationError):
    """A unique field is already taken."""

    default_message = "Resource already exists."
    default_code = "conflict"


class ServerError(ApplicationError):
    default_message = "Internal server error."
    default_code = "server_error"
    default_status = status.HTTP_500_INTERNAL_SERVER_ERROR


_HTTP_STATUS_CODE_MAP: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_401_UNAUTHORIZED: "unauthorized",
    status.HTTP_403_FORBIDDEN: "forbidden",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


def _with_request_id(request: Request, details: Any | None) -> Any | None:
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        return details
    if details is None:
        return {"request_id": request_id}
    if isinstance(details, dict):
        return {"request_id": request_id, **details}
    return {"request_id": request_id, "detail": details}


def _error_response(
    request: Request,
    *,
    status_code: int,
    code: str,
    message: str,
    details: Any | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    payload = ErrorResponse(error=message, code=code, details=_with_request_id(request, details))
    response = JSONResponse(status_code=status_code, content=payload.model_dump(mode="json"))
    if headers:
        response.headers.update(headers)
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
    return response


def _expose_details(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(getattr(settings, "expose_error_details", False))


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the provided FastAPI app."""

    @app.exception_handler(ApplicationError)
    async def _handle_application_error(request: Request, exc: ApplicationError) -> JSONResponse:
        with bound_request_id(getattr(request.state, "request_id", None)):
            log = logger.error if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
            log(
                "Application error encountered",
                extra={"code": exc.code, "status_code": exc.status_code, "path": request.url.path},
            )
            return _error_response(
                request,
                status_code=exc.status_code,
                code=exc.code,
                message=exc.message,
                details=exc.details,
                headers=exc.headers,
            )

    @app.exception_handler(RequestValidationError)
    async def _handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        with bound_request_id(getattr(request.state, "request_id", None)):
            errors = jsonable_encoder(exc.errors())
            logger.warning("Request validation failed", extra={"path": request.url.path})
            return _error_response(
                request,
                status_code=status.HTTP_400_BAD_REQUEST,
                code=ValidationError.default_code,
                message="Request validation failed.",
                details={"errors": errors},
            )

    @app.exception_handler(DuplicateKeyError)
    async def _handle_duplicate_key(request: Request, exc: DuplicateKeyError) -> JSONResponse:
        with bound_request_id(getattr(request.state, "request_id", None)):
            logger.warning("Duplicate key rejected by the store", extra={"path": request.url.path})
            return _error_response(
                request,
                status_code=ConflictError.default_status,
                code=ConflictError.default_code,
                message=ConflictError.default_message,
            )

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        with bound_request_id(getattr(request.state, "request_id", None)):
            code = _HTTP_STATUS_CODE_MAP.get(exc.status_code, "http_error")
            if isinstance(exc.detail, str):
                message, details = exc.detail, None
            else:
                message, details = HTTPStatus(exc.status_code).phrase, exc.detail
            logger.warning(
                "HTTP exception raised",
                extra={"code": code, "status_code": exc.status_code, "path": request.url.path},
            )
            return _error_response(
                request,
                status_code=exc.status_code,
                code=code,
                message=message,
                details=details,
                headers=exc.headers,
            )

    @app.exception_handler(Exception)
    async def _handle_unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
        with bound_request_id(getattr(request.state, "request_id", None)):
            logger.exception("Unhandled application error.")
            message = str(exc) if _expose_details(request) and str(exc) else ServerError.default_message
            return _error_response(
                request,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                code=ServerError.default_code,
                message=message,
            )


__all__ = [
    "ApplicationError",
    "AuthError",
    "ConflictError",
    "ForbiddenError",
    "InvalidIdError",
    "NotFoundError",
    "ServerError",
    "ValidationError",
    "register_exception_handlers",
]
