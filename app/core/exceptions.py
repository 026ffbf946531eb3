"""Application-level exceptions and FastAPI exception handlers."""


import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.schemas.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details or {}
        super().__init__(message)

class NotFoundError(AppException):
    def __init__(self, entity: str, entity_id: int | str | None = None):
        msg = f"{entity} not found" if entity_id is None else f"{entity} '{entity_id}' not found"
        super().__init__(msg, status_code=404, code="NOT_FOUND")

class ForbiddenError(AppException):
    def __init__(self, message: str = "Not allowed"):
        super().__init__(message, status_code=403, code="FORBIDDEN")

class UnauthorizedError(AppException):
    def __init__(self, message: str = "Unauthorised"):
        super().__init__(message, status_code=401, code="UNAUTHENTICATED")

class ValidationError(AppException):
    def __init__(self, errors: list[str], message: str = "Validation failed"):
        super().__init__(
            message, status_code=400, code="VALIDATION_ERROR", details={"errors": errors}
        )

class InvalidIdError(AppException):
    def __init__(self, entity: str = "Job"):
        super().__init__(f"Invalid {entity} ID", status_code=400, code="INVALID_ID")

class InvalidRequestError(AppException):
    def __init__(self, message: str = "Malformed JSON in request body"):
        super().__init__(message, status_code=400, code="INVALID_REQUEST")

# ---------------------------------------------------------------------------
# Request validation translation
# ---------------------------------------------------------------------------

# Pydantic error types that mean "absent, empty or not text"
_REQUIRED_FIELD_ERRORS = {"missing", "string_too_short", "string_type"}


def _format_error(err: dict[str, Any]) -> str:
    loc = [part for part in err.get("loc", ()) if part != "body"]
    if err.get("type") in _REQUIRED_FIELD_ERRORS and loc:
        return f"{loc[-1]} is a required field"
    ctx_error = (err.get("ctx") or {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    if not loc or err.get("type") in ("model_type", "model_attributes_type", "dict_type"):
        return "Request body must be a JSON object"
    return err.get("msg", "Invalid value")


def translate_validation_error(exc: RequestValidationError) -> AppException:
    """Map a FastAPI validation failure onto the API's error codes."""
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        return InvalidRequestError()
    if any(tuple(err.get("loc", ()))[:1] == ("path",) for err in errors):
        return InvalidIdError()
    messages: list[str] = []
    for err in errors:
        msg = _format_error(err)
        if msg not in messages:
            messages.append(msg)
    return ValidationError(messages)

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str, details: dict[str, Any] | None = None) -> dict:
    return ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details or {})
    ).model_dump()

def _error_response(exc: AppException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.code, exc.message, exc.details),
        headers={"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None,
    )

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(translate_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == 404:
            return JSONResponse(
                status_code=404,
                content=_error_body("NOT_FOUND", "Resource not found"),
            )
        if exc.status_code == 405:
            return JSONResponse(
                status_code=405,
                content=_error_body("METHOD_NOT_ALLOWED", "Method not allowed"),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body("HTTP_ERROR", str(exc.detail)),
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        if getattr(request.app.state, "settings", settings).is_production:
            logger.error("Unhandled error: %s", exc)
        else:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
