"""
Translation of service errors into HTTP responses.

This is the only module that knows which status code belongs to which error
kind. Every error body is ``{"message": ...}``; validation errors also name
the offending ``field`` when there is one.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import AppError, ErrorKind, ValidationFailed
from app.core.logging_config import get_logger

logger = get_logger()

INTERNAL_MESSAGE = "Internal server error"

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error: AppError) -> int:
    return STATUS_BY_KIND.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def error_body(error: AppError) -> dict:
    if error.kind == ErrorKind.INTERNAL:
        return {"message": INTERNAL_MESSAGE}

    body = {"message": error.message}
    if isinstance(error, ValidationFailed) and error.field:
        body["field"] = error.field
    return body


def _describe(exc: RequestValidationError) -> ValidationFailed:
    errors = exc.errors()
    if not errors:
        return ValidationFailed("Validation failed")

    first = errors[0]
    # Drop the "body" prefix FastAPI adds to request-body locations
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(loc) or None
    message = f"Validation failed: {field + ': ' if field else ''}{first.get('msg', 'invalid value')}"
    return ValidationFailed(message, field=field)


async def app_error_handler(request: Request, exc: AppError):
    if exc.kind == ErrorKind.INTERNAL:
        logger.opt(exception=exc.__cause__ or exc).error(
            f"INTERNAL ERROR: {request.method} {request.url.path} -> {exc.message} | {exc.context}"
        )
    else:
        logger.info(f"{exc.kind.value.upper()}: {request.method} {request.url.path} -> {exc.message}")

    return JSONResponse(status_code=status_for(exc), content=error_body(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return await app_error_handler(request, _describe(exc))


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"UNHANDLED ERROR: {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_MESSAGE},
    )


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
