from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger("expense_log.errors")

GENERIC_SERVER_ERROR = "An unexpected error occurred."


class ExpenseLogError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ExpenseLogError):
    """Client supplied an invalid or incomplete payload."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ExpenseLogError):
    """Referenced expense does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreError(ExpenseLogError):
    """Persistence layer failure (connectivity, constraint violation)."""


def error_body(message: str) -> dict:
    return {"error": {"message": message}}


def expense_error_handler(request: Request, exc: ExpenseLogError):  # type: ignore
    logger.info("%s: %s", type(exc).__name__, exc.message)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


def store_error_handler(request: Request, exc: StoreError):  # type: ignore
    logger.error("store error: %s", exc.message, exc_info=exc)
    return JSONResponse(
        status_code=exc.status_code, content=error_body(GENERIC_SERVER_ERROR)
    )


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = f"No route for {request.method} {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message),
        headers=getattr(exc, "headers", None),
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(describe_request_errors(exc.errors())),
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(GENERIC_SERVER_ERROR),
    )


def describe_request_errors(errors) -> str:
    """Turn FastAPI's request validation errors into a single message.

    ``loc`` is ``("body", "amount")`` for a bad field, ``("body",)`` when the
    whole body has the wrong shape and ``("path", "expense_id")`` for a bad
    path parameter.
    """
    for err in errors:
        if err.get("type") == "json_invalid":
            return "Malformed JSON body"
        loc = [str(part) for part in err.get("loc", ())]
        if not loc:
            continue
        where, names = loc[0], loc[1:]
        if names:
            return f"Invalid '{names[0]}' in request {where}"
        if where == "body":
            return "Request body must be a JSON object"
    return "Malformed request"
