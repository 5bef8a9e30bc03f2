"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from vent.domain.error import NotFoundError, ValidationError


def _first_error_message(errors: list[dict]) -> str:
    if not errors:
        return "Invalid request"
    error = errors[0]
    field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


def to_http_exception(error: Exception) -> HTTPException:
    """Map a client-caused error to an HTTPException.

    Only NotFoundError and validation errors are client-caused; callers
    let anything else propagate to the generic 500 handler.
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, PydanticValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_first_error_message(error.errors()),
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


CLIENT_ERRORS = (NotFoundError, ValidationError, PydanticValidationError)


def register_error_handlers(app: FastAPI) -> None:
    """Install the app-wide handlers for malformed bodies and unexpected errors."""

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _first_error_message(list(exc.errors()))},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logfire.exception(
            "Unhandled error", method=request.method, path=request.url.path
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
