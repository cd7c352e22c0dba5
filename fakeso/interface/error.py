"""Translation of domain and validation errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fakeso.domain.error import (
    DataIntegrityError,
    DomainError,
    InvalidInputError,
    InvalidOrderError,
    InvalidReferenceError,
    NotFoundError,
)


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, (InvalidInputError, InvalidReferenceError)):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc)
    if isinstance(exc, DataIntegrityError) or code >= 500:
        logfire.error("Data integrity error", path=request.url.path, error=str(exc))
        detail = "Internal data integrity error"
    else:
        logfire.warn("Request rejected", path=request.url.path, error=str(exc))
        detail = str(exc)

    body: dict = {"detail": detail}
    if isinstance(exc, InvalidOrderError):
        body["order"] = exc.order
    return JSONResponse(status_code=code, content=body)


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logfire.warn("Request validation failed", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors without the raw input or non-JSON context."""
    return [
        {
            "loc": list(err.get("loc", ())),
            "msg": err.get("msg"),
            "type": err.get("type"),
        }
        for err in exc.errors()
    ]


def register_error_handlers(app: FastAPI) -> None:
    """Translate domain and validation errors to HTTP responses.

    NotFoundError -> 404, invalid input or reference -> 400,
    request validation -> 400, anything else from the domain -> 500.
    """
    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
