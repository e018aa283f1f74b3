"""Mapping of domain errors to HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions import (
    EntityNotFoundError,
    PostalError,
    PostcodePoolClosedError,
    TariffNotFoundError,
)
from infrastructure.config import get_logger

logger = get_logger(__name__)

STATUS_CODES = {
    EntityNotFoundError: 404,
    PostcodePoolClosedError: 409,
    TariffNotFoundError: 422,
}


async def postal_error_handler(request: Request, exc: PostalError) -> JSONResponse:
    """Render a domain error as a JSON body."""
    status_code = STATUS_CODES.get(type(exc), 400)
    logger.warning(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={
            "error": type(exc).__name__,
            "message": exc.message,
            "details": exc.details,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PostalError, postal_error_handler)
