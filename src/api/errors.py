"""
Map lifecycle failures to HTTP responses.

Each failure keeps its own ``error`` code in the body so clients can
tell, e.g., a missing editor from an illegal transition even though both
are 400s. Unrecognised exceptions are left to FastAPI's 500 handling.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.adapters.sqlite.repos import ConcurrentUpdateError
from src.api.schemas import ErrorResponse
from src.domain.errors import (
    AuthorNotFoundError,
    GatewayUnavailableError,
    InvalidPublicationError,
    InvalidTransitionError,
    PublicationError,
    PublicationNotFoundError,
    TransitionRuleError,
)

logger = logging.getLogger(__name__)

# Checked in order; first isinstance match wins.
STATUS_BY_ERROR: list[tuple[type[PublicationError], int]] = [
    (PublicationNotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthorNotFoundError, status.HTTP_404_NOT_FOUND),
    (GatewayUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (InvalidTransitionError, status.HTTP_400_BAD_REQUEST),
    (TransitionRuleError, status.HTTP_400_BAD_REQUEST),
    (InvalidPublicationError, 422),
]


def status_for(exc: PublicationError) -> int:
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


def _body(code: str, message: str) -> dict[str, str]:
    return ErrorResponse(error=code, message=message).model_dump()


async def publication_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, PublicationError)
    http_status = status_for(exc)
    if http_status >= 500:
        logger.error("Author registry error on %s %s: %s", request.method, request.url.path, exc)
    else:
        logger.warning("%s on %s %s: %s", exc.code, request.method, request.url.path, exc)
    return JSONResponse(status_code=http_status, content=_body(exc.code, str(exc)))


async def concurrent_update_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("Concurrent update on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=_body("concurrent_update", str(exc)),
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PublicationError, publication_error_handler)
    app.add_exception_handler(ConcurrentUpdateError, concurrent_update_handler)
