"""Maps domain exceptions to HTTP error responses.

Registered once on the app so endpoints can let domain errors propagate.
Every response body is ``{"detail": <message>}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.domain.exceptions import (
    AuthenticationRequiredError,
    EntityNotFoundError,
    InvalidInputError,
    UnexpectedResponseFormatError,
    UpstreamApiError,
)

logger = logging.getLogger(__name__)


def upstream_status(status_code: int) -> int:
    """Client errors from the remote API pass through; anything else is a 502."""
    if 400 <= status_code < 500:
        return status_code
    return status.HTTP_502_BAD_GATEWAY


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(EntityNotFoundError)
    async def _not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(AuthenticationRequiredError)
    async def _unauthenticated(
        request: Request, exc: AuthenticationRequiredError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": exc.message}
        )

    @app.exception_handler(UpstreamApiError)
    async def _upstream(request: Request, exc: UpstreamApiError) -> JSONResponse:
        logger.warning(
            "Upstream error on %s %s: %s", request.method, request.url.path, exc
        )
        return JSONResponse(
            status_code=upstream_status(exc.status_code), content={"detail": exc.message}
        )

    @app.exception_handler(UnexpectedResponseFormatError)
    async def _bad_format(
        request: Request, exc: UnexpectedResponseFormatError
    ) -> JSONResponse:
        logger.error("Unexpected response format on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(exc)}
        )

    @app.exception_handler(InvalidInputError)
    async def _invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message}
        )
