"""Maps domain exceptions to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from cmsstore.domain.exceptions import (
    EntityNotFoundError,
    FeatureDisabledError,
    PreconditionError,
    QueryValidationError,
)

# Checked in order; subclasses before their bases.
_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (FeatureDisabledError, status.HTTP_404_NOT_FOUND),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (QueryValidationError, status.HTTP_400_BAD_REQUEST),
    (PreconditionError, status.HTTP_400_BAD_REQUEST),
]


async def _domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return JSONResponse(status_code=status_code, content={"detail": str(exc)})
    raise exc


def register_exception_handlers(app: FastAPI) -> None:
    for error_type, _ in _STATUS_BY_ERROR:
        app.add_exception_handler(error_type, _domain_error_handler)
