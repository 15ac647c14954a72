"""
Domain errors raised by the query layer and the auth module.

Routers let these propagate; the handler registered in ``app.main`` turns them
into JSON error responses shaped like FastAPI's own ``{"detail": ...}``.
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class GarageError(Exception):
    """Base class for errors reported back to the API caller."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    @property
    def headers(self) -> dict[str, str] | None:
        return None


class NotFoundError(GarageError):
    """Row does not exist or is not owned by the acting user."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(GarageError):
    """Write would violate a uniqueness constraint."""

    status_code = status.HTTP_409_CONFLICT


class AuthenticationError(GarageError):
    """Missing, invalid, expired or revoked credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED

    @property
    def headers(self) -> dict[str, str] | None:
        return {"WWW-Authenticate": "Bearer"}


async def garage_error_handler(request: Request, exc: GarageError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GarageError, garage_error_handler)
