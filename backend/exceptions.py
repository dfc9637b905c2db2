# backend/exceptions.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# Raised when a uniqueness rule would be broken (category name, product name+brand, user email)
class EntityExistsError(Exception):
    def __init__(self, message: str = "Entity already exists"):
        super().__init__(message)
        self.message = message


# Raised when a referenced id does not resolve to a stored row
class EntityNotFoundError(Exception):
    def __init__(self, message: str = "Entity not found"):
        super().__init__(message)
        self.message = message


def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, "data": None})


async def entity_exists_handler(request: Request, exc: EntityExistsError):
    return _envelope(status.HTTP_409_CONFLICT, exc.message)


async def entity_not_found_handler(request: Request, exc: EntityNotFoundError):
    return _envelope(status.HTTP_404_NOT_FOUND, exc.message)


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Error: {exc}")


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain errors to 409/404 and everything else to 500, in the {message, data} envelope."""
    app.add_exception_handler(EntityExistsError, entity_exists_handler)
    app.add_exception_handler(EntityNotFoundError, entity_not_found_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
