"""
API errors and their JSON rendering.

Handlers raise `ApiError` subclasses; the registered exception handler turns
them into `{"message": ...}` responses. Store details never reach the client.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator
from contextlib import contextmanager

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# Anything the store or the network path to it can raise.
STORE_ERRORS: tuple[type[BaseException], ...] = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    TimeoutError,
    asyncio.TimeoutError,
)


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class StoreFailureError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


@contextmanager
def store_failure(message: str) -> Iterator[None]:
    """
    Collapse any store error raised inside the block into `StoreFailureError(message)`.
    """
    try:
        yield
    except STORE_ERRORS as exc:
        logger.exception("Store failure: %s (%s)", message, type(exc).__name__)
        raise StoreFailureError(message) from exc


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})
