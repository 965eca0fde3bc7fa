"""
Domain errors raised by the card service and their HTTP mapping.

Each error carries the HTTP status it maps to together with the
``error`` title and human readable ``message`` returned to clients.
``register_exception_handlers`` installs the handlers that turn these
exceptions (and anything unexpected) into JSON responses.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class CardStoreError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, error: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.error is not None:
            payload["error"] = self.error
        payload["message"] = self.message
        return payload


class MissingFieldError(CardStoreError):
    """Raised when ``suit`` or ``value`` is absent from a card payload."""

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = list(fields)
        super().__init__("Both suit and value are required", error="Missing required fields")


class InvalidEnumError(CardStoreError):
    """Raised when a field holds a value outside its fixed set."""

    def __init__(self, field: str, allowed: Iterable[str]) -> None:
        self.field = field
        self.allowed = list(allowed)
        super().__init__(
            f"{field.capitalize()} must be one of: {', '.join(self.allowed)}",
            error=f"Invalid {field}",
        )


class CardNotFoundError(CardStoreError):
    """Raised when no card has the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, card_id: Union[int, str]) -> None:
        self.card_id = card_id
        super().__init__(f"No card found with ID {card_id}", error="Card not found")


class NoMatchingCardsError(CardStoreError):
    """Raised when a suit or value filter matches nothing.

    Unlike the other errors the response body carries only ``message``.
    """

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, field: str, query: str) -> None:
        self.field = field
        self.query = query
        super().__init__(f"No cards found with {field} {query}")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach JSON error handlers to ``app``."""

    @app.exception_handler(CardStoreError)
    async def card_store_error_handler(request: Request, exc: CardStoreError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        detail = first.get("msg", "Malformed request")
        message = f"{location}: {detail}" if location else detail
        logger.debug("Rejected malformed request %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Bad Request", "message": message},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unknown paths and unsupported methods on known paths share
        # the catch-all response.
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={
                    "error": "Not Found",
                    "message": f"Route {request.method} {request.url.path} not found",
                },
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail), "message": str(exc.detail)},
        )

    # Faults are answered inside the app; nothing reaches the server
    # error middleware.
    @app.middleware("http")
    async def internal_fault_middleware(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal Server Error", "message": "Something went wrong"},
            )
