"""
Custom exception classes and FastAPI exception handlers.

The service layer raises these domain errors without importing any HTTP
concepts; the handlers registered here translate them into responses with
a consistent JSON body: {"message": "error message"}.

Exception hierarchy:
    CardAPIError (base)
    ├── CardValidationError         — rejected before reaching the store (400)
    │   ├── MissingFieldError       — required field absent or blank
    │   ├── InvalidFormatError      — pattern mismatch or non-numeric balance
    │   └── NegativeBalanceError    — balance parses but is below zero
    ├── CardNotFoundError           — delete of an unknown id (404)
    └── CardPersistenceError        — unexpected store failure (500)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class CardAPIError(Exception):
    """Base exception for all Card API domain errors."""

    status_code = 400

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(self.detail)


# ---------------------------------------------------------------------------
# Validation errors (client errors, never reach the store)
# ---------------------------------------------------------------------------

class CardValidationError(CardAPIError):
    """Base for every rule a create payload can violate."""


class MissingFieldError(CardValidationError):
    """Raised when a required field is absent or blank."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"{label} is required")


class InvalidFormatError(CardValidationError):
    """Raised when a field does not match its expected format."""


class NegativeBalanceError(CardValidationError):
    """Raised when the initial balance parses but is less than zero."""

    def __init__(self):
        super().__init__("Initial balance must be a non-negative number")


# ---------------------------------------------------------------------------
# Lookup and infrastructure errors
# ---------------------------------------------------------------------------

class CardNotFoundError(CardAPIError):
    """Raised when a card with the requested id does not exist."""

    status_code = 404

    def __init__(self, card_id: int):
        self.card_id = card_id
        super().__init__("Card not found")


class CardPersistenceError(CardAPIError):
    """
    Raised when the store fails unexpectedly.

    The message embeds the underlying failure, e.g.
    "Failed to create card: (sqlite3.OperationalError) database is locked".
    """

    status_code = 500

    def __init__(self, action: str, cause: Exception):
        self.action = action
        self.cause = cause
        super().__init__(f"Failed to {action} card: {cause}")


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register custom exception handlers with the FastAPI application.

    Called once during app setup in main.py.
    """

    @app.exception_handler(CardAPIError)
    async def card_api_error_handler(
        request: Request, exc: CardAPIError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Malformed body, path or query values are client errors like any
        # other validation failure, not FastAPI's default 422.
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            detail = f"{location}: {first.get('msg', 'invalid value')}"
        else:
            detail = "malformed request"
        logger.info("Rejected malformed request to %s: %s", request.url.path, detail)
        return JSONResponse(
            status_code=400,
            content={"message": f"Invalid request: {detail}"},
        )
