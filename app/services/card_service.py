"""
Card service — validation and the list/create/delete use cases.

Create payloads are checked against these rules, in order, stopping at the
first failure:
  1-4. contact number, card account number, account type and initial
       balance are present and non-blank
  5.   the owning user id is present
  6.   contact number is exactly 10-15 digits
  7.   card account number is exactly 10-20 digits
  8.   initial balance parses as a decimal number, and is not negative

A payload that fails any rule never reaches the store. Values are stored as
submitted; the checks do not trim or normalize them.

All functions take a CardRepository, so they run the same against the
SQLAlchemy store or any test double.
"""

import logging
import re
from datetime import datetime, timezone
from decimal import Decimal

from app.exceptions import (
    CardNotFoundError,
    CardPersistenceError,
    CardValidationError,
    InvalidFormatError,
    MissingFieldError,
    NegativeBalanceError,
)
from app.models.card import Card
from app.repositories.card_repository import CardRepository
from app.schemas.card import CardCreateRequest

logger = logging.getLogger(__name__)

CONTACT_NUMBER_PATTERN = re.compile(r"[0-9]{10,15}")
CARD_ACCOUNT_NUMBER_PATTERN = re.compile(r"[0-9]{10,20}")
# Plain ASCII decimal with optional sign and exponent: "100", "-5.00", ".5", "1e3"
BALANCE_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

# (attribute, label used in the "<label> is required" message)
REQUIRED_TEXT_FIELDS = [
    ("contact_number", "Contact number"),
    ("card_account_number", "Card account number"),
    ("account_type", "Account type"),
    ("initial_balance", "Initial balance"),
]


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def parse_balance(value: str) -> Decimal:
    """
    Parse an initial balance string.

    Raises:
        InvalidFormatError: If the value is not a finite decimal number.
        NegativeBalanceError: If the value is below zero.
    """
    # Decimal alone would also take "NaN", "1_000" and non-ASCII digits
    if not BALANCE_PATTERN.fullmatch(value.strip()):
        raise InvalidFormatError("Invalid initial balance format")

    balance = Decimal(value.strip())
    if balance < 0:
        raise NegativeBalanceError()
    return balance


def validate_card_request(payload: CardCreateRequest) -> None:
    """
    Apply the create rules to a payload, raising on the first violation.

    Raises:
        MissingFieldError: A required field is absent or blank.
        InvalidFormatError: A number or the balance is malformed.
        NegativeBalanceError: The balance is below zero.
    """
    for attribute, label in REQUIRED_TEXT_FIELDS:
        if _is_blank(getattr(payload, attribute)):
            raise MissingFieldError(label)

    if payload.user_id is None:
        raise MissingFieldError("User id")

    if not CONTACT_NUMBER_PATTERN.fullmatch(payload.contact_number):
        raise InvalidFormatError(
            "Invalid contact number format. Must be 10-15 digits"
        )

    if not CARD_ACCOUNT_NUMBER_PATTERN.fullmatch(payload.card_account_number):
        raise InvalidFormatError(
            "Invalid card account number format. Must be 10-20 digits"
        )

    parse_balance(payload.initial_balance)


async def list_cards(repo: CardRepository, user_id: int | None) -> list[Card]:
    """
    List the cards owned by a user.

    Without a user id there is nothing to scope the query to, so the result
    is an empty list rather than an error.
    """
    if user_id is None:
        return []
    return await repo.find_by_user(user_id)


async def create_card(repo: CardRepository, payload: CardCreateRequest) -> Card:
    """
    Validate a payload, stamp its creation time, and persist it.

    Returns:
        The stored Card, with id and created_at populated.

    Raises:
        CardValidationError: If any rule fails (the store is not touched).
        CardPersistenceError: If the store fails unexpectedly.
    """
    try:
        validate_card_request(payload)
    except CardValidationError as exc:
        logger.info("Card rejected for user %s: %s", payload.user_id, exc.detail)
        raise

    card = Card(
        user_id=payload.user_id,
        contact_number=payload.contact_number,
        card_account_number=payload.card_account_number,
        account_type=payload.account_type,
        initial_balance=payload.initial_balance,
        created_at=datetime.now(timezone.utc),
    )

    try:
        saved = await repo.save(card)
    except Exception as exc:
        logger.exception("Failed to create card for user %s", payload.user_id)
        raise CardPersistenceError("create", exc) from exc

    logger.info("Created card %s for user %s", saved.id, saved.user_id)
    return saved


async def delete_card(repo: CardRepository, card_id: int) -> None:
    """
    Delete a card by id.

    Raises:
        CardNotFoundError: If no card has this id (the store is not mutated).
        CardPersistenceError: If the store fails unexpectedly.
    """
    try:
        found = await repo.exists_by_id(card_id)
        if found:
            await repo.delete_by_id(card_id)
    except Exception as exc:
        logger.exception("Failed to delete card %s", card_id)
        raise CardPersistenceError("delete", exc) from exc

    if not found:
        logger.info("Delete requested for unknown card %s", card_id)
        raise CardNotFoundError(card_id)

    logger.info("Deleted card %s", card_id)
