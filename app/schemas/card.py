"""
Pydantic schemas for Card endpoints.

JSON field names are camelCase (userId, contactNumber, ...) to match the
web client; Python attribute names stay snake_case. Both spellings are
accepted on input.

CardCreateRequest leaves every field optional on purpose: a missing field is
reported by the ordered rules in card_service with a readable message, not
by the framework's schema validation.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Ids are signed 64-bit integers in the database
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class CardCreateRequest(BaseModel):
    """Request body for POST /cards."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    user_id: int | None = Field(default=None, ge=MIN_ID, le=MAX_ID)
    contact_number: str | None = None
    card_account_number: str | None = None
    account_type: str | None = None
    initial_balance: str | None = None


class CardResponse(BaseModel):
    """Public representation of a card. Mirrors every column of the model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )

    id: int
    user_id: int
    contact_number: str
    card_account_number: str
    account_type: str
    initial_balance: str
    created_at: datetime


class MessageResponse(BaseModel):
    """Body of delete confirmations and of every error response."""
    message: str
