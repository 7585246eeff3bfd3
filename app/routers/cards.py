"""
Cards router — list, create and delete card records.

Endpoints (mounted under settings.API_PREFIX, "/api" by default):
  GET    /cards?userId=  — List a user's cards ([] when userId is omitted)
  POST   /cards          — Create a card
  DELETE /cards/{id}     — Delete a card

Validation, not-found and store failures are raised by card_service as
domain exceptions and turned into {"message": ...} responses by the
handlers in app.exceptions.
"""

from fastapi import APIRouter, Depends, Path, Query, status

from app.dependencies import get_card_repository
from app.repositories.card_repository import CardRepository
from app.schemas.card import MAX_ID, MIN_ID, CardCreateRequest, CardResponse, MessageResponse
from app.services import card_service

router = APIRouter()


@router.get(
    "",
    response_model=list[CardResponse],
    summary="List a user's cards",
)
async def list_cards(
    user_id: int | None = Query(default=None, alias="userId", ge=MIN_ID, le=MAX_ID),
    repo: CardRepository = Depends(get_card_repository),
):
    """
    Return every card owned by `userId`.

    Omitting `userId` returns an empty list with 200, not an error.
    """
    return await card_service.list_cards(repo, user_id)


@router.post(
    "",
    response_model=CardResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a card",
    responses={
        400: {"model": MessageResponse, "description": "Validation failed"},
        500: {"model": MessageResponse, "description": "Store failure"},
    },
)
async def create_card(
    payload: CardCreateRequest,
    repo: CardRepository = Depends(get_card_repository),
):
    """
    Create a card for a user.

    - Contact number: 10-15 digits
    - Card account number: 10-20 digits
    - Account type: any non-blank text
    - Initial balance: decimal string, zero or more
    """
    return await card_service.create_card(repo, payload)


@router.delete(
    "/{card_id}",
    response_model=MessageResponse,
    summary="Delete a card",
    responses={
        404: {"model": MessageResponse, "description": "Card not found"},
        500: {"model": MessageResponse, "description": "Store failure"},
    },
)
async def delete_card(
    card_id: int = Path(ge=MIN_ID, le=MAX_ID),
    repo: CardRepository = Depends(get_card_repository),
):
    """Delete a card by id."""
    await card_service.delete_card(repo, card_id)
    return MessageResponse(message="Card deleted successfully")
