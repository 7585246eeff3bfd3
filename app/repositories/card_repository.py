"""
Card store — the persistence abstraction over Card records.

CardRepository declares the four operations the service layer relies on;
SQLAlchemyCardRepository implements them on top of the request-scoped
AsyncSession. Each call flushes on its own so that it is individually atomic
within the request's transaction; no call composes with another.
"""

from abc import ABC, abstractmethod

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.card import Card


class CardRepository(ABC):
    """Store interface for Card records."""

    @abstractmethod
    async def find_by_user(self, user_id: int) -> list[Card]:
        """Return every card owned by user_id (empty list if none)."""

    @abstractmethod
    async def save(self, card: Card) -> Card:
        """Persist a new card and return it with its assigned id."""

    @abstractmethod
    async def exists_by_id(self, card_id: int) -> bool:
        """True iff a card with this id currently exists."""

    @abstractmethod
    async def delete_by_id(self, card_id: int) -> None:
        """Remove the card with this id. Call exists_by_id first."""


class SQLAlchemyCardRepository(CardRepository):
    """Relational CardRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_user(self, user_id: int) -> list[Card]:
        result = await self.db.execute(
            select(Card)
            .where(Card.user_id == user_id)
            .order_by(Card.id)
        )
        return list(result.scalars().all())

    async def save(self, card: Card) -> Card:
        self.db.add(card)
        # flush() issues the INSERT so the autoincrement id is populated
        await self.db.flush()
        return card

    async def exists_by_id(self, card_id: int) -> bool:
        result = await self.db.execute(
            select(exists().where(Card.id == card_id))
        )
        return bool(result.scalar())

    async def delete_by_id(self, card_id: int) -> None:
        await self.db.execute(delete(Card).where(Card.id == card_id))
        await self.db.flush()
