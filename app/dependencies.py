"""
FastAPI dependencies shared by the routers.

  get_db (AsyncSession)
      └── get_card_repository (AsyncSession -> CardRepository)

Tests swap the store by overriding get_db (fresh in-memory database) or
get_card_repository (a failing double for the 500 paths).
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.repositories.card_repository import CardRepository, SQLAlchemyCardRepository


async def get_card_repository(
    db: AsyncSession = Depends(get_db),
) -> CardRepository:
    """Provide the card store bound to this request's session."""
    return SQLAlchemyCardRepository(db)
