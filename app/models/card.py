"""
Card model — a card record owned by a user.

Every column is required. The contact number, card account number and
initial balance are stored exactly as submitted, as text; the balance is
validated as a non-negative decimal before it ever reaches this table.

created_at has no column default: the create operation stamps it when the
Card is constructed, and nothing updates it afterwards. Cards are never
modified in place; they are only inserted and deleted.
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.types import TypeDecorator
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware datetime that always reads back in UTC.

    SQLite has no timezone storage, so DateTime(timezone=True) returns naive
    values there. Values are converted to UTC on write and tagged UTC on read.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Card(Base):
    __tablename__ = "cards"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # Owning user. There is no users table in this service, so no foreign key.
    user_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
    )

    # 10-15 digits
    contact_number: Mapped[str] = mapped_column(
        String(15),
        nullable=False,
    )

    # 10-20 digits
    card_account_number: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
    )

    # Free text, e.g. "Savings", "Credit", "DEBIT"
    account_type: Mapped[str] = mapped_column(
        String,
        nullable=False,
    )

    # Decimal string such as "100.00"
    initial_balance: Mapped[str] = mapped_column(
        String,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Card id={self.id} user_id={self.user_id} account_type={self.account_type!r}>"
