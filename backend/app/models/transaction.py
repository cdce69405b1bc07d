"""
Transaction database model.
"""

import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Enum, Numeric, Text, Index
from app.database import Base


class TransactionType(str, enum.Enum):
    income = "income"
    expense = "expense"


# Suggested categories offered by the UI; the server accepts any non-empty string
INCOME_CATEGORIES = ["Salary", "Freelance", "Investment", "Gift", "Other"]
EXPENSE_CATEGORIES = [
    "Food",
    "Transportation",
    "Housing",
    "Utilities",
    "Entertainment",
    "Shopping",
    "Healthcare",
    "Education",
    "Other",
]


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the way timestamps are stored."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Transaction(Base):
    """Income or expense record."""

    __tablename__ = "transaction"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    type = Column(
        Enum(TransactionType, native_enum=False, length=16, validate_strings=True),
        nullable=False,
    )
    amount = Column(Numeric(12, 2), nullable=False)  # Always positive, sign comes from type
    category = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    __table_args__ = (
        Index("idx_transaction_date", "date"),
    )

    def __repr__(self) -> str:
        return f"<Transaction {self.id} {self.type} {self.amount} {self.date}>"
