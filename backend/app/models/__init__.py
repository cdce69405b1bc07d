"""
Database models package.
"""

from app.models.transaction import (
    Transaction,
    TransactionType,
    INCOME_CATEGORIES,
    EXPENSE_CATEGORIES,
)

__all__ = [
    "Transaction",
    "TransactionType",
    "INCOME_CATEGORIES",
    "EXPENSE_CATEGORIES",
]
