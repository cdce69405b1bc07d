"""
Category API endpoints.
"""

from fastapi import APIRouter

from app.models.transaction import INCOME_CATEGORIES, EXPENSE_CATEGORIES

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("")
def list_categories():
    """Suggested categories per transaction type."""
    return {
        "income": INCOME_CATEGORIES,
        "expense": EXPENSE_CATEGORIES,
    }
