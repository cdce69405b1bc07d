"""
Pydantic schemas package.
"""

from app.schemas.transaction import (
    TransactionData,
    TransactionResponse,
    DeleteResponse,
    to_iso,
)
from app.schemas.dashboard import (
    DashboardSummary,
    FormattedTotals,
    MonthTrend,
    CalendarDayResponse,
    CalendarResponse,
)

__all__ = [
    "TransactionData",
    "TransactionResponse",
    "DeleteResponse",
    "to_iso",
    "DashboardSummary",
    "FormattedTotals",
    "MonthTrend",
    "CalendarDayResponse",
    "CalendarResponse",
]
