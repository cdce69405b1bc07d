"""
Dashboard schemas.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List

from app.schemas.transaction import TransactionResponse


class CamelModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FormattedTotals(CamelModel):
    total_income: str
    total_expenses: str
    balance: str


class DashboardSummary(CamelModel):
    total_income: float
    total_expenses: float
    balance: float
    formatted: FormattedTotals


class MonthTrend(CamelModel):
    month: str
    income: float
    expenses: float


class CalendarDayResponse(CamelModel):
    date: str
    total: float
    transactions: List[TransactionResponse]


class CalendarResponse(CamelModel):
    month: str
    days: List[CalendarDayResponse]
