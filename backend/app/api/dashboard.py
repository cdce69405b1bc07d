"""
Dashboard API endpoints.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from datetime import date
from typing import Optional

from app.dependencies import get_db
from app.errors import ValidationError
from app.schemas.dashboard import (
    CalendarDayResponse,
    CalendarResponse,
    DashboardSummary,
    FormattedTotals,
    MonthTrend,
)
from app.schemas.transaction import TransactionResponse
from app.services import summary_service, transaction_service

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def parse_month(month: Optional[str]) -> tuple:
    """Split a YYYY-MM string, defaulting to the current month."""
    if not month:
        today = date.today()
        return today.year, today.month
    try:
        year, m = map(int, month.split('-'))
        date(year, m, 1)
    except ValueError:
        raise ValidationError("Invalid month")
    return year, m


@router.get("/summary", response_model=DashboardSummary)
def get_dashboard_summary(db: Session = Depends(get_db)):
    """
    Totals over every transaction.
    Returns: totalIncome, totalExpenses, balance and their display strings
    """
    totals = summary_service.calculate_totals(transaction_service.list_transactions(db))

    return DashboardSummary(
        total_income=float(totals.total_income),
        total_expenses=float(totals.total_expenses),
        balance=float(totals.balance),
        formatted=FormattedTotals(
            total_income=summary_service.format_euro(totals.total_income),
            total_expenses=summary_service.format_euro(totals.total_expenses),
            balance=summary_service.format_euro(totals.balance),
        ),
    )


@router.get("/monthly", response_model=list[MonthTrend])
def get_monthly_series(
    limit: int = Query(6, ge=1, le=24),
    db: Session = Depends(get_db)
):
    """
    Income and expenses per month for charting, oldest first.
    Returns: [{month, income, expenses}, ...]
    """
    buckets = summary_service.monthly_series(transaction_service.list_transactions(db), limit=limit)
    return [
        MonthTrend(month=b.month, income=float(b.income), expenses=float(b.expenses))
        for b in buckets
    ]


@router.get("/calendar", response_model=CalendarResponse)
def get_calendar(
    month: Optional[str] = Query(None, description="YYYY-MM format"),
    db: Session = Depends(get_db)
):
    """Calendar grid for a month with per-day totals and transactions"""
    year, m = parse_month(month)
    days = summary_service.calendar_month(transaction_service.list_transactions(db), year, m)

    return CalendarResponse(
        month=f"{year:04d}-{m:02d}",
        days=[
            CalendarDayResponse(
                date=d.date,
                total=float(d.total),
                transactions=[TransactionResponse.model_validate(t) for t in d.transactions],
            )
            for d in days
        ],
    )
