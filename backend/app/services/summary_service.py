"""
Aggregations over an already-fetched transaction list.

Everything here is pure: the functions take any objects exposing
``type``, ``amount`` and ``date`` (ORM rows or response schemas) and never
touch the database.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence

from app.models.transaction import TransactionType


@dataclass
class Totals:
    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal


@dataclass
class MonthBucket:
    month: str  # YYYY-MM
    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")


@dataclass
class CalendarDay:
    date: str  # YYYY-MM-DD, empty for padding cells
    total: Decimal = Decimal("0")
    transactions: list = field(default_factory=list)


def _type_of(transaction) -> str:
    value = transaction.type
    return value.value if isinstance(value, TransactionType) else value


def _amount_of(transaction) -> Decimal:
    return Decimal(str(transaction.amount))


def date_key(value) -> str:
    """YYYY-MM-DD portion of a date, datetime or ISO string."""
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m-%d")
    return str(value).split("T")[0]


def calculate_totals(transactions: Iterable) -> Totals:
    total_income = Decimal("0")
    total_expenses = Decimal("0")
    for t in transactions:
        if _type_of(t) == TransactionType.income.value:
            total_income += _amount_of(t)
        elif _type_of(t) == TransactionType.expense.value:
            total_expenses += _amount_of(t)

    return Totals(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
    )


def monthly_series(transactions: Iterable, limit: int = 6) -> List[MonthBucket]:
    """
    Income and expenses per YYYY-MM bucket, oldest first.

    Only the last ``limit`` buckets are returned.
    """
    buckets = {}
    for t in transactions:
        month = date_key(t.date)[:7]
        bucket = buckets.setdefault(month, MonthBucket(month=month))
        if _type_of(t) == TransactionType.income.value:
            bucket.income += _amount_of(t)
        else:
            bucket.expenses += _amount_of(t)

    ordered = [buckets[month] for month in sorted(buckets)]
    if limit <= 0:
        return []
    return ordered[-limit:]


def calendar_month(
    transactions: Sequence,
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> List[CalendarDay]:
    """
    Calendar grid cells for one month (the current month by default).

    Blank cells come first so that day 1 sits under its weekday in a
    Sunday-first week.
    """
    if year is None or month is None:
        today = date.today()
        year, month = today.year, today.month

    by_day = {}
    for t in transactions:
        by_day.setdefault(date_key(t.date), []).append(t)

    first_weekday = (date(year, month, 1).weekday() + 1) % 7  # Sunday = 0
    days = [CalendarDay(date="") for _ in range(first_weekday)]

    for day in range(1, calendar.monthrange(year, month)[1] + 1):
        key = date(year, month, day).isoformat()
        day_transactions = by_day.get(key, [])
        days.append(CalendarDay(
            date=key,
            total=sum((_amount_of(t) for t in day_transactions), Decimal("0")),
            transactions=day_transactions,
        ))

    return days


def format_euro(amount) -> str:
    """Display formatting used by the dashboard, e.g. €1,234.50 or €-85.00."""
    return f"€{Decimal(str(amount)):,.2f}"
