"""Tests for transaction aggregations."""

from datetime import date, datetime
from decimal import Decimal

from app.models.transaction import Transaction, TransactionType
from app.services.summary_service import (
    calculate_totals,
    calendar_month,
    date_key,
    format_euro,
    monthly_series,
)


def txn(type, amount, when="2024-01-15"):
    return Transaction(
        type=TransactionType(type),
        amount=Decimal(str(amount)),
        category="Other",
        date=datetime.fromisoformat(when),
    )


class TestTotals:
    """Test income/expense/balance totals."""

    def test_totals(self):
        totals = calculate_totals([
            txn("income", 100),
            txn("expense", 40),
            txn("income", 25),
        ])
        assert totals.total_income == Decimal("125")
        assert totals.total_expenses == Decimal("40")
        assert totals.balance == Decimal("85")

    def test_empty(self):
        totals = calculate_totals([])
        assert totals.total_income == 0
        assert totals.total_expenses == 0
        assert totals.balance == 0

    def test_negative_balance(self):
        totals = calculate_totals([txn("income", "10.10"), txn("expense", "20.25")])
        assert totals.balance == Decimal("-10.15")


class TestMonthlySeries:
    """Test month bucketing."""

    def test_same_month_bucket(self):
        buckets = monthly_series([
            txn("income", 10, "2024-01-15"),
            txn("income", 20, "2024-01-20"),
        ])
        assert len(buckets) == 1
        assert buckets[0].month == "2024-01"
        assert buckets[0].income == Decimal("30")
        assert buckets[0].expenses == 0

    def test_sorted_chronologically(self):
        buckets = monthly_series([
            txn("expense", 5, "2024-03-01"),
            txn("income", 7, "2023-12-31"),
            txn("expense", 3, "2024-01-10"),
        ])
        assert [b.month for b in buckets] == ["2023-12", "2024-01", "2024-03"]
        assert buckets[0].income == Decimal("7")
        assert buckets[2].expenses == Decimal("5")

    def test_keeps_last_six_months(self):
        transactions = [txn("income", 1, f"2024-{m:02d}-01") for m in range(1, 10)]
        buckets = monthly_series(transactions)
        assert [b.month for b in buckets] == [
            "2024-04", "2024-05", "2024-06", "2024-07", "2024-08", "2024-09",
        ]

    def test_custom_limit(self):
        transactions = [txn("income", 1, f"2024-{m:02d}-01") for m in range(1, 4)]
        assert [b.month for b in monthly_series(transactions, limit=2)] == ["2024-02", "2024-03"]


class TestCalendarMonth:
    """Test calendar grid construction."""

    def test_padding_aligns_first_weekday(self):
        # 2024-05-01 is a Wednesday, three blanks in a Sunday-first week
        days = calendar_month([], 2024, 5)
        assert [d.date for d in days[:4]] == ["", "", "", "2024-05-01"]
        assert len(days) == 3 + 31

    def test_month_starting_on_sunday(self):
        # 2024-09-01 is a Sunday
        days = calendar_month([], 2024, 9)
        assert days[0].date == "2024-09-01"
        assert len(days) == 30

    def test_leap_february(self):
        days = [d for d in calendar_month([], 2024, 2) if d.date]
        assert days[-1].date == "2024-02-29"

    def test_day_totals(self):
        transactions = [
            txn("income", 100, "2024-05-03"),
            txn("expense", 30, "2024-05-03T18:00:00"),
            txn("expense", 12, "2024-05-10"),
            txn("expense", 99, "2024-06-03"),
        ]
        days = {d.date: d for d in calendar_month(transactions, 2024, 5)}
        assert days["2024-05-03"].total == Decimal("130")
        assert len(days["2024-05-03"].transactions) == 2
        assert days["2024-05-10"].total == Decimal("12")
        assert days["2024-05-04"].total == 0
        assert days["2024-05-04"].transactions == []

    def test_defaults_to_current_month(self):
        today = date.today()
        days = [d for d in calendar_month([]) if d.date]
        assert days[0].date == date(today.year, today.month, 1).isoformat()


class TestHelpers:
    def test_date_key(self):
        assert date_key(datetime(2024, 1, 5, 23, 59)) == "2024-01-05"
        assert date_key("2024-01-05T23:59:00Z") == "2024-01-05"

    def test_format_euro(self):
        assert format_euro(Decimal("1234.5")) == "€1,234.50"
        assert format_euro(0) == "€0.00"
        assert format_euro(Decimal("-85")) == "€-85.00"
