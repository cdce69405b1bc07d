"""Request-body validation shared by the create and update endpoints."""

import math
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from app.errors import ValidationError
from app.models.transaction import TransactionType
from app.schemas.transaction import TransactionData

REQUIRED_FIELDS = ("type", "amount", "category", "date")

MISSING_FIELDS = "Missing required fields"
INVALID_TYPE = "Invalid type"
INVALID_AMOUNT = "Invalid amount"
INVALID_DATE = "Invalid date"
INVALID_CATEGORY = "Invalid category"
INVALID_BODY = "Invalid request body"

_CENT = Decimal("0.01")
# Numeric(12, 2) column
MAX_AMOUNT = Decimal("10000000000")
# String(100) column
MAX_CATEGORY_LENGTH = 100


def validate_transaction_payload(body: Any) -> TransactionData:
    """
    Validate a create/update request body.

    Raises ValidationError with a short message on the first failing rule:
    missing fields, then type, then amount, then category length, then date.
    """
    if not isinstance(body, dict):
        raise ValidationError(INVALID_BODY)

    if any(not body.get(field) for field in REQUIRED_FIELDS):
        raise ValidationError(MISSING_FIELDS)

    tx_type = parse_type(body["type"])
    amount = parse_amount(body["amount"])

    category = body["category"]
    if not isinstance(category, str) or not category.strip():
        raise ValidationError(MISSING_FIELDS)
    category = category.strip()
    if len(category) > MAX_CATEGORY_LENGTH:
        raise ValidationError(INVALID_CATEGORY)

    description = body.get("description") or None
    if description is not None and not isinstance(description, str):
        description = str(description)

    return TransactionData(
        type=tx_type,
        amount=amount,
        category=category,
        description=description,
        date=parse_date(body["date"]),
    )


def parse_type(value: Any) -> TransactionType:
    if value not in (TransactionType.income.value, TransactionType.expense.value):
        raise ValidationError(INVALID_TYPE)
    return TransactionType(value)


def parse_amount(value: Any) -> Decimal:
    """Coerce an amount given as a number or numeric text to a positive Decimal."""
    if isinstance(value, bool):
        raise ValidationError(INVALID_AMOUNT)

    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise ValidationError(INVALID_AMOUNT)
        value = repr(value)

    if isinstance(value, (int, str, Decimal)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValidationError(INVALID_AMOUNT)
    else:
        raise ValidationError(INVALID_AMOUNT)

    if not amount.is_finite() or amount <= 0 or amount >= MAX_AMOUNT:
        raise ValidationError(INVALID_AMOUNT)

    amount = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
    if amount <= 0 or amount >= MAX_AMOUNT:
        # Rounding can reach zero cents or carry past the column range
        raise ValidationError(INVALID_AMOUNT)
    return amount


def parse_date(value: Any) -> datetime:
    """
    Parse YYYY-MM-DD or an ISO-8601 timestamp into a naive UTC datetime.
    """
    if not isinstance(value, str):
        raise ValidationError(INVALID_DATE)

    text = value.strip()
    parsed: Optional[datetime] = None

    if len(text) == 10:
        try:
            d = date.fromisoformat(text)
            parsed = datetime(d.year, d.month, d.day)
        except ValueError:
            parsed = None
    else:
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            parsed = None

    if parsed is None:
        raise ValidationError(INVALID_DATE)

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
