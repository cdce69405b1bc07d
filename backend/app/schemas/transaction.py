"""
Transaction schemas.
"""

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime, timezone
from decimal import Decimal

from app.models.transaction import TransactionType


def to_iso(value: datetime) -> str:
    """Render a datetime as ISO-8601 UTC text, e.g. 2024-01-15T00:00:00Z."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat() + "Z"


class TransactionData(BaseModel):
    """Validated create/update payload."""
    type: TransactionType
    amount: Decimal
    category: str
    description: Optional[str] = None
    date: datetime


class TransactionResponse(BaseModel):
    id: str
    type: TransactionType
    amount: Decimal
    category: str
    description: Optional[str]
    date: datetime
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_serializer("amount")
    def serialize_amount(self, amount: Decimal) -> float:
        return float(amount)

    @field_serializer("date", "created_at", "updated_at")
    def serialize_datetime(self, value: datetime) -> str:
        return to_iso(value)


class DeleteResponse(BaseModel):
    success: bool = True
