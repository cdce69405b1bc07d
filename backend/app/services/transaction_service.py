"""Persistence operations for transactions."""

import logging
from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import PersistenceError, transaction_not_found
from app.models.transaction import Transaction, utcnow
from app.schemas.transaction import TransactionData

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(db: Session, message: str) -> Iterator[None]:
    """Roll back and re-raise storage failures as PersistenceError."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("%s: %s", message, e)
        raise PersistenceError(message, details=str(e)) from e


def count_transactions(db: Session) -> int:
    with _storage_errors(db, "Failed to count transactions"):
        return db.scalar(select(func.count()).select_from(Transaction))


def list_transactions(db: Session) -> List[Transaction]:
    """All transactions, most recent date first."""
    with _storage_errors(db, "Failed to fetch transactions"):
        query = select(Transaction).order_by(
            Transaction.date.desc(),
            Transaction.created_at.desc(),
        )
        return list(db.scalars(query).all())


def get_transaction(db: Session, transaction_id: str) -> Transaction:
    with _storage_errors(db, "Failed to fetch transaction"):
        transaction = db.get(Transaction, transaction_id)
    if transaction is None:
        raise transaction_not_found(transaction_id)
    return transaction


def create_transaction(db: Session, data: TransactionData) -> Transaction:
    with _storage_errors(db, "Failed to create transaction"):
        transaction = Transaction(**data.model_dump())
        db.add(transaction)
        db.commit()
        db.refresh(transaction)
    logger.info("Created transaction %s", transaction.id)
    return transaction


def update_transaction(db: Session, transaction_id: str, data: TransactionData) -> Transaction:
    """Replace every editable field of an existing transaction."""
    transaction = get_transaction(db, transaction_id)

    with _storage_errors(db, "Failed to update transaction"):
        for field, value in data.model_dump().items():
            setattr(transaction, field, value)
        transaction.updated_at = utcnow()
        db.commit()
        db.refresh(transaction)
    logger.info("Updated transaction %s", transaction.id)
    return transaction


def delete_transaction(db: Session, transaction_id: str) -> None:
    transaction = get_transaction(db, transaction_id)

    with _storage_errors(db, "Failed to delete transaction"):
        db.delete(transaction)
        db.commit()
    logger.info("Deleted transaction %s", transaction_id)
