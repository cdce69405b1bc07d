"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient
from datetime import datetime
from decimal import Decimal

from app.database import Database
from app.main import create_app
from app.models.transaction import Transaction, TransactionType


@pytest.fixture(scope="function")
def database():
    """Fresh in-memory SQLite database for each test."""
    db = Database("sqlite://")
    db.open()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def db_session(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(database):
    """Test client for an app bound to the test database."""
    app = create_app(database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_transaction(database):
    """Insert a transaction directly and return it detached from its session."""
    def _make(
        type=TransactionType.expense,
        amount="50.00",
        category="Food",
        description=None,
        date=datetime(2024, 1, 15),
    ):
        session = database.session()
        try:
            txn = Transaction(
                type=type,
                amount=Decimal(amount),
                category=category,
                description=description,
                date=date,
            )
            session.add(txn)
            session.commit()
            session.refresh(txn)
            session.expunge(txn)
            return txn
        finally:
            session.close()

    return _make


@pytest.fixture
def sample_transaction(make_transaction):
    """Create a sample expense."""
    return make_transaction(description="Weekly groceries")


@pytest.fixture
def valid_payload():
    return {
        "type": "income",
        "amount": 1250.5,
        "category": "Salary",
        "description": "January salary",
        "date": "2024-01-31",
    }
