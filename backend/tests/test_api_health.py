"""Tests for health and connectivity endpoints."""

from datetime import datetime

from app.database import Base


def test_health_check(client):
    """Health endpoint should report a connected database."""
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["database"] == "connected"
    assert data["transactionCount"] == 0
    assert data["timestamp"].endswith("Z")


def test_health_check_counts_transactions(client, make_transaction):
    """Transaction count should reflect stored rows."""
    make_transaction()
    make_transaction(type="income", amount="10", category="Gift")

    response = client.get("/api/health")
    assert response.json()["transactionCount"] == 2


def test_health_check_database_failure(client, database):
    """A broken database should yield a 500 error body."""
    Base.metadata.drop_all(bind=database.engine)

    response = client.get("/api/health")
    assert response.status_code == 500
    data = response.json()
    assert data["status"] == "error"
    assert "transaction" in data["error"]
    datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))


def test_test_connection(client):
    """Connection probe should answer without touching the database."""
    response = client.get("/api/test-connection")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["message"] == "Connection successful!"
    assert "server" in data


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"
