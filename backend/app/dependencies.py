"""
FastAPI dependencies.
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session
from app.database import Database


def get_database(request: Request) -> Database:
    """The storage client opened by the application lifespan."""
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    yield from get_database(request).session_scope()
