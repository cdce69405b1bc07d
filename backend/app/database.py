"""
Database engine and session management.
"""

import logging
from pathlib import Path
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


class Database:
    """
    Storage client owning the SQLAlchemy engine.

    Nothing connects until open() is called; close() disposes the engine.
    One instance is created per process by the application lifespan and
    handed to request handlers through the get_db dependency.
    """

    def __init__(self, url: str, echo: bool = False, create_tables: bool = True):
        self.url = url
        self.echo = echo
        self.create_tables = create_tables
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database is not open")
        return self._engine

    def open(self) -> "Database":
        if self._engine is not None:
            return self

        kwargs = {"echo": self.echo}
        if self.url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if _is_memory_sqlite(self.url):
                # Every connection must see the same in-memory database
                kwargs["poolclass"] = StaticPool
            else:
                _ensure_sqlite_directory(self.url)

        self._engine = create_engine(self.url, **kwargs)
        self._session_factory = sessionmaker(
            bind=self._engine, autocommit=False, autoflush=False
        )

        if self.create_tables:
            # Register models on the metadata before creating tables
            import app.models  # noqa: F401
            Base.metadata.create_all(bind=self._engine)

        logger.info("Database opened: %s", self._engine.url.render_as_string(hide_password=True))
        return self

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database closed")

    def session(self) -> Session:
        if self._session_factory is None:
            raise RuntimeError("Database is not open")
        return self._session_factory()

    def session_scope(self) -> Generator[Session, None, None]:
        """Yield a session that is always closed afterwards."""
        db = self.session()
        try:
            yield db
        finally:
            db.close()

    def __enter__(self) -> "Database":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _ensure_sqlite_directory(url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    prefix = "sqlite:///"
    if not url.startswith(prefix):
        return
    path = Path(url[len(prefix):])
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
