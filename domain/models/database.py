"""
Database configuration and session management.
"""

import logging
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger("dailydiet.database")

# Create SQLAlchemy Base
Base = declarative_base()


class Database:
    """
    Store handle owning the engine and session factory.

    Created by the process entry point, opened at startup and closed at
    shutdown. Request handlers reach it through ``app.state.database``.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self.open()
        return self._engine

    def open(self) -> None:
        """Create the engine and session factory if not already open"""
        if self._engine is not None:
            return

        kwargs = {"echo": self.echo, "future": True}
        if self.url.startswith("sqlite"):
            # Requests are served from a thread pool
            kwargs["connect_args"] = {"check_same_thread": False}
            if self.url in ("sqlite://", "sqlite:///:memory:"):
                # Keep one connection so every session sees the same in-memory db
                kwargs["poolclass"] = StaticPool

        self._engine = create_engine(self.url, **kwargs)
        self._session_factory = sessionmaker(
            bind=self._engine, autoflush=False, expire_on_commit=False, future=True
        )
        logger.info(f"database_opened dialect={self._engine.dialect.name}")

    def init_schema(self) -> None:
        """Initialize database schema"""
        with self.engine.begin() as conn:
            Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")

    def session(self) -> Session:
        if self._session_factory is None:
            self.open()
        return self._session_factory()

    def get_session(self) -> Generator[Session, None, None]:
        """Yield a session and close it afterwards (for dependency injection)"""
        db = self.session()
        try:
            yield db
        finally:
            db.close()

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            logger.info("database_closed")
        self._engine = None
        self._session_factory = None
