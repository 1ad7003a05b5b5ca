"""PostgreSQL connection and session management."""

from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker


class Database:
    """
    Process-wide engine and session factory.

    Built once by the app factory (or injected by tests), stored on
    ``app.state.database`` and disposed on shutdown.
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs: Any) -> None:
        self.engine = create_engine(url, echo=echo, **engine_kwargs)
        self.session_factory = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )

    @classmethod
    def from_settings(cls, settings) -> "Database":
        return cls(settings.DATABASE_URL, echo=settings.DEBUG, pool_pre_ping=True)

    def session(self) -> Generator[Session, None, None]:
        """Yield a session and close it when done."""
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a DB session from the app's Database and closes it when done."""
    database: Database = request.app.state.database
    yield from database.session()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
