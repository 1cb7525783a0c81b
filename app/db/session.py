"""
Database session management.

One engine per process.  Endpoints get a request-scoped session from
:func:`get_db`; the calendar sources get a factory so each concurrent
fetch opens its own session.
"""

from typing import Callable, Generator, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from app.core.config import settings


def create_db_engine(url: Optional[str] = None) -> Engine:
    """Engine for ``url`` (``settings.DATABASE_URL`` by default)."""
    url = url or settings.DATABASE_URL
    if url.startswith("sqlite"):
        return create_engine(url, echo=settings.DEBUG, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        echo=settings.DEBUG,  # Log SQL queries in debug mode
        pool_pre_ping=True,   # Verify connections before using
        pool_size=5,
        max_overflow=10,
    )


engine = create_db_engine()


def get_db() -> Generator[Session, None, None]:
    """Request-scoped session dependency."""
    with Session(engine) as session:
        yield session


def get_session_factory() -> Callable[[], Session]:
    """
    Dependency returning a factory of independent sessions.

    A Session must not be shared between the worker threads the calendar
    sources run their queries in.
    """
    return lambda: Session(engine)
