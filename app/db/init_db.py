"""
Database initialization.

Creates all calendar tables directly from the SQLModel metadata.  Use
Alembic migrations for any database that already holds data.
"""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

import app.db.base  # noqa: F401
from app.db.session import engine as default_engine


def init_db(engine: Engine | None = None) -> list[str]:
    """
    Create every table registered on ``SQLModel.metadata``.

    Returns:
        Names of the tables known to the metadata
    """
    engine = engine or default_engine
    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    tables = sorted(SQLModel.metadata.tables)
    logger.info(f"Tables ready: {', '.join(tables)}")
    return tables


if __name__ == "__main__":
    init_db()
