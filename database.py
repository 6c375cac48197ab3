# backend/database.py
import logging
from fastapi import Request
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine, SQLModel, Session

logger = logging.getLogger(__name__)

IN_MEMORY_SQLITE_URLS = ("sqlite://", "sqlite:///:memory:")


def build_engine(database_url: str, echo: bool = False):
    """Create the engine for ``database_url``; SQLite gets thread-agnostic connections."""
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in IN_MEMORY_SQLITE_URLS:
            # a single shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)
    return create_engine(database_url, echo=echo, pool_recycle=3600)


def create_db_and_tables(engine):
    """Initializes the database and creates all tables from models package"""
    # Importing models package ensures SQLModel metadata is populated
    import models  # noqa: F401
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ready")


# Dependency to get a database session
def get_session(request: Request):
    """Provides a database session bound to the app's engine."""
    with Session(request.app.state.engine) as session:
        yield session
