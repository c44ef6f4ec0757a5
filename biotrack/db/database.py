"""
Database engine, session factory and FastAPI session dependency.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from biotrack.config import settings

logger = logging.getLogger(__name__)

DATABASE_URL = settings.database_url

if DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        echo=settings.sql_echo,
    )
else:
    engine = create_engine(DATABASE_URL, pool_pre_ping=True, echo=settings.sql_echo)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Yield a request-scoped database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """Create all tables registered on Base.metadata."""
    # Register models with Base.metadata
    from biotrack import models  # noqa: F401

    logger.info("[DB] Creating tables if missing")
    Base.metadata.create_all(bind=engine)
