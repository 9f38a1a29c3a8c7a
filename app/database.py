"""Database Configuration and Connection Management Module

This module handles database connectivity, session management, and table operations
for the feedback attempt log. Engines and session factories are built explicitly from
the configured URL and owned by the application lifespan; nothing is created at import.

Dependencies:
- sqlalchemy: For database ORM and connection management.
- loguru: For logging operations.
- app.models.feedback_models: For database model definitions.

Author: @kcaparas1630
"""

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from loguru import logger
from app.models.feedback_models import Base


def create_db_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine for the attempt log store.

    SQLite URLs get ``check_same_thread`` disabled because log writes run in a
    worker thread; other databases get pre-ping and periodic connection recycling.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False}
        )
    return create_engine(
        database_url,
        echo=False,
        pool_pre_ping=True, # verify connections before using
        pool_recycle=300 # Recycle connections every 5 minutes
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db_session(request: Request):
    """FastAPI dependency for database session management.

    Creates a new database session for each request from the session factory
    stored on the application state, and closes it once the request is done.

    Yields:
        Session: SQLAlchemy database session

    Example:
        @router.patch("/feedback-logs/{log_id}/rating")
        async def rate(log_id: int, db: Session = Depends(get_db_session)):
            ...
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()

def create_tables(engine: Engine):
    """Create all database tables defined in the models.

    Uses SQLAlchemy's metadata to create all tables that don't already exist.
    This is typically called during application startup.

    Raises:
        Exception: If table creation fails

    Note:
        This operation is idempotent - existing tables won't be modified
    """
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Error creating database table: {e}")
        raise

def drop_tables(engine: Engine):
    """Drop all database tables defined in the models.

    WARNING: This will permanently delete all data in the tables.
    Use with extreme caution and only in development/testing environments.

    Raises:
        Exception: If table deletion fails
    """
    try:
        Base.metadata.drop_all(bind=engine)
        logger.info("Database tables dropped successfully")
    except Exception as e:
        logger.error(f"Error dropping database tables: {e}")
        raise
