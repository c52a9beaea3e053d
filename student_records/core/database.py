"""
Database infrastructure for the database-backed store.

This module provides SQLAlchemy engine creation, scoped session handling
and a health check. Everything is synchronous, matching the single-threaded
shell.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from loguru import logger


def _describe_url(database_url: str) -> str:
    """Strip credentials from a database URL for logging."""
    return database_url.split('@')[-1] if '@' in database_url else database_url


def create_database_engine(
    database_url: str,
    echo: bool = False,
    pool_size: Optional[int] = None,
    max_overflow: Optional[int] = None,
) -> Engine:
    """
    Create and configure a SQLAlchemy engine.
    
    Pool sizing is only applied to server databases; SQLite engines keep
    SQLAlchemy's default pool for the dialect.
    
    Args:
        database_url: SQLAlchemy database URL
        echo: Log SQL statements
        pool_size: Connection pool size (non-SQLite only)
        max_overflow: Maximum overflow connections (non-SQLite only)
    
    Returns:
        Engine: Configured database engine
    """
    logger.info(f"Creating database engine for: {_describe_url(database_url)}")
    
    options = {"echo": echo, "pool_pre_ping": True}
    if not database_url.startswith("sqlite"):
        if pool_size is not None:
            options["pool_size"] = pool_size
        if max_overflow is not None:
            options["max_overflow"] = max_overflow
    
    engine = create_engine(database_url, **options)
    
    logger.debug("Database engine created successfully")
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """Build the session factory used by the database store."""
    return sessionmaker(
        engine,
        class_=Session,
        expire_on_commit=False,
        autoflush=False
    )


@contextmanager
def session_scope(session_factory: sessionmaker) -> Iterator[Session]:
    """
    Provide a transactional session.
    
    Example:
        with session_scope(factory) as db:
            db.add(row)
    
    Commits when the block succeeds, rolls back on any error and always
    closes the session.
    
    Yields:
        Session: Database session
    """
    session = session_factory()
    try:
        logger.debug("Database session created")
        yield session
        session.commit()
        logger.debug("Database session committed successfully")
        
    except Exception as e:
        logger.error(f"Database session error: {e}")
        session.rollback()
        raise
        
    finally:
        session.close()
        logger.debug("Database session closed")


def health_check(engine: Engine) -> bool:
    """
    Check database connection health.
    
    Returns:
        bool: True if database is healthy, False otherwise
    """
    try:
        logger.debug("Performing database health check...")
        
        with engine.connect() as conn:
            row = conn.execute(text("SELECT 1")).fetchone()
            
            if row and row[0] == 1:
                logger.debug("Database health check passed")
                return True
            
            logger.error("Database health check failed: unexpected result")
            return False
            
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return False
