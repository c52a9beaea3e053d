"""
Base SQLAlchemy model for the database-backed store.

Provides the declarative base shared by all table models.
"""

from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.
    
    The autoincrement primary key doubles as insertion order, which the
    database store uses to keep records in the same order as the flat file.
    """
    
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Primary key, also the insertion order"
    )
