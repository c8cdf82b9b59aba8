"""
SQLAlchemy declarative base and metadata.
Challenge: Single place for table definitions shared by models and test setup.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models. Tables are created from its metadata."""

    pass
