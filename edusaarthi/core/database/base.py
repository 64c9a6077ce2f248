"""
Database Base Class
Declarative base shared by every ORM model
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    SQLAlchemy Base Class

    Every ORM model inherits from this class
    """
    pass
