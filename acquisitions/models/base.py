"""SQLAlchemy declarative Base with constraint naming shared by models and migrations."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Matches the constraint names in the users migration (e.g. users_email_unique).
NAMING_CONVENTION = {
    "pk": "%(table_name)s_pkey",
    "uq": "%(table_name)s_%(column_0_name)s_unique",
    "ix": "ix_%(table_name)s_%(column_0_name)s",
}


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
