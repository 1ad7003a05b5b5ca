"""Core app configuration, database and security."""

from acquisitions.core.config import get_settings, settings
from acquisitions.core.database import Database, get_db

__all__ = ["Database", "get_settings", "settings", "get_db"]
