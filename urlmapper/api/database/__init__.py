"""Database API module."""

from .Database import Database
from .DatabaseConfig import DatabaseConfig

__all__ = ["Database", "DatabaseConfig"]
