"""Database helpers (engine/session export)."""

from .session import Base, Database, get_database

__all__ = ["Base", "Database", "get_database"]
