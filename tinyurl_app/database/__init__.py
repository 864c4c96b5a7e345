from .connection import Base, Database, get_database, get_db

__all__ = ["Base", "Database", "get_database", "get_db"]
