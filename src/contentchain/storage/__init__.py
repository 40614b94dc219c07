"""Storage adapters persisting provider maps through the content codec."""

from .sqlite import COLUMN_TYPE, ContentRecord, SQLiteContentRepository, register_sqlite_types

__all__ = ["COLUMN_TYPE", "ContentRecord", "SQLiteContentRepository", "register_sqlite_types"]
