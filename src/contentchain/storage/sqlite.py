"""SQLite persistence for provider maps stored in text columns."""

from __future__ import annotations

import logging
import os
import sqlite3
from contextlib import closing, contextmanager
from dataclasses import dataclass, field
from threading import Lock
from typing import Iterator, Mapping

from contentchain.content.codec import deserialize, serialize
from contentchain.content.provider import ProviderMap

logger = logging.getLogger(__name__)

COLUMN_TYPE = "PROVIDERMAP"

_registration_lock = Lock()
_registered = False


def register_sqlite_types() -> None:
    """Teach :mod:`sqlite3` to store provider maps in ``PROVIDERMAP`` columns.

    Writes go through :func:`serialize`; columns declared with the
    ``PROVIDERMAP`` type are decoded with :func:`deserialize` on read when the
    connection uses ``PARSE_DECLTYPES``.
    """

    global _registered

    with _registration_lock:
        if _registered:
            return
        sqlite3.register_adapter(ProviderMap, serialize)
        sqlite3.register_converter(COLUMN_TYPE, deserialize)
        _registered = True


@dataclass(frozen=True)
class ContentRecord:
    """Row holding the translated name and description of one content item."""

    id: int
    name: ProviderMap = field(default_factory=ProviderMap)
    description: ProviderMap = field(default_factory=ProviderMap)


def _as_provider_map(value: Mapping[str, Mapping[str, str]] | None) -> ProviderMap:
    if isinstance(value, ProviderMap):
        return value
    return ProviderMap(value)


class SQLiteContentRepository:
    """SQLite-backed repository persisting provider maps through the codec."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        register_sqlite_types()
        self._path = str(path)
        self._lock = Lock()
        self._initialise()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        connection = sqlite3.connect(
            self._path,
            detect_types=sqlite3.PARSE_DECLTYPES,
            check_same_thread=False,
        )
        connection.row_factory = sqlite3.Row
        with closing(connection), connection:
            yield connection

    def _initialise(self) -> None:
        with self._connect() as connection:
            connection.execute(
                f"""
                CREATE TABLE IF NOT EXISTS contents (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name {COLUMN_TYPE},
                    description {COLUMN_TYPE}
                )
                """
            )

    @staticmethod
    def _decode_record(row: sqlite3.Row) -> ContentRecord:
        # Converters are skipped for NULL columns.
        return ContentRecord(
            id=row["id"],
            name=row["name"] if row["name"] is not None else ProviderMap(),
            description=row["description"] if row["description"] is not None else ProviderMap(),
        )

    def insert(
        self,
        name: Mapping[str, Mapping[str, str]] | None = None,
        description: Mapping[str, Mapping[str, str]] | None = None,
    ) -> ContentRecord:
        name_map = _as_provider_map(name)
        description_map = _as_provider_map(description)

        with self._lock:
            with self._connect() as connection:
                cursor = connection.execute(
                    "INSERT INTO contents (name, description) VALUES (?, ?)",
                    (name_map, description_map),
                )
                record_id = cursor.lastrowid

        logger.debug("Stored content %s for providers %s", record_id, sorted(name_map))
        return ContentRecord(id=record_id, name=name_map, description=description_map)

    def update(self, record: ContentRecord) -> None:
        with self._lock:
            with self._connect() as connection:
                cursor = connection.execute(
                    "UPDATE contents SET name = ?, description = ? WHERE id = ?",
                    (
                        _as_provider_map(record.name),
                        _as_provider_map(record.description),
                        record.id,
                    ),
                )
                if cursor.rowcount == 0:
                    raise KeyError(record.id)

    def get(self, record_id: int) -> ContentRecord:
        with self._connect() as connection:
            row = connection.execute(
                "SELECT id, name, description FROM contents WHERE id = ?",
                (record_id,),
            ).fetchone()
        if row is None:
            raise KeyError(record_id)
        return self._decode_record(row)


__all__ = [
    "COLUMN_TYPE",
    "ContentRecord",
    "SQLiteContentRepository",
    "register_sqlite_types",
]
