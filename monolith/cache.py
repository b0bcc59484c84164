"""Asset cache that keeps small blobs in memory and larger ones in an on-disk database."""

from __future__ import annotations

import os
import sqlite3
from dataclasses import dataclass

_FILE_WRITE_BUF_LEN = 1024 * 100
_TABLE = "_"


class CacheMissError(KeyError):
    """Raised when a key is not in the cache or its data cannot be read."""


@dataclass
class _MetadataItem:
    data: bytes | None
    media_type: str
    charset: str


class Cache:
    """Store retrieved assets with their media type and charset.

    Assets no larger than ``min_file_size`` bytes stay in memory. Larger ones
    go into a database file at ``db_file_path`` if one was given and could be
    opened; otherwise everything is kept in memory.
    """

    def __init__(self, min_file_size: int = 0, db_file_path: str | None = None) -> None:
        self.min_file_size = min_file_size
        self.db_file_path = db_file_path
        self._metadata: dict[str, _MetadataItem] = {}
        self._db: sqlite3.Connection | None = None

        if db_file_path is not None:
            try:
                connection = sqlite3.connect(db_file_path)
                with connection:
                    connection.execute(
                        f'CREATE TABLE IF NOT EXISTS "{_TABLE}" '
                        "(key TEXT PRIMARY KEY, value BLOB NOT NULL)"
                    )
            except sqlite3.Error:
                self._db = None
            else:
                self._db = connection

    @property
    def db_ok(self) -> bool:
        """Whether the on-disk database is in use."""
        return self._db is not None

    def set(self, key: str, data: bytes, media_type: str, charset: str) -> None:
        """Store ``data`` under ``key`` together with its media type and charset."""
        blob = bytes(data)
        stored: bytes | None = blob

        if self._db is not None and len(blob) > self.min_file_size:
            try:
                with self._db:
                    self._db.execute(
                        f'INSERT OR REPLACE INTO "{_TABLE}" (key, value) VALUES (?, ?)',
                        (key, blob),
                    )
            except sqlite3.Error:
                # Fall back to keeping the asset in memory
                stored = blob
            else:
                stored = None

        self._metadata[key] = _MetadataItem(stored, media_type, charset)

    def get(self, key: str) -> tuple[bytes, str, str]:
        """Return ``(data, media_type, charset)`` for ``key``.

        Raises CacheMissError if the key is unknown or its data is unavailable.
        """
        item = self._metadata.get(key)
        if item is None:
            raise CacheMissError(key)

        if item.data is not None:
            return item.data, item.media_type, item.charset

        if self._db is not None:
            try:
                row = self._db.execute(
                    f'SELECT value FROM "{_TABLE}" WHERE key = ?', (key,)
                ).fetchone()
            except sqlite3.Error as error:
                raise CacheMissError(key) from error
            if row is not None:
                return bytes(row[0]), item.media_type, item.charset

        raise CacheMissError(key)

    def __contains__(self, key: object) -> bool:
        return key in self._metadata

    def destroy_database_file(self) -> None:
        """Stop using the database and overwrite its file with zeroes."""
        if self._db is None:
            return

        self._db.close()
        self._db = None

        if self.db_file_path is None:
            return

        try:
            with open(self.db_file_path, "r+b") as db_file:
                remaining = os.fstat(db_file.fileno()).st_size
                zeroes = bytes(_FILE_WRITE_BUF_LEN)
                while remaining > 0:
                    chunk = min(remaining, _FILE_WRITE_BUF_LEN)
                    db_file.write(zeroes[:chunk])
                    remaining -= chunk
        except OSError:
            pass