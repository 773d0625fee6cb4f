"""Opaque key/value string stores backing the session ledger."""
import logging
import sqlite3
from pathlib import Path

from BackEnd.core.clock import utc_now_iso
from BackEnd.core.errors import StorageError
from BackEnd.core.paths import db_path

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv (
	key TEXT PRIMARY KEY,
	value TEXT NOT NULL,
	updated_at TEXT NOT NULL
);
"""


class MemoryKeyValueStore:
	def __init__(self, initial=None):
		self._data = dict(initial or {})

	def get(self, key):
		return self._data.get(key)

	def set(self, key, value):
		self._data[key] = value


class SqliteKeyValueStore:
	"""Stores each value as one row of the `kv` table in focus.db."""

	def __init__(self, path=None):
		self.path = Path(path) if path is not None else db_path()

	def connect(self):
		"""Open SQLite connection and ensure schema is applied."""
		conn = sqlite3.connect(self.path)
		conn.row_factory = sqlite3.Row
		conn.executescript(SCHEMA)
		return conn

	def get(self, key):
		try:
			conn = self.connect()
			try:
				row = conn.execute("SELECT value FROM kv WHERE key=?", (key,)).fetchone()
			finally:
				conn.close()
		except sqlite3.Error as e:
			logger.error("Failed to read %s from %s: %s", key, self.path, e)
			raise StorageError(f"cannot read {key}: {e}") from e
		return row["value"] if row else None

	def set(self, key, value):
		try:
			conn = self.connect()
			try:
				with conn:
					conn.execute(
						"""
						INSERT INTO kv (key, value, updated_at) VALUES (?, ?, ?)
						ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at
						""",
						(key, value, utc_now_iso())
					)
			finally:
				conn.close()
		except sqlite3.Error as e:
			logger.error("Failed to write %s to %s: %s", key, self.path, e)
			raise StorageError(f"cannot write {key}: {e}") from e
