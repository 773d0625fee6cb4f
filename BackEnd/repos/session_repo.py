import json
import logging
from datetime import timedelta

from PySide6.QtCore import QObject, Signal

from BackEnd.core.clock import local_date_of, local_today
from BackEnd.core.config import STORAGE_KEY
from BackEnd.core.errors import StorageError
from BackEnd.core.models import LedgerStats, SessionRecord
from BackEnd.core.paths import db_path
from BackEnd.repos.kv_store import SqliteKeyValueStore

logger = logging.getLogger(__name__)


class SessionLedger(QObject):
	"""Newest-first history of finished sessions.

	The whole list is written back to the store as one JSON array after
	every append or delete. Aggregates are recomputed from the list on
	each call.
	"""

	changed = Signal()

	def __init__(self, store, key=STORAGE_KEY, default_name="Focus Session"):
		super().__init__()
		self._store = store
		self._key = key
		self._default_name = default_name
		self._records = self._load()

	def _load(self):
		raw = self._store.get(self._key)
		if not raw:
			return []
		try:
			data = json.loads(raw)
		except json.JSONDecodeError as e:
			logger.error("Stored session history is not valid JSON: %s", e)
			raise StorageError(f"corrupt session history under {self._key!r}") from e
		if not isinstance(data, list):
			raise StorageError(f"session history under {self._key!r} is not a list")
		try:
			records = [SessionRecord.from_json(item, self._default_name) for item in data]
		except (AttributeError, KeyError, TypeError, ValueError) as e:
			logger.error("Malformed session record in history: %s", e)
			raise StorageError(f"malformed session record: {e}") from e
		logger.info("Loaded %d sessions", len(records))
		return records

	def _persist(self):
		blob = json.dumps([r.to_json() for r in self._records])
		self._store.set(self._key, blob)

	def records(self):
		return tuple(self._records)

	def last_id(self):
		return max((r.id for r in self._records), default=0)

	def __len__(self):
		return len(self._records)

	def append(self, record):
		self._records.insert(0, record)
		logger.info("Recorded session %s (%s, %ss)", record.id, record.status.value, record.actual_duration)
		try:
			self._persist()
		finally:
			self.changed.emit()

	def delete(self, session_id):
		"""Remove a record by id. Returns False when no record matches."""
		remaining = [r for r in self._records if r.id != session_id]
		if len(remaining) == len(self._records):
			logger.debug("Delete ignored, no session with id %s", session_id)
			return False
		self._records = remaining
		logger.info("Deleted session %s", session_id)
		try:
			self._persist()
		finally:
			self.changed.emit()
		return True

	def clear(self):
		self._records = []
		logger.info("Cleared session history")
		try:
			self._persist()
		finally:
			self.changed.emit()

	def aggregate(self, today=None):
		today = today or local_today()
		return LedgerStats(
			total_sessions=len(self._records),
			total_time_seconds=sum(r.actual_duration for r in self._records),
			today_count=sum(1 for r in self._records if local_date_of(r.timestamp) == today),
		)

	def daily_totals(self, days=7, today=None):
		"""Return [(date, seconds)] for the last `days` local dates, oldest first."""
		today = today or local_today()
		dates = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
		totals = dict.fromkeys(dates, 0)
		for r in self._records:
			d = local_date_of(r.timestamp)
			if d in totals:
				totals[d] += r.actual_duration
		return [(d, totals[d]) for d in dates]


def open_ledger(config):
	"""Ledger backed by focus.db in the configured data dir."""
	store = SqliteKeyValueStore(db_path(config.resolved_data_dir()))
	return SessionLedger(store, key=config.storage_key, default_name=config.default_session_name)
