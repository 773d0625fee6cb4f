import json
from datetime import date, datetime, timedelta

import pytest

from BackEnd.core.config import STORAGE_KEY
from BackEnd.core.errors import StorageError
from BackEnd.core.models import SessionRecord, SessionStatus
from BackEnd.repos.kv_store import MemoryKeyValueStore
from BackEnd.repos.session_repo import SessionLedger


def make_record(id, actual=600, status=SessionStatus.COMPLETED, timestamp=None):
	return SessionRecord(
		id=id,
		name=f"Session {id}",
		planned_duration=25,
		actual_duration=actual,
		status=status,
		timestamp=timestamp or datetime.now().astimezone().isoformat(),
	)


def test_empty_store_gives_empty_ledger(ledger):
	stats = ledger.aggregate()
	assert ledger.records() == ()
	assert (stats.total_sessions, stats.total_time_seconds, stats.today_count) == (0, 0, 0)


def test_append_is_newest_first_and_persisted(ledger, store):
	ledger.append(make_record(1))
	ledger.append(make_record(2))

	assert [r.id for r in ledger.records()] == [2, 1]
	stored = json.loads(store.get(STORAGE_KEY))
	assert [item["id"] for item in stored] == [2, 1]
	assert set(stored[0]) == {"id", "name", "plannedDuration", "actualDuration", "status", "timestamp"}


def test_aggregate_sums_actual_duration(ledger):
	ledger.append(make_record(1, actual=600))
	ledger.append(make_record(2, actual=1200))

	stats = ledger.aggregate()
	assert stats.total_sessions == 2
	assert stats.total_time_seconds == 1800
	assert stats.today_count == 2


def test_today_count_uses_local_date(ledger):
	ledger.append(make_record(1, timestamp="2020-01-01T12:00:00+00:00"))
	ledger.append(make_record(2))

	assert ledger.aggregate().today_count == 1
	assert ledger.aggregate(today=date(2019, 1, 1)).today_count == 0


def test_delete_removes_record(ledger, store):
	ledger.append(make_record(1))
	ledger.append(make_record(2))

	assert ledger.delete(1) is True
	assert [r.id for r in ledger.records()] == [2]
	assert [item["id"] for item in json.loads(store.get(STORAGE_KEY))] == [2]


def test_delete_missing_id_changes_nothing(ledger, store):
	ledger.append(make_record(1, actual=300))
	before_blob = store.get(STORAGE_KEY)
	before_stats = ledger.aggregate()
	changes = []
	ledger.changed.connect(lambda: changes.append(True))

	assert ledger.delete(999) is False
	assert store.get(STORAGE_KEY) == before_blob
	assert ledger.aggregate() == before_stats
	assert changes == []


def test_mutations_emit_changed(ledger):
	changes = []
	ledger.changed.connect(lambda: changes.append(True))
	ledger.append(make_record(1))
	ledger.delete(1)
	ledger.clear()
	assert len(changes) == 3


def test_legacy_record_is_normalized():
	blob = json.dumps([{"id": 5, "name": "Old", "duration": 5, "timestamp": "2024-03-01T10:00:00Z"}])
	ledger = SessionLedger(MemoryKeyValueStore({STORAGE_KEY: blob}))

	record = ledger.records()[0]
	assert record.actual_duration == 300
	assert record.status == SessionStatus.COMPLETED
	assert record.planned_duration == 5
	assert ledger.aggregate().total_time_seconds == 300


def test_reload_round_trips(store):
	first = SessionLedger(store)
	first.append(make_record(1, actual=45, status=SessionStatus.INCOMPLETE))

	second = SessionLedger(store)
	assert second.records() == first.records()


def test_corrupt_history_raises():
	with pytest.raises(StorageError):
		SessionLedger(MemoryKeyValueStore({STORAGE_KEY: "{not json"}))
	with pytest.raises(StorageError):
		SessionLedger(MemoryKeyValueStore({STORAGE_KEY: '{"id": 1}'}))


def test_failed_write_propagates():
	class BrokenStore(MemoryKeyValueStore):
		def set(self, key, value):
			raise StorageError("disk full")

	broken = SessionLedger(BrokenStore())
	with pytest.raises(StorageError):
		broken.append(make_record(1))
	assert len(broken) == 1


def test_daily_totals_covers_last_days(ledger):
	today = date(2026, 10, 18)
	noon = datetime(2026, 10, 18, 12, 0).astimezone()
	ledger.append(make_record(1, actual=600, timestamp=noon.isoformat()))
	ledger.append(make_record(2, actual=300, timestamp=(noon - timedelta(days=2)).isoformat()))
	ledger.append(make_record(3, actual=900, timestamp=(noon - timedelta(days=30)).isoformat()))

	totals = ledger.daily_totals(7, today=today)

	assert len(totals) == 7
	assert totals[0][0] == date(2026, 10, 12)
	assert totals[-1] == (today, 600)
	assert totals[-3] == (date(2026, 10, 16), 300)
	assert sum(seconds for _, seconds in totals) == 900


def test_timer_feeds_ledger(timer, scheduler, ledger):
	timer.session_finished.connect(ledger.append)
	timer.start("Study")
	scheduler.advance(20 * 60)

	assert len(ledger) == 1
	assert ledger.aggregate().total_time_seconds == 1200


@pytest.mark.parametrize("timestamp", ["yesterday-ish", 1700000000, None])
def test_bad_timestamp_rejected_at_load(timestamp):
	blob = json.dumps([{"id": 1, "name": "Odd", "actualDuration": 60, "timestamp": timestamp}])
	with pytest.raises(StorageError):
		SessionLedger(MemoryKeyValueStore({STORAGE_KEY: blob}))


def test_non_object_entry_rejected_at_load():
	with pytest.raises(StorageError):
		SessionLedger(MemoryKeyValueStore({STORAGE_KEY: "[42]"}))


def test_last_id_is_largest_recorded(ledger):
	assert ledger.last_id() == 0
	ledger.append(make_record(7))
	ledger.append(make_record(3))
	assert ledger.last_id() == 7
