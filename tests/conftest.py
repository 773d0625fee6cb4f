import pytest
from PySide6.QtCore import QCoreApplication

from BackEnd.core.config import AppConfig
from BackEnd.repos.kv_store import MemoryKeyValueStore
from BackEnd.repos.session_repo import SessionLedger
from BackEnd.services.timer_service import TimerService


@pytest.fixture(scope="session", autouse=True)
def qcore_app():
	app = QCoreApplication.instance() or QCoreApplication([])
	yield app


class ManualHandle:
	def __init__(self, callback):
		self.callback = callback
		self.active = True

	def cancel(self):
		self.active = False


class ManualScheduler:
	"""Fires recurring callbacks only when the test advances it."""

	def __init__(self):
		self.handles = []

	def every(self, interval_ms, callback):
		handle = ManualHandle(callback)
		self.handles.append(handle)
		return handle

	def active_handles(self):
		return [h for h in self.handles if h.active]

	def advance(self, ticks=1):
		for _ in range(ticks):
			for handle in list(self.handles):
				if handle.active:
					handle.callback()


class FakeClock:
	def __init__(self, ms=1_700_000_000_000):
		self.ms = ms

	def __call__(self):
		return self.ms


@pytest.fixture
def scheduler():
	return ManualScheduler()


@pytest.fixture
def clock():
	return FakeClock()


@pytest.fixture
def timer(scheduler, clock):
	return TimerService(AppConfig(), scheduler=scheduler, ms_clock=clock,
		wall_clock=lambda: "2026-10-18T09:30:00.000+00:00")


@pytest.fixture
def finished(timer):
	records = []
	timer.session_finished.connect(records.append)
	return records


@pytest.fixture
def store():
	return MemoryKeyValueStore()


@pytest.fixture
def ledger(store):
	return SessionLedger(store)
