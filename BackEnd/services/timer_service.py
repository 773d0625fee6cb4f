import logging

from PySide6.QtCore import QObject, Signal

from BackEnd.core.clock import fmt_clock, now_ms, utc_now_iso
from BackEnd.core.config import AppConfig
from BackEnd.core.errors import InvalidTransitionError, ValidationError
from BackEnd.core.models import SessionRecord, SessionStatus, TimerPhase, TimerState
from BackEnd.services.scheduler import QtScheduler

logger = logging.getLogger(__name__)


class TimerService(QObject):
	"""Countdown state machine for a single focus session.

	idle -> running <-> paused -> awaiting_disposition -> idle, with reset
	available from every phase. A session ends either when the countdown
	reaches zero or when a stop is resolved as Completed/Incomplete; the
	finished record goes out through `session_finished`.
	"""

	tick = Signal(int)  # emits seconds left
	state_changed = Signal(str)  # emits a TimerPhase value
	session_finished = Signal(object)  # emits SessionRecord
	alarm = Signal()
	preset_changed = Signal(int)  # emits minutes

	def __init__(self, config=None, scheduler=None, ms_clock=now_ms, wall_clock=utc_now_iso, last_id=0):
		super().__init__()
		self.config = config or AppConfig()
		self._scheduler = scheduler or QtScheduler(self)
		self._ms_clock = ms_clock
		self._wall_clock = wall_clock

		self.phase = TimerPhase.IDLE
		self.preset = self.config.default_preset
		self.total_time = self.preset * 60
		self.time_left = self.total_time
		self.session_name = None
		self._session_preset = None
		self._handle = None
		self._tick_token = None
		# new ids stay above every id already recorded, even if the clock went back
		self._last_id = last_id

	@property
	def running(self):
		return self.phase == TimerPhase.RUNNING

	@property
	def percent(self):
		return self.state().percent

	def state(self):
		return TimerState(self.total_time, self.time_left, self.running, self.phase)

	def display_text(self):
		return fmt_clock(self.time_left)

	def select_preset(self, minutes):
		if self.phase != TimerPhase.IDLE:
			raise InvalidTransitionError("select preset", self.phase.value)
		if minutes not in self.config.presets:
			raise ValidationError(f"{minutes} minutes is not an available preset")
		self.preset = minutes
		self.total_time = minutes * 60
		self.time_left = self.total_time
		logger.debug("Preset set to %d minutes", minutes)
		self.preset_changed.emit(minutes)
		self.tick.emit(self.time_left)

	def start(self, name):
		if self.phase == TimerPhase.RUNNING:
			return
		if self.phase == TimerPhase.PAUSED:
			# resume keeps the name and preset captured at the first start
			self._set_phase(TimerPhase.RUNNING)
			self._start_ticking()
			logger.info("Resumed '%s' with %ds left", self.session_name, self.time_left)
			return
		if self.phase != TimerPhase.IDLE:
			raise InvalidTransitionError("start", self.phase.value)
		name = (name or "").strip()
		if not name:
			raise ValidationError("Please enter a session name to start focusing.")
		self.session_name = name
		self._session_preset = self.preset
		self._set_phase(TimerPhase.RUNNING)
		self._start_ticking()
		logger.info("Started '%s' for %d minutes", name, self.preset)

	def pause(self):
		if self.phase != TimerPhase.RUNNING:
			raise InvalidTransitionError("pause", self.phase.value)
		self._stop_ticking()
		self._set_phase(TimerPhase.PAUSED)

	def request_stop(self):
		if self.phase not in (TimerPhase.RUNNING, TimerPhase.PAUSED):
			raise InvalidTransitionError("stop", self.phase.value)
		self._stop_ticking()
		self._set_phase(TimerPhase.AWAITING_DISPOSITION)

	def resolve_disposition(self, status):
		if self.phase != TimerPhase.AWAITING_DISPOSITION:
			raise InvalidTransitionError("resolve disposition", self.phase.value)
		status = SessionStatus(status)
		return self._finish(status, self.total_time - self.time_left)

	def cancel_disposition(self):
		if self.phase != TimerPhase.AWAITING_DISPOSITION:
			raise InvalidTransitionError("cancel disposition", self.phase.value)
		self._set_phase(TimerPhase.PAUSED)

	def reset(self):
		self._stop_ticking()
		self.time_left = self.total_time
		self.session_name = None
		self._session_preset = None
		self.tick.emit(self.time_left)
		self._set_phase(TimerPhase.IDLE)

	def _start_ticking(self):
		token = object()
		self._tick_token = token
		self._handle = self._scheduler.every(self.config.tick_interval_ms, lambda: self._on_tick(token))

	def _stop_ticking(self):
		self._tick_token = None
		if self._handle is not None:
			self._handle.cancel()
			self._handle = None

	def _on_tick(self, token):
		if token is not self._tick_token or self.phase != TimerPhase.RUNNING:
			logger.debug("Ignoring stale tick")
			return
		self.time_left = max(self.time_left - 1, 0)
		self.tick.emit(self.time_left)
		if self.time_left == 0:
			self._stop_ticking()
			self.alarm.emit()
			self._finish(SessionStatus.COMPLETED, self.total_time)

	def _next_id(self):
		self._last_id = max(self._ms_clock(), self._last_id + 1)
		return self._last_id

	def _finish(self, status, actual_duration):
		record = SessionRecord(
			id=self._next_id(),
			name=self.session_name or self.config.default_session_name,
			planned_duration=self._session_preset or self.preset,
			actual_duration=actual_duration,
			status=status,
			timestamp=self._wall_clock(),
		)
		logger.info("Session '%s' finished: %s after %ds", record.name, status.value, actual_duration)
		self.reset()
		self.session_finished.emit(record)
		return record

	def _set_phase(self, phase):
		if phase == self.phase:
			return
		logger.debug("Timer %s -> %s", self.phase.value, phase.value)
		self.phase = phase
		self.state_changed.emit(phase.value)
