"""Plain records shared by the timer service and the session ledger."""
from dataclasses import dataclass
from enum import Enum

from BackEnd.core.clock import local_date_of


class SessionStatus(str, Enum):
	COMPLETED = "Completed"
	INCOMPLETE = "Incomplete"


class TimerPhase(str, Enum):
	IDLE = "idle"
	RUNNING = "running"
	PAUSED = "paused"
	AWAITING_DISPOSITION = "awaiting_disposition"


@dataclass(frozen=True)
class SessionRecord:
	id: int
	name: str
	planned_duration: int  # minutes
	actual_duration: int  # seconds
	status: SessionStatus
	timestamp: str  # ISO8601, UTC

	def to_json(self):
		return {
			"id": self.id,
			"name": self.name,
			"plannedDuration": self.planned_duration,
			"actualDuration": self.actual_duration,
			"status": self.status.value,
			"timestamp": self.timestamp,
		}

	@classmethod
	def from_json(cls, data, default_name="Focus Session"):
		"""Build a record from its stored form.

		Older entries carry `duration` in whole minutes instead of
		`actualDuration` in seconds, and may have no `status` at all.
		"""
		actual = data.get("actualDuration")
		if actual is None:
			actual = int(data.get("duration") or 0) * 60
		planned = data.get("plannedDuration")
		if planned is None:
			planned = data.get("duration") or 0
		timestamp = data["timestamp"]
		if not isinstance(timestamp, str):
			raise ValueError(f"timestamp must be an ISO8601 string, got {timestamp!r}")
		local_date_of(timestamp)
		return cls(
			id=int(data["id"]),
			name=data.get("name") or default_name,
			planned_duration=int(planned),
			actual_duration=int(actual),
			status=SessionStatus(data.get("status") or SessionStatus.COMPLETED.value),
			timestamp=timestamp,
		)


@dataclass(frozen=True)
class TimerState:
	total_time: int
	time_left: int
	running: bool
	phase: TimerPhase

	@property
	def percent(self):
		if self.total_time <= 0:
			return 0.0
		return 100 * self.time_left / self.total_time


@dataclass(frozen=True)
class LedgerStats:
	total_sessions: int
	total_time_seconds: int
	today_count: int
