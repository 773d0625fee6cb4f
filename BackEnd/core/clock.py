from datetime import datetime, timezone

def utc_now():
	return datetime.now(timezone.utc)

def utc_now_iso():
	"""Return current UTC time as ISO8601 string (millisecond precision)."""
	return utc_now().isoformat(timespec="milliseconds")

def now_ms():
	return int(utc_now().timestamp() * 1000)

def local_today():
	"""Return the local calendar date."""
	return datetime.now().date()

def local_date_of(iso_ts):
	"""Local calendar date of an ISO8601 instant. Naive values are taken as local time."""
	dt = datetime.fromisoformat(iso_ts.replace("Z", "+00:00"))
	if dt.tzinfo is not None:
		dt = dt.astimezone()
	return dt.date()

def fmt_clock(seconds: int) -> str:
	"""Format a countdown as M:SS."""
	return f"{seconds // 60}:{seconds % 60:02}"

def fmt_total(seconds: int) -> str:
	"""Format accumulated focus time as 'Hh Mm'."""
	h = seconds // 3600
	m = (seconds % 3600) // 60
	return f"{h}h {m}m"

def fmt_record_duration(seconds: int) -> str:
	# short sessions show seconds, everything else whole minutes
	if seconds < 60:
		return f"{seconds}s"
	return f"{seconds // 60}m"

def fmt_local_datetime(iso_ts):
	dt = datetime.fromisoformat(iso_ts.replace("Z", "+00:00"))
	if dt.tzinfo is not None:
		dt = dt.astimezone()
	return dt.strftime("%Y-%m-%d %H:%M")
