"""Application configuration with environment overrides."""
import os
from dataclasses import dataclass
from pathlib import Path

from BackEnd.core.errors import ConfigError
from BackEnd.core.paths import user_data_dir

DEFAULT_PRESETS = (20, 25, 30, 45, 60)
STORAGE_KEY = "pomodoro_sessions"


@dataclass(frozen=True)
class AppConfig:
	presets: tuple = DEFAULT_PRESETS
	default_preset: int = 20
	storage_key: str = STORAGE_KEY
	tick_interval_ms: int = 1000
	default_session_name: str = "Focus Session"
	data_dir: Path | None = None
	log_level: str = "INFO"

	def __post_init__(self):
		if not self.presets:
			raise ConfigError("at least one preset is required")
		if any(m <= 0 for m in self.presets):
			raise ConfigError(f"presets must be positive minutes: {self.presets}")
		if self.default_preset not in self.presets:
			raise ConfigError(
				f"default preset {self.default_preset} is not one of {self.presets}")

	def resolved_data_dir(self):
		if self.data_dir is None:
			return user_data_dir()
		path = Path(self.data_dir)
		path.mkdir(parents=True, exist_ok=True)
		return path


def _parse_int(name, raw):
	try:
		return int(raw.strip())
	except ValueError:
		raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def load_config(environ=None):
	"""Build an AppConfig from FOCUS_* environment variables.

	FOCUS_PRESETS takes comma separated minutes ("20,25,50"). When the
	default preset is not overridden and the built-in one is missing from
	the new preset list, the first preset is used instead.
	"""
	env = os.environ if environ is None else environ
	kwargs = {}

	raw = env.get("FOCUS_PRESETS")
	if raw:
		presets = tuple(_parse_int("FOCUS_PRESETS", part) for part in raw.split(",") if part.strip())
		kwargs["presets"] = presets
	presets = kwargs.get("presets", DEFAULT_PRESETS)

	raw = env.get("FOCUS_DEFAULT_PRESET")
	if raw:
		kwargs["default_preset"] = _parse_int("FOCUS_DEFAULT_PRESET", raw)
	elif AppConfig.default_preset not in presets:
		kwargs["default_preset"] = presets[0] if presets else AppConfig.default_preset

	raw = env.get("FOCUS_DATA_DIR")
	if raw:
		kwargs["data_dir"] = Path(raw).expanduser()

	raw = env.get("FOCUS_LOG_LEVEL")
	if raw:
		level = raw.strip().upper()
		if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
			raise ConfigError(f"unknown log level {raw!r}")
		kwargs["log_level"] = level

	return AppConfig(**kwargs)
