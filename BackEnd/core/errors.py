class FocusTimerError(Exception):
	"""Base class for focus timer errors."""

class ValidationError(FocusTimerError):
	"""User input rejected (empty session name, unknown preset)."""

class InvalidTransitionError(FocusTimerError):
	"""Timer operation not allowed in the current phase."""

	def __init__(self, operation, phase):
		super().__init__(f"cannot {operation} while {phase}")
		self.operation = operation
		self.phase = phase

class StorageError(FocusTimerError):
	"""Session history could not be read or written."""

class ConfigError(FocusTimerError):
	pass
