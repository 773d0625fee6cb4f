from PySide6.QtCore import QTimer


class QtTickHandle:
	"""Handle for one recurring QTimer. Cancelled handles never fire again."""

	def __init__(self, timer):
		self._timer = timer

	@property
	def active(self):
		return self._timer is not None

	def cancel(self):
		if self._timer is None:
			return
		self._timer.stop()
		self._timer.deleteLater()
		self._timer = None


class QtScheduler:
	def __init__(self, parent=None):
		self._parent = parent

	def every(self, interval_ms, callback):
		timer = QTimer(self._parent)
		timer.setInterval(interval_ms)
		timer.timeout.connect(callback)
		timer.start()
		return QtTickHandle(timer)
