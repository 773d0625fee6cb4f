import logging

from BackEnd.core.logger import setup_logger


def test_setup_logger_writes_to_file(tmp_path):
	log_file = tmp_path / "logs" / "focus.log"
	root = logging.getLogger()
	before = list(root.handlers)
	try:
		setup_logger(log_file, level="DEBUG")
		logging.getLogger("BackEnd.services.timer_service").info("Started 'Study' for 25 minutes")
		for handler in root.handlers:
			handler.flush()
		assert "[INFO] BackEnd.services.timer_service: Started 'Study'" in log_file.read_text(encoding="utf-8")
	finally:
		for handler in root.handlers[:]:
			if handler not in before:
				root.removeHandler(handler)
				handler.close()
