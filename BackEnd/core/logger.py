import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

def setup_logger(log_file, level="INFO", max_bytes: int = 1_000_000, backup_count: int = 3):
	"""Attach a rotating file handler and a console handler to the root logger."""
	Path(log_file).parent.mkdir(exist_ok=True, parents=True)
	logger = logging.getLogger()
	logger.setLevel(level)
	formatter = logging.Formatter(FORMAT)

	file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
	file_handler.setFormatter(formatter)
	logger.addHandler(file_handler)

	console = logging.StreamHandler()
	console.setFormatter(formatter)
	logger.addHandler(console)
	return logger
