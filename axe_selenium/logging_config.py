import logging
import os

LOGGING_LEVEL_ENV = 'AXE_SELENIUM_LOGGING_LEVEL'


def setup_logging(level: str | None = None) -> logging.Logger:
	"""
	Configure the axe_selenium logger.

	Args:
		level: Level name such as 'debug' or 'info'. Defaults to
			AXE_SELENIUM_LOGGING_LEVEL, then 'info'.

	Returns:
		The configured package logger
	"""
	level_name = (level or os.getenv(LOGGING_LEVEL_ENV) or 'info').upper()
	log_level = logging.getLevelName(level_name)
	if not isinstance(log_level, int):
		raise ValueError(f'Unknown logging level: {level_name}')

	logger = logging.getLogger('axe_selenium')
	if not logger.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter('%(levelname)-8s [%(name)s] %(message)s'))
		logger.addHandler(handler)
	logger.setLevel(log_level)
	return logger
