"""
loguru setup shared by the API, the UI and scripts.
"""

import sys

from loguru import logger


def configure_logging(level: str = 'INFO') -> None:
	"""Replace loguru's default sink with a stderr sink at the given level."""
	logger.remove()
	logger.add(
		sys.stderr,
		level=level.upper(),
		format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
	)
	logger.debug(f"[Logging] Level set to {level.upper()}")
