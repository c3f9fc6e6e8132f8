import sys
from loguru import logger as loguru_logger

from src.config.settings_env import settings


def initialize_logger():
    """Route loguru to stderr, at TRACE in DEV_MODE and INFO otherwise."""
    loguru_logger.remove()
    level = "TRACE" if settings.DEV_MODE else "INFO"
    loguru_logger.add(sys.stderr, level=level)
    loguru_logger.debug(f"Logger initialized at {level}")
    return loguru_logger
