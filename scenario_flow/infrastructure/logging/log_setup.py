# scenario_flow/infrastructure/logging/log_setup.py
import sys

from loguru import logger


def setup_console_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(sys.stdout, level=level, format="{message}", colorize=None)
