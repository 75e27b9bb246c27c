from __future__ import annotations

import sys

from loguru import logger

from scenario_flow.application.scenario_logger import ScenarioLogger
from scenario_flow.infrastructure.logging.log_setup import setup_console_logging


def test_setup_console_logging_prints_message_only(capsys) -> None:
    setup_console_logging(level="INFO")
    try:
        ScenarioLogger().log_info("hello <world>")
        logger.debug("hidden")
    finally:
        logger.remove()
        logger.add(sys.stderr)

    out = capsys.readouterr().out

    assert "ℹ️  hello <world>" in out
    assert "hidden" not in out
    assert "| INFO" not in out
