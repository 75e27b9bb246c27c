# scenario_flow/application/scenario_logger.py
from __future__ import annotations

import time
from datetime import datetime
from typing import Callable, Optional

from loguru import logger

from scenario_flow.domain.exceptions import LoggerStateError
from scenario_flow.domain.records import LoggerState, ScenarioRecord, StepRecord

REQUEST_PREVIEW_CHARS = 200
RESPONSE_PREVIEW_CHARS = 300

_SCENARIO_RULE = "=" * 60
_STEP_RULE = "─" * 40


def format_duration(ms: float) -> str:
    if ms < 1000:
        return f"{int(round(ms))}ms"
    if ms < 60000:
        return f"{ms / 1000:.1f}s"
    minutes = int(ms // 60000)
    seconds = (ms % 60000) / 1000
    return f"{minutes}m {seconds:.1f}s"


def truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def _wall_clock() -> str:
    return datetime.now().strftime("%H:%M:%S.%f")[:-3]


class ScenarioLogger:
    """
    Console recorder for one running scenario and its current step.

    States move ``idle -> in_scenario -> in_step`` and back. Starting a
    scenario or step out of order raises LoggerStateError; ending one that is
    not open does nothing, so cleanup paths can call ``end_step`` and
    ``end_scenario`` unconditionally.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._log = logger.opt(colors=True)
        self._state = LoggerState.IDLE
        self._scenario: Optional[ScenarioRecord] = None
        self._step: Optional[StepRecord] = None

    @property
    def state(self) -> LoggerState:
        return self._state

    @property
    def current_scenario(self) -> Optional[ScenarioRecord]:
        return self._scenario

    @property
    def current_step(self) -> Optional[StepRecord]:
        return self._step

    def start_scenario(self, name: str, file_path: Optional[str] = None) -> None:
        if self._state is not LoggerState.IDLE:
            raise LoggerStateError(
                f"Cannot start scenario {name!r} while {self._scenario.name!r} is still running"
            )
        self._scenario = ScenarioRecord(name=name, start_time=self._clock(), file_path=file_path)
        self._state = LoggerState.IN_SCENARIO

        self._log.info("")
        self._log.info("<bold><cyan>{}</cyan></bold>", _SCENARIO_RULE)
        self._log.info("<bold><cyan>🎯 SCENARIO: </cyan><white>{}</white></bold>", name)
        self._log.info("<bold><cyan>{}</cyan></bold>", _SCENARIO_RULE)
        if file_path:
            self._log.info("<dim>📁 File: {}</dim>", file_path)
        self._log.info("<dim>⏰ Started: {}</dim>", _wall_clock())
        self._log.info("")

    def start_step(self, name: str) -> None:
        if self._state is LoggerState.IDLE:
            raise LoggerStateError(f"Cannot start step {name!r} without an active scenario")
        if self._state is LoggerState.IN_STEP:
            raise LoggerStateError(f"Cannot start step {name!r} while {self._step.name!r} is still open")
        self._step = StepRecord(name=name, start_time=self._clock())
        self._state = LoggerState.IN_STEP

        self._log.info("<blue>  {}</blue>", _STEP_RULE)
        self._log.info("<bold><blue>  📋 STEP: </blue><white>{}</white></bold>", name)
        self._log.info("<blue>  {}</blue>", _STEP_RULE)

    def log_request(self, method: str, url: str, body: Optional[str] = None) -> None:
        self._log.info("<cyan>  🌐 <bold>{}</bold> {}</cyan>", method, url)
        if body:
            self._log.info("<dim>  📤 {}</dim>", truncate(body, REQUEST_PREVIEW_CHARS))

    def log_response(self, status: int, reason: str, duration_ms: float, body: Optional[str] = None) -> None:
        line = f"{status} {reason}".rstrip()
        if 200 <= status <= 299:
            self._log.info("<green>  ✅ {}</green><dim> ({})</dim>", line, format_duration(duration_ms))
        else:
            self._log.info("<red>  ❌ {}</red><dim> ({})</dim>", line, format_duration(duration_ms))
        if body:
            self._log.info("<dim>  📥 {}</dim>", truncate(body, RESPONSE_PREVIEW_CHARS))

    def log_info(self, message: str) -> None:
        self._log.info("<blue>  ℹ️  {}</blue>", message)

    def log_success(self, message: str) -> None:
        self._log.info("<green>  ✅ {}</green>", message)

    def log_error(self, message: str) -> None:
        self._log.error("<red>  ❌ {}</red>", message)
        if self._scenario is not None:
            self._scenario.success = False

    def end_step(self) -> Optional[StepRecord]:
        if self._state is not LoggerState.IN_STEP:
            return None

        step = self._step
        step.close(self._clock())
        self._scenario.steps.append(step)
        self._step = None
        self._state = LoggerState.IN_SCENARIO

        self._log.info("<dim>  ⏱️  Step completed in: {}</dim>", format_duration(step.duration_ms))
        self._log.info("")
        return step

    def end_scenario(self) -> Optional[ScenarioRecord]:
        if self._state is LoggerState.IDLE:
            return None
        self.end_step()

        scenario = self._scenario
        scenario.close(self._clock())
        self._scenario = None
        self._state = LoggerState.IDLE

        if scenario.success:
            banner = "<bold><green>✅ SCENARIO COMPLETED: </green><white>{}</white></bold>"
            verdict = "All successful"
        else:
            banner = "<bold><red>❌ SCENARIO FAILED: </red><white>{}</white></bold>"
            verdict = "Some failed"

        self._log.info("<bold><cyan>{}</cyan></bold>", _SCENARIO_RULE)
        self._log.info(banner, scenario.name)
        self._log.info(
            "<dim>⏱️  Total: {} | Steps: {} | {}</dim>",
            format_duration(scenario.duration_ms),
            len(scenario.steps),
            verdict,
        )
        self._log.info("<bold><cyan>{}</cyan></bold>", _SCENARIO_RULE)
        self._log.info("")
        return scenario

    def log_execution_summary(self, total: int, succeeded: int, duration_ms: float) -> None:
        all_ok = succeeded == total

        self._log.info("")
        self._log.info("<bold><magenta>{}</magenta></bold>", _SCENARIO_RULE)
        self._log.info("<bold><magenta>📊 EXECUTION SUMMARY</magenta></bold>")
        self._log.info("<bold><magenta>{}</magenta></bold>", _SCENARIO_RULE)
        if all_ok:
            self._log.info("<green>🎉 {}/{} scenarios executed successfully</green>", succeeded, total)
        else:
            self._log.info("<red>⚠️ {}/{} scenarios executed successfully</red>", succeeded, total)
        self._log.info("<dim>⏱️  Total execution time: {}</dim>", format_duration(duration_ms))
        self._log.info("<bold><magenta>{}</magenta></bold>", _SCENARIO_RULE)


default_logger = ScenarioLogger()
