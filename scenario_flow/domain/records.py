from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ChainStatus(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class LoggerState(str, Enum):
    IDLE = "idle"
    IN_SCENARIO = "in_scenario"
    IN_STEP = "in_step"


@dataclass
class StepRecord:
    name: str
    start_time: float
    end_time: Optional[float] = None
    duration_ms: Optional[float] = None

    def close(self, end_time: float) -> None:
        self.end_time = end_time
        self.duration_ms = (end_time - self.start_time) * 1000


@dataclass
class ScenarioRecord:
    name: str
    start_time: float
    file_path: Optional[str] = None
    end_time: Optional[float] = None
    duration_ms: Optional[float] = None
    success: bool = True
    steps: List[StepRecord] = field(default_factory=list)

    def close(self, end_time: float) -> None:
        self.end_time = end_time
        self.duration_ms = (end_time - self.start_time) * 1000
