# scenario_flow/domain/exceptions.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from scenario_flow.application.ports.http_client import HttpResponse


class ScenarioFlowError(Exception):
    """Base class for every error raised by scenario_flow."""


class InvalidArgument(ScenarioFlowError, ValueError):
    """Malformed chain, step, request or config input."""


class HttpError(ScenarioFlowError):
    def __init__(self, status: int, url: str = "", response: Optional["HttpResponse"] = None):
        super().__init__(f"HTTP error! status: {status}")
        self.status = status
        self.url = url
        self.response = response


class NetworkError(ScenarioFlowError):
    """Transport failure (DNS, refused connection, timeout...)."""


class StepError(ScenarioFlowError):
    """Raised by scenario steps when an expectation does not hold."""


class LoggerStateError(ScenarioFlowError):
    """A scenario logger transition that its current state does not allow."""
