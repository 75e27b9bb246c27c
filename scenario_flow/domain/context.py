from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict

from scenario_flow.domain.config import Config
from scenario_flow.domain.request import Request

if TYPE_CHECKING:
    from scenario_flow.application.ports.http_client import HttpResponse

Dispatch = Callable[[Request], Awaitable["HttpResponse"]]


class _Missing:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class Context:
    """
    State shared by the steps of a chain, plus the dispatcher bound to its config.

    Chains built from another chain borrow the same Context object, so state
    written by one is visible to the other.
    """

    def __init__(self, dispatch: Dispatch, config: Config):
        self.dispatch = dispatch
        self.config = config
        self.state: Dict[str, Any] = {}

    def add_state(self, key: str, value: Any) -> None:
        self.state[key] = value

    def get_state(self, key: str, default: Any = MISSING) -> Any:
        return self.state.get(key, default)

    def merge(self, other: "Context") -> None:
        # last write wins; dispatch and config stay ours
        if other is self:
            return
        self.state.update(other.state)

    def __repr__(self) -> str:
        return f"Context(api_base_url={self.config.api_base_url!r}, keys={sorted(self.state)!r})"
