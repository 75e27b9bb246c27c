# scenario_flow/domain/steps.py
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Union

if TYPE_CHECKING:
    from scenario_flow.application.chain import Chain
    from scenario_flow.domain.context import Context

StepFunction = Callable[["Context"], Awaitable[Any]]


@dataclass(frozen=True)
class NamedStep:
    name: str
    run: StepFunction


@dataclass(frozen=True)
class NamedFunction:
    name: str
    fn: StepFunction


@dataclass(frozen=True)
class SubChain:
    chain: "Chain"


StepSource = Union[NamedFunction, SubChain]
