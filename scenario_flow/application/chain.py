# scenario_flow/application/chain.py
from __future__ import annotations

import inspect
from typing import List, Optional, Tuple, Union

from loguru import logger as _loguru

from scenario_flow.application.dispatcher import create_dispatcher
from scenario_flow.application.ports.http_client import HttpClientPort
from scenario_flow.application.ports.requests_client import RequestsSessionHttpClient
from scenario_flow.application.scenario_logger import ScenarioLogger, default_logger
from scenario_flow.domain.config import Config
from scenario_flow.domain.context import Context
from scenario_flow.domain.exceptions import InvalidArgument
from scenario_flow.domain.records import ChainStatus
from scenario_flow.domain.steps import NamedFunction, NamedStep, StepFunction, StepSource, SubChain


class Chain:
    """
    Ordered, composable list of named async steps sharing one Context.

    ``Chain(name, Config(...))`` starts a fresh chain with its own context
    and dispatcher. ``Chain(name, other)`` borrows ``other``'s config and
    context and copies its step list, so the new chain extends the old one
    without changing it.
    """

    def __init__(
        self,
        name: str,
        source: Union[Config, "Chain"],
        *,
        http_client: Optional[HttpClientPort] = None,
        logger: Optional[ScenarioLogger] = None,
    ):
        self.name = name
        self.status = ChainStatus.NOT_STARTED
        self._steps: List[NamedStep] = []

        if isinstance(source, Config):
            self._logger = logger or default_logger
            self.config = source
            # only a client built here is closed by this chain
            self._owned_client: Optional[RequestsSessionHttpClient] = None
            if http_client is None:
                http_client = self._owned_client = RequestsSessionHttpClient()
            dispatch = create_dispatcher(source, http_client, self._logger)
            self.context = Context(dispatch, source)
            return

        if isinstance(source, Chain):
            if http_client is not None or logger is not None:
                raise InvalidArgument(
                    "A chain built from another chain shares its dispatcher and logger; "
                    "http_client and logger are only accepted with a Config"
                )
            self._logger = source._logger
            self._owned_client = source._owned_client
            self.config = source.config
            self.context = source.context
            self._steps = list(source._steps)
            return

        raise InvalidArgument(
            "Invalid argument: Chain expects a Config or another Chain, "
            f"got {type(source).__name__}"
        )

    @classmethod
    def from_config(
        cls,
        name: str,
        config: Config,
        *,
        http_client: Optional[HttpClientPort] = None,
        logger: Optional[ScenarioLogger] = None,
    ) -> "Chain":
        return cls(name, config, http_client=http_client, logger=logger)

    @classmethod
    def from_chain(cls, name: str, chain: "Chain") -> "Chain":
        return cls(name, chain)

    @property
    def steps(self) -> Tuple[NamedStep, ...]:
        return tuple(self._steps)

    @property
    def logger(self) -> ScenarioLogger:
        return self._logger

    def add_step(
        self,
        source: Union[str, StepSource, "Chain"],
        fn: Optional[StepFunction] = None,
    ) -> "Chain":
        """
        Append steps and return this chain.

        Accepts ``add_step(name, fn)``, ``add_step(other_chain)`` or an explicit
        NamedFunction / SubChain.
        """
        if isinstance(source, str):
            source = NamedFunction(source, fn)
        elif isinstance(source, Chain) and fn is None:
            source = SubChain(source)
        elif fn is not None:
            raise InvalidArgument("Invalid step arguments: fn is only accepted together with a step name")

        if isinstance(source, NamedFunction):
            if not isinstance(source.name, str) or not callable(source.fn):
                raise InvalidArgument("Invalid step arguments: expected a name and a callable")
            self._steps.append(NamedStep(name=source.name, run=source.fn))
            return self

        if isinstance(source, SubChain) and isinstance(source.chain, Chain):
            other = source.chain
            self._steps.extend(other._steps)
            self.context.merge(other.context)
            return self

        raise InvalidArgument(
            "Invalid step arguments: expected (name, fn) or a Chain, "
            f"got {type(source).__name__}"
        )

    async def execute(self, file_path: Optional[str] = None) -> None:
        """
        Run every step in order, stopping at the first one that raises.

        The step's exception is logged and re-raised unchanged. The scenario
        record is closed and a session created by this chain is closed on
        every exit path.
        """
        if self.status is not ChainStatus.NOT_STARTED:
            _loguru.warning(
                "Chain {!r} is executed again from status {}; shared state is not reset",
                self.name,
                self.status.value,
            )

        self._logger.start_scenario(self.name, file_path)
        self.status = ChainStatus.RUNNING
        failed = True

        try:
            try:
                for step in self._steps:
                    self._logger.start_step(step.name)
                    try:
                        result = step.run(self.context)
                        if inspect.isawaitable(result):
                            await result
                    except Exception as exc:
                        self._logger.log_error(f'Error in step "{step.name}": {exc}')
                        self._logger.end_step()
                        raise
                    self._logger.end_step()
                failed = False
            finally:
                record = self._logger.end_scenario()
                self.close()
                if failed or (record is not None and not record.success):
                    self.status = ChainStatus.FAILED
                else:
                    self.status = ChainStatus.COMPLETED
        except Exception as exc:
            self._logger.log_error(f'Error in scenario "{self.name}": {exc}')
            raise

    def close(self) -> None:
        """Release the HTTP session this chain (or the chain it was built from) created."""
        if self._owned_client is not None:
            self._owned_client.close()

    def __enter__(self) -> "Chain":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Chain(name={self.name!r}, steps={len(self._steps)}, status={self.status.value})"
