"""
scenario_flow: chain async HTTP steps that share state and a dispatcher.

    from scenario_flow import Chain, Config, Request

    login = Chain("User Login", Config("http://localhost:3323"))

    async def exec_login(ctx):
        res = await ctx.dispatch(Request(path="/login", method="POST", json={"username": "demouser"}))
        ctx.add_state("token", res.json()["token"])

    login.add_step("Exec Login", exec_login)
    asyncio.run(login.execute())
"""
from scenario_flow.application.chain import Chain
from scenario_flow.application.dispatcher import create_dispatcher
from scenario_flow.application.ports.http_client import HttpClientPort, HttpResponse
from scenario_flow.application.ports.requests_client import RequestsSessionHttpClient
from scenario_flow.application.scenario_logger import ScenarioLogger, default_logger, format_duration
from scenario_flow.domain.config import Config
from scenario_flow.domain.context import MISSING, Context
from scenario_flow.domain.exceptions import (
    HttpError,
    InvalidArgument,
    LoggerStateError,
    NetworkError,
    ScenarioFlowError,
    StepError,
)
from scenario_flow.domain.records import ChainStatus, LoggerState, ScenarioRecord, StepRecord
from scenario_flow.domain.request import Request
from scenario_flow.domain.steps import NamedFunction, NamedStep, SubChain
from scenario_flow.infrastructure.logging.log_setup import setup_console_logging

__all__ = [
    "Chain",
    "ChainStatus",
    "Config",
    "Context",
    "HttpClientPort",
    "HttpError",
    "HttpResponse",
    "InvalidArgument",
    "LoggerState",
    "LoggerStateError",
    "MISSING",
    "NamedFunction",
    "NamedStep",
    "NetworkError",
    "Request",
    "RequestsSessionHttpClient",
    "ScenarioFlowError",
    "ScenarioLogger",
    "ScenarioRecord",
    "StepError",
    "StepRecord",
    "SubChain",
    "create_dispatcher",
    "default_logger",
    "format_duration",
    "setup_console_logging",
]
