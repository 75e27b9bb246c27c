# scenario_flow/application/dispatcher.py
from __future__ import annotations

import asyncio
import json
import time
from typing import Dict, Optional, Tuple, Union

from scenario_flow.application.ports.http_client import HttpClientPort, HttpResponse
from scenario_flow.application.scenario_logger import ScenarioLogger
from scenario_flow.application.services.redactor import mask_json
from scenario_flow.domain.config import Config
from scenario_flow.domain.context import Dispatch
from scenario_flow.domain.exceptions import HttpError
from scenario_flow.domain.request import Request
from scenario_flow.infrastructure.url.base_url_resolver import BaseUrlResolver

BINARY_BODY_PLACEHOLDER = "[Binary Data]"
UNREADABLE_BODY_PLACEHOLDER = "[Unable to read response body]"


def _encode_body(req: Request) -> Tuple[Optional[Union[str, bytes]], Dict[str, str]]:
    headers = dict(req.headers or {})
    if req.json is None:
        return req.body, headers
    if not any(k.lower() == "content-type" for k in headers):
        headers["Content-Type"] = "application/json"
    return json.dumps(req.json, ensure_ascii=False), headers


def _request_preview(req: Request) -> Optional[str]:
    if req.json is not None:
        return json.dumps(mask_json(req.json), ensure_ascii=False)
    if req.body is None:
        return None
    if isinstance(req.body, str):
        return req.body
    return BINARY_BODY_PLACEHOLDER


def _response_preview(resp: HttpResponse) -> str:
    try:
        return resp.text
    except Exception:
        return UNREADABLE_BODY_PLACEHOLDER


class Dispatcher:
    """Instrumented HTTP call bound to one chain's base URL."""

    def __init__(self, config: Config, http_client: HttpClientPort, logger: ScenarioLogger):
        self._config = config
        self._resolver = BaseUrlResolver(config.api_base_url)
        self._http = http_client
        self._logger = logger

    @property
    def config(self) -> Config:
        return self._config

    async def __call__(self, req: Request) -> HttpResponse:
        url = self._resolver.resolve_url(*req.url_parts())
        method = (req.method or "GET").upper()
        body, headers = _encode_body(req)

        self._logger.log_request(method, url, _request_preview(req))

        t0 = time.perf_counter()
        resp = await asyncio.to_thread(self._http.request, method, url, headers, body)
        duration_ms = (time.perf_counter() - t0) * 1000

        self._logger.log_response(resp.status, resp.reason, duration_ms, _response_preview(resp))

        if not resp.ok:
            error = HttpError(resp.status, url=url, response=resp)
            self._logger.log_error(str(error))
            raise error

        return resp


def create_dispatcher(config: Config, http_client: HttpClientPort, logger: ScenarioLogger) -> Dispatch:
    return Dispatcher(config, http_client, logger)
