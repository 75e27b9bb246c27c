"""
Mock HTTP client for testing chains without a network.
Returns canned responses keyed by (method, url) and records every call.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from scenario_flow.application.ports.http_client import HttpClientPort, HttpResponse


@dataclass(frozen=True)
class RecordedCall:
    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[Union[str, bytes]]


def json_response(payload: Any, status: int = 200, reason: str = "OK") -> Callable[[str], HttpResponse]:
    def build(url: str) -> HttpResponse:
        return HttpResponse(
            status=status,
            url=url,
            headers={"Content-Type": "application/json"},
            content=json.dumps(payload).encode("utf-8"),
            reason=reason,
        )
    return build


class MockHttpClient(HttpClientPort):
    def __init__(self, routes: Optional[Dict[Tuple[str, str], Callable[[str], HttpResponse]]] = None):
        self._routes = dict(routes or {})
        self.calls: List[RecordedCall] = []
        self.raise_on_request: Optional[Exception] = None

    def route(self, method: str, url: str, build: Callable[[str], HttpResponse]) -> None:
        self._routes[(method.upper(), url)] = build

    def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[Union[str, bytes]] = None,
    ) -> HttpResponse:
        self.calls.append(RecordedCall(method=method, url=url, headers=dict(headers or {}), body=body))
        if self.raise_on_request is not None:
            raise self.raise_on_request

        build = self._routes.get((method.upper(), url))
        if build is None:
            # Default 200
            return HttpResponse(status=200, url=url, content=b"mock response", reason="OK")
        return build(url)
