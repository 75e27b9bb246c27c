# scenario_flow/application/ports/requests_client.py
from __future__ import annotations

import requests
from typing import Dict, Optional, Union

from scenario_flow.application.ports.http_client import HttpClientPort, HttpResponse
from scenario_flow.domain.exceptions import NetworkError


class RequestsSessionHttpClient(HttpClientPort):
    def __init__(self, base_headers: Optional[Dict[str, str]] = None, timeout_sec: Optional[float] = None):
        self._session = requests.Session()
        self._base_headers = base_headers or {}
        # None: wait as long as the server does
        self._timeout = timeout_sec

    def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[Union[str, bytes]] = None,
    ) -> HttpResponse:
        merged = dict(self._base_headers)
        if headers:
            merged.update(headers)

        try:
            resp = self._session.request(
                method=method.upper(),
                url=url,
                headers=merged,
                data=body,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise NetworkError(f"{method.upper()} {url} failed: {exc}") from exc

        return HttpResponse(
            status=resp.status_code,
            url=str(resp.url),
            headers=dict(resp.headers),
            content=resp.content,
            reason=resp.reason or "",
            encoding=resp.encoding,
        )

    def close(self) -> None:
        self._session.close()
