# scenario_flow/application/ports/http_client.py
from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class HttpResponse:
    """
    Buffered HTTP response.

    The body is read off the wire once; ``text`` and ``json()`` decode the
    stored bytes each time, so logging a preview never consumes what the
    caller reads afterwards.
    """

    status: int
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    content: bytes = b""
    reason: str = ""
    encoding: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 299

    @property
    def text(self) -> str:
        return self.content.decode(self.encoding or "utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.text)


class HttpClientPort(ABC):
    @abstractmethod
    def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[Union[str, bytes]] = None,
    ) -> HttpResponse:
        ...
