# scenario_flow/infrastructure/url/base_url_resolver.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


def join_url(base_url: str, parts: Iterable[str]) -> str:
    clean = [p.strip("/") for p in [base_url, *parts]]
    return "/".join(clean)


@dataclass(frozen=True)
class BaseUrlResolver:
    base_url: str

    def resolve_url(self, *parts: str) -> str:
        return join_url(self.base_url, parts)
