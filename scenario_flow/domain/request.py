# scenario_flow/domain/request.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from scenario_flow.domain.exceptions import InvalidArgument


@dataclass(frozen=True)
class Request:
    """
    One HTTP call relative to a chain's base URL.

    Give either ``path`` ("/api/search?q=x") or ``path_segments``
    (["api", "search"]), never both.
    """

    path: Optional[str] = None
    path_segments: Optional[Sequence[str]] = None
    method: str = "GET"
    headers: Optional[Dict[str, str]] = None
    body: Optional[Union[str, bytes]] = None
    json: Any = None

    def __post_init__(self) -> None:
        if (self.path is None) == (self.path_segments is None):
            raise InvalidArgument("Request expects exactly one of path or path_segments")
        if self.path_segments is not None and isinstance(self.path_segments, str):
            raise InvalidArgument("Request.path_segments must be a sequence of strings, use path for a string")
        if self.body is not None and self.json is not None:
            raise InvalidArgument("Request accepts body or json, not both")

    def url_parts(self) -> Tuple[str, ...]:
        if self.path is not None:
            return (self.path,)
        return tuple(self.path_segments or ())
