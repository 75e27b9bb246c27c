# scenario_flow/domain/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from scenario_flow.domain.exceptions import InvalidArgument

API_BASE_URL_ENV = "SCENARIO_FLOW_API_BASE_URL"


@dataclass(frozen=True)
class Config:
    api_base_url: str

    def __post_init__(self) -> None:
        if not isinstance(self.api_base_url, str) or not self.api_base_url.strip():
            raise InvalidArgument("Config.api_base_url must be a non-empty string")

    @classmethod
    def from_env(cls, default: Optional[str] = None, env_var: str = API_BASE_URL_ENV) -> "Config":
        """
        Build a Config from the environment.

        Call ``dotenv.load_dotenv()`` first when values live in a ``.env`` file.
        """
        value = os.environ.get(env_var) or default
        if not value:
            raise InvalidArgument(f"{env_var} is not set and no default was given")
        return cls(api_base_url=value)
