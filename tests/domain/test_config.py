from __future__ import annotations

import dataclasses

import pytest

from scenario_flow.domain.config import API_BASE_URL_ENV, Config
from scenario_flow.domain.exceptions import InvalidArgument


def test_config_is_frozen() -> None:
    config = Config("https://api.example.com")

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.api_base_url = "https://other.example.com"  # type: ignore[misc]


def test_config_rejects_empty_base_url() -> None:
    with pytest.raises(InvalidArgument):
        Config("  ")


def test_from_env_reads_variable(monkeypatch) -> None:
    monkeypatch.setenv(API_BASE_URL_ENV, "http://env.example.com")

    config = Config.from_env(default="http://default.example.com")

    assert config.api_base_url == "http://env.example.com"


def test_from_env_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.delenv(API_BASE_URL_ENV, raising=False)

    config = Config.from_env(default="http://default.example.com")

    assert config.api_base_url == "http://default.example.com"


def test_from_env_without_value_or_default_raises(monkeypatch) -> None:
    monkeypatch.delenv(API_BASE_URL_ENV, raising=False)

    with pytest.raises(InvalidArgument, match=API_BASE_URL_ENV):
        Config.from_env()
