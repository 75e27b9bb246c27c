# scenario_flow/application/services/redactor.py
from __future__ import annotations

from typing import Any

SENSITIVE_KEYS = {"password", "passwd", "pass", "authorization", "cookie", "set-cookie", "secret", "api_key"}
MASK = "********"


def is_sensitive(key: Any) -> bool:
    return isinstance(key, str) and key.lower() in SENSITIVE_KEYS


def mask_json(value: Any) -> Any:
    """Mask sensitive keys at any depth of a decoded JSON value."""
    if isinstance(value, dict):
        return {k: MASK if is_sensitive(k) and v is not None else mask_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [mask_json(v) for v in value]
    return value
