from __future__ import annotations

from scenario_flow.application.services.redactor import MASK, mask_json


def test_mask_json_walks_dicts_and_lists() -> None:
    payload = {
        "username": "u",
        "Password": "p",
        "profile": {"secret": "s", "tags": ["a", {"api_key": "k"}]},
        "token": None,
    }

    assert mask_json(payload) == {
        "username": "u",
        "Password": MASK,
        "profile": {"secret": MASK, "tags": ["a", {"api_key": MASK}]},
        "token": None,
    }


def test_mask_json_leaves_none_values_and_scalars() -> None:
    assert mask_json({"password": None}) == {"password": None}
    assert mask_json("password") == "password"
    assert mask_json(3) == 3


def test_mask_json_does_not_mutate_input() -> None:
    payload = {"user": {"password": "p"}}

    mask_json(payload)

    assert payload == {"user": {"password": "p"}}
