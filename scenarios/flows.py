"""Reusable chains shared by the example scenarios."""
from dotenv import load_dotenv

from scenario_flow import Chain, Config, Request, StepError

load_dotenv()

DEFAULT_API_BASE_URL = "http://localhost:3323/"


def bearer(ctx) -> dict:
    token = ctx.get_state("token")
    if not token:
        raise StepError("Token not found")
    return {"Authorization": f"Bearer {token}"}


async def exec_login(ctx) -> None:
    res = await ctx.dispatch(
        Request(
            path="/login",
            method="POST",
            json={"username": "demouser", "password": "password"},
        )
    )
    ctx.add_state("token", res.json()["token"])


def build_login() -> Chain:
    config = Config.from_env(default=DEFAULT_API_BASE_URL)
    return Chain("User Login", config).add_step("Exec Login", exec_login)
