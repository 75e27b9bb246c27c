import asyncio

from flows import bearer, build_login
from scenario_flow import Chain, Request, setup_console_logging


async def get_authorized_data(ctx) -> None:
    res = await ctx.dispatch(Request(path_segments=["api", "data"], headers=bearer(ctx)))
    ctx.add_state("items", res.json()["data"])


get_data = Chain("Get some data", build_login()).add_step("Get authorized data", get_authorized_data)

if __name__ == "__main__":
    setup_console_logging()
    asyncio.run(get_data.execute(__file__))
