import asyncio

from flows import bearer, build_login
from scenario_flow import Chain, Request, StepError, setup_console_logging


async def search_with_query(ctx) -> None:
    res = await ctx.dispatch(
        Request(path="/api/search?q=test&limit=5&category=books", headers=bearer(ctx))
    )
    data = res.json()
    if data["query"] != "test":
        raise StepError(f"Expected query 'test', got {data['query']!r}")
    if data["limit"] != 5:
        raise StepError(f"Expected limit 5, got {data['limit']}")
    if data["category"] != "books":
        raise StepError(f"Expected category 'books', got {data['category']!r}")
    if not isinstance(data["results"], list):
        raise StepError("Expected results to be a list")


async def search_with_small_limit(ctx) -> None:
    res = await ctx.dispatch(
        Request(path="/api/search?q=javascript&limit=2&category=programming", headers=bearer(ctx))
    )
    results = res.json()["results"]
    if len(results) > 2:
        raise StepError(f"Expected at most 2 results, got {len(results)}")


async def search_with_defaults(ctx) -> None:
    res = await ctx.dispatch(Request(path="/api/search", headers=bearer(ctx)))
    data = res.json()
    if (data["query"], data["limit"], data["category"]) != ("", 10, "all"):
        raise StepError(f"Unexpected defaults: {data}")


search = (
    Chain("Search with Query Parameters", build_login())
    .add_step("Search with query parameters", search_with_query)
    .add_step("Search with different parameters", search_with_small_limit)
    .add_step("Search without query parameter", search_with_defaults)
)

if __name__ == "__main__":
    setup_console_logging()
    asyncio.run(search.execute(__file__))
