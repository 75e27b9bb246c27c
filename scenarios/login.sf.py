import asyncio

from flows import build_login
from scenario_flow import setup_console_logging

if __name__ == "__main__":
    setup_console_logging()
    asyncio.run(build_login().execute(__file__))
