"""
TikSave - Entry Point
=====================

`python -m tiksave <link>` or the `tiksave` console script.

Author: حَـــــنَّـــــا
"""

import asyncio
import sys

from dotenv import load_dotenv

# Environment must be loaded before the config module reads it
load_dotenv()

from tiksave.app import main  # noqa: E402
from tiksave.core.logger import log  # noqa: E402
from tiksave.utils.http import http_session  # noqa: E402


async def _run(argv: list[str]) -> int:
    """Run the app and release the shared HTTP session."""
    try:
        return await main(argv)
    finally:
        await http_session.close()


def run() -> None:
    """Console script entry point."""
    try:
        code = asyncio.run(_run(sys.argv[1:]))
    except KeyboardInterrupt:
        log.info("Received keyboard interrupt")
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    run()
