#!/usr/bin/env python3
"""Create the unique and sort indexes the application relies on.

Safe to run repeatedly; existing indexes are left as they are.

Usage:
    python scripts/ensure_indexes.py
"""

import asyncio
import sys

import logfire

from quill.config import Settings
from quill.persistence.database import create_client, get_database
from quill.persistence.indexes import ensure_indexes
from quill.util.logging import setup_logging
from quill.util.observability import configure_logfire


async def run(settings: Settings) -> None:
    client = create_client(settings)
    try:
        await ensure_indexes(get_database(client, settings), settings)
    finally:
        client.close()


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("ensure_indexes", database=settings.mongo.database):
        asyncio.run(run(settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
