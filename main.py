"""Game Status -- entry point.

Assembles the aggregation pipeline:

    Config (YAML)
        -> AggregationScheduler (one asyncio task per game,
           one per region inside it)
        -> SnapshotStore (whole-table swap on every rebuild)
        -> FastAPI app served by uvicorn

A shared httpx.AsyncClient is injected into the provider.  The table is
built once before the server starts; periodic rebuilds are opt-in through
``fetch.refresh_interval``.
"""
from __future__ import annotations

import asyncio
import logging
import os

import httpx
import uvicorn

from api.app import create_app
from core.config import load_config
from core.scheduler import AggregationScheduler
from core.store import SnapshotStore
from providers.riot_provider import RiotStatusProvider

log = logging.getLogger(__name__)


async def run() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    config = load_config()

    async with httpx.AsyncClient(timeout=config.fetch.request_timeout) as client:
        store = SnapshotStore()
        scheduler = AggregationScheduler(
            provider=RiotStatusProvider(client=client, max_retries=config.fetch.max_retries),
            store=store,
        )

        await scheduler.refresh(config.games)

        tasks: list[asyncio.Task[None]] = []
        if config.fetch.refresh_interval:
            tasks.append(
                asyncio.create_task(
                    scheduler.run(config.games, config.fetch.refresh_interval),
                    name="rebuild",
                )
            )

        log.info("Serving %d game(s) on %s:%d", len(config.games), config.host, config.port)
        server = uvicorn.Server(
            uvicorn.Config(create_app(store), host=config.host, port=config.port)
        )
        try:
            await server.serve()
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)


def main() -> None:
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        print("\nShutting down.")


if __name__ == "__main__":
    main()
