from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from core.store import SnapshotStore
from core.transform import build_region_snapshot, unavailable_region
from models.status import GameConfig, GameSnapshot, RawStatusDocument, RegionSnapshot
from providers.base import StatusProvider, StatusProviderError

log = logging.getLogger(__name__)


class AggregationScheduler:
    """Builds the snapshot table with a two-tier fan-out.

    One task is spawned per configured game and, inside it, one task per
    region.  Each game task joins exactly its own region tasks before
    transforming the documents, and the top-level build joins every game
    task before anything is published to the ``SnapshotStore``.

    A region whose fetch fails is reported as unavailable in its game's
    snapshot; the other regions and games are unaffected.
    """

    def __init__(self, provider: StatusProvider, store: SnapshotStore) -> None:
        self._provider = provider
        self._store = store

    async def _region_worker(
        self, game: GameConfig, region: str
    ) -> RawStatusDocument | StatusProviderError:
        try:
            return await self._provider.fetch_region(game.base, region)
        except StatusProviderError as exc:
            log.error("Fetch failed for %s/%s: %s", game.name, region, exc)
            return exc

    async def _game_worker(self, game: GameConfig) -> GameSnapshot:
        results = await asyncio.gather(
            *(
                asyncio.create_task(
                    self._region_worker(game, region),
                    name=f"region-{game.name}-{region}",
                )
                for region in game.regions
            )
        )

        regions: list[RegionSnapshot] = []
        for region, result in zip(game.regions, results):
            if isinstance(result, StatusProviderError):
                regions.append(unavailable_region(region, str(result)))
            else:
                regions.append(build_region_snapshot(region, result))

        snapshot = GameSnapshot(name=game.name, regions=tuple(regions))
        if snapshot.partial:
            log.warning(
                "Game %s: %d of %d region(s) unavailable",
                game.name,
                sum(not r.available for r in snapshot.regions),
                len(snapshot.regions),
            )
        return snapshot

    async def build_snapshots(self, games: Sequence[GameConfig]) -> dict[str, GameSnapshot]:
        """Fetch and normalize every game; return the table without publishing it."""
        snapshots = await asyncio.gather(
            *(
                asyncio.create_task(self._game_worker(g), name=f"game-{g.name}")
                for g in games
            )
        )
        return {s.name: s for s in snapshots}

    async def refresh(self, games: Sequence[GameConfig]) -> dict[str, GameSnapshot]:
        """Rebuild the whole table and publish it to the store in one swap."""
        log.info(
            "Building snapshots for %d game(s) via %s",
            len(games),
            self._provider.name,
        )
        table = await self.build_snapshots(games)
        self._store.replace(table)
        log.info(
            "Published %d snapshot(s), %d partial",
            self._store.size,
            sum(s.partial for s in table.values()),
        )
        return table

    async def run(self, games: Sequence[GameConfig], interval_seconds: float) -> None:
        """Rebuild the table every ``interval_seconds``, forever.

        The first rebuild happens after one interval; callers are expected
        to have built the initial table with ``refresh()``.
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        log.info("Periodic rebuild every %ss", interval_seconds)
        while True:
            await asyncio.sleep(interval_seconds)
            try:
                await self.refresh(games)
            except Exception:
                log.exception("Snapshot rebuild failed, keeping previous table")
