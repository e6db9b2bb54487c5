from __future__ import annotations

import asyncio
from typing import Any

import pytest

from models.status import RawStatusDocument
from providers.base import FetchError, StatusProvider


def make_event(
    titles: list[tuple[str, str]],
    updates: list[list[tuple[str, str]]] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build a provider-shaped incident/maintenance payload."""
    event: dict[str, Any] = {
        "id": extra.pop("id", 1),
        "created_at": "2024-03-01T12:00:00.000000+00:00",
        "archive_at": None,
        "platforms": ["windows"],
        "maintenance_status": None,
        "incident_severity": "warning",
        "updated_at": None,
        "titles": [{"locale": loc, "content": text} for loc, text in titles],
        "updates": [
            {
                "id": i,
                "created_at": "2024-03-01T12:30:00Z",
                "updated_at": "2024-03-01T12:45:00Z",
                "publish": True,
                "author": "Riot",
                "publish_locations": ["riotclient"],
                "translations": [{"locale": loc, "content": text} for loc, text in tr],
            }
            for i, tr in enumerate(updates or [])
        ],
    }
    event.update(extra)
    return event


def make_document(
    region: str,
    incidents: list[dict[str, Any]] | None = None,
    maintenances: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    return {
        "id": region.upper(),
        "name": region,
        "locales": ["en_US", "fr_FR"],
        "maintenances": maintenances or [],
        "incidents": incidents or [],
    }


class FakeProvider(StatusProvider):
    """In-memory provider.

    ``documents`` maps region -> payload dict; a region mapped to an
    exception instance fails with it.  ``delays`` maps region -> seconds
    to sleep before answering.
    """

    def __init__(
        self,
        documents: dict[str, Any],
        delays: dict[str, float] | None = None,
    ) -> None:
        super().__init__(client=None)  # type: ignore[arg-type]
        self._documents = documents
        self._delays = delays or {}
        self.requested: list[tuple[str, str]] = []
        self.finished: list[str] = []

    @property
    def name(self) -> str:
        return "Fake"

    async def fetch_region(self, base_url: str, region: str) -> RawStatusDocument:
        self.requested.append((base_url, region))
        await asyncio.sleep(self._delays.get(region, 0))
        self.finished.append(region)
        payload = self._documents.get(region)
        if isinstance(payload, Exception):
            raise payload
        if payload is None:
            raise FetchError(region, f"no document for {region}")
        return RawStatusDocument.from_dict(payload)


@pytest.fixture
def outage_document() -> dict[str, Any]:
    return make_document(
        "na",
        incidents=[make_event([("en_US", "Outage"), ("fr_FR", "Panne")])],
    )
