from __future__ import annotations

from collections.abc import Iterable

from core.locale import resolve_locale
from models.status import (
    NormalizedEvent,
    NormalizedUpdate,
    RawEvent,
    RawStatusDocument,
    RegionSnapshot,
)


def transform(raw_events: Iterable[RawEvent]) -> list[NormalizedEvent]:
    """Convert raw provider events into the normalized response shape.

    Output order matches input order for both events and their updates.
    Opaque provider values are copied through untouched.
    """
    return [
        NormalizedEvent(
            description=resolve_locale(event.titles),
            created_at=event.created_at,
            platforms=event.platforms,
            maintenance_status=event.maintenance_status,
            incident_severity=event.incident_severity,
            updated_at=event.updated_at,
            updates=tuple(
                NormalizedUpdate(
                    created_at=update.created_at,
                    updated_at=update.updated_at,
                    description=resolve_locale(update.translations),
                )
                for update in event.updates
            ),
        )
        for event in raw_events
    ]


def build_region_snapshot(region: str, document: RawStatusDocument) -> RegionSnapshot:
    return RegionSnapshot(
        name=region,
        maintenances=tuple(transform(document.maintenances)),
        incidents=tuple(transform(document.incidents)),
    )


def unavailable_region(region: str, error: str) -> RegionSnapshot:
    """Placeholder snapshot for a region whose document could not be loaded."""
    return RegionSnapshot(name=region, available=False, error=error)
