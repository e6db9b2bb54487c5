from datetime import datetime, timezone

from core.transform import build_region_snapshot, transform, unavailable_region
from models.status import RawEvent, RawStatusDocument
from tests.conftest import make_document, make_event


def _events(*payloads):
    return [RawEvent.from_dict(p) for p in payloads]


def test_preserves_count_and_order():
    raw = _events(
        make_event([("en_US", "first")], id=1),
        make_event([("en_US", "second")], id=2),
        make_event([("en_US", "third")], id=3),
    )

    result = transform(raw)

    assert [e.description for e in result] == ["first", "second", "third"]


def test_event_without_updates_has_empty_updates():
    (event,) = transform(_events(make_event([("en_US", "Outage")])))
    assert event.updates == ()


def test_resolves_titles_and_update_translations():
    raw = _events(
        make_event(
            [("fr_FR", "Panne"), ("en_US", "Outage")],
            updates=[
                [("de_DE", "Wir arbeiten"), ("en_US", "Working on it")],
                [("ko_KR", "해결됨"), ("fr_FR", "Résolu")],
            ],
        )
    )

    (event,) = transform(raw)

    assert event.description == "Outage"
    assert [u.description for u in event.updates] == ["Working on it", "해결됨"]
    assert event.updates[0].created_at == datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)
    assert event.updates[0].updated_at == datetime(2024, 3, 1, 12, 45, tzinfo=timezone.utc)


def test_copies_passthrough_fields():
    raw = _events(
        make_event(
            [("en_US", "Outage")],
            platforms=["android", "ios"],
            maintenance_status="scheduled",
            incident_severity={"level": "critical"},
            updated_at="2024-03-01T13:00:00Z",
        )
    )

    (event,) = transform(raw)

    assert event.platforms == ("android", "ios")
    assert event.maintenance_status == "scheduled"
    assert event.incident_severity == {"level": "critical"}
    assert event.updated_at == "2024-03-01T13:00:00Z"
    assert event.created_at == datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def test_empty_input():
    assert transform([]) == []


def test_build_region_snapshot_splits_lists(outage_document):
    outage_document["maintenances"] = [make_event([("en_US", "Patch 14.5")])]
    doc = RawStatusDocument.from_dict(outage_document)

    region = build_region_snapshot("na", doc)

    assert region.name == "na"
    assert region.available
    assert [e.description for e in region.incidents] == ["Outage"]
    assert [e.description for e in region.maintenances] == ["Patch 14.5"]


def test_build_region_snapshot_with_empty_document():
    region = build_region_snapshot("eu", RawStatusDocument.from_dict(make_document("eu")))
    assert region.incidents == ()
    assert region.maintenances == ()


def test_unavailable_region():
    region = unavailable_region("kr", "timed out")
    assert not region.available
    assert region.error == "timed out"
    assert region.incidents == () and region.maintenances == ()
