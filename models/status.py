from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any


class DocumentError(ValueError):
    """Raised when a provider payload does not match the status document shape."""


def _parse_timestamp(raw: Any) -> datetime | None:
    """Parse ISO 8601 timestamps that may include fractional seconds."""
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise DocumentError(f"timestamp must be a string, got {type(raw).__name__}")
    cleaned = raw.replace("Z", "+00:00")
    try:
        parsed = datetime.fromisoformat(cleaned)
    except ValueError as exc:
        raise DocumentError(f"invalid timestamp {raw!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _format_timestamp(value: datetime | None) -> str | None:
    """RFC 3339 with a `Z` suffix for UTC, as the provider writes it."""
    if value is None:
        return None
    text = value.isoformat()
    if value.utcoffset() == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def _string(data: dict[str, Any], key: str) -> str:
    """A JSON string field; `null` or a missing key decodes to an empty string."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DocumentError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _object(payload: Any, what: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise DocumentError(f"{what} must be an object")
    return payload


def _list(payload: dict[str, Any], key: str) -> list[Any]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DocumentError(f"'{key}' must be a list")
    return value


@dataclass(frozen=True)
class Translation:
    """One locale-tagged piece of text (titles and update translations)."""

    locale: str
    content: str

    @classmethod
    def from_dict(cls, payload: Any) -> Translation:
        data = _object(payload, "translation")
        return cls(locale=_string(data, "locale"), content=_string(data, "content"))


def _translations(payload: dict[str, Any], key: str) -> tuple[Translation, ...]:
    entries = tuple(Translation.from_dict(t) for t in _list(payload, key))
    if not entries:
        raise DocumentError(f"'{key}' must contain at least one entry")
    return entries


@dataclass(frozen=True)
class GameConfig:
    """A configured game: display name, provider base URL and its regions."""

    name: str
    base: str
    regions: tuple[str, ...] = ()


@dataclass(frozen=True)
class RawUpdate:
    id: int | None
    created_at: datetime | None
    updated_at: datetime | None
    publish: bool
    author: str
    publish_locations: tuple[str, ...]
    translations: tuple[Translation, ...]

    @classmethod
    def from_dict(cls, payload: Any) -> RawUpdate:
        data = _object(payload, "update")
        return cls(
            id=data.get("id"),
            created_at=_parse_timestamp(data.get("created_at")),
            updated_at=_parse_timestamp(data.get("updated_at")),
            publish=bool(data.get("publish", False)),
            author=_string(data, "author"),
            publish_locations=tuple(_list(data, "publish_locations")),
            translations=_translations(data, "translations"),
        )


@dataclass(frozen=True)
class RawEvent:
    """A maintenance or incident entry exactly as the provider reports it.

    ``maintenance_status``, ``incident_severity`` and ``updated_at`` are
    provider-defined values kept as raw JSON; they are never interpreted.
    """

    id: int | None
    created_at: datetime | None
    archive_at: datetime | None
    platforms: tuple[str, ...]
    maintenance_status: Any
    incident_severity: Any
    updated_at: Any
    titles: tuple[Translation, ...]
    updates: tuple[RawUpdate, ...]

    @classmethod
    def from_dict(cls, payload: Any) -> RawEvent:
        data = _object(payload, "event")
        return cls(
            id=data.get("id"),
            created_at=_parse_timestamp(data.get("created_at")),
            archive_at=_parse_timestamp(data.get("archive_at")),
            platforms=tuple(_list(data, "platforms")),
            maintenance_status=data.get("maintenance_status"),
            incident_severity=data.get("incident_severity"),
            updated_at=data.get("updated_at"),
            titles=_translations(data, "titles"),
            updates=tuple(RawUpdate.from_dict(u) for u in _list(data, "updates")),
        )


@dataclass(frozen=True)
class RawStatusDocument:
    """One region's status document as served by the provider."""

    id: str
    name: str
    locales: tuple[str, ...] = ()
    maintenances: tuple[RawEvent, ...] = ()
    incidents: tuple[RawEvent, ...] = ()

    @classmethod
    def from_dict(cls, payload: Any) -> RawStatusDocument:
        data = _object(payload, "status document")
        return cls(
            id=_string(data, "id"),
            name=_string(data, "name"),
            locales=tuple(_list(data, "locales")),
            maintenances=tuple(RawEvent.from_dict(e) for e in _list(data, "maintenances")),
            incidents=tuple(RawEvent.from_dict(e) for e in _list(data, "incidents")),
        )


@dataclass(frozen=True)
class NormalizedUpdate:
    created_at: datetime | None
    updated_at: datetime | None
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "created_at": _format_timestamp(self.created_at),
            "updated_at": _format_timestamp(self.updated_at),
            "description": self.description,
        }


@dataclass(frozen=True)
class NormalizedEvent:
    """A maintenance or incident with its text resolved to one language."""

    description: str
    created_at: datetime | None
    platforms: tuple[str, ...]
    maintenance_status: Any
    incident_severity: Any
    updated_at: Any
    updates: tuple[NormalizedUpdate, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "created_at": _format_timestamp(self.created_at),
            "platforms": list(self.platforms),
            "maintenance_status": self.maintenance_status,
            "incident_severity": self.incident_severity,
            "updates": [u.to_dict() for u in self.updates],
            "updated_at": self.updated_at,
        }


@dataclass(frozen=True)
class RegionSnapshot:
    """Normalized status for one region.

    Fields:
        name:         Region identifier from configuration.
        maintenances: Normalized maintenance events, provider order.
        incidents:    Normalized incident events, provider order.
        available:    False when the region document could not be fetched
                      or decoded; both event lists are then empty.
        error:        Failure description for an unavailable region.
    """

    name: str
    maintenances: tuple[NormalizedEvent, ...] = ()
    incidents: tuple[NormalizedEvent, ...] = ()
    available: bool = True
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "maintenances": [e.to_dict() for e in self.maintenances],
            "incidents": [e.to_dict() for e in self.incidents],
            "available": self.available,
            "error": self.error,
        }


@dataclass(frozen=True)
class GameSnapshot:
    """Aggregated status for one game across its configured regions."""

    name: str
    regions: tuple[RegionSnapshot, ...] = field(default_factory=tuple)

    @property
    def partial(self) -> bool:
        return any(not r.available for r in self.regions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "regions": [r.to_dict() for r in self.regions],
            "partial": self.partial,
        }
