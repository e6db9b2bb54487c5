from models.status import (
    DocumentError,
    GameConfig,
    GameSnapshot,
    NormalizedEvent,
    NormalizedUpdate,
    RawEvent,
    RawStatusDocument,
    RawUpdate,
    RegionSnapshot,
    Translation,
)

__all__ = [
    "DocumentError",
    "GameConfig",
    "GameSnapshot",
    "NormalizedEvent",
    "NormalizedUpdate",
    "RawEvent",
    "RawStatusDocument",
    "RawUpdate",
    "RegionSnapshot",
    "Translation",
]
