from core.config import AppConfig, ConfigError, load_config
from core.locale import resolve_locale
from core.scheduler import AggregationScheduler
from core.store import GameNotFound, SnapshotStore
from core.transform import transform

__all__ = [
    "AggregationScheduler",
    "AppConfig",
    "ConfigError",
    "GameNotFound",
    "SnapshotStore",
    "load_config",
    "resolve_locale",
    "transform",
]
