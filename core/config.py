"""Configuration loading.

The configuration file is YAML::

    games:
      - name: valorant
        base: https://valorant.secure.dyn.riotcdn.net/channels/public/x/status/
        regions: [na, eu, ap, kr]
    server:            # optional
      host: 0.0.0.0
      port: 8000
    fetch:             # optional, everything off by default
      request_timeout: 10
      max_retries: 2
      refresh_interval: 300

The file path comes from ``CONFIG_FILE`` and defaults to ``config.yaml``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from models.status import GameConfig

DEFAULT_CONFIG_FILE = "config.yaml"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


class ConfigError(Exception):
    """The configuration file is missing, unreadable or malformed."""


@dataclass(frozen=True)
class FetchSettings:
    """Outbound fetch options.  ``None``/0 means the feature is off."""

    request_timeout: float | None = None
    max_retries: int = 0
    refresh_interval: float | None = None


@dataclass(frozen=True)
class AppConfig:
    games: tuple[GameConfig, ...] = ()
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    fetch: FetchSettings = field(default_factory=FetchSettings)


def config_path() -> Path:
    return Path(os.getenv("CONFIG_FILE") or DEFAULT_CONFIG_FILE)


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be a mapping")
    return value


def _optional_number(section: dict[str, Any], key: str) -> float | None:
    value = section.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"'{key}' must be a positive number")
    return float(value)


def _parse_game(raw: Any, index: int) -> GameConfig:
    if not isinstance(raw, dict):
        raise ConfigError(f"games[{index}] must be a mapping")

    name = raw.get("name")
    base = raw.get("base")
    regions = raw.get("regions") or []
    if not isinstance(name, str) or not name:
        raise ConfigError(f"games[{index}].name must be a non-empty string")
    if not isinstance(base, str) or not base:
        raise ConfigError(f"games[{index}].base must be a non-empty string")
    if not isinstance(regions, list):
        raise ConfigError(f"games[{index}].regions must be a list")
    for region in regions:
        if not isinstance(region, str) or not region:
            raise ConfigError(f"games[{index}].regions entries must be non-empty strings")

    return GameConfig(name=name, base=base, regions=tuple(regions))


def parse_config(data: Any) -> AppConfig:
    """Validate an already-parsed YAML document and build an ``AppConfig``."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("configuration root must be a mapping")

    raw_games = data.get("games") or []
    if not isinstance(raw_games, list):
        raise ConfigError("'games' must be a list")

    games = tuple(_parse_game(g, i) for i, g in enumerate(raw_games))
    seen: set[str] = set()
    for game in games:
        if game.name in seen:
            raise ConfigError(f"duplicate game name {game.name!r}")
        seen.add(game.name)

    server = _section(data, "server")
    port = server.get("port", DEFAULT_PORT)
    if isinstance(port, bool) or not isinstance(port, int):
        raise ConfigError("'server.port' must be an integer")

    fetch = _section(data, "fetch")
    max_retries = fetch.get("max_retries", 0)
    if isinstance(max_retries, bool) or not isinstance(max_retries, int) or max_retries < 0:
        raise ConfigError("'fetch.max_retries' must be a non-negative integer")

    return AppConfig(
        games=games,
        host=str(server.get("host", DEFAULT_HOST)),
        port=port,
        fetch=FetchSettings(
            request_timeout=_optional_number(fetch, "request_timeout"),
            max_retries=max_retries,
            refresh_interval=_optional_number(fetch, "refresh_interval"),
        ),
    )


def load_config(path: Path | None = None) -> AppConfig:
    """Read and validate the configuration file."""
    path = path or config_path()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    return parse_config(data)
