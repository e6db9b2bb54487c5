from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from models.status import GameSnapshot


@dataclass(frozen=True)
class GameNotFound:
    """Lookup result for a game name that is not in the current table."""

    name: str
    valid_names: frozenset[str]


class SnapshotStore:
    """Read-mostly table of game name -> latest ``GameSnapshot``.

    The table is immutable once published.  ``replace()`` swaps in a
    complete new table with a single reference assignment, so readers
    either see the previous table or the new one, never a mix of both.
    Rebuilds are wholesale; there is no per-game update.
    """

    def __init__(self) -> None:
        self._table: Mapping[str, GameSnapshot] = MappingProxyType({})

    def replace(self, table: Mapping[str, GameSnapshot]) -> None:
        self._table = MappingProxyType(dict(table))

    def list_all(self) -> list[GameSnapshot]:
        """All snapshots.  Order is not significant."""
        return list(self._table.values())

    def get(self, name: str) -> GameSnapshot | GameNotFound:
        """Exact, case-sensitive lookup by game name."""
        table = self._table
        snapshot = table.get(name)
        if snapshot is None:
            return GameNotFound(name=name, valid_names=frozenset(table))
        return snapshot

    @property
    def size(self) -> int:
        return len(self._table)
