"""Save-game snapshots and the stores that hold them.

Stores are keyed by player id. Writers for the same player are
serialized with a per-player lock; different players never block each
other.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pokesim.core.errors import SaveNotFoundError
from pokesim.core.pokemon import Combatant

logger = logging.getLogger(__name__)


class Position(BaseModel):
    """Player position on the overworld map."""

    x: int = 0
    y: int = 0


class SaveGame(BaseModel):
    """A player's saved progress."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    player_id: str
    pokemons: list[Combatant] = Field(default_factory=list)
    position: Position = Field(default_factory=Position)
    timestamp: int = 0  # Unix seconds, 0 = stamp on save

    def stamped(self) -> SaveGame:
        """Return a copy with the timestamp set to now if it was missing."""
        if self.timestamp:
            return self.model_copy(deep=True)
        return self.model_copy(update={"timestamp": int(time.time())}, deep=True)


class SaveStore(Protocol):
    """Persistence for save games keyed by player id."""

    def get(self, key: str) -> SaveGame: ...

    def put(self, key: str, value: SaveGame) -> None: ...


class InMemorySaveStore:
    """Thread-safe, process-local save store."""

    def __init__(self) -> None:
        self._saves: dict[str, SaveGame] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, key: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    def get(self, key: str) -> SaveGame:
        """Return a copy of the save for `key`.

        Raises:
            SaveNotFoundError: if nothing has been saved for `key`.
        """
        with self._lock_for(key):
            save = self._saves.get(key)
            if save is None:
                raise SaveNotFoundError(key)
            return save.model_copy(deep=True)

    def put(self, key: str, value: SaveGame) -> None:
        with self._lock_for(key):
            self._saves[key] = value.model_copy(deep=True)
        logger.debug("Stored save for player %s", key)
