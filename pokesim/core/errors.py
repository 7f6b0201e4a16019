"""Error classes for clearer exception sources."""

from __future__ import annotations


class PokeSimError(Exception):
    pass


class InvalidCombatantError(PokeSimError, ValueError):
    """A combatant cannot take part in a battle (e.g. it has no moves)."""

    def __init__(self, name: str, detail: str):
        super().__init__(f"Invalid combatant {name!r}: {detail}")
        self.name = name
        self.detail = detail


class CombatantNotFoundError(PokeSimError, LookupError):
    def __init__(self, combatant_id: int):
        super().__init__(f"Pokemon with ID {combatant_id} not found")
        self.combatant_id = combatant_id


class SaveNotFoundError(PokeSimError, LookupError):
    def __init__(self, player_id: str):
        super().__init__(f"No saved game found for player {player_id!r}")
        self.player_id = player_id
