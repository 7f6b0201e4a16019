"""Combatant model and related logic."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pokesim.core.moves import Move


class Combatant(BaseModel):
    """A Pokemon's battle-relevant stats and move list.

    Field names are snake_case in Python and camelCase on the wire
    (``maxHp``, ``imageUrl``); both spellings are accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Identity
    id: int = 0  # National Pokedex number, 0 when unknown
    name: str
    types: list[str] = Field(min_length=1)

    # Stats
    level: int = Field(default=1, ge=1)
    hp: int = Field(ge=0)  # Current HP
    max_hp: int = Field(ge=0)
    attack: int = Field(default=0, ge=0)
    defense: int = 1  # Normalized to >= 1 in battle_copy()
    speed: int = Field(default=0, ge=0)

    moves: list[Move] = Field(default_factory=list)
    image_url: str = ""

    @property
    def types_display(self) -> str:
        """Get formatted type display."""
        return "/".join(t.capitalize() for t in self.types)

    @property
    def is_fainted(self) -> bool:
        return self.hp <= 0

    def take_damage(self, amount: int) -> int:
        """Apply damage, return actual amount dealt. Clamps to 0."""
        actual = min(max(0, amount), self.hp)
        self.hp -= actual
        return actual

    def battle_copy(self) -> "Combatant":
        """Return a private working copy for one battle.

        Health is clamped to [0, max_hp] and defense is raised to at
        least 1 so the damage formula never divides by zero. The
        original object is left untouched.
        """
        copy = self.model_copy(deep=True)
        copy.hp = min(max(0, copy.hp), copy.max_hp)
        copy.defense = max(1, copy.defense)
        return copy
