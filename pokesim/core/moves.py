"""Move model, type effectiveness lookup, and damage calculation."""

from enum import Enum

from pydantic import BaseModel, Field


class PokemonType(str, Enum):
    """Pokemon types known to the catalog."""

    NORMAL = "normal"
    FIRE = "fire"
    WATER = "water"
    GRASS = "grass"
    POISON = "poison"


# ---------------------------------------------------------------------------
# Type effectiveness
# ---------------------------------------------------------------------------
# Only the water/fire/grass cycle is modelled. Every other pairing is
# neutral (1.0).
# ---------------------------------------------------------------------------

SUPER_EFFECTIVE = 2.0
NOT_VERY_EFFECTIVE = 0.5
NEUTRAL = 1.0

# (attacking_type, defending_type)
_SUPER_EFFECTIVE: set[tuple[str, str]] = {
    ("water", "fire"),
    ("fire", "grass"),
    ("grass", "water"),
}

_NOT_VERY_EFFECTIVE: set[tuple[str, str]] = {(dfn, atk) for atk, dfn in _SUPER_EFFECTIVE}


def get_type_effectiveness(move_type: str, defender_types: list[str]) -> float:
    """Return the multiplier for a move type against a defender's types.

    Defender types are scanned in order and the first type forming a
    matchup decides the multiplier. Multipliers from several types are
    never combined.
    """
    move_t = move_type.lower()
    for defender_type in defender_types:
        pair = (move_t, defender_type.lower())
        if pair in _SUPER_EFFECTIVE:
            return SUPER_EFFECTIVE
        if pair in _NOT_VERY_EFFECTIVE:
            return NOT_VERY_EFFECTIVE
    return NEUTRAL


def effectiveness_message(effectiveness: float) -> str:
    if effectiveness > NEUTRAL:
        return "It's super effective!"
    if effectiveness < NEUTRAL:
        return "It's not very effective..."
    return ""


# ---------------------------------------------------------------------------
# Move model
# ---------------------------------------------------------------------------

class Move(BaseModel):
    """A Pokemon move."""

    name: str
    type: str  # Pokemon type (e.g. "fire")
    power: int = Field(default=0, ge=0)  # 0 for non-damaging moves
    accuracy: int = Field(default=100, ge=0, le=100)  # Percent chance to hit

    @property
    def is_damaging(self) -> bool:
        return self.power > 0


# ---------------------------------------------------------------------------
# Damage calculation
# ---------------------------------------------------------------------------

def calculate_base_damage(
    attacker_level: int,
    power: int,
    attack_stat: int,
    defense_stat: int,
) -> int:
    """Base damage before the random roll and type effectiveness.

    Formula (integer division at every step):
        base = ((2 * level / 5 + 2) * power * A / D) / 50 + 2
    """
    defense_stat = max(1, defense_stat)
    return ((2 * attacker_level // 5 + 2) * power * attack_stat // defense_stat) // 50 + 2


def calculate_damage(
    attacker_level: int,
    power: int,
    attack_stat: int,
    defense_stat: int,
    random_factor: int,
    effectiveness: float = NEUTRAL,
) -> int:
    """Calculate the damage dealt by a hit.

    `random_factor` is a percentage (85-100 in battle). A hit with a
    damaging move always deals at least 1 damage; non-damaging moves
    deal none.
    """
    if power <= 0:
        return 0

    base = calculate_base_damage(attacker_level, power, attack_stat, defense_stat)
    damage = base * random_factor // 100
    damage = int(damage * effectiveness)
    return max(1, damage)
