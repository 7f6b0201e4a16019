"""Static catalog of battle-ready Pokemon.

The catalog only ever hands out copies, so callers are free to mutate
what they get back.
"""

from pokesim.core.errors import CombatantNotFoundError
from pokesim.core.moves import Move
from pokesim.core.pokemon import Combatant

# (name, type, power, accuracy)
_MoveRow = tuple[str, str, int, int]


def _moves(*rows: _MoveRow) -> list[Move]:
    return [Move(name=name, type=mtype, power=power, accuracy=accuracy) for name, mtype, power, accuracy in rows]


_POKEDEX: dict[int, Combatant] = {
    c.id: c
    for c in (
        Combatant(
            id=1,
            name="Bulbasaur",
            types=["grass", "poison"],
            level=5,
            hp=45,
            max_hp=45,
            attack=49,
            defense=49,
            speed=45,
            image_url="/assets/sprites/bulbasaur.png",
            moves=_moves(
                ("Tackle", "normal", 40, 100),
                ("Growl", "normal", 0, 100),
                ("Vine Whip", "grass", 45, 100),
            ),
        ),
        Combatant(
            id=4,
            name="Charmander",
            types=["fire"],
            level=5,
            hp=39,
            max_hp=39,
            attack=52,
            defense=43,
            speed=65,
            image_url="/assets/sprites/charmander.png",
            moves=_moves(
                ("Scratch", "normal", 40, 100),
                ("Growl", "normal", 0, 100),
                ("Ember", "fire", 40, 100),
            ),
        ),
        Combatant(
            id=7,
            name="Squirtle",
            types=["water"],
            level=5,
            hp=44,
            max_hp=44,
            attack=48,
            defense=65,
            speed=43,
            image_url="/assets/sprites/squirtle.png",
            moves=_moves(
                ("Tackle", "normal", 40, 100),
                ("Tail Whip", "normal", 0, 100),
                ("Water Gun", "water", 40, 100),
            ),
        ),
    )
}


def list_combatants() -> list[Combatant]:
    """Return copies of every catalog entry, ordered by Pokedex number."""
    return [_POKEDEX[pid].model_copy(deep=True) for pid in sorted(_POKEDEX)]


def get_combatant(pokemon_id: int) -> Combatant:
    """Return a copy of the catalog entry with the given Pokedex number.

    Raises:
        CombatantNotFoundError: if no entry has that number.
    """
    try:
        entry = _POKEDEX[pokemon_id]
    except KeyError:
        raise CombatantNotFoundError(pokemon_id) from None
    return entry.model_copy(deep=True)
