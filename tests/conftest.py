"""Shared fixtures for PokeSim tests."""

import pytest
from typer.testing import CliRunner

from pokesim.core.moves import Move
from pokesim.core.pokemon import Combatant
from pokesim.data.catalog import get_combatant


class FixedRandom:
    """Deterministic random source for battles.

    Every attack draws a move slot, then an accuracy roll, then (for a
    damaging hit) a damage roll. This source answers those draws with
    fixed values.
    """

    def __init__(self, move_index: int = 0, accuracy_roll: int = 0, random_factor: int = 92):
        self.move_index = move_index
        self.accuracy_roll = accuracy_roll
        self.random_factor = random_factor
        self.factor_draws = 0
        self._next_is_move = True

    def randrange(self, stop: int) -> int:
        value = self.move_index if self._next_is_move else self.accuracy_roll
        self._next_is_move = not self._next_is_move
        return value

    def randint(self, a: int, b: int) -> int:
        self.factor_draws += 1
        return self.random_factor


def make_combatant(
    name="Testmon",
    id=99,
    types=None,
    level=5,
    hp=40,
    max_hp=None,
    attack=50,
    defense=50,
    speed=50,
    moves=None,
) -> Combatant:
    if types is None:
        types = ["normal"]
    if moves is None:
        moves = [Move(name="Tackle", type="normal", power=40, accuracy=100)]
    return Combatant(
        id=id,
        name=name,
        types=types,
        level=level,
        hp=hp,
        max_hp=hp if max_hp is None else max_hp,
        attack=attack,
        defense=defense,
        speed=speed,
        moves=moves,
    )


@pytest.fixture
def fixed_rng() -> FixedRandom:
    """Move slot 0, never misses, damage roll 92."""
    return FixedRandom()


@pytest.fixture
def bulbasaur() -> Combatant:
    return get_combatant(1)


@pytest.fixture
def charmander() -> Combatant:
    return get_combatant(4)


@pytest.fixture
def squirtle() -> Combatant:
    return get_combatant(7)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI runner for command tests."""
    return CliRunner()
