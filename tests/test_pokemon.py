"""Tests for the Combatant model."""

import pytest
from pydantic import ValidationError

from pokesim.core.moves import Move
from pokesim.core.pokemon import Combatant
from tests.conftest import make_combatant


class TestCombatantModel:
    """Validation and wire-format tests."""

    def test_accepts_camel_case(self):
        c = Combatant.model_validate(
            {
                "id": 4,
                "name": "Charmander",
                "types": ["fire"],
                "level": 5,
                "hp": 39,
                "maxHp": 39,
                "attack": 52,
                "defense": 43,
                "speed": 65,
                "moves": [{"name": "Scratch", "type": "normal", "power": 40, "accuracy": 100}],
                "imageUrl": "/assets/sprites/charmander.png",
            }
        )
        assert c.max_hp == 39
        assert c.image_url == "/assets/sprites/charmander.png"
        assert c.moves[0].name == "Scratch"

    def test_accepts_snake_case(self):
        c = make_combatant(hp=10, max_hp=20)
        assert c.max_hp == 20

    def test_dumps_camel_case(self):
        data = make_combatant().model_dump(by_alias=True)
        assert "maxHp" in data
        assert "imageUrl" in data
        assert "max_hp" not in data

    def test_types_required(self):
        with pytest.raises(ValidationError):
            make_combatant(types=[])

    def test_level_must_be_positive(self):
        with pytest.raises(ValidationError):
            make_combatant(level=0)

    def test_negative_hp_rejected(self):
        with pytest.raises(ValidationError):
            make_combatant(hp=-1, max_hp=10)

    def test_empty_moves_allowed_on_model(self):
        """Move lists are checked when a battle starts, not on the model."""
        assert make_combatant(moves=[]).moves == []

    def test_types_display(self):
        assert make_combatant(types=["grass", "poison"]).types_display == "Grass/Poison"


class TestTakeDamage:
    def test_take_damage(self):
        c = make_combatant(hp=40)
        assert c.take_damage(15) == 15
        assert c.hp == 25
        assert c.is_fainted is False

    def test_take_damage_overkill(self):
        c = make_combatant(hp=10)
        assert c.take_damage(50) == 10
        assert c.hp == 0
        assert c.is_fainted is True

    def test_negative_damage_ignored(self):
        c = make_combatant(hp=10)
        assert c.take_damage(-5) == 0
        assert c.hp == 10


class TestBattleCopy:
    """The working copy used inside a battle."""

    def test_copy_is_independent(self):
        original = make_combatant(hp=40)
        copy = original.battle_copy()
        copy.take_damage(10)
        copy.moves.append(Move(name="Growl", type="normal"))
        assert original.hp == 40
        assert len(original.moves) == 1

    def test_hp_clamped_to_max(self):
        copy = make_combatant(hp=80, max_hp=50).battle_copy()
        assert copy.hp == 50

    def test_defense_normalized(self):
        original = make_combatant(defense=0)
        assert original.battle_copy().defense == 1
        assert make_combatant(defense=-20).battle_copy().defense == 1
        assert original.defense == 0

    def test_valid_stats_untouched(self):
        copy = make_combatant(hp=30, max_hp=50, defense=43).battle_copy()
        assert copy.hp == 30
        assert copy.defense == 43
