"""Tests for the static Pokemon catalog."""

import pytest

from pokesim.core.errors import CombatantNotFoundError
from pokesim.data.catalog import get_combatant, list_combatants


class TestCatalog:
    def test_list_ordered_by_pokedex_number(self):
        assert [c.id for c in list_combatants()] == [1, 4, 7]

    def test_starters(self):
        names = {c.name for c in list_combatants()}
        assert names == {"Bulbasaur", "Charmander", "Squirtle"}

    def test_get_combatant(self):
        charmander = get_combatant(4)
        assert charmander.name == "Charmander"
        assert charmander.types == ["fire"]
        assert charmander.speed == 65
        assert [m.name for m in charmander.moves] == ["Scratch", "Growl", "Ember"]

    def test_dual_type_order_preserved(self):
        assert get_combatant(1).types == ["grass", "poison"]

    def test_unknown_id(self):
        with pytest.raises(CombatantNotFoundError) as exc_info:
            get_combatant(25)
        assert str(exc_info.value) == "Pokemon with ID 25 not found"
        assert exc_info.value.combatant_id == 25

    def test_entries_are_copies(self):
        first = get_combatant(7)
        first.hp = 1
        first.moves.clear()
        second = get_combatant(7)
        assert second.hp == 44
        assert len(second.moves) == 3

    def test_every_entry_battle_ready(self):
        for c in list_combatants():
            assert c.moves
            assert c.defense >= 1
            assert 0 < c.hp <= c.max_hp
