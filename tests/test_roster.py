"""Tests for the animal registry."""

import pytest

from ZooSim_V1.domain.roster import Roster
from ZooSim_V1.domain.types import Diet


class TestRoster:
    def test_add_and_lookup(self, make_animal):
        roster = Roster()
        roster.add(make_animal(3))
        assert 3 in roster
        assert 4 not in roster
        assert roster.get(3).name == "Bambi"
        assert len(roster) == 1

    def test_duplicate_identity_rejected(self, make_animal):
        """An animal is registered exactly once."""
        roster = Roster()
        roster.add(make_animal(3))
        with pytest.raises(ValueError):
            roster.add(make_animal(3, name="Copy"))
        assert roster.get(3).name == "Bambi"

    def test_update_replaces_by_identity(self, make_animal):
        roster = Roster()
        roster.add(make_animal(3))
        roster.update(make_animal(3, name="Bella"))
        roster.update(make_animal(9, name="Ghost"))
        assert roster.get(3).name == "Bella"
        assert 9 not in roster

    def test_removal_while_iterating(self, make_animal):
        roster = Roster()
        for animal_id in (1, 2, 3):
            roster.add(make_animal(animal_id))
        for animal in roster:
            roster.remove(animal.animal_id)
        assert len(roster) == 0

    def test_food_and_sickness_totals(self, make_animal):
        roster = Roster()
        roster.add(make_animal(1, sick=True))
        roster.add(make_animal(2, diet=Diet.CARNIVORE))
        assert roster.food_demand() == 3
        assert roster.sick_count() == 1
