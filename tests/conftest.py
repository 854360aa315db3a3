"""Shared fixtures: zoos with a seeded or a scripted random generator, and
factories for animals."""

import numpy as np
import pytest

from ZooSim_V1.core.zoo import Zoo
from ZooSim_V1.domain.animal import Animal
from ZooSim_V1.domain.types import Climate, Diet, Sex


class ScriptedRng:
    """Stand-in for ``np.random.Generator`` answering ``integers`` from a callable.

    ``pick(low, high)`` receives numpy's half-open bounds, so a zoo roll in
    ``[a, b]`` arrives as ``(a, b + 1)``.
    """

    def __init__(self, pick=None):
        self.pick = pick or (lambda low, high: low)
        self.calls = []

    def integers(self, low, high=None):
        self.calls.append((low, high))
        return self.pick(low, high)


def _lowest(low, high):
    return low


def _highest(low, high):
    return high - 1


def _make_animal(animal_id: int = 1, **overrides) -> Animal:
    fields = dict(
        animal_id=animal_id,
        species="Deer",
        name="Bambi",
        age_days=10,
        weight=200.0,
        climate=Climate.TEMPERATE,
        price=150,
        diet=Diet.HERBIVORE,
        sex=Sex.MALE,
    )
    fields.update(overrides)
    return Animal(**fields)


def _house(zoo: Zoo, enclosure_id: int = 1, **overrides) -> Animal:
    animal = _make_animal(zoo._take_animal_id(), **overrides)
    zoo.get_enclosure(enclosure_id).admit(animal)
    zoo.roster.add(animal)
    return animal


@pytest.fixture
def lowest():
    """Pick that always answers the smallest value (every roll is 0)."""
    return _lowest


@pytest.fixture
def highest():
    """Pick that always answers the largest value (every 0..99 roll is 99)."""
    return _highest


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def make_animal():
    """Factory for a temperate herbivore, unhoused unless told otherwise."""
    return _make_animal


@pytest.fixture
def house():
    """Put a new animal in an enclosure without paying for it."""
    return _house


@pytest.fixture
def zoo():
    return Zoo("Test Zoo", rng=np.random.default_rng(1234))


@pytest.fixture
def scripted_zoo():
    """Factory building a zoo whose rolls come from ``pick``."""

    def _make(pick=_highest):
        return Zoo("Scripted Zoo", rng=ScriptedRng(pick))

    return _make
