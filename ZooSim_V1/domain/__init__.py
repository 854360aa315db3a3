"""
Domain objects for ZooSim.

The domain layer holds the business objects of the zoo: animals and their
registry, enclosures, staff, loans and the animal market. They know nothing
about the game loop or the console.
"""

from .animal import Animal, BreedingOutcome, BreedingViolation
from .enclosure import Enclosure
from .loan import Loan
from .market import MarketOffer, SpeciesTemplate
from .roster import Roster
from .staff import Role, Worker
from .types import Climate, Diet, Sex

__all__ = [
    "Animal",
    "BreedingOutcome",
    "BreedingViolation",
    "Climate",
    "Diet",
    "Enclosure",
    "Loan",
    "MarketOffer",
    "Roster",
    "Role",
    "Sex",
    "SpeciesTemplate",
    "Worker",
]
