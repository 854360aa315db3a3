# ZooSim_V1/domain/types.py
from enum import Enum


class Diet(Enum):
    # Values aligned with the JSON catalog
    HERBIVORE = "HERBIVORE"
    CARNIVORE = "CARNIVORE"

    @property
    def label(self) -> str:
        return DIET_LABELS[self]


class Climate(Enum):
    TROPICAL = "TROPICAL"
    TEMPERATE = "TEMPERATE"
    ARCTIC = "ARCTIC"

    @property
    def label(self) -> str:
        return CLIMATE_LABELS[self]


class Sex(Enum):
    MALE = "M"
    FEMALE = "F"


DIET_LABELS = {Diet.HERBIVORE: "Herbivore", Diet.CARNIVORE: "Carnivore"}

CLIMATE_LABELS = {
    Climate.TROPICAL: "Tropical",
    Climate.TEMPERATE: "Temperate",
    Climate.ARCTIC: "Arctic",
}

# Enclosure id carried by an animal that is not housed anywhere
UNASSIGNED = -1
