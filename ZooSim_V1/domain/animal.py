from enum import Enum
from typing import Dict, Optional, Tuple

import numpy as np
from pydantic import BaseModel, Field

from ZooSim_V1.data.zoo_params import (
    BREEDING_MIN_AGE_DAYS,
    FOOD_PER_CARNIVORE,
    FOOD_PER_HERBIVORE,
    NEWBORN_SUFFIX,
    SELL_PRICE_RATIO,
)
from ZooSim_V1.domain.types import UNASSIGNED, Climate, Diet, Sex

DAILY_FOOD_BY_DIET: Dict[Diet, int] = {
    Diet.HERBIVORE: FOOD_PER_HERBIVORE,
    Diet.CARNIVORE: FOOD_PER_CARNIVORE,
}


class BreedingViolation(Enum):
    """Why two animals cannot breed."""

    NOT_SAME_ENCLOSURE = "Animals must live in the same enclosure to breed."
    SAME_SEX = "Animals must be of opposite sex to breed."
    TOO_YOUNG = f"Both animals must be older than {BREEDING_MIN_AGE_DAYS} days to breed."


class Animal(BaseModel):
    """An animal owned by the zoo."""

    animal_id: int
    species: str
    name: str
    age_days: int = Field(ge=0)
    weight: float
    climate: Climate
    price: int = Field(ge=0)
    diet: Diet
    sex: Sex
    enclosure_id: int = UNASSIGNED
    days_in_zoo: int = 0
    born_in_zoo: bool = False
    parents: Optional[Tuple[str, str]] = None
    sick: bool = False

    @property
    def housed(self) -> bool:
        return self.enclosure_id != UNASSIGNED

    @property
    def daily_food(self) -> int:
        return DAILY_FOOD_BY_DIET[self.diet]

    @property
    def sell_price(self) -> float:
        return self.price * SELL_PRICE_RATIO

    def grow_one_day(self) -> None:
        self.age_days += 1
        self.days_in_zoo += 1

    def breeding_violation(self, other: "Animal") -> Optional[BreedingViolation]:
        """Return the first rule the pair breaks, or None if they can breed."""
        if not self.housed or self.enclosure_id != other.enclosure_id:
            return BreedingViolation.NOT_SAME_ENCLOSURE
        if self.sex == other.sex:
            return BreedingViolation.SAME_SEX
        if self.age_days <= BREEDING_MIN_AGE_DAYS or other.age_days <= BREEDING_MIN_AGE_DAYS:
            return BreedingViolation.TOO_YOUNG
        return None

    def breed_with(
        self, other: "Animal", rng: np.random.Generator, animal_id: int
    ) -> "BreedingOutcome":
        """Build the offspring of ``self`` and ``other``.

        The newborn's species joins the first half of this parent's species with
        the second half of the other's; climate and diet come from this parent.
        Nothing is inserted anywhere: the caller checks enclosure room and
        registers the newborn.

        Args:
            other: Second parent.
            rng: Session random generator (draws the newborn's sex).
            animal_id: Identity to give the newborn.

        Returns:
            A BreedingOutcome holding either the offspring or the violation.
        """
        violation = self.breeding_violation(other)
        if violation is not None:
            return BreedingOutcome(violation=violation)

        species = self.species[: len(self.species) // 2] + other.species[len(other.species) // 2 :]
        offspring = Animal(
            animal_id=animal_id,
            species=species,
            name=species + NEWBORN_SUFFIX,
            age_days=0,
            weight=(self.weight + other.weight) / 4,
            climate=self.climate,
            price=(self.price + other.price) // 2,
            diet=self.diet,
            sex=Sex.MALE if int(rng.integers(0, 2)) == 0 else Sex.FEMALE,
            enclosure_id=self.enclosure_id,
            born_in_zoo=True,
            parents=(self.name, other.name),
        )
        return BreedingOutcome(offspring=offspring)


class BreedingOutcome(BaseModel):
    """Result of a breeding attempt: an offspring or a named violation."""

    offspring: Optional[Animal] = None
    violation: Optional[BreedingViolation] = None

    @property
    def ok(self) -> bool:
        return self.offspring is not None

    @property
    def message(self) -> str:
        if self.offspring is None:
            return self.violation.value if self.violation else "Breeding failed."
        return f"A new animal was born: {self.offspring.species} ({self.offspring.name})."
