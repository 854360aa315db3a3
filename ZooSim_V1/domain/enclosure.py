from typing import List

from pydantic import BaseModel, Field

from ZooSim_V1.core.errors import ValidationError
from ZooSim_V1.domain.animal import Animal
from ZooSim_V1.domain.types import Climate, Diet


class Enclosure(BaseModel):
    """Bounded habitat for animals of one diet and one climate.

    Only animal identities are stored, in arrival order; the animals
    themselves live in the zoo's roster.
    """

    enclosure_id: int = Field(ge=1)
    capacity: int = Field(ge=1)
    diet: Diet
    climate: Climate
    daily_cost: int = Field(ge=0)
    animal_ids: List[int] = Field(default_factory=list)

    @property
    def population(self) -> int:
        return len(self.animal_ids)

    @property
    def is_full(self) -> bool:
        return self.population >= self.capacity

    def suits(self, diet: Diet, climate: Climate) -> bool:
        return diet == self.diet and climate == self.climate

    def accepts(self, animal: Animal) -> bool:
        """Diet and climate match, regardless of room left."""
        return self.suits(animal.diet, animal.climate)

    def can_admit(self, animal: Animal) -> bool:
        return not self.is_full and self.accepts(animal)

    def admit(self, animal: Animal) -> None:
        if not self.can_admit(animal):
            raise ValidationError(
                f"Enclosure {self.enclosure_id} cannot take {animal.name}."
            )
        self.animal_ids.append(animal.animal_id)
        animal.enclosure_id = self.enclosure_id

    def remove(self, animal_id: int) -> None:
        if animal_id in self.animal_ids:
            self.animal_ids.remove(animal_id)
