"""Single registry of the animals owned by the zoo.

Every animal lives here exactly once, keyed by identity. Enclosures and
workers only hold identities, so there is no second copy to keep in sync.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from ZooSim_V1.domain.animal import Animal


@dataclass
class Roster:
    """Animals indexed by identity, iterated in arrival order."""

    _animals: Dict[int, Animal] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._animals)

    def __iter__(self) -> Iterator[Animal]:
        # snapshot: callers may remove animals while iterating
        return iter(list(self._animals.values()))

    def __contains__(self, animal_id: int) -> bool:
        return animal_id in self._animals

    def add(self, animal: Animal) -> None:
        if animal.animal_id in self:
            raise ValueError(f"Animal {animal.animal_id} is already registered")
        self._animals[animal.animal_id] = animal

    def get(self, animal_id: int) -> Optional[Animal]:
        return self._animals.get(animal_id)

    def remove(self, animal_id: int) -> Optional[Animal]:
        return self._animals.pop(animal_id, None)

    def update(self, animal: Animal) -> None:
        """Replace the stored animal carrying the same identity (no-op if unknown)."""
        if animal.animal_id in self._animals:
            self._animals[animal.animal_id] = animal

    def sick_count(self) -> int:
        return sum(1 for a in self._animals.values() if a.sick)

    def food_demand(self) -> int:
        return sum(a.daily_food for a in self._animals.values())
