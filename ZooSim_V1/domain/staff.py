"""Zoo staff."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# IMPORTANT: no import of the zoo here (avoids cycles); workers only know
# enclosure ids.


class Role(Enum):
    # value = (code, label, daily salary, max enclosures, treatment capacity)
    # max enclosures: None = unbounded
    DIRECTOR = ("DIRECTOR", "Director", 60, 0, 0)
    VETERINARIAN = ("VETERINARIAN", "Veterinarian", 50, None, 20)
    CLEANER = ("CLEANER", "Cleaner", 30, 1, 0)
    FEEDER = ("FEEDER", "Feeder", 40, 2, 0)

    def __new__(
        cls,
        code: str,
        label: str,
        salary: int,
        max_enclosures: Optional[int],
        treatment_capacity: int,
    ):
        obj = object.__new__(cls)
        obj._value_ = code
        obj.label = label
        obj.salary = salary
        obj.max_enclosures = max_enclosures
        obj.treatment_capacity = treatment_capacity
        return obj

    def __str__(self) -> str:
        return self.label


# Roles the player can hire (the director comes with the zoo)
HIRABLE_ROLES = (Role.VETERINARIAN, Role.CLEANER, Role.FEEDER)


@dataclass
class Worker:
    name: str
    role: Role
    assigned_enclosures: List[int] = field(default_factory=list)
    days_assigned: int = 0  # remaining days of the current assignment
    days_worked: int = 0

    @property
    def salary(self) -> int:
        return self.role.salary

    @property
    def treatment_capacity(self) -> int:
        return self.role.treatment_capacity

    @property
    def is_director(self) -> bool:
        return self.role is Role.DIRECTOR

    @property
    def on_duty(self) -> bool:
        return self.days_assigned > 0

    def has_room_for_enclosure(self) -> bool:
        limit = self.role.max_enclosures
        return limit is None or len(self.assigned_enclosures) < limit

    def assign(self, enclosure_id: int, days: int) -> None:
        if enclosure_id not in self.assigned_enclosures:
            self.assigned_enclosures.append(enclosure_id)
        self.days_assigned = days

    def work_one_day(self) -> bool:
        """Count a worked day and run down the assignment.

        Returns:
            True if the worker's assignments were just cleared.
        """
        self.days_worked += 1
        if self.days_assigned > 0:
            self.days_assigned -= 1
        if self.days_assigned == 0 and self.assigned_enclosures:
            self.assigned_enclosures.clear()
            return True
        return False
