from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class SpecialVisitor(Enum):
    NONE = "None"
    CELEBRITY = "Celebrity"
    PHOTOGRAPHER = "Photographer"


class DayReport(BaseModel):
    """Snapshot of what happened during one daily tick."""

    day: int
    cash_start: float
    cash_end: float
    died_of_old_age: List[str] = Field(default_factory=list)
    died_of_starvation: List[str] = Field(default_factory=list)
    idle_workers: List[str] = Field(default_factory=list)
    fell_sick: int = 0
    cured: int = 0
    food_demand: int = 0
    food_consumed: int = 0
    food_shortage: bool = False
    popularity: float = 0.0
    visitors: int = 0
    special_visitor: SpecialVisitor = SpecialVisitor.NONE
    special_visitor_count: int = 0
    revenue: float = 0.0
    salaries: float = 0.0
    upkeep: float = 0.0
    loan_payments: float = 0.0
    loans_paid_off: List[float] = Field(default_factory=list)
    events: List[str] = Field(default_factory=list)

    @property
    def net(self) -> float:
        return self.cash_end - self.cash_start


class GameOutcome(BaseModel):
    """How a game ended."""

    zoo_name: str
    day: int
    cash: float
    bankrupt: bool

    @property
    def completed(self) -> bool:
        return not self.bankrupt
