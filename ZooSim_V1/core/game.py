import logging
from typing import Optional

import numpy as np
from pydantic import BaseModel, Field, field_validator

from ZooSim_V1.console_style import bold, green, red
from ZooSim_V1.core.results import GameOutcome
from ZooSim_V1.core.zoo import Zoo
from ZooSim_V1.data.zoo_params import MAX_DAYS
from ZooSim_V1.ui.display import print_day_report, print_status
from ZooSim_V1.ui.menus import (
    manage_animals,
    manage_breeding,
    manage_enclosures,
    manage_purchases,
    manage_workers,
)
from ZooSim_V1.utils import get_range_input

logger = logging.getLogger(__name__)

MAIN_MENU = (
    "\nActions:\n"
    "1. Manage animals\n"
    "2. Manage purchases\n"
    "3. Manage enclosures\n"
    "4. Manage workers\n"
    "5. Manage breeding\n"
    "6. Next day\n"
    "Choose an action: "
)


class GameSettings(BaseModel):
    """Parameters of one game (one turn = one day)."""

    zoo_name: str
    max_days: int = Field(default=MAX_DAYS, ge=1, description="Number of days to survive")
    seed: Optional[int] = Field(default=None, ge=0, description="Seed of the session generator")

    @field_validator("zoo_name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("The zoo name cannot be empty.")
        return value.strip()


class Game:
    def __init__(self, settings: GameSettings, zoo: Optional[Zoo] = None):
        """Main game engine driving the days.

        Args:
            settings: Session parameters (zoo name, horizon, seed).
            zoo: Already built zoo, mostly for tests; one is created from the
                settings otherwise.
        """
        self.settings = settings
        self.zoo = zoo or Zoo(settings.zoo_name, rng=np.random.default_rng(settings.seed))

    @property
    def is_over(self) -> bool:
        return self.zoo.day > self.settings.max_days or self.zoo.is_bankrupt

    def next_day(self) -> None:
        report = self.zoo.advance_day()
        print_day_report(report)

    def play(self) -> GameOutcome:
        """Run the game loop until the horizon or bankruptcy.

        The status is shown before every action. Running out of money right
        after a day ends the game on the spot.

        Returns:
            GameOutcome describing the last day reached and the final cash.
        """
        menus = {
            1: manage_animals,
            2: manage_purchases,
            3: manage_enclosures,
            4: manage_workers,
            5: manage_breeding,
        }
        while not self.is_over:
            print_status(self.zoo)
            choice = get_range_input(MAIN_MENU, 1, 6)
            if choice == 6:
                self.next_day()
            else:
                menus[choice](self.zoo)

        outcome = GameOutcome(
            zoo_name=self.zoo.name,
            day=self.zoo.day,
            cash=round(self.zoo.cash, 2),
            bankrupt=self.zoo.is_bankrupt,
        )
        if outcome.bankrupt:
            print(red(f"\nGame over! The zoo ran out of money on day {outcome.day}."))
        else:
            print(
                green(
                    f"\nCongratulations! You managed {bold(self.zoo.name)} "
                    f"for {self.settings.max_days} days!"
                )
            )
        logger.info("Game finished: %s", outcome)
        return outcome
