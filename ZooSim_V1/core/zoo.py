import logging
from typing import List, Optional

import numpy as np

from ZooSim_V1.core.day import advance_day
from ZooSim_V1.core.errors import ValidationError
from ZooSim_V1.core.results import DayReport, SpecialVisitor
from ZooSim_V1.data.zoo_params import (
    AD_POPULARITY_GAIN,
    AD_SPEND_STEP,
    ENCLOSURE_BUILD_COST_PER_SLOT,
    ENCLOSURE_MAX_CAPACITY,
    ENCLOSURE_MIN_CAPACITY,
    ENCLOSURE_UPKEEP_PER_SLOT,
    FIRST_DAY,
    FOOD_UNIT_PRICE,
    MARKET_REFRESH_FEE,
    MAX_ASSIGNMENT_DAYS,
    MIN_ASSIGNMENT_DAYS,
    PURCHASE_LIMIT_FROM_DAY,
    PURCHASES_PER_DAY_AFTER_LIMIT,
    STARTER_ENCLOSURE_CAPACITY,
    STARTER_ENCLOSURE_DAILY_COST,
    STARTING_CASH,
    STARTING_FOOD,
    STARTING_POPULARITY,
)
from ZooSim_V1.domain.animal import Animal, BreedingOutcome
from ZooSim_V1.domain.enclosure import Enclosure
from ZooSim_V1.domain.loan import Loan
from ZooSim_V1.domain.market import MarketOffer, SpeciesTemplate, load_catalog, sample_market
from ZooSim_V1.domain.roster import Roster
from ZooSim_V1.domain.staff import HIRABLE_ROLES, Role, Worker
from ZooSim_V1.domain.types import Climate, Diet

logger = logging.getLogger(__name__)


class Zoo:
    def __init__(
        self,
        name: str,
        rng: Optional[np.random.Generator] = None,
        catalog: Optional[List[SpeciesTemplate]] = None,
    ):
        """Full state of one game: the zoo, its finances and its collections.

        One instance per game session. It owns the session random generator and
        the animal id counter; every command and the daily tick go through it.

        Args:
            name: Name of the zoo shown to the player.
            rng: Session generator (a fresh unseeded one when omitted).
            catalog: Species templates feeding the market (bundled JSON when omitted).
        """
        if not name or not name.strip():
            raise ValidationError("The zoo name cannot be empty.")
        self.name = name.strip()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.catalog = catalog if catalog is not None else load_catalog()

        self.cash: float = STARTING_CASH
        self.food: int = STARTING_FOOD
        self.popularity: float = STARTING_POPULARITY
        self.day: int = FIRST_DAY
        self.visitors: int = 0
        self.special_visitor = SpecialVisitor.NONE
        self.special_visitor_count: int = 0
        self.animals_bought_today: int = 0

        self.roster = Roster()
        self.enclosures: List[Enclosure] = []
        self.workers: List[Worker] = []
        self.loans: List[Loan] = []
        self.market: List[MarketOffer] = []
        self._next_animal_id = 1

        self._setup_endowment()
        self.rotate_market()

    def _setup_endowment(self) -> None:
        self.enclosures.append(
            Enclosure(
                enclosure_id=1,
                capacity=STARTER_ENCLOSURE_CAPACITY,
                diet=Diet.HERBIVORE,
                climate=Climate.TEMPERATE,
                daily_cost=STARTER_ENCLOSURE_DAILY_COST,
            )
        )
        self.workers.extend(
            [
                Worker(name="K.Z", role=Role.DIRECTOR),
                Worker(name="Trinity", role=Role.CLEANER, assigned_enclosures=[1]),
                Worker(name="Morpheus", role=Role.VETERINARIAN),
                Worker(name="Diference", role=Role.FEEDER),
            ]
        )

    # ---------- Accessors ----------

    @property
    def animals(self) -> List[Animal]:
        return list(self.roster)

    @property
    def total_animals(self) -> int:
        return len(self.roster)

    @property
    def total_debt(self) -> float:
        return round(sum(loan.remaining_debt for loan in self.loans), 2)

    @property
    def daily_salaries(self) -> int:
        return sum(w.salary for w in self.workers)

    @property
    def daily_upkeep(self) -> int:
        return sum(e.daily_cost for e in self.enclosures)

    @property
    def is_bankrupt(self) -> bool:
        return self.cash < 0

    def roll(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]`` (both ends included)."""
        return int(self.rng.integers(low, high + 1))

    def get_enclosure(self, enclosure_id: int) -> Optional[Enclosure]:
        for enclosure in self.enclosures:
            if enclosure.enclosure_id == enclosure_id:
                return enclosure
        return None

    def compatible_enclosures(self, offer: MarketOffer) -> List[Enclosure]:
        """Enclosures with room left that suit the offered species."""
        return [
            e
            for e in self.enclosures
            if not e.is_full and e.suits(offer.template.diet, offer.template.climate)
        ]

    def assigned_population(self, worker: Worker) -> int:
        """Number of animals living in the enclosures a worker is assigned to."""
        total = 0
        for enclosure_id in worker.assigned_enclosures:
            enclosure = self.get_enclosure(enclosure_id)
            if enclosure is not None:
                total += enclosure.population
        return total

    # ---------- Internal helpers ----------

    def _require_enclosure(self, enclosure_id: int) -> Enclosure:
        enclosure = self.get_enclosure(enclosure_id)
        if enclosure is None:
            raise ValidationError(f"Unknown enclosure id {enclosure_id}.")
        return enclosure

    def _require_animal(self, animal_id: int) -> Animal:
        animal = self.roster.get(animal_id)
        if animal is None:
            raise ValidationError(f"Unknown animal id {animal_id}.")
        return animal

    def _require_worker(self, index: int) -> Worker:
        if not 0 <= index < len(self.workers):
            raise ValidationError(f"Unknown worker #{index + 1}.")
        return self.workers[index]

    def _require_funds(self, amount: float) -> None:
        if self.cash < amount:
            raise ValidationError(
                f"Not enough money! Needed ${amount:,.2f}, available ${self.cash:,.2f}."
            )

    def _take_animal_id(self) -> int:
        animal_id = self._next_animal_id
        self._next_animal_id += 1
        return animal_id

    def _house(self, animal: Animal, enclosure: Enclosure) -> None:
        enclosure.admit(animal)
        self.roster.add(animal)

    def remove_animal(self, animal_id: int) -> Optional[Animal]:
        """Take an animal out of its enclosure and out of the roster."""
        animal = self.roster.remove(animal_id)
        if animal is None:
            return None
        enclosure = self.get_enclosure(animal.enclosure_id)
        if enclosure is not None:
            enclosure.remove(animal_id)
        return animal

    # ---------- Animals ----------

    def rotate_market(self) -> None:
        self.market = sample_market(self.catalog, self.rng)

    def buy_animal(self, offer_index: int, enclosure_id: int) -> str:
        """Buy a market offer and house it in an enclosure.

        Raises:
            ValidationError: Daily purchase limit reached, unknown offer, not
                enough money, unknown enclosure or enclosure unable to take it.
        """
        if (
            self.day > PURCHASE_LIMIT_FROM_DAY
            and self.animals_bought_today >= PURCHASES_PER_DAY_AFTER_LIMIT
        ):
            raise ValidationError(
                f"After day {PURCHASE_LIMIT_FROM_DAY} only one animal can be bought per day."
            )
        if not self.market:
            raise ValidationError("The market is empty. Refresh the market.")
        if not 0 <= offer_index < len(self.market):
            raise ValidationError(f"Unknown market offer #{offer_index + 1}.")
        offer = self.market[offer_index]
        self._require_funds(offer.price)
        enclosure = self._require_enclosure(enclosure_id)
        if enclosure.is_full or not enclosure.suits(offer.template.diet, offer.template.climate):
            raise ValidationError(
                f"Enclosure {enclosure_id} cannot take a {offer.template.species}."
            )

        animal = offer.to_animal(self._take_animal_id())
        self._house(animal, enclosure)
        self.cash -= offer.price
        self.animals_bought_today += 1
        self.market.pop(offer_index)
        logger.info("Bought %s #%d for %d", animal.species, animal.animal_id, offer.price)
        return f"{animal.name} bought and placed in enclosure {enclosure_id}."

    def sell_animal(self, animal_id: int) -> str:
        animal = self._require_animal(animal_id)
        proceeds = animal.sell_price
        self.remove_animal(animal_id)
        self.cash += proceeds
        logger.info("Sold %s #%d for %.2f", animal.species, animal_id, proceeds)
        return f"{animal.name} sold for ${proceeds:,.2f}."

    def rename_animal(self, animal_id: int, new_name: str) -> str:
        animal = self._require_animal(animal_id)
        if not new_name or not new_name.strip():
            raise ValidationError("The name cannot be empty.")
        animal.name = new_name.strip()
        self.roster.update(animal)
        return f"Animal renamed to {animal.name}."

    def refresh_market(self) -> str:
        if self.cash < MARKET_REFRESH_FEE:
            raise ValidationError("Not enough money to refresh the market.")
        self.cash -= MARKET_REFRESH_FEE
        self.rotate_market()
        return f"Animal market refreshed for ${MARKET_REFRESH_FEE:,.0f}."

    def breed(self, first_id: int, second_id: int) -> BreedingOutcome:
        """Breed two animals and house the newborn with its parents.

        Room in the shared enclosure is checked before breeding. A pair that
        breaks a breeding rule yields an outcome carrying the violation and
        leaves the zoo untouched.

        Raises:
            ValidationError: Same animal picked twice, unknown animal, or no
                room left in the shared enclosure.
        """
        if first_id == second_id:
            raise ValidationError("Cannot pick the same animal twice.")
        first = self._require_animal(first_id)
        second = self._require_animal(second_id)

        enclosure = None
        if first.housed and first.enclosure_id == second.enclosure_id:
            enclosure = self._require_enclosure(first.enclosure_id)
            if enclosure.is_full:
                raise ValidationError("No room left in the enclosure for a newborn.")

        outcome = first.breed_with(second, self.rng, self._next_animal_id)
        if outcome.ok:
            self._take_animal_id()
            self._house(outcome.offspring, enclosure)
            logger.info("Newborn %s #%d", outcome.offspring.species, outcome.offspring.animal_id)
        return outcome

    # ---------- Staff ----------

    def hire_worker(self, name: str, role: Role) -> str:
        if not name or not name.strip():
            raise ValidationError("The worker name cannot be empty.")
        if role not in HIRABLE_ROLES:
            raise ValidationError(f"Cannot hire a {role.label.lower()}.")
        worker = Worker(name=name.strip(), role=role)
        self.workers.append(worker)
        logger.info("Hired %s as %s", worker.name, role.label)
        return f"{worker.name} hired as {role.label.lower()}."

    def fire_worker(self, index: int) -> str:
        if len(self.workers) <= 1:
            raise ValidationError("Cannot fire anyone. The director must stay.")
        worker = self._require_worker(index)
        if worker.is_director:
            raise ValidationError("The director cannot be fired.")
        self.workers.pop(index)
        logger.info("Fired %s", worker.name)
        return f"{worker.name} fired."

    def assign_worker(self, index: int, enclosure_id: int, days: int) -> str:
        """Assign a worker to one more enclosure for ``days`` days.

        Cleaners take one enclosure, feeders two, veterinarians any number as
        long as the animals they would look after stay within their treatment
        capacity. The assignment length applies to all the worker's enclosures.

        Raises:
            ValidationError: Unknown worker or enclosure, director, duplicate
                assignment, role limit reached, treatment capacity exceeded or
                out-of-range duration.
        """
        worker = self._require_worker(index)
        if worker.is_director:
            raise ValidationError("The director cannot be assigned to enclosures.")
        enclosure = self._require_enclosure(enclosure_id)
        if enclosure_id in worker.assigned_enclosures:
            raise ValidationError("This worker is already assigned to this enclosure.")
        if not worker.has_room_for_enclosure():
            raise ValidationError("This worker already has the maximum number of enclosures.")
        if worker.role is Role.VETERINARIAN:
            looked_after = self.assigned_population(worker) + enclosure.population
            if looked_after > worker.treatment_capacity:
                raise ValidationError(
                    f"Assigning this enclosure would exceed the limit of "
                    f"{worker.treatment_capacity} animals."
                )
        if not MIN_ASSIGNMENT_DAYS <= days <= MAX_ASSIGNMENT_DAYS:
            raise ValidationError(
                f"Assignment length must be between {MIN_ASSIGNMENT_DAYS} and {MAX_ASSIGNMENT_DAYS} days."
            )
        worker.assign(enclosure_id, days)
        logger.info("%s assigned to enclosure %d for %d days", worker.name, enclosure_id, days)
        return f"{worker.name} assigned to enclosure {enclosure_id} for {days} days."

    # ---------- Enclosures ----------

    def build_enclosure(self, capacity: int, diet: Diet, climate: Climate) -> str:
        if not ENCLOSURE_MIN_CAPACITY <= capacity <= ENCLOSURE_MAX_CAPACITY:
            raise ValidationError(
                f"Capacity must be between {ENCLOSURE_MIN_CAPACITY} and {ENCLOSURE_MAX_CAPACITY}."
            )
        cost = capacity * ENCLOSURE_BUILD_COST_PER_SLOT
        self._require_funds(cost)
        new_id = self.enclosures[-1].enclosure_id + 1 if self.enclosures else 1
        self.enclosures.append(
            Enclosure(
                enclosure_id=new_id,
                capacity=capacity,
                diet=diet,
                climate=climate,
                daily_cost=capacity * ENCLOSURE_UPKEEP_PER_SLOT,
            )
        )
        self.cash -= cost
        logger.info("Built enclosure %d (%d slots) for %d", new_id, capacity, cost)
        return f"Enclosure {new_id} built for ${cost:,}."

    # ---------- Purchases ----------

    def buy_food(self, units: int) -> str:
        if units < 0:
            raise ValidationError("Food quantity cannot be negative.")
        cost = units * FOOD_UNIT_PRICE
        self._require_funds(cost)
        self.food += units
        self.cash -= cost
        return f"{units} units of food bought."

    def advertise(self, amount: int) -> str:
        if amount < 0:
            raise ValidationError("Advertising budget cannot be negative.")
        self._require_funds(amount)
        gain = (amount // AD_SPEND_STEP) * AD_POPULARITY_GAIN
        self.popularity += gain
        self.cash -= amount
        return f"Popularity increased by {gain}."

    def take_loan(self, amount: float, days: int) -> str:
        """Borrow money, credited immediately.

        Raises:
            ValidationError: If ``amount`` is not positive.
            InvalidLoanTerm: If ``days`` is not positive.
        """
        if amount <= 0:
            raise ValidationError("Loan amount must be positive.")
        loan = Loan(principal=float(amount), days=days)
        self.loans.append(loan)
        self.cash += loan.principal
        logger.info("Loan of %.2f over %d days", loan.principal, days)
        return (
            f"Loan of ${loan.principal:,.0f} taken for {days} days "
            f"at a daily rate of {loan.daily_rate * 100:.1f}%."
        )

    # ---------- Time ----------

    def advance_day(self) -> DayReport:
        return advance_day(self)
