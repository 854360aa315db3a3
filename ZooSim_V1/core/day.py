"""
Daily tick engine.

``advance_day`` runs the daily tick in a fixed order, each step reading what
the previous ones changed:

1) Day counter, daily counters reset, market rotation
2) Aging and old-age mortality
3) Staff days worked and assignment countdown
4) Sickness onset
5) Veterinary treatment
6) Food consumption or starvation
7) Popularity drift
8) Visitors and special guests
9) Ticket revenue
10) Salaries and enclosure upkeep
11) Loan installments

The tick never stops halfway on insolvency; the game loop checks for
bankruptcy once it is done.
"""

import logging
from typing import TYPE_CHECKING

from ZooSim_V1.core.results import DayReport, SpecialVisitor
from ZooSim_V1.data.zoo_params import (
    CELEBRITY_MAX_COUNT,
    CELEBRITY_POPULARITY_BONUS,
    CELEBRITY_ROLL_FROM,
    NO_SPECIAL_ROLL_FROM,
    OLD_AGE_FROM_DAYS,
    PHOTOGRAPHER_MAX_COUNT,
    PHOTOGRAPHER_POPULARITY_BONUS,
    PHOTOGRAPHER_ROLL_FROM,
    POPULARITY_SWING_PCT,
    SICKNESS_CHANCE_PCT,
    STARVATION_DEATH_PCT,
)
from ZooSim_V1.domain.staff import Role

if TYPE_CHECKING:
    from ZooSim_V1.core.zoo import Zoo

logger = logging.getLogger(__name__)


def _start_new_day(zoo: "Zoo") -> None:
    zoo.day += 1
    zoo.animals_bought_today = 0
    zoo.special_visitor = SpecialVisitor.NONE
    zoo.special_visitor_count = 0
    zoo.rotate_market()


def _age_animals(zoo: "Zoo", report: DayReport) -> None:
    """Age every animal; past 30 days, a roll below its age kills it.

    The roll is compared to the raw age in days, so from 100 days on the
    animal dies for sure.
    """
    for animal in zoo.roster:
        animal.grow_one_day()
        if animal.age_days > OLD_AGE_FROM_DAYS and zoo.roll(0, 99) < animal.age_days:
            zoo.remove_animal(animal.animal_id)
            report.died_of_old_age.append(animal.name)
            report.events.append(f"{animal.name} died of old age.")
            logger.debug("Old age: %s #%d (%d days)", animal.name, animal.animal_id, animal.age_days)


def _run_staff(zoo: "Zoo", report: DayReport) -> None:
    for worker in zoo.workers:
        if worker.work_one_day():
            report.idle_workers.append(worker.name)
            logger.debug("%s is back to idle", worker.name)


def _spread_sickness(zoo: "Zoo", report: DayReport) -> None:
    for animal in zoo.roster:
        if not animal.sick and zoo.roll(0, 99) < SICKNESS_CHANCE_PCT:
            animal.sick = True
            report.fell_sick += 1
    if report.fell_sick:
        report.events.append(f"{report.fell_sick} animal(s) fell sick.")


def _treat_animals(zoo: "Zoo", report: DayReport) -> None:
    """Veterinarians on duty cure sick animals of their enclosures, roster order first."""
    for worker in zoo.workers:
        if worker.role is not Role.VETERINARIAN or not worker.on_duty:
            continue
        treated = 0
        for animal in zoo.roster:
            if treated >= worker.treatment_capacity:
                break
            if animal.sick and animal.enclosure_id in worker.assigned_enclosures:
                animal.sick = False
                treated += 1
        report.cured += treated
        if treated:
            report.events.append(f"{worker.name} treated {treated} animal(s).")
            logger.debug("%s treated %d animals", worker.name, treated)


def _feed_animals(zoo: "Zoo", report: DayReport) -> None:
    """Feed everyone, or leave the stock untouched and let hunger strike."""
    demand = zoo.roster.food_demand()
    report.food_demand = demand
    if zoo.food >= demand:
        zoo.food -= demand
        report.food_consumed = demand
        return

    report.food_shortage = True
    report.events.append(f"Food shortage: {demand} units needed, {zoo.food} in stock.")
    for animal in zoo.roster:
        if zoo.roll(0, 99) < STARVATION_DEATH_PCT:
            zoo.remove_animal(animal.animal_id)
            report.died_of_starvation.append(animal.name)
            report.events.append(f"{animal.name} died of starvation.")
            logger.debug("Starvation: %s #%d", animal.name, animal.animal_id)


def _drift_popularity(zoo: "Zoo") -> None:
    swing = zoo.roll(-POPULARITY_SWING_PCT, POPULARITY_SWING_PCT)
    zoo.popularity *= 1.0 + swing / 100.0
    zoo.popularity -= zoo.roster.sick_count()
    zoo.popularity = max(0.0, zoo.popularity)


def _welcome_visitors(zoo: "Zoo", report: DayReport) -> None:
    zoo.visitors = int(zoo.popularity)
    special_roll = zoo.roll(0, 99)
    if special_roll < CELEBRITY_ROLL_FROM or special_roll >= NO_SPECIAL_ROLL_FROM:
        zoo.special_visitor = SpecialVisitor.NONE
        zoo.special_visitor_count = 0
    elif special_roll < PHOTOGRAPHER_ROLL_FROM:
        zoo.special_visitor = SpecialVisitor.CELEBRITY
        zoo.special_visitor_count = zoo.roll(1, CELEBRITY_MAX_COUNT)
        zoo.popularity += zoo.special_visitor_count * CELEBRITY_POPULARITY_BONUS
    else:
        zoo.special_visitor = SpecialVisitor.PHOTOGRAPHER
        zoo.special_visitor_count = zoo.roll(1, PHOTOGRAPHER_MAX_COUNT)
        zoo.popularity += zoo.special_visitor_count * PHOTOGRAPHER_POPULARITY_BONUS

    report.visitors = zoo.visitors
    report.special_visitor = zoo.special_visitor
    report.special_visitor_count = zoo.special_visitor_count
    if zoo.special_visitor is not SpecialVisitor.NONE:
        report.events.append(
            f"Special guests: {zoo.special_visitor_count} {zoo.special_visitor.value.lower()}(s)."
        )


def _settle_accounts(zoo: "Zoo", report: DayReport) -> None:
    report.revenue = float(zoo.visitors * zoo.total_animals)
    zoo.cash += report.revenue

    report.salaries = float(zoo.daily_salaries)
    report.upkeep = float(zoo.daily_upkeep)
    zoo.cash -= report.salaries
    zoo.cash -= report.upkeep


def _service_loans(zoo: "Zoo", report: DayReport) -> None:
    for loan in zoo.loans:
        if loan.days_left > 0:
            paid = loan.pay_installment()
            zoo.cash -= paid
            report.loan_payments += paid
            if loan.paid_off:
                report.loans_paid_off.append(loan.principal)
                report.events.append(f"Loan of ${loan.principal:,.0f} paid off.")
                logger.debug("Loan of %.2f paid off", loan.principal)
    zoo.loans = [loan for loan in zoo.loans if not loan.paid_off]


def advance_day(zoo: "Zoo") -> DayReport:
    """Run one daily tick on ``zoo`` and report what happened.

    Args:
        zoo: The game state, mutated in place.

    Returns:
        DayReport for the day just started, with its narrative events.
    """
    report = DayReport(day=zoo.day + 1, cash_start=zoo.cash, cash_end=zoo.cash)

    _start_new_day(zoo)
    _age_animals(zoo, report)
    _run_staff(zoo, report)
    _spread_sickness(zoo, report)
    _treat_animals(zoo, report)
    _feed_animals(zoo, report)
    _drift_popularity(zoo)
    _welcome_visitors(zoo, report)
    _settle_accounts(zoo, report)
    _service_loans(zoo, report)

    report.popularity = zoo.popularity
    report.cash_end = zoo.cash
    logger.info("Day %d: cash %.2f -> %.2f", zoo.day, report.cash_start, report.cash_end)
    return report
