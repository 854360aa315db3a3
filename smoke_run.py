# smoke_run.py
"""
Quick check: plays a full game without any console input, following a simple
scripted strategy, and prints every day report.
"""

import logging

import numpy as np

from ZooSim_V1.console_style import bold, green, red
from ZooSim_V1.core.errors import ZooError
from ZooSim_V1.core.zoo import Zoo
from ZooSim_V1.data.zoo_params import MAX_DAYS
from ZooSim_V1.domain.staff import Role
from ZooSim_V1.domain.types import Climate, Diet
from ZooSim_V1.ui.display import print_animals, print_day_report, print_status, print_workers

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

SEED = 42


def try_command(command, *args):
    try:
        print(green(command(*args)))
    except ZooError as e:
        print(red(f"{command.__name__}: {e}"))


def buy_what_fits(zoo: Zoo) -> None:
    # cheapest offer first while an enclosure can take it and a cushion remains
    while True:
        affordable = [
            (offer.price, index, zoo.compatible_enclosures(offer))
            for index, offer in enumerate(zoo.market)
            if zoo.cash - offer.price > 300
        ]
        affordable = [entry for entry in affordable if entry[2]]
        if not affordable:
            return
        _, index, candidates = min(affordable, key=lambda entry: entry[0])
        try:
            print(green(zoo.buy_animal(index, candidates[0].enclosure_id)))
        except ZooError as e:
            print(red(f"buy_animal: {e}"))
            return


def breed_first_pair(zoo: Zoo) -> None:
    animals = zoo.animals
    for i, first in enumerate(animals):
        for second in animals[i + 1 :]:
            if first.breeding_violation(second) is not None:
                continue
            try:
                outcome = zoo.breed(first.animal_id, second.animal_id)
            except ZooError as e:
                print(red(f"breed: {e}"))
                return
            print(green(outcome.message))
            return


zoo = Zoo("Smoke Zoo", rng=np.random.default_rng(SEED))

# Day 1 set-up: a second enclosure, the vet and the feeder on duty
try_command(zoo.build_enclosure, 4, Diet.CARNIVORE, Climate.TEMPERATE)
try_command(zoo.assign_worker, 2, 1, 10)
try_command(zoo.assign_worker, 3, 1, 10)
try_command(zoo.assign_worker, 3, 2, 10)
try_command(zoo.hire_worker, "Neo", Role.CLEANER)
try_command(zoo.assign_worker, 4, 2, 10)
try_command(zoo.take_loan, 500, 10)

for _ in range(MAX_DAYS):
    buy_what_fits(zoo)
    if zoo.food < 2 * zoo.roster.food_demand():
        try_command(zoo.buy_food, 30)
    if zoo.day % 5 == 0 and zoo.cash > 800:
        try_command(zoo.advertise, 200)
    breed_first_pair(zoo)

    report = zoo.advance_day()
    print_day_report(report)
    if zoo.is_bankrupt:
        print(red(f"\nThe zoo went bankrupt on day {zoo.day}."))
        break

print_status(zoo)
print_animals(zoo.animals)
print_workers(zoo.workers)
print(bold(f"\nFinal cash: {zoo.cash:,.2f}"))
