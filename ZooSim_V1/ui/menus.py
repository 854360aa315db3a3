# ZooSim_V1/ui/menus.py
"""
Interactive sub-menus of the main loop.

Each ``manage_*`` function loops on its own menu until the player picks
"Back". Choices shown to the player are 1-based, 0 cancels a selection.
Commands are run on the Zoo; a rejected command prints its reason and
leaves the zoo untouched.
"""

from typing import Callable, Optional

from ZooSim_V1.console_style import green, red
from ZooSim_V1.core.errors import ZooError
from ZooSim_V1.data.zoo_params import (
    AD_POPULARITY_GAIN,
    AD_SPEND_STEP,
    ENCLOSURE_BUILD_COST_PER_SLOT,
    ENCLOSURE_MAX_CAPACITY,
    ENCLOSURE_MIN_CAPACITY,
    FOOD_UNIT_PRICE,
    LOAN_MAX_AMOUNT,
    LOAN_MAX_DAYS,
    MARKET_REFRESH_FEE,
    MAX_ASSIGNMENT_DAYS,
    MIN_ASSIGNMENT_DAYS,
)
from ZooSim_V1.domain.staff import HIRABLE_ROLES
from ZooSim_V1.domain.types import Climate, Diet
from ZooSim_V1.ui.display import (
    print_animal_choices,
    print_animals,
    print_enclosure_choices,
    print_enclosures,
    print_loans,
    print_market,
    print_worker_choices,
    print_workers,
)
from ZooSim_V1.utils import get_range_input, get_text_input

# Upper bound of a single food or advertising order typed at the prompt
MAX_ORDER = 10_000

DIET_CHOICES = (Diet.HERBIVORE, Diet.CARNIVORE)
CLIMATE_CHOICES = (Climate.TROPICAL, Climate.TEMPERATE, Climate.ARCTIC)


def _run(command: Callable[[], str]) -> Optional[str]:
    """Run a zoo command, print its outcome in color and return its message."""
    try:
        message = command()
    except ZooError as e:
        print(red(str(e)))
        return None
    print(green(message))
    return message


# ---------- Animals ----------

ANIMALS_MENU = (
    "\nManage animals:\n"
    "1. Buy an animal\n"
    "2. Sell an animal\n"
    "3. View animals\n"
    "4. Rename an animal\n"
    f"5. Refresh the animal market (${MARKET_REFRESH_FEE:,.0f})\n"
    "6. Back\n"
    "Choose an action: "
)


def _pick_animal(zoo, prompt: str) -> Optional[int]:
    """Let the player pick an animal; returns its id, None on cancel."""
    animals = zoo.animals
    if not animals:
        print("There are no animals in the zoo.")
        return None
    print_animal_choices(animals)
    choice = get_range_input(f"{prompt} (1-{len(animals)}) or 0 to cancel: ", 0, len(animals))
    if choice == 0:
        return None
    return animals[choice - 1].animal_id


def _buy_animal(zoo) -> None:
    if not zoo.market:
        print("The market is empty. Refresh the market.")
        return
    print_market(zoo.market)
    choice = get_range_input(
        f"Choose an animal to buy (1-{len(zoo.market)}) or 0 to cancel: ", 0, len(zoo.market)
    )
    if choice == 0:
        return
    offer = zoo.market[choice - 1]
    candidates = zoo.compatible_enclosures(offer)
    if not candidates:
        print(red(f"No enclosure can take a {offer.template.species}. Build one first."))
        return
    print(f"Choose an enclosure (ID) for {offer.template.species}:")
    print_enclosure_choices(candidates)
    ids = [e.enclosure_id for e in candidates]
    enclosure_id = get_range_input("Enclosure ID or 0 to cancel: ", 0, max(ids))
    if enclosure_id == 0:
        return
    _run(lambda: zoo.buy_animal(choice - 1, enclosure_id))


def manage_animals(zoo) -> None:
    while True:
        choice = get_range_input(ANIMALS_MENU, 1, 6)
        if choice == 1:
            _buy_animal(zoo)
        elif choice == 2:
            animal_id = _pick_animal(zoo, "Choose an animal to sell")
            if animal_id is not None:
                _run(lambda: zoo.sell_animal(animal_id))
        elif choice == 3:
            print_animals(zoo.animals)
        elif choice == 4:
            animal_id = _pick_animal(zoo, "Choose an animal to rename")
            if animal_id is not None:
                new_name = get_text_input("Enter the new name: ", "The name cannot be empty.")
                _run(lambda: zoo.rename_animal(animal_id, new_name))
        elif choice == 5:
            _run(zoo.refresh_market)
        else:
            break


# ---------- Purchases ----------

PURCHASES_MENU = (
    "\nManage purchases:\n"
    "1. Buy food\n"
    "2. Spend on advertising\n"
    "3. Take a loan\n"
    "4. View loans\n"
    "5. Back\n"
    "Choose an action: "
)


def manage_purchases(zoo) -> None:
    while True:
        choice = get_range_input(PURCHASES_MENU, 1, 5)
        if choice == 1:
            units = get_range_input(
                f"Enter the amount of food to buy (${FOOD_UNIT_PRICE:g} per unit): ", 0, MAX_ORDER
            )
            _run(lambda: zoo.buy_food(units))
        elif choice == 2:
            amount = get_range_input(
                f"Enter the advertising budget (${AD_SPEND_STEP} = +{AD_POPULARITY_GAIN} popularity): ",
                0,
                MAX_ORDER,
            )
            _run(lambda: zoo.advertise(amount))
        elif choice == 3:
            amount = get_range_input("Enter the loan amount: ", 1, LOAN_MAX_AMOUNT)
            days = get_range_input(f"Enter the repayment term (1-{LOAN_MAX_DAYS} days): ", 1, LOAN_MAX_DAYS)
            _run(lambda: zoo.take_loan(amount, days))
        elif choice == 4:
            print_loans(zoo.loans)
        else:
            break


# ---------- Enclosures ----------

ENCLOSURES_MENU = (
    "\nManage enclosures:\n"
    "1. Build a new enclosure\n"
    "2. View enclosures\n"
    "3. Back\n"
    "Choose an action: "
)


def manage_enclosures(zoo) -> None:
    while True:
        choice = get_range_input(ENCLOSURES_MENU, 1, 3)
        if choice == 1:
            capacity = get_range_input(
                f"Enter the capacity ({ENCLOSURE_MIN_CAPACITY}-{ENCLOSURE_MAX_CAPACITY}, "
                f"${ENCLOSURE_BUILD_COST_PER_SLOT} per slot): ",
                ENCLOSURE_MIN_CAPACITY,
                ENCLOSURE_MAX_CAPACITY,
            )
            diet = DIET_CHOICES[
                get_range_input("Choose the diet (1: Herbivore, 2: Carnivore): ", 1, 2) - 1
            ]
            climate = CLIMATE_CHOICES[
                get_range_input("Choose the climate (1: Tropical, 2: Temperate, 3: Arctic): ", 1, 3) - 1
            ]
            _run(lambda: zoo.build_enclosure(capacity, diet, climate))
        elif choice == 2:
            print_enclosures(zoo.enclosures)
        else:
            break


# ---------- Workers ----------

WORKERS_MENU = (
    "\nManage workers:\n"
    "1. Hire a worker\n"
    "2. View workers\n"
    "3. Fire a worker\n"
    "4. Assign a worker to an enclosure\n"
    "5. Back\n"
    "Choose an action: "
)


def _pick_worker(zoo, prompt: str) -> Optional[int]:
    """Let the player pick a worker; returns its index, None on cancel."""
    print_worker_choices(zoo.workers)
    choice = get_range_input(
        f"{prompt} (1-{len(zoo.workers)}) or 0 to cancel: ", 0, len(zoo.workers)
    )
    return None if choice == 0 else choice - 1


def _hire_worker(zoo) -> None:
    name = get_text_input("Enter the worker's name: ", "The worker name cannot be empty.")
    print("Choose a role:")
    for i, role in enumerate(HIRABLE_ROLES, start=1):
        reach = (
            f"up to {role.treatment_capacity} animals"
            if role.max_enclosures is None
            else f"{role.max_enclosures} enclosure(s)"
        )
        print(f"{i}. {role.label} ({reach}, ${role.salary}/day)")
    role = HIRABLE_ROLES[get_range_input(f"Role (1-{len(HIRABLE_ROLES)}): ", 1, len(HIRABLE_ROLES)) - 1]
    if _run(lambda: zoo.hire_worker(name, role)) is not None:
        print("Use 'Assign a worker to an enclosure' to put them to work.")


def _assign_worker(zoo) -> None:
    index = _pick_worker(zoo, "Choose a worker")
    if index is None:
        return
    if zoo.workers[index].is_director:
        print(red("The director cannot be assigned to enclosures."))
        return
    print("\nChoose an enclosure:")
    print_enclosure_choices(zoo.enclosures)
    last_id = zoo.enclosures[-1].enclosure_id if zoo.enclosures else 0
    enclosure_id = get_range_input("Enclosure ID or 0 to cancel: ", 0, last_id)
    if enclosure_id == 0:
        return
    days = get_range_input(
        f"Enter the assignment length ({MIN_ASSIGNMENT_DAYS}-{MAX_ASSIGNMENT_DAYS} days): ",
        MIN_ASSIGNMENT_DAYS,
        MAX_ASSIGNMENT_DAYS,
    )
    _run(lambda: zoo.assign_worker(index, enclosure_id, days))


def manage_workers(zoo) -> None:
    while True:
        choice = get_range_input(WORKERS_MENU, 1, 5)
        if choice == 1:
            _hire_worker(zoo)
        elif choice == 2:
            print_workers(zoo.workers)
        elif choice == 3:
            index = _pick_worker(zoo, "Choose a worker to fire")
            if index is not None:
                _run(lambda: zoo.fire_worker(index))
        elif choice == 4:
            _assign_worker(zoo)
        else:
            break


# ---------- Breeding ----------

BREEDING_MENU = "\nManage breeding:\n1. Breed animals\n2. Back\nChoose an action: "


def manage_breeding(zoo) -> None:
    while True:
        choice = get_range_input(BREEDING_MENU, 1, 2)
        if choice == 2:
            break
        if zoo.total_animals < 2:
            print("At least two animals are needed to breed.")
            continue
        print("\nChoose two animals to breed:")
        first = _pick_animal(zoo, "Choose the first animal")
        if first is None:
            continue
        second = _pick_animal(zoo, "Choose the second animal")
        if second is None:
            continue
        try:
            outcome = zoo.breed(first, second)
        except ZooError as e:
            print(red(str(e)))
            continue
        print(green(outcome.message) if outcome.ok else red(outcome.message))
