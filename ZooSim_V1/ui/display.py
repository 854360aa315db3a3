# ZooSim_V1/ui/display.py
from typing import List

from ZooSim_V1.console_style import bold, cyan, red, signed_money, yellow
from ZooSim_V1.core.results import DayReport, SpecialVisitor
from ZooSim_V1.domain.animal import Animal
from ZooSim_V1.domain.enclosure import Enclosure
from ZooSim_V1.domain.loan import Loan
from ZooSim_V1.domain.market import MarketOffer
from ZooSim_V1.domain.staff import Role, Worker


# ---------- Formatting helpers ----------


def format_currency(x: float) -> str:
    """Format an amount as dollars with thousands separators."""
    return f"${x:,.2f}"


def _bar(current: int, maxv: int, width: int = 20, fill_char: str = "█") -> str:
    """Text progress bar, ``current`` out of ``maxv``.

    Parameters
    ----------
    current : int
        The current value to represent.
    maxv : int
        The maximum possible value (100% fill).
    width : int, optional
        Total width of the bar in characters (default: 20).
    fill_char : str, optional
        Character used to fill the bar (default: "█").

    Returns
    -------
    str
        The bar, or blanks if maxv <= 0.
    """
    if maxv <= 0:
        return " " * width
    ratio = max(0.0, min(1.0, float(current) / float(maxv)))
    n = int(round(ratio * width))
    return fill_char * n + "·" * (width - n)


def _sex(animal_or_offer) -> str:
    return animal_or_offer.sex.value


# ---------- Status ----------


def print_status(zoo) -> None:
    print(bold(f'\n--- Zoo "{zoo.name}" status (day {zoo.day}) ---'))
    print(f"Money: {signed_money(zoo.cash)}")
    print(f"Food: {zoo.food} units")
    print(f"Popularity: {zoo.popularity:.1f}")
    print(f"Total animals: {zoo.total_animals}")
    print(f"Visitors today: {zoo.visitors}")
    if zoo.special_visitor is not SpecialVisitor.NONE:
        print(f"Special guests: {zoo.special_visitor_count} {zoo.special_visitor.value.lower()}(s)")
    print(f"Workers: {len(zoo.workers)}")
    print(f"Enclosures: {len(zoo.enclosures)}")
    if zoo.loans:
        print(f"Outstanding debt: {format_currency(zoo.total_debt)}")


# ---------- Lists ----------


def print_market(market: List[MarketOffer]) -> None:
    print(cyan("\nAnimals available for purchase:"))
    for i, offer in enumerate(market, start=1):
        t = offer.template
        print(
            f"{i}. {t.species} ({t.name}), Price: {format_currency(t.price)}, "
            f"Sex: {_sex(offer)}, Climate: {t.climate.label}, Diet: {t.diet.label}"
        )


def print_animal_choices(animals: List[Animal]) -> None:
    for i, a in enumerate(animals, start=1):
        print(f"{i}. {a.species} ({a.name}), Sex: {_sex(a)}, Enclosure: {a.enclosure_id}")


def print_animals(animals: List[Animal]) -> None:
    if not animals:
        print("There are no animals in the zoo.")
        return
    print(cyan("\nAnimals:"))
    for a in animals:
        line = (
            f"#{a.animal_id} {a.species}, Name: {a.name}, Age: {a.age_days} days, "
            f"Sex: {_sex(a)}, Weight: {a.weight:g} kg, Climate: {a.climate.label}, "
            f"Diet: {a.diet.label}, Enclosure: {a.enclosure_id}, "
            f"Days in zoo: {a.days_in_zoo}, Sick: {'Yes' if a.sick else 'No'}"
        )
        if a.born_in_zoo and a.parents:
            line += f", Parents: {a.parents[0]} and {a.parents[1]}"
        print(line)


def print_enclosure_choices(enclosures: List[Enclosure]) -> None:
    for e in enclosures:
        print(f"ID {e.enclosure_id} ({e.population}/{e.capacity} animals)")


def print_enclosures(enclosures: List[Enclosure]) -> None:
    if not enclosures:
        print("There are no enclosures in the zoo.")
        return
    print(cyan("\nEnclosures:"))
    for e in enclosures:
        print(
            f"ID: {e.enclosure_id} |{_bar(e.population, e.capacity)}| "
            f"{e.population}/{e.capacity}, Diet: {e.diet.label}, "
            f"Climate: {e.climate.label}, Daily cost: {format_currency(e.daily_cost)}"
        )


def print_worker_choices(workers: List[Worker]) -> None:
    for i, w in enumerate(workers, start=1):
        print(f"{i}. Name: {w.name}, Role: {w.role.label}")


def print_workers(workers: List[Worker]) -> None:
    if not workers:
        print("There are no workers in the zoo.")
        return
    print(cyan("\nWorkers:"))
    for i, w in enumerate(workers, start=1):
        line = (
            f"{i}. Name: {w.name}, Role: {w.role.label}, Salary: {format_currency(w.salary)}, "
            f"Days worked: {w.days_worked}"
        )
        if w.role is Role.VETERINARIAN:
            line += f", Treats up to: {w.treatment_capacity} animals"
        enclosures = ", ".join(str(e) for e in w.assigned_enclosures) or "None"
        line += f", Enclosures: {enclosures}, Days assigned: {w.days_assigned}"
        print(line)


def print_loans(loans: List[Loan]) -> None:
    if not loans:
        print("\nYou have no active loans.")
        return
    print(cyan("\nCurrent loans:"))
    for i, loan in enumerate(loans, start=1):
        print(
            f"{i}. Amount: {format_currency(loan.principal)}, "
            f"Daily rate: {loan.daily_rate * 100:.1f}%, Days left: {loan.days_left}, "
            f"Daily payment: {format_currency(loan.daily_repayment)}, "
            f"Remaining debt: {format_currency(loan.remaining_debt)}"
        )


# ---------- Day report ----------


def print_day_report(report: DayReport) -> None:
    """Print the narrative of a day then a small income summary."""
    print(bold(f"\n=== Day {report.day} ==="))
    for event in report.events:
        if "died" in event:
            print(red(f"  {event}"))
        else:
            print(yellow(f"  {event}"))
    for name in report.idle_workers:
        print(f"  {name} has no assignment anymore.")
    print(f"Visitors: {report.visitors}  Popularity: {report.popularity:.1f}")
    print(f"Ticket revenue : {format_currency(report.revenue)}")
    print(f"Salaries       : -{format_currency(report.salaries)}")
    print(f"Upkeep         : -{format_currency(report.upkeep)}")
    if report.loan_payments:
        print(f"Loan payments  : -{format_currency(report.loan_payments)}")
    print(f"Net            : {signed_money(report.net)}")
    print(f"Cash           : {signed_money(report.cash_end)}")
