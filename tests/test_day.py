"""Tests for the daily tick."""

import pytest

from ZooSim_V1.core.results import SpecialVisitor
from ZooSim_V1.domain.types import Climate, Diet


def _rolls(*values):
    """Answer the 0..99 rolls in order, then 99; no popularity swing.

    Other draws (market seed, guest counts) take their largest value.
    """
    queue = list(values)

    def pick(low, high):
        if (low, high) == (0, 100):
            return queue.pop(0) if queue else 99
        if low == -10:
            return 0
        return high - 1

    return pick


def _special_roll(value):
    """Rolls with no popularity swing and a forced special-visitor roll."""
    return _rolls(value)


class TestOpeningDay:
    def test_empty_zoo_pays_salaries_and_upkeep(self, zoo):
        """With no animals, the first day costs 180 in salaries and 10 in upkeep."""
        report = zoo.advance_day()
        assert zoo.day == 2
        assert report.day == 2
        assert zoo.cash == 1298
        assert report.cash_start == 1488
        assert report.cash_end == 1298
        assert report.net == -190
        assert report.revenue == 0
        assert zoo.food == 100
        assert len(zoo.market) == 10

    def test_unassigned_cleaner_goes_idle(self, zoo):
        """The cleaner listed on enclosure 1 has no days left and is released."""
        report = zoo.advance_day()
        assert report.idle_workers == ["Trinity"]
        assert zoo.workers[1].assigned_enclosures == []
        assert all(w.days_worked == 1 for w in zoo.workers)

    def test_purchase_counter_resets(self, zoo):
        zoo.animals_bought_today = 1
        zoo.advance_day()
        assert zoo.animals_bought_today == 0


class TestAging:
    def test_old_animal_dies_on_low_roll(self, scripted_zoo, house, lowest):
        zoo = scripted_zoo(lowest)
        old = house(zoo, age_days=40, name="Grandpa")
        report = zoo.advance_day()
        assert report.died_of_old_age == ["Grandpa"]
        assert old.animal_id not in zoo.roster
        assert zoo.get_enclosure(1).animal_ids == []

    def test_old_animal_survives_high_roll(self, scripted_zoo, house, highest):
        zoo = scripted_zoo(highest)
        old = house(zoo, age_days=40)
        zoo.advance_day()
        assert zoo.roster.get(old.animal_id).age_days == 41

    def test_roll_just_below_age_kills(self, scripted_zoo, house):
        """At 41 days a roll of 40 is below the age."""
        zoo = scripted_zoo(_rolls(40))
        house(zoo, age_days=40)
        report = zoo.advance_day()
        assert len(report.died_of_old_age) == 1
        assert zoo.total_animals == 0

    def test_roll_equal_to_age_spares(self, scripted_zoo, house):
        zoo = scripted_zoo(_rolls(41))
        old = house(zoo, age_days=40)
        report = zoo.advance_day()
        assert report.died_of_old_age == []
        assert old.animal_id in zoo.roster

    def test_hundred_days_is_certain_death(self, scripted_zoo, house, highest):
        zoo = scripted_zoo(highest)
        house(zoo, age_days=99)
        report = zoo.advance_day()
        assert len(report.died_of_old_age) == 1
        assert zoo.total_animals == 0

    def test_no_mortality_roll_up_to_thirty(self, scripted_zoo, house, lowest):
        zoo = scripted_zoo(lowest)
        animal = house(zoo, age_days=29)
        report = zoo.advance_day()
        assert report.died_of_old_age == []
        assert zoo.roster.get(animal.animal_id).age_days == 30


class TestFeeding:
    def test_shortage_leaves_food_untouched(self, scripted_zoo, house, lowest):
        """When stock is short nobody eats, and each animal may starve."""
        zoo = scripted_zoo(lowest)
        house(zoo, name="A")
        house(zoo, name="B")
        zoo.food = 1
        report = zoo.advance_day()
        assert report.food_shortage
        assert report.food_demand == 2
        assert zoo.food == 1
        assert report.died_of_starvation == ["A", "B"]
        assert zoo.total_animals == 0
        assert zoo.get_enclosure(1).animal_ids == []

    def test_shortage_survivors(self, scripted_zoo, house, highest):
        zoo = scripted_zoo(highest)
        house(zoo)
        house(zoo)
        zoo.food = 1
        report = zoo.advance_day()
        assert report.died_of_starvation == []
        assert zoo.food == 1
        assert zoo.total_animals == 2

    def test_starvation_roll_of_29_kills(self, scripted_zoo, house):
        """Starvation strikes on rolls 0 to 29."""
        zoo = scripted_zoo(_rolls(99, 29))
        house(zoo, name="Hungry")
        zoo.food = 0
        report = zoo.advance_day()
        assert report.died_of_starvation == ["Hungry"]
        assert zoo.get_enclosure(1).animal_ids == []

    def test_starvation_roll_of_30_spares(self, scripted_zoo, house):
        zoo = scripted_zoo(_rolls(99, 30))
        house(zoo)
        zoo.food = 0
        report = zoo.advance_day()
        assert report.food_shortage
        assert report.died_of_starvation == []
        assert zoo.total_animals == 1

    def test_enough_food(self, scripted_zoo, house, highest):
        zoo = scripted_zoo(highest)
        zoo.cash = 5000.0
        zoo.build_enclosure(2, Diet.CARNIVORE, Climate.TEMPERATE)
        house(zoo, 1)
        house(zoo, 2, species="Wolf", diet=Diet.CARNIVORE)
        report = zoo.advance_day()
        assert not report.food_shortage
        assert report.food_consumed == 3
        assert zoo.food == 97


class TestHealth:
    def test_low_roll_makes_animals_sick(self, scripted_zoo, house, lowest):
        zoo = scripted_zoo(lowest)
        house(zoo)
        report = zoo.advance_day()
        assert report.fell_sick == 1
        assert zoo.roster.sick_count() == 1

    def test_sickness_roll_of_9_strikes(self, scripted_zoo, house):
        """Sickness strikes on rolls 0 to 9."""
        zoo = scripted_zoo(_rolls(9))
        house(zoo)
        report = zoo.advance_day()
        assert report.fell_sick == 1
        assert zoo.roster.sick_count() == 1

    def test_sickness_roll_of_10_spares(self, scripted_zoo, house):
        zoo = scripted_zoo(_rolls(10))
        house(zoo)
        report = zoo.advance_day()
        assert report.fell_sick == 0
        assert zoo.roster.sick_count() == 0

    def test_vet_treats_in_roster_order(self, scripted_zoo, house, highest):
        """Treatment stops at capacity, earliest animals first."""
        zoo = scripted_zoo(highest)
        zoo.build_enclosure(25, Diet.HERBIVORE, Climate.TEMPERATE)
        zoo.assign_worker(2, 2, 5)
        animals = [house(zoo, 2, sick=True) for _ in range(22)]
        report = zoo.advance_day()
        assert report.cured == 20
        still_sick = [a.animal_id for a in zoo.animals if a.sick]
        assert still_sick == [a.animal_id for a in animals[-2:]]

    def test_vet_ignores_other_enclosures(self, scripted_zoo, house, highest):
        zoo = scripted_zoo(highest)
        zoo.build_enclosure(3, Diet.HERBIVORE, Climate.TEMPERATE)
        zoo.assign_worker(2, 2, 5)
        house(zoo, 1, sick=True)
        report = zoo.advance_day()
        assert report.cured == 0
        assert zoo.roster.sick_count() == 1

    def test_one_day_assignment_expires_before_treatment(self, scripted_zoo, house, highest):
        zoo = scripted_zoo(highest)
        zoo.assign_worker(2, 1, 1)
        house(zoo, sick=True)
        report = zoo.advance_day()
        assert report.cured == 0
        assert "Morpheus" in report.idle_workers


class TestVisitors:
    def test_popularity_swing_and_revenue(self, scripted_zoo, house, highest):
        """Each visitor pays once per animal in the zoo."""
        zoo = scripted_zoo(highest)
        house(zoo)
        house(zoo)
        report = zoo.advance_day()
        assert zoo.popularity == pytest.approx(55.0)
        assert report.visitors == 55
        assert report.revenue == 110
        assert report.special_visitor is SpecialVisitor.NONE
        assert zoo.cash == pytest.approx(1488 + 110 - 190)

    def test_sick_animals_lower_popularity(self, scripted_zoo, house, highest):
        zoo = scripted_zoo(highest)
        for _ in range(3):
            house(zoo, sick=True)
        zoo.advance_day()
        assert zoo.popularity == pytest.approx(52.0)

    def test_popularity_never_negative(self, scripted_zoo, house, lowest):
        zoo = scripted_zoo(lowest)
        zoo.popularity = 1.0
        for _ in range(3):
            house(zoo)
        zoo.advance_day()
        assert zoo.popularity == 0
        assert zoo.visitors == 0

    def test_celebrities(self, scripted_zoo):
        """Celebrities come after the visitor count and add 10 popularity each."""
        zoo = scripted_zoo(_special_roll(25))
        report = zoo.advance_day()
        assert report.visitors == 50
        assert report.special_visitor is SpecialVisitor.CELEBRITY
        assert report.special_visitor_count == 2
        assert zoo.popularity == 70

    def test_photographers(self, scripted_zoo):
        zoo = scripted_zoo(_special_roll(35))
        report = zoo.advance_day()
        assert report.special_visitor is SpecialVisitor.PHOTOGRAPHER
        assert report.special_visitor_count == 3
        assert zoo.popularity == 65

    @pytest.mark.parametrize(
        "roll, guest",
        [
            (20, SpecialVisitor.CELEBRITY),
            (29, SpecialVisitor.CELEBRITY),
            (30, SpecialVisitor.PHOTOGRAPHER),
            (49, SpecialVisitor.PHOTOGRAPHER),
        ],
    )
    def test_special_guest_band_edges(self, scripted_zoo, roll, guest):
        """Celebrities on 20 to 29, photographers on 30 to 49."""
        zoo = scripted_zoo(_special_roll(roll))
        report = zoo.advance_day()
        assert report.special_visitor is guest

    @pytest.mark.parametrize("roll", [0, 19, 50, 99])
    def test_no_special_guest(self, scripted_zoo, roll):
        zoo = scripted_zoo(_special_roll(roll))
        report = zoo.advance_day()
        assert report.special_visitor is SpecialVisitor.NONE
        assert zoo.special_visitor_count == 0
        assert zoo.popularity == 50


class TestLoanService:
    def test_loan_paid_off(self, zoo):
        zoo.take_loan(1000, 2)
        first = zoo.advance_day()
        assert first.loan_payments == pytest.approx(505.0)
        assert first.loans_paid_off == []
        second = zoo.advance_day()
        assert second.loans_paid_off == [1000.0]
        assert zoo.loans == []
        assert zoo.cash == pytest.approx(1488 + 1000 - 2 * 190 - 1010)

    def test_tick_runs_through_insolvency(self, zoo):
        """Loans are still charged on a day that ends in debt."""
        zoo.take_loan(100, 1)
        zoo.cash = 0.0
        report = zoo.advance_day()
        assert report.loan_payments == pytest.approx(100.5)
        assert zoo.cash == pytest.approx(-290.5)
        assert zoo.is_bankrupt
