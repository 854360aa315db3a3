"""Tests for the game loop and the console menus, driven by scripted input."""

import pytest
from pydantic import ValidationError

from ZooSim_V1.core.game import Game, GameSettings
from ZooSim_V1.ui.menus import manage_enclosures, manage_purchases, manage_workers


def _feed_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


class TestGameSettings:
    def test_defaults(self):
        settings = GameSettings(zoo_name="  Safari  ")
        assert settings.zoo_name == "Safari"
        assert settings.max_days == 20
        assert settings.seed is None

    def test_blank_name(self):
        with pytest.raises(ValidationError):
            GameSettings(zoo_name="   ")

    def test_horizon_must_be_positive(self):
        with pytest.raises(ValidationError):
            GameSettings(zoo_name="Safari", max_days=0)


class TestGame:
    def test_idle_zoo_goes_bankrupt(self, monkeypatch):
        """Skipping every day with no animals runs out of money after 8 days."""
        monkeypatch.setattr("builtins.input", lambda prompt="": "6")
        game = Game(GameSettings(zoo_name="Idle", seed=1))
        outcome = game.play()
        assert outcome.bankrupt
        assert not outcome.completed
        assert outcome.day == 9
        assert outcome.cash == pytest.approx(-32.0)

    def test_short_game_completes(self, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt="": "6")
        game = Game(GameSettings(zoo_name="Short", max_days=3, seed=1))
        outcome = game.play()
        assert outcome.completed
        assert outcome.day == 4
        assert outcome.cash == pytest.approx(1488 - 3 * 190)

    def test_invalid_choice_is_asked_again(self, monkeypatch, capsys):
        _feed_input(monkeypatch, ["abc", "9", "6"])
        game = Game(GameSettings(zoo_name="Retry", max_days=1, seed=1))
        game.play()
        assert "Invalid input" in capsys.readouterr().out
        assert game.zoo.day == 2


class TestMenus:
    def test_buy_food_through_menu(self, monkeypatch, zoo):
        _feed_input(monkeypatch, ["1", "10", "5"])
        manage_purchases(zoo)
        assert zoo.food == 110
        assert zoo.cash == 1468

    def test_rejected_command_is_reported(self, monkeypatch, capsys, zoo):
        _feed_input(monkeypatch, ["1", "5000", "5"])
        manage_purchases(zoo)
        assert "Not enough money" in capsys.readouterr().out
        assert zoo.food == 100

    def test_build_enclosure_through_menu(self, monkeypatch, zoo):
        _feed_input(monkeypatch, ["1", "4", "2", "3", "3"])
        manage_enclosures(zoo)
        enclosure = zoo.get_enclosure(2)
        assert enclosure.capacity == 4
        assert enclosure.diet.label == "Carnivore"
        assert enclosure.climate.label == "Arctic"

    def test_hire_and_assign_through_menu(self, monkeypatch, zoo):
        _feed_input(monkeypatch, ["1", "Neo", "3", "4", "5", "1", "12", "5"])
        manage_workers(zoo)
        neo = zoo.workers[-1]
        assert neo.name == "Neo"
        assert neo.role.label == "Feeder"
        assert neo.assigned_enclosures == [1]
        assert neo.days_assigned == 12
