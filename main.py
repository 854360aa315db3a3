import argparse
import logging

from pydantic import ValidationError

from ZooSim_V1.core.game import Game, GameSettings
from ZooSim_V1.data.zoo_params import MAX_DAYS
from ZooSim_V1.utils import get_text_input


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a zoo for a few weeks without going broke.")
    parser.add_argument("--name", help="Name of the zoo (asked interactively when omitted)")
    parser.add_argument("--days", type=int, default=MAX_DAYS, help="Number of days to play")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the random generator")
    parser.add_argument("--verbose", action="store_true", help="Log game events at INFO level")
    return parser.parse_args(argv)


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    name = args.name or get_text_input("Enter the zoo name: ", "The zoo name cannot be empty.")
    try:
        settings = GameSettings(zoo_name=name, max_days=args.days, seed=args.seed)
    except ValidationError as e:
        raise SystemExit(f"Invalid settings: {e}")

    game = Game(settings)
    outcome = game.play()
    return 0 if outcome.completed else 1


if __name__ == "__main__":
    raise SystemExit(run())
