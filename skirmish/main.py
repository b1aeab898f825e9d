"""
Main entry point for the Skirmish combat simulator.

Loads the encounter and the balance settings, then runs an interactive fight
between the player and the enemy roster in the console.
"""

import argparse
import logging
from pathlib import Path

from skirmish.combat.combat_manager import build_session
from skirmish.core.content import load_encounter, load_settings
from skirmish.core.logging import setup_logging
from skirmish.core.randomness import make_rng
from skirmish.core.utils import cprint, crule
from skirmish.ui.cli_interface import PlayerInterface, run_game


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Turn-based console combat.")
    parser.add_argument(
        "--encounter", type=Path, default=None, help="JSON encounter roster"
    )
    parser.add_argument(
        "--settings", type=Path, default=None, help="JSON balance settings"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for a reproducible fight"
    )
    parser.add_argument(
        "--no-delay", action="store_true", help="Disable the dramatic pauses"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING)

    session = build_session(
        encounter=load_encounter(args.encounter),
        settings=load_settings(args.settings),
        rng=make_rng(args.seed),
    )
    if args.no_delay:
        ui = PlayerInterface(start_delay=0, turn_delay=0, enemy_delay=0)
    else:
        ui = PlayerInterface()

    try:
        run_game(session, ui)
    except (KeyboardInterrupt, EOFError):
        cprint("")
        crule("Combat Interrupted", style="bold red")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
