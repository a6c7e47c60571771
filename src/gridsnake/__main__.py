from __future__ import annotations

import argparse
import logging
import sys

from . import config


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsnake",
        description="Snake on a wrap-around grid.",
    )
    sizing = parser.add_mutually_exclusive_group()
    sizing.add_argument("--size", type=int, default=20, help="Cells along each side of the field.")
    sizing.add_argument(
        "--window",
        type=int,
        default=None,
        metavar="PX",
        help=f"Fit the field to a square window of PX pixels ({config.BLOCK} px cells).",
    )
    parser.add_argument("--length", type=int, default=2, help="Starting length of the snake.")
    parser.add_argument("--food", type=int, default=1, help="Food items kept on the field.")
    parser.add_argument("--tick-ms", type=int, default=150, help="Milliseconds between moves.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument("--autopilot", action="store_true", help="Let the path finder steer.")
    parser.add_argument("--headless", action="store_true", help="No window; the autopilot plays to the end.")
    parser.add_argument("--max-ticks", type=int, default=10_000, help="Tick limit for --headless runs.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for info logs, -vv for debug.")
    return parser


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(ns.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        field_size = ns.size if ns.window is None else config.cells_for_window(ns.window)
        settings = config.Settings(
            field_size=field_size,
            initial_length=ns.length,
            food_count=ns.food,
            tick_ms=ns.tick_ms,
            seed=ns.seed,
        )
        if ns.headless:
            from .headless import run

            state = run(settings, ns.max_ticks)
            outcome = "won" if state.won else "over" if state.game_over else "stopped"
            print(
                f"Game {outcome} on a {state.size}x{state.size} field after {state.ticks} ticks. "
                f"Score: {state.score}"
            )
            return 0
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # Import late so --headless never needs a display.
    from .game import main as play

    return play(settings, autopilot=ns.autopilot)


if __name__ == "__main__":
    raise SystemExit(main())
