"""Command line entry point: benchmark the CPU attacker against random fleets."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from salvo.core.errors import SalvoError
from salvo.game.simulation import run_simulations
from salvo.infra.config import AttackerSettings, load_env_files
from salvo.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="salvo-sim",
        description="Play headless games with the CPU attacker and report shot statistics.",
    )
    parser.add_argument("--games", type=int, default=100, help="Number of games to simulate.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for fleets and attacker (defaults to SALVO_SEED).",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Random draws before the scan fallback (defaults to SALVO_RANDOM_MAX_ATTEMPTS).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation CLI."""
    args = build_parser().parse_args(argv)
    load_env_files(override_existing=False)
    settings = AttackerSettings.from_env()
    seed = args.seed if args.seed is not None else settings.seed
    max_attempts = (
        args.max_attempts if args.max_attempts is not None else settings.random_max_attempts
    )

    try:
        setup_logging(context={"games": args.games, "seed": seed})
        summary = run_simulations(args.games, seed, random_max_attempts=max_attempts)
    except (SalvoError, ValueError):
        logger.exception("simulation_failed games=%s seed=%s", args.games, seed)
        return 1
    finally:
        shutdown_logging()

    print(
        f"games={summary.games} wins={summary.wins} "
        f"shots[min={summary.min_shots} mean={summary.mean_shots:.1f} max={summary.max_shots}] "
        f"accuracy={summary.mean_accuracy:.1f}%"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
