"""Headless CPU-versus-fleet games used for benchmarking the attacker."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from salvo.ai.player import CpuAttacker
from salvo.ai.random_search import DEFAULT_MAX_ATTEMPTS
from salvo.core.board import BoardState
from salvo.core.errors import ContractViolationError
from salvo.core.fleet import build_board_from_fleet, random_fleet
from salvo.core.models import AttackOutcome, ShotResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GameReport:
    """Outcome of a single simulated game."""

    shots: int
    hits: int
    ships_sunk: int
    won: bool

    @property
    def accuracy(self) -> float:
        return self.hits / self.shots * 100 if self.shots else 0.0


@dataclass(frozen=True, slots=True)
class SimulationSummary:
    """Aggregate over several simulated games."""

    games: int
    wins: int
    min_shots: int
    max_shots: int
    mean_shots: float
    mean_accuracy: float


def play_cpu_game(board: BoardState, attacker: CpuAttacker) -> GameReport:
    """Let the attacker fire at ``board`` until the fleet sinks or no cell remains."""
    attacker.reset_for_new_game()
    attacker.bind_board(board)
    ships_sunk = 0

    while not board.all_ships_sunk():
        target = attacker.determine_next_attack()
        if target is None:
            break
        result, sunk_type = board.apply_shot(target)
        if result is ShotResult.REPEAT:
            raise ContractViolationError(f"Attacker fired twice at {target}.")
        attacker.report(target, AttackOutcome.from_shot(result, sunk_type))
        if result is ShotResult.SUNK:
            ships_sunk += 1
            logger.debug("simulation_sunk ship=%s shots=%s", sunk_type, len(attacker.history))

    return GameReport(
        shots=board.shots_fired(),
        hits=board.hits_landed(),
        ships_sunk=ships_sunk,
        won=board.all_ships_sunk(),
    )


def run_simulations(
    games: int,
    seed: int | None = None,
    *,
    random_max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> SimulationSummary:
    """Play ``games`` independent games against random fleets."""
    if games < 1:
        raise ValueError("games must be at least 1")

    rng = random.Random(seed)
    attacker = CpuAttacker(
        random.Random(rng.getrandbits(64)), random_max_attempts=random_max_attempts
    )
    reports: list[GameReport] = []
    for index in range(games):
        board = build_board_from_fleet(random_fleet(rng))
        report = play_cpu_game(board, attacker)
        reports.append(report)
        logger.debug(
            "simulation_game index=%s shots=%s accuracy=%.1f",
            index,
            report.shots,
            report.accuracy,
        )

    shots = [report.shots for report in reports]
    return SimulationSummary(
        games=games,
        wins=sum(1 for report in reports if report.won),
        min_shots=min(shots),
        max_shots=max(shots),
        mean_shots=sum(shots) / games,
        mean_accuracy=sum(report.accuracy for report in reports) / games,
    )
