"""CPU attacker: the request/report surface used by turn orchestration."""

from __future__ import annotations

import logging
import random

from salvo.ai.coordinator import AttackCoordinator
from salvo.ai.random_search import DEFAULT_MAX_ATTEMPTS
from salvo.core.board import BoardView
from salvo.core.errors import ContractViolationError
from salvo.core.history import AttackHistory
from salvo.core.models import AttackOutcome, Position

logger = logging.getLogger(__name__)


class CpuAttacker:
    """Owns the attack history and enforces one report per returned target.

    Each ``determine_next_attack`` result must be answered by exactly one
    ``report_outcome`` call for that same position before the next request.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        board: BoardView | None = None,
        random_max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._board = board
        self._coordinator = AttackCoordinator(self._rng, random_max_attempts=random_max_attempts)
        self._history = AttackHistory()
        self._pending: Position | None = None

    @property
    def history(self) -> AttackHistory:
        return self._history

    @property
    def pending(self) -> Position | None:
        return self._pending

    @property
    def coordinator(self) -> AttackCoordinator:
        return self._coordinator

    def bind_board(self, board: BoardView | None) -> None:
        """Attach the opponent board used to cross-check proposed targets."""
        self._board = board

    def determine_next_attack(self) -> Position | None:
        """Return the next cell to attack, or None once every cell was attacked."""
        if self._pending is not None:
            raise ContractViolationError(
                f"Outcome for {self._pending} must be reported before the next attack."
            )
        target = self._coordinator.next_target(self._board, self._history)
        if target is None:
            logger.info("cpu_attacker_exhausted attacked=%s", len(self._history))
            return None
        if self._board is not None and self._board.is_attacked(target):
            raise ContractViolationError(
                f"Board already shows {target} as attacked but history does not."
            )
        self._pending = target
        return target

    def report_outcome(
        self,
        position: Position,
        hit: bool,
        ship_type: str | None = None,
        sunk: bool = False,
    ) -> None:
        """Record the result of the pending attack and update the strategy."""
        if self._pending is None:
            raise ContractViolationError(f"No attack pending; unexpected report for {position}.")
        if position != self._pending:
            raise ContractViolationError(
                f"Report for {position} does not match pending attack {self._pending}."
            )
        if sunk and not hit:
            raise ContractViolationError(f"Report for {position} sinks a ship without a hit.")

        self._history.add(position)
        self._pending = None
        if hit:
            self._coordinator.record_hit(position, ship_type, sunk)
        else:
            self._coordinator.record_miss(position)
        logger.debug(
            "cpu_attacker_outcome position=%s hit=%s sunk=%s strategy=%s",
            position,
            hit,
            sunk,
            self._coordinator.active.value,
        )

    def report(self, position: Position, outcome: AttackOutcome) -> None:
        self.report_outcome(position, outcome.hit, outcome.ship_type, outcome.sunk)

    def reset_for_new_game(self) -> None:
        self._history.clear()
        self._pending = None
        self._coordinator.reset()
