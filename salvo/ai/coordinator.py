"""Switches between random search and a directed hunt based on attack outcomes."""

from __future__ import annotations

import logging
import random
from enum import StrEnum

from salvo.ai.directed_hunt import DirectedHunt
from salvo.ai.random_search import DEFAULT_MAX_ATTEMPTS, RandomSearch
from salvo.ai.strategy import AttackStrategy
from salvo.core.board import BoardView
from salvo.core.errors import ContractViolationError
from salvo.core.history import AttackHistory
from salvo.core.models import Position

logger = logging.getLogger(__name__)


class ActiveStrategy(StrEnum):
    """Which sub-strategy answers the next query."""

    RANDOM = "RANDOM"
    HUNT = "HUNT"


class AttackCoordinator(AttackStrategy):
    """Random search until a ship is hit, directed hunt until it sinks."""

    def __init__(
        self,
        rng: random.Random,
        *,
        random_max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self._random = RandomSearch(rng, max_attempts=random_max_attempts)
        self._hunt = DirectedHunt(rng, fallback=RandomSearch(rng, max_attempts=random_max_attempts))
        self._active = ActiveStrategy.RANDOM

    @property
    def active(self) -> ActiveStrategy:
        return self._active

    @property
    def hunt(self) -> DirectedHunt:
        return self._hunt

    def next_target(self, board: BoardView | None, history: AttackHistory) -> Position | None:
        target = self._current().next_target(board, history)
        if target is not None and target in history:
            raise ContractViolationError(
                f"{self._active.value} strategy proposed already attacked cell {target}."
            )
        return target

    def record_hit(self, position: Position, ship_type: str | None, sunk: bool) -> None:
        self._current().record_hit(position, ship_type, sunk)

        if self._active is ActiveStrategy.RANDOM and not sunk:
            self._switch(ActiveStrategy.HUNT)
            self._hunt.record_hit(position, ship_type, False)

        if sunk:
            self._switch(ActiveStrategy.RANDOM)

    def record_miss(self, position: Position) -> None:
        self._current().record_miss(position)

    def reset(self) -> None:
        self._random.reset()
        self._hunt.reset()
        self._active = ActiveStrategy.RANDOM

    def _current(self) -> AttackStrategy:
        if self._active is ActiveStrategy.HUNT:
            return self._hunt
        return self._random

    def _switch(self, target: ActiveStrategy) -> None:
        if target is not self._active:
            logger.debug("attack_strategy_switch from=%s to=%s", self._active.value, target.value)
        self._active = target
