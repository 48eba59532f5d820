"""Uniform random search over unattacked cells."""

from __future__ import annotations

import logging
import random

from salvo.ai.strategy import AttackStrategy
from salvo.core.board import BoardView
from salvo.core.history import AttackHistory
from salvo.core.models import BOARD_SIZE, Position

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 100


class RandomSearch(AttackStrategy):
    """Memoryless strategy: uniform draws with a bounded retry budget.

    After ``max_attempts`` draws that all land on attacked cells, the first
    unattacked cell of a row-major scan is returned instead, so a call never
    takes more than ``max_attempts + 100`` steps.
    """

    def __init__(self, rng: random.Random, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._rng = rng
        self._max_attempts = max_attempts

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def next_target(self, board: BoardView | None, history: AttackHistory) -> Position | None:
        if history.is_full:
            return None

        for _ in range(self._max_attempts):
            candidate = Position(self._rng.randrange(BOARD_SIZE), self._rng.randrange(BOARD_SIZE))
            if candidate not in history:
                return candidate

        logger.debug(
            "random_search_scan_fallback attempts=%s attacked=%s",
            self._max_attempts,
            len(history),
        )
        remaining = history.remaining()
        return remaining[0] if remaining else None

    def record_hit(self, position: Position, ship_type: str | None, sunk: bool) -> None:
        return None

    def record_miss(self, position: Position) -> None:
        return None

    def reset(self) -> None:
        return None
