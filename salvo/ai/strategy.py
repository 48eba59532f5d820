"""Attack strategy interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from salvo.core.board import BoardView
from salvo.core.history import AttackHistory
from salvo.core.models import Position


class AttackStrategy(ABC):
    """Picks target cells and learns from the public outcome of each attack."""

    @abstractmethod
    def next_target(self, board: BoardView | None, history: AttackHistory) -> Position | None:
        """Return an unattacked cell, or None when every cell has been attacked."""

    @abstractmethod
    def record_hit(self, position: Position, ship_type: str | None, sunk: bool) -> None:
        """Update strategy state after a hit."""

    @abstractmethod
    def record_miss(self, position: Position) -> None:
        """Update strategy state after a miss."""

    @abstractmethod
    def reset(self) -> None:
        """Drop all per-game state."""
