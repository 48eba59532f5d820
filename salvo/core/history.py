"""Append-only record of attacked cells."""

from __future__ import annotations

from collections.abc import Iterator

from salvo.core.errors import DuplicateTargetError
from salvo.core.models import BOARD_SIZE, Position, all_positions


class AttackHistory:
    """Attacked positions for one game, in the order they were fired."""

    def __init__(self) -> None:
        self._order: list[Position] = []
        self._seen: set[Position] = set()

    def add(self, position: Position) -> None:
        if position in self._seen:
            raise DuplicateTargetError(f"{position} was already attacked.")
        self._seen.add(position)
        self._order.append(position)

    def clear(self) -> None:
        """Forget every attack. Only valid between games."""
        self._order.clear()
        self._seen.clear()

    def __contains__(self, position: object) -> bool:
        return position in self._seen

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._order)

    @property
    def is_full(self) -> bool:
        return len(self._order) >= BOARD_SIZE * BOARD_SIZE

    def remaining(self) -> list[Position]:
        """Return unattacked cells in scan order."""
        return [position for position in all_positions() if position not in self._seen]
