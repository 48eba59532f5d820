"""Board state representation and mutation helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import numpy as np

from salvo.core.errors import PlacementError
from salvo.core.models import (
    BOARD_SIZE,
    Position,
    ShipPlacement,
    ShipType,
    ShotResult,
    cells_for_placement,
)

_UNSHOT = 0
_SHOT_MISS = 1
_SHOT_HIT = 2


class BoardView(Protocol):
    """Read-only board queries consumed by the attacker."""

    def is_attacked(self, position: Position) -> bool: ...

    def is_occupied(self, position: Position) -> bool: ...


@dataclass(slots=True)
class BoardState:
    """Numpy-backed board state, indexed ``[y, x]``."""

    ships: np.ndarray = field(
        default_factory=lambda: np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int16)
    )
    shots: np.ndarray = field(
        default_factory=lambda: np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    )
    ship_cells: dict[int, list[Position]] = field(default_factory=dict)
    ship_types: dict[int, ShipType] = field(default_factory=dict)
    ship_remaining: dict[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.ships.shape != (BOARD_SIZE, BOARD_SIZE):
            self.ships = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int16)
        if self.shots.shape != (BOARD_SIZE, BOARD_SIZE):
            self.shots = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)

    def can_place(self, placement: ShipPlacement) -> bool:
        """Return whether a placement stays on the board and overlaps nothing."""
        cells = cells_for_placement(placement)
        if cells is None:
            return False
        return all(not self.is_occupied(cell) for cell in cells)

    def place_ship(self, ship_id: int, placement: ShipPlacement) -> None:
        """Place a ship on the board."""
        if ship_id <= 0:
            raise PlacementError("ship ids must be positive.")
        if ship_id in self.ship_cells:
            raise PlacementError(f"Ship id {ship_id} is already placed.")
        cells = cells_for_placement(placement)
        if cells is None:
            raise PlacementError(
                f"{placement.ship_type.value} at {placement.start} facing "
                f"{placement.direction.name} would extend beyond the board."
            )
        if any(self.is_occupied(cell) for cell in cells):
            raise PlacementError(f"Invalid placement for {placement.ship_type.value}: occupied.")
        for cell in cells:
            self.ships[cell.y, cell.x] = ship_id
        self.ship_cells[ship_id] = cells
        self.ship_types[ship_id] = placement.ship_type
        self.ship_remaining[ship_id] = len(cells)

    def is_occupied(self, position: Position) -> bool:
        """Return whether part of a ship sits on this cell."""
        return self.ships[position.y, position.x] != 0

    def is_attacked(self, position: Position) -> bool:
        """Return whether this cell was previously targeted."""
        return self.shots[position.y, position.x] != _UNSHOT

    def apply_shot(self, position: Position) -> tuple[ShotResult, ShipType | None]:
        """Apply a shot and return result + sunk ship type if any."""
        if self.is_attacked(position):
            return ShotResult.REPEAT, None

        ship_id = int(self.ships[position.y, position.x])
        if ship_id == 0:
            self.shots[position.y, position.x] = _SHOT_MISS
            return ShotResult.MISS, None

        self.shots[position.y, position.x] = _SHOT_HIT
        self.ship_remaining[ship_id] -= 1
        if self.ship_remaining[ship_id] == 0:
            return ShotResult.SUNK, self.ship_types[ship_id]
        return ShotResult.HIT, None

    def all_ships_sunk(self) -> bool:
        """Return whether every ship has been sunk."""
        return all(remaining == 0 for remaining in self.ship_remaining.values())

    def shots_fired(self) -> int:
        return int(np.count_nonzero(self.shots))

    def hits_landed(self) -> int:
        return int(np.count_nonzero(self.shots == _SHOT_HIT))
