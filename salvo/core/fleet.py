"""Fleet placement validation and construction."""

from __future__ import annotations

import random
from collections import Counter

from salvo.core.board import BoardState
from salvo.core.errors import PlacementError
from salvo.core.models import (
    BOARD_SIZE,
    DEFAULT_FLEET,
    Direction,
    FleetPlacement,
    Position,
    ShipPlacement,
    ShipType,
    cells_for_placement,
)


def validate_fleet(fleet: FleetPlacement) -> None:
    """Raise ``PlacementError`` unless the fleet holds each default ship exactly once."""
    counts = Counter(placement.ship_type for placement in fleet.ships)
    duplicated = sorted(ship.value for ship, count in counts.items() if count > 1)
    if duplicated:
        raise PlacementError(f"Duplicate ship type: {', '.join(duplicated)}.")
    missing = [ship.value for ship in DEFAULT_FLEET if ship not in counts]
    if missing:
        raise PlacementError(f"Missing ships: {', '.join(missing)}.")


def build_board_from_fleet(fleet: FleetPlacement) -> BoardState:
    """Place a complete fleet on a fresh board; off-board or overlapping ships raise."""
    validate_fleet(fleet)
    board = BoardState()
    for ship_id, placement in enumerate(fleet.ships, start=1):
        board.place_ship(ship_id, placement)
    return board


def random_fleet(rng: random.Random) -> FleetPlacement:
    """Generate a random fleet. Ships may touch but never overlap."""
    occupied: set[Position] = set()
    placements_by_type: dict[ShipType, ShipPlacement] = {}

    for ship_type in DEFAULT_FLEET:
        candidates = _candidate_placements(ship_type, occupied)
        if not candidates:
            raise RuntimeError("Failed to generate random fleet placement.")
        placement = rng.choice(candidates)
        placements_by_type[ship_type] = placement
        occupied.update(cells_for_placement(placement) or ())

    return FleetPlacement(ships=[placements_by_type[ship_type] for ship_type in DEFAULT_FLEET])


def _candidate_placements(ship_type: ShipType, occupied: set[Position]) -> list[ShipPlacement]:
    candidates: list[ShipPlacement] = []
    for x in range(BOARD_SIZE):
        for y in range(BOARD_SIZE):
            for direction in Direction:
                placement = ShipPlacement(ship_type, Position(x, y), direction)
                cells = cells_for_placement(placement)
                if cells is None or occupied.intersection(cells):
                    continue
                candidates.append(placement)
    return candidates
