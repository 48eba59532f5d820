from __future__ import annotations

from salvo.core.history import AttackHistory
from salvo.core.models import Direction, FleetPlacement, Position, ShipPlacement, ShipType


def make_valid_fleet() -> FleetPlacement:
    return FleetPlacement(
        ships=[
            ShipPlacement(ShipType.CARRIER, Position(0, 0), Direction.EAST),
            ShipPlacement(ShipType.BATTLESHIP, Position(0, 2), Direction.EAST),
            ShipPlacement(ShipType.SUBMARINE, Position(0, 4), Direction.EAST),
            ShipPlacement(ShipType.DESTROYER, Position(0, 6), Direction.EAST),
        ]
    )


def history_of(*positions: Position) -> AttackHistory:
    history = AttackHistory()
    for position in positions:
        history.add(position)
    return history
