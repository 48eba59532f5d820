import pytest

from salvo.core.board import BoardState
from salvo.core.errors import PlacementError
from salvo.core.models import Direction, Position, ShipPlacement, ShipType, ShotResult


def test_board_can_place_and_reject_overlap_or_oob() -> None:
    board = BoardState()
    carrier = ShipPlacement(ShipType.CARRIER, Position(0, 0), Direction.EAST)
    assert board.can_place(carrier)
    board.place_ship(1, carrier)
    assert not board.can_place(ShipPlacement(ShipType.DESTROYER, Position(0, 0), Direction.SOUTH))
    assert not board.can_place(ShipPlacement(ShipType.CARRIER, Position(8, 3), Direction.EAST))
    # Touching is allowed, overlapping is not.
    assert board.can_place(ShipPlacement(ShipType.DESTROYER, Position(0, 1), Direction.EAST))
    with pytest.raises(PlacementError):
        board.place_ship(2, ShipPlacement(ShipType.DESTROYER, Position(4, 0), Direction.SOUTH))
    with pytest.raises(PlacementError):
        board.place_ship(3, ShipPlacement(ShipType.BATTLESHIP, Position(0, 9), Direction.SOUTH))


def test_board_occupancy_queries() -> None:
    board = BoardState()
    board.place_ship(1, ShipPlacement(ShipType.SUBMARINE, Position(2, 2), Direction.SOUTH))
    assert board.is_occupied(Position(2, 4))
    assert not board.is_occupied(Position(3, 2))
    assert board.is_occupied(Position(2, 3))


def test_board_apply_shot_states() -> None:
    board = BoardState()
    board.place_ship(1, ShipPlacement(ShipType.DESTROYER, Position(1, 1), Direction.EAST))

    miss, _ = board.apply_shot(Position(0, 0))
    assert miss is ShotResult.MISS
    assert board.is_attacked(Position(0, 0))
    repeat, _ = board.apply_shot(Position(0, 0))
    assert repeat is ShotResult.REPEAT

    hit, sunk = board.apply_shot(Position(1, 1))
    assert hit is ShotResult.HIT and sunk is None
    sunk_result, sunk_type = board.apply_shot(Position(2, 1))
    assert sunk_result is ShotResult.SUNK and sunk_type is ShipType.DESTROYER
    assert board.all_ships_sunk()
    assert board.shots_fired() == 3
    assert board.hits_landed() == 2
