import pytest

from salvo.core.errors import OutOfBoundsError
from salvo.core.models import (
    AttackOutcome,
    Direction,
    Position,
    ShipPlacement,
    ShipType,
    ShotResult,
    all_positions,
    cells_for_placement,
)


def test_position_rejects_off_board_coordinates() -> None:
    with pytest.raises(OutOfBoundsError):
        Position(10, 0)
    with pytest.raises(OutOfBoundsError):
        Position(0, -1)
    assert Position.at(-1, 3) is None
    assert Position.at(9, 9) == Position(9, 9)


def test_position_equality_and_hashing_by_value() -> None:
    assert Position(3, 4) == Position(3, 4)
    assert len({Position(3, 4), Position(3, 4), Position(4, 3)}) == 2


def test_adjacent_stays_on_board() -> None:
    assert Position(5, 5).adjacent(Direction.NORTH) == Position(5, 4)
    assert Position(5, 5).adjacent(Direction.EAST) == Position(6, 5)
    assert Position(0, 0).adjacent(Direction.WEST) is None
    assert Position(9, 9).adjacent(Direction.SOUTH) is None


def test_direction_opposites_and_order() -> None:
    assert list(Direction) == [Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST]
    for direction in Direction:
        assert direction.opposite.opposite is direction
        assert direction.dx == -direction.opposite.dx
        assert direction.dy == -direction.opposite.dy


def test_all_positions_scans_x_major() -> None:
    cells = list(all_positions())
    assert len(cells) == 100
    assert cells[0] == Position(0, 0)
    assert cells[1] == Position(0, 1)
    assert cells[10] == Position(1, 0)


def test_ship_type_size_mapping() -> None:
    assert ShipType.CARRIER.size == 5
    assert ShipType.DESTROYER.size == 2


def test_cells_for_placement_and_off_board() -> None:
    east = ShipPlacement(ShipType.SUBMARINE, Position(1, 2), Direction.EAST)
    north = ShipPlacement(ShipType.SUBMARINE, Position(1, 2), Direction.NORTH)
    assert cells_for_placement(east) == [Position(1, 2), Position(2, 2), Position(3, 2)]
    assert cells_for_placement(north) == [Position(1, 2), Position(1, 1), Position(1, 0)]
    off_board = ShipPlacement(ShipType.CARRIER, Position(7, 0), Direction.EAST)
    assert cells_for_placement(off_board) is None


def test_attack_outcome_variants() -> None:
    assert AttackOutcome.miss() == AttackOutcome(hit=False)
    assert AttackOutcome.from_shot(ShotResult.HIT) == AttackOutcome(hit=True)
    sunk = AttackOutcome.from_shot(ShotResult.SUNK, ShipType.DESTROYER)
    assert sunk.sunk and sunk.ship_type == "DESTROYER"
    with pytest.raises(ValueError):
        AttackOutcome(hit=False, sunk=True)
    with pytest.raises(ValueError):
        AttackOutcome.from_shot(ShotResult.REPEAT)
