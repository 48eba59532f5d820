"""Core domain models used by game logic."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, StrEnum

from salvo.core.errors import OutOfBoundsError

BOARD_SIZE = 10


class Direction(Enum):
    """Cardinal directions with unit offsets, in stable declaration order."""

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}


class ShipType(StrEnum):
    """Ship types in the fleet."""

    DESTROYER = "DESTROYER"
    SUBMARINE = "SUBMARINE"
    BATTLESHIP = "BATTLESHIP"
    CARRIER = "CARRIER"

    @property
    def size(self) -> int:
        return SHIP_LENGTHS[self]


SHIP_LENGTHS: dict[ShipType, int] = {
    ShipType.DESTROYER: 2,
    ShipType.SUBMARINE: 3,
    ShipType.BATTLESHIP: 4,
    ShipType.CARRIER: 5,
}

DEFAULT_FLEET: tuple[ShipType, ...] = (
    ShipType.CARRIER,
    ShipType.BATTLESHIP,
    ShipType.SUBMARINE,
    ShipType.DESTROYER,
)


class ShotResult(StrEnum):
    """Result of a single shot."""

    MISS = "MISS"
    HIT = "HIT"
    SUNK = "SUNK"
    REPEAT = "REPEAT"
    INVALID = "INVALID"


class Turn(StrEnum):
    """Current turn owner."""

    PLAYER = "PLAYER"
    CPU = "CPU"


def in_bounds(x: int, y: int) -> bool:
    """Return whether (x, y) lies on the board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Position:
    """On-board coordinate. Construction off the board raises OutOfBoundsError."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if not in_bounds(self.x, self.y):
            raise OutOfBoundsError(self.x, self.y)

    @classmethod
    def at(cls, x: int, y: int) -> Position | None:
        """Return the position at (x, y), or None when off the board."""
        if not in_bounds(x, y):
            return None
        return cls(x, y)

    def adjacent(self, direction: Direction) -> Position | None:
        """Return the neighbor in ``direction``, or None at the board edge."""
        return Position.at(self.x + direction.dx, self.y + direction.dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def all_positions() -> Iterator[Position]:
    """Yield every board cell, x-major then y."""
    for x in range(BOARD_SIZE):
        for y in range(BOARD_SIZE):
            yield Position(x, y)


@dataclass(frozen=True, slots=True)
class AttackOutcome:
    """Public outcome of one attack: a miss, or a hit that may have sunk a ship.

    ``ship_type`` is carried for callers that know it; the attack strategies
    never look at it.
    """

    hit: bool
    sunk: bool = False
    ship_type: str | None = None

    def __post_init__(self) -> None:
        if self.sunk and not self.hit:
            raise ValueError("a miss cannot sink a ship")

    @classmethod
    def miss(cls) -> AttackOutcome:
        return cls(hit=False)

    @classmethod
    def hit_ship(cls, *, sunk: bool = False, ship_type: str | None = None) -> AttackOutcome:
        return cls(hit=True, sunk=sunk, ship_type=ship_type)

    @classmethod
    def from_shot(cls, result: ShotResult, ship_type: ShipType | None = None) -> AttackOutcome:
        """Translate a board shot result into a public outcome."""
        if result is ShotResult.MISS:
            return cls.miss()
        if result is ShotResult.HIT:
            return cls.hit_ship()
        if result is ShotResult.SUNK:
            return cls.hit_ship(sunk=True, ship_type=ship_type.value if ship_type else None)
        raise ValueError(f"shot result {result.value} carries no outcome")


@dataclass(frozen=True, slots=True)
class ShipPlacement:
    """Placement of a single ship, extending from ``start`` along ``direction``."""

    ship_type: ShipType
    start: Position
    direction: Direction


@dataclass(slots=True)
class FleetPlacement:
    """Collection of ship placements."""

    ships: list[ShipPlacement]


def cells_for_placement(placement: ShipPlacement) -> list[Position] | None:
    """Compute occupied cells for a placement, or None if it leaves the board."""
    result: list[Position] = []
    current: Position | None = placement.start
    for _ in range(placement.ship_type.size):
        if current is None:
            return None
        result.append(current)
        current = current.adjacent(placement.direction)
    return result
