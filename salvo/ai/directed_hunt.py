"""Directed hunt: find a damaged ship's axis, then walk it until the ship sinks."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import StrEnum

from salvo.ai.random_search import RandomSearch
from salvo.ai.strategy import AttackStrategy
from salvo.core.board import BoardView
from salvo.core.history import AttackHistory
from salvo.core.models import Direction, Position

logger = logging.getLogger(__name__)

# Flip to the opposite side at most once, then fall back to discovery.
_MAX_AXIS_TRANSITIONS = 3


class HuntPhase(StrEnum):
    """Pursuit phase of a directed hunt."""

    IDLE = "IDLE"
    DISCOVERY = "DISCOVERY"
    EXPLOITATION = "EXPLOITATION"


@dataclass(frozen=True, slots=True)
class HuntState:
    """Read-only snapshot of the pursuit state."""

    phase: HuntPhase
    first_hit: Position | None
    last_hit: Position | None
    current_direction: Direction | None
    direction_established: bool
    exploring_opposite: bool
    remaining_directions: tuple[Direction, ...]


class DirectedHunt(AttackStrategy):
    """Pursues one partially discovered ship.

    Idle until the first hit. Then pops directions from a shuffled pool and
    fires at the matching neighbor of the first hit. A second hit fixes the
    axis; the hunt walks it from the last hit, flips once to the other side of
    the first hit when blocked, and returns to the direction pool when both
    ends are closed. A sinking hit drops everything.
    """

    def __init__(self, rng: random.Random, fallback: RandomSearch | None = None) -> None:
        self._rng = rng
        self._fallback = fallback if fallback is not None else RandomSearch(rng)
        self._first_hit: Position | None = None
        self._last_hit: Position | None = None
        self._current_direction: Direction | None = None
        self._direction_established = False
        self._exploring_opposite = False
        self._remaining_directions: deque[Direction] = deque()

    @property
    def phase(self) -> HuntPhase:
        if self._first_hit is None:
            return HuntPhase.IDLE
        if self._direction_established:
            return HuntPhase.EXPLOITATION
        return HuntPhase.DISCOVERY

    @property
    def state(self) -> HuntState:
        return HuntState(
            phase=self.phase,
            first_hit=self._first_hit,
            last_hit=self._last_hit,
            current_direction=self._current_direction,
            direction_established=self._direction_established,
            exploring_opposite=self._exploring_opposite,
            remaining_directions=tuple(self._remaining_directions),
        )

    def next_target(self, board: BoardView | None, history: AttackHistory) -> Position | None:
        if self._first_hit is None:
            return self._fallback.next_target(board, history)

        for _ in range(_MAX_AXIS_TRANSITIONS):
            if not self._direction_established:
                return self._discover(board, history)
            candidate = self._step_from(self._last_hit, history)
            if candidate is not None:
                return candidate
            self._close_axis_end()

        return self._discover(board, history)

    def record_hit(self, position: Position, ship_type: str | None, sunk: bool) -> None:
        if sunk:
            logger.debug("directed_hunt_sunk position=%s", position)
            self.reset()
            return

        if self._first_hit is None:
            self._begin_pursuit(position)
            return

        if self._direction_established:
            self._last_hit = position
            return

        direction = _direction_between(self._first_hit, position)
        if direction is None:
            # Neighbors of the first hit are used up and a random shot found a ship.
            logger.debug(
                "directed_hunt_restart first_hit=%s position=%s", self._first_hit, position
            )
            self._begin_pursuit(position)
            return

        self._last_hit = position
        self._current_direction = direction
        self._direction_established = True
        self._exploring_opposite = False
        if direction in self._remaining_directions:
            self._remaining_directions.remove(direction)
        logger.debug(
            "directed_hunt_axis first_hit=%s direction=%s", self._first_hit, direction.name
        )

    def record_miss(self, position: Position) -> None:
        if self._first_hit is None or not self._direction_established:
            return
        self._close_axis_end()

    def reset(self) -> None:
        self._first_hit = None
        self._last_hit = None
        self._current_direction = None
        self._direction_established = False
        self._exploring_opposite = False
        self._remaining_directions = deque()

    def _begin_pursuit(self, position: Position) -> None:
        self._first_hit = position
        self._last_hit = position
        self._current_direction = None
        self._direction_established = False
        self._exploring_opposite = False
        directions = list(Direction)
        self._rng.shuffle(directions)
        self._remaining_directions = deque(directions)

    def _discover(self, board: BoardView | None, history: AttackHistory) -> Position | None:
        first_hit = self._first_hit
        while first_hit is not None and self._remaining_directions:
            direction = self._remaining_directions.popleft()
            candidate = first_hit.adjacent(direction)
            if candidate is not None and candidate not in history:
                self._current_direction = direction
                return candidate
        return self._fallback.next_target(board, history)

    def _step_from(self, origin: Position | None, history: AttackHistory) -> Position | None:
        if origin is None or self._current_direction is None:
            return None
        candidate = origin.adjacent(self._current_direction)
        if candidate is None or candidate in history:
            return None
        return candidate

    def _close_axis_end(self) -> None:
        """One end of the axis is blocked: try the other side, or give up on the axis."""
        if not self._exploring_opposite and self._current_direction is not None:
            self._current_direction = self._current_direction.opposite
            self._last_hit = self._first_hit
            self._exploring_opposite = True
            if self._current_direction in self._remaining_directions:
                self._remaining_directions.remove(self._current_direction)
            return
        self._direction_established = False
        self._exploring_opposite = False
        logger.debug(
            "directed_hunt_axis_exhausted first_hit=%s untried=%s",
            self._first_hit,
            len(self._remaining_directions),
        )


def _direction_between(origin: Position, target: Position) -> Direction | None:
    for direction in Direction:
        if origin.adjacent(direction) == target:
            return direction
    return None
