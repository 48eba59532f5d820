"""Exception hierarchy shared by the attacker core and its collaborators."""

from __future__ import annotations


class SalvoError(Exception):
    """Base class for all salvo errors."""


class OutOfBoundsError(SalvoError, ValueError):
    """Coordinate outside the board."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Position ({x}, {y}) is out of bounds.")
        self.x = x
        self.y = y


class DuplicateTargetError(SalvoError, ValueError):
    """Cell already present in the attack history."""


class PlacementError(SalvoError, ValueError):
    """Ship placement leaves the board or overlaps another ship."""


class ContractViolationError(SalvoError, RuntimeError):
    """Caller broke the request/report protocol of the attacker."""
