# gridpath/pathfinding/errors.py
"""Exceptions raised by the grid pathfinder."""

from typing import Optional, Tuple


class PathfindingError(ValueError):
    """Base class for all pathfinding failures."""


class InvalidGrid(PathfindingError):
    """The grid is empty, not square, or holds a non-positive / non-integer cost."""


class InvalidCoordinate(PathfindingError):
    """A start or goal coordinate lies outside the grid."""

    def __init__(self, coordinate, grid_size: Optional[int] = None, role: str = "coordinate"):
        self.coordinate = coordinate
        self.grid_size = grid_size
        self.role = role
        if grid_size is None:
            message = f"Invalid {role} {coordinate!r}: expected a (row, column) pair of integers"
        else:
            message = f"Invalid {role} {coordinate!r}: outside a {grid_size}x{grid_size} grid"
        super().__init__(message)


class Exhausted(PathfindingError):
    """The search stopped without ever recording a route at the goal."""

    def __init__(self, goal: Tuple[int, int], steps_examined: int, truncated: bool = False):
        self.goal = goal
        self.steps_examined = steps_examined
        self.truncated = truncated
        reason = "step limit reached" if truncated else "frontier drained"
        super().__init__(f"No route to {goal} ({reason} after {steps_examined} steps)")
