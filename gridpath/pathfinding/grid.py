# gridpath/pathfinding/grid.py
from typing import Iterable, Sequence, Tuple, Union

from .errors import InvalidCoordinate, InvalidGrid

Coordinate = Tuple[int, int]


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Grid:
    """
    Immutable square table of traversal costs.

    A cell's cost is the price of moving *into* that cell. Rows are frozen
    into tuples on construction so a search can never alter its input.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Tuple[Tuple[int, ...], ...]):
        self._rows = rows

    @classmethod
    def from_rows(cls, rows: Union["Grid", Iterable[Sequence[int]]]) -> "Grid":
        """Validate raw rows and build a grid from them."""
        if isinstance(rows, Grid):
            return rows
        if rows is None:
            raise InvalidGrid("Grid must not be None")

        frozen = tuple(tuple(row) for row in rows)
        size = len(frozen)
        if size == 0:
            raise InvalidGrid("Grid must have at least one row")

        for r, row in enumerate(frozen):
            if len(row) != size:
                raise InvalidGrid(
                    f"Grid must be square: row {r} has {len(row)} cells, expected {size}"
                )
            for c, cost in enumerate(row):
                if not _is_int(cost):
                    raise InvalidGrid(f"Cell ({r}, {c}) has non-integer cost {cost!r}")
                if cost <= 0:
                    raise InvalidGrid(f"Cell ({r}, {c}) has non-positive cost {cost}")

        return cls(frozen)

    @property
    def size(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        return self._rows

    @property
    def corner(self) -> Coordinate:
        """Bottom-right cell, the default goal."""
        return (self.size - 1, self.size - 1)

    def in_bounds(self, coord: Coordinate) -> bool:
        row, col = coord
        return 0 <= row < self.size and 0 <= col < self.size

    def cost_at(self, coord: Coordinate) -> int:
        row, col = coord
        return self._rows[row][col]

    def min_cost(self) -> int:
        return min(min(row) for row in self._rows)

    def validate_coordinate(self, coord, role: str = "coordinate") -> Coordinate:
        """Return ``coord`` as a tuple, raising InvalidCoordinate if it is unusable."""
        try:
            row, col = coord
        except (TypeError, ValueError):
            raise InvalidCoordinate(coord, role=role) from None
        if not (_is_int(row) and _is_int(col)):
            raise InvalidCoordinate(coord, role=role)
        if not self.in_bounds((row, col)):
            raise InvalidCoordinate(coord, self.size, role=role)
        return (row, col)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __repr__(self):
        return f"Grid({self.size}x{self.size})"
