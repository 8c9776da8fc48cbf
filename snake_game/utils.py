"""Grid primitives used by the simulation."""

from __future__ import annotations

from dataclasses import dataclass
import random
from typing import Iterable, List, Tuple

from . import constants


@dataclass
class Vec2:
    """An integer grid coordinate.

    Positions are cell indices, independent of the pixel size of a cell. Two
    coordinates compare equal when both components match, which is all the
    pickup and collision rules need.
    """

    x: int
    y: int

    def copy(self) -> "Vec2":
        """Return a shallow copy of the coordinate."""

        return Vec2(self.x, self.y)

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def wrapped(self, cols: int, rows: int) -> "Vec2":
        """Return the coordinate folded back onto a ``cols`` x ``rows`` grid."""

        return Vec2(self.x % cols, self.y % rows)

    def to_tuple(self) -> tuple[int, int]:
        """Return the coordinate as an ``(x, y)`` tuple."""

        return self.x, self.y


def grid_dimensions(window_size: Tuple[int, int], block_size: int) -> tuple[int, int]:
    """Return the number of whole cells that fit in ``window_size``."""

    return int(window_size[0] // block_size), int(window_size[1] // block_size)


def spawn_bounds(window_size: Tuple[int, int], block_size: int) -> tuple[int, int]:
    """Return the inclusive ``(max_x, max_y)`` cell an item may spawn in."""

    cols, rows = grid_dimensions(window_size, block_size)
    return (
        max(0, cols - constants.SPAWN_MARGIN),
        max(0, rows - constants.SPAWN_MARGIN),
    )


def random_cell(max_x: int, max_y: int) -> Vec2:
    """Return a uniformly random cell with ``0 <= x <= max_x`` and ``0 <= y <= max_y``."""

    return Vec2(random.randint(0, max_x), random.randint(0, max_y))


def free_cells(max_x: int, max_y: int, occupied: Iterable[Vec2]) -> List[Vec2]:
    """Return every cell inside the spawn bounds that is not ``occupied``."""

    taken = {cell.to_tuple() for cell in occupied}
    return [
        Vec2(x, y)
        for x in range(max_x + 1)
        for y in range(max_y + 1)
        if (x, y) not in taken
    ]
