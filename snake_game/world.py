"""Play field holding the apple and the pickup rules."""

from __future__ import annotations

from enum import Enum
import logging
import random
from typing import Iterable, Tuple

from . import constants, utils
from .snake import Snake
from .utils import Vec2


class BoundaryMode(Enum):
    """What happens when the head leaves the visible grid."""

    NONE = "none"
    WRAP = "wrap"


class World:
    """Owns the single apple and resolves pickups on every tick."""

    def __init__(
        self,
        window_size: Tuple[int, int],
        boundary: BoundaryMode = BoundaryMode.NONE,
        avoid_snake: bool = True,
    ) -> None:
        self.window_size = window_size
        self.block_size: int = constants.BLOCK_SIZE
        self.boundary = boundary
        self.avoid_snake = avoid_snake
        self.item = Vec2(0, 0)
        self.spawn_apple()

    @property
    def grid_size(self) -> tuple[int, int]:
        return utils.grid_dimensions(self.window_size, self.block_size)

    def spawn_apple(self, occupied: Iterable[Vec2] = ()) -> Vec2:
        """Move the apple to a random cell that is not ``occupied``.

        Candidates are drawn uniformly from the spawn bounds. After
        ``MAX_SPAWN_ATTEMPTS`` rejected draws the apple is placed on a random
        free cell instead; a full grid keeps the last candidate.
        """

        max_x, max_y = utils.spawn_bounds(self.window_size, self.block_size)
        occupied = list(occupied)
        taken = {cell.to_tuple() for cell in occupied}
        candidate = utils.random_cell(max_x, max_y)
        attempts = 1
        while candidate.to_tuple() in taken and attempts < constants.MAX_SPAWN_ATTEMPTS:
            candidate = utils.random_cell(max_x, max_y)
            attempts += 1
        if candidate.to_tuple() in taken:
            free = utils.free_cells(max_x, max_y, occupied)
            if free:
                candidate = random.choice(free)
        self.item = candidate
        logging.debug("Apple spawned at %s", self.item.to_tuple())
        return self.item

    def respawn_initial(self, occupied: Iterable[Vec2] = ()) -> Vec2:
        """Place a fresh apple for a new round, off the cells in ``occupied``."""

        return self.spawn_apple(occupied)

    def _apply_boundary(self, snake: Snake) -> None:
        if self.boundary is BoundaryMode.WRAP and snake.body:
            cols, rows = self.grid_size
            head = snake.body[0]
            head.position = head.position.wrapped(cols, rows)

    def update(self, snake: Snake, respawn_requested: bool = False) -> bool:
        """Resolve the apple against the snake head.

        Returns ``True`` when the snake ate the apple. ``respawn_requested``
        moves the apple regardless of any pickup.
        """

        self._apply_boundary(snake)

        eaten = snake.get_position() == self.item
        if eaten:
            snake.grow(self.grid_size if self.boundary is BoundaryMode.WRAP else None)
            snake.score += 1
            self.spawn_apple(snake.positions() if self.avoid_snake else ())

        if respawn_requested:
            self.spawn_apple(snake.positions() if self.avoid_snake else ())
        return eaten
