"""Snake entity implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from . import collision, constants
from .utils import Vec2


class Direction(Enum):
    """Heading of the snake head, valued by its ``(dx, dy)`` grid step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Vec2:
        return Vec2(*self.value)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


@dataclass
class Segment:
    """A single body cell."""

    position: Vec2


def _initial_body() -> List[Segment]:
    return [Segment(Vec2(x, y)) for x, y in constants.INITIAL_BODY]


def _unwrap(delta: int, size: int) -> int:
    """Map a step that jumped across a wrapping edge back to a unit step."""

    if delta > 1:
        return delta - size
    if delta < -1:
        return delta + size
    return delta


@dataclass
class Snake:
    """The player controlled snake.

    ``body[0]`` is the head. The snake moves one cell per tick, grows by one
    segment per apple and loses its tail when the head runs into it.
    """

    size: int = constants.BLOCK_SIZE
    direction: Direction = Direction.DOWN
    speed: int = constants.SNAKE_SPEED
    lives: int = constants.START_LIVES
    score: int = 0
    body: List[Segment] = field(default_factory=_initial_body)

    def __post_init__(self) -> None:
        self._initial_speed = self.speed

    def __len__(self) -> int:
        return len(self.body)

    @property
    def body_rect(self) -> tuple[int, int, int, int]:
        """Rectangle of a single cell, one pixel smaller than the grid step."""

        return 0, 0, self.size - 1, self.size - 1

    def positions(self) -> List[Vec2]:
        """Return the positions of all segments, head first."""

        return [segment.position for segment in self.body]

    def get_position(self) -> Vec2:
        """Return the head position, or a fixed fallback for an empty body."""

        if self.body:
            return self.body[0].position
        return Vec2(*constants.EMPTY_BODY_POSITION)

    def update(self, direction: Optional[Direction] = None) -> None:
        """Steer towards ``direction`` unless it reverses the snake, then move."""

        if direction is not None and direction is not self.direction.opposite:
            self.direction = direction
        self.move()

    def move(self) -> None:
        if not self.body:
            return
        previous = [segment.position.copy() for segment in self.body]
        for index in range(len(self.body) - 1, 0, -1):
            self.body[index].position = previous[index - 1]
        self.body[0].position = previous[0] + self.direction.delta

    def grow(self, grid: Optional[Tuple[int, int]] = None) -> None:
        """Append a segment one cell past the tail.

        ``grid`` is the ``(cols, rows)`` size of a wrapping play field. When
        given, a tail that straddles an edge is extended across it and the new
        segment is folded back onto the grid.
        """

        if not self.body:
            self.body.append(Segment(self.get_position()))
            return

        tail = self.body[-1].position
        extension = None
        if len(self.body) > 1:
            dx, dy = (tail - self.body[-2].position).to_tuple()
            if grid is not None:
                dx, dy = _unwrap(dx, grid[0]), _unwrap(dy, grid[1])
            if dx == 0:
                extension = Vec2(tail.x, tail.y + (1 if dy > 0 else -1))
            elif dy == 0:
                extension = Vec2(tail.x + (1 if dx > 0 else -1), tail.y)

        if extension is None:
            # Extend against the heading.
            extension = tail + self.direction.opposite.delta
        if grid is not None:
            extension = extension.wrapped(*grid)
        self.body.append(Segment(extension))

    def check_collisions(self) -> bool:
        """Cut the body at the first segment under the head.

        Returns ``True`` when a collision happened. Bodies shorter than
        ``MIN_COLLISION_LENGTH`` never collide.
        """

        index = collision.find_self_collision(self.positions())
        if index is None:
            return False
        self.cut(len(self.body) - index)
        return True

    def cut(self, count: int) -> None:
        """Remove the last ``count`` segments."""

        for _ in range(min(count, len(self.body))):
            self.body.pop()

    def reset_to_initial(self) -> None:
        """Restore the body, heading, speed and counters of a new snake."""

        self.body = _initial_body()
        self.direction = Direction.DOWN
        self.speed = self._initial_speed
        self.lives = constants.START_LIVES
        self.score = 0
