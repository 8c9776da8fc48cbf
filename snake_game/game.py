"""Fixed-timestep game session: one snake, one world."""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from . import constants
from .config import Settings
from .input import Intent
from .snake import Snake
from .world import World


class Game:
    """Composition of the world and the snake, advanced at ``snake.speed`` ticks/sec."""

    def __init__(
        self,
        window_size: Tuple[int, int],
        font: Any = None,
        settings: Optional[Settings] = None,
    ) -> None:
        settings = settings or Settings()
        self.world = World(
            window_size,
            boundary=settings.boundary,
            avoid_snake=settings.avoid_snake_on_spawn,
        )
        self.snake = Snake(constants.BLOCK_SIZE, speed=settings.speed)
        self.elapsed: float = 0.0
        self.font = font
        self.max_catch_up_ticks = max(1, settings.max_catch_up_ticks)
        self.debug_respawn = settings.debug_respawn
        self.respawn_pending = False

    @property
    def timestep(self) -> float:
        return 1.0 / self.snake.speed

    def update(self, dt: float, intent: Intent = Intent.NONE) -> int:
        """Accumulate ``dt`` seconds and run the ticks that are due.

        At most ``max_catch_up_ticks`` ticks run per call. Whole timesteps
        still pending after that are dropped, keeping only the fractional
        remainder. Returns the number of ticks run.
        """

        if intent is Intent.CONFIRM and self.debug_respawn:
            self.respawn_pending = True

        self.elapsed += dt
        timestep = self.timestep
        ticks = 0
        while self.elapsed >= timestep and ticks < self.max_catch_up_ticks:
            self.tick(intent)
            self.elapsed -= timestep
            ticks += 1
            if self.snake.lives <= 0:
                break

        if self.elapsed >= timestep and ticks == self.max_catch_up_ticks:
            dropped = int(self.elapsed // timestep)
            self.elapsed -= dropped * timestep
            logging.debug("Dropped %d pending ticks after catch-up limit", dropped)
        return ticks

    def tick(self, intent: Intent = Intent.NONE) -> None:
        """Run one discrete simulation step.

        A confirm press seen on a frame without a tick stays pending and
        respawns the apple on the next tick.
        """

        self.snake.update(intent.direction)
        respawn = self.respawn_pending
        self.respawn_pending = False
        self.world.update(self.snake, respawn_requested=respawn)
        if self.snake.check_collisions():
            self.snake.lives -= 1
            logging.info("Snake bit itself, %d lives left", self.snake.lives)

    def draw(self, renderer) -> None:
        renderer.draw_world(self.world)
        renderer.draw_snake(self.snake)
        renderer.draw_text(f"Lives: {self.snake.lives}", constants.LIVES_TEXT_POSITION)
        renderer.draw_text(f"Score: {self.snake.score}", constants.SCORE_TEXT_POSITION)

    def reset(self) -> None:
        """Start a new round: initial snake, fresh apple, empty accumulator."""

        self.snake.reset_to_initial()
        occupied = self.snake.positions() if self.world.avoid_snake else ()
        self.world.respawn_initial(occupied)
        self.elapsed = 0.0
        self.respawn_pending = False
