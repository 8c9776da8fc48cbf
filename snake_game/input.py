"""Translate pygame key state into a discrete intent per frame."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence

import pygame

from .snake import Direction


class Intent(Enum):
    """The single player action sampled for a frame."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CONFIRM = "confirm"
    NONE = "none"

    @property
    def direction(self) -> Optional[Direction]:
        return _INTENT_DIRECTIONS.get(self)


_INTENT_DIRECTIONS = {
    Intent.UP: Direction.UP,
    Intent.DOWN: Direction.DOWN,
    Intent.LEFT: Direction.LEFT,
    Intent.RIGHT: Direction.RIGHT,
}

# Checked in order; the first held arrow wins.
DIRECTION_KEYS = (
    (pygame.K_RIGHT, Intent.RIGHT),
    (pygame.K_DOWN, Intent.DOWN),
    (pygame.K_LEFT, Intent.LEFT),
    (pygame.K_UP, Intent.UP),
)
CONFIRM_KEY = pygame.K_SPACE


class InputManager:
    """Sample held arrows and space presses into an :class:`Intent`.

    Arrows are level triggered: holding one keeps steering. Space only counts
    on the frame it goes down, so holding it through a state change does not
    trigger the next screen as well.
    """

    def __init__(self) -> None:
        self._confirm_held = False

    def update(self, pressed: Sequence[bool], heading: Optional[Direction] = None) -> Intent:
        """Return the intent for this frame.

        Held arrows that would reverse ``heading`` are skipped, so the next
        held arrow in priority order still turns the snake.
        """

        confirm_down = bool(pressed[CONFIRM_KEY])
        confirm_edge = confirm_down and not self._confirm_held
        self._confirm_held = confirm_down

        for key, intent in DIRECTION_KEYS:
            if not pressed[key]:
                continue
            if heading is not None and intent.direction is heading.opposite:
                continue
            return intent
        if confirm_edge:
            return Intent.CONFIRM
        return Intent.NONE
