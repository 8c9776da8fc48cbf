from collections import defaultdict

import pygame

from snake_game.input import InputManager, Intent
from snake_game.snake import Direction


def keys(*held):
    pressed = defaultdict(bool)
    for key in held:
        pressed[key] = True
    return pressed


def test_no_keys_means_no_intent():
    assert InputManager().update(keys()) is Intent.NONE


def test_arrows_map_to_directions():
    manager = InputManager()

    assert manager.update(keys(pygame.K_UP)) is Intent.UP
    assert manager.update(keys(pygame.K_DOWN)) is Intent.DOWN
    assert manager.update(keys(pygame.K_LEFT)) is Intent.LEFT
    assert manager.update(keys(pygame.K_RIGHT)) is Intent.RIGHT


def test_held_arrow_repeats_every_frame():
    manager = InputManager()

    for _ in range(3):
        assert manager.update(keys(pygame.K_LEFT)) is Intent.LEFT


def test_first_arrow_in_priority_order_wins():
    manager = InputManager()

    assert manager.update(keys(pygame.K_UP, pygame.K_RIGHT)) is Intent.RIGHT
    assert manager.update(keys(pygame.K_UP, pygame.K_LEFT)) is Intent.LEFT
    assert manager.update(keys(pygame.K_LEFT, pygame.K_DOWN)) is Intent.DOWN


def test_confirm_fires_once_per_press():
    manager = InputManager()

    assert manager.update(keys(pygame.K_SPACE)) is Intent.CONFIRM
    assert manager.update(keys(pygame.K_SPACE)) is Intent.NONE
    assert manager.update(keys()) is Intent.NONE
    assert manager.update(keys(pygame.K_SPACE)) is Intent.CONFIRM


def test_arrows_take_precedence_over_confirm():
    manager = InputManager()

    assert manager.update(keys(pygame.K_SPACE, pygame.K_UP)) is Intent.UP
    # The press was consumed while the arrow was held.
    assert manager.update(keys(pygame.K_SPACE)) is Intent.NONE


def test_intent_direction():
    assert Intent.UP.direction is Direction.UP
    assert Intent.RIGHT.direction is Direction.RIGHT
    assert Intent.CONFIRM.direction is None
    assert Intent.NONE.direction is None


def test_arrows_that_reverse_the_heading_are_skipped():
    manager = InputManager()

    # Right is held first but the snake is heading left.
    assert manager.update(keys(pygame.K_RIGHT, pygame.K_DOWN), Direction.LEFT) is Intent.DOWN
    assert manager.update(keys(pygame.K_RIGHT), Direction.LEFT) is Intent.NONE
    assert manager.update(keys(pygame.K_DOWN, pygame.K_UP), Direction.DOWN) is Intent.DOWN
    assert manager.update(keys(pygame.K_RIGHT, pygame.K_DOWN), Direction.UP) is Intent.RIGHT


def test_reversal_only_frame_still_reports_confirm():
    manager = InputManager()

    assert manager.update(keys(pygame.K_UP, pygame.K_SPACE), Direction.DOWN) is Intent.CONFIRM
