"""Menu, game and game-over screens."""

from __future__ import annotations

from enum import Enum
import logging

from . import constants
from .game import Game
from .input import Intent


class GameState(Enum):
    MENU = "menu"
    GAME = "game"
    DEAD = "dead"


class StateMachine:
    """Route each frame to the active screen and switch screens on input."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.state = GameState.MENU

    def _enter(self, state: GameState) -> None:
        logging.info("State %s -> %s", self.state.value, state.value)
        self.state = state

    def update(self, dt: float, intent: Intent = Intent.NONE) -> GameState:
        if self.state is GameState.MENU:
            if intent is Intent.CONFIRM:
                self._enter(GameState.GAME)
        elif self.state is GameState.DEAD:
            if intent is Intent.CONFIRM:
                self._enter(GameState.GAME)
                self.game.reset()
        elif self.state is GameState.GAME:
            self.game.update(dt, intent)
            if self.game.snake.lives <= 0:
                logging.info("Game over with score %d", self.game.snake.score)
                self._enter(GameState.DEAD)
        return self.state

    def draw(self, renderer) -> None:
        renderer.clear()
        if self.state is GameState.MENU:
            renderer.draw_centered_text(constants.MENU_TEXT)
        elif self.state is GameState.DEAD:
            renderer.draw_centered_text(constants.DEAD_TEXT.format(score=self.game.snake.score))
        else:
            self.game.draw(renderer)
