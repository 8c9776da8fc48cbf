"""Entry point for the pygame snake game."""

from __future__ import annotations

import logging
import random
from typing import Optional

import pygame

from .config import Settings, parse_args
from .game import Game
from .input import InputManager
from .render import AssetError, Renderer, load_font
from .states import StateMachine


def run(settings: Settings) -> None:
    pygame.init()
    screen = pygame.display.set_mode(settings.window_size)
    pygame.display.set_caption("Snake")
    font = load_font(settings.font_path, settings.font_size)
    renderer = Renderer(screen, font)
    clock = pygame.time.Clock()

    game = Game(screen.get_size(), font, settings)
    machine = StateMachine(game)
    input_manager = InputManager()
    logging.info("Window opened at %sx%s", *screen.get_size())

    running = True
    while running:
        dt = clock.tick(settings.fps) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        intent = input_manager.update(pygame.key.get_pressed(), game.snake.direction)
        machine.update(dt, intent)
        machine.draw(renderer)
        renderer.present()


def main(argv: Optional[list[str]] = None) -> None:
    settings = parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="[%(levelname)s] %(message)s")
    if settings.seed is not None:
        random.seed(settings.seed)

    try:
        run(settings)
    except AssetError as exc:
        logging.critical("%s: %s", exc, exc.__cause__)
        raise SystemExit(1) from exc
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
