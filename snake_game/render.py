"""Pygame based renderer for the game."""

from __future__ import annotations

from typing import Tuple

import pygame

from . import constants
from .snake import Snake
from .world import World


class AssetError(RuntimeError):
    """Raised when a required asset cannot be loaded."""


def load_font(path: str, size: int = constants.FONT_SIZE) -> pygame.font.Font:
    """Load the TTF font at ``path``; there is no fallback font."""

    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error) as exc:
        raise AssetError(f"Cannot load font {path!r}") from exc


class Renderer:
    """Responsible for all drawing tasks."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        self.screen = screen
        self.font = font
        self.background_color = constants.BACKGROUND_COLOR
        self.text_color = constants.TEXT_COLOR

    def clear(self) -> None:
        self.screen.fill(self.background_color)

    def draw_world(self, world: World) -> None:
        block = world.block_size
        center = (
            world.item.x * block + block // 2,
            world.item.y * block + block // 2,
        )
        pygame.draw.circle(self.screen, constants.APPLE_COLOR, center, block / 2)

    def draw_snake(self, snake: Snake) -> None:
        _, _, width, height = snake.body_rect
        for index, segment in enumerate(snake.body):
            color = constants.HEAD_COLOR if index == 0 else constants.BODY_COLOR
            rect = pygame.Rect(
                segment.position.x * snake.size,
                segment.position.y * snake.size,
                width,
                height,
            )
            pygame.draw.rect(self.screen, color, rect)

    def draw_text(self, text: str, position: Tuple[int, int]) -> None:
        surface = self.font.render(text, True, self.text_color)
        self.screen.blit(surface, position)

    def draw_centered_text(self, text: str) -> None:
        surface = self.font.render(text, True, self.text_color)
        rect = surface.get_rect(center=(self.screen.get_width() // 2, self.screen.get_height() // 2))
        self.screen.blit(surface, rect)

    def present(self) -> None:
        pygame.display.flip()
