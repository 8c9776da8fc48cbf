import pygame
import pytest

from snake_game import constants
from snake_game.render import AssetError, Renderer, load_font
from snake_game.snake import Snake
from snake_game.utils import Vec2
from snake_game.world import World


@pytest.fixture
def renderer():
    pygame.font.init()
    surface = pygame.Surface((800, 600))
    return Renderer(surface, pygame.font.Font(None, constants.FONT_SIZE))


def test_missing_font_is_an_asset_error(tmp_path):
    with pytest.raises(AssetError) as excinfo:
        load_font(str(tmp_path / "missing.ttf"))

    assert "missing.ttf" in str(excinfo.value)
    assert excinfo.value.__cause__ is not None


def test_clear_fills_background(renderer):
    renderer.screen.fill((10, 20, 30))

    renderer.clear()

    assert renderer.screen.get_at((400, 300))[:3] == constants.BACKGROUND_COLOR


def test_snake_head_and_body_colors(renderer):
    snake = Snake(32)

    renderer.draw_snake(snake)

    assert renderer.screen.get_at((5 * 32 + 1, 7 * 32 + 1))[:3] == constants.HEAD_COLOR
    assert renderer.screen.get_at((5 * 32 + 1, 6 * 32 + 1))[:3] == constants.BODY_COLOR
    # Cells are one pixel smaller than the grid step.
    assert renderer.screen.get_at((5 * 32 + 31, 7 * 32 + 1))[:3] == constants.BACKGROUND_COLOR


def test_apple_drawn_in_the_middle_of_its_cell(renderer):
    world = World((800, 600))
    world.item = Vec2(3, 4)

    renderer.draw_world(world)

    assert renderer.screen.get_at((3 * 32 + 16, 4 * 32 + 16))[:3] == constants.APPLE_COLOR
    assert renderer.screen.get_at((3 * 32, 4 * 32))[:3] == constants.BACKGROUND_COLOR


def test_centered_text_draws_near_the_middle(renderer):
    renderer.draw_centered_text("Game over")

    middle = pygame.Rect(300, 280, 200, 40)
    lit = [
        (x, y)
        for x in range(middle.left, middle.right)
        for y in range(middle.top, middle.bottom)
        if renderer.screen.get_at((x, y))[:3] != constants.BACKGROUND_COLOR
    ]
    assert lit
