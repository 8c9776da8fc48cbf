"""Gameplay constants shared across the game modules."""

BLOCK_SIZE: int = 32
SNAKE_SPEED: int = 10
START_LIVES: int = 3
INITIAL_BODY: tuple[tuple[int, int], ...] = ((5, 7), (5, 6), (5, 5))
EMPTY_BODY_POSITION: tuple[int, int] = (1, 1)
MIN_COLLISION_LENGTH: int = 5
SPAWN_MARGIN: int = 2
MAX_SPAWN_ATTEMPTS: int = 64
MAX_CATCH_UP_TICKS: int = 5

WINDOW_WIDTH: int = 800
WINDOW_HEIGHT: int = 600
FPS: int = 60
FONT_PATH: str = "res/Heebo.ttf"
FONT_SIZE: int = 30

BACKGROUND_COLOR: tuple[int, int, int] = (0, 0, 0)
HEAD_COLOR: tuple[int, int, int] = (255, 255, 0)
BODY_COLOR: tuple[int, int, int] = (230, 41, 55)
APPLE_COLOR: tuple[int, int, int] = (230, 41, 55)
TEXT_COLOR: tuple[int, int, int] = (255, 255, 255)

LIVES_TEXT_POSITION: tuple[int, int] = (30, 30)
SCORE_TEXT_POSITION: tuple[int, int] = (30, 60)
MENU_TEXT: str = "Welcome to the Snake game! Press Space to start"
DEAD_TEXT: str = "You lost the game! Score: {score}"
