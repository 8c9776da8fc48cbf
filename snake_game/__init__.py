"""Grid snake game built on pygame."""

__all__ = [
    "collision",
    "config",
    "constants",
    "game",
    "input",
    "main",
    "render",
    "snake",
    "states",
    "utils",
    "world",
]
