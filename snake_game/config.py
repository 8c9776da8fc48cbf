"""Runtime settings assembled from the command line."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional

from . import constants
from .world import BoundaryMode


@dataclass
class Settings:
    """Tunables for a game session. Defaults match :mod:`constants`."""

    width: int = constants.WINDOW_WIDTH
    height: int = constants.WINDOW_HEIGHT
    fps: int = constants.FPS
    font_path: str = constants.FONT_PATH
    font_size: int = constants.FONT_SIZE
    speed: int = constants.SNAKE_SPEED
    max_catch_up_ticks: int = constants.MAX_CATCH_UP_TICKS
    boundary: BoundaryMode = BoundaryMode.NONE
    avoid_snake_on_spawn: bool = True
    debug_respawn: bool = True
    seed: Optional[int] = None
    log_level: str = "INFO"

    @property
    def window_size(self) -> tuple[int, int]:
        return self.width, self.height

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Settings":
        return cls(
            width=args.width,
            height=args.height,
            fps=args.fps,
            font_path=args.font,
            speed=args.speed,
            max_catch_up_ticks=args.max_catch_up,
            boundary=BoundaryMode(args.boundary),
            avoid_snake_on_spawn=not args.allow_spawn_on_snake,
            debug_respawn=not args.no_debug_respawn,
            seed=args.seed,
            log_level=args.log_level,
        )


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a game of snake")
    parser.add_argument("--width", type=_positive_int, default=constants.WINDOW_WIDTH, help="Window width")
    parser.add_argument("--height", type=_positive_int, default=constants.WINDOW_HEIGHT, help="Window height")
    parser.add_argument("--fps", type=_positive_int, default=constants.FPS, help="Frame rate cap")
    parser.add_argument("--font", default=constants.FONT_PATH, help="Path to the TTF font")
    parser.add_argument("--speed", type=_positive_int, default=constants.SNAKE_SPEED, help="Snake moves per second")
    parser.add_argument(
        "--max-catch-up",
        type=_positive_int,
        default=constants.MAX_CATCH_UP_TICKS,
        help="Most simulation ticks run in a single frame",
    )
    parser.add_argument(
        "--boundary",
        choices=[mode.value for mode in BoundaryMode],
        default=BoundaryMode.NONE.value,
        help="Behaviour at the edge of the grid",
    )
    parser.add_argument("--allow-spawn-on-snake", action="store_true", help="Let apples spawn under the snake")
    parser.add_argument("--no-debug-respawn", action="store_true", help="Disable the space bar apple respawn")
    parser.add_argument("--seed", type=int, default=None, help="Seed for apple placement")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    return parser


def parse_args(argv: Optional[list[str]] = None) -> Settings:
    return Settings.from_args(build_parser().parse_args(argv))
