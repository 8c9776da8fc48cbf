"""Collision helpers for the snake body."""

from __future__ import annotations

from typing import Optional, Sequence

from . import constants
from .utils import Vec2


def can_collide(length: int) -> bool:
    """Return ``True`` if a body of ``length`` segments can hit itself."""

    return length >= constants.MIN_COLLISION_LENGTH


def find_self_collision(body: Sequence[Vec2]) -> Optional[int]:
    """Return the index into ``body[1:]`` of the first segment under the head.

    ``None`` is returned when the body is too short to collide or when the
    head overlaps nothing.
    """

    if not can_collide(len(body)):
        return None
    head = body[0]
    for index, position in enumerate(body[1:]):
        if position == head:
            return index
    return None
