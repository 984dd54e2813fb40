"""Translate local input into player actions."""

from __future__ import annotations

from typing import Tuple

from snakes.universe import RedirectSnake
from snakes.utils import Vec2


def screen_to_world(screen_pos: Tuple[float, float], viewport_size: Tuple[int, int]) -> Vec2:
    """Map window coordinates to world coordinates, whose origin is the window center."""

    return Vec2(screen_pos[0] - viewport_size[0] / 2, screen_pos[1] - viewport_size[1] / 2)


def world_to_screen(point: Tuple[float, float], viewport_size: Tuple[int, int]) -> Tuple[int, int]:
    return int(point[0] + viewport_size[0] / 2), int(point[1] + viewport_size[1] / 2)


class InputManager:
    """Calculate the desired redirection from the mouse position."""

    def __init__(self) -> None:
        self.last_action: RedirectSnake | None = None

    def to_action(self, mouse_pos: Tuple[int, int], viewport_size: Tuple[int, int]) -> RedirectSnake:
        self.last_action = RedirectSnake(screen_to_world(mouse_pos, viewport_size))
        return self.last_action
