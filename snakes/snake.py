"""Snake entity implementation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, List, Tuple

from . import utils
from .dead_link import DeadLink, mk_dead_link

if TYPE_CHECKING:
    from .config import Color, GameConfig


@dataclass(frozen=True)
class Snake:
    """A player's snake: an ordered chain of circular links, head first."""

    links: Tuple[utils.Vec2, ...]
    link_radius: float
    link_spacing: float
    heading: utils.Vec2
    speed: float
    color: tuple[int, int, int]
    growth: int = 0
    reversed: bool = False

    @property
    def head(self) -> utils.Vec2:
        return self.links[0]

    def __len__(self) -> int:
        return len(self.links)

    def head_circle(self) -> tuple[utils.Vec2, float]:
        """Return the head circle used for collision detection."""

        return self.head, self.link_radius

    def body_circles(self) -> List[tuple[utils.Vec2, float]]:
        """Return all links as circles for collision tests."""

        return [(point, self.link_radius) for point in self.links]


def spawn_snake(spawn: tuple[utils.Vec2, utils.Vec2], color: "Color", config: "GameConfig") -> Snake:
    """Create a fresh snake at ``spawn``, a ``(location, direction)`` pair.

    The body is laid out in a straight line behind the head, opposite to
    the heading, so a newborn snake never touches itself.
    """

    location, direction = spawn
    heading = direction.normalized()
    spacing = config.snake_link_spacing
    links = tuple(location - heading * (spacing * index) for index in range(config.snake_initial_length))
    return Snake(
        links=links,
        link_radius=config.snake_link_radius,
        link_spacing=spacing,
        heading=heading,
        speed=config.snake_speed,
        color=color,
    )


def move_snake(snake: Snake, dt: float) -> Snake:
    """Advance ``snake`` by ``dt`` seconds.

    The head travels along the heading and every following link is dragged
    towards its predecessor, ending up exactly ``link_spacing`` away from it.
    A pending growth adds one link at the old tail position.
    """

    head = snake.head + snake.heading * (snake.speed * dt)
    links = [head]
    for current in snake.links[1:]:
        previous = links[-1]
        direction_to_previous = previous - current
        distance = direction_to_previous.length()
        if distance == 0:
            links.append(previous)
            continue
        links.append(previous - direction_to_previous * (snake.link_spacing / distance))

    growth = snake.growth
    if growth > 0:
        links.append(snake.links[-1])
        growth -= 1
    return replace(snake, links=tuple(links), growth=growth)


def feed_snake(snake: Snake, amount: int) -> Snake:
    """Queue ``amount`` links to be grown over the next moves."""

    return replace(snake, growth=snake.growth + amount)


def reverse_snake(snake: Snake) -> Snake:
    """Turn the snake around and invert its controls."""

    return replace(snake, heading=-snake.heading, reversed=not snake.reversed)


def redirect_snake(snake: Snake, target: utils.Vec2) -> Snake:
    """Point the snake's head at ``target`` (away from it when reversed)."""

    heading = (target - snake.head).normalized()
    if heading.length_sq() == 0:
        return snake
    if snake.reversed:
        heading = -heading
    return replace(snake, heading=heading)


def destroy_snake(snake: Snake, duration: float) -> List[DeadLink]:
    """Turn every link of ``snake`` into a dead link fading over ``duration`` seconds."""

    return [mk_dead_link(point, snake.link_radius, snake.color, duration) for point in snake.links]
