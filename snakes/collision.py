"""Collision helpers for the universe."""

from __future__ import annotations

from typing import TYPE_CHECKING, AbstractSet, Iterable, List, Mapping, Sequence, Tuple

from . import utils
from .effect import effect_item_size
from .item import Item
from .snake import Snake

if TYPE_CHECKING:
    from .config import GameConfig

Circle = Tuple[utils.Vec2, float]


def collides(a: Circle, b: Circle) -> bool:
    """Return ``True`` if two ``(center, size)`` circles overlap.

    Touching circles, with centers exactly ``size_a + size_b`` apart, do not
    count.
    """

    (center_a, size_a), (center_b, size_b) = a, b
    size_sum = size_a + size_b
    return center_a.distance_sq_to(center_b) < size_sum * size_sum


def collides_with_item(item: Item, snake: Snake, config: "GameConfig") -> bool:
    """Check whether the head of ``snake`` touches ``item``."""

    return collides((item.location, effect_item_size(item.effect, config)), snake.head_circle())


def self_collision(head: utils.Vec2, links: Sequence[utils.Vec2], radius: float) -> bool:
    """Check ``head`` against ``links``, skipping the head and the link attached to it."""

    return any(collides((head, radius), (link, radius)) for link in links[2:])


def snakes_collision(snake: Snake, others: Iterable[Snake]) -> bool:
    """Check whether the head of ``snake`` hits its own body or any of ``others``."""

    if self_collision(snake.head, snake.links, snake.link_radius):
        return True
    head = snake.head_circle()
    return any(collides(head, circle) for other in others for circle in other.body_circles())


def detect_snake_collisions(snakes: Mapping[str, Snake], phantoms: AbstractSet[str]) -> List[str]:
    """Return the names of players whose head crashed, in name order.

    Phantom players are skipped entirely: they cannot crash and nobody can
    crash into them.
    """

    solid = sorted(
        ((name, snake) for name, snake in snakes.items() if name not in phantoms),
        key=lambda pair: pair[0],
    )
    dead: List[str] = []
    for name, snake in solid:
        others = [other for other_name, other in solid if other_name != name]
        if snakes_collision(snake, others):
            dead.append(name)
    return dead
