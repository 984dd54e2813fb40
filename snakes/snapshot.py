"""Read-only views of a universe for renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .config import Color, GameConfig
from .effect import EffectType, effect_item_size, is_phantom
from .stream import StreamExhaustedError
from .universe import Universe

Point = Tuple[float, float]


@dataclass(frozen=True)
class SnakeView:
    name: str
    links: Tuple[Point, ...]
    radius: float
    color: Color
    phantom: bool
    effects: Tuple[EffectType, ...]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "color": list(self.color),
            "radius": self.radius,
            "phantom": self.phantom,
            "effects": [effect.value for effect in self.effects],
            "links": [{"x": x, "y": y} for x, y in self.links],
        }


@dataclass(frozen=True)
class ItemView:
    location: Point
    effect: EffectType
    radius: float

    def to_dict(self) -> dict:
        x, y = self.location
        return {"x": x, "y": y, "effect": self.effect.value, "radius": self.radius}


@dataclass(frozen=True)
class DeadLinkView:
    location: Point
    radius: float
    color: Color
    fade: float

    def to_dict(self) -> dict:
        x, y = self.location
        return {"x": x, "y": y, "radius": self.radius, "color": list(self.color), "fade": self.fade}


@dataclass(frozen=True)
class Snapshot:
    """Everything needed to draw one frame."""

    snakes: Tuple[SnakeView, ...]
    item: Optional[ItemView]
    dead_links: Tuple[DeadLinkView, ...]

    def snake(self, name: str) -> Optional[SnakeView]:
        for view in self.snakes:
            if view.name == name:
                return view
        return None

    def to_dict(self) -> dict:
        """Serialise the snapshot to a JSON friendly dictionary."""

        return {
            "snakes": [snake.to_dict() for snake in self.snakes],
            "item": self.item.to_dict() if self.item is not None else None,
            "deadLinks": [link.to_dict() for link in self.dead_links],
        }


def snapshot(universe: Universe, config: GameConfig) -> Snapshot:
    """Build the views of ``universe``. Snakes are listed in name order."""

    snakes = []
    for name in sorted(universe.snakes):
        snake = universe.snakes[name]
        effects = universe.effects.get(name, ())
        snakes.append(
            SnakeView(
                name=name,
                links=tuple(point.to_tuple() for point in snake.links),
                radius=snake.link_radius,
                color=snake.color,
                phantom=is_phantom(effects),
                effects=tuple(effect.type for effect in effects),
            )
        )

    try:
        active = universe.active_item
    except StreamExhaustedError:
        item = None
    else:
        item = ItemView(active.location.to_tuple(), active.effect, effect_item_size(active.effect, config))

    dead_links = tuple(
        DeadLinkView(link.location.to_tuple(), link.radius, link.color, link.fade)
        for link in universe.dead_links
    )
    return Snapshot(snakes=tuple(snakes), item=item, dead_links=dead_links)
