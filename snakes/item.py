"""Item entity definition and the infinite item source."""

from __future__ import annotations

from dataclasses import dataclass
import random
from typing import TYPE_CHECKING, Iterator, Optional

from . import utils
from .effect import EffectType
from .stream import Stream

if TYPE_CHECKING:
    from .config import GameConfig


@dataclass(frozen=True)
class Item:
    """A pickup lying on the field, carrying a single effect."""

    location: utils.Vec2
    effect: EffectType


def mk_item(location: utils.Vec2, effect: EffectType) -> Item:
    return Item(location=location, effect=effect)


def update_item(item: Item, dt: float) -> Optional[Item]:
    """Advance ``item`` by ``dt`` seconds.

    Items sit still and never expire on their own; only being picked up
    removes them. Returning ``None`` would remove the item.
    """

    return item


def random_locations(config: "GameConfig", rng=random) -> Iterator[utils.Vec2]:
    """Yield uniformly random locations inside the field minus its margin."""

    width, height = config.item_area
    while True:
        yield utils.random_point_in_area(width, height, rng)


def random_effect_types(config: "GameConfig", rng=random) -> Iterator[EffectType]:
    """Yield effect types drawn according to ``config.effect_weights``."""

    kinds = list(config.effect_weights)
    weights = [config.effect_weights[kind] for kind in kinds]
    while True:
        yield rng.choices(kinds, weights=weights)[0]


def item_stream(config: "GameConfig", rng=random) -> Stream[Item]:
    """Return the lazily generated, endless stream of items."""

    return Stream(
        mk_item(location, effect)
        for location, effect in zip(random_locations(config, rng), random_effect_types(config, rng))
    )
