"""Shared fixtures for the game of snakes tests."""

import itertools
import random

import pytest

from snakes.config import default_config
from snakes.effect import EffectType
from snakes.item import mk_item
from snakes.snake import Snake
from snakes.stream import Stream
from snakes.universe import Universe
from snakes.utils import Vec2


@pytest.fixture
def config():
    return default_config()


@pytest.fixture
def rng():
    return random.Random(1234)


def straight_snake(config, head, heading=Vec2(1.0, 0.0), length=None, color=(10, 20, 30)):
    """A snake lying in a straight line behind ``head``."""

    length = config.snake_initial_length if length is None else length
    links = tuple(head - heading * (config.snake_link_spacing * index) for index in range(length))
    return Snake(
        links=links,
        link_radius=config.snake_link_radius,
        link_spacing=config.snake_link_spacing,
        heading=heading,
        speed=config.snake_speed,
        color=color,
    )


FAR_AWAY = Vec2(10_000.0, 10_000.0)

SPAWNS = [
    (Vec2(-200.0, -200.0), Vec2(1.0, 0.0)),
    (Vec2(200.0, 200.0), Vec2(-1.0, 0.0)),
    (Vec2(-200.0, 200.0), Vec2(0.0, -1.0)),
    (Vec2(200.0, -200.0), Vec2(0.0, 1.0)),
]


def make_universe(snakes, items=None, effects=None, spawns=None, dead_links=()):
    """Build a universe with deterministic streams.

    Without explicit items, an endless supply of food far outside the field
    is used so that no pickup happens by accident.
    """

    if items is None:
        items = itertools.repeat(mk_item(FAR_AWAY, EffectType.FOOD))
    return Universe(
        snakes=dict(snakes),
        items=Stream(items),
        effects=dict(effects or {}),
        dead_links=tuple(dead_links),
        spawns=Stream(SPAWNS if spawns is None else spawns),
        colors=Stream(itertools.cycle([(1, 1, 1), (2, 2, 2)])),
    )
