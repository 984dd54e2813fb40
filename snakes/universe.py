"""The universe of the game of snakes and its per-frame update."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
import random
from typing import Dict, List, Tuple, Union

from . import collision, utils
from .config import Color, GameConfig
from .dead_link import DeadLink, update_dead_link
from .effect import (
    Effect,
    EffectType,
    is_phantom,
    mk_effect,
    respawn_effects,
    speed_factor,
    update_effect,
)
from .item import Item, item_stream, update_item
from .snake import (
    Snake,
    destroy_snake,
    feed_snake,
    move_snake,
    redirect_snake,
    reverse_snake,
    spawn_snake,
)
from .stream import Stream, color_stream, spawn_stream

PlayerName = str
Spawn = Tuple[utils.Vec2, utils.Vec2]


@dataclass(frozen=True)
class RedirectSnake:
    """Point the player's snake towards ``target`` (world coordinates)."""

    target: utils.Vec2


PlayerAction = Union[RedirectSnake]


@dataclass(frozen=True)
class Universe:
    """Holds every entity of the game.

    Only the head of ``items`` is on the field; the rest of the stream is
    generated on demand. ``effects`` only ever holds keys of ``snakes``.
    A universe is never modified in place: every operation returns a new one.
    """

    snakes: Dict[PlayerName, Snake] = field(default_factory=dict)
    items: Stream[Item] = field(default_factory=Stream)
    effects: Dict[PlayerName, Tuple[Effect, ...]] = field(default_factory=dict)
    dead_links: Tuple[DeadLink, ...] = ()
    spawns: Stream[Spawn] = field(default_factory=Stream)
    colors: Stream[Color] = field(default_factory=Stream)

    @property
    def active_item(self) -> Item:
        return self.items.peek()

    def phantoms(self) -> frozenset[PlayerName]:
        """Names of players currently immune to collisions."""

        return frozenset(name for name, effects in self.effects.items() if is_phantom(effects))


def empty_universe(config: GameConfig, items: Stream[Item], spawns: Stream[Spawn]) -> Universe:
    """A universe without players, fed by ``items`` and ``spawns``.

    Every stream is peeked once so that a broken source fails here rather
    than in the middle of a game.
    """

    config.validate()
    universe = Universe(items=items, spawns=spawns, colors=color_stream(config))
    universe.items.peek()
    universe.spawns.peek()
    universe.colors.peek()
    return universe


def random_universe(config: GameConfig, rng=random) -> Universe:
    """Build a universe with random item and spawn streams."""

    universe = empty_universe(config, item_stream(config, rng), spawn_stream(config, rng))
    logging.info("Universe created on a %sx%s field", *config.field_size)
    return universe


def add_player(universe: Universe, name: PlayerName, config: GameConfig) -> Universe:
    """Spawn a new snake for ``name`` using the next spawn point and color."""

    snake = spawn_snake(universe.spawns.peek(), universe.colors.peek(), config)
    effects = {key: value for key, value in universe.effects.items() if key != name}
    logging.info("Player %s joined", name)
    return replace(
        universe,
        snakes={**universe.snakes, name: snake},
        effects=effects,
        spawns=universe.spawns.advance(),
        colors=universe.colors.advance(),
    )


def remove_player(universe: Universe, name: PlayerName) -> Universe:
    if name not in universe.snakes:
        return universe
    logging.info("Player %s left", name)
    return replace(
        universe,
        snakes={key: value for key, value in universe.snakes.items() if key != name},
        effects={key: value for key, value in universe.effects.items() if key != name},
    )


def handle_player_action(universe: Universe, name: PlayerName, action: PlayerAction) -> Universe:
    """Apply a player's ``action``. Actions of unknown players are ignored."""

    snake = universe.snakes.get(name)
    if snake is None:
        return universe
    if isinstance(action, RedirectSnake):
        return replace(universe, snakes={**universe.snakes, name: redirect_snake(snake, action.target)})
    raise TypeError(f"Unsupported player action: {action!r}")


def update_universe(universe: Universe, dt: float, config: GameConfig) -> Universe:
    """Advance ``universe`` by ``dt`` seconds.

    Moves everything, lets one player pick up the active item, then
    respawns every snake that crashed.
    """

    universe = _update_universe_objects(universe, dt, config)
    universe = _check_item_collision(universe, config)
    return _check_snake_collision(universe, config)


def _update_universe_objects(universe: Universe, dt: float, config: GameConfig) -> Universe:
    snakes = {
        name: move_snake(snake, dt * speed_factor(universe.effects.get(name, ()), config))
        for name, snake in universe.snakes.items()
    }

    effects: Dict[PlayerName, Tuple[Effect, ...]] = {}
    for name, active in universe.effects.items():
        aged = tuple(effect for effect in (update_effect(e, dt) for e in active) if effect is not None)
        if aged:
            effects[name] = aged

    dead_links = tuple(
        link for link in (update_dead_link(dead, dt) for dead in universe.dead_links) if link is not None
    )

    items = universe.items.advance()
    item = update_item(universe.active_item, dt)
    if item is not None:
        items = items.push(item)

    return replace(universe, snakes=snakes, items=items, effects=effects, dead_links=dead_links)


def _check_item_collision(universe: Universe, config: GameConfig) -> Universe:
    """Let the first player (by name) touching the active item consume it."""

    item = universe.active_item
    fed = sorted(
        name for name, snake in universe.snakes.items() if collision.collides_with_item(item, snake, config)
    )
    if not fed:
        return universe
    winner = fed[0]
    logging.debug("Player %s picked up %s", winner, item.effect.value)
    return _apply_effect(item.effect, winner, replace(universe, items=universe.items.advance()), config)


def _apply_effect(effect_type: EffectType, name: PlayerName, universe: Universe, config: GameConfig) -> Universe:
    if effect_type is EffectType.FOOD:
        snake = feed_snake(universe.snakes[name], config.food_growth)
        return replace(universe, snakes={**universe.snakes, name: snake})
    if effect_type is EffectType.REVERSE:
        # Reversal hits every snake on the field, not only the one that picked it up.
        snakes = {key: reverse_snake(snake) for key, snake in universe.snakes.items()}
        return replace(universe, snakes=snakes)
    effects = (mk_effect(effect_type, config),) + universe.effects.get(name, ())
    return replace(universe, effects={**universe.effects, name: effects})


def _check_snake_collision(universe: Universe, config: GameConfig) -> Universe:
    dead = collision.detect_snake_collisions(universe.snakes, universe.phantoms())
    if not dead:
        return universe
    return _respawn_snakes(dead, universe, config)


def _respawn_snakes(names: List[PlayerName], universe: Universe, config: GameConfig) -> Universe:
    """Respawn the snakes of ``names`` and leave dead links where their bodies were.

    Spawn points are handed out in the order of ``names``. Respawned players
    lose every effect they had and get the respawn bundle instead.
    """

    spawns = universe.spawns.take(len(names))
    new_snakes: Dict[PlayerName, Snake] = {}
    new_effects: Dict[PlayerName, Tuple[Effect, ...]] = {}
    new_dead_links: List[DeadLink] = []
    for name, spawn in zip(names, spawns):
        old = universe.snakes[name]
        new_dead_links.extend(destroy_snake(old, config.dead_link_duration))
        new_snakes[name] = spawn_snake(spawn, old.color, config)
        new_effects[name] = respawn_effects(config)
        logging.info("Player %s crashed with %d links", name, len(old))

    return replace(
        universe,
        snakes={**universe.snakes, **new_snakes},
        effects={**universe.effects, **new_effects},
        dead_links=tuple(new_dead_links) + universe.dead_links,
        spawns=universe.spawns.advance(len(new_snakes)),
    )
