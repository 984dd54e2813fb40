"""Timed effects granted by pickups and respawns."""

from __future__ import annotations

from dataclasses import dataclass, replace
import enum
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

if TYPE_CHECKING:
    from .config import GameConfig


class EffectType(str, enum.Enum):
    """Kinds of effect an item can carry."""

    FOOD = "food"
    REVERSE = "reverse"
    SPEED_UP = "speed_up"
    SLOW_DOWN = "slow_down"
    PHANTOM = "phantom"

    @property
    def is_instant(self) -> bool:
        """Instant effects are applied on pickup and never stored."""

        return self in (EffectType.FOOD, EffectType.REVERSE)


@dataclass(frozen=True)
class Effect:
    """An active effect and the time it has left, in seconds."""

    type: EffectType
    remaining: float


def mk_effect(effect_type: EffectType, config: "GameConfig") -> Effect:
    """Create an effect with the configured duration for ``effect_type``."""

    return Effect(effect_type, config.effect_durations[effect_type])


def update_effect(effect: Effect, dt: float) -> Optional[Effect]:
    """Age ``effect`` by ``dt`` seconds, returning ``None`` once it has expired."""

    if dt >= effect.remaining:
        return None
    return replace(effect, remaining=effect.remaining - dt)


def effect_item_size(effect_type: EffectType, config: "GameConfig") -> float:
    """Collision radius of a pickup carrying ``effect_type``."""

    return config.effect_item_sizes[effect_type]


def respawn_effects(config: "GameConfig") -> Tuple[Effect, ...]:
    return tuple(mk_effect(effect_type, config) for effect_type in config.respawn_effects)


def is_phantom(effects: Iterable[Effect]) -> bool:
    return any(effect.type is EffectType.PHANTOM for effect in effects)


def speed_factor(effects: Iterable[Effect], config: "GameConfig") -> float:
    """Return the movement speed multiplier implied by ``effects``.

    Every active speed effect contributes its multiplier, so duplicates stack.
    """

    factor = 1.0
    for effect in effects:
        if effect.type is EffectType.SPEED_UP:
            factor *= config.speed_up_multiplier
        elif effect.type is EffectType.SLOW_DOWN:
            factor *= config.slow_down_multiplier
    return factor
