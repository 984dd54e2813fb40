"""Default gameplay constants, gathered into a ``GameConfig`` by ``config.py``."""

from .effect import EffectType

FPS: int = 60
FIELD_SIZE: tuple[float, float] = (800.0, 600.0)
FIELD_MARGIN: tuple[float, float] = (60.0, 60.0)
SNAKE_INITIAL_LENGTH: int = 8
SNAKE_SPEED: float = 140.0
SNAKE_LINK_RADIUS: float = 8.0
SNAKE_LINK_SPACING: float = 10.0
FOOD_GROWTH: int = 4
SPEED_UP_MULTIPLIER: float = 1.6
SLOW_DOWN_MULTIPLIER: float = 0.6
DEAD_LINK_DURATION: float = 1.5

EFFECT_DURATIONS: dict[EffectType, float] = {
    EffectType.FOOD: 0.0,
    EffectType.REVERSE: 0.0,
    EffectType.SPEED_UP: 5.0,
    EffectType.SLOW_DOWN: 5.0,
    EffectType.PHANTOM: 3.0,
}

EFFECT_ITEM_SIZES: dict[EffectType, float] = {
    EffectType.FOOD: 8.0,
    EffectType.REVERSE: 12.0,
    EffectType.SPEED_UP: 10.0,
    EffectType.SLOW_DOWN: 10.0,
    EffectType.PHANTOM: 12.0,
}

EFFECT_WEIGHTS: dict[EffectType, float] = {
    EffectType.FOOD: 20.0,
    EffectType.REVERSE: 1.0,
    EffectType.SPEED_UP: 3.0,
    EffectType.SLOW_DOWN: 3.0,
    EffectType.PHANTOM: 2.0,
}

RESPAWN_EFFECTS: tuple[EffectType, ...] = (EffectType.PHANTOM,)

PLAYER_COLORS: tuple[tuple[int, int, int], ...] = (
    (80, 200, 120),
    (90, 160, 255),
    (255, 120, 90),
    (240, 210, 80),
    (200, 110, 230),
    (90, 220, 220),
)
