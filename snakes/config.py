"""Game configuration supplied to the core at startup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Tuple

from . import constants
from .effect import EffectType

Color = Tuple[int, int, int]


class ConfigError(ValueError):
    """Raised when a configuration cannot be used to build a universe."""


@dataclass(frozen=True)
class GameConfig:
    """Every tunable parameter of the universe.

    The core never reads ``constants`` directly; it only sees the config it
    is handed, so front-ends may override any value.
    """

    field_size: Tuple[float, float] = constants.FIELD_SIZE
    field_margin: Tuple[float, float] = constants.FIELD_MARGIN
    snake_initial_length: int = constants.SNAKE_INITIAL_LENGTH
    snake_speed: float = constants.SNAKE_SPEED
    snake_link_radius: float = constants.SNAKE_LINK_RADIUS
    snake_link_spacing: float = constants.SNAKE_LINK_SPACING
    food_growth: int = constants.FOOD_GROWTH
    speed_up_multiplier: float = constants.SPEED_UP_MULTIPLIER
    slow_down_multiplier: float = constants.SLOW_DOWN_MULTIPLIER
    dead_link_duration: float = constants.DEAD_LINK_DURATION
    effect_durations: Mapping[EffectType, float] = field(
        default_factory=lambda: dict(constants.EFFECT_DURATIONS)
    )
    effect_item_sizes: Mapping[EffectType, float] = field(
        default_factory=lambda: dict(constants.EFFECT_ITEM_SIZES)
    )
    effect_weights: Mapping[EffectType, float] = field(
        default_factory=lambda: dict(constants.EFFECT_WEIGHTS)
    )
    respawn_effects: Tuple[EffectType, ...] = constants.RESPAWN_EFFECTS
    player_colors: Tuple[Color, ...] = constants.PLAYER_COLORS
    fps: int = constants.FPS

    @property
    def item_area(self) -> Tuple[float, float]:
        """Size of the area items may appear in."""

        return (
            self.field_size[0] - self.field_margin[0],
            self.field_size[1] - self.field_margin[1],
        )

    def validate(self) -> "GameConfig":
        """Return ``self`` if usable, otherwise raise :class:`ConfigError`."""

        width, height = self.field_size
        if width <= 0 or height <= 0:
            raise ConfigError(f"field size must be positive, got {self.field_size}")
        margin_x, margin_y = self.field_margin
        if margin_x < 0 or margin_y < 0 or margin_x >= width or margin_y >= height:
            raise ConfigError(
                f"field margin {self.field_margin} must be non-negative and smaller than the field"
            )
        if self.snake_initial_length < 1:
            raise ConfigError("snakes need at least one link")
        for name in ("snake_speed", "snake_link_radius", "snake_link_spacing", "dead_link_duration"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")
        if self.snake_link_spacing < self.snake_link_radius:
            # Closer links would put a straight snake's head inside its own link 2.
            raise ConfigError("snake_link_spacing cannot be smaller than snake_link_radius")
        if self.food_growth < 0:
            raise ConfigError("food growth cannot be negative")
        if self.speed_up_multiplier <= 0 or self.slow_down_multiplier <= 0:
            raise ConfigError("speed multipliers must be positive")
        if self.fps <= 0:
            raise ConfigError("fps must be positive")
        self._validate_effects()
        if not self.player_colors:
            raise ConfigError("at least one player color is required")
        return self

    def _validate_effects(self) -> None:
        for effect_type in EffectType:
            if effect_type not in self.effect_durations:
                raise ConfigError(f"no duration configured for {effect_type.value}")
            if effect_type not in self.effect_item_sizes:
                raise ConfigError(f"no item size configured for {effect_type.value}")
            duration = self.effect_durations[effect_type]
            if duration < 0 or (not effect_type.is_instant and duration == 0):
                raise ConfigError(f"invalid duration {duration} for {effect_type.value}")
            if self.effect_item_sizes[effect_type] <= 0:
                raise ConfigError(f"item size for {effect_type.value} must be positive")
        weights: Dict[EffectType, float] = dict(self.effect_weights)
        if any(weight < 0 for weight in weights.values()):
            raise ConfigError("item weights cannot be negative")
        if sum(weights.values()) <= 0:
            raise ConfigError("at least one item type needs a positive weight")
        for effect_type in self.respawn_effects:
            if effect_type.is_instant:
                raise ConfigError(f"{effect_type.value} cannot be part of the respawn bundle")


def default_config() -> GameConfig:
    """Return the validated default configuration."""

    return GameConfig().validate()
