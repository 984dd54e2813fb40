"""Tests for timed effects."""

import pytest

from snakes.effect import (
    Effect,
    EffectType,
    effect_item_size,
    is_phantom,
    mk_effect,
    respawn_effects,
    speed_factor,
    update_effect,
)


class TestEffects:
    """Tests for creating and ageing effects."""

    def test_mk_effect_uses_configured_duration(self, config):
        effect = mk_effect(EffectType.SPEED_UP, config)
        assert effect == Effect(EffectType.SPEED_UP, config.effect_durations[EffectType.SPEED_UP])

    def test_update_counts_down(self):
        effect = update_effect(Effect(EffectType.PHANTOM, 2.0), 0.5)
        assert effect == Effect(EffectType.PHANTOM, 1.5)

    @pytest.mark.parametrize("dt", [2.0, 3.5])
    def test_update_expires(self, dt):
        assert update_effect(Effect(EffectType.PHANTOM, 2.0), dt) is None

    def test_item_size_per_type(self, config):
        for effect_type in EffectType:
            assert effect_item_size(effect_type, config) == config.effect_item_sizes[effect_type]

    def test_respawn_bundle(self, config):
        bundle = respawn_effects(config)
        assert [effect.type for effect in bundle] == list(config.respawn_effects)
        assert is_phantom(bundle)

    def test_instant_types(self):
        assert EffectType.FOOD.is_instant
        assert EffectType.REVERSE.is_instant
        assert not EffectType.PHANTOM.is_instant


class TestSpeedFactor:
    """Tests for speed effects."""

    def test_no_effects(self, config):
        assert speed_factor((), config) == 1.0

    def test_speed_effects_stack(self, config):
        effects = [
            Effect(EffectType.SPEED_UP, 1.0),
            Effect(EffectType.SPEED_UP, 1.0),
            Effect(EffectType.SLOW_DOWN, 1.0),
            Effect(EffectType.PHANTOM, 1.0),
        ]
        expected = config.speed_up_multiplier ** 2 * config.slow_down_multiplier
        assert speed_factor(effects, config) == pytest.approx(expected)
