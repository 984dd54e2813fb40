"""Tests for the pygame front-end."""

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
from conftest import make_universe, straight_snake

from snakes.effect import Effect, EffectType
from snakes.snapshot import snapshot
from snakes.universe import RedirectSnake
from snakes.utils import Vec2
from viewer.input import InputManager, screen_to_world, world_to_screen
from viewer.main import build_config, parse_args
from viewer.render import Renderer


class TestInput:
    """Tests for mouse translation."""

    def test_window_center_is_world_origin(self):
        assert screen_to_world((400, 300), (800, 600)) == Vec2(0.0, 0.0)

    def test_round_trip(self):
        assert world_to_screen(screen_to_world((10, 20), (800, 600)).to_tuple(), (800, 600)) == (10, 20)

    def test_mouse_becomes_redirect(self):
        manager = InputManager()
        action = manager.to_action((500, 300), (800, 600))
        assert action == RedirectSnake(Vec2(100.0, 0.0))
        assert manager.last_action is action


class TestCommandLine:
    """Tests for argument parsing and config overrides."""

    def test_defaults(self, config):
        args = parse_args([])
        assert args.name == "You"
        assert args.config == config

    def test_overrides(self):
        args = parse_args(["--width", "1024", "--fps", "30", "--name", "Ana"])
        assert args.config.field_size[0] == 1024
        assert args.config.fps == 30
        assert args.name == "Ana"

    def test_invalid_override_is_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--fps", "0"])

    def test_build_config_keeps_other_dimension(self, config):
        args = parse_args([])
        args.height = 400.0
        assert build_config(args).field_size == (config.field_size[0], 400.0)


class TestRenderer:
    """Drawing a frame onto an off-screen surface."""

    @pytest.fixture(autouse=True)
    def pygame_session(self):
        pygame.init()
        yield
        pygame.quit()

    def test_draw_frame(self, config):
        universe = make_universe(
            {
                "alice": straight_snake(config, Vec2(0, 0), color=(200, 10, 10)),
                "bob": straight_snake(config, Vec2(100, 100)),
            },
            effects={"bob": (Effect(EffectType.PHANTOM, 1.0),)},
        )
        screen = pygame.Surface((800, 600))
        renderer = Renderer(screen)
        renderer.draw(snapshot(universe, config), "alice")
        assert tuple(screen.get_at((400, 300)))[:3] == (200, 10, 10)
