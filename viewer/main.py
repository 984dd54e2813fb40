"""Entry point for the pygame front-end."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import random

import pygame

from snakes.config import ConfigError, GameConfig
from snakes.snapshot import snapshot
from snakes.universe import add_player, handle_player_action, random_universe, update_universe

from .input import InputManager
from .render import Renderer


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play the game of snakes")
    parser.add_argument("--name", default="You", help="Player nickname")
    parser.add_argument("--width", type=float, default=None, help="Field and window width")
    parser.add_argument("--height", type=float, default=None, help="Field and window height")
    parser.add_argument("--fps", type=int, default=None, help="Frame rate")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random generator")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args(argv)
    try:
        args.config = build_config(args)
    except ConfigError as exc:
        parser.error(str(exc))
    return args


def build_config(args: argparse.Namespace) -> GameConfig:
    """Apply command line overrides to the default configuration and validate it."""

    config = GameConfig()
    width, height = config.field_size
    overrides = {}
    if args.width is not None or args.height is not None:
        overrides["field_size"] = (
            args.width if args.width is not None else width,
            args.height if args.height is not None else height,
        )
    if args.fps is not None:
        overrides["fps"] = args.fps
    return dataclasses.replace(config, **overrides).validate()


def run(args: argparse.Namespace) -> None:
    config: GameConfig = args.config
    if args.seed is not None:
        random.seed(args.seed)

    universe = add_player(random_universe(config), args.name, config)

    pygame.init()
    screen = pygame.display.set_mode((int(config.field_size[0]), int(config.field_size[1])))
    pygame.display.set_caption("The Game of Snakes")
    renderer = Renderer(screen)
    input_manager = InputManager()
    clock = pygame.time.Clock()
    running = True

    while running:
        dt = clock.tick(config.fps) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEMOTION:
                action = input_manager.to_action(event.pos, screen.get_size())
                universe = handle_player_action(universe, args.name, action)

        universe = update_universe(universe, dt, config)
        renderer.draw(snapshot(universe, config), args.name)
        renderer.present()

    logging.info("Window closed, bye")
    pygame.quit()


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")
    run(args)


if __name__ == "__main__":
    main()
