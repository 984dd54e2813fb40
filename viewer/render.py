"""Pygame based renderer for the game of snakes."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

import pygame

from snakes.effect import EffectType
from snakes.snapshot import DeadLinkView, ItemView, SnakeView, Snapshot

from .input import world_to_screen

ITEM_COLORS: Dict[EffectType, Tuple[int, int, int]] = {
    EffectType.FOOD: (255, 200, 90),
    EffectType.REVERSE: (230, 70, 70),
    EffectType.SPEED_UP: (120, 230, 255),
    EffectType.SLOW_DOWN: (150, 120, 90),
    EffectType.PHANTOM: (220, 220, 255),
}

PHANTOM_ALPHA = 110


class Renderer:
    """Responsible for all drawing tasks."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.font = pygame.font.SysFont("arial", 16)
        self.background_color = (20, 24, 28)
        self.text_color = (220, 220, 220)

    def clear(self) -> None:
        self.screen.fill(self.background_color)

    def draw(self, frame: Snapshot, player: Optional[str] = None) -> None:
        """Draw a whole frame. ``player`` selects whose effects the HUD lists."""

        self.clear()
        self.draw_dead_links(frame.dead_links)
        if frame.item is not None:
            self.draw_item(frame.item)
        self.draw_snakes(frame.snakes)
        if player is not None:
            self.draw_hud(frame.snake(player))

    def draw_dead_links(self, links: Iterable[DeadLinkView]) -> None:
        for link in links:
            self._draw_circle(link.location, link.radius, link.color, int(255 * link.fade))

    def draw_item(self, item: ItemView) -> None:
        color = ITEM_COLORS.get(item.effect, (255, 255, 255))
        center = world_to_screen(item.location, self.screen.get_size())
        pygame.draw.circle(self.screen, color, center, int(item.radius))
        pygame.draw.circle(self.screen, self.text_color, center, int(item.radius), width=1)

    def draw_snakes(self, snakes: Iterable[SnakeView]) -> None:
        for snake in snakes:
            alpha = PHANTOM_ALPHA if snake.phantom else 255
            # Tail first so the head ends up on top.
            for point in reversed(snake.links):
                self._draw_circle(point, snake.radius, snake.color, alpha)

    def draw_hud(self, snake: Optional[SnakeView]) -> None:
        if snake is None:
            return
        x, y = 12, 10
        title = self.font.render(f"{snake.name} - {len(snake.links)} links", True, self.text_color)
        self.screen.blit(title, (x, y))
        for effect in snake.effects:
            y += 18
            surface = self.font.render(effect.value.replace("_", " "), True, ITEM_COLORS[effect])
            self.screen.blit(surface, (x, y))

    def _draw_circle(self, point: Tuple[float, float], radius: float, color, alpha: int) -> None:
        center = world_to_screen(point, self.screen.get_size())
        if alpha >= 255:
            pygame.draw.circle(self.screen, color, center, int(radius))
            return
        size = int(radius) * 2 + 2
        surface = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(surface, (*color, max(0, alpha)), (size // 2, size // 2), int(radius))
        self.screen.blit(surface, (center[0] - size // 2, center[1] - size // 2))

    def present(self) -> None:
        pygame.display.flip()
