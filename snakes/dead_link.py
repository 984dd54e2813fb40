"""Fading remnants of destroyed snakes."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from . import utils


@dataclass(frozen=True)
class DeadLink:
    """A single body link left behind by a crashed snake. Purely cosmetic."""

    location: utils.Vec2
    radius: float
    color: tuple[int, int, int]
    duration: float
    remaining: float

    @property
    def fade(self) -> float:
        """Fraction of the fade time left, from ``1.0`` (fresh) to ``0.0``."""

        if self.duration <= 0:
            return 0.0
        return max(0.0, min(1.0, self.remaining / self.duration))


def mk_dead_link(location: utils.Vec2, radius: float, color: tuple[int, int, int], duration: float) -> DeadLink:
    return DeadLink(location, radius, color, duration, duration)


def update_dead_link(link: DeadLink, dt: float) -> Optional[DeadLink]:
    """Age ``link`` by ``dt`` seconds, returning ``None`` once it has faded out."""

    if dt >= link.remaining:
        return None
    return replace(link, remaining=link.remaining - dt)
