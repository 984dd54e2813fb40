"""Simulation core of the game of snakes."""

__all__ = [
    "collision",
    "config",
    "constants",
    "dead_link",
    "effect",
    "item",
    "snake",
    "snapshot",
    "stream",
    "universe",
    "utils",
]
