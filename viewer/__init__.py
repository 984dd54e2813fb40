"""Pygame front-end for the game of snakes."""

__all__ = [
    "input",
    "main",
    "render",
]
