"""Lazily realised, persistent streams for items, spawn points and colors."""

from __future__ import annotations

import itertools
import random
from typing import TYPE_CHECKING, Generic, Iterable, Iterator, List, Tuple, TypeVar

from . import utils

if TYPE_CHECKING:
    from .config import Color, GameConfig

T = TypeVar("T")


class StreamExhaustedError(RuntimeError):
    """Raised when a stream backed by a finite source runs dry."""


class _Source(Generic[T]):
    """Memoises values pulled from an iterator so every stream view sees the same ones."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iterator: Iterator[T] = iter(iterable)
        self._values: List[T] = []

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> T:
        while len(self._values) <= index:
            try:
                self._values.append(next(self._iterator))
            except StopIteration:
                raise StreamExhaustedError(
                    f"stream source ran out after {len(self._values)} values"
                ) from None
        return self._values[index]


class Stream(Generic[T]):
    """An immutable "peek next, advance" view over a lazy iterator.

    ``advance`` and ``push`` return new streams and leave the receiver
    untouched, so a universe can hold a stream and its successor can hold
    the advanced one. Values are only pulled from the source when peeked.
    """

    __slots__ = ("_source", "_index", "_front")

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._source: _Source[T] = _Source(iterable)
        self._index = 0
        self._front: Tuple[T, ...] = ()

    def _view(self, index: int, front: Tuple[T, ...]) -> "Stream[T]":
        stream: Stream[T] = Stream.__new__(Stream)
        stream._source = self._source
        stream._index = index
        stream._front = front
        return stream

    def peek(self) -> T:
        """Return the head of the stream."""

        if self._front:
            return self._front[0]
        return self._source[self._index]

    def advance(self, n: int = 1) -> "Stream[T]":
        """Return the stream without its first ``n`` values."""

        dropped_front = min(n, len(self._front))
        return self._view(self._index + n - dropped_front, self._front[dropped_front:])

    def push(self, value: T) -> "Stream[T]":
        """Return a stream whose head is ``value`` followed by this stream."""

        return self._view(self._index, (value,) + self._front)

    def take(self, n: int) -> List[T]:
        values: List[T] = []
        stream = self
        for _ in range(n):
            values.append(stream.peek())
            stream = stream.advance()
        return values

    @property
    def realised(self) -> int:
        """Number of values pulled from the underlying source so far."""

        return len(self._source)

    def __repr__(self) -> str:
        return f"<Stream index={self._index} front={len(self._front)} realised={self.realised}>"


def random_directions(rng=random) -> Iterator[utils.Vec2]:
    """Yield random unit vectors."""

    while True:
        direction = utils.random_point_in_area(1.0, 1.0, rng).normalized()
        if direction.length_sq() > 0:
            yield direction


def spawn_stream(config: "GameConfig", rng=random) -> Stream[Tuple[utils.Vec2, utils.Vec2]]:
    """Spawn locations on a golden spiral paired with random headings."""

    width, height = config.field_size
    points = utils.golden_spiral(utils.Vec2(0.2 * width, 0.2 * height))
    return Stream(zip(points, random_directions(rng)))


def color_stream(config: "GameConfig") -> Stream["Color"]:
    return Stream(itertools.cycle(config.player_colors))
