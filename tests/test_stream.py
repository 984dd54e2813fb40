"""Tests for lazy streams."""

import itertools

import pytest

from snakes.stream import Stream, StreamExhaustedError, color_stream, spawn_stream


class TestStream:
    """Tests for the persistent peek/advance stream."""

    def test_peek_and_advance(self):
        stream = Stream(itertools.count())
        assert stream.peek() == 0
        advanced = stream.advance(2)
        assert advanced.peek() == 2
        assert stream.peek() == 0

    def test_only_realises_what_is_peeked(self):
        stream = Stream(itertools.count())
        stream.advance(5)
        assert stream.realised == 0
        assert stream.take(3) == [0, 1, 2]
        assert stream.realised == 3

    def test_push(self):
        stream = Stream(itertools.count()).push(-1)
        assert stream.take(3) == [-1, 0, 1]
        assert stream.advance(2).peek() == 1

    def test_finite_source_is_signalled(self):
        stream = Stream([1])
        with pytest.raises(StreamExhaustedError):
            stream.advance().peek()


class TestGameStreams:
    """Tests for spawn and color streams."""

    def test_colors_cycle(self, config):
        colors = color_stream(config).take(len(config.player_colors) + 1)
        assert colors[: len(config.player_colors)] == list(config.player_colors)
        assert colors[-1] == config.player_colors[0]

    def test_spawns_are_distinct(self, config, rng):
        spawns = spawn_stream(config, rng).take(50)
        points = [location.to_tuple() for location, _ in spawns]
        assert len(set(points)) == 50
        for _, direction in spawns:
            assert direction.length() == pytest.approx(1.0)

    def test_first_spawn_is_offset_from_center(self, config, rng):
        location, _ = spawn_stream(config, rng).peek()
        assert location.x == pytest.approx(0.2 * config.field_size[0])
        assert location.y == pytest.approx(0.2 * config.field_size[1])
