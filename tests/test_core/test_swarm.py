"""Tests for the Swarm collection."""

import random

import pytest

from dodge.core.geometry import Direction
from dodge.core.swarm import Swarm
from dodge.core.vec2 import Vec2


@pytest.fixture
def swarm(config) -> Swarm:
    return Swarm(config, random.Random(99))


class TestSwarmReset:
    """Tests for Swarm.reset()."""

    def test_starts_empty(self, swarm):
        assert len(swarm) == 0
        assert swarm  # empty swarm is still truthy

    def test_reset_to_count(self, swarm):
        swarm.reset(6)
        assert len(swarm) == 6

    def test_reset_replaces_collection(self, swarm):
        """Reset builds a new list of fresh balls."""
        swarm.reset(6)
        old = list(swarm)
        swarm.spawn()
        swarm.reset(6)
        assert len(swarm) == 6
        assert all(ball not in old for ball in swarm)

    def test_negative_count_rejected(self, swarm):
        with pytest.raises(ValueError, match="non-negative"):
            swarm.reset(-1)


class TestSwarmSpawn:
    """Tests for Swarm.spawn()."""

    def test_appends_to_end(self, swarm, config):
        """New balls go to the end, at the spawn point."""
        swarm.reset(2)
        first = swarm.balls[0]
        ball = swarm.spawn()
        assert len(swarm) == 3
        assert swarm.balls[-1] is ball
        assert swarm.balls[0] is first
        assert ball.pos == config.ball_spawn_point

    def test_uses_injected_random_source(self, config):
        """Same seed, same headings."""
        a = Swarm(config, random.Random(5))
        b = Swarm(config, random.Random(5))
        a.reset(4)
        b.reset(4)
        assert [x.direction for x in a] == [y.direction for y in b]


class TestSwarmUpdate:
    """Tests for Swarm.update_all()."""

    def test_every_ball_moves(self, swarm, playfield):
        swarm.reset(6)
        before = [ball.pos for ball in swarm]
        swarm.update_all(playfield)
        after = [ball.pos for ball in swarm]
        assert all(b != a for b, a in zip(before, after))

    def test_reports_reflections(self, swarm, playfield):
        """Wall bounces across the swarm are totalled."""
        swarm.reset(2)
        swarm.balls[0].pos = Vec2(585, 500)
        swarm.balls[0].direction = Direction(90.0, 6.0)
        swarm.balls[1].pos = Vec2(300, 500)
        swarm.balls[1].direction = Direction(90.0, 2.0)
        assert swarm.update_all(playfield) == 1
        assert swarm.balls[0].direction.angle == pytest.approx(270.0)
        assert swarm.balls[1].direction.angle == pytest.approx(90.0)

    def test_balls_stay_near_playfield(self, swarm, playfield):
        """Over many frames balls never wander more than one step outside."""
        swarm.reset(20)
        for _ in range(2000):
            swarm.update_all(playfield)
            for ball in swarm:
                assert -6.0 <= ball.pos.x <= 606.0
                assert -6.0 <= ball.pos.y <= 1006.0


class TestSwarmDraw:
    """Tests for Swarm.draw_all()."""

    def test_draws_each_ball(self, swarm, fake_window):
        swarm.reset(3)
        swarm.draw_all(fake_window)
        circles = fake_window.calls_of("circle")
        assert len(circles) == 3
        assert [c[1] for c in circles] == [ball.pos for ball in swarm]
