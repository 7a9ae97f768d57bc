"""
Tests for geometry, paddle rules and delta sanitizing.
"""

import math

import pytest

from square_dodger.dodger_core.entities import Obstacle, Rect
from square_dodger.dodger_core.rules import ClockRules, PlayerRules


@pytest.fixture
def player_rules(config):
    return PlayerRules(config)


@pytest.fixture
def clock_rules(config):
    return ClockRules(config)


class TestRect:
    """Test axis-aligned rectangle overlap."""

    def test_from_center(self):
        r = Rect.from_center(100, 50, 20, 10)
        assert r.as_tuple() == (90, 45, 20, 10)
        assert r.center == (100, 50)

    def test_overlapping(self):
        a = Rect(0, 0, 10, 10)
        b = Rect(5, 5, 10, 10)
        assert a.overlaps(b)
        assert b.overlaps(a)

    def test_contained(self):
        assert Rect(0, 0, 100, 100).overlaps(Rect(40, 40, 5, 5))

    def test_shared_edge_does_not_overlap(self):
        """Touching edges are not a collision."""
        a = Rect(0, 0, 10, 10)
        assert not a.overlaps(Rect(10, 0, 10, 10))
        assert not a.overlaps(Rect(0, 10, 10, 10))

    def test_separated(self):
        assert not Rect(0, 0, 10, 10).overlaps(Rect(50, 50, 10, 10))


class TestObstacle:
    """Test obstacle geometry and pruning predicate."""

    def test_rect_is_centered_square(self):
        o = Obstacle(uid=0, x=100, y=200, size=30)
        assert o.rect.as_tuple() == (85, 185, 30, 30)

    def test_is_past(self):
        """Pruned once y - size exceeds height + margin."""
        o = Obstacle(uid=0, x=0, y=870, size=30)
        assert not o.is_past(800, 40)
        o.y = 870.5
        assert o.is_past(800, 40)


class TestPlayerRules:
    """Test paddle bounds and easing."""

    def test_x_range(self, player_rules):
        assert player_rules.x_range(400) == (26, 374)

    def test_narrow_world_pins_to_center(self, player_rules):
        assert player_rules.x_range(40) == (20, 20)
        assert player_rules.clamp_x(-100, 40) == 20

    def test_clamp(self, player_rules):
        assert player_rules.clamp_x(-50, 400) == 26
        assert player_rules.clamp_x(999, 400) == 374
        assert player_rules.clamp_x(123, 400) == 123

    def test_ease_zero_dt_does_not_move(self, player_rules):
        assert player_rules.ease_x(100, 300, 0.0) == 100

    def test_ease_one_second(self, player_rules):
        """After one second only 0.1% of the distance remains."""
        assert player_rules.ease_x(100, 300, 1.0) == pytest.approx(299.8)

    def test_ease_factor_composes(self, player_rules):
        """base^a * base^b == base^(a+b)."""
        f = player_rules.ease_factor
        assert f(0.25) * f(0.75) == pytest.approx(f(1.0))

    def test_rect_position(self, player_rules):
        """Paddle top sits bottom_offset above the world bottom."""
        r = player_rules.rect(200, 800)
        assert r.as_tuple() == (174, 704, 52, 18)


class TestClockRules:
    """Test delta sanitizing."""

    def test_passthrough(self, clock_rules):
        assert clock_rules.sanitize(0.016) == 0.016

    def test_negative_becomes_zero(self, clock_rules):
        assert clock_rules.sanitize(-0.5) == 0.0

    def test_nan_becomes_zero(self, clock_rules):
        assert clock_rules.sanitize(math.nan) == 0.0

    def test_infinity_clamped(self, clock_rules):
        assert clock_rules.sanitize(math.inf) == clock_rules.max_advance
        assert clock_rules.sanitize(-math.inf) == 0.0

    def test_large_clamped_to_max_advance(self, clock_rules):
        assert clock_rules.sanitize(30.0) == 1.0

    def test_custom_limit(self, clock_rules):
        assert clock_rules.sanitize(5.0, clock_rules.max_frame_delta) == 0.1
