"""Tests for Vec2 and Playfield."""

import pytest

from dodge.core.playfield import PLAYFIELD_HEIGHT, PLAYFIELD_WIDTH, Playfield
from dodge.core.vec2 import Vec2


class TestVec2:
    """Tests for the Vec2 value type."""

    def test_arithmetic(self):
        assert Vec2(1, 2) + Vec2(3, 4) == Vec2(4, 6)
        assert Vec2(5, 5) - Vec2(2, 1) == Vec2(3, 4)

    def test_length(self):
        assert Vec2(3, 4).length() == pytest.approx(5.0)
        assert Vec2(3, 4).length_squared() == pytest.approx(25.0)

    def test_immutable(self):
        v = Vec2(1, 2)
        with pytest.raises(AttributeError):
            v.x = 5

    def test_from_tuple(self):
        """Mouse positions arrive as integer tuples."""
        v = Vec2.from_tuple((12, 34))
        assert v == Vec2(12.0, 34.0)
        assert isinstance(v.x, float)

    def test_as_int_tuple_rounds(self):
        assert Vec2(1.4, 2.6).as_int_tuple() == (1, 3)


class TestPlayfield:
    """Tests for Playfield boundary checks."""

    def test_default_size(self):
        field = Playfield()
        assert field.width == PLAYFIELD_WIDTH == 600.0
        assert field.height == PLAYFIELD_HEIGHT == 1000.0

    def test_side_wall(self):
        field = Playfield()
        assert field.hits_side_wall(Vec2(10, 500), 10) is True
        assert field.hits_side_wall(Vec2(590, 500), 10) is True
        assert field.hits_side_wall(Vec2(300, 5), 10) is False

    def test_end_wall(self):
        field = Playfield()
        assert field.hits_end_wall(Vec2(300, 10), 10) is True
        assert field.hits_end_wall(Vec2(300, 990), 10) is True
        assert field.hits_end_wall(Vec2(5, 500), 10) is False

    def test_clamp(self):
        """Clamped circles sit fully inside."""
        field = Playfield()
        assert field.clamp(Vec2(-50, 2000), 20) == Vec2(20, 980)
        assert field.clamp(Vec2(300, 500), 20) == Vec2(300, 500)

    def test_describe_position(self):
        field = Playfield()
        assert field.describe_position(Vec2(10, 10)) == "top left"
        assert field.describe_position(Vec2(300, 500)) == "middle center"
        assert field.describe_position(Vec2(590, 990)) == "bottom right"
