"""Tests for rectangles and the overlap test."""

import pytest

from game.starfield.entities import Bullet, Enemy, Rect
from game.starfield.utils import clamp, overlaps


class TestRect:
    """Tests for Rect."""

    def test_edges(self):
        r = Rect(x=10, y=20, width=30, height=40)
        assert r.right == 40
        assert r.bottom == 60
        assert r.center_x == 25

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5)])
    def test_non_positive_size_rejected(self, width, height):
        with pytest.raises(ValueError):
            Rect(x=0, y=0, width=width, height=height)

    def test_subclasses_validate_too(self):
        with pytest.raises(ValueError):
            Enemy(x=0, y=0, width=0, height=45)


class TestOverlaps:
    """Tests for the strict AABB overlap."""

    def test_partial_overlap(self):
        assert overlaps(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10))

    def test_shared_vertical_edge_does_not_overlap(self):
        assert not overlaps(Rect(0, 0, 10, 10), Rect(10, 0, 10, 10))

    def test_shared_horizontal_edge_does_not_overlap(self):
        assert not overlaps(Rect(0, 0, 10, 10), Rect(0, 10, 10, 10))

    def test_shared_corner_does_not_overlap(self):
        assert not overlaps(Rect(0, 0, 10, 10), Rect(10, 10, 10, 10))

    def test_containment(self):
        assert overlaps(Rect(0, 0, 100, 100), Rect(40, 40, 5, 5))

    def test_disjoint(self):
        assert not overlaps(Rect(0, 0, 10, 10), Rect(50, 50, 10, 10))

    @pytest.mark.parametrize("a,b", [
        (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)),
        (Rect(0, 0, 10, 10), Rect(10, 0, 10, 10)),
        (Rect(0, 0, 100, 100), Rect(40, 40, 5, 5)),
        (Rect(-5, -5, 3, 3), Rect(0, 0, 1, 1)),
        (Rect(2.5, 0, 0.5, 9), Rect(2.9, 8.9, 4, 4)),
    ])
    def test_symmetric(self, a, b):
        assert overlaps(a, b) == overlaps(b, a)

    def test_mixed_entity_types(self):
        bullet = Bullet(x=110, y=122, width=4, height=15)
        enemy = Enemy(x=100, y=102, width=45, height=45)
        assert overlaps(bullet, enemy)


class TestClamp:
    """Tests for clamp."""

    def test_inside(self):
        assert clamp(5, 0, 10) == 5

    def test_bounds(self):
        assert clamp(-3, 0, 10) == 0
        assert clamp(13, 0, 10) == 10
