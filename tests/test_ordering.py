"""Tests for ordering.py"""

import random
from dataclasses import dataclass

import pytest

from ordering import AscendFrom, compare, comparator, order_key, sort_positioned


@dataclass(frozen=True)
class Spot:
    x: int
    y: int

    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


class TestCompare:
    def test_default_is_bottom_left(self):
        assert compare((5, 0), (0, 1)) < 0
        assert compare((0, 0), (1, 0)) < 0

    def test_same_position(self):
        for convention in AscendFrom:
            assert compare((3, 4), (3, 4), convention) == 0

    def test_top_left(self):
        assert compare((5, 9), (0, 1), AscendFrom.HIGH_Y_LOW_X) < 0
        assert compare((0, 9), (5, 9), AscendFrom.HIGH_Y_LOW_X) < 0

    def test_bottom_right(self):
        assert compare((0, 0), (0, 1), AscendFrom.LOW_Y_HIGH_X) < 0
        assert compare((5, 0), (0, 0), AscendFrom.LOW_Y_HIGH_X) < 0

    def test_top_right(self):
        assert compare((0, 2), (9, 1), AscendFrom.HIGH_Y_HIGH_X) < 0
        assert compare((9, 2), (0, 2), AscendFrom.HIGH_Y_HIGH_X) < 0

    def test_none_is_default(self):
        assert compare((1, 0), (0, 1), None) == compare(
            (1, 0), (0, 1), AscendFrom.LOW_Y_LOW_X
        )


class TestSortPositioned:
    @pytest.mark.parametrize("convention", list(AscendFrom))
    def test_key_agrees_with_compare(self, convention):
        rng = random.Random(7)
        spots = {Spot(rng.randrange(10), rng.randrange(10)) for _ in range(40)}
        by_key = sort_positioned(spots, convention)
        by_compare = tuple(sorted(spots, key=comparator(convention)))
        assert by_key == by_compare

    def test_row_major_from_bottom_left(self):
        spots = [Spot(1, 1), Spot(0, 1), Spot(1, 0), Spot(0, 0)]
        assert sort_positioned(spots) == (Spot(0, 0), Spot(1, 0), Spot(0, 1), Spot(1, 1))

    def test_order_key(self):
        assert order_key(2, 3) == (3, 2)
        assert order_key(2, 3, AscendFrom.HIGH_Y_HIGH_X) == (-3, -2)

    def test_duplicate_positions_rejected(self):
        with pytest.raises(ValueError):
            sort_positioned([Spot(0, 0), Spot(0, 0)])
