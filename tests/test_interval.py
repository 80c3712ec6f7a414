import math
import pytest
from signlog.interval import IntervalScale, add_commas
from signlog import helper


def tick_values(scale, expand=False):
    return [tick['value'] for tick in scale.get_ticks(expand)]


class TestExtent:
    def test_fresh_extent_is_empty(self):
        assert IntervalScale().get_extent() == (math.inf, -math.inf)

    def test_union_is_idempotent(self):
        scale = IntervalScale()
        scale.union_extent((1, 5))
        scale.union_extent((1, 5))
        assert scale.get_extent() == (1, 5)

    def test_union_widens(self):
        scale = IntervalScale((1, 5))
        scale.union_extent((-2, 3))
        assert scale.get_extent() == (-2, 5)

    def test_set_extent_ignores_nan(self):
        scale = IntervalScale((1, 5))
        scale.set_extent(math.nan, 9)
        assert scale.get_extent() == (1, 9)


class TestNiceTicks:
    def test_aligned_extent(self):
        scale = IntervalScale((0, 100))
        scale.calc_nice_ticks(5)
        assert scale.get_interval() == 20
        assert tick_values(scale) == [0, 20, 40, 60, 80, 100]

    def test_unaligned_extent(self):
        scale = IntervalScale((3, 97))
        scale.calc_nice_ticks(5)
        assert scale.get_nice_extent() == (20, 80)
        assert tick_values(scale) == [3, 20, 40, 60, 80, 97]
        assert tick_values(scale, expand=True) == [0, 20, 40, 60, 80, 100]

    def test_interval_clamped(self):
        scale = IntervalScale((0, 100))
        scale.calc_nice_ticks(5, min_interval=25)
        assert scale.get_interval() == 25
        scale.calc_nice_ticks(5, max_interval=10)
        assert scale.get_interval() == 10

    def test_no_interval_no_ticks(self):
        assert IntervalScale((0, 100)).get_ticks() == []

    def test_non_finite_span_is_noop(self):
        scale = IntervalScale()
        scale.calc_nice_ticks(5)
        assert scale.get_interval() == 0


class TestNiceExtent:
    def test_rounds_outward(self):
        scale = IntervalScale((3, 97))
        scale.calc_nice_extent(5)
        assert scale.get_extent() == (0, 100)

    def test_fix_min_keeps_bound(self):
        scale = IntervalScale((3, 97))
        scale.calc_nice_extent(5, fix_min=True)
        assert scale.get_extent() == (3, 100)

    def test_single_value_is_expanded(self):
        scale = IntervalScale((5, 5))
        scale.calc_nice_extent(5)
        assert scale.get_extent() == (2, 8)

    def test_zero_value_is_expanded(self):
        scale = IntervalScale((0, 0))
        scale.calc_nice_extent(5)
        assert scale.get_extent() == (0, 1)


class TestMinorTicks:
    def test_subdivides_between_ticks(self):
        scale = IntervalScale((0, 100))
        scale.calc_nice_ticks(5)
        assert scale.get_minor_ticks(2) == [[10], [30], [50], [70], [90]]


class TestLabels:
    def test_thousands_separator(self):
        scale = IntervalScale()
        assert scale.get_label({'value': 1000}) == "1,000"
        assert scale.get_label({'value': 1234.5}) == "1,234.5"

    def test_explicit_precision(self):
        scale = IntervalScale()
        assert scale.get_label({'value': 2.5}, precision=2) == "2.50"

    def test_negative_zero(self):
        assert add_commas(-0.0, 0) == "0"


class TestPointQueries:
    def test_normalize_and_scale(self):
        scale = IntervalScale((0, 100))
        assert scale.normalize(25) == 0.25
        assert scale.scale(0.25) == 25

    def test_contain(self):
        scale = IntervalScale((0, 100))
        assert scale.contain(100)
        assert not scale.contain(101)

    def test_degenerate_normalize(self):
        assert helper.normalize(3, (3, 3)) == 0.5


class TestHelper:
    def test_fix_extent_clamps(self):
        assert helper.fix_extent([-10, 200], (0, 100)) == [0, 100]
        assert helper.fix_extent([math.inf, math.nan], (0, 100)) == [0, 100]

    def test_interval_nice_ticks(self):
        interval, precision, nice_extent = helper.interval_nice_ticks((3, 97), 5)
        assert interval == 20
        assert precision == 2
        assert nice_extent == [20, 80]
