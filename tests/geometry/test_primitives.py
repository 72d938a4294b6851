import pytest
import itertools
from pathkernel.geometry.vector import Vector2
from pathkernel.geometry.primitives import (
    clamp, triangle_signed_area_2x, points_nearly_equal, cross,
    normalize, point_segment_distance_squared,
)


class TestClamp:
    def test_float_range(self):
        assert clamp(0.5, 0.0, 1.0) == 0.5
        assert clamp(-0.5, 0.0, 1.0) == 0.0
        assert clamp(1.5, 0.0, 1.0) == 1.0

    def test_int_range(self):
        result = clamp(12, 0, 10)
        assert result == 10
        assert isinstance(result, int)
        assert clamp(-3, 0, 10) == 0

    def test_inverted_bounds_do_not_raise(self):
        # lower bound is checked first
        assert clamp(5, 10, 0) == 10
        assert clamp(20, 10, 0) == 0


class TestTriangleSignedArea:
    def test_counter_clockwise_value(self):
        a = Vector2(x=0.0, y=0.0)
        b = Vector2(x=4.0, y=0.0)
        c = Vector2(x=0.0, y=3.0)
        # (c.x-a.x)*(b.y-a.y) - (b.x-a.x)*(c.y-a.y) = 0 - 12
        assert triangle_signed_area_2x(a, b, c) == -12.0

    def test_antisymmetric_under_swaps(self):
        pts = [Vector2(x=1.0, y=2.0), Vector2(x=5.0, y=-1.0), Vector2(x=3.5, y=4.0)]
        base = triangle_signed_area_2x(*pts)
        assert base != 0.0
        for i, j in itertools.combinations(range(3), 2):
            swapped = list(pts)
            swapped[i], swapped[j] = swapped[j], swapped[i]
            assert triangle_signed_area_2x(*swapped) == pytest.approx(-base)

    def test_collinear_is_zero(self):
        pts = [Vector2(x=0.0, y=0.0), Vector2(x=1.0, y=1.0), Vector2(x=2.0, y=2.0)]
        assert triangle_signed_area_2x(*pts) == 0.0


class TestPointsNearlyEqual:
    def test_within_tolerance(self):
        assert points_nearly_equal(0.0, 0.0, 0.05, 0.05, 0.1)

    def test_strictly_less(self):
        # squared distance equals tol squared exactly
        assert not points_nearly_equal(0.0, 0.0, 3.0, 4.0, 5.0)

    def test_outside_tolerance(self):
        assert not points_nearly_equal(1.0, 1.0, 2.0, 1.0, 0.5)


class TestCross:
    def test_operand_order(self):
        # dx1*dy0 - dx0*dy1
        assert cross(1.0, 0.0, 0.0, 1.0) == -1.0
        assert cross(0.0, 1.0, 1.0, 0.0) == 1.0

    def test_parallel_is_zero(self):
        assert cross(2.0, 4.0, 1.0, 2.0) == 0.0


class TestNormalize:
    def test_unit_vector_and_length(self):
        unit, d = normalize(Vector2(x=0.0, y=-2.0))
        assert d == 2.0
        assert unit == Vector2(x=0.0, y=-1.0)

    def test_zero_vector(self):
        v = Vector2(x=0.0, y=0.0)
        unit, d = normalize(v)
        assert d == 0.0
        assert unit == v

    def test_input_unchanged(self):
        v = Vector2(x=3.0, y=4.0)
        normalize(v)
        assert v == Vector2(x=3.0, y=4.0)


class TestPointSegmentDistance:
    def test_perpendicular(self):
        assert point_segment_distance_squared(5.0, 3.0, 0.0, 0.0, 10.0, 0.0) == 9.0

    def test_beyond_end_clamps_to_q(self):
        assert point_segment_distance_squared(15.0, 0.0, 0.0, 0.0, 10.0, 0.0) == 25.0

    def test_before_start_clamps_to_p(self):
        assert point_segment_distance_squared(-3.0, 4.0, 0.0, 0.0, 10.0, 0.0) == 25.0

    def test_point_on_segment(self):
        assert point_segment_distance_squared(4.0, 0.0, 0.0, 0.0, 10.0, 0.0) == 0.0

    def test_zero_length_segment(self):
        assert point_segment_distance_squared(3.0, 4.0, 1.0, 1.0, 1.0, 1.0) == 13.0

    def test_diagonal_segment(self):
        assert point_segment_distance_squared(0.0, 2.0, 0.0, 0.0, 2.0, 2.0) == pytest.approx(2.0)
