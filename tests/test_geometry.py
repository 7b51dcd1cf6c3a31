"""Tests for rectangle/ellipse path generation and path repetition."""

import numpy as np
import pytest

from shapeanim.core import PathDirection, Vector, Vector1D
from shapeanim.geometry import (
    ELLIPSE_CONTROL_POINT,
    BezierPath,
    ClosePath,
    CurveTo,
    CurveVertex,
    LineTo,
    MoveTo,
    Path,
    clamp_corner_radius,
    ellipse_path,
    rectangle_path,
)
from shapeanim.keyframes import KeyframeGroup
from shapeanim.shapes import Rectangle, RectangleState


class TestClampCornerRadius:
    """Test the corner radius clamp policy."""

    def test_radius_within_bounds_unchanged(self):
        assert clamp_corner_radius(10, 100, 50) == 10

    def test_radius_limited_to_half_shorter_side(self):
        """Opposite arcs may meet but never overlap."""
        assert clamp_corner_radius(40, 100, 50) == 25
        assert clamp_corner_radius(1000, 30, 80) == 15

    def test_negative_radius_is_sharp(self):
        assert clamp_corner_radius(-5, 100, 100) == 0.0

    def test_nan_radius_is_sharp(self):
        assert clamp_corner_radius(float("nan"), 100, 100) == 0.0

    def test_negative_size_uses_magnitude(self):
        assert clamp_corner_radius(40, -100, 50) == 25

    def test_degenerate_size_is_sharp(self):
        assert clamp_corner_radius(10, 0, 50) == 0.0


class TestRectanglePath:
    """Test rounded rectangle generation."""

    def test_sharp_rectangle_vertices(self):
        """Zero radius gives a lead-in plus four corners, clockwise from top right."""
        path = rectangle_path((0, 0), (100, 50), 0)

        assert path.closed
        assert path.points == [(50, -25), (50, 25), (-50, 25), (-50, -25), (50, -25)]
        assert all(v.in_tangent == (0, 0) and v.out_tangent == (0, 0) for v in path.vertices)

    def test_rounded_rectangle_vertices(self):
        """Each corner becomes two vertices joined by a quarter arc."""
        path = rectangle_path((0, 0), (100, 50), 10)
        cp = 10 * ELLIPSE_CONTROL_POINT

        assert len(path) == 9
        assert path.points[0] == (50, -15)
        assert path.points[1] == (50, 15)
        assert path.points[2] == (40, 25)
        assert path.points[-1] == path.points[0]
        assert path.vertices[1].out_tangent == pytest.approx((0, cp))
        assert path.vertices[2].in_tangent == pytest.approx((cp, 0))

    def test_position_offsets_path(self):
        path = rectangle_path((10, 20), (4, 2), 0)
        assert path.points[0] == (12, 19)
        assert path.points[2] == (8, 21)

    def test_oversized_radius_is_clamped(self):
        """A radius larger than the rectangle produces a stadium shape."""
        path = rectangle_path((0, 0), (100, 50), 500)
        # Right edge collapses to a single point at mid height.
        assert path.points[0] == pytest.approx((50, 0))
        assert path.points[1] == pytest.approx((50, 0))

    def test_tiny_radius_draws_sharp_corners(self):
        assert len(rectangle_path((0, 0), (10, 10), 1e-9)) == 5

    def test_negative_width_mirrors(self):
        """A negative width mirrors the rectangle horizontally."""
        normal = rectangle_path((0, 0), (100, 50), 10)
        mirrored = rectangle_path((0, 0), (-100, 50), 10)

        np.testing.assert_allclose(
            mirrored.to_numpy()[:, :, 0],
            -normal.to_numpy()[:, :, 0],
        )
        np.testing.assert_allclose(
            mirrored.to_numpy()[:, :, 1],
            normal.to_numpy()[:, :, 1],
        )

    def test_counter_clockwise_is_exact_reversal(self):
        """Winding flips vertex order and swaps in/out tangents."""
        for radius in (0, 12):
            cw = rectangle_path((3, 4), (80, 60), radius, PathDirection.CLOCKWISE)
            ccw = rectangle_path((3, 4), (80, 60), radius, PathDirection.COUNTER_CLOCKWISE)

            assert ccw.points == cw.points[::-1]
            for forward, backward in zip(cw.vertices, reversed(ccw.vertices)):
                assert backward.in_tangent == forward.out_tangent
                assert backward.out_tangent == forward.in_tangent

    def test_rectangle_shape_builds_from_state(self):
        """The Rectangle shape kind forwards its state and direction."""
        rect = Rectangle(
            size=KeyframeGroup.static(Vector.of(10, 10)),
            position=KeyframeGroup.static(Vector.of(0, 0)),
            corner_radius=KeyframeGroup.static(Vector1D(0)),
            direction=PathDirection.COUNTER_CLOCKWISE,
        )
        state = RectangleState(Vector.of(10, 10, 0), Vector.of(1, 1, 0), Vector1D(2))

        assert rect.build_path(state) == rectangle_path(
            (1, 1), (10, 10), 2, PathDirection.COUNTER_CLOCKWISE
        )


class TestEllipsePath:
    """Test ellipse generation."""

    def test_clockwise_ellipse(self):
        path = ellipse_path((20, 10), (0, 0))
        assert path.points == [(0, -5), (10, 0), (0, 5), (-10, 0), (0, -5)]
        assert path.vertices[0].out_tangent == pytest.approx((10 * ELLIPSE_CONTROL_POINT, 0))

    def test_counter_clockwise_mirrors(self):
        path = ellipse_path((20, 10), (0, 0), PathDirection.COUNTER_CLOCKWISE)
        assert path.points == [(0, -5), (-10, 0), (0, 5), (10, 0), (0, -5)]

    def test_center_offsets_path(self):
        path = ellipse_path((2, 2), (5, 5))
        assert path.points[0] == (5, 4)


class TestBezierPath:
    """Test contour utilities."""

    def test_elements_for_sharp_rectangle(self):
        path = rectangle_path((0, 0), (10, 10), 0)
        elements = path.elements()

        assert elements[0] == MoveTo(5, -5)
        assert all(isinstance(e, LineTo) for e in elements[1:-1])
        assert elements[-1] == ClosePath()
        assert len(elements) == 6

    def test_elements_for_rounded_rectangle(self):
        """Arcs become curves, edges stay lines."""
        elements = rectangle_path((0, 0), (40, 40), 5).elements()

        assert len(elements) == 10
        assert isinstance(elements[1], LineTo)
        assert isinstance(elements[2], CurveTo)

    def test_open_contour_has_no_close(self):
        path = BezierPath((CurveVertex((0, 0)), CurveVertex((1, 1))))
        assert path.elements() == [MoveTo(0, 0), LineTo(1, 1)]

    def test_closing_segment_added_when_needed(self):
        """A closed contour that doesn't end on its start gets a closing segment."""
        path = BezierPath(
            (CurveVertex((0, 0)), CurveVertex((1, 0)), CurveVertex((1, 1))),
            closed=True,
        )
        assert path.elements()[-2:] == [LineTo(0, 0), ClosePath()]

    def test_to_numpy_shape(self):
        assert rectangle_path((0, 0), (10, 10), 2).to_numpy().shape == (9, 3, 2)
        assert BezierPath().to_numpy().shape == (0, 3, 2)


class TestPathRepetition:
    """Test chaining copies of a path."""

    def test_single_copy_is_identity(self):
        path = rectangle_path((0, 0), (10, 10), 2).to_path()
        assert path.duplicated(1) is path

    def test_copies_are_identical(self):
        contour = rectangle_path((0, 0), (10, 10), 2)
        path = contour.to_path().duplicated(3)

        assert len(path) == 3
        assert all(c == contour for c in path.contours)
        assert len(path.elements()) == 3 * len(contour.elements())

    def test_non_positive_count_rejected(self):
        with pytest.raises(ValueError):
            Path().duplicated(0)

    @pytest.mark.parametrize("times", [2.0, None, True])
    def test_non_integer_count_rejected(self, times):
        """Repetition counts must be real integers."""
        contour = rectangle_path((0, 0), (10, 10), 2)
        with pytest.raises(ValueError):
            contour.to_path().duplicated(times)

    def test_svg_path_data(self):
        path = rectangle_path((0, 0), (10, 10), 0).to_path()
        assert path.svg_path_data() == "M 5 -5 L 5 5 L -5 5 L -5 -5 L 5 -5 Z"
