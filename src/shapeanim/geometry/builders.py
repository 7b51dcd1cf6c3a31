"""Path generators for the primitive shape kinds.

Coordinates are y-down (screen space), so CLOCKWISE visits the corners
top-right, bottom-right, bottom-left, top-left.

Rounded corners are quarter circles approximated by one cubic segment each,
with handles of length radius * ELLIPSE_CONTROL_POINT.
"""

import math
from typing import Tuple
import numpy as np

from ..core import PathDirection
from .path import BezierPath, CurveVertex

# Cubic bezier handle length for a quarter circle of radius 1
ELLIPSE_CONTROL_POINT = 0.55228

# Clamped radii at or below this draw sharp corners
SHARP_CORNER_EPSILON = 1e-6


def clamp_corner_radius(radius: float, width: float, height: float) -> float:
    """Limit a corner radius to what fits inside a width x height rectangle.

    Negative and NaN radii mean no rounding. The radius never exceeds half
    of the shorter side, so opposite arcs can meet but never overlap. The
    sign of width/height does not matter: a mirrored rectangle rounds the
    same as the unmirrored one.
    """
    if math.isnan(radius) or radius <= 0:
        return 0.0
    return float(min(radius, min(abs(width), abs(height)) / 2.0))


def _sign(value: float) -> float:
    return -1.0 if value < 0 else 1.0


def _contour(
    points: np.ndarray,
    in_tangents: np.ndarray,
    out_tangents: np.ndarray,
    direction: PathDirection,
) -> BezierPath:
    vertices = tuple(
        CurveVertex(
            (float(p[0]), float(p[1])),
            (float(i[0]), float(i[1])),
            (float(o[0]), float(o[1])),
        )
        for p, i, o in zip(points, in_tangents, out_tangents)
    )
    path = BezierPath(vertices, closed=True)
    if direction == PathDirection.COUNTER_CLOCKWISE:
        return path.reversed()
    return path


def rectangle_path(
    position: Tuple[float, float],
    size: Tuple[float, float],
    corner_radius: float,
    direction: PathDirection = PathDirection.CLOCKWISE,
) -> BezierPath:
    """A closed (optionally rounded) rectangle centred on position.

    The contour starts on the right edge just below the top-right corner and
    ends back at the same point. Sharp rectangles have 5 vertices, rounded
    ones 9 (the lead-in plus two per corner). A negative width or height
    mirrors the rectangle about its centre.
    """
    width, height = size
    half_w = abs(width) / 2.0
    half_h = abs(height) / 2.0
    radius = clamp_corner_radius(corner_radius, width, height)

    if radius <= SHARP_CORNER_EPSILON:
        points = np.array([
            [half_w, -half_h],   # Lead in
            [half_w, half_h],    # Bottom right
            [-half_w, half_h],   # Bottom left
            [-half_w, -half_h],  # Top left
            [half_w, -half_h],   # Top right
        ])
        in_tangents = np.zeros_like(points)
        out_tangents = np.zeros_like(points)
    else:
        cp = radius * ELLIPSE_CONTROL_POINT
        points = np.array([
            [half_w, -half_h + radius],   # Lead in
            [half_w, half_h - radius],    # Bottom right
            [half_w - radius, half_h],
            [-half_w + radius, half_h],   # Bottom left
            [-half_w, half_h - radius],
            [-half_w, -half_h + radius],  # Top left
            [-half_w + radius, -half_h],
            [half_w - radius, -half_h],   # Top right
            [half_w, -half_h + radius],
        ])
        in_tangents = np.array([
            [0, 0],
            [0, 0],
            [cp, 0],
            [0, 0],
            [0, cp],
            [0, 0],
            [-cp, 0],
            [0, 0],
            [0, -cp],
        ], dtype=np.float64)
        out_tangents = np.array([
            [0, 0],
            [0, cp],
            [0, 0],
            [-cp, 0],
            [0, 0],
            [0, -cp],
            [0, 0],
            [cp, 0],
            [0, 0],
        ], dtype=np.float64)

    mirror = np.array([_sign(width), _sign(height)])
    points = points * mirror + np.asarray(position, dtype=np.float64)
    return _contour(points, in_tangents * mirror, out_tangents * mirror, direction)


def ellipse_path(
    size: Tuple[float, float],
    center: Tuple[float, float],
    direction: PathDirection = PathDirection.CLOCKWISE,
) -> BezierPath:
    """A closed four-segment ellipse starting at its top point.

    Counter-clockwise ellipses are mirrored horizontally rather than
    reversed, so both directions start at the top.
    """
    half = np.asarray(size, dtype=np.float64) / 2.0
    if direction == PathDirection.COUNTER_CLOCKWISE:
        half[0] = -half[0]
    cx, cy = half * ELLIPSE_CONTROL_POINT
    center = np.asarray(center, dtype=np.float64)

    points = center + np.array([
        [0, -half[1]],   # Top
        [half[0], 0],    # Right
        [0, half[1]],    # Bottom
        [-half[0], 0],   # Left
        [0, -half[1]],   # Top
    ])
    in_tangents = np.array([
        [-cx, 0],
        [0, -cy],
        [cx, 0],
        [0, cy],
        [-cx, 0],
    ])
    out_tangents = -in_tangents
    return _contour(points, in_tangents, out_tangents, PathDirection.CLOCKWISE)
