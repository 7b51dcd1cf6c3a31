"""Resolved geometry - closed bezier paths built from shape states.

Key concepts:
- CurveVertex: a point with in/out control points
- BezierPath: one contour, reversible for winding direction
- Path: the contours handed to the renderer, repeatable via duplicated()
"""

from .path import (
    BezierPath,
    ClosePath,
    CurveTo,
    CurveVertex,
    LineTo,
    MoveTo,
    Path,
    PathElement,
)
from .builders import (
    ELLIPSE_CONTROL_POINT,
    clamp_corner_radius,
    ellipse_path,
    rectangle_path,
)

__all__ = [
    "BezierPath",
    "ClosePath",
    "CurveTo",
    "CurveVertex",
    "LineTo",
    "MoveTo",
    "Path",
    "PathElement",
    "ELLIPSE_CONTROL_POINT",
    "clamp_corner_radius",
    "ellipse_path",
    "rectangle_path",
]
