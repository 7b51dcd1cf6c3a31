"""Cubic bezier paths produced from resolved shape states.

A BezierPath is one contour: an ordered list of CurveVertex points, each
carrying in/out control points relative to the vertex. A Path is what the
renderer receives: one or more contours drawn together.

Reversing a contour reverses its vertex order and swaps every vertex's in
and out tangents, so the reversed contour traces the same curve backwards.
"""

from dataclasses import dataclass
from typing import List, Tuple, Union
import numpy as np

Point = Tuple[float, float]

ZERO: Point = (0.0, 0.0)


def _add(a: Point, b: Point) -> Point:
    return (a[0] + b[0], a[1] + b[1])


@dataclass(frozen=True)
class CurveVertex:
    """A path vertex with control points relative to it."""
    point: Point
    in_tangent: Point = ZERO    # Relative to point
    out_tangent: Point = ZERO   # Relative to point

    @property
    def in_point(self) -> Point:
        """Absolute position of the incoming control point."""
        return _add(self.point, self.in_tangent)

    @property
    def out_point(self) -> Point:
        """Absolute position of the outgoing control point."""
        return _add(self.point, self.out_tangent)

    def reversed(self) -> "CurveVertex":
        return CurveVertex(self.point, self.out_tangent, self.in_tangent)

    def translated(self, offset: Point) -> "CurveVertex":
        return CurveVertex(_add(self.point, offset), self.in_tangent, self.out_tangent)


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class CurveTo:
    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float


@dataclass(frozen=True)
class ClosePath:
    pass


PathElement = Union[MoveTo, LineTo, CurveTo, ClosePath]


def _segment(start: CurveVertex, end: CurveVertex) -> PathElement:
    if start.out_tangent == ZERO and end.in_tangent == ZERO:
        return LineTo(*end.point)
    return CurveTo(*start.out_point, *end.in_point, *end.point)


@dataclass(frozen=True)
class BezierPath:
    """A single contour of cubic bezier segments."""
    vertices: Tuple[CurveVertex, ...] = ()
    closed: bool = False

    def reversed(self) -> "BezierPath":
        """The same contour traced in the opposite direction."""
        return BezierPath(
            tuple(v.reversed() for v in reversed(self.vertices)),
            self.closed,
        )

    def translated(self, offset: Point) -> "BezierPath":
        return BezierPath(tuple(v.translated(offset) for v in self.vertices), self.closed)

    @property
    def points(self) -> List[Point]:
        return [v.point for v in self.vertices]

    def elements(self) -> List[PathElement]:
        """Move/line/curve/close elements, the way a renderer draws the contour."""
        if not self.vertices:
            return []

        first = self.vertices[0]
        elements: List[PathElement] = [MoveTo(*first.point)]
        for start, end in zip(self.vertices, self.vertices[1:]):
            elements.append(_segment(start, end))

        if self.closed:
            last = self.vertices[-1]
            if last.point != first.point:
                elements.append(_segment(last, first))
            elements.append(ClosePath())
        return elements

    def to_numpy(self) -> np.ndarray:
        """(N, 3, 2) array of [point, in_tangent, out_tangent] per vertex."""
        if not self.vertices:
            return np.zeros((0, 3, 2))
        return np.array(
            [[v.point, v.in_tangent, v.out_tangent] for v in self.vertices],
            dtype=np.float64,
        )

    def to_path(self) -> "Path":
        return Path((self,))

    def __len__(self) -> int:
        return len(self.vertices)


@dataclass(frozen=True)
class Path:
    """One or more contours drawn as a single path."""
    contours: Tuple[BezierPath, ...] = ()

    def duplicated(self, times: int) -> "Path":
        """Chain `times` identical copies of this path into one path.

        Used for effects that need repeated sub-paths (e.g. trim paths over a
        dashed stroke). times == 1 returns this path unchanged.
        """
        if isinstance(times, bool) or not isinstance(times, int) or times < 1:
            raise ValueError(f"Path repetition count must be a positive integer, got {times!r}")
        if times == 1:
            return self
        return Path(self.contours * times)

    def elements(self) -> List[PathElement]:
        elements: List[PathElement] = []
        for contour in self.contours:
            elements.extend(contour.elements())
        return elements

    def svg_path_data(self, precision: int = 3) -> str:
        """SVG `d` attribute for this path, mostly for debugging output."""
        def fmt(*values: float) -> str:
            return " ".join(f"{round(v, precision):g}" for v in values)

        parts = []
        for element in self.elements():
            if isinstance(element, MoveTo):
                parts.append(f"M {fmt(element.x, element.y)}")
            elif isinstance(element, LineTo):
                parts.append(f"L {fmt(element.x, element.y)}")
            elif isinstance(element, CurveTo):
                parts.append("C " + fmt(
                    element.x1, element.y1, element.x2, element.y2, element.x3, element.y3
                ))
            else:
                parts.append("Z")
        return " ".join(parts)

    def __len__(self) -> int:
        return len(self.contours)
