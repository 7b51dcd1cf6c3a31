"""Rectangle shape: size, position and corner radius tracks."""

from dataclasses import dataclass
from typing import ClassVar, List, Optional

from ..core import PathDirection, Vector, Vector1D
from ..geometry import BezierPath, rectangle_path
from ..keyframes import KeyframeGroup
from .base import AnimatableShape, NamedTrack
from .modifiers import RoundedCorners


@dataclass(frozen=True)
class RectangleState:
    """How to draw a rectangle at one point in time."""
    size: Vector
    position: Vector
    corner_radius: Vector1D


@dataclass(frozen=True)
class Rectangle(AnimatableShape):
    """A rectangle centred on its position, optionally with rounded corners."""

    kind: ClassVar[str] = "rectangle"

    size: KeyframeGroup[Vector]
    position: KeyframeGroup[Vector]
    corner_radius: KeyframeGroup[Vector1D]
    direction: PathDirection = PathDirection.CLOCKWISE

    def tracks(self, rounded_corners: Optional[RoundedCorners] = None) -> List[NamedTrack]:
        # The modifier replaces our own radius outright.
        corner_radius = rounded_corners.radius if rounded_corners is not None else self.corner_radius
        return [
            ("size", self.size),
            ("position", self.position),
            ("corner radius", corner_radius),
        ]

    def make_state(self, size: Vector, position: Vector, corner_radius: Vector1D) -> RectangleState:
        return RectangleState(size=size, position=position, corner_radius=corner_radius)

    def build_path(self, state: RectangleState) -> BezierPath:
        return rectangle_path(
            position=state.position.point_value,
            size=state.size.size_value,
            corner_radius=state.corner_radius.float_value,
            direction=self.direction,
        )
