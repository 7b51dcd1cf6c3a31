"""Ellipse shape: size and position tracks."""

from dataclasses import dataclass
from typing import ClassVar, List, Optional

from ..core import PathDirection, Vector
from ..geometry import BezierPath, ellipse_path
from ..keyframes import KeyframeGroup
from .base import AnimatableShape, NamedTrack
from .modifiers import RoundedCorners


@dataclass(frozen=True)
class EllipseState:
    """How to draw an ellipse at one point in time."""
    size: Vector
    position: Vector


@dataclass(frozen=True)
class Ellipse(AnimatableShape):
    kind: ClassVar[str] = "ellipse"

    size: KeyframeGroup[Vector]
    position: KeyframeGroup[Vector]
    direction: PathDirection = PathDirection.CLOCKWISE

    def tracks(self, rounded_corners: Optional[RoundedCorners] = None) -> List[NamedTrack]:
        # No corners to round.
        return [
            ("size", self.size),
            ("position", self.position),
        ]

    def make_state(self, size: Vector, position: Vector) -> EllipseState:
        return EllipseState(size=size, position=position)

    def build_path(self, state: EllipseState) -> BezierPath:
        return ellipse_path(
            size=state.size.size_value,
            center=state.position.point_value,
            direction=self.direction,
        )
