"""Animatable shape kinds sharing one keyframe resolver."""

from .base import AnimatableShape
from .modifiers import RoundedCorners
from .rectangle import Rectangle, RectangleState
from .ellipse import Ellipse, EllipseState

__all__ = [
    "AnimatableShape",
    "RoundedCorners",
    "Rectangle",
    "RectangleState",
    "Ellipse",
    "EllipseState",
]
