"""shapeanim - keyframe combination and path generation for vector shapes.

Shapes in a vector animation keyframe each property (size, position, corner
radius, ...) independently. A renderer animating a path needs one timeline.
This package fuses the property tracks into one track of shape states when
their timing allows it, falls back to treating secondary properties as static
when it doesn't, and turns each state into a closed bezier path.

Key concepts:
- KeyframeGroup: the track of one property
- combined_if_possible / exactly_one_keyframe: fusion and fallback
- AnimatableShape: Rectangle, Ellipse
- build_path_animation: timed paths for the renderer
"""

__version__ = "0.1.0"

from .core import (
    AmbiguousTrackError,
    PathDirection,
    ShapeAnimError,
    TimeRemappingError,
    Vector,
    Vector1D,
)
from .keyframes import (
    ControlPoint,
    Keyframe,
    KeyframeGroup,
    combined_if_possible,
    exactly_one_keyframe,
)
from .shapes import (
    AnimatableShape,
    Ellipse,
    EllipseState,
    Rectangle,
    RectangleState,
    RoundedCorners,
)
from .geometry import BezierPath, CurveVertex, Path
from .animation import (
    AnimationConfig,
    AnimationContext,
    PathAnimation,
    build_path_animation,
)

__all__ = [
    "AmbiguousTrackError",
    "PathDirection",
    "ShapeAnimError",
    "TimeRemappingError",
    "Vector",
    "Vector1D",
    "ControlPoint",
    "Keyframe",
    "KeyframeGroup",
    "combined_if_possible",
    "exactly_one_keyframe",
    "AnimatableShape",
    "Ellipse",
    "EllipseState",
    "Rectangle",
    "RectangleState",
    "RoundedCorners",
    "BezierPath",
    "CurveVertex",
    "Path",
    "AnimationConfig",
    "AnimationContext",
    "PathAnimation",
    "build_path_animation",
]
