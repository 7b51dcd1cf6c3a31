"""Path animations: resolved shape states laid out as timed paths.

This is what the rendering backend consumes. For each resolved keyframe it
gets the path to draw and when to draw it; for each pair of adjacent
keyframes it gets how to interpolate between them.

Pipeline:
    shape tracks -> combined_keyframes() -> build_path() per state
                 -> duplicated(path_multiplier) -> key times + timing
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import logging

from ..geometry import Path
from ..keyframes import ControlPoint, Keyframe, KeyframeGroup
from ..shapes import AnimatableShape, RoundedCorners
from .config import AnimationConfig
from .context import AnimationContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimingFunction:
    """Cubic-bezier easing between two keyframes, (0, 0) to (1, 1).

    A hold segment doesn't interpolate: the left value is shown until the
    next keyframe's time, then jumps. Its control points are unused.
    """
    c1x: float = 0.0
    c1y: float = 0.0
    c2x: float = 1.0
    c2y: float = 1.0
    hold: bool = False

    @property
    def is_linear(self) -> bool:
        return self == LINEAR

    @classmethod
    def between(
        cls,
        out_tangent: Optional[ControlPoint],
        in_tangent: Optional[ControlPoint],
        hold: bool = False,
    ) -> "TimingFunction":
        """Easing from one keyframe's out tangent to the next one's in tangent."""
        if hold:
            return STEP
        c1 = out_tangent or ControlPoint(0.0, 0.0)
        c2 = in_tangent or ControlPoint(1.0, 1.0)
        return cls(c1.x, c1.y, c2.x, c2.y)


LINEAR = TimingFunction()
STEP = TimingFunction(hold=True)


@dataclass(frozen=True)
class PathKeyframe:
    """The path to draw from `time` until the next keyframe."""
    time: float
    path: Path
    is_hold: bool = False


@dataclass
class PathAnimation:
    """A path property animation ready for the renderer."""
    keyframes: List[PathKeyframe]
    key_times: List[float] = field(default_factory=list)             # Normalized progress
    timing_functions: List[TimingFunction] = field(default_factory=list)  # One per adjacent pair, STEP after a hold
    calculation_mode: str = "linear"                                 # "linear" or "discrete"

    @property
    def is_static(self) -> bool:
        return len(self.keyframes) == 1

    @property
    def paths(self) -> List[Path]:
        return [k.path for k in self.keyframes]

    @property
    def times(self) -> List[float]:
        return [k.time for k in self.keyframes]


def _strictly_ordered(keyframes: Sequence[Keyframe]) -> List[Keyframe]:
    """Drop keyframes that share a time with the next one (the later one wins)."""
    ordered: List[Keyframe] = []
    for keyframe in keyframes:
        if ordered and ordered[-1].time == keyframe.time:
            ordered[-1] = keyframe
        else:
            ordered.append(keyframe)
    return ordered


def path_animation_from_keyframes(
    keyframes: KeyframeGroup[Path],
    context: AnimationContext,
) -> PathAnimation:
    """Lay out a track of paths on the context's timeline."""
    ordered = _strictly_ordered(keyframes.keyframes)
    if len(ordered) != len(keyframes):
        logger.debug(
            "Dropped %d coincident keyframes", len(keyframes) - len(ordered)
        )

    path_keyframes = [
        PathKeyframe(time=k.time, path=k.value, is_hold=k.is_hold)
        for k in ordered
    ]
    timing_functions = [
        TimingFunction.between(current.out_tangent, following.in_tangent, current.is_hold)
        for current, following in zip(ordered, ordered[1:])
    ]

    holds = [k.is_hold for k in ordered[:-1]]
    calculation_mode = "discrete" if holds and all(holds) else "linear"

    return PathAnimation(
        keyframes=path_keyframes,
        key_times=[context.progress_time(k.time) for k in ordered],
        timing_functions=timing_functions,
        calculation_mode=calculation_mode,
    )


def build_path_animation(
    shape: AnimatableShape,
    context: AnimationContext,
    config: Optional[AnimationConfig] = None,
    rounded_corners: Optional[RoundedCorners] = None,
) -> PathAnimation:
    """Build the path animation for one shape.

    Args:
        shape: The shape whose tracks are resolved
        context: Frame range of the owning layer
        config: Build configuration (path multiplier)
        rounded_corners: Optional sibling modifier overriding the corner radius

    Raises:
        AmbiguousTrackError: If the shape's tracks can't be resolved to one timeline
    """
    config = config or AnimationConfig.default()

    states = shape.combined_keyframes(rounded_corners)
    paths = states.map(
        lambda state: shape.build_path(state).to_path().duplicated(config.path_multiplier)
    )

    animation = path_animation_from_keyframes(paths, context)
    logger.debug(
        "Built %s path animation: %d keyframes, mode=%s, multiplier=%d",
        shape.kind, len(animation.keyframes), animation.calculation_mode,
        config.path_multiplier,
    )
    return animation
