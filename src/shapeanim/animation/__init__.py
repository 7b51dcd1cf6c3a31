"""Path animations built from shapes, for the rendering backend."""

from .config import AnimationConfig
from .context import AnimationContext
from .builder import (
    LINEAR,
    STEP,
    PathAnimation,
    PathKeyframe,
    TimingFunction,
    build_path_animation,
    path_animation_from_keyframes,
)

__all__ = [
    "AnimationConfig",
    "AnimationContext",
    "LINEAR",
    "STEP",
    "PathAnimation",
    "PathKeyframe",
    "TimingFunction",
    "build_path_animation",
    "path_animation_from_keyframes",
]
