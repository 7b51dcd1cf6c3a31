"""Keyframe tracks and the machinery to fuse or reduce them."""

from .keyframe import ControlPoint, Keyframe, KeyframeGroup
from .combine import combined_if_possible
from .extract import exactly_one_keyframe

__all__ = [
    "ControlPoint",
    "Keyframe",
    "KeyframeGroup",
    "combined_if_possible",
    "exactly_one_keyframe",
]
