"""Sibling-layer modifiers that override a shape property."""

from dataclasses import dataclass
from typing import Optional

from ..core import Vector1D
from ..keyframes import KeyframeGroup


@dataclass(frozen=True)
class RoundedCorners:
    """A "round corners" effect applied to the shapes of a group.

    Its radius track replaces the corner radius of every shape that has one.
    """
    radius: KeyframeGroup[Vector1D]
    name: Optional[str] = None
