"""Reducing a track to the one value it holds."""

from typing import TypeVar

from ..core import AmbiguousTrackError
from .keyframe import KeyframeGroup

T = TypeVar("T")


def exactly_one_keyframe(group: KeyframeGroup[T], description: str) -> T:
    """Return the value of a static track.

    Used when fusion failed and a property has to be treated as constant.
    A track with more than one keyframe has no single representative value,
    so this raises instead of picking one.

    Args:
        group: The track to reduce
        description: Human-readable role of the track, e.g. "rectangle position"

    Raises:
        AmbiguousTrackError: If the track has more than one keyframe
    """
    if len(group) != 1:
        raise AmbiguousTrackError(description, len(group))
    return group[0].value
