"""Fusing independently keyframed tracks into one track.

A shape's properties are keyframed separately, but the renderer animates a
single path. When every track has exactly the same time structure the
tracks can be fused without losing any easing: the i-th combined keyframe
takes its timing from the i-th keyframe of every input, and its value from
make_combined_result applied to the i-th value of every input.

Fusion is all-or-nothing. If any track differs in keyframe count or in the
timing of any keyframe the result is None and the caller falls back to
treating secondary properties as static.
"""

import logging
from typing import Any, Callable, Optional, Sequence, TypeVar

from .keyframe import KeyframeGroup

T = TypeVar("T")

logger = logging.getLogger(__name__)


def combined_if_possible(
    groups: Sequence[KeyframeGroup[Any]],
    make_combined_result: Callable[..., T],
) -> Optional[KeyframeGroup[T]]:
    """Combine tracks keyframe-by-keyframe, or return None.

    Args:
        groups: Tracks to fuse, in the argument order of make_combined_result
        make_combined_result: Builds one combined value from one value per track

    Returns:
        The fused track, or None when the tracks don't share timing
    """
    if not groups:
        return None

    base = groups[0]
    for index, group in enumerate(groups[1:], start=1):
        if not group.has_same_timing_parameters(base):
            logger.debug(
                "Tracks not combinable: track %d has %d keyframes at %s, "
                "track 0 has %d at %s",
                index, len(group), group.times, len(base), base.times,
            )
            return None

    return KeyframeGroup([
        keyframe.with_value(
            make_combined_result(*(group[i].value for group in groups))
        )
        for i, keyframe in enumerate(base)
    ])
