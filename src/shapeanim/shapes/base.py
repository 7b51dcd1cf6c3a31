"""The animatable shape interface and the shape state resolver.

Every shape kind exposes its properties as named keyframe tracks and knows
how to build one state from one value per track, and one path from one
state. Resolving those tracks into a single timeline is written once here:

1. Try to fuse all tracks (same keyframe count and timing everywhere).
2. Otherwise the first track drives timing and every other track must be
   static. An animated secondary track can't be honoured and is an error.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Optional, Tuple
import logging

from ..core import PathDirection
from ..geometry import BezierPath
from ..keyframes import KeyframeGroup, combined_if_possible, exactly_one_keyframe
from .modifiers import RoundedCorners

logger = logging.getLogger(__name__)

NamedTrack = Tuple[str, KeyframeGroup[Any]]


class AnimatableShape(ABC):
    """A shape kind whose path is driven by independently keyframed properties."""

    kind: ClassVar[str] = "shape"

    direction: PathDirection

    @abstractmethod
    def tracks(self, rounded_corners: Optional[RoundedCorners] = None) -> List[NamedTrack]:
        """Named property tracks in make_state argument order.

        The first track is the timing authority when fusion fails.
        """

    @abstractmethod
    def make_state(self, *values: Any) -> Any:
        """Build one shape state from one value per track."""

    @abstractmethod
    def build_path(self, state: Any) -> BezierPath:
        """Build the closed contour for one shape state."""

    def combined_keyframes(
        self,
        rounded_corners: Optional[RoundedCorners] = None,
    ) -> KeyframeGroup[Any]:
        """Resolve this shape's tracks into one track of shape states.

        Raises:
            AmbiguousTrackError: If fusion failed and a secondary track is animated
        """
        named_tracks = self.tracks(rounded_corners)
        combined = combined_if_possible(
            [track for _, track in named_tracks],
            self.make_state,
        )
        if combined is not None:
            return combined

        # Take the timing from the driving property and use a fixed value for
        # every other property.
        (driving_name, driving), *secondary = named_tracks
        fixed_values = [
            exactly_one_keyframe(track, f"{self.kind} {name}")
            for name, track in secondary
        ]
        logger.debug(
            "Resolved %s with %s driving %d keyframes",
            self.kind, driving_name, len(driving),
        )
        return driving.map(lambda value: self.make_state(value, *fixed_values))
