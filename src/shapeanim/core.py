"""Core value types and errors for shapeanim.

Every animatable property is a track of one of two value types:
- Vector1D: a single scalar (corner radius, roundness, ...)
- Vector: an N-component tuple (size, position, anchor, ...)

Both are frozen so tracks, states and paths can be shared freely between
threads.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple
import numpy as np


class PathDirection(Enum):
    """Vertex ordering of a closed path."""
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"


@dataclass(frozen=True)
class Vector1D:
    """A single animatable scalar."""
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    @property
    def float_value(self) -> float:
        return self.value


@dataclass(frozen=True)
class Vector:
    """An immutable N-component float vector (N is 2 or 3 in practice)."""
    components: Tuple[float, ...]

    def __post_init__(self):
        object.__setattr__(
            self, "components", tuple(float(c) for c in self.components)
        )

    @classmethod
    def of(cls, *components: float) -> "Vector":
        return cls(components)

    def _component(self, index: int) -> float:
        if index < len(self.components):
            return self.components[index]
        return 0.0

    @property
    def x(self) -> float:
        return self._component(0)

    @property
    def y(self) -> float:
        return self._component(1)

    @property
    def z(self) -> float:
        return self._component(2)

    @property
    def point_value(self) -> Tuple[float, float]:
        """The (x, y) pair used when this vector is a position."""
        return (self.x, self.y)

    @property
    def size_value(self) -> Tuple[float, float]:
        """The (width, height) pair used when this vector is a size."""
        return (self.x, self.y)

    def to_numpy(self) -> np.ndarray:
        return np.array(self.components, dtype=np.float64)

    def __len__(self) -> int:
        return len(self.components)


class ShapeAnimError(Exception):
    """Base class for errors raised while building shape animations."""


class TimeRemappingError(ShapeAnimError):
    """A track's timing cannot be honoured by the combined animation."""


class AmbiguousTrackError(TimeRemappingError):
    """A multi-keyframe track had to be reduced to a single value.

    Raised when keyframe fusion failed for a shape and one of its secondary
    properties is animated, so there is no single value that represents it.
    """

    def __init__(self, description: str, keyframe_count: int):
        self.description = description
        self.keyframe_count = keyframe_count
        super().__init__(
            f"Cannot animate {keyframe_count} keyframes for {description} "
            f"independently of the shape's other properties; "
            f"{description} must either share their keyframe timing or be static"
        )
