"""Keyframes and keyframe tracks.

A KeyframeGroup is the track of a single animatable property: an ordered,
non-empty sequence of Keyframes. A group with one keyframe is static; a
group with two or more is interpolated piecewise between adjacent pairs.

Timing parameters of a keyframe (time, hold flag and easing tangents) are
what the combiner compares when it decides whether several tracks can be
fused into one.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

from ..core import Vector

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class ControlPoint:
    """A timing tangent (cubic-bezier easing handle) in normalized time/progress."""
    x: float
    y: float


@dataclass(frozen=True)
class Keyframe(Generic[T]):
    """A value at a point in time plus how to interpolate away from it."""
    value: T
    time: float = 0.0                           # Frame number
    is_hold: bool = False                       # Jump to next value instead of interpolating
    in_tangent: Optional[ControlPoint] = None   # Easing into this keyframe
    out_tangent: Optional[ControlPoint] = None  # Easing out of this keyframe

    # Spatial (motion path) tangents, only meaningful for vector values
    spatial_in_tangent: Optional[Vector] = None
    spatial_out_tangent: Optional[Vector] = None

    def has_same_timing_parameters(self, other: "Keyframe[Any]") -> bool:
        return (
            self.time == other.time
            and self.is_hold == other.is_hold
            and self.in_tangent == other.in_tangent
            and self.out_tangent == other.out_tangent
        )

    def with_value(self, value: U) -> "Keyframe[U]":
        """Same timing parameters, different value."""
        return replace(self, value=value)


class KeyframeGroup(Generic[T]):
    """An ordered, non-empty track of keyframes for one property.

    Usage:
        size = KeyframeGroup([
            Keyframe(Vector.of(100, 100), time=0),
            Keyframe(Vector.of(200, 200), time=30),
        ])
        radius = KeyframeGroup.static(Vector1D(10))
    """

    __slots__ = ("_keyframes",)

    def __init__(self, keyframes: Sequence[Keyframe[T]]):
        keyframes = tuple(keyframes)
        if not keyframes:
            raise ValueError("A keyframe group needs at least one keyframe")
        for previous, current in zip(keyframes, keyframes[1:]):
            if current.time < previous.time:
                raise ValueError(
                    f"Keyframe times must be non-decreasing "
                    f"(got {current.time} after {previous.time})"
                )
        self._keyframes: Tuple[Keyframe[T], ...] = keyframes

    @classmethod
    def static(cls, value: T) -> "KeyframeGroup[T]":
        """A constant track holding a single value for all time."""
        return cls([Keyframe(value=value)])

    @property
    def keyframes(self) -> Tuple[Keyframe[T], ...]:
        return self._keyframes

    @property
    def times(self) -> List[float]:
        return [k.time for k in self._keyframes]

    @property
    def values(self) -> List[T]:
        return [k.value for k in self._keyframes]

    @property
    def is_animated(self) -> bool:
        return len(self._keyframes) > 1

    def has_same_timing_parameters(self, other: "KeyframeGroup[Any]") -> bool:
        """Whether both tracks have the same keyframe count and per-index timing."""
        if len(self) != len(other):
            return False
        return all(
            a.has_same_timing_parameters(b)
            for a, b in zip(self._keyframes, other.keyframes)
        )

    def map(self, transform: Callable[[T], U]) -> "KeyframeGroup[U]":
        """Apply transform to every value, keeping each keyframe's timing."""
        return KeyframeGroup([k.with_value(transform(k.value)) for k in self._keyframes])

    def __len__(self) -> int:
        return len(self._keyframes)

    def __iter__(self) -> Iterator[Keyframe[T]]:
        return iter(self._keyframes)

    def __getitem__(self, index: int) -> Keyframe[T]:
        return self._keyframes[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyframeGroup):
            return NotImplemented
        return self._keyframes == other.keyframes

    def __hash__(self) -> int:
        return hash(self._keyframes)

    def __repr__(self) -> str:
        return f"KeyframeGroup({list(self._keyframes)!r})"
