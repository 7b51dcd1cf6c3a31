"""Timing context of the layer being animated."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnimationContext:
    """Frame range an animation is laid out on.

    Keyframe times are frame numbers; renderers want progress in [0, 1]
    across the layer's frame range.
    """
    start_frame: float
    end_frame: float
    framerate: float = 30.0

    def __post_init__(self):
        if self.end_frame <= self.start_frame:
            raise ValueError(
                f"end_frame ({self.end_frame}) must be after start_frame ({self.start_frame})"
            )
        if self.framerate <= 0:
            raise ValueError(f"framerate must be positive, got {self.framerate}")

    @property
    def duration(self) -> float:
        """Length of the frame range in seconds."""
        return (self.end_frame - self.start_frame) / self.framerate

    def progress_time(self, frame: float) -> float:
        """Normalized position of a frame within the range (not clamped)."""
        return (frame - self.start_frame) / (self.end_frame - self.start_frame)
