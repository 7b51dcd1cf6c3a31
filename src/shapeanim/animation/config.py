"""Build-time configuration for shape path animations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnimationConfig:
    """Configuration for turning resolved shape states into a path animation.

    path_multiplier chains that many identical copies of each path into one
    path. Effects that trim or dash a stroke across repeated sub-paths need
    the copies; everything else uses a single copy.
    """

    path_multiplier: int = 1    # Copies of each path (>= 1)

    def __post_init__(self):
        multiplier = self.path_multiplier
        if isinstance(multiplier, bool) or not isinstance(multiplier, int) or multiplier < 1:
            raise ValueError(
                f"path_multiplier must be a positive integer, got {self.path_multiplier}"
            )

    @classmethod
    def default(cls) -> "AnimationConfig":
        return cls()

    @classmethod
    def for_dashed_stroke(cls, copies: int) -> "AnimationConfig":
        """Preset for dashed/trimmed strokes that need repeated sub-paths."""
        return cls(path_multiplier=copies)
