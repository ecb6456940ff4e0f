from __future__ import annotations

"""Values that follow the user's contrast level."""

from dataclasses import dataclass

from util.math_utils import lerp


@dataclass(frozen=True)
class ContrastCurve:
    """A value defined at contrast levels -1.0, 0.0, 0.5 and 1.0.

    Usually the minimum contrast ratio of a dynamic color against its
    background. Levels in between interpolate linearly; levels outside
    [-1, 1] saturate to the end values.

    Attributes
    ----------
    low, normal, medium, high:
        Values at contrast levels -1.0, 0.0, 0.5 and 1.0.
    """

    low: float
    normal: float
    medium: float
    high: float

    def get(self, contrast_level: float) -> float:
        """Value at ``contrast_level``; for ratios, a number in [1, 21]."""
        if contrast_level <= -1.0:
            return self.low
        if contrast_level < 0.0:
            return lerp(self.low, self.normal, (contrast_level + 1.0) / 1.0)
        if contrast_level < 0.5:
            return lerp(self.normal, self.medium, contrast_level / 0.5)
        if contrast_level < 1.0:
            return lerp(self.medium, self.high, (contrast_level - 0.5) / 0.5)
        return self.high


__all__ = ["ContrastCurve"]
