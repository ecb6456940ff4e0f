from __future__ import annotations

"""L*a*b* point space used by the k-means refinement."""

from typing import Iterable

import numpy as np

from util.color import argb_from_lab, lab_from_argb


def lab_points(argbs: Iterable[int]) -> np.ndarray:
    """L*a*b* coordinates of ``argbs`` as a float64 array of shape (N, 3)."""
    points = [lab_from_argb(argb) for argb in argbs]
    if not points:
        return np.zeros((0, 3), dtype=np.float64)
    return np.asarray(points, dtype=np.float64)


def argb_from_point(point: np.ndarray) -> int:
    return argb_from_lab(float(point[0]), float(point[1]), float(point[2]))


__all__ = ["lab_points", "argb_from_point"]
