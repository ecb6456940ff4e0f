"""HCT color space: CAM16 appearance model, viewing conditions and the solver."""

from .cam16 import Cam16
from .hct import Hct
from .solver import solve_to_argb, solve_to_cam
from .viewing_conditions import DEFAULT, ViewingConditions

__all__ = [
    "Cam16",
    "Hct",
    "ViewingConditions",
    "DEFAULT",
    "solve_to_argb",
    "solve_to_cam",
]
