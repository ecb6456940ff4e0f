"""Dynamic color: roles resolved against a scheme with contrast guarantees."""

from . import material_dynamic_colors
from .contrast_curve import ContrastCurve
from .dynamic_color import (
    DynamicColor,
    enable_light_foreground,
    foreground_tone,
    tone_allows_light_foreground,
    tone_prefers_light_foreground,
)
from .dynamic_scheme import DynamicScheme
from .tone_delta_pair import ToneDeltaPair, TonePolarity
from .variant import Variant

__all__ = [
    "ContrastCurve",
    "DynamicColor",
    "DynamicScheme",
    "ToneDeltaPair",
    "TonePolarity",
    "Variant",
    "foreground_tone",
    "enable_light_foreground",
    "tone_prefers_light_foreground",
    "tone_allows_light_foreground",
    "material_dynamic_colors",
]
