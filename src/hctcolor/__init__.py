"""Public entrypoint for the hctcolor theming engine.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``hctcolor`` instead of individual
submodules.
"""

from .hct import Cam16, Hct, ViewingConditions
from .palettes import CorePalette, TonalPalette
from .dynamiccolor import DynamicColor, DynamicScheme, Variant
from .dynamiccolor import material_dynamic_colors
from .quantize import QuantizerResult, quantize_celebi
from .score import ScoreOptions, ranked_suggestions
from .api import resolve_scheme, scheme_from_argb, source_color_from_pixels
from .export import EXPORT_FORMAT_OPTIONS, ExportFormat, export_scheme

__all__ = [
    "Cam16",
    "Hct",
    "ViewingConditions",
    "TonalPalette",
    "CorePalette",
    "DynamicColor",
    "DynamicScheme",
    "Variant",
    "material_dynamic_colors",
    "QuantizerResult",
    "quantize_celebi",
    "ScoreOptions",
    "ranked_suggestions",
    "scheme_from_argb",
    "resolve_scheme",
    "source_color_from_pixels",
    "ExportFormat",
    "EXPORT_FORMAT_OPTIONS",
    "export_scheme",
]
