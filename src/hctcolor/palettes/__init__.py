"""Tonal palettes and the core palette set of a theme."""

from .core_palette import CorePalette
from .tonal_palette import KeyColor, TonalPalette

__all__ = ["TonalPalette", "KeyColor", "CorePalette"]
