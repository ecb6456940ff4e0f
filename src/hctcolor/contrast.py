from __future__ import annotations

"""Contrast ratio utilities based on the WCAG luminance formula.

Tones are CIE L* values. Contrast ratios range from 1 (no contrast) to 21
(black on white). :func:`lighter` and :func:`darker` return ``-1.0`` when
the requested ratio cannot be reached from the given tone; callers branch on
that value. The ``*_unsafe`` variants saturate to 100 or 0 instead.
"""

from util.color import lstar_from_y, y_from_lstar
from util.math_utils import clamp_double

# Ratios are accepted when they fall short of the target by less than this.
CONTRAST_RATIO_EPSILON = 0.04

# L* nudge that keeps a computed tone on the passing side of a ratio after
# the color is gamut-mapped and quantized to 8-bit sRGB.
LUMINANCE_GAMUT_MAP_TOLERANCE = 0.4

UNREACHABLE = -1.0


def ratio_of_ys(y1: float, y2: float) -> float:
    """Contrast ratio of two relative luminances (0-100)."""
    lighter_y = max(y1, y2)
    darker_y = y1 if lighter_y == y2 else y2
    return (lighter_y + 5.0) / (darker_y + 5.0)


def ratio_of_tones(tone_a: float, tone_b: float) -> float:
    """Contrast ratio of two tones; tones are clamped to [0, 100]."""
    tone_a = clamp_double(0.0, 100.0, tone_a)
    tone_b = clamp_double(0.0, 100.0, tone_b)
    return ratio_of_ys(y_from_lstar(tone_a), y_from_lstar(tone_b))


def lighter(tone: float, ratio: float) -> float:
    """Tone >= ``tone`` that reaches ``ratio`` with it, or -1.0 if impossible."""
    if tone < 0.0 or tone > 100.0:
        return UNREACHABLE
    dark_y = y_from_lstar(tone)
    light_y = ratio * (dark_y + 5.0) - 5.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return UNREACHABLE
    return_value = lstar_from_y(light_y) + LUMINANCE_GAMUT_MAP_TOLERANCE
    if return_value < 0 or return_value > 100:
        return UNREACHABLE
    return return_value


def darker(tone: float, ratio: float) -> float:
    """Tone <= ``tone`` that reaches ``ratio`` with it, or -1.0 if impossible."""
    if tone < 0.0 or tone > 100.0:
        return UNREACHABLE
    light_y = y_from_lstar(tone)
    dark_y = (light_y + 5.0) / ratio - 5.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return UNREACHABLE
    return_value = lstar_from_y(dark_y) - LUMINANCE_GAMUT_MAP_TOLERANCE
    if return_value < 0 or return_value > 100:
        return UNREACHABLE
    return return_value


def lighter_unsafe(tone: float, ratio: float) -> float:
    """Like :func:`lighter`, but returns 100 when the ratio is unreachable."""
    lighter_safe = lighter(tone, ratio)
    return 100.0 if lighter_safe < 0.0 else lighter_safe


def darker_unsafe(tone: float, ratio: float) -> float:
    """Like :func:`darker`, but returns 0 when the ratio is unreachable."""
    darker_safe = darker(tone, ratio)
    return 0.0 if darker_safe < 0.0 else darker_safe


__all__ = [
    "CONTRAST_RATIO_EPSILON",
    "LUMINANCE_GAMUT_MAP_TOLERANCE",
    "ratio_of_ys",
    "ratio_of_tones",
    "lighter",
    "darker",
    "lighter_unsafe",
    "darker_unsafe",
]
