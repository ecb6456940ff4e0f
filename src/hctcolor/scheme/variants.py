from __future__ import annotations

"""Scheme constructors, one per :class:`Variant`.

Every constructor takes the source color (an :class:`Hct` or an ARGB int),
the dark-mode flag and a contrast level, and returns a
:class:`DynamicScheme` whose five palettes follow the variant's recipe.
"""

from typing import Union

from util.math_utils import sanitize_degrees_double

from ..dislike import fix_if_disliked
from ..dynamiccolor import DynamicScheme, Variant
from ..hct import Hct
from ..palettes import TonalPalette
from ..temperature import TemperatureCache

SourceColor = Union[Hct, int]

# Hue ranges and per-range rotations of the rotated secondary/tertiary hues.
_VIBRANT_HUES = (0.0, 41.0, 61.0, 101.0, 131.0, 181.0, 251.0, 301.0, 360.0)
_VIBRANT_SECONDARY_ROTATIONS = (18.0, 15.0, 10.0, 12.0, 15.0, 18.0, 15.0, 12.0, 12.0)
_VIBRANT_TERTIARY_ROTATIONS = (35.0, 30.0, 20.0, 25.0, 30.0, 35.0, 30.0, 25.0, 25.0)

_EXPRESSIVE_HUES = (0.0, 21.0, 51.0, 121.0, 151.0, 191.0, 271.0, 321.0, 360.0)
_EXPRESSIVE_SECONDARY_ROTATIONS = (45.0, 95.0, 45.0, 20.0, 45.0, 90.0, 45.0, 45.0, 45.0)
_EXPRESSIVE_TERTIARY_ROTATIONS = (120.0, 120.0, 20.0, 45.0, 20.0, 15.0, 20.0, 120.0, 120.0)


def _as_hct(source: SourceColor) -> Hct:
    return source if isinstance(source, Hct) else Hct.from_argb(source)


def _palette(hue: float, chroma: float) -> TonalPalette:
    return TonalPalette.from_hue_and_chroma(hue, chroma)


def scheme_tonal_spot(
    source: SourceColor, is_dark: bool, contrast_level: float = 0.0
) -> DynamicScheme:
    """Calm theme: a muted primary with a hue-shifted tertiary (the default)."""
    hct = _as_hct(source)
    return DynamicScheme(
        source_color_hct=hct,
        variant=Variant.TONAL_SPOT,
        is_dark=is_dark,
        contrast_level=contrast_level,
        primary_palette=_palette(hct.hue, 36.0),
        secondary_palette=_palette(hct.hue, 16.0),
        tertiary_palette=_palette(sanitize_degrees_double(hct.hue + 60.0), 24.0),
        neutral_palette=_palette(hct.hue, 6.0),
        neutral_variant_palette=_palette(hct.hue, 8.0),
    )


def scheme_vibrant(
    source: SourceColor, is_dark: bool, contrast_level: float = 0.0
) -> DynamicScheme:
    """Loud theme: the primary palette runs at maximum chroma."""
    hct = _as_hct(source)
    return DynamicScheme(
        source_color_hct=hct,
        variant=Variant.VIBRANT,
        is_dark=is_dark,
        contrast_level=contrast_level,
        primary_palette=_palette(hct.hue, 200.0),
        secondary_palette=_palette(
            DynamicScheme.get_rotated_hue(hct, _VIBRANT_HUES, _VIBRANT_SECONDARY_ROTATIONS),
            24.0,
        ),
        tertiary_palette=_palette(
            DynamicScheme.get_rotated_hue(hct, _VIBRANT_HUES, _VIBRANT_TERTIARY_ROTATIONS),
            32.0,
        ),
        neutral_palette=_palette(hct.hue, 10.0),
        neutral_variant_palette=_palette(hct.hue, 12.0),
    )


def scheme_expressive(
    source: SourceColor, is_dark: bool, contrast_level: float = 0.0
) -> DynamicScheme:
    """Playful theme: the source hue is deliberately absent from the primary."""
    hct = _as_hct(source)
    return DynamicScheme(
        source_color_hct=hct,
        variant=Variant.EXPRESSIVE,
        is_dark=is_dark,
        contrast_level=contrast_level,
        primary_palette=_palette(sanitize_degrees_double(hct.hue + 240.0), 40.0),
        secondary_palette=_palette(
            DynamicScheme.get_rotated_hue(
                hct, _EXPRESSIVE_HUES, _EXPRESSIVE_SECONDARY_ROTATIONS
            ),
            24.0,
        ),
        tertiary_palette=_palette(
            DynamicScheme.get_rotated_hue(hct, _EXPRESSIVE_HUES, _EXPRESSIVE_TERTIARY_ROTATIONS),
            32.0,
        ),
        neutral_palette=_palette(sanitize_degrees_double(hct.hue + 15.0), 8.0),
        neutral_variant_palette=_palette(sanitize_degrees_double(hct.hue + 15.0), 12.0),
    )


def scheme_fruit_salad(
    source: SourceColor, is_dark: bool, contrast_level: float = 0.0
) -> DynamicScheme:
    """Playful theme: the source hue appears only in the tertiary palette."""
    hct = _as_hct(source)
    rotated = sanitize_degrees_double(hct.hue - 50.0)
    return DynamicScheme(
        source_color_hct=hct,
        variant=Variant.FRUIT_SALAD,
        is_dark=is_dark,
        contrast_level=contrast_level,
        primary_palette=_palette(rotated, 48.0),
        secondary_palette=_palette(rotated, 36.0),
        tertiary_palette=_palette(hct.hue, 36.0),
        neutral_palette=_palette(hct.hue, 10.0),
        neutral_variant_palette=_palette(hct.hue, 16.0),
    )


def scheme_neutral(
    source: SourceColor, is_dark: bool, contrast_level: float = 0.0
) -> DynamicScheme:
    """Nearly grayscale theme with a hint of the source hue."""
    hct = _as_hct(source)
    return DynamicScheme(
        source_color_hct=hct,
        variant=Variant.NEUTRAL,
        is_dark=is_dark,
        contrast_level=contrast_level,
        primary_palette=_palette(hct.hue, 12.0),
        secondary_palette=_palette(hct.hue, 8.0),
        tertiary_palette=_palette(hct.hue, 16.0),
        neutral_palette=_palette(hct.hue, 2.0),
        neutral_variant_palette=_palette(hct.hue, 2.0),
    )


def scheme_rainbow(
    source: SourceColor, is_dark: bool, contrast_level: float = 0.0
) -> DynamicScheme:
    """Playful theme on pure grayscale surfaces."""
    hct = _as_hct(source)
    return DynamicScheme(
        source_color_hct=hct,
        variant=Variant.RAINBOW,
        is_dark=is_dark,
        contrast_level=contrast_level,
        primary_palette=_palette(hct.hue, 48.0),
        secondary_palette=_palette(hct.hue, 16.0),
        tertiary_palette=_palette(sanitize_degrees_double(hct.hue + 60.0), 24.0),
        neutral_palette=_palette(hct.hue, 0.0),
        neutral_variant_palette=_palette(hct.hue, 0.0),
    )


def scheme_monochrome(
    source: SourceColor, is_dark: bool, contrast_level: float = 0.0
) -> DynamicScheme:
    """Grayscale theme; only the error palette has chroma."""
    hct = _as_hct(source)
    return DynamicScheme(
        source_color_hct=hct,
        variant=Variant.MONOCHROME,
        is_dark=is_dark,
        contrast_level=contrast_level,
        primary_palette=_palette(hct.hue, 0.0),
        secondary_palette=_palette(hct.hue, 0.0),
        tertiary_palette=_palette(hct.hue, 0.0),
        neutral_palette=_palette(hct.hue, 0.0),
        neutral_variant_palette=_palette(hct.hue, 0.0),
    )


def _source_faithful(
    hct: Hct, variant: Variant, is_dark: bool, contrast_level: float, tertiary: Hct
) -> DynamicScheme:
    return DynamicScheme(
        source_color_hct=hct,
        variant=variant,
        is_dark=is_dark,
        contrast_level=contrast_level,
        primary_palette=_palette(hct.hue, hct.chroma),
        secondary_palette=_palette(hct.hue, max(hct.chroma - 32.0, hct.chroma * 0.5)),
        tertiary_palette=TonalPalette.from_hct(fix_if_disliked(tertiary)),
        neutral_palette=_palette(hct.hue, hct.chroma / 8.0),
        neutral_variant_palette=_palette(hct.hue, hct.chroma / 8.0 + 4.0),
    )


def scheme_fidelity(
    source: SourceColor, is_dark: bool, contrast_level: float = 0.0
) -> DynamicScheme:
    """Theme whose primary container matches the source color.

    The tertiary palette is built on the source's temperature complement.
    """
    hct = _as_hct(source)
    tertiary = TemperatureCache(hct).complement
    return _source_faithful(hct, Variant.FIDELITY, is_dark, contrast_level, tertiary)


def scheme_content(
    source: SourceColor, is_dark: bool, contrast_level: float = 0.0
) -> DynamicScheme:
    """Like :func:`scheme_fidelity`, with an analogous tertiary.

    Suited to colors taken from content such as images.
    """
    hct = _as_hct(source)
    tertiary = TemperatureCache(hct).analogous_colors(3, 6)[2]
    return _source_faithful(hct, Variant.CONTENT, is_dark, contrast_level, tertiary)


__all__ = [
    "scheme_tonal_spot",
    "scheme_vibrant",
    "scheme_expressive",
    "scheme_fruit_salad",
    "scheme_neutral",
    "scheme_rainbow",
    "scheme_monochrome",
    "scheme_fidelity",
    "scheme_content",
]
