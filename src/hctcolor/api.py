from __future__ import annotations

"""High-level public API for building themes.

This module ties the engine together: :func:`scheme_from_argb` turns a seed
color into a :class:`DynamicScheme`, :func:`resolve_scheme` evaluates every
role of a scheme, and :func:`source_color_from_pixels` picks a seed color
from image pixels.
"""

import logging
from typing import Callable, Dict, Sequence

from .dynamiccolor import DynamicScheme, Variant
from .dynamiccolor.material_dynamic_colors import all_colors
from .hct import Hct
from .quantize import quantize_celebi
from .score import ScoreOptions, ranked_suggestions
from .scheme import (
    scheme_content,
    scheme_expressive,
    scheme_fidelity,
    scheme_fruit_salad,
    scheme_monochrome,
    scheme_neutral,
    scheme_rainbow,
    scheme_tonal_spot,
    scheme_vibrant,
)

logger = logging.getLogger(__name__)

IMAGE_MAX_COLORS = 128

_SCHEME_BUILDERS: Dict[Variant, Callable[..., DynamicScheme]] = {
    Variant.MONOCHROME: scheme_monochrome,
    Variant.NEUTRAL: scheme_neutral,
    Variant.TONAL_SPOT: scheme_tonal_spot,
    Variant.VIBRANT: scheme_vibrant,
    Variant.EXPRESSIVE: scheme_expressive,
    Variant.FIDELITY: scheme_fidelity,
    Variant.CONTENT: scheme_content,
    Variant.RAINBOW: scheme_rainbow,
    Variant.FRUIT_SALAD: scheme_fruit_salad,
}


def scheme_from_argb(
    argb: int,
    variant: Variant | str = Variant.TONAL_SPOT,
    is_dark: bool = False,
    contrast_level: float = 0.0,
) -> DynamicScheme:
    """Build a dynamic scheme from a seed color.

    Parameters
    ----------
    argb:
        Seed color as packed ARGB.
    variant:
        Scheme variant, either a :class:`Variant` or its name
        (``"tonal_spot"``, ``"fruit-salad"``, ...).
    is_dark:
        Whether to build the dark theme.
    contrast_level:
        -1.0 (reduced) to 1.0 (highest); 0.0 is the default contrast.

    Returns
    -------
    DynamicScheme
        Scheme whose roles can be resolved with :func:`resolve_scheme`.
    """
    resolved = variant if isinstance(variant, Variant) else Variant.from_name(variant)
    return _SCHEME_BUILDERS[resolved](Hct.from_argb(argb), is_dark, contrast_level)


def resolve_scheme(scheme: DynamicScheme) -> Dict[str, int]:
    """Map every role name of ``scheme`` to its ARGB color.

    Background roles come first in the result, followed by the accent and
    fixed roles.
    """
    return {color.name: color.get_argb(scheme) for color in all_colors()}


def source_color_from_pixels(
    pixels: Sequence[int],
    options: ScoreOptions = ScoreOptions(),
) -> int:
    """Pick the best theme seed color from image pixels.

    The pixels are quantized to at most 128 colors, ranked, and the top
    suggestion is returned. Without usable pixels the fallback color of
    ``options`` is returned.
    """
    result = quantize_celebi(pixels, IMAGE_MAX_COLORS)
    suggestions = ranked_suggestions(result.color_to_count, options)
    logger.debug("source color from %d pixels: %d suggestions", len(pixels), len(suggestions))
    return suggestions[0]


__all__ = ["scheme_from_argb", "resolve_scheme", "source_color_from_pixels"]
