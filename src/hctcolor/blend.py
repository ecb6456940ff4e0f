from __future__ import annotations

"""Color blending in HCT and CAM16-UCS.

Used to pull arbitrary design colors toward a theme's key color, so that
fixed semantic colors (warning, success, brand) sit well next to it.
"""

from util.color import lstar_from_argb
from util.math_utils import difference_degrees, rotation_direction, sanitize_degrees_double

from .hct import Cam16, Hct


def harmonize(design_color: int, source_color: int) -> int:
    """Rotate ``design_color``'s hue toward ``source_color``.

    The rotation is half the hue distance, capped at 15 degrees. Chroma and
    tone of the design color are kept (subject to gamut mapping).
    """
    from_hct = Hct.from_argb(design_color)
    to_hct = Hct.from_argb(source_color)
    difference = difference_degrees(from_hct.hue, to_hct.hue)
    rotation_degrees = min(difference * 0.5, 15.0)
    output_hue = sanitize_degrees_double(
        from_hct.hue + rotation_degrees * rotation_direction(from_hct.hue, to_hct.hue)
    )
    return Hct.from_hct(output_hue, from_hct.chroma, from_hct.tone).to_argb()


def hct_hue(from_color: int, to_color: int, amount: float) -> int:
    """Blend the hue of ``from_color`` toward ``to_color``.

    Parameters
    ----------
    from_color, to_color:
        ARGB colors.
    amount:
        0.0 keeps ``from_color``'s hue, 1.0 takes ``to_color``'s.

    Returns
    -------
    int
        ``from_color`` with the blended hue; chroma and tone are kept.
    """
    ucs = cam16_ucs(from_color, to_color, amount)
    ucs_cam = Cam16.from_argb(ucs)
    from_cam = Cam16.from_argb(from_color)
    blended = Hct.from_hct(ucs_cam.hue, from_cam.chroma, lstar_from_argb(from_color))
    return blended.to_argb()


def cam16_ucs(from_color: int, to_color: int, amount: float) -> int:
    """Linear interpolation of two colors in CAM16-UCS."""
    from_cam = Cam16.from_argb(from_color)
    to_cam = Cam16.from_argb(to_color)
    jstar = from_cam.jstar + (to_cam.jstar - from_cam.jstar) * amount
    astar = from_cam.astar + (to_cam.astar - from_cam.astar) * amount
    bstar = from_cam.bstar + (to_cam.bstar - from_cam.bstar) * amount
    return Cam16.from_ucs(jstar, astar, bstar).to_argb()


__all__ = ["harmonize", "hct_hue", "cam16_ucs"]
