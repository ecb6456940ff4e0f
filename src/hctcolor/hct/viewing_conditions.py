from __future__ import annotations

"""Viewing conditions for the CAM16 color appearance model.

A :class:`ViewingConditions` instance bundles the intermediate values that
CAM16 derives from the environment (white point, adapting luminance,
background lightness and surround). They are computed once and reused for
every conversion; the library only ever needs :data:`DEFAULT`, which models
sRGB content viewed in an average surround.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from util.color import WHITE_POINT_D65, y_from_lstar
from util.math_utils import clamp_double, lerp

# Linear sRGB-relative XYZ to CAM16 cone response (shared with cam16.py).
XYZ_TO_CAM16RGB: Tuple[Tuple[float, float, float], ...] = (
    (0.401288, 0.650173, -0.051461),
    (-0.250268, 1.204414, 0.045854),
    (-0.002079, 0.048952, 0.953127),
)


@dataclass(frozen=True)
class ViewingConditions:
    """Immutable bundle of CAM16 environment constants.

    Attributes
    ----------
    n:
        Background relative luminance (Yb / Yw).
    aw:
        Achromatic response of the white point.
    nbb, ncb:
        Brightness and chromatic induction factors.
    c:
        Exponential nonlinearity of the surround.
    nc:
        Chromatic induction factor of the surround.
    rgb_d:
        Per-channel chromatic adaptation factors.
    fl:
        Luminance-level adaptation factor; ``fl_root`` is its fourth root.
    z:
        Base exponential nonlinearity.
    """

    n: float
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    rgb_d: Tuple[float, float, float]
    fl: float
    fl_root: float
    z: float

    @classmethod
    def make(
        cls,
        white_point: Sequence[float] = WHITE_POINT_D65,
        adapting_luminance: float = -1.0,
        background_lstar: float = 50.0,
        surround: float = 2.0,
        discounting_illuminant: bool = False,
    ) -> "ViewingConditions":
        """Create viewing conditions from environment parameters.

        Parameters
        ----------
        white_point:
            XYZ of the reference white, Y = 100.
        adapting_luminance:
            Luminance of the adapting field in lux. A negative value selects
            the default, 200/pi times the Y of L* 50 divided by 100.
        background_lstar:
            L* of the background; clamped to at least 0.1.
        surround:
            0 is dark, 1 is dim, 2 is average.
        discounting_illuminant:
            Whether the eye fully adapts to the illuminant.
        """
        if adapting_luminance < 0.0:
            adapting_luminance = 200.0 / math.pi * y_from_lstar(50.0) / 100.0
        background_lstar = max(0.1, background_lstar)

        m = XYZ_TO_CAM16RGB
        x, y, z = white_point
        r_w = x * m[0][0] + y * m[0][1] + z * m[0][2]
        g_w = x * m[1][0] + y * m[1][1] + z * m[1][2]
        b_w = x * m[2][0] + y * m[2][1] + z * m[2][2]

        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)
        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
        d = clamp_double(0.0, 1.0, d)
        nc = f
        rgb_d = (
            d * (100.0 / r_w) + 1.0 - d,
            d * (100.0 / g_w) + 1.0 - d,
            d * (100.0 / b_w) + 1.0 - d,
        )
        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k * k * k * k
        k4f = 1.0 - k4
        fl = k4 * adapting_luminance + 0.1 * k4f * k4f * math.cbrt(5.0 * adapting_luminance)
        n = y_from_lstar(background_lstar) / white_point[1]
        z_exp = 1.48 + math.sqrt(n)
        nbb = 0.725 / math.pow(n, 0.2)
        ncb = nbb
        rgb_a_factors = (
            math.pow(fl * rgb_d[0] * r_w / 100.0, 0.42),
            math.pow(fl * rgb_d[1] * g_w / 100.0, 0.42),
            math.pow(fl * rgb_d[2] * b_w / 100.0, 0.42),
        )
        rgb_a = tuple(400.0 * f_ / (f_ + 27.13) for f_ in rgb_a_factors)
        aw = (2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb
        return cls(
            n=n,
            aw=aw,
            nbb=nbb,
            ncb=ncb,
            c=c,
            nc=nc,
            rgb_d=rgb_d,
            fl=fl,
            fl_root=math.pow(fl, 0.25),
            z=z_exp,
        )

    @classmethod
    def default_with_background_lstar(cls, lstar: float) -> "ViewingConditions":
        """Default conditions with a custom background lightness."""
        return cls.make(
            WHITE_POINT_D65,
            200.0 / math.pi * y_from_lstar(50.0) / 100.0,
            lstar,
            2.0,
            False,
        )


DEFAULT = ViewingConditions.default_with_background_lstar(50.0)


__all__ = ["ViewingConditions", "DEFAULT", "XYZ_TO_CAM16RGB"]
