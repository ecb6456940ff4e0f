from __future__ import annotations

"""CAM16 color appearance model.

This module defines :class:`Cam16`, which describes how a color looks to a
human observer under given :class:`ViewingConditions`, together with the
CAM16-UCS coordinates used for perceptual distance and blending.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from util.color import argb_from_xyz, blue_from_argb, green_from_argb, linearized, red_from_argb
from util.math_utils import signum

from .viewing_conditions import DEFAULT, XYZ_TO_CAM16RGB, ViewingConditions

CAM16RGB_TO_XYZ: Tuple[Tuple[float, float, float], ...] = (
    (1.86206786, -1.01125463, 0.14918677),
    (0.38752654, 0.62144744, -0.00897398),
    (-0.01584150, -0.03412294, 1.04996444),
)


@dataclass(frozen=True)
class Cam16:
    """CAM16 appearance attributes of a color.

    Attributes
    ----------
    hue:
        Hue angle in degrees, in [0, 360).
    chroma:
        Colorfulness relative to the brightness of white.
    j:
        Lightness.
    q:
        Brightness.
    m:
        Colorfulness.
    s:
        Saturation.
    jstar, astar, bstar:
        CAM16-UCS coordinates.
    """

    hue: float
    chroma: float
    j: float
    q: float
    m: float
    s: float
    jstar: float
    astar: float
    bstar: float

    # --- constructors ---------------------------------------------------------

    @classmethod
    def from_argb(cls, argb: int) -> "Cam16":
        """CAM16 of an ARGB color under the default viewing conditions."""
        return cls.from_argb_in_viewing_conditions(argb, DEFAULT)

    @classmethod
    def from_argb_in_viewing_conditions(
        cls, argb: int, viewing_conditions: ViewingConditions
    ) -> "Cam16":
        red_l = linearized(red_from_argb(argb))
        green_l = linearized(green_from_argb(argb))
        blue_l = linearized(blue_from_argb(argb))
        x = 0.41233895 * red_l + 0.35762064 * green_l + 0.18051042 * blue_l
        y = 0.2126 * red_l + 0.7152 * green_l + 0.0722 * blue_l
        z = 0.01932141 * red_l + 0.11916382 * green_l + 0.95034478 * blue_l
        return cls.from_xyz_in_viewing_conditions(x, y, z, viewing_conditions)

    @classmethod
    def from_xyz_in_viewing_conditions(
        cls, x: float, y: float, z: float, viewing_conditions: ViewingConditions
    ) -> "Cam16":
        """CAM16 of an XYZ color under the given viewing conditions."""
        vc = viewing_conditions
        m = XYZ_TO_CAM16RGB
        r_t = x * m[0][0] + y * m[0][1] + z * m[0][2]
        g_t = x * m[1][0] + y * m[1][1] + z * m[1][2]
        b_t = x * m[2][0] + y * m[2][1] + z * m[2][2]

        # Discount illuminant
        r_d = vc.rgb_d[0] * r_t
        g_d = vc.rgb_d[1] * g_t
        b_d = vc.rgb_d[2] * b_t

        # Chromatic adaptation
        r_af = math.pow(vc.fl * abs(r_d) / 100.0, 0.42)
        g_af = math.pow(vc.fl * abs(g_d) / 100.0, 0.42)
        b_af = math.pow(vc.fl * abs(b_d) / 100.0, 0.42)
        r_a = signum(r_d) * 400.0 * r_af / (r_af + 27.13)
        g_a = signum(g_d) * 400.0 * g_af / (g_af + 27.13)
        b_a = signum(b_d) * 400.0 * b_af / (b_af + 27.13)

        # Redness-greenness and yellowness-blueness
        a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
        b = (r_a + g_a - 2.0 * b_a) / 9.0

        # Auxiliary components
        u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
        p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

        atan_degrees = math.atan2(b, a) * 180.0 / math.pi
        if atan_degrees < 0:
            hue = atan_degrees + 360.0
        elif atan_degrees >= 360:
            hue = atan_degrees - 360.0
        else:
            hue = atan_degrees
        hue_radians = hue * math.pi / 180.0

        # Achromatic response
        ac = p2 * vc.nbb
        j = 100.0 * math.pow(ac / vc.aw, vc.c * vc.z)
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root

        hue_prime = hue + 360 if hue < 20.14 else hue
        e_hue = 0.25 * (math.cos(hue_prime * math.pi / 180.0 + 2.0) + 3.8)
        p1 = 50000.0 / 13.0 * e_hue * vc.nc * vc.ncb
        t = p1 * math.sqrt(a * a + b * b) / (u + 0.305)
        alpha = math.pow(1.64 - math.pow(0.29, vc.n), 0.73) * math.pow(t, 0.9)
        c = alpha * math.sqrt(j / 100.0)
        m_ = c * vc.fl_root
        s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))

        jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
        mstar = 1.0 / 0.0228 * math.log(1.0 + 0.0228 * m_)
        astar = mstar * math.cos(hue_radians)
        bstar = mstar * math.sin(hue_radians)
        return cls(hue, c, j, q, m_, s, jstar, astar, bstar)

    @classmethod
    def from_jch(cls, j: float, c: float, h: float) -> "Cam16":
        """CAM16 from lightness, chroma and hue under default conditions."""
        return cls.from_jch_in_viewing_conditions(j, c, h, DEFAULT)

    @classmethod
    def from_jch_in_viewing_conditions(
        cls, j: float, c: float, h: float, viewing_conditions: ViewingConditions
    ) -> "Cam16":
        vc = viewing_conditions
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
        m = c * vc.fl_root
        alpha = 0.0 if j == 0.0 else c / math.sqrt(j / 100.0)
        s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))

        hue_radians = h * math.pi / 180.0
        jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
        mstar = 1.0 / 0.0228 * math.log(1.0 + 0.0228 * m)
        astar = mstar * math.cos(hue_radians)
        bstar = mstar * math.sin(hue_radians)
        return cls(h, c, j, q, m, s, jstar, astar, bstar)

    @classmethod
    def from_ucs(cls, jstar: float, astar: float, bstar: float) -> "Cam16":
        """CAM16 from CAM16-UCS coordinates under default conditions."""
        return cls.from_ucs_in_viewing_conditions(jstar, astar, bstar, DEFAULT)

    @classmethod
    def from_ucs_in_viewing_conditions(
        cls,
        jstar: float,
        astar: float,
        bstar: float,
        viewing_conditions: ViewingConditions,
    ) -> "Cam16":
        m = math.sqrt(astar * astar + bstar * bstar)
        m2 = (math.exp(m * 0.0228) - 1.0) / 0.0228
        c = m2 / viewing_conditions.fl_root
        h = math.atan2(bstar, astar) * (180.0 / math.pi)
        if h < 0.0:
            h += 360.0
        j = jstar / (1.0 - (jstar - 100.0) * 0.007)
        return cls.from_jch_in_viewing_conditions(j, c, h, viewing_conditions)

    # --- conversions ----------------------------------------------------------

    def to_argb(self) -> int:
        """ARGB of this color under the default viewing conditions."""
        return self.viewed(DEFAULT)

    def viewed(self, viewing_conditions: ViewingConditions) -> int:
        """ARGB of this color when viewed in the given conditions."""
        x, y, z = self.xyz_in_viewing_conditions(viewing_conditions)
        return argb_from_xyz(x, y, z)

    def xyz_in_viewing_conditions(
        self, viewing_conditions: ViewingConditions
    ) -> Tuple[float, float, float]:
        """Invert the model: XYZ of this appearance in the given conditions."""
        vc = viewing_conditions
        if self.chroma == 0.0 or self.j == 0.0:
            alpha = 0.0
        else:
            alpha = self.chroma / math.sqrt(self.j / 100.0)

        t = math.pow(alpha / math.pow(1.64 - math.pow(0.29, vc.n), 0.73), 1.0 / 0.9)
        h_rad = self.hue * math.pi / 180.0

        e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
        ac = vc.aw * math.pow(self.j / 100.0, 1.0 / vc.c / vc.z)
        p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        h_sin = math.sin(h_rad)
        h_cos = math.cos(h_rad)

        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        r_c = _inverse_adapt(r_a, vc.fl)
        g_c = _inverse_adapt(g_a, vc.fl)
        b_c = _inverse_adapt(b_a, vc.fl)
        r_f = r_c / vc.rgb_d[0]
        g_f = g_c / vc.rgb_d[1]
        b_f = b_c / vc.rgb_d[2]

        m = CAM16RGB_TO_XYZ
        x = r_f * m[0][0] + g_f * m[0][1] + b_f * m[0][2]
        y = r_f * m[1][0] + g_f * m[1][1] + b_f * m[1][2]
        z = r_f * m[2][0] + g_f * m[2][1] + b_f * m[2][2]
        return (x, y, z)

    def distance(self, other: "Cam16") -> float:
        """Perceptual distance to another color in CAM16-UCS (Delta E')."""
        d_j = self.jstar - other.jstar
        d_a = self.astar - other.astar
        d_b = self.bstar - other.bstar
        d_e_prime = math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b)
        return 1.41 * math.pow(d_e_prime, 0.63)


def _inverse_adapt(adapted: float, fl: float) -> float:
    base = max(0.0, (27.13 * abs(adapted)) / (400.0 - abs(adapted)))
    return signum(adapted) * (100.0 / fl) * math.pow(base, 1.0 / 0.42)


__all__ = ["Cam16", "CAM16RGB_TO_XYZ"]
