from __future__ import annotations

"""Numeric solver that maps HCT coordinates to an in-gamut sRGB color.

Given (hue, chroma, tone), :func:`solve_to_argb` finds the sRGB color with
exactly the requested L* and the requested CAM16 hue, reducing chroma when
the request lies outside the sRGB gamut.

Strategy
--------
1. A few Newton steps on CAM16 lightness J, inverting the appearance model
   at a fixed hue/chroma until the resulting luminance Y matches the target.
2. If that leaves the gamut, the color is on the gamut boundary: bisect on
   the plane of constant Y inside the linear RGB cube, first to the cube edge
   segment that brackets the target hue and then across the "critical planes"
   where a channel's rounded sRGB value changes.
"""

import logging
import math
from typing import List, Sequence, Tuple

from common import settings
from util.color import argb_from_linrgb, argb_from_lstar, linearized, y_from_lstar
from util.math_utils import matrix_multiply, sanitize_degrees_double, signum

from .cam16 import Cam16
from .viewing_conditions import DEFAULT

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]

SCALED_DISCOUNT_FROM_LINRGB: Tuple[Vec3, ...] = (
    (0.001200833568784504, 0.002389694492170889, 0.0002795742885861124),
    (0.0005891086651375999, 0.0029785502573438758, 0.0003270666104008398),
    (0.00010146692491640572, 0.0005364214359186694, 0.0032979401770712076),
)

LINRGB_FROM_SCALED_DISCOUNT: Tuple[Vec3, ...] = (
    (1373.2198709594231, -1100.4251190754821, -7.278681089101213),
    (-271.815969077903, 559.6580465940733, -32.46047482791194),
    (1.9622899599665666, -57.173814538844006, 308.7233197812385),
)

Y_FROM_LINRGB: Vec3 = (0.2126, 0.7152, 0.0722)

# Linear RGB (0-100) values at which a channel's 8-bit sRGB value changes.
CRITICAL_PLANES: List[float] = [linearized(i + 0.5) for i in range(255)]

_INVALID: Vec3 = (-1.0, -1.0, -1.0)


def _sanitize_radians(angle: float) -> float:
    return (angle + math.pi * 8) % (math.pi * 2)


def _true_delinearized(rgb_component: float) -> float:
    """Delinearize without rounding; returns a value in [0, 255]."""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        delin = normalized * 12.92
    else:
        delin = 1.055 * math.pow(normalized, 1.0 / 2.4) - 0.055
    return delin * 255.0


def _chromatic_adaptation(component: float) -> float:
    af = math.pow(abs(component), 0.42)
    return signum(component) * 400.0 * af / (af + 27.13)


def _hue_of(linrgb: Sequence[float]) -> float:
    """CAM16 hue of a linear RGB color, in radians in (-pi, pi]."""
    scaled_discount = matrix_multiply(linrgb, SCALED_DISCOUNT_FROM_LINRGB)
    r_a = _chromatic_adaptation(scaled_discount[0])
    g_a = _chromatic_adaptation(scaled_discount[1])
    b_a = _chromatic_adaptation(scaled_discount[2])
    a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    return math.atan2(b, a)


def _are_in_cyclic_order(a: float, b: float, c: float) -> bool:
    delta_a_b = _sanitize_radians(b - a)
    delta_a_c = _sanitize_radians(c - a)
    return delta_a_b < delta_a_c


def _intercept(source: float, mid: float, target: float) -> float:
    """Solve ``lerp(source, target, t) == mid`` for t."""
    return (mid - source) / (target - source)


def _lerp_point(source: Vec3, t: float, target: Vec3) -> Vec3:
    return (
        source[0] + (target[0] - source[0]) * t,
        source[1] + (target[1] - source[1]) * t,
        source[2] + (target[2] - source[2]) * t,
    )


def _set_coordinate(source: Vec3, coordinate: float, target: Vec3, axis: int) -> Vec3:
    """Point on segment source-target whose ``axis`` coordinate is ``coordinate``."""
    t = _intercept(source[axis], coordinate, target[axis])
    return _lerp_point(source, t, target)


def _is_bounded(x: float) -> bool:
    return 0.0 <= x <= 100.0


def _nth_vertex(y: float, n: int) -> Vec3:
    """The nth of 12 candidate intersections of the Y plane with the RGB cube edges.

    Returns ``(-1, -1, -1)`` when that edge does not meet the plane.
    """
    k_r, k_g, k_b = Y_FROM_LINRGB
    coord_a = 0.0 if n % 4 <= 1 else 100.0
    coord_b = 0.0 if n % 2 == 0 else 100.0
    if n < 4:
        g = coord_a
        b = coord_b
        r = (y - g * k_g - b * k_b) / k_r
        return (r, g, b) if _is_bounded(r) else _INVALID
    if n < 8:
        b = coord_a
        r = coord_b
        g = (y - r * k_r - b * k_b) / k_g
        return (r, g, b) if _is_bounded(g) else _INVALID
    r = coord_a
    g = coord_b
    b = (y - r * k_r - g * k_g) / k_b
    return (r, g, b) if _is_bounded(b) else _INVALID


def _bisect_to_segment(y: float, target_hue: float) -> Tuple[Vec3, Vec3]:
    """Find the edge segment of the constant-Y polygon that brackets the target hue."""
    left = _INVALID
    right = _INVALID
    left_hue = 0.0
    right_hue = 0.0
    initialized = False
    uncut = True
    for n in range(12):
        mid = _nth_vertex(y, n)
        if mid[0] < 0:
            continue
        mid_hue = _hue_of(mid)
        if not initialized:
            left = mid
            right = mid
            left_hue = mid_hue
            right_hue = mid_hue
            initialized = True
            continue
        if uncut or _are_in_cyclic_order(left_hue, mid_hue, right_hue):
            uncut = False
            if _are_in_cyclic_order(left_hue, target_hue, mid_hue):
                right = mid
                right_hue = mid_hue
            else:
                left = mid
                left_hue = mid_hue
    return left, right


def _midpoint(a: Vec3, b: Vec3) -> Vec3:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2, (a[2] + b[2]) / 2)


def _critical_plane_below(x: float) -> int:
    return int(math.floor(x - 0.5))


def _critical_plane_above(x: float) -> int:
    return int(math.ceil(x - 0.5))


def _bisect_to_limit(y: float, target_hue: float) -> Vec3:
    """Gamut-boundary color with luminance ``y`` whose hue is closest to ``target_hue``."""
    left, right = _bisect_to_segment(y, target_hue)
    left_hue = _hue_of(left)
    for axis in range(3):
        if left[axis] != right[axis]:
            if left[axis] < right[axis]:
                l_plane = _critical_plane_below(_true_delinearized(left[axis]))
                r_plane = _critical_plane_above(_true_delinearized(right[axis]))
            else:
                l_plane = _critical_plane_above(_true_delinearized(left[axis]))
                r_plane = _critical_plane_below(_true_delinearized(right[axis]))
            for _ in range(8):
                if abs(r_plane - l_plane) <= 1:
                    break
                m_plane = int(math.floor((l_plane + r_plane) / 2.0))
                mid_plane_coordinate = CRITICAL_PLANES[m_plane]
                mid = _set_coordinate(left, mid_plane_coordinate, right, axis)
                mid_hue = _hue_of(mid)
                if _are_in_cyclic_order(left_hue, target_hue, mid_hue):
                    right = mid
                    r_plane = m_plane
                else:
                    left = mid
                    left_hue = mid_hue
                    l_plane = m_plane
    return _midpoint(left, right)


def _inverse_chromatic_adaptation(adapted: float) -> float:
    adapted_abs = abs(adapted)
    base = max(0.0, 27.13 * adapted_abs / (400.0 - adapted_abs))
    return signum(adapted) * math.pow(base, 1.0 / 0.42)


def _find_result_by_j(hue_radians: float, chroma: float, y: float) -> int:
    """Newton iteration on J; returns 0 when the answer is out of gamut."""
    # Initial estimate of j.
    j = math.sqrt(y) * 11.0
    vc = DEFAULT
    t_inner_coeff = 1 / math.pow(1.64 - math.pow(0.29, vc.n), 0.73)
    e_hue = 0.25 * (math.cos(hue_radians + 2.0) + 3.8)
    p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
    h_sin = math.sin(hue_radians)
    h_cos = math.cos(hue_radians)
    for iteration_round in range(5):
        j_normalized = j / 100.0
        alpha = 0.0 if chroma == 0.0 or j == 0.0 else chroma / math.sqrt(j_normalized)
        t = math.pow(alpha * t_inner_coeff, 1.0 / 0.9)
        ac = vc.aw * math.pow(j_normalized, 1.0 / vc.c / vc.z)
        p2 = ac / vc.nbb
        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0
        r_c_scaled = _inverse_chromatic_adaptation(r_a)
        g_c_scaled = _inverse_chromatic_adaptation(g_a)
        b_c_scaled = _inverse_chromatic_adaptation(b_a)
        linrgb = matrix_multiply(
            (r_c_scaled, g_c_scaled, b_c_scaled), LINRGB_FROM_SCALED_DISCOUNT
        )
        if linrgb[0] < 0 or linrgb[1] < 0 or linrgb[2] < 0:
            return 0
        k_r, k_g, k_b = Y_FROM_LINRGB
        fnj = k_r * linrgb[0] + k_g * linrgb[1] + k_b * linrgb[2]
        if fnj <= 0:
            return 0
        if iteration_round == 4 or abs(fnj - y) < 0.002:
            if linrgb[0] > 100.01 or linrgb[1] > 100.01 or linrgb[2] > 100.01:
                return 0
            return argb_from_linrgb(linrgb)
        # fnj grows roughly as j^2, so d(fnj)/dj ~ 2 * fnj / j.
        j = j - (fnj - y) * j / (2 * fnj)
    return 0


def solve_to_argb(hue_degrees: float, chroma: float, lstar: float) -> int:
    """Find the sRGB color closest to the given HCT coordinates.

    Parameters
    ----------
    hue_degrees:
        CAM16 hue; any angle, normalized to [0, 360).
    chroma:
        Requested CAM16 chroma. Reduced as needed to stay in gamut.
    lstar:
        Requested L* tone in [0, 100]; the result always has this L*
        (to 8-bit rounding).

    Returns
    -------
    int
        ARGB of the solved color.
    """
    if chroma < 0.0001 or lstar < 0.0001 or lstar > 99.9999:
        return argb_from_lstar(lstar)
    hue_degrees = sanitize_degrees_double(hue_degrees)
    hue_radians = hue_degrees / 180 * math.pi
    y = y_from_lstar(lstar)
    exact_answer = _find_result_by_j(hue_radians, chroma, y)
    if exact_answer != 0:
        return exact_answer
    if settings.get().DEBUG_SOLVER:
        logger.debug(
            "solve_to_argb: bisecting to gamut boundary (h=%.3f, c=%.3f, t=%.3f)",
            hue_degrees,
            chroma,
            lstar,
        )
    linrgb = _bisect_to_limit(y, hue_radians)
    return argb_from_linrgb(linrgb)


def solve_to_cam(hue_degrees: float, chroma: float, lstar: float) -> Cam16:
    """Like :func:`solve_to_argb` but returns the CAM16 of the result."""
    return Cam16.from_argb(solve_to_argb(hue_degrees, chroma, lstar))


__all__ = ["solve_to_argb", "solve_to_cam", "CRITICAL_PLANES"]
