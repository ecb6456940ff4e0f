from __future__ import annotations

"""Wu's color quantizer.

Pixels are binned into a 33x33x33 RGB histogram (5 bits per channel plus a
zero border). Cumulative moments make the weight, color sum and squared
norm of any box an 8-term lookup. The box with the largest variance is
cut repeatedly, along the axis and position that maximise the variance
between the two halves, until ``max_colors`` boxes exist or no box can be
cut. Each box's mean color becomes a seed for :mod:`.wsmeans`.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Sequence

import numpy as np

from util.color import argb_from_rgb

logger = logging.getLogger(__name__)

INDEX_BITS = 5
INDEX_COUNT = (1 << INDEX_BITS) + 1  # 33
MAX_COLORS = 256


class _Direction(Enum):
    RED = auto()
    GREEN = auto()
    BLUE = auto()


@dataclass
class _Box:
    r0: int = 0
    r1: int = 0
    g0: int = 0
    g1: int = 0
    b0: int = 0
    b1: int = 0
    vol: int = 0


class _Moments:
    """Cumulative histogram moments, as nested lists for exact scalar lookups."""

    def __init__(self, pixels: np.ndarray) -> None:
        red = (pixels >> 16) & 0xFF
        green = (pixels >> 8) & 0xFF
        blue = pixels & 0xFF
        shift = 8 - INDEX_BITS
        idx = ((red >> shift) + 1, (green >> shift) + 1, (blue >> shift) + 1)

        shape = (INDEX_COUNT, INDEX_COUNT, INDEX_COUNT)
        weights = np.zeros(shape, dtype=np.int64)
        m_r = np.zeros(shape, dtype=np.int64)
        m_g = np.zeros(shape, dtype=np.int64)
        m_b = np.zeros(shape, dtype=np.int64)
        m2 = np.zeros(shape, dtype=np.float64)
        np.add.at(weights, idx, 1)
        np.add.at(m_r, idx, red)
        np.add.at(m_g, idx, green)
        np.add.at(m_b, idx, blue)
        np.add.at(m2, idx, (red * red + green * green + blue * blue).astype(np.float64))

        self.weights = _cumulate(weights)
        self.m_r = _cumulate(m_r)
        self.m_g = _cumulate(m_g)
        self.m_b = _cumulate(m_b)
        self.m2 = _cumulate(m2)


def _cumulate(hist: np.ndarray) -> list:
    # 3D inclusive prefix sum; index 0 on each axis stays zero.
    return np.cumsum(np.cumsum(np.cumsum(hist, axis=0), axis=1), axis=2).tolist()


def _vol(cube: _Box, m: list) -> float:
    return (
        m[cube.r1][cube.g1][cube.b1]
        - m[cube.r1][cube.g1][cube.b0]
        - m[cube.r1][cube.g0][cube.b1]
        + m[cube.r1][cube.g0][cube.b0]
        - m[cube.r0][cube.g1][cube.b1]
        + m[cube.r0][cube.g1][cube.b0]
        + m[cube.r0][cube.g0][cube.b1]
        - m[cube.r0][cube.g0][cube.b0]
    )


def _bottom(cube: _Box, direction: _Direction, m: list) -> int:
    if direction == _Direction.RED:
        return (
            -m[cube.r0][cube.g1][cube.b1]
            + m[cube.r0][cube.g1][cube.b0]
            + m[cube.r0][cube.g0][cube.b1]
            - m[cube.r0][cube.g0][cube.b0]
        )
    if direction == _Direction.GREEN:
        return (
            -m[cube.r1][cube.g0][cube.b1]
            + m[cube.r1][cube.g0][cube.b0]
            + m[cube.r0][cube.g0][cube.b1]
            - m[cube.r0][cube.g0][cube.b0]
        )
    return (
        -m[cube.r1][cube.g1][cube.b0]
        + m[cube.r1][cube.g0][cube.b0]
        + m[cube.r0][cube.g1][cube.b0]
        - m[cube.r0][cube.g0][cube.b0]
    )


def _top(cube: _Box, direction: _Direction, position: int, m: list) -> int:
    if direction == _Direction.RED:
        return (
            m[position][cube.g1][cube.b1]
            - m[position][cube.g1][cube.b0]
            - m[position][cube.g0][cube.b1]
            + m[position][cube.g0][cube.b0]
        )
    if direction == _Direction.GREEN:
        return (
            m[cube.r1][position][cube.b1]
            - m[cube.r1][position][cube.b0]
            - m[cube.r0][position][cube.b1]
            + m[cube.r0][position][cube.b0]
        )
    return (
        m[cube.r1][cube.g1][position]
        - m[cube.r1][cube.g0][position]
        - m[cube.r0][cube.g1][position]
        + m[cube.r0][cube.g0][position]
    )


def _variance(cube: _Box, mo: _Moments) -> float:
    dr = _vol(cube, mo.m_r)
    dg = _vol(cube, mo.m_g)
    db = _vol(cube, mo.m_b)
    xx = _vol(cube, mo.m2)
    hypotenuse = dr * dr + dg * dg + db * db
    volume = _vol(cube, mo.weights)
    return xx - hypotenuse / volume


def _maximize(
    cube: _Box,
    direction: _Direction,
    first: int,
    last: int,
    whole: tuple,
    mo: _Moments,
) -> tuple[float, int]:
    """Best cut position in [first, last) along ``direction``; (-1 if none)."""
    whole_r, whole_g, whole_b, whole_w = whole
    bottom_r = _bottom(cube, direction, mo.m_r)
    bottom_g = _bottom(cube, direction, mo.m_g)
    bottom_b = _bottom(cube, direction, mo.m_b)
    bottom_w = _bottom(cube, direction, mo.weights)

    max_value = 0.0
    cut = -1
    for i in range(first, last):
        half_r = bottom_r + _top(cube, direction, i, mo.m_r)
        half_g = bottom_g + _top(cube, direction, i, mo.m_g)
        half_b = bottom_b + _top(cube, direction, i, mo.m_b)
        half_w = bottom_w + _top(cube, direction, i, mo.weights)
        if half_w == 0:
            continue
        temp = (half_r * half_r + half_g * half_g + half_b * half_b) / half_w

        half_r = whole_r - half_r
        half_g = whole_g - half_g
        half_b = whole_b - half_b
        half_w = whole_w - half_w
        if half_w == 0:
            continue
        temp += (half_r * half_r + half_g * half_g + half_b * half_b) / half_w

        if temp > max_value:
            max_value = temp
            cut = i
    return max_value, cut


def _cut(one: _Box, two: _Box, mo: _Moments) -> bool:
    """Split ``one`` in place, moving its upper part into ``two``."""
    whole = (
        _vol(one, mo.m_r),
        _vol(one, mo.m_g),
        _vol(one, mo.m_b),
        _vol(one, mo.weights),
    )
    max_r, cut_r = _maximize(one, _Direction.RED, one.r0 + 1, one.r1, whole, mo)
    max_g, cut_g = _maximize(one, _Direction.GREEN, one.g0 + 1, one.g1, whole, mo)
    max_b, cut_b = _maximize(one, _Direction.BLUE, one.b0 + 1, one.b1, whole, mo)

    if max_r >= max_g and max_r >= max_b:
        if cut_r < 0:
            return False
        direction = _Direction.RED
    elif max_g >= max_r and max_g >= max_b:
        direction = _Direction.GREEN
    else:
        direction = _Direction.BLUE

    two.r1 = one.r1
    two.g1 = one.g1
    two.b1 = one.b1
    if direction == _Direction.RED:
        one.r1 = cut_r
        two.r0 = cut_r
        two.g0 = one.g0
        two.b0 = one.b0
    elif direction == _Direction.GREEN:
        one.g1 = cut_g
        two.r0 = one.r0
        two.g0 = cut_g
        two.b0 = one.b0
    else:
        one.b1 = cut_b
        two.r0 = one.r0
        two.g0 = one.g0
        two.b0 = cut_b

    one.vol = (one.r1 - one.r0) * (one.g1 - one.g0) * (one.b1 - one.b0)
    two.vol = (two.r1 - two.r0) * (two.g1 - two.g0) * (two.b1 - two.b0)
    return True


def quantize_wu(pixels: Sequence[int], max_colors: int) -> List[int]:
    """Seed colors for ``pixels``, at most ``max_colors`` of them.

    Parameters
    ----------
    pixels:
        ARGB pixels; alpha is ignored.
    max_colors:
        Upper bound on the number of colors, capped at 256.

    Returns
    -------
    list[int]
        Opaque ARGB mean colors of the final boxes, in box order. Empty
        when ``pixels`` is empty or ``max_colors`` is 0.
    """
    if max_colors <= 0 or len(pixels) == 0:
        return []
    max_colors = min(max_colors, MAX_COLORS)

    mo = _Moments(np.asarray(pixels, dtype=np.int64) & 0xFFFFFFFF)

    cubes = [_Box() for _ in range(max_colors)]
    cubes[0].r1 = cubes[0].g1 = cubes[0].b1 = INDEX_COUNT - 1

    volume_variance = [0.0] * max_colors
    next_index = 0
    generated = max_colors
    i = 1
    while i < max_colors:
        if _cut(cubes[next_index], cubes[i], mo):
            volume_variance[next_index] = (
                _variance(cubes[next_index], mo) if cubes[next_index].vol > 1 else 0.0
            )
            volume_variance[i] = _variance(cubes[i], mo) if cubes[i].vol > 1 else 0.0
        else:
            volume_variance[next_index] = 0.0
            i -= 1

        next_index = 0
        temp = volume_variance[0]
        for j in range(1, i + 1):
            if volume_variance[j] > temp:
                temp = volume_variance[j]
                next_index = j
        if temp <= 0.0:
            generated = i + 1
            break
        i += 1

    colors: List[int] = []
    for cube in cubes[:generated]:
        weight = _vol(cube, mo.weights)
        if weight > 0:
            red = _vol(cube, mo.m_r) // weight
            green = _vol(cube, mo.m_g) // weight
            blue = _vol(cube, mo.m_b) // weight
            colors.append(argb_from_rgb(red, green, blue))
    logger.debug("wu: %d pixels -> %d boxes", len(pixels), len(colors))
    return colors


__all__ = ["quantize_wu"]
