"""
どこで: `util.math_utils`。
何を: 色計算で共有する数値ヘルパ（符号、線形補間、クランプ、角度の正規化、3x3 行列積）。
なぜ: CAM16/HCT/スコアリングが同一の丸め・正規化規則を使い、参照値とビット単位で一致させるため。
"""

from __future__ import annotations

import math
from typing import Sequence


def signum(num: float) -> int:
    """符号を -1, 0, 1 で返す。"""
    if num < 0:
        return -1
    if num == 0:
        return 0
    return 1


def lerp(start: float, stop: float, amount: float) -> float:
    """`amount=0` で start、`amount=1` で stop となる線形補間。"""
    return (1.0 - amount) * start + amount * stop


def clamp_int(min_value: int, max_value: int, value: int) -> int:
    """整数を [min_value, max_value] に収める。"""
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def clamp_double(min_value: float, max_value: float, value: float) -> float:
    """実数を [min_value, max_value] に収める。"""
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def round_half_up(value: float) -> int:
    """0.5 を常に切り上げる丸め（`floor(x + 0.5)`）。

    Python の `round()` は偶数丸めのため、参照実装と一致しない。
    """
    return int(math.floor(value + 0.5))


def sanitize_degrees_int(degrees: int) -> int:
    """整数角度を [0, 360) に正規化する。"""
    return degrees % 360


def sanitize_degrees_double(degrees: float) -> float:
    """実数角度を [0, 360) に正規化する。"""
    degrees = math.fmod(degrees, 360.0)
    if degrees < 0:
        degrees = degrees + 360.0
    return degrees


def rotation_direction(from_degrees: float, to_degrees: float) -> float:
    """from から to へ最短で回る向き（+1.0: 増加方向, -1.0: 減少方向）。"""
    increasing_difference = sanitize_degrees_double(to_degrees - from_degrees)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def difference_degrees(a: float, b: float) -> float:
    """円周上の 2 角度間の距離（0–180）。"""
    return 180.0 - abs(abs(a - b) - 180.0)


def matrix_multiply(
    row: Sequence[float], matrix: Sequence[Sequence[float]]
) -> tuple[float, float, float]:
    """3x3 行列と 3 要素ベクトルの積を返す。

    Parameters
    ----------
    row : Sequence[float]
        右から掛ける列ベクトル。
    matrix : Sequence[Sequence[float]]
        3x3 行列（行優先）。

    Returns
    -------
    tuple[float, float, float]
        `matrix @ row` の結果。
    """
    a = row[0] * matrix[0][0] + row[1] * matrix[0][1] + row[2] * matrix[0][2]
    b = row[0] * matrix[1][0] + row[1] * matrix[1][1] + row[2] * matrix[1][2]
    c = row[0] * matrix[2][0] + row[1] * matrix[2][1] + row[2] * matrix[2][2]
    return (a, b, c)


__all__ = [
    "signum",
    "lerp",
    "clamp_int",
    "clamp_double",
    "round_half_up",
    "sanitize_degrees_int",
    "sanitize_degrees_double",
    "rotation_direction",
    "difference_degrees",
    "matrix_multiply",
]
