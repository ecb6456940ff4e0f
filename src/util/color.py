"""
どこで: `util.color`。
何を: 32bit ARGB 整数と sRGB / 線形 RGB / XYZ / L*a*b* / L* の相互変換、Hex 文字列の解析と整形。
なぜ: CAM16・HCT・量子化の全レイヤで同一の定数と丸め規則を共有し、参照値とビット単位で一致させるため。
"""

from __future__ import annotations

import math
from typing import Sequence

from .math_utils import clamp_int, matrix_multiply, round_half_up

SRGB_TO_XYZ: tuple[tuple[float, float, float], ...] = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

XYZ_TO_SRGB: tuple[tuple[float, float, float], ...] = (
    (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
    (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
    (0.05562093689691305, -0.20395524564742123, 1.0571799111220335),
)

WHITE_POINT_D65: tuple[float, float, float] = (95.047, 100.0, 108.883)

_LAB_E = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


# --- パック/アンパック ---------------------------------------------------------


def argb_from_rgb(red: int, green: int, blue: int) -> int:
    """RGB 成分（0–255）から不透明な ARGB 整数を作る。"""
    return (255 << 24) | ((red & 255) << 16) | ((green & 255) << 8) | (blue & 255)


def alpha_from_argb(argb: int) -> int:
    return (argb >> 24) & 255


def red_from_argb(argb: int) -> int:
    return (argb >> 16) & 255


def green_from_argb(argb: int) -> int:
    return (argb >> 8) & 255


def blue_from_argb(argb: int) -> int:
    return argb & 255


def is_opaque(argb: int) -> bool:
    """アルファが 255 のとき True。"""
    return alpha_from_argb(argb) >= 255


# --- 線形化 -------------------------------------------------------------------


def linearized(rgb_component: int | float) -> float:
    """sRGB 成分（0–255）を線形 RGB（0–100）へ変換する。"""
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return math.pow((normalized + 0.055) / 1.055, 2.4) * 100.0


def delinearized(rgb_component: float) -> int:
    """線形 RGB（0–100）を sRGB 成分（0–255, 四捨五入・クランプ済み）へ変換する。"""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        delin = normalized * 12.92
    else:
        delin = 1.055 * math.pow(normalized, 1.0 / 2.4) - 0.055
    return clamp_int(0, 255, round_half_up(delin * 255.0))


def argb_from_linrgb(linrgb: Sequence[float]) -> int:
    """線形 RGB（各 0–100）から ARGB を作る。"""
    r = delinearized(linrgb[0])
    g = delinearized(linrgb[1])
    b = delinearized(linrgb[2])
    return argb_from_rgb(r, g, b)


# --- XYZ / L*a*b* -------------------------------------------------------------


def argb_from_xyz(x: float, y: float, z: float) -> int:
    """CIE XYZ（D65, Y=100 が白）から ARGB を作る。"""
    m = XYZ_TO_SRGB
    linear_r = m[0][0] * x + m[0][1] * y + m[0][2] * z
    linear_g = m[1][0] * x + m[1][1] * y + m[1][2] * z
    linear_b = m[2][0] * x + m[2][1] * y + m[2][2] * z
    return argb_from_rgb(
        delinearized(linear_r), delinearized(linear_g), delinearized(linear_b)
    )


def xyz_from_argb(argb: int) -> tuple[float, float, float]:
    """ARGB を CIE XYZ に変換する。"""
    r = linearized(red_from_argb(argb))
    g = linearized(green_from_argb(argb))
    b = linearized(blue_from_argb(argb))
    return matrix_multiply((r, g, b), SRGB_TO_XYZ)


def lab_f(t: float) -> float:
    if t > _LAB_E:
        return math.pow(t, 1.0 / 3.0)
    return (_LAB_KAPPA * t + 16) / 116


def lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _LAB_E:
        return ft3
    return (116 * ft - 16) / _LAB_KAPPA


def argb_from_lab(l: float, a: float, b: float) -> int:
    """CIE L*a*b* から ARGB を作る。"""
    white = WHITE_POINT_D65
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    x = lab_invf(fx) * white[0]
    y = lab_invf(fy) * white[1]
    z = lab_invf(fz) * white[2]
    return argb_from_xyz(x, y, z)


def lab_from_argb(argb: int) -> tuple[float, float, float]:
    """ARGB を CIE L*a*b* に変換する。"""
    linear_r = linearized(red_from_argb(argb))
    linear_g = linearized(green_from_argb(argb))
    linear_b = linearized(blue_from_argb(argb))
    m = SRGB_TO_XYZ
    x = m[0][0] * linear_r + m[0][1] * linear_g + m[0][2] * linear_b
    y = m[1][0] * linear_r + m[1][1] * linear_g + m[1][2] * linear_b
    z = m[2][0] * linear_r + m[2][1] * linear_g + m[2][2] * linear_b
    white = WHITE_POINT_D65
    fx = lab_f(x / white[0])
    fy = lab_f(y / white[1])
    fz = lab_f(z / white[2])
    l = 116.0 * fy - 16
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return (l, a, b)


# --- L* / Y -------------------------------------------------------------------


def y_from_lstar(lstar: float) -> float:
    """L*（0–100）を相対輝度 Y（0–100）へ変換する。"""
    return 100.0 * lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    """相対輝度 Y（0–100）を L*（0–100）へ変換する。"""
    return lab_f(y / 100.0) * 116.0 - 16.0


def argb_from_lstar(lstar: float) -> int:
    """指定 L* のグレーを ARGB で返す。"""
    component = delinearized(y_from_lstar(lstar))
    return argb_from_rgb(component, component, component)


def lstar_from_argb(argb: int) -> float:
    """ARGB の L*（トーン）を返す。"""
    y = xyz_from_argb(argb)[1]
    return 116.0 * lab_f(y / 100.0) - 16.0


# --- Hex ----------------------------------------------------------------------


def hex_from_argb(argb: int) -> str:
    """ARGB を "#rrggbb" 形式の文字列にする（アルファは捨てる）。"""
    return f"#{red_from_argb(argb):02x}{green_from_argb(argb):02x}{blue_from_argb(argb):02x}"


def argb_from_hex(s: str) -> int:
    """Hex 文字列から ARGB を返す。

    受理形式: "#RGB", "#RRGGBB", "#AARRGGBB"（"#" / "0x" は省略可）。
    8 桁の場合は先頭 2 桁をアルファとして扱う。大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (3, 6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RGB, RRGGBB or AARRGGBB)")
    try:
        if len(t) == 3:
            r = int(t[0] * 2, 16)
            g = int(t[1] * 2, 16)
            b = int(t[2] * 2, 16)
            return argb_from_rgb(r, g, b)
        value = int(t, 16)
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    if len(t) == 6:
        return 0xFF000000 | value
    return value


__all__ = [
    "SRGB_TO_XYZ",
    "XYZ_TO_SRGB",
    "WHITE_POINT_D65",
    "argb_from_rgb",
    "alpha_from_argb",
    "red_from_argb",
    "green_from_argb",
    "blue_from_argb",
    "is_opaque",
    "linearized",
    "delinearized",
    "argb_from_linrgb",
    "argb_from_xyz",
    "xyz_from_argb",
    "lab_f",
    "lab_invf",
    "argb_from_lab",
    "lab_from_argb",
    "y_from_lstar",
    "lstar_from_y",
    "argb_from_lstar",
    "lstar_from_argb",
    "hex_from_argb",
    "argb_from_hex",
]
