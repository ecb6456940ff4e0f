from __future__ import annotations

"""高水準 API とエクスポートのテスト。"""

import pytest

from hctcolor import (
    EXPORT_FORMAT_OPTIONS,
    ExportFormat,
    Variant,
    export_scheme,
    resolve_scheme,
    scheme_from_argb,
    source_color_from_pixels,
)
from hctcolor.dynamiccolor import material_dynamic_colors as mdc
from hctcolor.score import ScoreOptions


def test_scheme_from_argb_accepts_enum_and_name() -> None:
    a = scheme_from_argb(0xFF6750A4, Variant.FRUIT_SALAD, True, 0.5)
    b = scheme_from_argb(0xFF6750A4, "fruit-salad", True, 0.5)
    assert a.variant is b.variant is Variant.FRUIT_SALAD
    assert resolve_scheme(a) == resolve_scheme(b)


@pytest.mark.parametrize("variant", list(Variant))
def test_every_variant_dispatches(variant: Variant) -> None:
    scheme = scheme_from_argb(0xFF6750A4, variant)
    assert scheme.variant is variant
    assert not scheme.is_dark
    assert scheme.contrast_level == 0.0


def test_scheme_from_argb_unknown_variant() -> None:
    with pytest.raises(ValueError):
        scheme_from_argb(0xFF6750A4, "glossy")


def test_resolve_scheme_covers_all_roles() -> None:
    scheme = scheme_from_argb(0xFFFF0000, Variant.VIBRANT)
    colors = resolve_scheme(scheme)
    assert list(colors) == [c.name for c in mdc.all_colors()]
    assert colors["shadow"] == 0xFF000000
    assert colors["primary"] == mdc.primary().get_argb(scheme)


def test_export_formats() -> None:
    scheme = scheme_from_argb(0xFF0000FF, Variant.TONAL_SPOT)
    argb = export_scheme(scheme, ExportFormat.ARGB)
    hexes = export_scheme(scheme, "hex")
    rgb = export_scheme(scheme, ExportFormat.RGB_255)
    assert set(argb) == set(hexes) == set(rgb)
    assert hexes["scrim"] == "#000000"
    assert rgb["scrim"] == (0, 0, 0)
    primary = argb["primary"]
    assert hexes["primary"] == f"#{primary & 0xFFFFFF:06x}"
    assert rgb["primary"] == ((primary >> 16) & 0xFF, (primary >> 8) & 0xFF, primary & 0xFF)


def test_export_default_is_hex() -> None:
    scheme = scheme_from_argb(0xFF0000FF)
    assert export_scheme(scheme) == export_scheme(scheme, ExportFormat.HEX)


def test_export_unknown_format() -> None:
    scheme = scheme_from_argb(0xFF0000FF)
    with pytest.raises(ValueError):
        export_scheme(scheme, "cmyk")
    with pytest.raises(ValueError):
        ExportFormat.from_value("srgb_01")


def test_export_format_options_cover_enum() -> None:
    assert {fmt for _, fmt in EXPORT_FORMAT_OPTIONS} == set(ExportFormat)


def test_source_color_from_pixels_prefers_dominant_hue() -> None:
    pixels = [0xFF0000FF] * 90 + [0xFFFF0000] * 10
    assert source_color_from_pixels(pixels) == 0xFF0000FF


def test_source_color_from_pixels_fallback() -> None:
    assert source_color_from_pixels([]) == 0xFF4285F4
    gray = [0xFF808080] * 10
    assert source_color_from_pixels(gray, ScoreOptions(fallback_color_argb=0xFF00FF00)) == 0xFF00FF00
