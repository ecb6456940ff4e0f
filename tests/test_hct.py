from __future__ import annotations

"""HCT と solver のテスト。"""

import pytest

from hctcolor.hct import Cam16, Hct, ViewingConditions, solve_to_argb, solve_to_cam
from util.color import lstar_from_argb


def _recovered(argb: int) -> int:
    cam = Cam16.from_argb(argb)
    return solve_to_argb(cam.hue, cam.chroma, lstar_from_argb(argb))


def test_limited_to_srgb() -> None:
    hct = Hct.from_hct(120.0, 200.0, 50.0)
    argb = hct.to_argb()
    assert Cam16.from_argb(argb).hue == hct.hue
    assert Cam16.from_argb(argb).chroma == hct.chroma
    assert lstar_from_argb(argb) == hct.tone


def test_truncates_colors() -> None:
    hct = Hct.from_hct(120.0, 60.0, 50.0)
    chroma = hct.chroma
    assert chroma < 60.0

    hct.set_tone(180.0)
    assert hct.chroma < chroma


def test_setters_resolve_again() -> None:
    hct = Hct.from_hct(270.0, 40.0, 50.0)
    hct.tone = 80.0
    assert hct.tone == pytest.approx(80.0, abs=0.5)
    assert hct.hue == pytest.approx(270.0, abs=2.0)
    hct.hue = 30.0
    assert hct.hue == pytest.approx(30.0, abs=2.0)
    hct.set_chroma(0.0)
    argb = hct.to_argb()
    assert (argb >> 16) & 0xFF == (argb >> 8) & 0xFF == argb & 0xFF
    assert hct.tone == pytest.approx(80.0, abs=0.5)


@pytest.mark.parametrize("argb", [0xFFFE0315, 0xFF15FE03, 0xFF0315FE])
def test_solver_recovers_primaries(argb: int) -> None:
    assert _recovered(argb) == argb


def test_solver_extremes_are_gray() -> None:
    assert solve_to_argb(0.0, 50.0, 0.0) == 0xFF000000
    assert solve_to_argb(0.0, 50.0, 100.0) == 0xFFFFFFFF
    gray = solve_to_argb(123.0, 0.0, 50.0)
    assert gray & 0xFF == (gray >> 8) & 0xFF == (gray >> 16) & 0xFF


def test_solve_to_cam_matches_argb() -> None:
    cam = solve_to_cam(200.0, 30.0, 60.0)
    assert cam.to_argb() == solve_to_argb(200.0, 30.0, 60.0)


def test_solver_strided_sweep() -> None:
    # Strided sample of the opaque gamut; the full 16M sweep is too slow here.
    for index in range(0, 0x1000000, 997 * 61):
        argb = 0xFF000000 | index
        assert _recovered(argb) == argb


def test_equality_is_by_argb() -> None:
    assert Hct.from_argb(0xFF123456) == Hct.from_argb(0xFF123456)
    assert Hct.from_argb(0xFF123456) != Hct.from_argb(0xFF123457)


def test_in_viewing_conditions_keeps_hue_family() -> None:
    dark_bg = ViewingConditions.default_with_background_lstar(0.0)
    hct = Hct.from_argb(0xFF3366CC)
    recast = hct.in_viewing_conditions(dark_bg)
    assert abs(recast.hue - hct.hue) < 20.0
    assert 0.0 <= recast.tone <= 100.0
