from __future__ import annotations

"""TonalPalette / KeyColor / CorePalette のテスト。"""

import pytest

from hctcolor.hct import Hct
from hctcolor.palettes import CorePalette, KeyColor, TonalPalette


@pytest.mark.parametrize(
    "tone,expected",
    [
        (100.0, 0xFFFFFFFF),
        (95.0, 0xFFF1EFFF),
        (90.0, 0xFFE0E0FF),
        (80.0, 0xFFBEC2FF),
        (70.0, 0xFF9DA3FF),
        (60.0, 0xFF7C84FF),
        (50.0, 0xFF5A64FF),
        (40.0, 0xFF343DFF),
        (30.0, 0xFF0000EF),
        (20.0, 0xFF0001AC),
        (10.0, 0xFF00006E),
        (0.0, 0xFF000000),
    ],
)
def test_blue_tones(tone: float, expected: int) -> None:
    assert TonalPalette.from_argb(0xFF0000FF).get(tone) == expected


def test_get_is_cached_and_matches_get_hct() -> None:
    palette = TonalPalette.from_hue_and_chroma(200.0, 36.0)
    first = palette.get(42.0)
    assert palette.get(42.0) == first
    assert palette.get_hct(42.0).to_argb() == first


def test_from_argb_uses_color_as_key() -> None:
    palette = TonalPalette.from_argb(0xFF3366CC)
    hct = Hct.from_argb(0xFF3366CC)
    assert palette.key_color == hct
    assert palette.hue == pytest.approx(hct.hue)
    assert palette.chroma == pytest.approx(hct.chroma)


def test_key_color_exact_chroma_available() -> None:
    result = TonalPalette.from_hue_and_chroma(50.0, 60.0).key_color
    assert result.hue == pytest.approx(50.0, abs=10.0)
    assert result.chroma == pytest.approx(60.0, abs=0.5)
    assert 0.0 < result.tone < 100.0


def test_key_color_unusually_high_chroma() -> None:
    # Hue 149 peaks at chroma ~89.6 near tone 87.9.
    result = TonalPalette.from_hue_and_chroma(149.0, 200.0).key_color
    assert result.hue == pytest.approx(149.0, abs=10.0)
    assert result.chroma > 89.0
    assert 0.0 < result.tone < 100.0


def test_key_color_low_chroma_stays_near_tone_50() -> None:
    result = TonalPalette.from_hue_and_chroma(50.0, 3.0).key_color
    assert result.hue == pytest.approx(50.0, abs=10.0)
    assert result.chroma == pytest.approx(3.0, abs=0.5)
    assert result.tone == pytest.approx(50.0, abs=0.5)


def test_key_color_create_directly() -> None:
    assert KeyColor(50.0, 60.0).create() == TonalPalette.from_hue_and_chroma(50.0, 60.0).key_color


def test_core_palette_chroma_targets() -> None:
    core = CorePalette.of(0xFF0000FF)
    source = Hct.from_argb(0xFF0000FF)
    assert core.a1.chroma == pytest.approx(max(48.0, source.chroma))
    assert core.a2.chroma == pytest.approx(16.0)
    assert core.a3.chroma == pytest.approx(24.0)
    assert core.a3.hue == pytest.approx(source.hue + 60.0)
    assert core.n1.chroma == pytest.approx(4.0)
    assert core.n2.chroma == pytest.approx(8.0)
    assert core.error.hue == pytest.approx(25.0)
    assert core.error.chroma == pytest.approx(84.0)


def test_core_palette_content_follows_source_chroma() -> None:
    core = CorePalette.content_of(0xFF0000FF)
    source = Hct.from_argb(0xFF0000FF)
    assert core.a1.chroma == pytest.approx(source.chroma)
    assert core.a2.chroma == pytest.approx(source.chroma / 3.0)
    assert core.n1.chroma == pytest.approx(min(source.chroma / 12.0, 4.0))
