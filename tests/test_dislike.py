from __future__ import annotations

import pytest

from hctcolor.dislike import fix_if_disliked, is_disliked
from hctcolor.hct import Hct

BILE_COLORS = [0xFF95884B, 0xFF716B40, 0xFFB08E00, 0xFF4C4308, 0xFF464521]


@pytest.mark.parametrize("argb", BILE_COLORS)
def test_bile_colors_disliked(argb: int) -> None:
    assert is_disliked(Hct.from_argb(argb))


@pytest.mark.parametrize("argb", BILE_COLORS)
def test_bile_colors_become_likable_when_fixed(argb: int) -> None:
    hct = Hct.from_argb(argb)
    fixed = fix_if_disliked(hct)
    assert not is_disliked(fixed)
    assert fixed.tone == pytest.approx(70.0, abs=0.5)


def test_tone_67_not_disliked() -> None:
    color = Hct.from_hct(100.0, 50.0, 67.0)
    assert not is_disliked(color)
    assert fix_if_disliked(color).to_argb() == color.to_argb()


def test_blue_not_disliked() -> None:
    assert not is_disliked(Hct.from_argb(0xFF0000FF))
