from __future__ import annotations

import pytest

from hctcolor.contrast import (
    darker,
    darker_unsafe,
    lighter,
    lighter_unsafe,
    ratio_of_tones,
    ratio_of_ys,
)


def test_ratio_of_tones_out_of_bounds_input() -> None:
    assert ratio_of_tones(-10.0, 110.0) == pytest.approx(21.0, abs=1e-3)


def test_ratio_of_ys_extremes() -> None:
    assert ratio_of_ys(100.0, 0.0) == pytest.approx(21.0)
    assert ratio_of_ys(50.0, 50.0) == 1.0


def test_lighter_impossible_ratio_errors() -> None:
    assert lighter(90.0, 10.0) == -1.0


@pytest.mark.parametrize("tone", [110.0, -10.0])
def test_lighter_and_darker_out_of_bounds_input(tone: float) -> None:
    assert lighter(tone, 2.0) == -1.0
    assert darker(tone, 2.0) == -1.0


def test_lighter_unsafe_returns_max_tone() -> None:
    assert lighter_unsafe(100.0, 2.0) == pytest.approx(100.0, abs=1e-3)


def test_darker_impossible_ratio_errors() -> None:
    assert darker(10.0, 20.0) == -1.0


def test_darker_unsafe_returns_min_tone() -> None:
    assert darker_unsafe(0.0, 2.0) == pytest.approx(0.0, abs=1e-3)


def test_lighter_reaches_requested_ratio() -> None:
    result = lighter(40.0, 4.5)
    assert result > 40.0
    assert ratio_of_tones(40.0, result) >= 4.5 - 0.04
