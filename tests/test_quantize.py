from __future__ import annotations

"""量子化パイプライン（Wu / WSMeans / Celebi）のテスト。"""

import numpy as np
import pytest

from hctcolor.quantize import QuantizerResult, quantize_celebi, quantize_wsmeans, quantize_wu
from hctcolor.quantize.lab import argb_from_point, lab_points

RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF


def test_wu_single_random_color() -> None:
    assert quantize_wu([0xFF141216], 10) == [0xFF141216]


def test_wu_single_color_repeated() -> None:
    assert quantize_wu([RED], 256) == [RED]
    assert quantize_wu([RED, RED], 256) == [RED]
    assert quantize_wu([BLUE] * 5, 256) == [BLUE]


def test_wu_three_primaries() -> None:
    assert sorted(quantize_wu([RED, GREEN, BLUE], 256)) == sorted([RED, GREEN, BLUE])


def test_wu_respects_max_colors() -> None:
    rng = np.random.default_rng(7)
    pixels = (0xFF000000 | rng.integers(0, 0xFFFFFF, size=2000)).tolist()
    result = quantize_wu(pixels, 16)
    assert 1 <= len(result) <= 16
    assert all(c >> 24 == 0xFF for c in result)


def test_wu_empty_input() -> None:
    assert quantize_wu([], 16) == []
    assert quantize_wu([RED], 0) == []


def test_celebi_counts_per_primary() -> None:
    result = quantize_celebi([RED, GREEN, GREEN, BLUE, BLUE, BLUE], 128)
    assert result.color_to_count == {BLUE: 3, GREEN: 2, RED: 1}
    assert list(result.color_to_count) == [BLUE, GREEN, RED]


def test_celebi_single_color() -> None:
    assert quantize_celebi([RED], 128).color_to_count == {RED: 1}
    assert quantize_celebi([BLUE] * 5, 128).color_to_count == {BLUE: 5}


def test_celebi_skips_translucent_pixels() -> None:
    result = quantize_celebi([RED, 0x80FF0000, 0x00000000, GREEN], 128)
    assert sum(result.color_to_count.values()) == 2
    assert quantize_celebi([0x7F123456, 0x00FFFFFF], 128).color_to_count == {}


def test_celebi_empty_and_zero() -> None:
    assert quantize_celebi([], 128) == QuantizerResult()
    assert quantize_celebi([RED], 0) == QuantizerResult()


def test_celebi_never_loses_pixels() -> None:
    rng = np.random.default_rng(11)
    pixels = (0xFF000000 | rng.integers(0, 0xFFFFFF, size=3000)).tolist()
    result = quantize_celebi(pixels, 32)
    assert sum(result.color_to_count.values()) == len(pixels)
    assert len(result.color_to_count) <= 32


def test_wsmeans_maps_every_input_pixel() -> None:
    pixels = [RED, 0xFFFE0101, GREEN, 0xFF01FE01]
    result = quantize_wsmeans(pixels, [RED, GREEN], 2)
    assert set(result.input_pixel_to_cluster_pixel) == set(pixels)
    assert result.input_pixel_to_cluster_pixel[RED] == result.input_pixel_to_cluster_pixel[0xFFFE0101]
    assert sum(result.color_to_count.values()) == 4


def test_wsmeans_is_deterministic_for_a_seed() -> None:
    rng = np.random.default_rng(3)
    pixels = (0xFF000000 | rng.integers(0, 0xFFFFFF, size=500)).tolist()
    a = quantize_wsmeans(pixels, [], 8, seed=5, max_iterations=4)
    b = quantize_wsmeans(pixels, [], 8, seed=5, max_iterations=4)
    assert a.color_to_count == b.color_to_count
    assert sum(a.color_to_count.values()) == 500


def test_wsmeans_iterations_default_from_settings(fresh_settings: pytest.MonkeyPatch) -> None:
    from common import settings

    fresh_settings.setenv("HCT_WSMEANS_MAX_ITERATIONS", "1")
    settings.reload_from_env()
    result = quantize_wsmeans([RED, GREEN, BLUE], [RED, GREEN, BLUE], 3)
    assert result.color_to_count == {RED: 1, GREEN: 1, BLUE: 1}


def test_lab_helpers() -> None:
    points = lab_points([RED, BLUE])
    assert points.shape == (2, 3)
    assert argb_from_point(points[0]) == RED
    assert points[0][0] == pytest.approx(53.233, abs=1e-3)
    assert lab_points([]).shape == (0, 3)
