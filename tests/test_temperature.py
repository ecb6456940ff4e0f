from __future__ import annotations

"""色温度（TemperatureCache）の参照値テスト。"""

import pytest

from hctcolor.hct import Hct
from hctcolor.temperature import TemperatureCache, raw_temperature


@pytest.mark.parametrize(
    "argb,expected",
    [
        (0xFF0000FF, -1.393),
        (0xFFFF0000, 2.351),
        (0xFF00FF00, -0.267),
        (0xFFFFFFFF, -0.5),
        (0xFF000000, -0.5),
    ],
)
def test_raw_temperature(argb: int, expected: float) -> None:
    assert raw_temperature(Hct.from_argb(argb)) == pytest.approx(expected, abs=1e-3)


@pytest.mark.parametrize(
    "argb,expected",
    [
        (0xFF0000FF, 0xFF9D0002),
        (0xFFFF0000, 0xFF007BFC),
        (0xFF00FF00, 0xFFFFD2C9),
        (0xFFFFFFFF, 0xFFFFFFFF),
        (0xFF000000, 0xFF000000),
    ],
)
def test_complement(argb: int, expected: int) -> None:
    assert TemperatureCache(Hct.from_argb(argb)).complement.to_argb() == expected


@pytest.mark.parametrize(
    "argb,expected",
    [
        (0xFF0000FF, 0.0),
        (0xFFFF0000, 1.0),
        (0xFFFFFFFF, 0.5),
        (0xFF000000, 0.5),
    ],
)
def test_relative_temperature(argb: int, expected: float) -> None:
    hct = Hct.from_argb(argb)
    assert TemperatureCache(hct).relative_temperature(hct) == pytest.approx(expected, abs=1e-3)


def test_coldest_and_warmest_bracket_every_hue() -> None:
    cache = TemperatureCache(Hct.from_argb(0xFF3366CC))
    coldest = raw_temperature(cache.coldest)
    warmest = raw_temperature(cache.warmest)
    for hct in cache.hcts_by_hue[::30]:
        assert coldest <= raw_temperature(hct) <= warmest
    assert len(cache.hcts_by_hue) == 361
    assert len(cache.hcts_by_temp) == 362


def test_analogous_colors_put_input_in_the_middle() -> None:
    source = Hct.from_argb(0xFF0000FF)
    colors = TemperatureCache(source).analogous_colors()
    assert len(colors) == 5
    assert colors[2] == source
    three = TemperatureCache(source).analogous_colors(3, 6)
    assert len(three) == 3
    assert three[1] == source


def test_analogous_colors_of_white_repeat() -> None:
    white = Hct.from_argb(0xFFFFFFFF)
    colors = TemperatureCache(white).analogous_colors()
    assert {c.to_argb() for c in colors} == {0xFFFFFFFF}
