from __future__ import annotations

"""ranked_suggestions のテスト。"""

import pytest

from hctcolor.score import ScoreOptions, ranked_suggestions


def test_prioritizes_chroma() -> None:
    population = {0xFF000000: 1, 0xFFFFFFFF: 1, 0xFF0000FF: 1}
    assert ranked_suggestions(population) == [0xFF0000FF]


def test_prioritizes_chroma_when_proportions_equal() -> None:
    population = {0xFFFF0000: 1, 0xFF00FF00: 1, 0xFF0000FF: 1}
    assert ranked_suggestions(population) == [0xFFFF0000, 0xFF00FF00, 0xFF0000FF]


def test_generates_fallback_when_no_colors_qualify() -> None:
    assert ranked_suggestions({0xFF000000: 1}) == [0xFF4285F4]


def test_custom_fallback() -> None:
    options = ScoreOptions(fallback_color_argb=0xFF123456)
    assert ranked_suggestions([], options) == [0xFF123456]


def test_dedupes_nearby_hues() -> None:
    population = {0xFF008772: 1, 0xFF318477: 1}
    assert ranked_suggestions(population) == [0xFF008772]


def test_maximizes_hue_distance() -> None:
    population = {0xFF008772: 1, 0xFF008587: 1, 0xFF007EBC: 1}
    assert ranked_suggestions(population, ScoreOptions(desired=2)) == [0xFF007EBC, 0xFF008772]


def test_accepts_pairs() -> None:
    pairs = [(0xFFFF0000, 1), (0xFF00FF00, 1), (0xFF0000FF, 1)]
    assert ranked_suggestions(pairs) == ranked_suggestions(dict(pairs))


def test_filter_off_keeps_grays() -> None:
    result = ranked_suggestions({0xFF000000: 1}, ScoreOptions(filter=False))
    assert result == [0xFF000000]


def test_small_proportions_are_filtered() -> None:
    population = {0xFF0000FF: 1000, 0xFFFF0000: 1}
    assert ranked_suggestions(population) == [0xFF0000FF]


def test_desired_limits_output() -> None:
    population = {0xFFFF0000: 1, 0xFF00FF00: 1, 0xFF0000FF: 1}
    assert len(ranked_suggestions(population, ScoreOptions(desired=1))) == 1


def test_negative_desired_rejected() -> None:
    with pytest.raises(ValueError):
        ScoreOptions(desired=-1)


class _WrappedHueHct:
    """Hct stand-in whose measured hue lands exactly on 360."""

    def __init__(self, argb: int) -> None:
        self.argb = argb
        self.hue = 360.0
        self.chroma = 60.0

    @classmethod
    def from_argb(cls, argb: int) -> "_WrappedHueHct":
        return cls(argb)

    def to_argb(self) -> int:
        return self.argb


def test_hue_of_360_wraps_into_histogram(monkeypatch: pytest.MonkeyPatch) -> None:
    import hctcolor.score as score_module

    monkeypatch.setattr(score_module, "Hct", _WrappedHueHct)
    assert ranked_suggestions({0xFFFF0000: 1}) == [0xFFFF0000]
