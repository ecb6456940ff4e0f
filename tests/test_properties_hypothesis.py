import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, settings, strategies as st  # type: ignore

from hctcolor.contrast import darker, lighter, ratio_of_tones
from hctcolor.dynamiccolor import ContrastCurve
from hctcolor.hct import Cam16, Hct, solve_to_argb
from hctcolor.score import ScoreOptions, ranked_suggestions
from util.color import lstar_from_argb
from util.math_utils import difference_degrees

tones = st.floats(0.0, 100.0, allow_nan=False)
ratios = st.floats(1.0, 21.0, allow_nan=False)


@settings(max_examples=300, deadline=None)
@given(index=st.integers(min_value=0, max_value=0xFFFFFF))
def test_solver_round_trip(index):
    argb = 0xFF000000 | index
    cam = Cam16.from_argb(argb)
    assert solve_to_argb(cam.hue, cam.chroma, lstar_from_argb(argb)) == argb


@settings(max_examples=100, deadline=None)
@given(
    hue=st.floats(0.0, 360.0, allow_nan=False),
    chroma=st.floats(0.0, 200.0, allow_nan=False),
    tone=tones,
)
def test_from_hct_stays_in_gamut(hue, chroma, tone):
    hct = Hct.from_hct(hue, chroma, tone)
    assert hct.to_argb() >> 24 == 0xFF
    assert 0.0 <= hct.tone <= 100.0
    assert hct.chroma >= 0.0
    assert Hct.from_argb(hct.to_argb()) == hct


@given(a=tones, b=tones)
def test_ratio_is_symmetric_and_bounded(a, b):
    r = ratio_of_tones(a, b)
    assert r == ratio_of_tones(b, a)
    assert 1.0 <= r <= 21.0 + 1e-9


@given(tone=tones, ratio=ratios)
def test_lighter_and_darker_meet_ratio_or_signal(tone, ratio):
    for result in (lighter(tone, ratio), darker(tone, ratio)):
        if result == -1.0:
            continue
        assert 0.0 <= result <= 100.0
        assert ratio_of_tones(tone, result) >= ratio - 0.04


@given(level=st.floats(-1.0, 1.0, allow_nan=False))
def test_contrast_curve_stays_within_anchors(level):
    curve = ContrastCurve(3.0, 4.5, 7.0, 11.0)
    assert 3.0 <= curve.get(level) <= 11.0


@settings(max_examples=50, deadline=None)
@given(
    colors=st.lists(
        st.integers(min_value=0, max_value=0xFFFFFF), min_size=1, max_size=12, unique=True
    )
)
def test_ranked_suggestions_are_distinct_hues(colors):
    population = [(0xFF000000 | c, 1) for c in colors]
    result = ranked_suggestions(population, ScoreOptions(filter=False))
    assert 1 <= len(result) <= 4
    hues = [Hct.from_argb(argb).hue for argb in result]
    for i, a in enumerate(hues):
        for b in hues[i + 1 :]:
            assert difference_degrees(a, b) >= 15.0
