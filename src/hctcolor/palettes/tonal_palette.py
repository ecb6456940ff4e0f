from __future__ import annotations

"""Tonal palettes: one hue and chroma across the full tone range.

A :class:`TonalPalette` answers "what does this hue/chroma look like at tone
T" for any T in [0, 100]. Palettes built from a hue/chroma request also pick
a *key color*, the tone at which the requested chroma is best achieved.
"""

from typing import Dict

from ..hct import Hct

# Chroma probe used to measure the maximum chroma reachable at a tone.
_MAX_CHROMA_VALUE = 200.0


class KeyColor:
    """Finds the tone at which a hue/chroma pair is best represented.

    The search is a binary search over integer tones that prefers tones near
    50, where most hues reach their highest chroma. Maximum chroma per tone is
    memoized in this instance only.
    """

    def __init__(self, hue: float, requested_chroma: float) -> None:
        self.hue = hue
        self.requested_chroma = requested_chroma
        self._chroma_cache: Dict[int, float] = {}

    def create(self) -> Hct:
        """Return the key color.

        If the requested chroma is reachable, the result has that chroma at
        the reachable tone closest to 50. Otherwise the result is the tone
        with the highest chroma for the hue.
        """
        pivot_tone = 50
        tone_step_size = 1
        epsilon = 0.01

        lower_tone = 0
        upper_tone = 100
        while lower_tone < upper_tone:
            mid_tone = (lower_tone + upper_tone) // 2
            is_ascending = self._max_chroma(mid_tone) < self._max_chroma(mid_tone + tone_step_size)
            sufficient_chroma = self._max_chroma(mid_tone) >= self.requested_chroma - epsilon

            if sufficient_chroma:
                # Either range [lower_tone, mid_tone] or [mid_tone, upper_tone]
                # has the answer; keep the one closer to the pivot.
                if abs(lower_tone - pivot_tone) < abs(upper_tone - pivot_tone):
                    upper_tone = mid_tone
                else:
                    if lower_tone == mid_tone:
                        return Hct.from_hct(self.hue, self.requested_chroma, lower_tone)
                    lower_tone = mid_tone
            else:
                # Not enough chroma: move toward the peak of the chroma curve.
                if is_ascending:
                    lower_tone = mid_tone + tone_step_size
                else:
                    upper_tone = mid_tone

        return Hct.from_hct(self.hue, self.requested_chroma, lower_tone)

    def _max_chroma(self, tone: int) -> float:
        cached = self._chroma_cache.get(tone)
        if cached is not None:
            return cached
        chroma = Hct.from_hct(self.hue, _MAX_CHROMA_VALUE, tone).chroma
        self._chroma_cache[tone] = chroma
        return chroma


class TonalPalette:
    """Colors of a single hue and chroma at every tone.

    Attributes
    ----------
    hue:
        Hue of the palette in degrees.
    chroma:
        Requested chroma; tones where it is not achievable get less.
    key_color:
        The color that best represents the hue/chroma pair.
    """

    def __init__(self, hue: float, chroma: float, key_color: Hct) -> None:
        self.hue = hue
        self.chroma = chroma
        self.key_color = key_color
        self._cache: Dict[float, int] = {}

    @classmethod
    def from_argb(cls, argb: int) -> "TonalPalette":
        """Palette with the hue and chroma of ``argb``, which is its key color."""
        return cls.from_hct(Hct.from_argb(argb))

    @classmethod
    def from_hct(cls, hct: Hct) -> "TonalPalette":
        return cls(hct.hue, hct.chroma, hct)

    @classmethod
    def from_hue_and_chroma(cls, hue: float, chroma: float) -> "TonalPalette":
        """Palette for a hue/chroma request; the key color is searched for."""
        return cls(hue, chroma, KeyColor(hue, chroma).create())

    def get(self, tone: float) -> int:
        """ARGB of the palette at ``tone`` (0 is black, 100 is white)."""
        argb = self._cache.get(tone)
        if argb is None:
            argb = Hct.from_hct(self.hue, self.chroma, tone).to_argb()
            self._cache[tone] = argb
        return argb

    def get_hct(self, tone: float) -> Hct:
        return Hct.from_hct(self.hue, self.chroma, tone)

    def __repr__(self) -> str:
        return f"TonalPalette(hue={self.hue:.2f}, chroma={self.chroma:.2f}, key={self.key_color!r})"


__all__ = ["TonalPalette", "KeyColor"]
