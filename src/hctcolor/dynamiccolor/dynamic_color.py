from __future__ import annotations

"""Dynamic colors: UI roles whose tone depends on the scheme.

A :class:`DynamicColor` names a palette and a base tone, both functions of a
:class:`DynamicScheme`. Roles drawn on top of another role also name that
background and a :class:`ContrastCurve`; the resolved tone is then moved,
if needed, until it meets the curve's contrast ratio against the resolved
background tone. Roles that come in pairs (a container and its accent) name
a :class:`ToneDeltaPair` and are resolved together.

Backgrounds are referenced lazily, through functions, so role definitions
can refer to each other in any order; resolution itself always reaches a
background before its foreground.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional

from util.math_utils import clamp_double, round_half_up

from ..contrast import darker, darker_unsafe, lighter, lighter_unsafe, ratio_of_tones
from ..hct import Hct
from ..palettes import TonalPalette
from .contrast_curve import ContrastCurve
from .tone_delta_pair import ToneDeltaPair, TonePolarity

if TYPE_CHECKING:
    from .dynamic_scheme import DynamicScheme

logger = logging.getLogger(__name__)

PaletteFn = Callable[["DynamicScheme"], TonalPalette]
ToneFn = Callable[["DynamicScheme"], float]
ColorFn = Callable[["DynamicScheme"], "DynamicColor"]
PairFn = Callable[["DynamicScheme"], ToneDeltaPair]


def foreground_tone(bg_tone: float, ratio: float) -> float:
    """Tone whose contrast with ``bg_tone`` comes as close to ``ratio`` as possible.

    Light foregrounds are preferred on backgrounds below tone 60.
    """
    lighter_tone = lighter_unsafe(bg_tone, ratio)
    darker_tone = darker_unsafe(bg_tone, ratio)
    lighter_ratio = ratio_of_tones(lighter_tone, bg_tone)
    darker_ratio = ratio_of_tones(darker_tone, bg_tone)

    if tone_prefers_light_foreground(bg_tone):
        # Within 0.1 of each other and both short of the target: not worth
        # giving up the preferred light foreground.
        negligible_difference = (
            abs(lighter_ratio - darker_ratio) < 0.1
            and lighter_ratio < ratio
            and darker_ratio < ratio
        )
        if lighter_ratio >= ratio or lighter_ratio >= darker_ratio or negligible_difference:
            return lighter_tone
        return darker_tone
    if darker_ratio >= ratio or darker_ratio >= lighter_ratio:
        return darker_tone
    return lighter_tone


def enable_light_foreground(tone: float) -> float:
    """Move ``tone`` to 49 when white almost, but not quite, reaches 4.5:1 on it."""
    if tone_prefers_light_foreground(tone) and not tone_allows_light_foreground(tone):
        return 49.0
    return tone


def tone_prefers_light_foreground(tone: float) -> bool:
    """Whether people prefer a light foreground on ``tone``.

    Observed to hold up to about T60-70; T60 itself is excluded so the dark
    monochrome tertiary container (tone 60) is left alone.
    """
    return round_half_up(tone) < 60


def tone_allows_light_foreground(tone: float) -> bool:
    """Whether a lighter color can reach 4.5:1 against ``tone``."""
    return round_half_up(tone) <= 49


@dataclass(frozen=True, eq=False)
class DynamicColor:
    """A named UI color role.

    Attributes
    ----------
    name:
        Unique role name; also the memoisation key within a scheme.
    palette:
        Palette the role samples, as a function of the scheme.
    tone:
        Base tone before contrast adjustment.
    is_background:
        Whether other roles are drawn on top of this one. Backgrounds avoid
        the 50-59 tone zone.
    background:
        Role this one is drawn on, if any.
    second_background:
        Second role this one may be drawn on; contrast holds against both.
    contrast_curve:
        Minimum contrast ratio against ``background``. Required when a
        background is given.
    tone_delta_pair:
        Constraint shared with a sibling role. Requires a background.
    """

    name: str
    palette: PaletteFn
    tone: ToneFn
    is_background: bool = False
    background: Optional[ColorFn] = None
    second_background: Optional[ColorFn] = None
    contrast_curve: Optional[ContrastCurve] = None
    tone_delta_pair: Optional[PairFn] = None

    foreground_tone = staticmethod(foreground_tone)
    enable_light_foreground = staticmethod(enable_light_foreground)
    tone_prefers_light_foreground = staticmethod(tone_prefers_light_foreground)
    tone_allows_light_foreground = staticmethod(tone_allows_light_foreground)

    @classmethod
    def from_palette(cls, name: str, palette: PaletteFn, tone: ToneFn) -> "DynamicColor":
        """A role with no background and no contrast requirement."""
        return cls(name, palette, tone)

    def get_argb(self, scheme: "DynamicScheme") -> int:
        return self.palette(scheme).get(self.get_tone(scheme))

    def get_hct(self, scheme: "DynamicScheme") -> Hct:
        return Hct.from_argb(self.get_argb(scheme))

    def get_tone(self, scheme: "DynamicScheme") -> float:
        """Resolved tone of this role in ``scheme`` (memoised per scheme)."""
        cached = scheme._tone_cache.get(self.name)
        if cached is not None:
            return cached
        if self.tone_delta_pair is not None:
            answer = self._tone_of_pair(scheme, self.tone_delta_pair(scheme))
        else:
            answer = self._tone_of_single(scheme)
        scheme._tone_cache[self.name] = answer
        return answer

    # --- resolution -------------------------------------------------------------

    def _background_tone(self, scheme: "DynamicScheme") -> float:
        if self.background is None:
            raise ValueError(f"dynamic color '{self.name}' has no background")
        return self.background(scheme).get_tone(scheme)

    def _desired_ratio(self, color: "DynamicColor", scheme: "DynamicScheme") -> float:
        if color.contrast_curve is None:
            raise ValueError(f"dynamic color '{color.name}' has a background but no contrast curve")
        return color.contrast_curve.get(scheme.contrast_level)

    def _tone_of_pair(self, scheme: "DynamicScheme", pair: ToneDeltaPair) -> float:
        role_a = pair.role_a
        role_b = pair.role_b
        if self.name not in (role_a.name, role_b.name):
            raise ValueError(
                f"tone delta pair ({role_a.name}, {role_b.name}) does not include '{self.name}'"
            )
        delta = pair.delta
        polarity = pair.polarity
        decreasing_contrast = scheme.contrast_level < 0.0

        bg_tone = self._background_tone(scheme)

        a_is_nearer = (
            polarity == TonePolarity.NEARER
            or (polarity == TonePolarity.LIGHTER and not scheme.is_dark)
            or (polarity == TonePolarity.DARKER and scheme.is_dark)
        )
        nearer = role_a if a_is_nearer else role_b
        farther = role_b if a_is_nearer else role_a
        am_nearer = self.name == nearer.name
        expansion_dir = 1.0 if scheme.is_dark else -1.0

        # 1st round: solve each to its own minimum.
        n_contrast = self._desired_ratio(nearer, scheme)
        f_contrast = self._desired_ratio(farther, scheme)

        # A tone that is good enough is not adjusted.
        n_initial_tone = nearer.tone(scheme)
        if ratio_of_tones(bg_tone, n_initial_tone) >= n_contrast:
            n_tone = n_initial_tone
        else:
            n_tone = foreground_tone(bg_tone, n_contrast)
        f_initial_tone = farther.tone(scheme)
        if ratio_of_tones(bg_tone, f_initial_tone) >= f_contrast:
            f_tone = f_initial_tone
        else:
            f_tone = foreground_tone(bg_tone, f_contrast)

        if decreasing_contrast:
            # Reduced contrast: the bare minimum that still satisfies it.
            n_tone = foreground_tone(bg_tone, n_contrast)
            f_tone = foreground_tone(bg_tone, f_contrast)

        if (f_tone - n_tone) * expansion_dir < delta:
            # 2nd round: expand farther to match delta.
            f_tone = clamp_double(0.0, 100.0, n_tone + delta * expansion_dir)
            if (f_tone - n_tone) * expansion_dir < delta:
                # 3rd round: contract nearer to match delta.
                n_tone = clamp_double(0.0, 100.0, f_tone - delta * expansion_dir)

        # Keep out of the 50-59 zone.
        if 50.0 <= n_tone < 60.0:
            if expansion_dir > 0:
                n_tone = 60.0
                f_tone = max(f_tone, n_tone + delta * expansion_dir)
            else:
                n_tone = 49.0
                f_tone = min(f_tone, n_tone + delta * expansion_dir)
        elif 50.0 <= f_tone < 60.0:
            if pair.stay_together:
                if expansion_dir > 0:
                    n_tone = 60.0
                    f_tone = max(f_tone, n_tone + delta * expansion_dir)
                else:
                    n_tone = 49.0
                    f_tone = min(f_tone, n_tone + delta * expansion_dir)
            elif expansion_dir > 0:
                f_tone = 60.0
            else:
                f_tone = 49.0

        return n_tone if am_nearer else f_tone

    def _tone_of_single(self, scheme: "DynamicScheme") -> float:
        answer = self.tone(scheme)
        if self.background is None:
            return answer

        bg_tone = self._background_tone(scheme)
        desired_ratio = self._desired_ratio(self, scheme)

        if ratio_of_tones(bg_tone, answer) < desired_ratio:
            answer = foreground_tone(bg_tone, desired_ratio)
        if scheme.contrast_level < 0.0:
            answer = foreground_tone(bg_tone, desired_ratio)

        if self.is_background and 50.0 <= answer < 60.0:
            if ratio_of_tones(49.0, bg_tone) >= desired_ratio:
                answer = 49.0
            else:
                answer = 60.0

        if self.second_background is None:
            return answer

        # Two possible backgrounds: satisfy both, or pick the side that can.
        bg_tone_2 = self.second_background(scheme).get_tone(scheme)
        upper = max(bg_tone, bg_tone_2)
        lower = min(bg_tone, bg_tone_2)

        if (
            ratio_of_tones(upper, answer) >= desired_ratio
            and ratio_of_tones(lower, answer) >= desired_ratio
        ):
            return answer

        light_option = lighter(upper, desired_ratio)
        dark_option = darker(lower, desired_ratio)
        availables: List[float] = []
        if light_option != -1.0:
            availables.append(light_option)
        if dark_option != -1.0:
            availables.append(dark_option)

        logger.debug(
            "%s: dual background %.2f/%.2f, options light=%.2f dark=%.2f",
            self.name,
            bg_tone,
            bg_tone_2,
            light_option,
            dark_option,
        )
        if tone_prefers_light_foreground(bg_tone) or tone_prefers_light_foreground(bg_tone_2):
            return 100.0 if light_option < 0 else light_option
        if len(availables) == 1:
            return availables[0]
        return dark_option if availables else 0.0


__all__ = [
    "DynamicColor",
    "foreground_tone",
    "enable_light_foreground",
    "tone_prefers_light_foreground",
    "tone_allows_light_foreground",
]
