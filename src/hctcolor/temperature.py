from __future__ import annotations

"""Warm/cool color temperature and the colors it suggests.

:class:`TemperatureCache` computes, lazily and once per input color, the
colors of the same chroma and tone at every hue, ranks them by temperature,
and derives the complement and analogous colors of the input from that
ranking.
"""

import math
from functools import cached_property
from typing import Dict, List

from util.color import lab_from_argb
from util.math_utils import round_half_up, sanitize_degrees_double, sanitize_degrees_int

from .hct import Hct


def raw_temperature(color: Hct) -> float:
    """Warm/cool factor of a color; below 0 is cool, above 0 is warm.

    Implements Ou, Woodcock and Wright's formula on L*a*b* hue and chroma.
    The range is about -9.66 to 8.61 for Lab chroma up to 130.
    """
    _, a, b = lab_from_argb(color.to_argb())
    hue = sanitize_degrees_double(math.atan2(b, a) * 180.0 / math.pi)
    chroma = math.hypot(a, b)
    return -0.5 + 0.02 * math.pow(chroma, 1.07) * math.cos(
        sanitize_degrees_double(hue - 50.0) * math.pi / 180.0
    )


def _is_between(angle: float, a: float, b: float) -> bool:
    """Whether ``angle`` lies on the clockwise arc from ``a`` to ``b``."""
    if a < b:
        return a <= angle <= b
    return a <= angle or angle <= b


class TemperatureCache:
    """Temperature-based analogous and complementary colors of ``input``.

    Every color returned has the chroma and tone of the input, except where
    another hue cannot reach that chroma.
    """

    def __init__(self, input: Hct) -> None:
        self.input = input
        self._temps_by_argb: Dict[int, float] = {}

    # --- lazily computed tables ----------------------------------------------

    @cached_property
    def hcts_by_hue(self) -> List[Hct]:
        """Colors at hue 0..360 (inclusive) with the input's chroma and tone."""
        return [
            Hct.from_hct(float(hue), self.input.chroma, self.input.tone) for hue in range(361)
        ]

    @cached_property
    def hcts_by_temp(self) -> List[Hct]:
        """:attr:`hcts_by_hue` plus the input, coldest first."""
        hcts = list(self.hcts_by_hue)
        hcts.append(self.input)
        return sorted(hcts, key=self._temperature)

    @property
    def coldest(self) -> Hct:
        return self.hcts_by_temp[0]

    @property
    def warmest(self) -> Hct:
        return self.hcts_by_temp[-1]

    def _temperature(self, hct: Hct) -> float:
        argb = hct.to_argb()
        temp = self._temps_by_argb.get(argb)
        if temp is None:
            temp = raw_temperature(hct)
            self._temps_by_argb[argb] = temp
        return temp

    # --- queries --------------------------------------------------------------

    def relative_temperature(self, hct: Hct) -> float:
        """Temperature of ``hct`` on a 0 (coldest) to 1 (warmest) scale."""
        coldest_temp = self._temperature(self.coldest)
        temp_range = self._temperature(self.warmest) - coldest_temp
        difference_from_coldest = self._temperature(hct) - coldest_temp
        # White and black have a single color per tone, so no range.
        if temp_range == 0.0:
            return 0.5
        return difference_from_coldest / temp_range

    @cached_property
    def complement(self) -> Hct:
        """Color that is as warm as the input is cool, and vice versa.

        In art this is the color across the color wheel.
        """
        coldest_hue = self.coldest.hue
        coldest_temp = self._temperature(self.coldest)
        warmest_hue = self.warmest.hue
        warmest_temp = self._temperature(self.warmest)
        temp_range = warmest_temp - coldest_temp
        start_hue_is_coldest_to_warmest = _is_between(self.input.hue, coldest_hue, warmest_hue)
        start_hue = warmest_hue if start_hue_is_coldest_to_warmest else coldest_hue
        end_hue = coldest_hue if start_hue_is_coldest_to_warmest else warmest_hue
        direction_of_rotation = 1.0
        smallest_error = 1000.0
        answer = self.hcts_by_hue[round_half_up(self.input.hue)]

        if temp_range == 0.0:
            return answer

        complement_relative_temp = 1.0 - self.relative_temperature(self.input)
        # Closest color, in the other half of the wheel, to the inverse
        # relative temperature of the input.
        for hue_addend in range(361):
            hue = sanitize_degrees_double(start_hue + direction_of_rotation * hue_addend)
            if not _is_between(hue, start_hue, end_hue):
                continue
            possible_answer = self.hcts_by_hue[round_half_up(hue)]
            relative_temp = (self._temperature(possible_answer) - coldest_temp) / temp_range
            error = abs(complement_relative_temp - relative_temp)
            if error < smallest_error:
                smallest_error = error
                answer = possible_answer
        return answer

    def analogous_colors(self, count: int = 5, divisions: int = 12) -> List[Hct]:
        """Colors adjacent in hue and equidistant in temperature.

        Parameters
        ----------
        count:
            Number of colors to return, the input included. The input is in
            the middle of the list.
        divisions:
            Number of temperature steps around the whole wheel. With fewer
            divisions than ``count``, colors repeat.
        """
        start_hue = round_half_up(self.input.hue)
        start_hct = self.hcts_by_hue[start_hue]
        last_temp = self.relative_temperature(start_hct)

        all_colors: List[Hct] = [start_hct]

        absolute_total_temp_delta = 0.0
        for i in range(360):
            hue = sanitize_degrees_int(start_hue + i)
            temp = self.relative_temperature(self.hcts_by_hue[hue])
            absolute_total_temp_delta += abs(temp - last_temp)
            last_temp = temp

        hue_addend = 1
        temp_step = absolute_total_temp_delta / float(divisions)
        total_temp_delta = 0.0
        last_temp = self.relative_temperature(start_hct)
        while len(all_colors) < divisions:
            hue = sanitize_degrees_int(start_hue + hue_addend)
            hct = self.hcts_by_hue[hue]
            temp = self.relative_temperature(hct)
            total_temp_delta += abs(temp - last_temp)

            desired_total_temp_delta_for_index = len(all_colors) * temp_step
            index_satisfied = total_temp_delta >= desired_total_temp_delta_for_index
            index_addend = 1
            # Keep adding this hue while it satisfies further indices; colors
            # with no temperature spread (white, black) repeat this way.
            while index_satisfied and len(all_colors) < divisions:
                all_colors.append(hct)
                desired_total_temp_delta_for_index = (len(all_colors) + index_addend) * temp_step
                index_satisfied = total_temp_delta >= desired_total_temp_delta_for_index
                index_addend += 1
            last_temp = temp
            hue_addend += 1

            if hue_addend > 360:
                while len(all_colors) < divisions:
                    all_colors.append(hct)
                break

        answers: List[Hct] = [self.input]

        ccw_count = int(math.floor((count - 1.0) / 2.0))
        for i in range(1, ccw_count + 1):
            answers.insert(0, all_colors[(-i) % len(all_colors)])

        cw_count = count - ccw_count - 1
        for i in range(1, cw_count + 1):
            answers.append(all_colors[i % len(all_colors)])

        return answers


__all__ = ["TemperatureCache", "raw_temperature"]
