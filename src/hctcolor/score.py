from __future__ import annotations

"""Ranking of image colors by their suitability as a theme source.

Colors are scored on how much of the image their hue neighbourhood covers
and on how close their chroma is to a lively target; the best-scoring
colors with sufficiently different hues are returned.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Tuple, Union

from util.math_utils import difference_degrees, round_half_up, sanitize_degrees_int

from .hct import Hct

logger = logging.getLogger(__name__)

TARGET_CHROMA = 48.0
WEIGHT_PROPORTION = 0.7
WEIGHT_CHROMA_ABOVE = 0.3
WEIGHT_CHROMA_BELOW = 0.1
CUTOFF_CHROMA = 5.0
CUTOFF_EXCITED_PROPORTION = 0.01


@dataclass(frozen=True)
class ScoreOptions:
    """Options of :func:`ranked_suggestions`.

    Attributes
    ----------
    desired:
        Maximum number of colors returned. 4 matches the Android wallpaper
        picker.
    fallback_color_argb:
        Returned alone when no input color is suitable (Google Blue).
    filter:
        Drop near-grayscale colors and hues that cover too little of the
        image.
    """

    desired: int = 4
    fallback_color_argb: int = 0xFF4285F4
    filter: bool = True

    def __post_init__(self) -> None:
        if self.desired < 0:
            raise ValueError(f"desired must be >= 0, got {self.desired}")


def ranked_suggestions(
    argb_to_population: Union[Mapping[int, int], Iterable[Tuple[int, int]]],
    options: ScoreOptions = ScoreOptions(),
) -> List[int]:
    """Rank colors for use as a theme source, best first.

    Parameters
    ----------
    argb_to_population:
        Colors and how many pixels each covers, as a mapping (for example
        ``QuantizerResult.color_to_count``) or as pairs.
    options:
        Ranking options.

    Returns
    -------
    list[int]
        Between 1 and ``options.desired`` ARGB colors (the fallback color
        when nothing qualifies). Chosen hues are at least 15 degrees apart;
        the separation starts at 90 and is relaxed until enough colors fit.
    """
    if isinstance(argb_to_population, Mapping):
        pairs: Iterable[Tuple[int, int]] = argb_to_population.items()
    else:
        pairs = argb_to_population

    colors_hct: List[Hct] = []
    hue_population = [0] * 360
    population_sum = 0.0
    for argb, population in pairs:
        hct = Hct.from_argb(argb)
        colors_hct.append(hct)
        hue_population[sanitize_degrees_int(int(math.floor(hct.hue)))] += population
        population_sum += population

    hue_excited_proportions = [0.0] * 360
    if population_sum > 0:
        for hue in range(360):
            proportion = hue_population[hue] / population_sum
            for i in range(hue - 14, hue + 16):
                hue_excited_proportions[sanitize_degrees_int(i)] += proportion

    scored: List[Tuple[Hct, float]] = []
    for hct in colors_hct:
        proportion = hue_excited_proportions[sanitize_degrees_int(round_half_up(hct.hue))]
        if options.filter and (
            hct.chroma < CUTOFF_CHROMA or proportion < CUTOFF_EXCITED_PROPORTION
        ):
            continue
        proportion_score = proportion * 100.0 * WEIGHT_PROPORTION
        chroma_weight = WEIGHT_CHROMA_BELOW if hct.chroma < TARGET_CHROMA else WEIGHT_CHROMA_ABOVE
        chroma_score = (hct.chroma - TARGET_CHROMA) * chroma_weight
        scored.append((hct, proportion_score + chroma_score))

    # Stable: equal scores keep input order.
    scored.sort(key=lambda item: item[1], reverse=True)

    chosen: List[Hct] = []
    for min_difference in range(90, 14, -1):
        chosen.clear()
        for hct, _ in scored:
            if not any(difference_degrees(hct.hue, c.hue) < min_difference for c in chosen):
                chosen.append(hct)
            if len(chosen) >= options.desired:
                break
        if len(chosen) >= options.desired:
            break

    if not chosen:
        logger.debug("no suitable color among %d; using fallback", len(colors_hct))
        return [options.fallback_color_argb]
    return [hct.to_argb() for hct in chosen]


__all__ = ["ScoreOptions", "ranked_suggestions"]
