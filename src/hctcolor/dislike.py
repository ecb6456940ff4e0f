from __future__ import annotations

"""Detection and repair of universally disliked colors.

Color preference studies show a near-universal dislike of dark
yellow-greens, correlated with associations to biological waste and
rotting food (Palmer and Schloss, 2010). Such colors are lightened so they
read as likable.
"""

from util.math_utils import round_half_up

from .hct import Hct


def is_disliked(hct: Hct) -> bool:
    """True for dark, non-neutral yellow-greens."""
    hue_passes = 90.0 <= round_half_up(hct.hue) <= 111.0
    chroma_passes = round_half_up(hct.chroma) > 16.0
    tone_passes = round_half_up(hct.tone) < 65.0
    return hue_passes and chroma_passes and tone_passes


def fix_if_disliked(hct: Hct) -> Hct:
    """Return a lightened copy of a disliked color, else ``hct`` itself."""
    if is_disliked(hct):
        return Hct.from_hct(hct.hue, hct.chroma, 70.0)
    return hct


__all__ = ["is_disliked", "fix_if_disliked"]
