from __future__ import annotations

"""Celebi's two-stage quantizer: Wu seeds refined by WSMeans."""

import logging
from typing import Sequence

from util.color import is_opaque

from .wsmeans import MAX_COLORS, QuantizerResult, quantize_wsmeans
from .wu import quantize_wu

logger = logging.getLogger(__name__)


def quantize_celebi(pixels: Sequence[int], max_colors: int) -> QuantizerResult:
    """Quantize an image to at most ``max_colors`` representative colors.

    Translucent pixels are ignored. Wu's box cut provides deterministic
    seeds, which WSMeans then refines in L*a*b*.

    Parameters
    ----------
    pixels:
        ARGB pixels of the image, in any order.
    max_colors:
        Upper bound on the number of colors, capped at 256. 0 gives an
        empty result.
    """
    if max_colors <= 0 or len(pixels) == 0:
        return QuantizerResult()
    max_colors = min(max_colors, MAX_COLORS)

    opaque_pixels = [int(p) for p in pixels if is_opaque(int(p))]
    if not opaque_pixels:
        logger.debug("celebi: no opaque pixels among %d", len(pixels))
        return QuantizerResult()

    wu_result = quantize_wu(opaque_pixels, max_colors)
    return quantize_wsmeans(opaque_pixels, wu_result, max_colors)


__all__ = ["quantize_celebi"]
