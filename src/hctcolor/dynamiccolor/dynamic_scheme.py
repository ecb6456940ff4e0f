from __future__ import annotations

"""Dynamic schemes: the palettes and settings every role is resolved from."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Sequence

from util.math_utils import sanitize_degrees_double

from ..hct import Hct
from ..palettes import TonalPalette
from .variant import Variant

if TYPE_CHECKING:
    from .dynamic_color import DynamicColor


def _default_error_palette() -> TonalPalette:
    return TonalPalette.from_hue_and_chroma(25.0, 84.0)


@dataclass(frozen=True, eq=False)
class DynamicScheme:
    """Source color, variant, mode and contrast level plus derived palettes.

    Immutable once built. Resolved role tones are memoised per instance,
    so resolving the whole role table costs one solve per role. Use
    :func:`dataclasses.replace` to derive a scheme with another contrast
    level or mode; the copy starts with an empty cache.

    Attributes
    ----------
    source_color_hct:
        The color the scheme was built from.
    variant:
        Style of the scheme.
    is_dark:
        Dark theme when True.
    contrast_level:
        -1.0 (reduced) to 1.0 (highest); 0.0 is the default, 0.5 medium.
    primary_palette, secondary_palette, tertiary_palette:
        Accent palettes.
    neutral_palette, neutral_variant_palette:
        Surface and outline palettes.
    error_palette:
        Defaults to hue 25, chroma 84.
    """

    source_color_hct: Hct
    variant: Variant
    is_dark: bool
    contrast_level: float
    primary_palette: TonalPalette
    secondary_palette: TonalPalette
    tertiary_palette: TonalPalette
    neutral_palette: TonalPalette
    neutral_variant_palette: TonalPalette
    error_palette: TonalPalette = field(default_factory=_default_error_palette)
    _tone_cache: Dict[str, float] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    @property
    def source_color_argb(self) -> int:
        return self.source_color_hct.to_argb()

    @staticmethod
    def get_rotated_hue(
        source_color: Hct, hues: Sequence[float], rotations: Sequence[float]
    ) -> float:
        """Rotate the source hue by the rotation of the range it falls in.

        Parameters
        ----------
        source_color:
            Color whose hue is rotated.
        hues:
            Ascending range boundaries, from 0 to 360.
        rotations:
            Rotation for each range. A single rotation applies to every hue.

        Returns
        -------
        float
            Rotated hue in [0, 360). A hue exactly on a boundary is returned
            unrotated.
        """
        source_hue = source_color.hue
        if len(rotations) == 1:
            return sanitize_degrees_double(source_hue + rotations[0])
        for i in range(len(hues) - 1):
            this_hue = hues[i]
            next_hue = hues[i + 1]
            if this_hue < source_hue < next_hue:
                return sanitize_degrees_double(source_hue + rotations[i])
        return source_hue

    def get_argb(self, role: "DynamicColor") -> int:
        """ARGB of ``role`` in this scheme."""
        return role.get_argb(self)

    def get_hct(self, role: "DynamicColor") -> Hct:
        return role.get_hct(self)


__all__ = ["DynamicScheme"]
