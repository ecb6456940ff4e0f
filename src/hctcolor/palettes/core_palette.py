from __future__ import annotations

"""Key palettes of a Material theme derived from a single source color."""

from dataclasses import dataclass

from ..hct import Hct
from .tonal_palette import TonalPalette


@dataclass(frozen=True)
class CorePalette:
    """The five key tonal palettes plus the error palette.

    Attributes
    ----------
    a1, a2, a3:
        Primary, secondary and tertiary accent palettes.
    n1, n2:
        Neutral and neutral-variant palettes.
    error:
        Palette used for error roles.
    """

    a1: TonalPalette
    a2: TonalPalette
    a3: TonalPalette
    n1: TonalPalette
    n2: TonalPalette
    error: TonalPalette

    @classmethod
    def of(cls, argb: int) -> "CorePalette":
        """Palettes with the standard Material chroma targets."""
        return cls._create(argb, is_content=False)

    @classmethod
    def content_of(cls, argb: int) -> "CorePalette":
        """Palettes that follow the source chroma, for content-based themes."""
        return cls._create(argb, is_content=True)

    @classmethod
    def _create(cls, argb: int, *, is_content: bool) -> "CorePalette":
        hct = Hct.from_argb(argb)
        hue = hct.hue
        chroma = hct.chroma
        if is_content:
            a1 = TonalPalette.from_hue_and_chroma(hue, chroma)
            a2 = TonalPalette.from_hue_and_chroma(hue, chroma / 3.0)
            a3 = TonalPalette.from_hue_and_chroma(hue + 60.0, chroma / 2.0)
            n1 = TonalPalette.from_hue_and_chroma(hue, min(chroma / 12.0, 4.0))
            n2 = TonalPalette.from_hue_and_chroma(hue, min(chroma / 6.0, 8.0))
        else:
            a1 = TonalPalette.from_hue_and_chroma(hue, max(48.0, chroma))
            a2 = TonalPalette.from_hue_and_chroma(hue, 16.0)
            a3 = TonalPalette.from_hue_and_chroma(hue + 60.0, 24.0)
            n1 = TonalPalette.from_hue_and_chroma(hue, 4.0)
            n2 = TonalPalette.from_hue_and_chroma(hue, 8.0)
        error = TonalPalette.from_hue_and_chroma(25.0, 84.0)
        return cls(a1=a1, a2=a2, a3=a3, n1=n1, n2=n2, error=error)


__all__ = ["CorePalette"]
