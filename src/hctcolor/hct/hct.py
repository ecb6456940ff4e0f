from __future__ import annotations

"""HCT (hue, chroma, tone) color representation.

HCT combines CAM16 hue and chroma with CIE L* tone. Tone is what makes the
space practical for design: a tone difference maps directly to a contrast
ratio, whatever the hue or chroma.

An :class:`Hct` always wraps a real sRGB color. Constructing one from HCT
coordinates (or changing a coordinate) runs the solver, which keeps hue and
tone and reduces chroma until the color fits in the sRGB gamut. The stored
hue/chroma/tone are then measured from the solved color, so they describe
what was actually achieved.
"""

from util.color import lstar_from_argb, lstar_from_y
from util.math_utils import round_half_up

from .cam16 import Cam16
from .solver import solve_to_argb
from .viewing_conditions import DEFAULT, ViewingConditions


class Hct:
    """A color in the HCT color space, backed by its ARGB value."""

    __slots__ = ("_argb", "_hue", "_chroma", "_tone")

    def __init__(self, argb: int) -> None:
        self._set_internal_state(argb)

    @classmethod
    def from_hct(cls, hue: float, chroma: float, tone: float) -> "Hct":
        """Create the in-gamut color closest to the given coordinates.

        Parameters
        ----------
        hue:
            Hue in degrees; normalized to [0, 360).
        chroma:
            Requested chroma. The result may have less, never more than
            achievable at the given hue and tone.
        tone:
            L* in [0, 100].
        """
        return cls(solve_to_argb(hue, chroma, tone))

    @classmethod
    def from_argb(cls, argb: int) -> "Hct":
        """Wrap an ARGB color; no solving is involved."""
        return cls(argb)

    # --- accessors ------------------------------------------------------------

    @property
    def hue(self) -> float:
        return self._hue

    @hue.setter
    def hue(self, new_hue: float) -> None:
        self.set_hue(new_hue)

    @property
    def chroma(self) -> float:
        return self._chroma

    @chroma.setter
    def chroma(self, new_chroma: float) -> None:
        self.set_chroma(new_chroma)

    @property
    def tone(self) -> float:
        return self._tone

    @tone.setter
    def tone(self, new_tone: float) -> None:
        self.set_tone(new_tone)

    def to_argb(self) -> int:
        return self._argb

    def set_hue(self, new_hue: float) -> None:
        """Re-solve with a new hue. Chroma may decrease to stay in gamut."""
        self._set_internal_state(solve_to_argb(new_hue, self._chroma, self._tone))

    def set_chroma(self, new_chroma: float) -> None:
        """Re-solve with a new chroma; the result may have less chroma than asked."""
        self._set_internal_state(solve_to_argb(self._hue, new_chroma, self._tone))

    def set_tone(self, new_tone: float) -> None:
        """Re-solve with a new tone. Chroma may decrease to stay in gamut."""
        self._set_internal_state(solve_to_argb(self._hue, self._chroma, new_tone))

    # --- derived colors -------------------------------------------------------

    def in_viewing_conditions(self, viewing_conditions: ViewingConditions) -> "Hct":
        """The color that, under default conditions, looks like this color does
        under ``viewing_conditions``.

        Useful for simulating how a color renders against a dark or light
        background (different background L*).
        """
        cam16 = Cam16.from_argb(self._argb)
        x, y, z = cam16.xyz_in_viewing_conditions(viewing_conditions)
        recast = Cam16.from_xyz_in_viewing_conditions(x, y, z, DEFAULT)
        return Hct.from_hct(recast.hue, recast.chroma, lstar_from_y(y))

    # --- dunder ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hct):
            return NotImplemented
        return self._argb == other._argb

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Hct(hue={round_half_up(self._hue)}, chroma={round_half_up(self._chroma)}, "
            f"tone={round_half_up(self._tone)}, argb=0x{self._argb:08x})"
        )

    def _set_internal_state(self, argb: int) -> None:
        self._argb = argb
        cam = Cam16.from_argb(argb)
        self._hue = cam.hue
        self._chroma = cam.chroma
        self._tone = lstar_from_argb(argb)


__all__ = ["Hct"]
