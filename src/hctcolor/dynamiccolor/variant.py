from __future__ import annotations

"""Scheme variants: the ways a source color is turned into five palettes."""

from enum import Enum, auto


class Variant(Enum):
    """Theme style of a :class:`DynamicScheme`."""

    MONOCHROME = auto()
    NEUTRAL = auto()
    TONAL_SPOT = auto()
    VIBRANT = auto()
    EXPRESSIVE = auto()
    FIDELITY = auto()
    CONTENT = auto()
    RAINBOW = auto()
    FRUIT_SALAD = auto()

    @classmethod
    def from_name(cls, name: str) -> "Variant":
        """Look a variant up by name, ignoring case, "-" and spaces."""
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError as e:
            raise ValueError(f"Unknown scheme variant: {name}") from e


__all__ = ["Variant"]
