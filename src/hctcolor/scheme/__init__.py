"""Ready-made dynamic schemes, one constructor per variant."""

from .variants import (
    scheme_content,
    scheme_expressive,
    scheme_fidelity,
    scheme_fruit_salad,
    scheme_monochrome,
    scheme_neutral,
    scheme_rainbow,
    scheme_tonal_spot,
    scheme_vibrant,
)

__all__ = [
    "scheme_tonal_spot",
    "scheme_vibrant",
    "scheme_expressive",
    "scheme_fruit_salad",
    "scheme_neutral",
    "scheme_rainbow",
    "scheme_monochrome",
    "scheme_fidelity",
    "scheme_content",
]
