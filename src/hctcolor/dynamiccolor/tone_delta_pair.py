from __future__ import annotations

"""Tone separation constraints between two related roles."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .dynamic_color import DynamicColor


class TonePolarity(Enum):
    """How ``role_a`` relates to ``role_b`` in a :class:`ToneDeltaPair`.

    ``LIGHTER``/``DARKER`` are absolute; ``NEARER``/``FARTHER`` are relative
    to the shared background.
    """

    DARKER = auto()
    LIGHTER = auto()
    NEARER = auto()
    FARTHER = auto()


@dataclass(frozen=True)
class ToneDeltaPair:
    """Two roles whose tones must differ by at least ``delta``.

    Attributes
    ----------
    role_a, role_b:
        The two roles. Both must share the same background.
    delta:
        Required tone difference.
    polarity:
        Which of the two sits nearer the background, or which is lighter.
    stay_together:
        When the farther role lands in the 50-59 tone zone, move both roles
        out of it rather than only the farther one.
    """

    role_a: "DynamicColor"
    role_b: "DynamicColor"
    delta: float
    polarity: TonePolarity
    stay_together: bool


__all__ = ["ToneDeltaPair", "TonePolarity"]
