from __future__ import annotations

"""Helpers for handing resolved schemes to UI code.

This module exposes label/enum pairs for export formats and
:func:`export_scheme`, which converts a :class:`DynamicScheme` into a plain
``{role_name: color}`` mapping (ARGB, HEX or 0-255 RGB).
"""

from enum import Enum
from typing import Dict, List

from util.color import blue_from_argb, green_from_argb, hex_from_argb, red_from_argb

from .api import resolve_scheme
from .dynamiccolor import DynamicScheme


class ExportFormat(Enum):
    """Supported output formats for exported role colors."""

    ARGB = "argb"
    HEX = "hex"
    RGB_255 = "rgb_255"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("ARGB (int)", ExportFormat.ARGB),
    ("HEX", ExportFormat.HEX),
    ("RGB (0-255)", ExportFormat.RGB_255),
]


def export_scheme(scheme: DynamicScheme, fmt: ExportFormat | str = ExportFormat.HEX) -> Dict[str, object]:
    """Convert every role of ``scheme`` to the desired format."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    colors = resolve_scheme(scheme)
    if export_fmt == ExportFormat.ARGB:
        return colors
    if export_fmt == ExportFormat.HEX:
        return {name: hex_from_argb(argb) for name, argb in colors.items()}
    if export_fmt == ExportFormat.RGB_255:
        return {
            name: (red_from_argb(argb), green_from_argb(argb), blue_from_argb(argb))
            for name, argb in colors.items()
        }
    raise ValueError(f"Unsupported export format: {fmt}")


__all__ = ["ExportFormat", "EXPORT_FORMAT_OPTIONS", "export_scheme"]
