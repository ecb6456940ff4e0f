from __future__ import annotations

"""The Material role table.

Each public function returns the :class:`DynamicColor` of one role. Roles
are cheap descriptors; build them on demand and resolve them against a
:class:`DynamicScheme` with ``role.get_argb(scheme)``.
"""

from typing import Callable, List

from ..dislike import fix_if_disliked
from ..hct import Hct
from .contrast_curve import ContrastCurve
from .dynamic_color import DynamicColor, foreground_tone
from .dynamic_scheme import DynamicScheme
from .tone_delta_pair import ToneDeltaPair, TonePolarity
from .variant import Variant


def is_fidelity(scheme: DynamicScheme) -> bool:
    return scheme.variant in (Variant.FIDELITY, Variant.CONTENT)


def is_monochrome(scheme: DynamicScheme) -> bool:
    return scheme.variant == Variant.MONOCHROME


def find_desired_chroma_by_tone(
    hue: float, chroma: float, tone: float, by_decreasing_tone: bool
) -> float:
    """Walk tone away from ``tone`` until ``chroma`` is (nearly) reachable.

    Stops when the chroma is within 0.4 of the request or starts falling
    again. Returns the tone reached.
    """
    answer = tone
    closest_to_chroma = Hct.from_hct(hue, chroma, tone)
    if closest_to_chroma.chroma < chroma:
        chroma_peak = closest_to_chroma.chroma
        while closest_to_chroma.chroma < chroma:
            answer += -1.0 if by_decreasing_tone else 1.0
            potential_solution = Hct.from_hct(hue, chroma, answer)
            if chroma_peak > potential_solution.chroma:
                break
            if abs(potential_solution.chroma - chroma) < 0.4:
                break
            potential_delta = abs(potential_solution.chroma - chroma)
            current_delta = abs(closest_to_chroma.chroma - chroma)
            if potential_delta < current_delta:
                closest_to_chroma = potential_solution
            chroma_peak = max(chroma_peak, potential_solution.chroma)
    return answer


def highest_surface(scheme: DynamicScheme) -> DynamicColor:
    return surface_bright() if scheme.is_dark else surface_dim()


# --- palette key colors ---------------------------------------------------------


def primary_palette_key_color() -> DynamicColor:
    return DynamicColor.from_palette(
        "primary_palette_key_color",
        lambda s: s.primary_palette,
        lambda s: s.primary_palette.key_color.tone,
    )


def secondary_palette_key_color() -> DynamicColor:
    return DynamicColor.from_palette(
        "secondary_palette_key_color",
        lambda s: s.secondary_palette,
        lambda s: s.secondary_palette.key_color.tone,
    )


def tertiary_palette_key_color() -> DynamicColor:
    return DynamicColor.from_palette(
        "tertiary_palette_key_color",
        lambda s: s.tertiary_palette,
        lambda s: s.tertiary_palette.key_color.tone,
    )


def neutral_palette_key_color() -> DynamicColor:
    return DynamicColor.from_palette(
        "neutral_palette_key_color",
        lambda s: s.neutral_palette,
        lambda s: s.neutral_palette.key_color.tone,
    )


def neutral_variant_palette_key_color() -> DynamicColor:
    return DynamicColor.from_palette(
        "neutral_variant_palette_key_color",
        lambda s: s.neutral_variant_palette,
        lambda s: s.neutral_variant_palette.key_color.tone,
    )


# --- surfaces -------------------------------------------------------------------


def background() -> DynamicColor:
    return DynamicColor(
        "background",
        lambda s: s.neutral_palette,
        lambda s: 6.0 if s.is_dark else 98.0,
        is_background=True,
    )


def on_background() -> DynamicColor:
    return DynamicColor(
        "on_background",
        lambda s: s.neutral_palette,
        lambda s: 90.0 if s.is_dark else 10.0,
        background=lambda s: background(),
        contrast_curve=ContrastCurve(3.0, 3.0, 4.5, 7.0),
    )


def surface() -> DynamicColor:
    return DynamicColor(
        "surface",
        lambda s: s.neutral_palette,
        lambda s: 6.0 if s.is_dark else 98.0,
        is_background=True,
    )


def surface_dim() -> DynamicColor:
    return DynamicColor(
        "surface_dim",
        lambda s: s.neutral_palette,
        lambda s: 6.0 if s.is_dark else ContrastCurve(87.0, 87.0, 80.0, 75.0).get(s.contrast_level),
        is_background=True,
    )


def surface_bright() -> DynamicColor:
    return DynamicColor(
        "surface_bright",
        lambda s: s.neutral_palette,
        lambda s: ContrastCurve(24.0, 24.0, 29.0, 34.0).get(s.contrast_level) if s.is_dark else 98.0,
        is_background=True,
    )


def surface_container_lowest() -> DynamicColor:
    return DynamicColor(
        "surface_container_lowest",
        lambda s: s.neutral_palette,
        lambda s: ContrastCurve(4.0, 4.0, 2.0, 0.0).get(s.contrast_level) if s.is_dark else 100.0,
        is_background=True,
    )


def _surface_container_tone(dark: ContrastCurve, light: ContrastCurve) -> Callable[[DynamicScheme], float]:
    return lambda s: (dark if s.is_dark else light).get(s.contrast_level)


def surface_container_low() -> DynamicColor:
    return DynamicColor(
        "surface_container_low",
        lambda s: s.neutral_palette,
        _surface_container_tone(ContrastCurve(10, 10, 11, 12), ContrastCurve(96, 96, 96, 95)),
        is_background=True,
    )


def surface_container() -> DynamicColor:
    return DynamicColor(
        "surface_container",
        lambda s: s.neutral_palette,
        _surface_container_tone(ContrastCurve(12, 12, 16, 20), ContrastCurve(94, 94, 92, 90)),
        is_background=True,
    )


def surface_container_high() -> DynamicColor:
    return DynamicColor(
        "surface_container_high",
        lambda s: s.neutral_palette,
        _surface_container_tone(ContrastCurve(17, 17, 21, 25), ContrastCurve(92, 92, 88, 85)),
        is_background=True,
    )


def surface_container_highest() -> DynamicColor:
    return DynamicColor(
        "surface_container_highest",
        lambda s: s.neutral_palette,
        _surface_container_tone(ContrastCurve(22, 22, 26, 30), ContrastCurve(90, 90, 84, 80)),
        is_background=True,
    )


def on_surface() -> DynamicColor:
    return DynamicColor(
        "on_surface",
        lambda s: s.neutral_palette,
        lambda s: 90.0 if s.is_dark else 10.0,
        background=highest_surface,
        contrast_curve=ContrastCurve(4.5, 7.0, 11.0, 21.0),
    )


def surface_variant() -> DynamicColor:
    return DynamicColor(
        "surface_variant",
        lambda s: s.neutral_variant_palette,
        lambda s: 30.0 if s.is_dark else 90.0,
        is_background=True,
    )


def on_surface_variant() -> DynamicColor:
    return DynamicColor(
        "on_surface_variant",
        lambda s: s.neutral_variant_palette,
        lambda s: 80.0 if s.is_dark else 30.0,
        background=highest_surface,
        contrast_curve=ContrastCurve(3.0, 4.5, 7.0, 11.0),
    )


def inverse_surface() -> DynamicColor:
    return DynamicColor(
        "inverse_surface",
        lambda s: s.neutral_palette,
        lambda s: 90.0 if s.is_dark else 20.0,
    )


def inverse_on_surface() -> DynamicColor:
    return DynamicColor(
        "inverse_on_surface",
        lambda s: s.neutral_palette,
        lambda s: 20.0 if s.is_dark else 95.0,
        background=lambda s: inverse_surface(),
        contrast_curve=ContrastCurve(4.5, 7.0, 11.0, 21.0),
    )


def outline() -> DynamicColor:
    return DynamicColor(
        "outline",
        lambda s: s.neutral_variant_palette,
        lambda s: 60.0 if s.is_dark else 50.0,
        background=highest_surface,
        contrast_curve=ContrastCurve(1.5, 3.0, 4.5, 7.0),
    )


def outline_variant() -> DynamicColor:
    return DynamicColor(
        "outline_variant",
        lambda s: s.neutral_variant_palette,
        lambda s: 30.0 if s.is_dark else 80.0,
        background=highest_surface,
        contrast_curve=ContrastCurve(1.0, 1.0, 3.0, 4.5),
    )


def shadow() -> DynamicColor:
    return DynamicColor("shadow", lambda s: s.neutral_palette, lambda s: 0.0)


def scrim() -> DynamicColor:
    return DynamicColor("scrim", lambda s: s.neutral_palette, lambda s: 0.0)


def surface_tint() -> DynamicColor:
    return DynamicColor(
        "surface_tint",
        lambda s: s.primary_palette,
        lambda s: 80.0 if s.is_dark else 40.0,
        is_background=True,
    )


# --- primary --------------------------------------------------------------------


def _primary_pair(s: DynamicScheme) -> ToneDeltaPair:
    return ToneDeltaPair(primary_container(), primary(), 10.0, TonePolarity.NEARER, False)


def primary() -> DynamicColor:
    def tone(s: DynamicScheme) -> float:
        if is_monochrome(s):
            return 100.0 if s.is_dark else 0.0
        return 80.0 if s.is_dark else 40.0

    return DynamicColor(
        "primary",
        lambda s: s.primary_palette,
        tone,
        is_background=True,
        background=highest_surface,
        contrast_curve=ContrastCurve(3.0, 4.5, 7.0, 7.0),
        tone_delta_pair=_primary_pair,
    )


def on_primary() -> DynamicColor:
    def tone(s: DynamicScheme) -> float:
        if is_monochrome(s):
            return 10.0 if s.is_dark else 90.0
        return 20.0 if s.is_dark else 100.0

    return DynamicColor(
        "on_primary",
        lambda s: s.primary_palette,
        tone,
        background=lambda s: primary(),
        contrast_curve=ContrastCurve(4.5, 7.0, 11.0, 21.0),
    )


def primary_container() -> DynamicColor:
    def tone(s: DynamicScheme) -> float:
        if is_fidelity(s):
            return s.source_color_hct.tone
        if is_monochrome(s):
            return 85.0 if s.is_dark else 25.0
        return 30.0 if s.is_dark else 90.0

    return DynamicColor(
        "primary_container",
        lambda s: s.primary_palette,
        tone,
        is_background=True,
        background=highest_surface,
        contrast_curve=ContrastCurve(1.0, 1.0, 3.0, 4.5),
        tone_delta_pair=_primary_pair,
    )


def on_primary_container() -> DynamicColor:
    def tone(s: DynamicScheme) -> float:
        if is_fidelity(s):
            return foreground_tone(primary_container().tone(s), 4.5)
        if is_monochrome(s):
            return 0.0 if s.is_dark else 100.0
        return 90.0 if s.is_dark else 30.0

    return DynamicColor(
        "on_primary_container",
        lambda s: s.primary_palette,
        tone,
        background=lambda s: primary_container(),
        contrast_curve=ContrastCurve(3.0, 4.5, 7.0, 11.0),
    )


def inverse_primary() -> DynamicColor:
    return DynamicColor(
        "inverse_primary",
        lambda s: s.primary_palette,
        lambda s: 40.0 if s.is_dark else 80.0,
        background=lambda s: inverse_surface(),
        contrast_curve=ContrastCurve(3.0, 4.5, 7.0, 7.0),
    )


# --- secondary ------------------------------------------------------------------


def _secondary_pair(s: DynamicScheme) -> ToneDeltaPair:
    return ToneDeltaPair(secondary_container(), secondary(), 10.0, TonePolarity.NEARER, False)


def secondary() -> DynamicColor:
    return DynamicColor(
        "secondary",
        lambda s: s.secondary_palette,
        lambda s: 80.0 if s.is_dark else 40.0,
        is_background=True,
        background=highest_surface,
        contrast_curve=ContrastCurve(3.0, 4.5, 7.0, 7.0),
        tone_delta_pair=_secondary_pair,
    )


def on_secondary() -> DynamicColor:
    def tone(s: DynamicScheme) -> float:
        if is_monochrome(s):
            return 10.0 if s.is_dark else 100.0
        return 20.0 if s.is_dark else 100.0

    return DynamicColor(
        "on_secondary",
        lambda s: s.secondary_palette,
        tone,
        background=lambda s: secondary(),
        contrast_curve=ContrastCurve(4.5, 7.0, 11.0, 21.0),
    )


def secondary_container() -> DynamicColor:
    def tone(s: DynamicScheme) -> float:
        initial_tone = 30.0 if s.is_dark else 90.0
        if is_monochrome(s):
            return 30.0 if s.is_dark else 85.0
        if not is_fidelity(s):
            return initial_tone
        return find_desired_chroma_by_tone(
            s.secondary_palette.hue, s.secondary_palette.chroma, initial_tone, not s.is_dark
        )

    return DynamicColor(
        "secondary_container",
        lambda s: s.secondary_palette,
        tone,
        is_background=True,
        background=highest_surface,
        contrast_curve=ContrastCurve(1.0, 1.0, 3.0, 4.5),
        tone_delta_pair=_secondary_pair,
    )


def on_secondary_container() -> DynamicColor:
    def tone(s: DynamicScheme) -> float:
        if is_monochrome(s):
            return 90.0 if s.is_dark else 10.0
        if not is_fidelity(s):
            return 90.0 if s.is_dark else 30.0
        return foreground_tone(secondary_container().tone(s), 4.5)

    return DynamicColor(
        "on_secondary_container",
        lambda s: s.secondary_palette,
        tone,
        background=lambda s: secondary_container(),
        contrast_curve=ContrastCurve(3.0, 4.5, 7.0, 11.0),
    )


# --- tertiary -------------------------------------------------------------------


def _tertiary_pair(s: DynamicScheme) -> ToneDeltaPair:
    return ToneDeltaPair(tertiary_container(), tertiary(), 10.0, TonePolarity.NEARER, False)


def tertiary() -> DynamicColor:
    def tone(s: DynamicScheme) -> float:
        if is_monochrome(s):
            return 90.0 if s.is_dark else 25.0
        return 80.0 if s.is_dark else 40.0

    return DynamicColor(
        "tertiary",
        lambda s: s.tertiary_palette,
        tone,
        is_background=True,
        background=highest_surface,
        contrast_curve=ContrastCurve(3.0, 4.5, 7.0, 7.0),
        tone_delta_pair=_tertiary_pair,
    )


def on_tertiary() -> DynamicColor:
    def tone(s: DynamicScheme) -> float:
        if is_monochrome(s):
            return 10.0 if s.is_dark else 90.0
        return 20.0 if s.is_dark else 100.0

    return DynamicColor(
        "on_tertiary",
        lambda s: s.tertiary_palette,
        tone,
        background=lambda s: tertiary(),
        contrast_curve=ContrastCurve(4.5, 7.0, 11.0, 21.0),
    )


def tertiary_container() -> DynamicColor:
    def tone(s: DynamicScheme) -> float:
        if is_monochrome(s):
            return 60.0 if s.is_dark else 49.0
        if not is_fidelity(s):
            return 30.0 if s.is_dark else 90.0
        proposed = s.tertiary_palette.get_hct(s.source_color_hct.tone)
        return fix_if_disliked(proposed).tone

    return DynamicColor(
        "tertiary_container",
        lambda s: s.tertiary_palette,
        tone,
        is_background=True,
        background=highest_surface,
        contrast_curve=ContrastCurve(1.0, 1.0, 3.0, 4.5),
        tone_delta_pair=_tertiary_pair,
    )


def on_tertiary_container() -> DynamicColor:
    def tone(s: DynamicScheme) -> float:
        if is_monochrome(s):
            return 0.0 if s.is_dark else 100.0
        if not is_fidelity(s):
            return 90.0 if s.is_dark else 30.0
        return foreground_tone(tertiary_container().tone(s), 4.5)

    return DynamicColor(
        "on_tertiary_container",
        lambda s: s.tertiary_palette,
        tone,
        background=lambda s: tertiary_container(),
        contrast_curve=ContrastCurve(3.0, 4.5, 7.0, 11.0),
    )


# --- error ----------------------------------------------------------------------


def _error_pair(s: DynamicScheme) -> ToneDeltaPair:
    return ToneDeltaPair(error_container(), error(), 10.0, TonePolarity.NEARER, False)


def error() -> DynamicColor:
    return DynamicColor(
        "error",
        lambda s: s.error_palette,
        lambda s: 80.0 if s.is_dark else 40.0,
        is_background=True,
        background=highest_surface,
        contrast_curve=ContrastCurve(3.0, 4.5, 7.0, 7.0),
        tone_delta_pair=_error_pair,
    )


def on_error() -> DynamicColor:
    return DynamicColor(
        "on_error",
        lambda s: s.error_palette,
        lambda s: 20.0 if s.is_dark else 100.0,
        background=lambda s: error(),
        contrast_curve=ContrastCurve(4.5, 7.0, 11.0, 21.0),
    )


def error_container() -> DynamicColor:
    return DynamicColor(
        "error_container",
        lambda s: s.error_palette,
        lambda s: 30.0 if s.is_dark else 90.0,
        is_background=True,
        background=highest_surface,
        contrast_curve=ContrastCurve(1.0, 1.0, 3.0, 4.5),
        tone_delta_pair=_error_pair,
    )


def on_error_container() -> DynamicColor:
    def tone(s: DynamicScheme) -> float:
        if is_monochrome(s):
            return 90.0 if s.is_dark else 10.0
        return 90.0 if s.is_dark else 30.0

    return DynamicColor(
        "on_error_container",
        lambda s: s.error_palette,
        tone,
        background=lambda s: error_container(),
        contrast_curve=ContrastCurve(3.0, 4.5, 7.0, 11.0),
    )


# --- fixed ----------------------------------------------------------------------
# Fixed roles keep the same tone in light and dark themes.


def _primary_fixed_pair(s: DynamicScheme) -> ToneDeltaPair:
    return ToneDeltaPair(primary_fixed(), primary_fixed_dim(), 10.0, TonePolarity.LIGHTER, True)


def primary_fixed() -> DynamicColor:
    return DynamicColor(
        "primary_fixed",
        lambda s: s.primary_palette,
        lambda s: 40.0 if is_monochrome(s) else 90.0,
        is_background=True,
        background=highest_surface,
        contrast_curve=ContrastCurve(1.0, 1.0, 3.0, 4.5),
        tone_delta_pair=_primary_fixed_pair,
    )


def primary_fixed_dim() -> DynamicColor:
    return DynamicColor(
        "primary_fixed_dim",
        lambda s: s.primary_palette,
        lambda s: 30.0 if is_monochrome(s) else 80.0,
        is_background=True,
        background=highest_surface,
        contrast_curve=ContrastCurve(1.0, 1.0, 3.0, 4.5),
        tone_delta_pair=_primary_fixed_pair,
    )


def on_primary_fixed() -> DynamicColor:
    return DynamicColor(
        "on_primary_fixed",
        lambda s: s.primary_palette,
        lambda s: 100.0 if is_monochrome(s) else 10.0,
        background=lambda s: primary_fixed_dim(),
        second_background=lambda s: primary_fixed(),
        contrast_curve=ContrastCurve(4.5, 7.0, 11.0, 21.0),
    )


def on_primary_fixed_variant() -> DynamicColor:
    return DynamicColor(
        "on_primary_fixed_variant",
        lambda s: s.primary_palette,
        lambda s: 90.0 if is_monochrome(s) else 30.0,
        background=lambda s: primary_fixed_dim(),
        second_background=lambda s: primary_fixed(),
        contrast_curve=ContrastCurve(3.0, 4.5, 7.0, 11.0),
    )


def _secondary_fixed_pair(s: DynamicScheme) -> ToneDeltaPair:
    return ToneDeltaPair(
        secondary_fixed(), secondary_fixed_dim(), 10.0, TonePolarity.LIGHTER, True
    )


def secondary_fixed() -> DynamicColor:
    return DynamicColor(
        "secondary_fixed",
        lambda s: s.secondary_palette,
        lambda s: 80.0 if is_monochrome(s) else 90.0,
        is_background=True,
        background=highest_surface,
        contrast_curve=ContrastCurve(1.0, 1.0, 3.0, 4.5),
        tone_delta_pair=_secondary_fixed_pair,
    )


def secondary_fixed_dim() -> DynamicColor:
    return DynamicColor(
        "secondary_fixed_dim",
        lambda s: s.secondary_palette,
        lambda s: 70.0 if is_monochrome(s) else 80.0,
        is_background=True,
        background=highest_surface,
        contrast_curve=ContrastCurve(1.0, 1.0, 3.0, 4.5),
        tone_delta_pair=_secondary_fixed_pair,
    )


def on_secondary_fixed() -> DynamicColor:
    return DynamicColor(
        "on_secondary_fixed",
        lambda s: s.secondary_palette,
        lambda s: 10.0,
        background=lambda s: secondary_fixed_dim(),
        second_background=lambda s: secondary_fixed(),
        contrast_curve=ContrastCurve(4.5, 7.0, 11.0, 21.0),
    )


def on_secondary_fixed_variant() -> DynamicColor:
    return DynamicColor(
        "on_secondary_fixed_variant",
        lambda s: s.secondary_palette,
        lambda s: 25.0 if is_monochrome(s) else 30.0,
        background=lambda s: secondary_fixed_dim(),
        second_background=lambda s: secondary_fixed(),
        contrast_curve=ContrastCurve(3.0, 4.5, 7.0, 11.0),
    )


def _tertiary_fixed_pair(s: DynamicScheme) -> ToneDeltaPair:
    return ToneDeltaPair(tertiary_fixed(), tertiary_fixed_dim(), 10.0, TonePolarity.LIGHTER, True)


def tertiary_fixed() -> DynamicColor:
    return DynamicColor(
        "tertiary_fixed",
        lambda s: s.tertiary_palette,
        lambda s: 40.0 if is_monochrome(s) else 90.0,
        is_background=True,
        background=highest_surface,
        contrast_curve=ContrastCurve(1.0, 1.0, 3.0, 4.5),
        tone_delta_pair=_tertiary_fixed_pair,
    )


def tertiary_fixed_dim() -> DynamicColor:
    return DynamicColor(
        "tertiary_fixed_dim",
        lambda s: s.tertiary_palette,
        lambda s: 30.0 if is_monochrome(s) else 80.0,
        is_background=True,
        background=highest_surface,
        contrast_curve=ContrastCurve(1.0, 1.0, 3.0, 4.5),
        tone_delta_pair=_tertiary_fixed_pair,
    )


def on_tertiary_fixed() -> DynamicColor:
    return DynamicColor(
        "on_tertiary_fixed",
        lambda s: s.tertiary_palette,
        lambda s: 100.0 if is_monochrome(s) else 10.0,
        background=lambda s: tertiary_fixed_dim(),
        second_background=lambda s: tertiary_fixed(),
        contrast_curve=ContrastCurve(4.5, 7.0, 11.0, 21.0),
    )


def on_tertiary_fixed_variant() -> DynamicColor:
    return DynamicColor(
        "on_tertiary_fixed_variant",
        lambda s: s.tertiary_palette,
        lambda s: 90.0 if is_monochrome(s) else 30.0,
        background=lambda s: tertiary_fixed_dim(),
        second_background=lambda s: tertiary_fixed(),
        contrast_curve=ContrastCurve(3.0, 4.5, 7.0, 11.0),
    )


# Every role, backgrounds before the roles drawn on them.
ALL_ROLES: List[Callable[[], DynamicColor]] = [
    primary_palette_key_color,
    secondary_palette_key_color,
    tertiary_palette_key_color,
    neutral_palette_key_color,
    neutral_variant_palette_key_color,
    background,
    on_background,
    surface,
    surface_dim,
    surface_bright,
    surface_container_lowest,
    surface_container_low,
    surface_container,
    surface_container_high,
    surface_container_highest,
    on_surface,
    surface_variant,
    on_surface_variant,
    inverse_surface,
    inverse_on_surface,
    outline,
    outline_variant,
    shadow,
    scrim,
    surface_tint,
    primary,
    on_primary,
    primary_container,
    on_primary_container,
    inverse_primary,
    secondary,
    on_secondary,
    secondary_container,
    on_secondary_container,
    tertiary,
    on_tertiary,
    tertiary_container,
    on_tertiary_container,
    error,
    on_error,
    error_container,
    on_error_container,
    primary_fixed,
    primary_fixed_dim,
    on_primary_fixed,
    on_primary_fixed_variant,
    secondary_fixed,
    secondary_fixed_dim,
    on_secondary_fixed,
    on_secondary_fixed_variant,
    tertiary_fixed,
    tertiary_fixed_dim,
    on_tertiary_fixed,
    on_tertiary_fixed_variant,
]


def all_colors() -> List[DynamicColor]:
    """A fresh :class:`DynamicColor` for every role, in :data:`ALL_ROLES` order."""
    return [role() for role in ALL_ROLES]


def role_by_name(name: str) -> DynamicColor:
    """The role called ``name`` (for example ``"on_primary_container"``)."""
    for role in ALL_ROLES:
        if role.__name__ == name:
            return role()
    raise ValueError(f"Unknown dynamic color role: {name}")
