from __future__ import annotations

import math

import pytest

from util.color import (
    alpha_from_argb,
    argb_from_hex,
    argb_from_lab,
    argb_from_lstar,
    argb_from_rgb,
    argb_from_xyz,
    blue_from_argb,
    delinearized,
    green_from_argb,
    hex_from_argb,
    is_opaque,
    lab_from_argb,
    linearized,
    lstar_from_argb,
    lstar_from_y,
    red_from_argb,
    xyz_from_argb,
    y_from_lstar,
)
from util.math_utils import (
    clamp_double,
    clamp_int,
    difference_degrees,
    lerp,
    matrix_multiply,
    rotation_direction,
    round_half_up,
    sanitize_degrees_double,
    sanitize_degrees_int,
    signum,
)


def test_argb_pack_and_unpack() -> None:
    argb = argb_from_rgb(0x12, 0x34, 0x56)
    assert argb == 0xFF123456
    assert alpha_from_argb(argb) == 0xFF
    assert red_from_argb(argb) == 0x12
    assert green_from_argb(argb) == 0x34
    assert blue_from_argb(argb) == 0x56
    assert is_opaque(argb)
    assert not is_opaque(0x80123456)


def test_parse_hex_valid_variants() -> None:
    assert argb_from_hex("#112233") == 0xFF112233
    assert argb_from_hex("112233") == 0xFF112233
    assert argb_from_hex("0xCC112233") == 0xCC112233
    assert argb_from_hex("#abc") == 0xFFAABBCC
    assert argb_from_hex("  #AbCdEf ") == 0xFFABCDEF


def test_parse_hex_invalid() -> None:
    with pytest.raises(ValueError):
        argb_from_hex("#1234")
    with pytest.raises(ValueError):
        argb_from_hex("not-a-color")


def test_hex_from_argb_drops_alpha() -> None:
    assert hex_from_argb(0x80FF8000) == "#ff8000"
    assert argb_from_hex(hex_from_argb(0xFF0A0B0C)) == 0xFF0A0B0C


def test_linearization_endpoints() -> None:
    assert linearized(0) == 0.0
    assert linearized(255) == pytest.approx(100.0)
    for component in (0, 1, 10, 100, 128, 254, 255):
        assert delinearized(linearized(component)) == component
    assert delinearized(-5.0) == 0
    assert delinearized(150.0) == 255


def test_lstar_y_inverse() -> None:
    for lstar in (0.0, 5.0, 8.0, 18.418, 50.0, 99.0, 100.0):
        assert lstar_from_y(y_from_lstar(lstar)) == pytest.approx(lstar, abs=1e-8)
    assert y_from_lstar(100.0) == pytest.approx(100.0)


def test_lstar_known_values() -> None:
    assert lstar_from_argb(0xFF000000) == pytest.approx(0.0)
    assert lstar_from_argb(0xFFFFFFFF) == pytest.approx(100.0)
    assert lstar_from_argb(argb_from_lstar(50.0)) == pytest.approx(50.0, abs=0.5)


def test_xyz_and_lab_round_trip() -> None:
    for argb in (0xFFFF0000, 0xFF00FF00, 0xFF0000FF, 0xFF123456, 0xFFFEDCBA):
        assert argb_from_xyz(*xyz_from_argb(argb)) == argb
        assert argb_from_lab(*lab_from_argb(argb)) == argb


def test_white_lab_is_neutral() -> None:
    l, a, b = lab_from_argb(0xFFFFFFFF)
    assert l == pytest.approx(100.0, abs=1e-6)
    assert a == pytest.approx(0.0, abs=1e-2)
    assert b == pytest.approx(0.0, abs=1e-2)


def test_round_half_up_differs_from_builtin_round() -> None:
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round(2.5) == 2
    assert round_half_up(-0.5) == 0
    assert round_half_up(-1.5) == -1


def test_degree_helpers() -> None:
    assert sanitize_degrees_int(-1) == 359
    assert sanitize_degrees_int(720) == 0
    assert sanitize_degrees_double(-30.0) == pytest.approx(330.0)
    assert sanitize_degrees_double(360.0) == 0.0
    assert difference_degrees(10.0, 350.0) == pytest.approx(20.0)
    assert difference_degrees(0.0, 180.0) == pytest.approx(180.0)
    assert rotation_direction(10.0, 20.0) == 1.0
    assert rotation_direction(10.0, 350.0) == -1.0


def test_scalar_helpers() -> None:
    assert signum(-3.2) == -1
    assert signum(0.0) == 0
    assert signum(7) == 1
    assert lerp(10.0, 20.0, 0.25) == pytest.approx(12.5)
    assert clamp_int(0, 255, 300) == 255
    assert clamp_int(0, 255, -1) == 0
    assert clamp_double(0.0, 1.0, 0.5) == 0.5
    assert math.isclose(clamp_double(0.0, 100.0, 101.0), 100.0)


def test_matrix_multiply_identity_and_rows() -> None:
    identity = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
    assert matrix_multiply((1.0, 2.0, 3.0), identity) == (1.0, 2.0, 3.0)
    m = ((1.0, 2.0, 3.0), (0.0, 1.0, 0.0), (2.0, 0.0, 1.0))
    assert matrix_multiply((1.0, 1.0, 1.0), m) == (6.0, 1.0, 3.0)
