from __future__ import annotations

import pytest

from util.color import (
    NAMED_COLORS,
    normalize_color,
    normalize_palette,
    parse_hex_color,
    to_u8_rgb,
    to_u8_rgba,
)


def _approx_tuple(t):
    return tuple(round(v, 6) for v in t)


def test_named_colors_resolve_case_insensitively() -> None:
    r, g, b = NAMED_COLORS["red"]
    assert normalize_color("Red") == (r / 255.0, g / 255.0, b / 255.0, 1.0)
    assert normalize_color(" black ") == (0.0, 0.0, 0.0, 1.0)


def test_parse_hex_color_variants() -> None:
    expected = (round(0x11 / 255.0, 6), round(0x22 / 255.0, 6), round(0x33 / 255.0, 6))
    assert _approx_tuple(parse_hex_color("#112233")) == expected + (1.0,)
    assert _approx_tuple(parse_hex_color("112233")) == expected + (1.0,)
    assert _approx_tuple(parse_hex_color("0x112233CC")) == expected + (round(0xCC / 255.0, 6),)


@pytest.mark.parametrize("bad", ["#123", "#GGHHII", "not-a-color", ""])
def test_invalid_strings_raise(bad: str) -> None:
    with pytest.raises(ValueError):
        normalize_color(bad)


def test_tuples_in_unit_and_byte_ranges() -> None:
    assert _approx_tuple(normalize_color((0.1, 0.2, 0.3))) == (0.1, 0.2, 0.3, 1.0)
    assert to_u8_rgba((255, 128, 0, 64)) == (255, 128, 0, 64)
    assert to_u8_rgba((255, 128, 0)) == (255, 128, 0, 255)
    assert to_u8_rgb("#FF00FF80") == (255, 0, 255)


@pytest.mark.parametrize("bad", [(1, 2), (1, 2, 3, 4, 5), ("a", "b", "c"), 42, None])
def test_unsupported_values_raise(bad: object) -> None:
    with pytest.raises(ValueError):
        normalize_color(bad)


def test_palette_keeps_order_and_duplicates() -> None:
    pal = normalize_palette(["red", "blue", "yellow", "red"])
    assert len(pal) == 4
    assert pal[0] == pal[3]
    assert pal[1] == normalize_color("blue")


def test_palette_rejects_bare_string() -> None:
    with pytest.raises(ValueError):
        normalize_palette("red")


def test_packed_int_colors() -> None:
    assert normalize_color(0x1C1C1E) == parse_hex_color("#1C1C1E")
    assert normalize_color(0x11223380) == parse_hex_color("#11223380")
    assert normalize_color(0) == (0.0, 0.0, 0.0, 1.0)


@pytest.mark.parametrize("bad", [-1, 0x1_0000_0000, True])
def test_invalid_packed_int_colors_raise(bad: int) -> None:
    with pytest.raises(ValueError):
        normalize_color(bad)
