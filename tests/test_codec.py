"""Tests for hex / RGB / HSL conversions."""

import pytest

from colorsolve.codec import colors_from_bytes, colors_from_text, decode_hex, encode_hex, hsl_to_rgb, rgb_to_hsl
from colorsolve.errors import ColorError, FormatError
from colorsolve.types import HSLColor, RGBColor

# ---------------------------------------------------------------------------
# hex
# ---------------------------------------------------------------------------


def test_decode_constants():
    assert decode_hex("#00a991") == RGBColor(0, 169, 145)
    assert decode_hex("#6b6977") == RGBColor(107, 105, 119)
    assert decode_hex("#692e63") == RGBColor(105, 46, 99)
    assert decode_hex("#6f6d00") == RGBColor(111, 109, 0)


def test_decode_without_hash_and_uppercase():
    assert decode_hex("FF8000") == RGBColor(255, 128, 0)


def test_decode_uses_first_three_groups():
    assert decode_hex("#11223344") == RGBColor(0x11, 0x22, 0x33)


@pytest.mark.parametrize("bad", ["", "#fff", "#12345", "zzzzzz"])
def test_decode_rejects_short_input(bad):
    with pytest.raises(FormatError):
        decode_hex(bad)


def test_format_error_is_value_error():
    assert issubclass(FormatError, ColorError)
    assert issubclass(FormatError, ValueError)


def test_encode_pads_lowercase():
    assert encode_hex(RGBColor(0, 98, 90)) == "#00625a"
    assert encode_hex(RGBColor(10, 11, 255)) == "#0a0bff"


def test_encode_clamps_out_of_range():
    assert encode_hex(RGBColor(-20, 300, 128)) == "#00ff80"


def test_hex_roundtrip():
    for c in (RGBColor(0, 0, 0), RGBColor(255, 255, 255), RGBColor(173, 42, 99)):
        assert decode_hex(encode_hex(c)) == c


# ---------------------------------------------------------------------------
# byte triplets
# ---------------------------------------------------------------------------


def test_colors_from_kiwi_bytes():
    colors = colors_from_bytes(b"kiwi.com\x00")
    assert colors == [decode_hex("#6b6977"), decode_hex("#692e63"), decode_hex("#6f6d00")]


def test_colors_from_text_appends_nul():
    assert colors_from_text("kiwi.com") == colors_from_bytes(b"kiwi.com\x00")


@pytest.mark.parametrize("data", [b"", b"ab", b"abcd"])
def test_colors_from_bytes_needs_triplets(data):
    with pytest.raises(FormatError):
        colors_from_bytes(data)


# ---------------------------------------------------------------------------
# HSL
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("rgb", "hsl"),
    [
        (RGBColor(255, 0, 0), HSLColor(0, 100, 50)),
        (RGBColor(0, 255, 0), HSLColor(120, 100, 50)),
        (RGBColor(0, 0, 255), HSLColor(240, 100, 50)),
        (RGBColor(0, 255, 255), HSLColor(180, 100, 50)),
        (RGBColor(255, 0, 255), HSLColor(300, 100, 50)),
        (RGBColor(73, 56, 0), HSLColor(46, 100, 14)),
    ],
)
def test_rgb_to_hsl(rgb, hsl):
    assert rgb_to_hsl(rgb) == hsl


def test_rgb_to_hsl_gray_lightness_in_percent():
    assert rgb_to_hsl(RGBColor(0, 0, 0)) == HSLColor(0, 0, 0)
    assert rgb_to_hsl(RGBColor(255, 255, 255)) == HSLColor(0, 0, 100)
    assert rgb_to_hsl(RGBColor(128, 128, 128)) == HSLColor(0, 0, 50)


def test_rgb_to_hsl_light_saturation():
    # lightness > 50% uses d / (2 - max - min)
    assert rgb_to_hsl(RGBColor(255, 128, 128)) == HSLColor(0, 100, 75)


@pytest.mark.parametrize(
    ("hsl", "rgb"),
    [
        (HSLColor(0, 0, 0), RGBColor(0, 0, 0)),
        (HSLColor(0, 0, 100), RGBColor(255, 255, 255)),
        (HSLColor(0, 100, 50), RGBColor(255, 0, 0)),
        (HSLColor(120, 100, 50), RGBColor(0, 255, 0)),
        (HSLColor(240, 100, 50), RGBColor(0, 0, 255)),
        (HSLColor(60, 100, 50), RGBColor(255, 255, 0)),
        (HSLColor(300, 100, 50), RGBColor(255, 0, 255)),
        (HSLColor(0, 0, 50), RGBColor(128, 128, 128)),
        (HSLColor(166, 100, 14), RGBColor(0, 71, 55)),
    ],
)
def test_hsl_to_rgb(hsl, rgb):
    assert hsl_to_rgb(hsl) == rgb


def test_hsl_to_rgb_undefined_hue_is_black():
    assert hsl_to_rgb(HSLColor(None, 100, 50)) == RGBColor(0, 0, 0)


def test_hsl_to_rgb_hue_360_wraps_to_red():
    assert hsl_to_rgb(HSLColor(360, 100, 50)) == RGBColor(255, 0, 0)


def test_hsl_roundtrip_is_close():
    c = RGBColor(107, 105, 119)
    back = hsl_to_rgb(rgb_to_hsl(c))
    assert all(abs(x - y) <= 3 for x, y in zip(c.as_array(), back.as_array()))


def test_rgb_to_hsl_hue_rounding_up_to_full_turn_wraps():
    # raw hue is about 359.76
    c = rgb_to_hsl(RGBColor(255, 0, 1))
    assert c == HSLColor(0, 100, 50)
    assert 0 <= c.hue < 360
