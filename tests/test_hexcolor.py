import numpy as np
import pytest

from paint_mixer.hexcolor import (
    FALLBACK_HEX,
    hex_to_rgb,
    is_hex_color,
    rgb_to_hex,
    round_half_up,
)


@pytest.mark.parametrize("value", ["#2563EB", "#2563eb", "#000000", "#aBcDeF"])
def test_accepts_six_digit_hex(value):
    assert is_hex_color(value)


@pytest.mark.parametrize(
    "value",
    ["red", "#ZZZZZZ", "#FFF", "2563EB", "#2563EB0", "#2563EB\n", " #2563EB", "", None, 0x2563EB],
)
def test_rejects_everything_else(value):
    assert not is_hex_color(value)


def test_decode():
    assert np.array_equal(hex_to_rgb("#2563EB"), [37, 99, 235])
    assert np.array_equal(hex_to_rgb("#ef4444"), [239, 68, 68])


def test_decode_invalid_raises():
    with pytest.raises(ValueError):
        hex_to_rgb("#FFF")


def test_round_half_up_matches_math_round():
    assert np.array_equal(round_half_up([0.5, 1.5, 2.5, 83.5, 2.49]), [1, 2, 3, 84, 2])


def test_encode_pads_and_clamps():
    assert rgb_to_hex(np.array([0, 5.5, 255.4])) == "#0006ff"
    assert rgb_to_hex(np.array([-3, 300, 128])) == "#00ff80"


def test_fallback_is_white():
    assert FALLBACK_HEX == "#FFFFFF"
    assert is_hex_color(FALLBACK_HEX)
