import pytest

from paint_mixer.hexcolor import is_hex_color
from paint_mixer.names import COLOR_NAMES, CUSTOM, SWATCHES, color_name


def test_known_names():
    assert color_name("#2563EB") == "Blue"
    assert color_name("#0000FF") == "Blue"
    assert color_name("#22C55E") == "Green"
    assert color_name("#FFFFFF") == "White"


@pytest.mark.parametrize("value", ["#123456", "#2563eb", "#ffffff", "blue", "", None])
def test_everything_else_is_custom(value):
    assert color_name(value) == CUSTOM == "Custom"


def test_table_keys_are_canonical_uppercase():
    assert len(COLOR_NAMES) == 34
    for key in COLOR_NAMES:
        assert is_hex_color(key)
        assert key == key.upper()


def test_table_is_read_only():
    with pytest.raises(TypeError):
        COLOR_NAMES["#123456"] = "Mine"  # type: ignore[index]


def test_every_swatch_has_a_name():
    assert len(SWATCHES) == 32
    assert all(color_name(s) != CUSTOM for s in SWATCHES)
