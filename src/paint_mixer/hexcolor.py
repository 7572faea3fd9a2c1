from __future__ import annotations

import re
from typing import Any

import numpy as np

Hex = str

# returned whenever there is nothing to mix
FALLBACK_HEX: Hex = "#FFFFFF"

_HEX_RE = re.compile(r"#[0-9A-Fa-f]{6}")


def is_hex_color(value: Any) -> bool:
    """True only for an exact '#RRGGBB' string (no shorthand, no whitespace)."""
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def hex_to_rgb(hex_str: Hex) -> np.ndarray:
    if not is_hex_color(hex_str):
        raise ValueError(f"hex must be '#RRGGBB', got {hex_str!r}")
    r, g, b = (int(hex_str[i : i + 2], 16) for i in (1, 3, 5))
    return np.array([r, g, b], dtype=np.float64)


def round_half_up(x: np.ndarray) -> np.ndarray:
    """
    Round-to-nearest with ties going up, i.e. `Math.round()` for the
    non-negative channel values we deal with. `np.round` would send
    83.5 to 84 but 84.5 to 84 as well.
    """
    return np.floor(np.asarray(x, dtype=np.float64) + 0.5)


def rgb_to_hex(rgb: np.ndarray) -> Hex:
    u8 = np.clip(round_half_up(rgb), 0, 255).astype(np.uint8)
    return f"#{u8[0]:02x}{u8[1]:02x}{u8[2]:02x}"


__all__ = ["FALLBACK_HEX", "Hex", "hex_to_rgb", "is_hex_color", "rgb_to_hex", "round_half_up"]
