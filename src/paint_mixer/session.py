"""State behind a color-mixing form, plus the coercion of raw form input.

The mixers take well-typed values and never fail; turning whatever a user
typed into those values happens here, on the caller's side of the seam.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from numbers import Real
from typing import Any

from coloraide import Color

from .hexcolor import Hex
from .mixers import MixStrategy, Pairing, mix
from .names import color_name

log = logging.getLogger(__name__)

DEFAULT_COLORS: tuple[Hex, ...] = ("#2563EB", "#EF4444", "#22C55E", "#000000")

FIT_HEX = {"method": "raytrace"}  # consistent gamut-fit for hex output

# longest leading decimal literal, the way a form's number parser reads "12.5g"
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_weight(value: Any) -> float:
    """
    Coerce form input to a weight in grams; anything unreadable becomes 0.

    >>> parse_weight("12.5g"), parse_weight(""), parse_weight(" -3")
    (12.5, 0.0, -3.0)
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, Real):
        w = float(value)
    else:
        m = _LEADING_NUMBER.match(str(value))
        if not m:
            return 0.0
        w = float(m.group(1))
    return w if math.isfinite(w) else 0.0


def coerce_color(value: Any) -> Hex:
    """Normalize any CSS color string to uppercase '#RRGGBB' (sRGB, no alpha)."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"invalid color: {value!r}")
    try:
        c = Color(value.strip())
    except ValueError:
        raise ValueError(f"invalid color: {value!r}") from None
    return c.convert("srgb").to_string(hex=True, upper=True, alpha=False, fit=FIT_HEX)


@dataclass
class MixSession:
    colors: list[Hex] = field(default_factory=lambda: list(DEFAULT_COLORS))
    weights: list[float] = field(default_factory=lambda: [0.0] * len(DEFAULT_COLORS))
    strategy: MixStrategy = MixStrategy.WEIGHTED_AVERAGE
    pairing: Pairing = Pairing.POSITIONAL
    show_final: bool = False

    def set_color(self, index: int, value: Any) -> Hex:
        hex_ = coerce_color(value)
        self.colors[index] = hex_
        return hex_

    def set_weight(self, index: int, value: Any) -> float:
        w = parse_weight(value)
        self.weights[index] = w
        return w

    @property
    def total_weight(self) -> float:
        return float(sum(self.weights))

    @property
    def mixed_color(self) -> Hex:
        return mix(
            self.colors, self.weights, strategy=self.strategy, pairing=self.pairing
        )

    def generate(self) -> bool:
        if any(w > 0 for w in self.weights):
            self.show_final = True
        else:
            log.debug("generate ignored: no positive weight in %r", self.weights)
        return self.show_final

    @property
    def final_color(self) -> Hex | None:
        if not self.show_final or self.total_weight <= 0:
            return None
        return self.mixed_color

    @property
    def final_name(self) -> str | None:
        hex_ = self.final_color
        return None if hex_ is None else color_name(hex_.upper())

    def reset(self) -> None:
        self.weights = [0.0] * len(self.weights)
        self.show_final = False


__all__ = ["DEFAULT_COLORS", "MixSession", "coerce_color", "parse_weight"]
