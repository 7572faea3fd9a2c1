# mixers.py

from __future__ import annotations

import logging
import math
from enum import Enum
from numbers import Real
from typing import Any, Callable, Iterable, Sequence

import numpy as np

from .hexcolor import FALLBACK_HEX, Hex, hex_to_rgb, is_hex_color, rgb_to_hex, round_half_up

log = logging.getLogger(__name__)

Weight = float
Pair = tuple[np.ndarray, Weight]


class Pairing(str, Enum):
    """How a weight finds its color once invalid colors have been dropped."""

    # filter colors and weights together, the i-th weight stays with the i-th color
    POSITIONAL = "positional"
    # positive-weight indices over the raw weights, looked up in the filtered colors
    LEGACY = "legacy"


def _is_positive(w: Any) -> bool:
    if isinstance(w, bool) or not isinstance(w, Real):
        return False
    return math.isfinite(w) and w > 0


def _pairing(value: Pairing | str) -> Pairing:
    try:
        return Pairing(value)
    except ValueError:
        raise ValueError(
            f"unknown pairing '{value}', supported: {tuple(p.value for p in Pairing)}"
        ) from None


def _select(
    colors: Sequence[Any], weights: Sequence[Any], pairing: Pairing | str
) -> list[Pair]:
    pairing = _pairing(pairing)
    colors = list(colors)
    weights = list(weights)

    valid = [c for c in colors if is_hex_color(c)]
    if not valid:
        log.debug("no valid colors in %r", colors)
        return []

    if pairing is Pairing.LEGACY:
        pairs: list[Pair] = []
        for i, w in enumerate(weights):
            if not _is_positive(w):
                continue
            if i >= len(valid):
                # only a shift when dropped colors pushed this weight off the end
                report = log.warning if i < len(colors) else log.debug
                report(
                    "legacy pairing: weight #%d has no color (%d valid), skipped",
                    i,
                    len(valid),
                )
                continue
            pairs.append((hex_to_rgb(valid[i]), float(w)))
    else:
        pairs = [
            (hex_to_rgb(c), float(w))
            for c, w in zip(colors, weights)
            if is_hex_color(c) and _is_positive(w)
        ]

    if not pairs:
        log.debug("no positive weight for any valid color in %r", weights)
    return pairs


def mix_weighted_average(
    colors: Sequence[Hex],
    weights: Sequence[Weight],
    *,
    pairing: Pairing | str = Pairing.POSITIONAL,
) -> Hex:
    """
    Additive mix: every channel is the weight-normalised mean of the inputs.

    Order of the (color, weight) pairs does not matter and scaling all weights
    by the same positive factor leaves the result unchanged.
    """
    pairs = _select(colors, weights, pairing)
    if not pairs:
        return FALLBACK_HEX

    # relative to the largest weight so huge finite weights cannot overflow
    scale = max(w for _, w in pairs)
    acc = np.zeros(3, dtype=np.float64)
    total = 0.0
    for rgb, w in pairs:
        acc += rgb * (w / scale)
        total += w / scale

    if total <= 0.0:
        return FALLBACK_HEX
    return rgb_to_hex(round_half_up(acc / total))


def mix_sequential_subtractive(
    colors: Sequence[Hex],
    weights: Sequence[Weight],
    *,
    pairing: Pairing | str = Pairing.POSITIONAL,
) -> Hex:
    """
    Paint-like mix: start from white and fold each color in, in input order,
    with ratio = weight / running total weight.

    Channels are rounded after every step, so reordering the inputs can
    change the result even when the weights are equal.
    """
    pairs = _select(colors, weights, pairing)
    if not pairs:
        return FALLBACK_HEX

    acc = np.full(3, 255.0, dtype=np.float64)
    total = 0.0
    for rgb, w in pairs:
        total += w
        ratio = w / total
        acc = round_half_up(acc * (1.0 - ratio) + rgb * ratio)

    return rgb_to_hex(acc)


class MixStrategy(str, Enum):
    WEIGHTED_AVERAGE = "weighted_average"
    SEQUENTIAL_SUBTRACTIVE = "sequential_subtractive"


MIXERS: dict[MixStrategy, Callable[..., Hex]] = {
    MixStrategy.WEIGHTED_AVERAGE: mix_weighted_average,
    MixStrategy.SEQUENTIAL_SUBTRACTIVE: mix_sequential_subtractive,
}


def supported_strategies() -> tuple[str, ...]:
    return tuple(s.value for s in MixStrategy)


def mix(
    colors: Iterable[Hex],
    weights: Iterable[Weight],
    *,
    strategy: MixStrategy | str = MixStrategy.WEIGHTED_AVERAGE,
    pairing: Pairing | str = Pairing.POSITIONAL,
) -> Hex:
    """Dispatch to one of the mixers; unknown strategy or pairing names raise ValueError."""
    pairing = _pairing(pairing)
    try:
        s = MixStrategy(strategy)
    except ValueError:
        raise ValueError(
            f"unknown strategy '{strategy}', supported: {supported_strategies()}"
        ) from None
    return MIXERS[s](list(colors), list(weights), pairing=pairing)


__all__ = [
    "MIXERS",
    "MixStrategy",
    "Pairing",
    "mix",
    "mix_sequential_subtractive",
    "mix_weighted_average",
    "supported_strategies",
]
