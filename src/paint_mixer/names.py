from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from .hexcolor import Hex

CUSTOM = "Custom"

# Keys are canonical uppercase '#RRGGBB'; lookups are exact, so '#2563eb' is Custom.
COLOR_NAMES: Mapping[Hex, str] = MappingProxyType(
    {
        "#FF0000": "Red",
        "#FF4500": "Orange Red",
        "#FF8C00": "Dark Orange",
        "#FFD700": "Gold",
        "#FFFF00": "Yellow",
        "#ADFF2F": "Green Yellow",
        "#00FF00": "Lime",
        "#00FA9A": "Medium Spring Green",
        "#00FFFF": "Cyan",
        "#00BFFF": "Deep Sky Blue",
        "#0000FF": "Blue",
        "#8A2BE2": "Blue Violet",
        "#FF00FF": "Magenta",
        "#FF1493": "Deep Pink",
        "#FF69B4": "Hot Pink",
        "#FFB6C1": "Light Pink",
        "#FFE4E1": "Misty Rose",
        "#F5F5DC": "Beige",
        "#DEB887": "Burly Wood",
        "#D2691E": "Chocolate",
        "#8B4513": "Saddle Brown",
        "#654321": "Dark Brown",
        "#2F4F4F": "Dark Slate Gray",
        "#000000": "Black",
        "#FFFFFF": "White",
        "#C0C0C0": "Silver",
        "#808080": "Gray",
        "#404040": "Dark Gray",
        "#202020": "Very Dark Gray",
        "#101010": "Almost Black",
        "#080808": "Near Black",
        # form defaults
        "#2563EB": "Blue",
        "#EF4444": "Red",
        "#22C55E": "Green",
    }
)

# picker palette, in display order (black appears twice)
SWATCHES: tuple[Hex, ...] = (
    "#FF0000", "#FF4500", "#FF8C00", "#FFD700", "#FFFF00", "#ADFF2F", "#00FF00", "#00FA9A",
    "#00FFFF", "#00BFFF", "#0000FF", "#8A2BE2", "#FF00FF", "#FF1493", "#FF69B4", "#FFB6C1",
    "#FFE4E1", "#F5F5DC", "#DEB887", "#D2691E", "#8B4513", "#654321", "#2F4F4F", "#000000",
    "#FFFFFF", "#C0C0C0", "#808080", "#404040", "#202020", "#101010", "#080808", "#000000",
)  # fmt: skip


def color_name(hex_str: Any) -> str:
    if not isinstance(hex_str, str):
        return CUSTOM
    return COLOR_NAMES.get(hex_str, CUSTOM)


__all__ = ["COLOR_NAMES", "CUSTOM", "SWATCHES", "color_name"]
