"""Series colors — fixed palette cycling and color parsing."""

from __future__ import annotations

import math
from typing import List, Optional, Tuple, Union

Color = Tuple[float, float, float, float]


def _hex(value: str) -> Color:
    return (
        int(value[1:3], 16) / 255.0,
        int(value[3:5], 16) / 255.0,
        int(value[5:7], 16) / 255.0,
        1.0,
    )


# Ten-entry categorical palette; series k gets PALETTE[(k - 1) % len(PALETTE)].
PALETTE: Tuple[Color, ...] = (
    _hex("#1f77b4"),  # blue
    _hex("#ff7f0e"),  # orange
    _hex("#2ca02c"),  # green
    _hex("#d62728"),  # red
    _hex("#9467bd"),  # purple
    _hex("#8c564b"),  # brown
    _hex("#e377c2"),  # pink
    _hex("#7f7f7f"),  # gray
    _hex("#bcbd22"),  # olive
    _hex("#17becf"),  # cyan
)

RED: Color = (1.0, 0.0, 0.0, 1.0)
GREEN: Color = (0.0, 1.0, 0.0, 1.0)
BLUE: Color = (0.0, 0.0, 1.0, 1.0)
YELLOW: Color = (1.0, 1.0, 0.0, 1.0)
CYAN: Color = (0.0, 1.0, 1.0, 1.0)
MAGENTA: Color = (1.0, 0.0, 1.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0, 1.0)
WHITE: Color = (1.0, 1.0, 1.0, 1.0)
GRAY: Color = (0.5, 0.5, 0.5, 1.0)
TRANSPARENT: Color = (0.0, 0.0, 0.0, 0.0)

_NAMED = {
    "red": RED,
    "r": RED,
    "green": GREEN,
    "g": GREEN,
    "blue": BLUE,
    "b": BLUE,
    "yellow": YELLOW,
    "y": YELLOW,
    "cyan": CYAN,
    "c": CYAN,
    "magenta": MAGENTA,
    "m": MAGENTA,
    "black": BLACK,
    "k": BLACK,
    "white": WHITE,
    "w": WHITE,
    "gray": GRAY,
    "grey": GRAY,
    "orange": PALETTE[1],
    "purple": PALETTE[4],
    "pink": PALETTE[6],
    "transparent": TRANSPARENT,
}


def next_color(index: int) -> Color:
    """Color for the ``index``-th series added to a plot (1-based)."""
    if index < 1:
        raise ValueError(f"color index must be >= 1, got {index}")
    return PALETTE[(index - 1) % len(PALETTE)]


def _from_components(components) -> Optional[Color]:
    """RGBA from 3 or 4 numbers in [0, 1]; alpha defaults to opaque."""
    if len(components) not in (3, 4):
        return None
    try:
        values = [float(c) for c in components]
    except (TypeError, ValueError):
        return None
    if len(values) == 3:
        values.append(1.0)
    if not all(math.isfinite(v) and 0.0 <= v <= 1.0 for v in values):
        return None
    return (values[0], values[1], values[2], values[3])


def _from_hex(text: str) -> Optional[Color]:
    digits = text[1:]
    if len(digits) not in (6, 8):
        return None
    try:
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    except ValueError:
        return None
    return _from_components([c / 255.0 for c in channels])


def parse_color(color: Union[str, Tuple, List, None]) -> Optional[Color]:
    """Parse a color name, ``#RRGGBB[AA]`` hex string or RGB/RGBA sequence.

    Sequence components must be finite floats in [0, 1]. Returns None for
    anything that is not a valid color.
    """
    if isinstance(color, (tuple, list)):
        return _from_components(color)
    if isinstance(color, str):
        text = color.lower().strip()
        if text.startswith("#"):
            return _from_hex(text)
        return _NAMED.get(text)
    return None
