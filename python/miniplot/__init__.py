"""miniplot — build a 2D line/point chart in one chained expression.

Usage::

    from miniplot import MiniPlot

    MiniPlot("Sine Wave") \\
        .plot(data) \\
        .xlabel("Time") \\
        .ylabel("Amplitude") \\
        .legend() \\
        .show()

Series can come from lists, tuples, ranges, ``array.array`` and numpy
vectors or matrices::

    MiniPlot("Rows").matrix_rows(time, theta).pointed().show()
"""

from ._plot import MiniPlot
from ._series import Series, LineStyle
from ._options import ChartOptions
from ._colors import (
    Color,
    PALETTE,
    next_color,
    parse_color,
    RED,
    GREEN,
    BLUE,
    YELLOW,
    CYAN,
    MAGENTA,
    BLACK,
    WHITE,
    GRAY,
    TRANSPARENT,
)
from ._conversion import SupportsFloatSequence, to_float_sequence, to_matrix_rows
from ._render import Renderer, MatplotlibRenderer, get_renderer, register_renderer
from ._errors import MiniplotError, RenderError, SpecificationConsumedError

try:
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("miniplot")
except Exception:
    __version__ = "0.1.0"

__all__ = [
    "MiniPlot",
    "Series",
    "LineStyle",
    "ChartOptions",
    # Colors
    "Color",
    "PALETTE",
    "next_color",
    "parse_color",
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
    "CYAN",
    "MAGENTA",
    "BLACK",
    "WHITE",
    "GRAY",
    "TRANSPARENT",
    # Data ingestion
    "SupportsFloatSequence",
    "to_float_sequence",
    "to_matrix_rows",
    # Rendering
    "Renderer",
    "MatplotlibRenderer",
    "get_renderer",
    "register_renderer",
    # Errors
    "MiniplotError",
    "RenderError",
    "SpecificationConsumedError",
]
