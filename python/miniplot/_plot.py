"""MiniPlot — fluent builder for a 2D line/point chart.

Usage::

    from miniplot import MiniPlot

    MiniPlot("Joint Angles") \\
        .xlabel("Time") \\
        .ylabel("Angle [rad]") \\
        .matrix_rows(time, theta) \\
        .pointed() \\
        .plot([1.0, 2.0, 3.0]) \\
        .name("Line") \\
        .dashed() \\
        .legend() \\
        .show()

Style, color and name calls always act on the most recently added series.
They do nothing when no series has been added yet.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple, Union

from ._colors import Color, next_color, parse_color
from ._conversion import ArrayLike, to_float_sequence, to_matrix_rows
from ._errors import MiniplotError, RenderError, SpecificationConsumedError
from ._log import log
from ._options import ChartOptions
from ._series import Point, Series

if TYPE_CHECKING:
    from ._render import Renderer


def _zip_points(x: Sequence[float], y: Sequence[float], what: str) -> List[Point]:
    """Pair x and y element-wise, stopping at the shorter of the two."""
    if len(x) != len(y):
        log.debug(
            "%s: x has %d values, y has %d; truncating to %d points",
            what, len(x), len(y), min(len(x), len(y)),
        )
    return [(float(xi), float(yi)) for xi, yi in zip(x, y)]


class MiniPlot:
    """Accumulates series and chart options, then hands them to a renderer.

    Every builder method returns the plot itself so calls can be chained.
    ``show()`` is terminal: afterwards the plot cannot be modified or shown
    again.
    """

    __slots__ = ("_options", "_series", "_last", "_color_index", "_consumed")

    def __init__(self, window_title: str) -> None:
        self._options = ChartOptions(window_title)
        self._series: List[Series] = []
        self._last: Optional[int] = None
        self._color_index = 0
        self._consumed = False

    # ─── Inspection ──────────────────────────────────────────────────────

    @property
    def window_title(self) -> str:
        return self._options.window_title

    @property
    def series(self) -> Tuple[Series, ...]:
        """Series in the order they were added (also the legend order)."""
        self._check_open()
        return tuple(self._series)

    @property
    def options(self) -> ChartOptions:
        self._check_open()
        return self._options

    def __len__(self) -> int:
        return len(self._series)

    def __repr__(self) -> str:
        state = "shown" if self._consumed else f"series={len(self._series)}"
        return f"MiniPlot(window_title={self.window_title!r}, {state})"

    # ─── Internals ───────────────────────────────────────────────────────

    def _check_open(self) -> None:
        if self._consumed:
            raise SpecificationConsumedError(self.window_title)

    def _next_color(self) -> Color:
        self._color_index += 1
        return next_color(self._color_index)

    def _append(self, name: str, points: List[Point]) -> None:
        series = Series(name=name, points=points, color=self._next_color())
        self._series.append(series)
        self._last = len(self._series) - 1
        log.debug("%s: added %r with %d points", self.window_title, name, len(points))

    def _last_series(self) -> Optional[Series]:
        self._check_open()
        if self._last is None:
            return None
        return self._series[self._last]

    # ─── Adding series ───────────────────────────────────────────────────

    def plot(self, y: ArrayLike) -> "MiniPlot":
        """Plot ``y`` against its indices 0, 1, 2, ...

        ``y`` may be a list, tuple, range, numpy vector or matrix (flattened
        row by row), or anything with an ``as_float_sequence()`` method.
        """
        self._check_open()
        values = to_float_sequence(y)
        points = [(float(i), float(v)) for i, v in enumerate(values)]
        self._append(f"Line {len(self._series)}", points)
        return self

    def plot_xy(self, x: ArrayLike, y: ArrayLike) -> "MiniPlot":
        """Plot ``y`` against ``x``. Extra values in the longer input are ignored."""
        self._check_open()
        points = _zip_points(to_float_sequence(x), to_float_sequence(y), "plot_xy")
        self._append(f"Line {len(self._series)}", points)
        return self

    def plot_points(self, points: Iterable[Sequence[float]]) -> "MiniPlot":
        """Plot ready-made ``(x, y)`` pairs in the given order."""
        self._check_open()
        pairs: List[Point] = []
        for p in points:
            if len(p) != 2:
                raise ValueError(f"expected (x, y) pairs, got an item of length {len(p)}")
            pairs.append((float(p[0]), float(p[1])))
        self._append(f"Line {len(self._series)}", pairs)
        return self

    def matrix_rows(self, x: ArrayLike, y: ArrayLike) -> "MiniPlot":
        """Add one series per row of matrix ``y``, all sharing the x values.

        Rows are named "Row 0", "Row 1", ... by their position in ``y`` and
        each gets its own color. ``x`` should be as long as ``y`` has
        columns; otherwise each row is cut to the shorter length.
        """
        self._check_open()
        xs = to_float_sequence(x)
        for i, row in enumerate(to_matrix_rows(y)):
            self._append(f"Row {i}", _zip_points(xs, row, f"matrix_rows row {i}"))
        return self

    smatrix_rows = matrix_rows

    # ─── Last-series styling ─────────────────────────────────────────────

    def dashed(self) -> "MiniPlot":
        last = self._last_series()
        if last is not None:
            last.dashed = True
        return self

    def dotted(self) -> "MiniPlot":
        last = self._last_series()
        if last is not None:
            last.dotted = True
        return self

    def pointed(self) -> "MiniPlot":
        """Also draw a marker at every point of the last series (useful for sparse data)."""
        last = self._last_series()
        if last is not None:
            last.pointed = True
        return self

    def set_color(self, color: Union[str, Tuple, List]) -> "MiniPlot":
        """Change the color of the last series; does nothing if there is none.

        Accepts an RGB/RGBA tuple of floats in [0, 1], a color name or a hex
        string.
        """
        last = self._last_series()
        if last is not None:
            parsed = parse_color(color)
            if parsed is None:
                raise ValueError(f"unrecognized color {color!r}")
            last.color = parsed
        return self

    def set_name(self, name: str) -> "MiniPlot":
        """Rename the last series; does nothing if there is none."""
        last = self._last_series()
        if last is not None:
            last.name = str(name)
        return self

    color = set_color
    name = set_name

    # ─── Chart options ───────────────────────────────────────────────────

    def set_x_label(self, label: str) -> "MiniPlot":
        self._check_open()
        self._options.x_label = str(label)
        return self

    def set_y_label(self, label: str) -> "MiniPlot":
        self._check_open()
        self._options.y_label = str(label)
        return self

    def enable_legend(self) -> "MiniPlot":
        self._check_open()
        self._options.legend_enabled = True
        return self

    def set_aspect_ratio(self, ratio: float) -> "MiniPlot":
        """Fix the plot's width/height ratio. Without it the ratio is automatic."""
        self._check_open()
        ratio = float(ratio)
        if not math.isfinite(ratio) or ratio <= 0.0:
            raise ValueError(f"aspect ratio must be a positive number, got {ratio}")
        self._options.aspect_ratio = ratio
        return self

    def set_square_aspect_ratio(self) -> "MiniPlot":
        """Same scale on both axes; handy for geometric shapes."""
        return self.set_aspect_ratio(1.0)

    xlabel = set_x_label
    ylabel = set_y_label
    legend = enable_legend
    aspect_ratio = set_aspect_ratio
    square_aspect_ratio = set_square_aspect_ratio

    # ─── Finalization ────────────────────────────────────────────────────

    def show(self, renderer: Optional["Renderer"] = None) -> None:
        """Hand the plot to a renderer and display it.

        Blocks for as long as the renderer's window stays open. The plot is
        consumed: any later call on it raises SpecificationConsumedError.
        Failures inside the renderer surface as RenderError.
        """
        self._check_open()
        if renderer is None:
            from ._render import get_renderer
            renderer = get_renderer()

        options, series = self._options, self._series
        self._consumed = True
        self._series = []
        self._last = None

        log.info("rendering %r with %d series", options.window_title, len(series))
        try:
            renderer.render(options, series)
        except MiniplotError:
            raise
        except Exception as exc:
            raise RenderError(f"failed to render {options.window_title!r}: {exc}") from exc
