"""Renderers — draw a finished plot in a window.

A renderer receives the chart options and the ordered series of a plot
exactly once, from ``MiniPlot.show()``, and owns them from then on.

Renderer selection::

    MINIPLOT_RENDERER=matplotlib      # default

Matplotlib backend (optional, applied before pyplot is first imported)::

    MINIPLOT_MPL_BACKEND=QtAgg python my_script.py
    MINIPLOT_MPL_BACKEND=Agg   pytest                # headless
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Sequence

from ._errors import MiniplotError
from ._log import log
from ._options import ChartOptions
from ._series import LineStyle, Series

DEFAULT_RENDERER = "matplotlib"

_LINESTYLES = {
    LineStyle.SOLID: "-",
    LineStyle.DASHED: "--",
    LineStyle.DOTTED: ":",
}

MARKER = "o"
MARKER_SIZE = 4.0


class Renderer(ABC):
    """Draws a chart from its options and series."""

    @abstractmethod
    def render(self, options: ChartOptions, series: Sequence[Series]) -> None:
        """Draw every series in order and apply the chart options once.

        Raise RenderError (or let any exception escape) if the chart cannot
        be displayed.
        """
        pass


class MatplotlibRenderer(Renderer):
    """Renders into a pyplot window and blocks until it is closed."""

    def __init__(self, backend: Optional[str] = None, block: bool = True) -> None:
        self._backend = backend if backend is not None else os.environ.get("MINIPLOT_MPL_BACKEND")
        self._block = block
        self._plt = None

    def _pyplot(self):
        if self._plt is not None:
            return self._plt
        import matplotlib

        if self._backend:
            log.debug("using matplotlib backend %s", self._backend)
            matplotlib.use(self._backend)
        import matplotlib.pyplot as plt

        self._plt = plt
        return plt

    def build_figure(self, options: ChartOptions, series: Sequence[Series]):
        """Create the pyplot figure for a chart without displaying it.

        Matplotlib hides labels that start with an underscore, so a series
        named e.g. "_raw" is drawn but left out of the legend.
        """
        plt = self._pyplot()
        fig = plt.figure(num=options.window_title, clear=True)
        ax = fig.add_subplot(1, 1, 1)

        for s in series:
            ax.plot(
                s.x,
                s.y,
                linestyle=_LINESTYLES[s.line_style],
                color=s.color,
                label=s.name,
            )
            if s.pointed:
                ax.plot(
                    s.x,
                    s.y,
                    linestyle="none",
                    marker=MARKER,
                    markersize=MARKER_SIZE,
                    color=s.color,
                    label="_nolegend_",
                )

        ax.set_xlabel(options.x_label)
        ax.set_ylabel(options.y_label)
        if options.legend_enabled and series:
            ax.legend()
        if options.aspect_ratio is not None:
            # box aspect is height / width
            ax.set_box_aspect(1.0 / options.aspect_ratio)
        return fig

    def render(self, options: ChartOptions, series: Sequence[Series]) -> None:
        fig = self.build_figure(options, series)
        log.debug("showing %r (%d series)", options.window_title, len(series))
        self._display(fig)

    def _display(self, fig) -> None:
        """Show only this chart's window, leaving other pyplot figures alone.

        When blocking, runs the canvas event loop until the window is closed.
        Non-interactive canvases (Agg and friends) have no loop to run.
        """
        from matplotlib.backend_bases import FigureCanvasBase

        plt = self._pyplot()
        fig.show()
        if not self._block:
            return
        if type(fig.canvas).start_event_loop is FigureCanvasBase.start_event_loop:
            return
        while plt.fignum_exists(fig.number):
            fig.canvas.start_event_loop(0.1)


_RENDERERS: Dict[str, Callable[[], Renderer]] = {
    "matplotlib": MatplotlibRenderer,
}


def register_renderer(name: str, factory: Callable[[], Renderer]) -> None:
    """Make a renderer available to get_renderer() under ``name``."""
    _RENDERERS[name.lower()] = factory


def get_renderer(name: Optional[str] = None) -> Renderer:
    """Create a renderer by name, defaulting to $MINIPLOT_RENDERER or matplotlib."""
    if name is None:
        name = os.environ.get("MINIPLOT_RENDERER", "").strip() or DEFAULT_RENDERER
    factory = _RENDERERS.get(name.lower())
    if factory is None:
        raise MiniplotError(
            f"unknown renderer {name!r}; available: {', '.join(sorted(_RENDERERS))}"
        )
    log.debug("selected renderer %s", name)
    return factory()
