"""Chart-level options shared by every series in a plot."""

from __future__ import annotations

from typing import Optional


class ChartOptions:
    """Window title, axis labels, legend and aspect ratio of a plot."""

    __slots__ = ("_window_title", "x_label", "y_label", "legend_enabled", "aspect_ratio")

    def __init__(self, window_title: str) -> None:
        self._window_title = window_title
        self.x_label = ""
        self.y_label = ""
        self.legend_enabled = False
        self.aspect_ratio: Optional[float] = None

    @property
    def window_title(self) -> str:
        return self._window_title

    def __repr__(self) -> str:
        return (
            f"ChartOptions(window_title={self._window_title!r}, "
            f"x_label={self.x_label!r}, y_label={self.y_label!r}, "
            f"legend_enabled={self.legend_enabled}, aspect_ratio={self.aspect_ratio})"
        )
