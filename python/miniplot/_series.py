"""Series record — one named, styled trace of 2D points."""

from __future__ import annotations

import enum
from typing import List, Optional, Tuple

from ._colors import Color, TRANSPARENT

Point = Tuple[float, float]


class LineStyle(enum.Enum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


class Series:
    """A line trace within a plot.

    Points keep insertion order, which is also drawing order. ``dashed``
    wins over ``dotted`` when both are set; ``pointed`` draws a marker at
    every point in addition to the line.
    """

    __slots__ = ("name", "points", "color", "dashed", "dotted", "pointed")

    def __init__(
        self,
        name: str = "",
        points: Optional[List[Point]] = None,
        color: Color = TRANSPARENT,
        dashed: bool = False,
        dotted: bool = False,
        pointed: bool = False,
    ) -> None:
        self.name = name
        self.points: List[Point] = list(points) if points is not None else []
        self.color = color
        self.dashed = dashed
        self.dotted = dotted
        self.pointed = pointed

    @property
    def line_style(self) -> LineStyle:
        if self.dashed:
            return LineStyle.DASHED
        if self.dotted:
            return LineStyle.DOTTED
        return LineStyle.SOLID

    @property
    def x(self) -> List[float]:
        return [p[0] for p in self.points]

    @property
    def y(self) -> List[float]:
        return [p[1] for p in self.points]

    def __len__(self) -> int:
        return len(self.points)

    def __repr__(self) -> str:
        return (
            f"Series(name={self.name!r}, points={len(self.points)}, "
            f"style={self.line_style.value}, pointed={self.pointed})"
        )
