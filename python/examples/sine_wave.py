#!/usr/bin/env python3
"""Sine and cosine from plain Python lists, with a square aspect ratio.

Usage:
    python examples/sine_wave.py
"""

import math
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from miniplot import MiniPlot

x = [i * 0.01 for i in range(1000)]

(
    MiniPlot("Sine Wave")
    .plot_xy(x, [math.sin(v) for v in x])
    .name("sin(x)")
    .plot_points((v, math.cos(v)) for v in x[::50])
    .name("cos(x) samples")
    .dotted()
    .pointed()
    .xlabel("x")
    .ylabel("y")
    .square_aspect_ratio()
    .legend()
    .show()
)
