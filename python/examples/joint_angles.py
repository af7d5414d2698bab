#!/usr/bin/env python3
"""Joint angle traces — matrix rows, styling and a fixed vector on one chart.

Usage:
    python examples/joint_angles.py

Opens a window with three sine rows (with markers), three dashed red
cosine rows and a six-point line named "Line".
"""

import os
import sys

import numpy as np

# Allow running from repo root without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import miniplot as mp

n = 1000
dt = 0.01
time = np.arange(n) * dt

rows = np.arange(3).reshape(3, 1)
theta = np.sin(time + rows)
theta_d = np.cos(time + rows)

line = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])

(
    mp.MiniPlot("Joint Angles")
    .xlabel("Time")
    .ylabel("Angle [rad]")
    .matrix_rows(time, theta)
    .pointed()
    .matrix_rows(time, theta_d)
    .color(mp.RED)
    .dashed()
    .plot(line)
    .name("Line")
    .pointed()
    .legend()
    .show()
)
