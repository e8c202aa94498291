"""Snow-covered hill and the ground-height helper used to seat props on it."""

from __future__ import annotations

from wintertree.drawing import DrawCommand, FillPath, Path, PathBuilder, vertical_gradient
from wintertree.geometry import clamp, cubic_point
from wintertree.models import FrameContext, ViewportSize
from wintertree.palettes import SNOW_BOTTOM, SNOW_TOP

# Control-point heights of the hill curve as fractions of canvas height.
HILL_Y = (0.85, 0.80, 0.80, 0.85)
HILL_X = (0.0, 0.3, 0.7, 1.0)


def hill_path(viewport: ViewportSize) -> Path:
    w, h = viewport.width, viewport.height
    return (
        PathBuilder()
        .move_to(0.0, h)
        .line_to(0.0, h * HILL_Y[0])
        .cubic_to(w * HILL_X[1], h * HILL_Y[1], w * HILL_X[2], h * HILL_Y[2], w, h * HILL_Y[3])
        .line_to(w, h)
        .close()
        .build()
    )


def ground_y_at(viewport: ViewportSize, x: float) -> float:
    """Hill height at canvas x; x outside the canvas is clamped to its edge."""
    t = clamp(x / viewport.width, 0.0, 1.0)
    return cubic_point(*(viewport.height * f for f in HILL_Y), t)


def draw_ground_layer(frame: FrameContext) -> list[DrawCommand]:
    vp = frame.viewport
    paint = vertical_gradient((SNOW_TOP, SNOW_BOTTOM), vp.height * HILL_Y[1], vp.height)
    return [FillPath(hill_path(vp), paint)]
