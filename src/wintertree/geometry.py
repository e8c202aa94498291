"""Bezier evaluation, path flattening and arc-length measurement."""

from __future__ import annotations

import numpy as np

from wintertree.drawing import Close, CubicTo, LineTo, MoveTo, Path, Point, QuadTo

# Samples per curve segment when flattening. High enough that arc-length
# error stays far below a pixel for the curve sizes used in the scene.
CURVE_SAMPLES = 64


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def cubic_point(p0: float, p1: float, p2: float, p3: float, t: float) -> float:
    """Bernstein form of a one-dimensional cubic bezier."""
    u = 1.0 - t
    return u**3 * p0 + 3 * u**2 * t * p1 + 3 * u * t * t * p2 + t**3 * p3


def quad_point(p0: float, p1: float, p2: float, t: float) -> float:
    u = 1.0 - t
    return u * u * p0 + 2 * u * t * p1 + t * t * p2


def _cubic_samples(p0: Point, c1: Point, c2: Point, p3: Point, n: int) -> np.ndarray:
    t = np.linspace(0.0, 1.0, n + 1)[1:, None]
    u = 1.0 - t
    pts = np.array([p0, c1, c2, p3])
    return u**3 * pts[0] + 3 * u**2 * t * pts[1] + 3 * u * t**2 * pts[2] + t**3 * pts[3]


def _quad_samples(p0: Point, c: Point, p2: Point, n: int) -> np.ndarray:
    t = np.linspace(0.0, 1.0, n + 1)[1:, None]
    u = 1.0 - t
    pts = np.array([p0, c, p2])
    return u**2 * pts[0] + 2 * u * t * pts[1] + t**2 * pts[2]


def flatten_path(path: Path, samples: int = CURVE_SAMPLES) -> list[np.ndarray]:
    """Convert a path to polylines, one (N, 2) array per contour.

    Closed contours repeat their first point at the end.
    """
    contours: list[np.ndarray] = []
    current: list[np.ndarray] = []
    start: Point = (0.0, 0.0)
    last: Point = (0.0, 0.0)

    def flush() -> None:
        if current:
            contours.append(np.vstack(current))

    for seg in path.segments:
        if isinstance(seg, MoveTo):
            flush()
            start = last = (seg.x, seg.y)
            current = [np.array([start])]
        elif isinstance(seg, LineTo):
            if not current:
                current = [np.array([last])]
            last = (seg.x, seg.y)
            current.append(np.array([last]))
        elif isinstance(seg, QuadTo):
            if not current:
                current = [np.array([last])]
            current.append(_quad_samples(last, (seg.cx, seg.cy), (seg.x, seg.y), samples))
            last = (seg.x, seg.y)
        elif isinstance(seg, CubicTo):
            if not current:
                current = [np.array([last])]
            current.append(
                _cubic_samples(
                    last, (seg.c1x, seg.c1y), (seg.c2x, seg.c2y), (seg.x, seg.y), samples
                )
            )
            last = (seg.x, seg.y)
        elif isinstance(seg, Close):
            if current:
                current.append(np.array([start]))
                flush()
                current = []
            last = start
    flush()
    return contours


class PathMeasure:
    """Arc-length parametrization of a path's first contour.

    Example:
        >>> m = PathMeasure(PathBuilder().move_to(0, 0).line_to(3, 4).build())
        >>> m.length
        5.0
        >>> m.position_at(2.5)
        (1.5, 2.0)
    """

    def __init__(self, path: Path, samples: int = CURVE_SAMPLES) -> None:
        contours = flatten_path(path, samples)
        if not contours:
            self._points = np.zeros((1, 2))
        else:
            self._points = contours[0]
        deltas = np.diff(self._points, axis=0)
        seg_lengths = np.hypot(deltas[:, 0], deltas[:, 1])
        self._cumulative = np.concatenate(([0.0], np.cumsum(seg_lengths)))

    @property
    def length(self) -> float:
        return float(self._cumulative[-1])

    def position_at(self, distance: float) -> Point:
        """Point at `distance` along the contour, clamped to its ends."""
        d = clamp(distance, 0.0, self.length)
        if len(self._points) == 1:
            x, y = self._points[0]
            return (float(x), float(y))
        x = np.interp(d, self._cumulative, self._points[:, 0])
        y = np.interp(d, self._cumulative, self._points[:, 1])
        return (float(x), float(y))

    def sample(self, step: float, offset: float = 0.0) -> list[Point]:
        """Positions at offset, offset+step, ... while within the length."""
        if step <= 0:
            raise ValueError("step must be positive")
        positions: list[Point] = []
        dist = offset
        while dist <= self.length:
            positions.append(self.position_at(dist))
            dist += step
        return positions
