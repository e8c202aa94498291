"""Draw-command model — the boundary between scene generation and rasterizers.

Layer generators emit these immutable commands; renderers (SVG, matplotlib,
plotly) consume them. Coordinates are device-independent pixels with the
origin at the top-left and y growing downward.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

import numpy as np

Point = tuple[float, float]


def _clamp01(v: float) -> float:
    return max(0.0, min(1.0, v))


@dataclass(frozen=True)
class Color:
    """RGBA color with float channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_argb(cls, argb: int) -> Color:
        """Build from a 0xAARRGGBB literal."""
        return cls(
            r=((argb >> 16) & 0xFF) / 255.0,
            g=((argb >> 8) & 0xFF) / 255.0,
            b=(argb & 0xFF) / 255.0,
            a=((argb >> 24) & 0xFF) / 255.0,
        )

    def with_alpha(self, alpha: float) -> Color:
        return replace(self, a=_clamp01(alpha))

    def lerp(self, other: Color, t: float) -> Color:
        """Per-channel linear interpolation; t is clamped to [0, 1]."""
        t = _clamp01(t)
        return Color(
            r=_clamp01(self.r + (other.r - self.r) * t),
            g=_clamp01(self.g + (other.g - self.g) * t),
            b=_clamp01(self.b + (other.b - self.b) * t),
            a=_clamp01(self.a + (other.a - self.a) * t),
        )

    def to_hex(self) -> str:
        """'#rrggbb' without alpha."""
        return "#{:02x}{:02x}{:02x}".format(
            round(self.r * 255), round(self.g * 255), round(self.b * 255)
        )

    def to_rgba(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_css(self) -> str:
        return "rgba({},{},{},{:.4f})".format(
            round(self.r * 255), round(self.g * 255), round(self.b * 255), self.a
        )


WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)
GRAY = Color.from_argb(0xFF888888)


def mean_color(colors: tuple[Color, ...]) -> Color:
    """Average of a gradient's colors, for renderers without gradient support."""
    n = len(colors)
    return Color(
        r=sum(c.r for c in colors) / n,
        g=sum(c.g for c in colors) / n,
        b=sum(c.b for c in colors) / n,
        a=sum(c.a for c in colors) / n,
    )


# --- Paints ---


@dataclass(frozen=True)
class SolidPaint:
    color: Color


@dataclass(frozen=True)
class LinearGradient:
    """Evenly spaced color stops from `start` to `end`."""

    colors: tuple[Color, ...]
    start: Point
    end: Point


@dataclass(frozen=True)
class RadialGradient:
    """Evenly spaced color stops from `center` outward to `radius`."""

    colors: tuple[Color, ...]
    center: Point
    radius: float


Paint = Union[SolidPaint, LinearGradient, RadialGradient]


def solid(color: Color) -> SolidPaint:
    return SolidPaint(color)


def vertical_gradient(colors: tuple[Color, ...], top: float, bottom: float) -> LinearGradient:
    return LinearGradient(colors=colors, start=(0.0, top), end=(0.0, bottom))


def horizontal_gradient(colors: tuple[Color, ...], left: float, right: float) -> LinearGradient:
    return LinearGradient(colors=colors, start=(left, 0.0), end=(right, 0.0))


def paint_stops(colors: tuple[Color, ...]) -> list[tuple[float, Color]]:
    """Offsets in [0, 1] paired with each color."""
    if len(colors) == 1:
        return [(0.0, colors[0])]
    last = len(colors) - 1
    return [(i / last, c) for i, c in enumerate(colors)]


# --- Paths ---


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class QuadTo:
    cx: float
    cy: float
    x: float
    y: float


@dataclass(frozen=True)
class CubicTo:
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


@dataclass(frozen=True)
class Close:
    pass


Segment = Union[MoveTo, LineTo, QuadTo, CubicTo, Close]


@dataclass(frozen=True)
class Path:
    segments: tuple[Segment, ...]

    def points(self) -> list[Point]:
        """Every end point and control point, in order."""
        pts: list[Point] = []
        for seg in self.segments:
            if isinstance(seg, (MoveTo, LineTo)):
                pts.append((seg.x, seg.y))
            elif isinstance(seg, QuadTo):
                pts += [(seg.cx, seg.cy), (seg.x, seg.y)]
            elif isinstance(seg, CubicTo):
                pts += [(seg.c1x, seg.c1y), (seg.c2x, seg.c2y), (seg.x, seg.y)]
        return pts

    def to_svg(self, precision: int = 3) -> str:
        """SVG path data string ('d' attribute)."""
        fmt = f"{{:.{precision}f}}"

        def f(*vals: float) -> str:
            return " ".join(fmt.format(v) for v in vals)

        parts: list[str] = []
        for seg in self.segments:
            if isinstance(seg, MoveTo):
                parts.append("M " + f(seg.x, seg.y))
            elif isinstance(seg, LineTo):
                parts.append("L " + f(seg.x, seg.y))
            elif isinstance(seg, QuadTo):
                parts.append("Q " + f(seg.cx, seg.cy, seg.x, seg.y))
            elif isinstance(seg, CubicTo):
                parts.append("C " + f(seg.c1x, seg.c1y, seg.c2x, seg.c2y, seg.x, seg.y))
            else:
                parts.append("Z")
        return " ".join(parts)


class PathBuilder:
    """Mutable builder producing an immutable Path.

    Example:
        >>> path = PathBuilder().move_to(0, 0).line_to(10, 0).close().build()
    """

    def __init__(self) -> None:
        self._segments: list[Segment] = []

    def move_to(self, x: float, y: float) -> PathBuilder:
        self._segments.append(MoveTo(x, y))
        return self

    def line_to(self, x: float, y: float) -> PathBuilder:
        self._segments.append(LineTo(x, y))
        return self

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> PathBuilder:
        self._segments.append(QuadTo(cx, cy, x, y))
        return self

    def cubic_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> PathBuilder:
        self._segments.append(CubicTo(c1x, c1y, c2x, c2y, x, y))
        return self

    def close(self) -> PathBuilder:
        self._segments.append(Close())
        return self

    def build(self) -> Path:
        return Path(tuple(self._segments))


def polygon(points: list[Point]) -> Path:
    builder = PathBuilder().move_to(*points[0])
    for p in points[1:]:
        builder.line_to(*p)
    return builder.close().build()


# --- Commands ---


@dataclass(frozen=True)
class Shadow:
    dx: float
    dy: float
    blur: float
    color: Color


@dataclass(frozen=True)
class FillPath:
    path: Path
    paint: Paint
    shadow: Shadow | None = None


@dataclass(frozen=True)
class StrokePath:
    path: Path
    color: Color
    width: float
    dash: tuple[float, float] | None = None  # (on, off)


@dataclass(frozen=True)
class FillCircle:
    center: Point
    radius: float
    paint: Paint
    shadow: Shadow | None = None


@dataclass(frozen=True)
class FillRect:
    top_left: Point
    width: float
    height: float
    paint: Paint


@dataclass(frozen=True)
class FillOval:
    top_left: Point
    width: float
    height: float
    paint: Paint
    shadow: Shadow | None = None


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    color: Color
    width: float
    round_cap: bool = False


@dataclass(frozen=True)
class Text:
    """Single-line text anchored at its horizontal center on the baseline."""

    text: str
    position: Point
    font_size: float
    color: Color
    bold: bool = True
    shadow: Shadow | None = None


@dataclass(frozen=True)
class Group:
    """Commands drawn under a rotation (degrees) and uniform scale about `pivot`."""

    commands: tuple[DrawCommand, ...]
    pivot: Point
    rotation: float = 0.0
    scale: float = 1.0
    label: str = ""


DrawCommand = Union[FillPath, StrokePath, FillCircle, FillRect, FillOval, Line, Text, Group]


# --- Transform flattening ---


def transform_matrix(pivot: Point, rotation: float = 0.0, scale: float = 1.0) -> np.ndarray:
    """3x3 affine for rotate-and-scale about a pivot (y-down, clockwise degrees)."""
    px, py = pivot
    rad = np.deg2rad(rotation)
    c, s = np.cos(rad) * scale, np.sin(rad) * scale
    return np.array(
        [
            [c, -s, px - c * px + s * py],
            [s, c, py - s * px - c * py],
            [0.0, 0.0, 1.0],
        ]
    )


def _apply(m: np.ndarray, p: Point) -> Point:
    x, y = p
    return (
        float(m[0, 0] * x + m[0, 1] * y + m[0, 2]),
        float(m[1, 0] * x + m[1, 1] * y + m[1, 2]),
    )


def _is_identity(m: np.ndarray) -> bool:
    return bool(np.allclose(m, np.eye(3), rtol=0.0, atol=1e-12))


def _scale_of(m: np.ndarray) -> float:
    return float(np.hypot(m[0, 0], m[1, 0]))


def _transform_path(m: np.ndarray, path: Path) -> Path:
    segs: list[Segment] = []
    for seg in path.segments:
        if isinstance(seg, MoveTo):
            segs.append(MoveTo(*_apply(m, (seg.x, seg.y))))
        elif isinstance(seg, LineTo):
            segs.append(LineTo(*_apply(m, (seg.x, seg.y))))
        elif isinstance(seg, QuadTo):
            segs.append(QuadTo(*_apply(m, (seg.cx, seg.cy)), *_apply(m, (seg.x, seg.y))))
        elif isinstance(seg, CubicTo):
            segs.append(
                CubicTo(
                    *_apply(m, (seg.c1x, seg.c1y)),
                    *_apply(m, (seg.c2x, seg.c2y)),
                    *_apply(m, (seg.x, seg.y)),
                )
            )
        else:
            segs.append(seg)
    return Path(tuple(segs))


def _transform_paint(m: np.ndarray, paint: Paint) -> Paint:
    if isinstance(paint, LinearGradient):
        return replace(paint, start=_apply(m, paint.start), end=_apply(m, paint.end))
    if isinstance(paint, RadialGradient):
        return replace(
            paint, center=_apply(m, paint.center), radius=paint.radius * _scale_of(m)
        )
    return paint


# Cubic control-point distance approximating a quarter circle
_KAPPA = 0.5522847498


def oval_path(top_left: Point, width: float, height: float) -> Path:
    x, y = top_left
    rx, ry = width / 2.0, height / 2.0
    cx, cy = x + rx, y + ry
    kx, ky = rx * _KAPPA, ry * _KAPPA
    return (
        PathBuilder()
        .move_to(cx + rx, cy)
        .cubic_to(cx + rx, cy + ky, cx + kx, cy + ry, cx, cy + ry)
        .cubic_to(cx - kx, cy + ry, cx - rx, cy + ky, cx - rx, cy)
        .cubic_to(cx - rx, cy - ky, cx - kx, cy - ry, cx, cy - ry)
        .cubic_to(cx + kx, cy - ry, cx + rx, cy - ky, cx + rx, cy)
        .close()
        .build()
    )


def rect_path(top_left: Point, width: float, height: float) -> Path:
    x, y = top_left
    return polygon([(x, y), (x + width, y), (x + width, y + height), (x, y + height)])


def _transform_command(m: np.ndarray, cmd: DrawCommand) -> DrawCommand:
    k = _scale_of(m)
    if isinstance(cmd, FillPath):
        return replace(
            cmd, path=_transform_path(m, cmd.path), paint=_transform_paint(m, cmd.paint)
        )
    if isinstance(cmd, StrokePath):
        dash = None if cmd.dash is None else (cmd.dash[0] * k, cmd.dash[1] * k)
        return replace(cmd, path=_transform_path(m, cmd.path), width=cmd.width * k, dash=dash)
    if isinstance(cmd, FillCircle):
        return replace(
            cmd,
            center=_apply(m, cmd.center),
            radius=cmd.radius * k,
            paint=_transform_paint(m, cmd.paint),
        )
    if isinstance(cmd, FillRect):
        return FillPath(
            path=_transform_path(m, rect_path(cmd.top_left, cmd.width, cmd.height)),
            paint=_transform_paint(m, cmd.paint),
        )
    if isinstance(cmd, FillOval):
        return FillPath(
            path=_transform_path(m, oval_path(cmd.top_left, cmd.width, cmd.height)),
            paint=_transform_paint(m, cmd.paint),
            shadow=cmd.shadow,
        )
    if isinstance(cmd, Line):
        return replace(
            cmd, start=_apply(m, cmd.start), end=_apply(m, cmd.end), width=cmd.width * k
        )
    if isinstance(cmd, Text):
        # Rotation is not applied to text; only its anchor moves.
        return replace(cmd, position=_apply(m, cmd.position), font_size=cmd.font_size * k)
    raise TypeError(f"Unsupported command: {type(cmd).__name__}")


def flatten(
    commands: tuple[DrawCommand, ...] | list[DrawCommand],
    matrix: np.ndarray | None = None,
) -> list[DrawCommand]:
    """Resolve Group transforms into world-space commands, preserving order.

    Args:
        commands: Commands possibly containing nested Groups.
        matrix: Transform accumulated from enclosing groups.

    Returns:
        A list with no Group commands.
    """
    m = np.eye(3) if matrix is None else matrix
    out: list[DrawCommand] = []
    for cmd in commands:
        if isinstance(cmd, Group):
            inner = m @ transform_matrix(cmd.pivot, cmd.rotation, cmd.scale)
            out.extend(flatten(cmd.commands, inner))
        elif _is_identity(m):
            out.append(cmd)
        else:
            out.append(_transform_command(m, cmd))
    return out


def count_commands(commands: tuple[DrawCommand, ...] | list[DrawCommand]) -> int:
    """Number of leaf commands, descending into groups."""
    total = 0
    for cmd in commands:
        total += count_commands(cmd.commands) if isinstance(cmd, Group) else 1
    return total


@dataclass(frozen=True)
class Layer:
    name: str
    commands: tuple[DrawCommand, ...] = field(default_factory=tuple)
