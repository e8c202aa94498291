"""Matplotlib static PNG renderer."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib import patheffects
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import PathPatch
from matplotlib.path import Path as MplPath

from wintertree.compute import Scene
from wintertree.drawing import (
    Close,
    CubicTo,
    DrawCommand,
    FillCircle,
    FillOval,
    FillPath,
    FillRect,
    Line,
    LinearGradient,
    LineTo,
    MoveTo,
    Paint,
    Path as ScenePath,
    QuadTo,
    RadialGradient,
    Shadow,
    SolidPaint,
    StrokePath,
    Text,
    flatten,
    oval_path,
    paint_stops,
    rect_path,
)
from wintertree.text import DEFAULT_FONT_FAMILY

_ROOT = Path(__file__).parent.parent.parent.parent

DPI = 100
# Longest side of the raster used to fill a gradient shape.
GRADIENT_RESOLUTION = 256


def _pt(px: float) -> float:
    """Scene pixels to matplotlib points at the figure DPI."""
    return px * 72.0 / DPI


def to_mpl_path(path: ScenePath) -> MplPath:
    """Convert a scene path to matplotlib codes and vertices."""
    verts: list[tuple[float, float]] = []
    codes: list[int] = []
    start = (0.0, 0.0)
    for seg in path.segments:
        if isinstance(seg, MoveTo):
            start = (seg.x, seg.y)
            verts.append(start)
            codes.append(MplPath.MOVETO)
        elif isinstance(seg, LineTo):
            verts.append((seg.x, seg.y))
            codes.append(MplPath.LINETO)
        elif isinstance(seg, QuadTo):
            verts += [(seg.cx, seg.cy), (seg.x, seg.y)]
            codes += [MplPath.CURVE3] * 2
        elif isinstance(seg, CubicTo):
            verts += [(seg.c1x, seg.c1y), (seg.c2x, seg.c2y), (seg.x, seg.y)]
            codes += [MplPath.CURVE4] * 3
        elif isinstance(seg, Close):
            verts.append(start)
            codes.append(MplPath.CLOSEPOLY)
    return MplPath(np.array(verts, dtype=float), codes)


def _shadow_effects(shadow: Shadow | None) -> list[patheffects.AbstractPathEffect]:
    # Offsets are in points with y up; the scene's y grows downward.
    # Blur is not supported, so the shadow is hard-edged.
    if shadow is None:
        return []
    return [
        patheffects.SimplePatchShadow(
            offset=(_pt(shadow.dx), -_pt(shadow.dy)),
            shadow_rgbFace=shadow.color.to_rgba()[:3],
            alpha=shadow.color.a,
        ),
        patheffects.Normal(),
    ]


def gradient_image(paint: Paint, extent: tuple[float, float, float, float]) -> np.ndarray:
    """RGBA raster of a gradient over (x0, x1, y0, y1), row 0 at y0."""
    x0, x1, y0, y1 = extent
    span = max(x1 - x0, y1 - y0, 1e-9)
    nx = max(2, int(GRADIENT_RESOLUTION * (x1 - x0) / span))
    ny = max(2, int(GRADIENT_RESOLUTION * (y1 - y0) / span))
    xs, ys = np.meshgrid(np.linspace(x0, x1, nx), np.linspace(y0, y1, ny))

    if isinstance(paint, LinearGradient):
        (sx, sy), (ex, ey) = paint.start, paint.end
        dx, dy = ex - sx, ey - sy
        denom = dx * dx + dy * dy or 1e-9
        t = ((xs - sx) * dx + (ys - sy) * dy) / denom
    elif isinstance(paint, RadialGradient):
        cx, cy = paint.center
        t = np.hypot(xs - cx, ys - cy) / max(paint.radius, 1e-9)
    else:
        raise TypeError(f"Not a gradient: {type(paint).__name__}")

    t = np.clip(t, 0.0, 1.0)
    stops = paint_stops(paint.colors)
    offsets = [o for o, _ in stops]
    channels = np.array([c.to_rgba() for _, c in stops])
    return np.stack([np.interp(t, offsets, channels[:, k]) for k in range(4)], axis=-1)


def _fill(ax: Axes, path: MplPath, paint: Paint, shadow: Shadow | None, zorder: int) -> None:
    if isinstance(paint, SolidPaint):
        patch = PathPatch(path, facecolor=paint.color.to_rgba(), edgecolor="none", zorder=zorder)
        patch.set_path_effects(_shadow_effects(shadow))
        ax.add_patch(patch)
        return

    clip = PathPatch(path, facecolor="none", edgecolor="none", zorder=zorder)
    if shadow is not None:
        # Shadow-only silhouette beneath the gradient raster.
        clip.set_path_effects(
            [
                patheffects.SimplePatchShadow(
                    offset=(_pt(shadow.dx), -_pt(shadow.dy)),
                    shadow_rgbFace=shadow.color.to_rgba()[:3],
                    alpha=shadow.color.a,
                )
            ]
        )
    ax.add_patch(clip)
    (x0, y0), (x1, y1) = path.get_extents().get_points()
    image = ax.imshow(
        gradient_image(paint, (x0, x1, y0, y1)),
        extent=(x0, x1, y1, y0),
        origin="upper",
        interpolation="bilinear",
        aspect="auto",
        zorder=zorder,
    )
    image.set_clip_path(clip)


def _draw(ax: Axes, cmd: DrawCommand, zorder: int) -> None:
    if isinstance(cmd, FillPath):
        _fill(ax, to_mpl_path(cmd.path), cmd.paint, cmd.shadow, zorder)
    elif isinstance(cmd, FillCircle):
        cx, cy = cmd.center
        r = cmd.radius
        _fill(ax, to_mpl_path(oval_path((cx - r, cy - r), 2 * r, 2 * r)), cmd.paint, cmd.shadow, zorder)
    elif isinstance(cmd, FillOval):
        _fill(ax, to_mpl_path(oval_path(cmd.top_left, cmd.width, cmd.height)), cmd.paint, cmd.shadow, zorder)
    elif isinstance(cmd, FillRect):
        _fill(ax, to_mpl_path(rect_path(cmd.top_left, cmd.width, cmd.height)), cmd.paint, None, zorder)
    elif isinstance(cmd, StrokePath):
        patch = PathPatch(
            to_mpl_path(cmd.path),
            facecolor="none",
            edgecolor=cmd.color.to_rgba(),
            linewidth=_pt(cmd.width),
            capstyle="round",
            joinstyle="round",
            zorder=zorder,
        )
        if cmd.dash is not None and cmd.width > 0:
            # Dash lengths are in multiples of the line width.
            patch.set_linestyle((0, (cmd.dash[0] / cmd.width, cmd.dash[1] / cmd.width)))
        ax.add_patch(patch)
    elif isinstance(cmd, Line):
        (x1, y1), (x2, y2) = cmd.start, cmd.end
        ax.plot(
            [x1, x2],
            [y1, y2],
            color=cmd.color.to_rgba(),
            linewidth=_pt(cmd.width),
            solid_capstyle="round" if cmd.round_cap else "butt",
            zorder=zorder,
        )
    elif isinstance(cmd, Text):
        x, y = cmd.position
        text = ax.text(
            x,
            y,
            cmd.text,
            ha="center",
            va="baseline",
            fontsize=_pt(cmd.font_size),
            fontweight="bold" if cmd.bold else "normal",
            family=DEFAULT_FONT_FAMILY,
            color=cmd.color.to_rgba(),
            zorder=zorder,
        )
        text.set_path_effects(_shadow_effects(cmd.shadow))
    else:
        raise TypeError(f"Unsupported command: {type(cmd).__name__}")


def render_static_frame(scene: Scene) -> Figure:
    """Render a Scene as a static matplotlib image.

    The axis spans the scene's pixel space with y inverted, so one scene
    pixel maps to one output pixel at the module DPI.

    Args:
        scene: A composed frame.

    Returns:
        matplotlib Figure object.
    """
    w, h = scene.viewport.width, scene.viewport.height
    fig = plt.figure(figsize=(w / DPI, h / DPI), dpi=DPI)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.set_xlim(0, w)
    ax.set_ylim(h, 0)
    ax.set_autoscale_on(False)
    ax.axis("off")

    for zorder, cmd in enumerate(flatten(scene.commands)):
        _draw(ax, cmd, zorder)
    return fig


def save_static_frame(scene: Scene, output_path: Path | None = None) -> Path:
    """Save a Scene as a PNG file.

    Args:
        scene: A composed frame.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        vp = scene.viewport
        filename = (
            f"wintertree__{scene.theme.value}__{scene.light_mode.name.lower()}"
            f"__{vp.width:g}x{vp.height:g}__{scene.elapsed_ms:.0f}ms.png"
        )
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_frame(scene)
    fig.savefig(output_path, dpi=DPI)
    plt.close(fig)
    return output_path
