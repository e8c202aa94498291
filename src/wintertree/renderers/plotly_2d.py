"""Plotly 2D renderer.

Every command becomes a layout shape in scene pixel coordinates, with the
y axis reversed so the origin stays at the top-left. Plotly shapes have no
gradient fills, so gradients are flattened to their mean color.
"""

from __future__ import annotations

import plotly.graph_objects as go

from wintertree.compute import Scene
from wintertree.drawing import (
    Color,
    DrawCommand,
    FillCircle,
    FillOval,
    FillPath,
    FillRect,
    Line,
    Paint,
    SolidPaint,
    StrokePath,
    Text,
    flatten,
    mean_color,
)

_BG = "#0b1026"


def paint_color(paint: Paint) -> Color:
    if isinstance(paint, SolidPaint):
        return paint.color
    return mean_color(paint.colors)


def _shape(cmd: DrawCommand) -> dict | None:
    """Layout shape for a command, or None for text."""
    if isinstance(cmd, FillPath):
        return dict(
            type="path",
            path=cmd.path.to_svg(precision=2),
            fillcolor=paint_color(cmd.paint).to_css(),
            line=dict(width=0),
        )
    if isinstance(cmd, StrokePath):
        return dict(
            type="path",
            path=cmd.path.to_svg(precision=2),
            fillcolor="rgba(0,0,0,0)",
            line=dict(color=cmd.color.to_css(), width=cmd.width, dash="dash" if cmd.dash else "solid"),
        )
    if isinstance(cmd, FillCircle):
        cx, cy = cmd.center
        r = cmd.radius
        return dict(
            type="circle",
            x0=cx - r, y0=cy - r, x1=cx + r, y1=cy + r,
            fillcolor=paint_color(cmd.paint).to_css(),
            line=dict(width=0),
        )
    if isinstance(cmd, (FillRect, FillOval)):
        x, y = cmd.top_left
        return dict(
            type="rect" if isinstance(cmd, FillRect) else "circle",
            x0=x, y0=y, x1=x + cmd.width, y1=y + cmd.height,
            fillcolor=paint_color(cmd.paint).to_css(),
            line=dict(width=0),
        )
    if isinstance(cmd, Line):
        (x0, y0), (x1, y1) = cmd.start, cmd.end
        return dict(
            type="line",
            x0=x0, y0=y0, x1=x1, y1=y1,
            line=dict(color=cmd.color.to_css(), width=cmd.width),
        )
    if isinstance(cmd, Text):
        return None
    raise TypeError(f"Unsupported command: {type(cmd).__name__}")


def render_plotly_figure(scene: Scene) -> go.Figure:
    """Render a Scene as a Plotly figure made of layout shapes.

    Text commands become annotations so they stack above every shape.

    Args:
        scene: A composed frame.

    Returns:
        Plotly Figure object.
    """
    w, h = scene.viewport.width, scene.viewport.height
    shapes: list[dict] = []
    annotations: list[dict] = []
    for cmd in flatten(scene.commands):
        shape = _shape(cmd)
        if shape is not None:
            shapes.append(dict(shape, xref="x", yref="y", layer="above"))
        elif isinstance(cmd, Text):
            x, y = cmd.position
            annotations.append(
                dict(
                    x=x,
                    y=y,
                    xref="x",
                    yref="y",
                    text=f"<b>{cmd.text}</b>" if cmd.bold else cmd.text,
                    showarrow=False,
                    yanchor="bottom",
                    font=dict(size=cmd.font_size, color=cmd.color.to_css()),
                )
            )

    fig = go.Figure()
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=int(w),
        height=int(h),
        xaxis=dict(visible=False, range=[0.0, w], autorange=False, fixedrange=True),
        # Reversed range keeps y growing downward like the scene.
        yaxis=dict(
            visible=False,
            range=[h, 0.0],
            autorange=False,
            fixedrange=True,
            scaleanchor="x",
        ),
        shapes=shapes,
        annotations=annotations,
    )
    fig._config = {"displayModeBar": False}  # type: ignore[attr-defined]
    return fig
