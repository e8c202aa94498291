"""Reusable shape builders shared by several layers."""

from __future__ import annotations

import math

from wintertree.drawing import (
    BLACK,
    WHITE,
    Color,
    DrawCommand,
    FillCircle,
    FillOval,
    Group,
    Line,
    Path,
    PathBuilder,
    Point,
    StrokePath,
    polygon,
    solid,
)


def drop_shadow(
    center: Point,
    width: float,
    height: float,
    blur: float,
    alpha: float,
) -> list[DrawCommand]:
    """Soft oval shadow faked with four stacked, growing ovals."""
    cx, cy = center
    commands: list[DrawCommand] = []
    for i in range(4):
        layer_alpha = alpha * (1.0 - i * 0.2)
        w = width + i * blur * 0.5
        h = height + i * blur * 0.3
        commands.append(
            FillOval(
                top_left=(cx - w / 2.0, cy - h / 2.0),
                width=w,
                height=h,
                paint=solid(BLACK.with_alpha(layer_alpha)),
            )
        )
    return commands


def star_polygon(center: Point, outer: float, inner: float, points: int = 5) -> Path:
    """Star with alternating outer/inner vertices, first tip pointing up."""
    cx, cy = center
    vertices: list[Point] = []
    step = 360.0 / (points * 2)
    for k in range(points * 2):
        radius = outer if k % 2 == 0 else inner
        angle = math.radians(-90.0 + k * step)
        vertices.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return polygon(vertices)


def snowflake(
    center: Point,
    size: float,
    branches: int = 6,
    complexity: int = 2,
    color: Color = WHITE,
    alpha: float = 1.0,
    rotation: float = 0.0,
) -> Group:
    """Radiating N-spoke flake with angled sub-branches and tip dots."""
    cx, cy = center
    stroke = size * 0.08
    tint = color.with_alpha(alpha)
    commands: list[DrawCommand] = []

    for i in range(branches):
        angle = math.radians(i * 360.0 / branches)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        end = (cx + size * cos_a, cy + size * sin_a)
        commands.append(Line(center, end, tint, stroke, round_cap=True))

        for level in range(1, complexity + 1):
            dist = size * (level / (complexity + 1))
            length = size * (0.35 - level * 0.08)
            bx, by = cx + dist * cos_a, cy + dist * sin_a
            for side in (-1.0, 1.0):
                branch_angle = angle + side * math.pi / 5.0
                commands.append(
                    Line(
                        (bx, by),
                        (bx + length * math.cos(branch_angle), by + length * math.sin(branch_angle)),
                        tint,
                        stroke * 0.75,
                        round_cap=True,
                    )
                )

        if complexity > 1:
            commands.append(
                FillCircle(end, size * 0.12 * 0.3, solid(color.with_alpha(alpha * 0.7)))
            )

    commands.append(FillCircle(center, stroke * 1.2, solid(tint)))
    return Group(tuple(commands), pivot=center, rotation=rotation, label="snowflake")


def candy_cane(
    center: Point,
    height: float,
    thickness: float,
    rotation: float,
    stripe: Color,
) -> Group:
    """Hooked cane: white stroke with a dashed stripe stroke on top."""
    cx, cy = center
    hook = thickness * 2.2
    top = cy - height / 2.0
    path = (
        PathBuilder()
        .move_to(cx, top)
        .quad_to(cx + hook * 0.9, top + hook * 0.2, cx + hook * 1.4, top + hook * 0.8)
        .quad_to(cx + hook * 1.8, top + hook * 1.6, cx + hook * 0.9, top + hook * 2.2)
        .line_to(cx, cy + height / 2.0)
        .build()
    )
    stripe_len = thickness * 1.6
    return Group(
        (
            StrokePath(path, WHITE, thickness),
            StrokePath(path, stripe, thickness, dash=(stripe_len, stripe_len)),
        ),
        pivot=center,
        rotation=rotation,
        label="candy-cane",
    )
