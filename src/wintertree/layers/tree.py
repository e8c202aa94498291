"""Layered conifer: scalloped foliage, trunk, topper star and candy canes.

Foliage layers stack from the top down, each one wider than the last. The
whole tree is wrapped in a single rotation about the ground point under its
center so it sways rigidly.
"""

from __future__ import annotations

import math

from wintertree.drawing import (
    WHITE,
    DrawCommand,
    FillCircle,
    FillPath,
    Group,
    Path,
    PathBuilder,
    RadialGradient,
    StrokePath,
    Point,
    polygon,
    solid,
    vertical_gradient,
)
from wintertree.glyphs import candy_cane, drop_shadow, star_polygon
from wintertree.models import FrameContext, TreeGeometry, TreeLayerSpec, ViewportSize
from wintertree.palettes import (
    CANDY_RED,
    FOLIAGE,
    FOLIAGE_HIGHLIGHT,
    FOLIAGE_SHADOW,
    TOPPER_BODY,
    TOPPER_GLOWS,
    TRUNK,
    TRUNK_GRAIN,
    SNOW_BOTTOM,
)
from wintertree.timebase import wave

NUM_LAYERS = 10
SWAY_AMPLITUDE_DEG = 1.1
TOPPER_INNER_RATIO = 0.45


def tree_geometry(viewport: ViewportSize, num_layers: int = NUM_LAYERS) -> TreeGeometry:
    """Derive every tree measurement from the canvas size.

    The tree is positioned so the bottom foliage layer ends just above the
    trunk top, and the trunk reaches slightly below the ground line.

    Raises:
        ValueError: If num_layers is less than 1.
    """
    if num_layers < 1:
        raise ValueError(f"num_layers must be >= 1, got {num_layers}")
    w, h = viewport.width, viewport.height
    tree_width = w * 0.42
    tree_height = h * 0.62
    ground_y = h * 0.81
    layer_height = tree_height / (num_layers + 1.0)
    layer_overlap = layer_height * 0.35
    trunk_above_ground = layer_height * 1.75

    tree_top = ground_y - trunk_above_ground - (
        (num_layers - 1) * (layer_height - layer_overlap) + layer_height
    )
    last_bottom = tree_top + (num_layers - 1) * (layer_height - layer_overlap) + layer_height

    return TreeGeometry(
        num_layers=num_layers,
        center_x=w / 2.0,
        ground_y=ground_y,
        tree_width=tree_width,
        tree_height=tree_height,
        layer_height=layer_height,
        layer_overlap=layer_overlap,
        tree_top=tree_top,
        trunk_top=last_bottom - layer_height * 1.75,
        trunk_bottom=ground_y + 25.0 * viewport.density,
    )


def layer_spec(geom: TreeGeometry, index: int) -> TreeLayerSpec:
    top = geom.layer_top(index)
    width = geom.layer_base_width(index)
    return TreeLayerSpec(
        index=index,
        top=top,
        bottom=top + geom.layer_height,
        width=width,
        left=geom.center_x - width / 2.0,
        right=geom.center_x + width / 2.0,
        scallops=5 + index,
    )


def layer_specs(geom: TreeGeometry) -> list[TreeLayerSpec]:
    return [layer_spec(geom, i) for i in range(geom.num_layers)]


def sway_degrees(sway_time: float) -> float:
    return math.sin(2.0 * math.pi * (sway_time + 0.10)) * SWAY_AMPLITUDE_DEG


def sway_group(geom: TreeGeometry, sway_time: float, commands: list[DrawCommand], label: str) -> Group:
    return Group(tuple(commands), pivot=geom.sway_pivot, rotation=sway_degrees(sway_time), label=label)


def layer_outline(spec: TreeLayerSpec, geom: TreeGeometry) -> Path:
    """Closed scalloped silhouette: bumps down the right flank, drooping
    bottom edge, bumps back up the left flank."""
    cx = geom.center_x
    lh = geom.layer_height
    half = spec.width / 2.0
    per_side = spec.scallops_per_side
    bump = spec.width * 0.08

    builder = PathBuilder().move_to(cx, spec.top)
    for j in range(per_side):
        t1 = j / per_side
        t2 = (j + 1) / per_side
        y_mid = (spec.top + lh * t1 + spec.top + lh * t2) / 2.0
        x2 = cx + half * t2
        builder.quad_to(x2 + bump, y_mid, x2, spec.top + lh * t2)

    droop = spec.bottom + lh * 0.1
    builder.cubic_to(
        spec.right * 0.8 + cx * 0.2, droop,
        spec.left * 0.8 + cx * 0.2, droop,
        spec.left, spec.bottom,
    )

    for j in range(per_side - 1, -1, -1):
        t1 = (j + 1) / per_side
        t2 = j / per_side
        y_mid = (spec.top + lh * t1 + spec.top + lh * t2) / 2.0
        x1 = cx - half * t1
        x2 = cx - half * t2
        builder.quad_to(x1 - bump, y_mid, x2, spec.top + lh * t2)

    return builder.close().build()


def layer_shadow(spec: TreeLayerSpec, geom: TreeGeometry) -> Path:
    cx = geom.center_x
    lh = geom.layer_height
    depth = lh * 0.25
    droop = spec.bottom + lh * 0.1
    return (
        PathBuilder()
        .move_to(spec.right, spec.bottom)
        .cubic_to(
            spec.right * 0.8 + cx * 0.2, droop,
            spec.left * 0.8 + cx * 0.2, droop,
            spec.left, spec.bottom,
        )
        .line_to(spec.left * 0.9 + cx * 0.1, spec.bottom - depth)
        .cubic_to(
            cx, spec.bottom - depth * 0.5,
            cx, spec.bottom - depth * 0.5,
            spec.right * 0.9 + cx * 0.1, spec.bottom - depth,
        )
        .close()
        .build()
    )


def layer_highlight(spec: TreeLayerSpec, geom: TreeGeometry) -> Path:
    cx = geom.center_x
    lh = geom.layer_height
    y = spec.top + lh * 0.3
    hw = spec.width * 0.4
    return (
        PathBuilder()
        .move_to(cx - hw * 0.5, y)
        .cubic_to(cx - hw * 0.2, y - lh * 0.05, cx + hw * 0.2, y - lh * 0.05, cx + hw * 0.5, y)
        .build()
    )


def draw_foliage(geom: TreeGeometry) -> list[DrawCommand]:
    # One gradient spans the whole tree so overlapping layers blend.
    brush = vertical_gradient(FOLIAGE, geom.tree_top, geom.tree_top + geom.tree_height)
    commands: list[DrawCommand] = []
    for spec in layer_specs(geom):
        commands.append(FillPath(layer_outline(spec, geom), brush))
        commands.append(FillPath(layer_shadow(spec, geom), solid(FOLIAGE_SHADOW.with_alpha(0.5))))
        if spec.index % 2 == 0:
            commands.append(
                StrokePath(
                    layer_highlight(spec, geom),
                    FOLIAGE_HIGHLIGHT.with_alpha(0.25),
                    geom.layer_height * 0.04,
                )
            )
    return commands


def draw_trunk(geom: TreeGeometry) -> list[DrawCommand]:
    cx = geom.center_x
    top_w = geom.tree_width * 0.24
    bottom_w = geom.tree_width * 0.32
    top, bottom = geom.trunk_top, geom.trunk_bottom

    commands: list[DrawCommand] = [
        FillPath(
            polygon(
                [
                    (cx - top_w / 2.0, top),
                    (cx + top_w / 2.0, top),
                    (cx + bottom_w / 2.0, bottom),
                    (cx - bottom_w / 2.0, bottom),
                ]
            ),
            vertical_gradient(TRUNK, top, bottom),
        )
    ]

    for i in range(4):
        t = (i + 1) / 5.0
        y = top + (bottom - top) * t
        w = top_w + (bottom_w - top_w) * t
        grain = (
            PathBuilder()
            .move_to(cx - w * 0.35, y)
            .cubic_to(
                cx - w * 0.15, y - geom.layer_height * 0.15,
                cx + w * 0.15, y + geom.layer_height * 0.15,
                cx + w * 0.35, y,
            )
            .build()
        )
        commands.append(StrokePath(grain, TRUNK_GRAIN.with_alpha(0.3), top_w * 0.03))

    commands.append(
        FillCircle(
            (cx - top_w * 0.2, top + (bottom - top) * 0.4),
            top_w * 0.08,
            solid(TRUNK_GRAIN.with_alpha(0.4)),
        )
    )

    blend_r = bottom_w * 0.6
    blend_c = (cx, bottom - blend_r * 0.2)
    commands.append(
        FillCircle(
            blend_c,
            blend_r,
            RadialGradient(
                colors=(WHITE.with_alpha(0.55), SNOW_BOTTOM.with_alpha(0.35), TRUNK[1].with_alpha(0.0)),
                center=blend_c,
                radius=blend_r,
            ),
        )
    )
    return commands


def topper_center(geom: TreeGeometry) -> Point:
    return (geom.center_x, geom.tree_top - geom.layer_height * 0.25)


def draw_topper(geom: TreeGeometry, twinkle: float) -> Group:
    """Pulsing, gently rocking star above the top layer."""
    center = topper_center(geom)
    outer = geom.tree_width * 0.10
    star_pulse = wave(twinkle * 0.8 + 0.05)
    glow_pulse = wave(twinkle * 1.5 + 0.2)
    scale = 0.92 + 0.18 * star_pulse
    rotation = math.sin(2.0 * math.pi * (twinkle * 0.4 + 0.15)) * 1.5

    path = star_polygon(center, outer, outer * TOPPER_INNER_RATIO)
    outermost, middle, inner, core = TOPPER_GLOWS
    commands: tuple[DrawCommand, ...] = (
        FillCircle(center, outer * (3.0 + 0.8 * glow_pulse), solid(outermost.with_alpha(0.15 + 0.25 * glow_pulse))),
        FillCircle(center, outer * (2.0 + 0.6 * star_pulse), solid(middle.with_alpha(0.25 + 0.30 * star_pulse))),
        FillCircle(center, outer * (1.2 + 0.4 * star_pulse), solid(inner.with_alpha(0.35 + 0.35 * glow_pulse))),
        FillCircle(center, outer * (0.8 + 0.2 * star_pulse), solid(core.with_alpha(0.50 + 0.30 * glow_pulse))),
        FillPath(path, RadialGradient(colors=TOPPER_BODY, center=center, radius=outer * 1.25)),
        FillPath(path, solid(WHITE.with_alpha(0.15 + 0.25 * glow_pulse))),
    )
    return Group(commands, pivot=center, rotation=rotation, scale=scale, label="topper")


def draw_candy_canes(geom: TreeGeometry) -> list[DrawCommand]:
    cx, top, lh, tw = geom.center_x, geom.tree_top, geom.layer_height, geom.tree_width
    return [
        candy_cane((cx - tw * 0.22, top + lh * 5.4), lh * 1.2, tw * 0.035, -16.0, CANDY_RED),
        candy_cane((cx + tw * 0.20, top + lh * 3.6), lh * 1.2, tw * 0.032, 12.0, CANDY_RED),
    ]


def draw_tree_shadow(geom: TreeGeometry, density: float) -> list[DrawCommand]:
    return drop_shadow(
        center=(geom.center_x, geom.ground_y + 5.0 * density),
        width=geom.tree_width * 0.8,
        height=geom.tree_width * 0.25,
        blur=36.0 * density,
        alpha=0.18,
    )


def draw_tree_layer(frame: FrameContext) -> list[DrawCommand]:
    geom = tree_geometry(frame.viewport)
    body: list[DrawCommand] = [draw_topper(geom, frame.phases.twinkle)]
    body += draw_trunk(geom)
    body += draw_foliage(geom)
    body += draw_candy_canes(geom)
    return draw_tree_shadow(geom, frame.viewport.density) + [
        sway_group(geom, frame.phases.sway, body, label="tree")
    ]
