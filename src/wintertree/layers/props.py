"""Foreground props: the greeting banner with its Santa hat, and three gift boxes."""

from __future__ import annotations

from wintertree.drawing import (
    BLACK,
    WHITE,
    Color,
    DrawCommand,
    FillCircle,
    FillOval,
    FillPath,
    FillRect,
    LinearGradient,
    Paint,
    PathBuilder,
    Point,
    RadialGradient,
    Shadow,
    Text,
    horizontal_gradient,
    polygon,
    solid,
    vertical_gradient,
)
from wintertree.glyphs import drop_shadow
from wintertree.layers.ground import ground_y_at
from wintertree.layers.tree import tree_geometry
from wintertree.models import FrameContext, GiftBoxSpec, TreeGeometry, ViewportSize
from wintertree.palettes import BLUE_GIFT, GREEN_GIFT, HAT_HIGHLIGHT, HAT_RED, RED_GIFT
from wintertree.text import TextMeasurer

GREETING = "Merry Christmas!"
HAT_ANCHOR = "C"

# Top and side faces are skewed by this fraction of the box width.
BOX_DEPTH = 0.35
BOX_SKEW = (0.7, 0.5)
RIBBON_WIDTH = 0.18
# Thickness of the cross band on the top face, as a fraction of the face depth.
TOP_BAND = 0.4


def gift_specs(geom: TreeGeometry) -> list[GiftBoxSpec]:
    cx, tw = geom.center_x, geom.tree_width
    red_w, green_w, blue_w = tw * 0.22, tw * 0.25, tw * 0.28
    return [
        GiftBoxSpec(x=cx - tw * 0.32, width=red_w, height=red_w * 1.05, palette=RED_GIFT),
        GiftBoxSpec(x=cx - tw * 0.13, width=green_w, height=green_w * 1.18, palette=GREEN_GIFT),
        GiftBoxSpec(x=cx + tw * 0.17, width=blue_w, height=blue_w * 0.80, palette=BLUE_GIFT),
    ]


def gift_bottom(spec: GiftBoxSpec, viewport: ViewportSize) -> float:
    """Bottom edge resting on the hill under the box center."""
    return ground_y_at(viewport, spec.center_x)


def _fill(colors: tuple[Color, ...], start: Point, end: Point) -> Paint:
    if len(colors) == 1:
        return solid(colors[0])
    return LinearGradient(colors=colors, start=start, end=end)


def _bounds(points: list[Point]) -> tuple[Point, Point]:
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return (min(xs), min(ys)), (max(xs), max(ys))


def _quad(points: list[Point], colors: tuple[Color, ...]) -> FillPath:
    """Filled quadrilateral with a gradient across its bounding box."""
    start, end = _bounds(points)
    return FillPath(polygon(points), _fill(colors, start, end))


def _skewed(x: float, y: float, width: float, height: float, dx: float, dy: float) -> list[Point]:
    """Face leaning up and to the right, from a front edge at (x, y)."""
    return [(x, y), (x + dx, y - dy), (x + width + dx, y - dy - height), (x + width, y - height)]


def draw_bow(center_x: float, y: float, size: float, spec: GiftBoxSpec) -> list[DrawCommand]:
    pal = spec.palette
    commands: list[DrawCommand] = []
    for side in (-1.0, 1.0):
        commands.append(
            FillPath(
                polygon(
                    [
                        (center_x + side * size * 0.08, y + size * 0.15),
                        (center_x + side * size * 0.15, y + size * 0.35),
                        (center_x + side * size * 0.05, y + size * 0.32),
                        (center_x, y + size * 0.15),
                    ]
                ),
                solid(pal.bow_tails),
            )
        )
    for side in (-1.0, 1.0):
        loop = (
            PathBuilder()
            .move_to(center_x + side * size * 0.15, y)
            .quad_to(
                center_x + side * size * 0.5, y - size * 0.3,
                center_x + side * size * 0.42, y + size * 0.05,
            )
            .quad_to(
                center_x + side * size * 0.35, y + size * 0.15,
                center_x + side * size * 0.15, y + size * 0.08,
            )
            .close()
            .build()
        )
        if len(pal.bow_loops) == 1:
            paint: Paint = solid(pal.bow_loops[0])
        else:
            paint = RadialGradient(
                colors=pal.bow_loops,
                center=(center_x + side * size * 0.35, y - size * 0.1),
                radius=size * 0.2,
            )
        commands.append(FillPath(loop, paint))
    commands.append(FillCircle((center_x, y + size * 0.04), size * 0.12, solid(pal.bow_knot)))
    return commands


def draw_gift(spec: GiftBoxSpec, viewport: ViewportSize) -> list[DrawCommand]:
    """Three shaded faces (front, top, right) with ribbons and a bow."""
    pal = spec.palette
    x, w, h = spec.x, spec.width, spec.height
    du = viewport.density
    bottom = gift_bottom(spec, viewport)
    top = bottom - h
    depth = w * BOX_DEPTH
    dx, dy = depth * BOX_SKEW[0], depth * BOX_SKEW[1]
    rdx, rdy = depth * pal.ribbon_depth[0], depth * pal.ribbon_depth[1]
    rw = w * RIBBON_WIDTH
    rx = x + w / 2.0 - rw / 2.0
    band_y = top + h / 2.0 - rw / 2.0

    commands: list[DrawCommand] = drop_shadow(
        center=(spec.center_x, bottom + 3.0 * du),
        width=w * 1.1,
        height=w * 0.3,
        blur=28.0 * du,
        alpha=0.15,
    )

    # Box faces
    commands.append(FillRect((x, top), w, h, vertical_gradient(pal.front, top, bottom)))
    commands.append(
        FillPath(
            polygon(_skewed(x, top, w, 0.0, dx, dy)),
            LinearGradient(colors=pal.top, start=(x, top - dy), end=(x + w, top - dy)),
        )
    )
    commands.append(
        FillPath(
            polygon([(x + w, top), (x + w + dx, top - dy), (x + w + dx, bottom - dy), (x + w, bottom)]),
            vertical_gradient(pal.side, top - dy, bottom),
        )
    )

    # Vertical ribbon: front band, its run over the top face, and its edge
    commands.append(FillRect((rx, top), rw, h, horizontal_gradient(pal.ribbon_front, rx, rx + rw)))
    commands.append(_quad(_skewed(rx, top, rw, 0.0, rdx, rdy), pal.ribbon_top))
    commands.append(
        _quad(
            [(rx + rw, top), (rx + rw + rdx, top - rdy), (rx + rw + rdx, bottom - rdy), (rx + rw, bottom)],
            pal.ribbon_side,
        )
    )

    # Horizontal ribbon: front band, cross band on the top face, wrap onto the right face
    commands.append(
        FillRect((x, band_y), w, rw, _fill(pal.ribbon_band, (x, band_y), (x, band_y + rw)))
    )
    near, far = 0.5 - TOP_BAND / 2.0, 0.5 + TOP_BAND / 2.0
    commands.append(
        _quad(
            [
                (x + dx * near, top - dy * near),
                (x + dx * far, top - dy * far),
                (x + w + dx * far, top - dy * far),
                (x + w + dx * near, top - dy * near),
            ],
            pal.ribbon_top,
        )
    )
    commands.append(
        _quad(
            [
                (x + w, band_y),
                (x + w + rdx, band_y - rdy),
                (x + w + rdx, band_y + rw - rdy),
                (x + w, band_y + rw),
            ],
            pal.ribbon_side,
        )
    )

    commands += draw_bow(spec.center_x, top - h * 0.05, w * 0.45, spec)
    return commands


def hat_anchor_x(greeting: str, measurer: TextMeasurer, font_size: float, center_x: float) -> float | None:
    """Horizontal center of the first anchor glyph in a center-aligned string."""
    idx = greeting.find(HAT_ANCHOR)
    if idx == -1:
        return None
    total = measurer.measure(greeting, font_size)
    through_anchor = measurer.measure(greeting[: idx + 1], font_size)
    anchor_w = measurer.measure(HAT_ANCHOR, font_size)
    return center_x - total / 2.0 + through_anchor - anchor_w / 2.0


def draw_santa_hat(center_x: float, text_top: float, font_size: float, density: float) -> list[DrawCommand]:
    hat_h = font_size
    hat_w = hat_h * 0.95
    base = text_top - hat_h * 0.05
    cx = center_x

    body = (
        PathBuilder()
        .move_to(cx - hat_w * 0.45, base)
        .quad_to(cx - hat_w * 0.35, base - hat_h * 0.5, cx - hat_w * 0.15, base - hat_h * 0.75)
        .quad_to(cx + hat_w * 0.05, base - hat_h * 0.95, cx + hat_w * 0.35, base - hat_h * 0.65)
        .quad_to(cx + hat_w * 0.45, base - hat_h * 0.5, cx + hat_w * 0.45, base)
        .close()
        .build()
    )
    highlight = (
        PathBuilder()
        .move_to(cx - hat_w * 0.40, base - hat_h * 0.05)
        .quad_to(cx - hat_w * 0.30, base - hat_h * 0.45, cx - hat_w * 0.15, base - hat_h * 0.70)
        .line_to(cx - hat_w * 0.20, base - hat_h * 0.65)
        .quad_to(cx - hat_w * 0.32, base - hat_h * 0.40, cx - hat_w * 0.42, base - hat_h * 0.02)
        .close()
        .build()
    )
    fur_shadow = Shadow(0.0, 2.0 * density, 6.0 * density, BLACK.with_alpha(60 / 255))
    brim_h = hat_h * 0.28
    return [
        FillPath(body, solid(HAT_RED), shadow=Shadow(2.0 * density, 3.0 * density, 8.0 * density, BLACK.with_alpha(100 / 255))),
        FillPath(highlight, solid(HAT_HIGHLIGHT)),
        FillOval((cx - hat_w * 0.55, base - brim_h / 2.0), hat_w * 1.1, brim_h, solid(WHITE), shadow=fur_shadow),
        FillCircle((cx + hat_w * 0.32, base - hat_h * 0.68), hat_h * 0.22, solid(WHITE), shadow=fur_shadow),
    ]


def draw_banner(frame: FrameContext, greeting: str = GREETING) -> list[DrawCommand]:
    """Centered greeting; the hat is drawn first so the text sits on top."""
    vp = frame.viewport
    du = vp.density
    font_size = vp.width * 0.08
    x, y = vp.width / 2.0, vp.height * 0.10

    commands: list[DrawCommand] = []
    anchor = hat_anchor_x(greeting, frame.measurer, font_size, x)
    if anchor is not None:
        commands += draw_santa_hat(anchor, y - font_size * 0.75, font_size, du)
    commands.append(
        Text(
            greeting,
            (x, y),
            font_size,
            WHITE,
            bold=True,
            shadow=Shadow(0.0, 4.0 * du, 8.0 * du, BLACK.with_alpha(120 / 255)),
        )
    )
    return commands


def draw_banner_layer(frame: FrameContext) -> list[DrawCommand]:
    return draw_banner(frame)


def draw_gifts_layer(frame: FrameContext) -> list[DrawCommand]:
    commands: list[DrawCommand] = []
    for spec in gift_specs(tree_geometry(frame.viewport)):
        commands += draw_gift(spec, frame.viewport)
    return commands
