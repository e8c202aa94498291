"""Fairy-light wire with twinkling bulbs, and the tinsel garland."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import pairwise

from wintertree.drawing import (
    GRAY,
    WHITE,
    Color,
    DrawCommand,
    FillCircle,
    Line,
    Path,
    PathBuilder,
    StrokePath,
    solid,
)
from wintertree.geometry import PathMeasure
from wintertree.layers.tree import sway_group, tree_geometry
from wintertree.models import FrameContext, LightBulbSpec, LightMode, TreeGeometry
from wintertree.palettes import (
    BULB_AMBER,
    BULB_CYAN,
    BULB_GREEN,
    BULB_RED,
    BULB_VIOLET,
    BULBS,
    GARLAND_RIBBON,
    TINSEL,
    WIRE,
)


@dataclass(frozen=True)
class WrapStyle:
    """Shape constants for a strand that zig-zags down the tree."""

    layers: tuple[int, ...]
    wobble: float  # alternating width change per anchored layer
    y_offset: float  # anchor height within the layer
    next_y_offset: float  # landing height on the next layer
    edge: float  # half-span at the anchor, as a fraction of layer width
    next_edge: float
    amplitude: float  # wave amplitude, fraction of layer height
    wave_cp: float  # wave control-point spread, fraction of layer width
    descent_cp: tuple[float, float]  # descent control-point spreads
    descent_amp: float


WIRE_STYLE = WrapStyle(
    layers=(2, 4, 6, 8),
    wobble=0.05,
    y_offset=0.52,
    next_y_offset=0.50,
    edge=0.50,
    next_edge=0.48,
    amplitude=0.18,
    wave_cp=0.20,
    descent_cp=(0.08, 0.16),
    descent_amp=0.5,
)

GARLAND_STYLE = WrapStyle(
    layers=(1, 3, 5, 7),
    wobble=0.06,
    y_offset=0.55,
    next_y_offset=0.45,
    edge=0.48,
    next_edge=0.45,
    amplitude=0.30,
    wave_cp=0.18,
    descent_cp=(0.10, 0.20),
    descent_amp=0.6,
)

# Hue walk for rainbow mode: (segment end, color). The bulb's own color
# opens and closes the cycle.
RAINBOW_STOPS: tuple[tuple[float, Color], ...] = (
    (0.17, BULB_RED),
    (0.34, BULB_AMBER),
    (0.50, BULB_GREEN),
    (0.67, BULB_CYAN),
    (0.84, BULB_VIOLET),
)


def _wrap_width(geom: TreeGeometry, layer: int, wobble: float) -> float:
    base = geom.layer_base_width(layer)
    sign = 1.0 if layer % 2 == 0 else -1.0
    return base + sign * base * wobble


def wrap_path(geom: TreeGeometry, style: WrapStyle) -> Path:
    """Waves left-to-right across each anchor layer, then curls down to the next."""
    cx = geom.center_x
    lh = geom.layer_height
    amplitude = lh * style.amplitude
    builder = PathBuilder()

    for idx, layer in enumerate(style.layers):
        width = _wrap_width(geom, layer, style.wobble)
        y = geom.layer_top(layer) + lh * style.y_offset
        if idx == 0:
            builder.move_to(cx - width * style.edge, y)
        builder.cubic_to(
            cx - width * style.wave_cp, y - amplitude * 0.8,
            cx + width * style.wave_cp, y + amplitude * 0.8,
            cx + width * style.edge, y,
        )
        if idx != len(style.layers) - 1:
            nxt = style.layers[idx + 1]
            next_width = _wrap_width(geom, nxt, style.wobble)
            next_y = geom.layer_top(nxt) + lh * style.next_y_offset
            builder.cubic_to(
                cx + width * style.descent_cp[0], y + amplitude * style.descent_amp,
                cx - next_width * style.descent_cp[1], next_y - amplitude * style.descent_amp,
                cx - next_width * style.next_edge, next_y,
            )
    return builder.build()


def bulb_phase(idx: int) -> float:
    return ((idx * 37) % 100) / 100.0


def bulb_specs(geom: TreeGeometry, wire: Path) -> list[LightBulbSpec]:
    """Bulbs at uniform arc-length spacing along the wire."""
    measure = PathMeasure(wire)
    step = geom.layer_height * 0.45
    base_radius = geom.layer_height * 0.10
    bulbs: list[LightBulbSpec] = []
    for idx, pos in enumerate(measure.sample(step, offset=step * 0.5)):
        jitter = ((idx * 17 + 7) % 100) / 100.0
        bulbs.append(
            LightBulbSpec(
                position=pos,
                color=BULBS[idx % len(BULBS)],
                radius=base_radius * (0.9 + 0.2 * jitter),
                phase_offset=bulb_phase(idx),
            )
        )
    return bulbs


def rainbow_color(base: Color, shift: float) -> Color:
    """Color at `shift` in [0, 1) along base -> red -> amber -> green -> cyan -> violet -> base."""
    stops = ((0.0, base),) + RAINBOW_STOPS + ((1.0, base),)
    for (t0, c0), (t1, c1) in pairwise(stops):
        if shift < t1:
            return c0.lerp(c1, (shift - t0) / (t1 - t0))
    return base


def sparkle(twinkle: float, phase: float) -> float:
    speed = 1.5 + phase * 0.8
    return (math.sin(2.0 * math.pi * (twinkle * speed + phase)) + 1.0) * 0.5


def bulb_color(bulb: LightBulbSpec, mode: LightMode, twinkle: float) -> Color:
    if mode == LightMode.ORIGINAL:
        return bulb.color
    return rainbow_color(bulb.color, (twinkle * 0.3 + bulb.phase_offset) % 1.0)


def draw_bulb(bulb: LightBulbSpec, mode: LightMode, twinkle: float) -> list[DrawCommand]:
    if mode == LightMode.OFF:
        return [FillCircle(bulb.position, bulb.radius, solid(GRAY.with_alpha(0.15)))]

    s = sparkle(twinkle, bulb.phase_offset)
    is_on = s > 0.15 + bulb.phase_offset * 0.15
    on_factor = 1.0 if is_on else 0.1
    intensity = (0.3 + 0.7 * s) * on_factor
    color = bulb_color(bulb, mode, twinkle)
    glow = bulb.radius * (1.8 + 1.2 * s)
    x, y = bulb.position
    r = bulb.radius
    return [
        FillCircle(bulb.position, glow, solid(color.with_alpha(0.35 * intensity))),
        FillCircle(bulb.position, glow * 0.65, solid(color.with_alpha(0.50 * intensity))),
        FillCircle(bulb.position, glow * 0.40, solid(color.with_alpha(0.75 * intensity))),
        FillCircle(bulb.position, r, solid(color.with_alpha(0.95 * intensity))),
        FillCircle((x - r * 0.22, y - r * 0.22), r * 0.25, solid(WHITE.with_alpha(0.90 * s * on_factor))),
    ]


def draw_lights(geom: TreeGeometry, mode: LightMode, twinkle: float) -> list[DrawCommand]:
    wire = wrap_path(geom, WIRE_STYLE)
    commands: list[DrawCommand] = [StrokePath(wire, WIRE.with_alpha(0.85), geom.layer_height * 0.06)]
    for bulb in bulb_specs(geom, wire):
        commands += draw_bulb(bulb, mode, twinkle)
    return commands


def draw_garland(geom: TreeGeometry, density: float) -> list[DrawCommand]:
    """Tinsel dots with tiny crosses, over a chord-approximated metallic strand."""
    unit = geom.layer_height * 0.14
    measure = PathMeasure(wrap_path(geom, GARLAND_STYLE))
    hairline = 1.0 * density
    commands: list[DrawCommand] = []

    cross = unit * 0.16
    for x, y in measure.sample(unit * 0.80):
        commands.append(FillCircle((x, y), unit * 0.10, solid(TINSEL.with_alpha(0.75))))
        commands.append(Line((x - cross, y), (x + cross, y), TINSEL.with_alpha(0.65), hairline))
        commands.append(Line((x, y - cross), (x, y + cross), TINSEL.with_alpha(0.65), hairline))

    segment = unit * 0.55
    dist = 0.0
    ribbon = GARLAND_RIBBON.with_alpha(0.35)
    while dist < measure.length - segment:
        commands.append(
            Line(measure.position_at(dist), measure.position_at(dist + segment), ribbon, unit * 0.10)
        )
        dist += segment
    return commands


def draw_ornaments_layer(frame: FrameContext) -> list[DrawCommand]:
    geom = tree_geometry(frame.viewport)
    body = draw_lights(geom, frame.light_mode, frame.phases.twinkle)
    body += draw_garland(geom, frame.viewport.density)
    return [sway_group(geom, frame.phases.sway, body, label="ornaments")]
