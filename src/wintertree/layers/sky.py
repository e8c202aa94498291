"""Sky gradient, star field, crescent moon and drifting clouds."""

from __future__ import annotations

from wintertree.drawing import (
    WHITE,
    Color,
    DrawCommand,
    FillCircle,
    FillRect,
    solid,
    vertical_gradient,
)
from wintertree.models import CloudSpec, FrameContext, StarSpec, ViewportSize
from wintertree.palettes import MOON_CRATER_DARK, MOON_CRATER_HIGHLIGHT, ThemePalette
from wintertree.timebase import wave

# Hand-placed stars as (x, y) canvas fractions.
FIXED_STARS: tuple[tuple[float, float], ...] = (
    (0.10, 0.10),
    (0.18, 0.22),
    (0.22, 0.07),
    (0.32, 0.18),
    (0.38, 0.35),
    (0.42, 0.28),
    (0.48, 0.09),
    (0.54, 0.16),
    (0.60, 0.33),
    (0.68, 0.10),
    (0.72, 0.25),
    (0.78, 0.36),
    (0.82, 0.19),
    (0.86, 0.46),
    (0.92, 0.12),
    (0.95, 0.41),
)
GENERATED_STARS = 30

CLOUDS: tuple[CloudSpec, ...] = (
    CloudSpec(0.15, 0.12, 1.0, 0.30, 0.0),
    CloudSpec(0.45, 0.08, 0.8, 0.50, 0.3),
    CloudSpec(0.70, 0.15, 1.2, 0.25, 0.6),
    CloudSpec(0.25, 0.25, 0.9, 0.40, 0.8),
    CloudSpec(0.85, 0.22, 0.7, 0.35, 0.4),
    CloudSpec(0.55, 0.30, 1.1, 0.45, 0.2),
)

MOON_CENTER = (0.80, 0.18)
MOON_MASK_OFFSET = 0.55

# (dx, dy, radius) as fractions of the moon radius
CRATERS: tuple[tuple[float, float, float], ...] = (
    (-0.25, -0.10, 0.11),
    (-0.12, 0.15, 0.08),
    (-0.35, 0.05, 0.06),
    (-0.18, -0.28, 0.05),
    (-0.05, -0.02, 0.04),
)


def sky_phase(sky_time: float) -> float:
    return wave(sky_time)


def sky_colors(palette: ThemePalette, sky_time: float) -> tuple[Color, ...]:
    """Cross-fade between the theme's two 3-stop palettes."""
    t = sky_phase(sky_time)
    return tuple(a.lerp(b, t) for a, b in zip(palette.sky_base, palette.sky_shifted))


def generated_star_position(i: int, viewport: ViewportSize) -> tuple[float, float]:
    x = (0.04 + 0.92 * ((i * 37) % 100) / 100.0) * viewport.width
    y = (0.04 + 0.66 * ((i * 53 + 17) % 100) / 100.0) * viewport.height
    return (x, y)


def star_phase(idx: int) -> float:
    return ((idx * 23 + 7) % 100) / 100.0


def star_specs(viewport: ViewportSize) -> list[StarSpec]:
    """The 16 fixed stars followed by the 30 index-hashed ones."""
    positions = [(fx * viewport.width, fy * viewport.height) for fx, fy in FIXED_STARS]
    positions += [generated_star_position(i, viewport) for i in range(GENERATED_STARS)]
    return [StarSpec(position=p, phase_offset=star_phase(idx)) for idx, p in enumerate(positions)]


def star_twinkle(star_twinkle_time: float, phase_offset: float) -> float:
    """Raw twinkle value in [0, 1]."""
    return wave(star_twinkle_time + phase_offset)


def star_brightness(star_twinkle_time: float, phase_offset: float) -> float:
    """Brightness in [0.5, 1.0]."""
    return 0.5 + 0.5 * star_twinkle(star_twinkle_time, phase_offset)


def cloud_drift(cloud: CloudSpec, viewport: ViewportSize, sky_time: float) -> float:
    return ((sky_time * cloud.drift_speed + cloud.phase_offset) % 1.0) * viewport.width * 0.15


def cloud_center(cloud: CloudSpec, viewport: ViewportSize, sky_time: float) -> tuple[float, float]:
    return (
        viewport.width * cloud.x_frac + cloud_drift(cloud, viewport, sky_time),
        viewport.height * cloud.y_frac,
    )


def cloud_base_radius(viewport: ViewportSize, scale: float = 1.0) -> float:
    return viewport.width * 0.06 * scale


def moon_radius(viewport: ViewportSize) -> float:
    return min(viewport.width, viewport.height) * 0.08


def draw_background(frame: FrameContext) -> list[DrawCommand]:
    vp = frame.viewport
    colors = sky_colors(frame.palette, frame.phases.sky)
    return [FillRect((0.0, 0.0), vp.width, vp.height, vertical_gradient(colors, 0.0, vp.height))]


def draw_stars(frame: FrameContext) -> list[DrawCommand]:
    pal = frame.palette
    base = pal.star_radius * frame.viewport.density
    commands: list[DrawCommand] = []
    for star in star_specs(frame.viewport):
        twinkle = star_twinkle(frame.phases.star_twinkle, star.phase_offset)
        brightness = 0.5 + 0.5 * twinkle
        commands.append(
            FillCircle(
                star.position,
                base * (3.0 + 0.8 * twinkle),
                solid(pal.star.with_alpha(pal.star_glow_alpha * brightness)),
            )
        )
        commands.append(
            FillCircle(
                star.position,
                base * (0.9 + 0.2 * twinkle),
                solid(pal.star.with_alpha(brightness)),
            )
        )
    return commands


def draw_moon(frame: FrameContext) -> list[DrawCommand]:
    """Crescent made by painting a sky-colored disc over the full moon."""
    vp = frame.viewport
    pal = frame.palette
    cx, cy = MOON_CENTER[0] * vp.width, MOON_CENTER[1] * vp.height
    r = moon_radius(vp)

    commands: list[DrawCommand] = [
        FillCircle((cx, cy), r * 2.2, solid(pal.moon_base.with_alpha(0.18))),
        FillCircle((cx, cy), r * 1.4, solid(pal.moon_base.with_alpha(0.28))),
        FillCircle((cx, cy), r, solid(pal.moon_base)),
        FillCircle((cx + r * MOON_MASK_OFFSET, cy), r * 0.98, solid(pal.moon_mask)),
        FillCircle((cx, cy), r * 0.99, solid(WHITE.with_alpha(0.20))),
    ]
    for dx, dy, fr in CRATERS:
        crater_r = r * fr
        x, y = cx + r * dx, cy + r * dy
        commands.append(FillCircle((x, y), crater_r, solid(MOON_CRATER_DARK.with_alpha(0.65))))
        commands.append(
            FillCircle(
                (x - crater_r * 0.20, y - crater_r * 0.20),
                crater_r * 0.55,
                solid(MOON_CRATER_HIGHLIGHT.with_alpha(0.45)),
            )
        )
    return commands


def draw_clouds(frame: FrameContext) -> list[DrawCommand]:
    vp = frame.viewport
    pal = frame.palette
    alpha = pal.cloud_alpha
    commands: list[DrawCommand] = []
    for cloud in CLOUDS:
        x, y = cloud_center(cloud, vp, frame.phases.sky)
        base = cloud_base_radius(vp, cloud.scale)
        body = (
            ((x - base * 0.6, y), base * 0.85),
            ((x - base * 0.2, y - base * 0.3), base * 0.95),
            ((x + base * 0.3, y - base * 0.2), base * 1.0),
            ((x + base * 0.7, y + base * 0.1), base * 0.75),
            ((x, y + base * 0.2), base * 0.8),
        )
        for (bx, by), r in body:
            commands.append(
                FillCircle((bx, by + r * 0.1), r * 1.05, solid(pal.cloud_shadow.with_alpha(alpha * 0.3)))
            )
            commands.append(FillCircle((bx, by), r, solid(pal.cloud.with_alpha(alpha))))
            commands.append(
                FillCircle(
                    (bx - r * 0.2, by - r * 0.3),
                    r * 0.6,
                    solid(pal.cloud_highlight.with_alpha(alpha * 0.4)),
                )
            )
        puffs = (
            ((x - base * 0.4, y - base * 0.15), base * 0.5),
            ((x + base * 0.5, y), base * 0.55),
        )
        for center, r in puffs:
            commands.append(FillCircle(center, r, solid(pal.cloud.with_alpha(alpha * 0.8))))
    return commands


def draw_sky_layer(frame: FrameContext) -> list[DrawCommand]:
    return draw_background(frame) + draw_stars(frame) + draw_moon(frame) + draw_clouds(frame)
