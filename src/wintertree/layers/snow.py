"""Falling snowflakes.

Every flake is a pure function of its index and the current phases, so the
fall loops on the sky cycle with no per-flake state.
"""

from __future__ import annotations

import math

from wintertree.drawing import WHITE, Color, DrawCommand
from wintertree.glyphs import snowflake
from wintertree.layers.sky import CLOUDS, cloud_base_radius, cloud_center
from wintertree.models import FrameContext, SnowflakeSpec, ViewportSize
from wintertree.palettes import SNOW_TINT_ALICE, SNOW_TINT_BLUE

NUM_FLAKES = 45
BRANCH_COUNTS = (6, 8, 12)
FALL_END = 0.85
FADE_FRACTION = 0.2


def _seed(i: int, mul: int, add: int, mod: int = 100) -> int:
    return (i * mul + add) % mod


def flake_color(i: int) -> Color:
    if i % 5 == 0:
        return SNOW_TINT_BLUE
    if i % 7 == 0:
        return SNOW_TINT_ALICE
    return WHITE


def fade(progress: float) -> float:
    """Ramp up over the first fifth of the fall and down over the last."""
    fade_in = min(progress / FADE_FRACTION, 1.0)
    fade_out = min((1.0 - progress) / FADE_FRACTION, 1.0)
    return fade_in * fade_out


def snowflake_spec(i: int, viewport: ViewportSize, sky_time: float, twinkle: float) -> SnowflakeSpec:
    w, h = viewport.width, viewport.height
    x_seed = _seed(i, 37, 13) / 100.0
    y_seed = _seed(i, 53, 29) / 100.0
    size_seed = _seed(i, 17, 7) / 100.0
    rot_seed = _seed(i, 41, 19, 360)
    alpha_seed = _seed(i, 31, 11) / 100.0

    cloud_index = i % len(CLOUDS)
    cloud_x, cloud_y = cloud_center(CLOUDS[cloud_index], viewport, sky_time)
    base_radius = cloud_base_radius(viewport)

    progress = (sky_time + y_seed) % 1.0
    start_y = cloud_y + base_radius * 0.5
    y = start_y + (h * FALL_END - start_y) * progress

    drift_phase = (twinkle * (0.4 + 0.3 * x_seed) + i * 0.1) % 1.0
    drift = w * 0.06 * (x_seed - 0.5) * math.sin(2.0 * math.pi * drift_phase)
    x = cloud_x + base_radius * 2.5 * (x_seed - 0.5) + drift

    return SnowflakeSpec(
        index=i,
        center=(x, y),
        size=w * 0.025 * (0.6 + size_seed),
        branch_count=BRANCH_COUNTS[_seed(i, 23, 5, 3)],
        complexity=1 + _seed(i, 19, 3, 3),
        rotation=rot_seed + 30.0 * (x_seed - 0.5) * twinkle,
        color=flake_color(i),
        alpha=(0.5 + 0.35 * alpha_seed) * fade(progress),
        origin_cloud_index=cloud_index,
        fall_progress=progress,
    )


def snowflake_specs(frame: FrameContext) -> list[SnowflakeSpec]:
    return [
        snowflake_spec(i, frame.viewport, frame.phases.sky, frame.phases.twinkle)
        for i in range(NUM_FLAKES)
    ]


def is_visible(spec: SnowflakeSpec, viewport: ViewportSize) -> bool:
    y = spec.center[1]
    return -spec.size * 2.0 < y < viewport.height + spec.size * 2.0


def draw_snow_layer(frame: FrameContext) -> list[DrawCommand]:
    commands: list[DrawCommand] = []
    for spec in snowflake_specs(frame):
        if not is_visible(spec, frame.viewport):
            continue
        commands.append(
            snowflake(
                spec.center,
                spec.size,
                branches=spec.branch_count,
                complexity=spec.complexity,
                color=spec.color,
                alpha=spec.alpha,
                rotation=spec.rotation,
            )
        )
    return commands
