"""Frozen value types shared by the timebase, the layer generators and the renderers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING

from wintertree.drawing import Color, Point

if TYPE_CHECKING:
    from wintertree.palettes import ThemePalette
    from wintertree.text import TextMeasurer

# Canvas edge raw pixel constants were tuned against.
REFERENCE_EDGE = 1080.0


class InvalidViewportError(ValueError):
    """Canvas size outside the contract (non-positive or non-finite)."""


class LightMode(IntEnum):
    """Fairy-light display mode, advanced by taps."""

    RAINBOW = 0
    ORIGINAL = 1
    OFF = 2

    def next(self) -> LightMode:
        return LightMode((self.value + 1) % len(LightMode))


class SkyTheme(Enum):
    NIGHT_SKY = "night_sky"
    WINTER_MORNING = "winter_morning"


@dataclass(frozen=True)
class ViewportSize:
    """Canvas size in device-independent pixels."""

    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            v = getattr(self, name)
            if not math.isfinite(v) or v <= 0:
                raise InvalidViewportError(f"{name} must be positive and finite, got {v!r}")

    @property
    def density(self) -> float:
        """Scale for constants originally expressed in raw pixels."""
        return min(self.width, self.height) / REFERENCE_EDGE


@dataclass(frozen=True)
class TimePhases:
    """Oscillator phases, each in [0, 1)."""

    twinkle: float  # 2200 ms: bulbs, topper, snow sway
    sway: float  # 6200 ms: tree sway
    sky: float  # 18000 ms: sky cross-fade, clouds, snowfall
    star_twinkle: float  # 3500 ms: star field


@dataclass(frozen=True)
class StarSpec:
    position: Point
    phase_offset: float


@dataclass(frozen=True)
class CloudSpec:
    x_frac: float
    y_frac: float
    scale: float
    drift_speed: float
    phase_offset: float


@dataclass(frozen=True)
class TreeGeometry:
    """Tree quantities derived from canvas size and layer count."""

    num_layers: int
    center_x: float
    ground_y: float  # ground level under the tree (0.81H)
    tree_width: float
    tree_height: float
    layer_height: float
    layer_overlap: float
    tree_top: float
    trunk_top: float
    trunk_bottom: float

    @property
    def layer_step(self) -> float:
        return self.layer_height - self.layer_overlap

    def layer_progress(self, index: float) -> float:
        """0 at the top layer, 1 at the bottom one."""
        if self.num_layers <= 1:
            return 1.0
        return index / (self.num_layers - 1)

    def layer_base_width(self, index: float) -> float:
        return self.tree_width * (0.25 + 0.75 * self.layer_progress(index))

    def layer_top(self, index: float) -> float:
        return self.tree_top + index * self.layer_step

    @property
    def sway_pivot(self) -> Point:
        return (self.center_x, self.ground_y)


@dataclass(frozen=True)
class TreeLayerSpec:
    index: int
    top: float
    bottom: float
    width: float
    left: float
    right: float
    scallops: int

    @property
    def scallops_per_side(self) -> int:
        return self.scallops // 2


@dataclass(frozen=True)
class LightBulbSpec:
    position: Point
    color: Color
    radius: float
    phase_offset: float


@dataclass(frozen=True)
class SnowflakeSpec:
    """One flake for one frame; every field is a function of index and time."""

    index: int
    center: Point
    size: float
    branch_count: int
    complexity: int
    rotation: float
    color: Color
    alpha: float
    origin_cloud_index: int
    fall_progress: float


@dataclass(frozen=True)
class GiftPalette:
    front: tuple[Color, ...]
    top: tuple[Color, ...]
    side: tuple[Color, ...]
    ribbon_front: tuple[Color, ...]  # vertical band, horizontal gradient
    ribbon_band: tuple[Color, ...]  # horizontal band across the front
    ribbon_top: tuple[Color, ...]
    ribbon_side: tuple[Color, ...]
    bow_tails: Color
    bow_loops: tuple[Color, ...]
    bow_knot: Color
    ribbon_depth: tuple[float, float]  # skew factors for ribbon faces


@dataclass(frozen=True)
class GiftBoxSpec:
    x: float  # left edge of the front face
    width: float
    height: float
    palette: GiftPalette

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2.0


@dataclass(frozen=True)
class FrameContext:
    """Everything a layer generator reads for one frame."""

    viewport: ViewportSize
    phases: TimePhases
    light_mode: LightMode
    theme: SkyTheme
    palette: ThemePalette
    measurer: TextMeasurer
