"""Scene composition: run every layer generator for one frame, in painter's order."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from wintertree.drawing import DrawCommand, Layer, Point, count_commands
from wintertree.layers.ground import draw_ground_layer
from wintertree.layers.ornaments import draw_ornaments_layer
from wintertree.layers.props import draw_banner_layer, draw_gifts_layer
from wintertree.layers.sky import draw_sky_layer
from wintertree.layers.snow import draw_snow_layer
from wintertree.layers.tree import draw_tree_layer
from wintertree.models import FrameContext, LightMode, SkyTheme, TimePhases, ViewportSize
from wintertree.palettes import palette_for
from wintertree.text import MatplotlibTextMeasurer, TextMeasurer
from wintertree.timebase import time_phases

logger = logging.getLogger(__name__)

LayerGenerator = Callable[[FrameContext], list[DrawCommand]]

# Ornaments follow the tree so they share its sway and sit on top of the foliage.
LAYERS: tuple[tuple[str, LayerGenerator], ...] = (
    ("sky", draw_sky_layer),
    ("ground", draw_ground_layer),
    ("tree", draw_tree_layer),
    ("ornaments", draw_ornaments_layer),
    ("banner", draw_banner_layer),
    ("gifts", draw_gifts_layer),
    ("snow", draw_snow_layer),
)

_default_measurer: TextMeasurer | None = None


@dataclass(frozen=True)
class Scene:
    """One rendered frame: the inputs that produced it plus its layers."""

    viewport: ViewportSize
    phases: TimePhases
    light_mode: LightMode
    theme: SkyTheme
    layers: tuple[Layer, ...]
    elapsed_ms: float = 0.0

    @property
    def commands(self) -> tuple[DrawCommand, ...]:
        """All layer commands concatenated in painter's order."""
        return tuple(cmd for layer in self.layers for cmd in layer.commands)

    def layer(self, name: str) -> Layer:
        for layer in self.layers:
            if layer.name == name:
                return layer
        raise KeyError(name)


def _measurer() -> TextMeasurer:
    global _default_measurer
    if _default_measurer is None:
        _default_measurer = MatplotlibTextMeasurer()
    return _default_measurer


def render(
    size: ViewportSize | tuple[float, float],
    elapsed_ms: float,
    light_mode: LightMode = LightMode.RAINBOW,
    theme: SkyTheme = SkyTheme.NIGHT_SKY,
    measurer: TextMeasurer | None = None,
) -> Scene:
    """Produce the draw commands for one frame.

    Pure with respect to its arguments: the same size, time, mode and theme
    always yield an equal Scene.

    Args:
        size: Canvas size, or a (width, height) pair.
        elapsed_ms: Milliseconds since the animation started.
        light_mode: Fairy-light mode chosen by taps.
        theme: Sky palette.
        measurer: Text measurement service; matplotlib fonts when omitted.

    Returns:
        The frame's Scene.

    Raises:
        InvalidViewportError: If the size is not positive and finite.
    """
    viewport = size if isinstance(size, ViewportSize) else ViewportSize(*size)
    frame = FrameContext(
        viewport=viewport,
        phases=time_phases(elapsed_ms),
        light_mode=light_mode,
        theme=theme,
        palette=palette_for(theme),
        measurer=measurer if measurer is not None else _measurer(),
    )
    layers = tuple(Layer(name, tuple(generate(frame))) for name, generate in LAYERS)
    logger.debug(
        "frame %.0fms %gx%g mode=%s: %s",
        elapsed_ms,
        viewport.width,
        viewport.height,
        light_mode.name,
        ", ".join(f"{layer.name}={count_commands(layer.commands)}" for layer in layers),
    )
    return Scene(viewport, frame.phases, light_mode, theme, layers, elapsed_ms)


def next_mode(mode: LightMode) -> LightMode:
    """RAINBOW -> ORIGINAL -> OFF -> RAINBOW."""
    return mode.next()


def on_tap(mode: LightMode, point: Point | None = None) -> LightMode:
    """A tap anywhere advances the light mode; the position is not used."""
    return next_mode(mode)
