"""Tests for scene composition: ordering, purity, periodicity and scaling."""

from __future__ import annotations

import logging
import math

import pytest

from wintertree.compute import LAYERS, Scene, next_mode, on_tap, render
from wintertree.drawing import (
    FillCircle,
    FillOval,
    FillPath,
    FillRect,
    Group,
    Line,
    StrokePath,
    Text,
    flatten,
)
from wintertree.models import InvalidViewportError, LightMode, SkyTheme, ViewportSize

# Least common multiple of the four oscillator periods (2200, 6200, 18000, 3500 ms)
FULL_CYCLE_MS = 42_966_000


@pytest.fixture
def scene(measurer) -> Scene:
    return render(ViewportSize(1080.0, 1920.0), 1234.0, measurer=measurer)


class TestRender:
    """Tests for render()."""

    def test_painter_order(self, scene: Scene) -> None:
        assert [layer.name for layer in scene.layers] == [
            "sky",
            "ground",
            "tree",
            "ornaments",
            "banner",
            "gifts",
            "snow",
        ]
        assert [name for name, _ in LAYERS] == [layer.name for layer in scene.layers]

    def test_commands_concatenate_layers(self, scene: Scene) -> None:
        assert len(scene.commands) == sum(len(layer.commands) for layer in scene.layers)
        assert scene.commands[0] == scene.layer("sky").commands[0]
        assert scene.commands[-1] == scene.layer("snow").commands[-1]

    def test_deterministic(self, measurer) -> None:
        a = render((1080.0, 1920.0), 5555.0, LightMode.ORIGINAL, SkyTheme.WINTER_MORNING, measurer)
        b = render((1080.0, 1920.0), 5555.0, LightMode.ORIGINAL, SkyTheme.WINTER_MORNING, measurer)
        assert a == b

    def test_periodic_over_full_cycle(self, measurer) -> None:
        a = render((720.0, 1280.0), 1000.0, measurer=measurer)
        b = render((720.0, 1280.0), 1000.0 + FULL_CYCLE_MS, measurer=measurer)
        assert a.layers == b.layers

    def test_accepts_viewport_or_tuple(self, measurer) -> None:
        a = render(ViewportSize(800.0, 600.0), 0.0, measurer=measurer)
        b = render((800.0, 600.0), 0.0, measurer=measurer)
        assert a == b

    @pytest.mark.parametrize("size", [(0.0, 100.0), (100.0, -1.0), (math.nan, 100.0), (100.0, math.inf)])
    def test_rejects_invalid_viewport(self, size, measurer) -> None:
        with pytest.raises(InvalidViewportError):
            render(size, 0.0, measurer=measurer)

    def test_light_mode_only_changes_ornaments(self, measurer) -> None:
        rainbow = render((1080.0, 1920.0), 800.0, LightMode.RAINBOW, measurer=measurer)
        off = render((1080.0, 1920.0), 800.0, LightMode.OFF, measurer=measurer)
        for a, b in zip(rainbow.layers, off.layers):
            if a.name == "ornaments":
                assert a != b
            else:
                assert a == b

    def test_theme_changes_sky_only(self, measurer) -> None:
        night = render((1080.0, 1920.0), 800.0, theme=SkyTheme.NIGHT_SKY, measurer=measurer)
        morning = render((1080.0, 1920.0), 800.0, theme=SkyTheme.WINTER_MORNING, measurer=measurer)
        assert night.layer("sky") != morning.layer("sky")
        assert night.layer("tree") == morning.layer("tree")

    def test_topper_on_reference_canvas(self, scene: Scene) -> None:
        tree = scene.layer("tree").commands[4]
        topper = tree.commands[0]
        assert isinstance(topper, Group)
        assert topper.label == "topper"
        assert topper.pivot[0] == pytest.approx(540.0)
        assert topper.pivot[1] == pytest.approx(597.4690909, abs=1e-6)

    def test_unknown_layer(self, scene: Scene) -> None:
        with pytest.raises(KeyError):
            scene.layer("aurora")

    def test_logs_command_counts(self, measurer, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="wintertree.compute"):
            render((1080.0, 1920.0), 0.0, measurer=measurer)
        assert "sky=" in caplog.text
        assert "mode=RAINBOW" in caplog.text


def _geometry(cmd) -> list[float]:
    """Every length-valued number of a flattened command."""
    if isinstance(cmd, FillCircle):
        return [*cmd.center, cmd.radius]
    if isinstance(cmd, (FillRect, FillOval)):
        return [*cmd.top_left, cmd.width, cmd.height]
    if isinstance(cmd, Line):
        return [*cmd.start, *cmd.end, cmd.width]
    if isinstance(cmd, Text):
        return [*cmd.position, cmd.font_size]
    if isinstance(cmd, StrokePath):
        return [v for p in cmd.path.points() for v in p] + [cmd.width]
    if isinstance(cmd, FillPath):
        return [v for p in cmd.path.points() for v in p]
    raise TypeError(type(cmd).__name__)


def test_scale_invariance(measurer) -> None:
    small = flatten(render((540.0, 960.0), 2500.0, measurer=measurer).commands)
    large = flatten(render((1080.0, 1920.0), 2500.0, measurer=measurer).commands)
    assert len(small) == len(large)
    for a, b in zip(small, large):
        assert type(a) is type(b)
        assert [2.0 * v for v in _geometry(a)] == pytest.approx(_geometry(b), rel=1e-9, abs=1e-6)


class TestTap:
    """Tests for the light-mode cycle."""

    def test_cycle(self) -> None:
        assert next_mode(LightMode.RAINBOW) == LightMode.ORIGINAL
        assert next_mode(LightMode.ORIGINAL) == LightMode.OFF
        assert next_mode(LightMode.OFF) == LightMode.RAINBOW

    def test_three_taps_return_to_start(self) -> None:
        mode = LightMode.RAINBOW
        for point in [(10.0, 10.0), (500.0, 900.0), None]:
            mode = on_tap(mode, point)
        assert mode == LightMode.RAINBOW

    def test_position_ignored(self) -> None:
        assert on_tap(LightMode.OFF, (0.0, 0.0)) == on_tap(LightMode.OFF, (999.0, 1.0))
