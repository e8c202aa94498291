"""Tests for the fairy lights and garland."""

from __future__ import annotations

import math

import pytest

from wintertree.drawing import FillCircle, Group, StrokePath
from wintertree.geometry import PathMeasure
from wintertree.layers.ornaments import (
    GARLAND_STYLE,
    WIRE_STYLE,
    bulb_color,
    bulb_specs,
    draw_bulb,
    draw_lights,
    draw_ornaments_layer,
    rainbow_color,
    wrap_path,
)
from wintertree.layers.tree import draw_tree_layer, tree_geometry
from wintertree.models import LightBulbSpec, LightMode, ViewportSize
from wintertree.palettes import BULB_GREEN, BULB_RED, BULBS


@pytest.fixture
def bulb() -> LightBulbSpec:
    return LightBulbSpec(position=(100.0, 200.0), color=BULBS[0], radius=10.0, phase_offset=0.37)


class TestRainbow:
    """Tests for rainbow_color()."""

    def test_starts_and_ends_on_base(self) -> None:
        base = BULBS[0]
        assert rainbow_color(base, 0.0) == base
        assert rainbow_color(base, 0.999999).to_hex() == base.to_hex()

    def test_hits_each_stop(self) -> None:
        assert rainbow_color(BULBS[0], 0.17) == BULB_RED
        assert rainbow_color(BULBS[0], 0.50) == BULB_GREEN


class TestBulbs:
    """Tests for bulb placement along the wire."""

    def test_uniform_spacing(self, viewport: ViewportSize) -> None:
        geom = tree_geometry(viewport)
        wire = wrap_path(geom, WIRE_STYLE)
        specs = bulb_specs(geom, wire)
        measure = PathMeasure(wire)
        step = geom.layer_height * 0.45
        assert len(specs) == math.floor((measure.length - step * 0.5) / step) + 1
        first = specs[0].position
        assert first == pytest.approx(measure.position_at(step * 0.5))

    def test_radius_jitter_bounded(self, viewport: ViewportSize) -> None:
        geom = tree_geometry(viewport)
        base = geom.layer_height * 0.10
        for spec in bulb_specs(geom, wrap_path(geom, WIRE_STYLE)):
            assert base * 0.9 - 1e-9 <= spec.radius <= base * 1.1 + 1e-9

    def test_colors_cycle(self, viewport: ViewportSize) -> None:
        geom = tree_geometry(viewport)
        specs = bulb_specs(geom, wrap_path(geom, WIRE_STYLE))
        assert [s.color for s in specs[:6]] == list(BULBS)

    def test_garland_is_a_different_strand(self, viewport: ViewportSize) -> None:
        geom = tree_geometry(viewport)
        assert wrap_path(geom, WIRE_STYLE) != wrap_path(geom, GARLAND_STYLE)


class TestDrawBulb:
    """Tests for per-mode bulb rendering."""

    def test_off_is_single_dim_circle(self, bulb: LightBulbSpec) -> None:
        (cmd,) = draw_bulb(bulb, LightMode.OFF, 0.3)
        assert isinstance(cmd, FillCircle)
        assert cmd.paint.color.a == pytest.approx(0.15)
        assert cmd.radius == bulb.radius

    def test_on_has_glow_core_and_highlight(self, bulb: LightBulbSpec) -> None:
        cmds = draw_bulb(bulb, LightMode.ORIGINAL, 0.3)
        assert len(cmds) == 5
        assert cmds[0].radius > cmds[1].radius > cmds[2].radius
        assert cmds[3].radius == bulb.radius

    def test_original_keeps_bulb_color(self, bulb: LightBulbSpec) -> None:
        assert bulb_color(bulb, LightMode.ORIGINAL, 0.8) == bulb.color

    def test_rainbow_shifts_color(self, bulb: LightBulbSpec) -> None:
        # shift = (0.5 * 0.3 + 0.37) % 1 = 0.52, past the green stop
        assert bulb_color(bulb, LightMode.RAINBOW, 0.5) != bulb.color

    def test_alpha_stays_in_range(self, bulb: LightBulbSpec) -> None:
        for step in range(40):
            for cmd in draw_bulb(bulb, LightMode.RAINBOW, step / 40.0):
                assert 0.0 <= cmd.paint.color.a <= 1.0


def test_wire_drawn_before_bulbs(viewport: ViewportSize) -> None:
    cmds = draw_lights(tree_geometry(viewport), LightMode.RAINBOW, 0.0)
    assert isinstance(cmds[0], StrokePath)
    assert all(isinstance(c, FillCircle) for c in cmds[1:])


def test_layer_sways_with_tree(make_frame) -> None:
    frame = make_frame(elapsed_ms=2000.0)
    (group,) = draw_ornaments_layer(frame)
    tree = draw_tree_layer(frame)[-1]
    assert isinstance(group, Group)
    assert group.label == "ornaments"
    assert (group.pivot, group.rotation) == (tree.pivot, tree.rotation)
