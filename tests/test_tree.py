"""Tests for tree geometry, sway and the topper."""

from __future__ import annotations

import pytest

from wintertree.drawing import FillOval, Group
from wintertree.layers.tree import (
    SWAY_AMPLITUDE_DEG,
    draw_topper,
    draw_tree_layer,
    layer_specs,
    sway_degrees,
    topper_center,
    tree_geometry,
)
from wintertree.models import ViewportSize


class TestTreeGeometry:
    """Tests for tree_geometry() on the reference canvas."""

    def test_layer_height(self, viewport: ViewportSize) -> None:
        geom = tree_geometry(viewport)
        assert geom.layer_height == pytest.approx(1920 * 0.62 / 11)
        assert geom.layer_overlap == pytest.approx(geom.layer_height * 0.35)

    def test_tree_top(self, viewport: ViewportSize) -> None:
        geom = tree_geometry(viewport)
        assert geom.tree_top == pytest.approx(1555.2 - geom.layer_height * 8.6)

    def test_trunk_reaches_below_ground(self, viewport: ViewportSize) -> None:
        geom = tree_geometry(viewport)
        assert geom.trunk_bottom == pytest.approx(geom.ground_y + 25.0)
        assert geom.trunk_top < geom.ground_y

    def test_layers_widen_downward(self, viewport: ViewportSize) -> None:
        specs = layer_specs(tree_geometry(viewport))
        widths = [s.width for s in specs]
        assert widths == sorted(widths)
        assert widths[0] == pytest.approx(1080 * 0.42 * 0.25)
        assert widths[-1] == pytest.approx(1080 * 0.42)

    def test_scallop_counts(self, viewport: ViewportSize) -> None:
        specs = layer_specs(tree_geometry(viewport))
        assert [s.scallops for s in specs] == list(range(5, 15))

    def test_single_layer_is_full_width(self, viewport: ViewportSize) -> None:
        geom = tree_geometry(viewport, num_layers=1)
        assert geom.layer_base_width(0) == pytest.approx(geom.tree_width)

    def test_rejects_zero_layers(self, viewport: ViewportSize) -> None:
        with pytest.raises(ValueError, match="num_layers"):
            tree_geometry(viewport, num_layers=0)


class TestSway:
    """Tests for sway_degrees()."""

    def test_amplitude(self) -> None:
        values = [sway_degrees(t / 100.0) for t in range(100)]
        assert max(values) == pytest.approx(SWAY_AMPLITUDE_DEG)
        assert min(values) == pytest.approx(-SWAY_AMPLITUDE_DEG)

    def test_phase_offset(self) -> None:
        assert sway_degrees(0.15) == pytest.approx(SWAY_AMPLITUDE_DEG)
        assert sway_degrees(0.4) == pytest.approx(0.0, abs=1e-9)


class TestTopper:
    """Tests for the topper star."""

    def test_reference_position(self, viewport: ViewportSize) -> None:
        x, y = topper_center(tree_geometry(viewport))
        assert x == pytest.approx(540.0)
        assert y == pytest.approx(597.4690909, abs=1e-6)

    def test_pulse_range(self, viewport: ViewportSize) -> None:
        geom = tree_geometry(viewport)
        scales = [draw_topper(geom, t / 50.0).scale for t in range(50)]
        assert min(scales) >= 0.92 - 1e-9
        assert max(scales) <= 1.10 + 1e-9

    def test_rock_range(self, viewport: ViewportSize) -> None:
        geom = tree_geometry(viewport)
        rotations = [draw_topper(geom, t / 50.0).rotation for t in range(50)]
        assert max(abs(r) for r in rotations) <= 1.5 + 1e-9


class TestTreeLayer:
    """Tests for the assembled tree layer."""

    def test_shadow_then_swayed_group(self, frame) -> None:
        cmds = draw_tree_layer(frame)
        assert all(isinstance(c, FillOval) for c in cmds[:4])
        tree = cmds[4]
        assert isinstance(tree, Group)
        assert tree.label == "tree"
        assert tree.pivot == (540.0, pytest.approx(1555.2))

    def test_topper_inside_sway_group(self, frame) -> None:
        tree = draw_tree_layer(frame)[4]
        topper = tree.commands[0]
        assert isinstance(topper, Group)
        assert topper.label == "topper"

    def test_sway_rotation_follows_phase(self, make_frame) -> None:
        tree = draw_tree_layer(make_frame(elapsed_ms=0.15 * 6200))[4]
        assert tree.rotation == pytest.approx(SWAY_AMPLITUDE_DEG)
