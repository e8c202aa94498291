"""Tests for colors, paths, groups and transform flattening."""

from __future__ import annotations

import pytest

from wintertree.drawing import (
    WHITE,
    Color,
    FillPath,
    FillRect,
    Group,
    Line,
    PathBuilder,
    count_commands,
    flatten,
    mean_color,
    paint_stops,
    polygon,
    solid,
)


class TestColor:
    """Tests for Color construction and clamping."""

    def test_from_argb(self) -> None:
        color = Color.from_argb(0x80FF0000)
        assert color.r == 1.0
        assert color.g == 0.0
        assert color.b == 0.0
        assert color.a == pytest.approx(128 / 255)

    def test_with_alpha_clamps(self) -> None:
        assert WHITE.with_alpha(1.7).a == 1.0
        assert WHITE.with_alpha(-0.3).a == 0.0

    def test_lerp_midpoint(self) -> None:
        mid = Color(0.0, 0.0, 0.0).lerp(Color(1.0, 0.5, 0.0), 0.5)
        assert mid.r == pytest.approx(0.5)
        assert mid.g == pytest.approx(0.25)

    def test_lerp_clamps_t(self) -> None:
        black = Color(0.0, 0.0, 0.0)
        assert black.lerp(WHITE, 2.0) == WHITE
        assert black.lerp(WHITE, -1.0) == black

    def test_to_hex(self) -> None:
        assert Color.from_argb(0xFF1F2D5E).to_hex() == "#1f2d5e"

    def test_mean_color(self) -> None:
        avg = mean_color((Color(0.0, 0.0, 0.0), WHITE))
        assert avg.r == pytest.approx(0.5)
        assert avg.a == pytest.approx(1.0)


def test_paint_stops_evenly_spaced() -> None:
    stops = paint_stops((WHITE, WHITE, WHITE))
    assert [offset for offset, _ in stops] == [0.0, 0.5, 1.0]


def test_path_to_svg() -> None:
    path = PathBuilder().move_to(0, 0).line_to(10, 0).quad_to(10, 5, 0, 5).close().build()
    assert path.to_svg(precision=1) == "M 0.0 0.0 L 10.0 0.0 Q 10.0 5.0 0.0 5.0 Z"


def test_polygon_closes() -> None:
    path = polygon([(0, 0), (1, 0), (1, 1)])
    assert path.to_svg(precision=0).endswith("Z")
    assert len(path.points()) == 3


class TestFlatten:
    """Tests for resolving Group transforms."""

    def test_rotation_is_clockwise_in_y_down_space(self) -> None:
        group = Group((Line((0.0, 0.0), (10.0, 0.0), WHITE, 1.0),), pivot=(0.0, 0.0), rotation=90.0)
        (line,) = flatten([group])
        assert isinstance(line, Line)
        assert line.end[0] == pytest.approx(0.0, abs=1e-9)
        assert line.end[1] == pytest.approx(10.0)

    def test_scale_about_pivot(self) -> None:
        group = Group((Line((10.0, 10.0), (12.0, 10.0), WHITE, 1.0),), pivot=(10.0, 10.0), scale=2.0)
        (line,) = flatten([group])
        assert line.start == pytest.approx((10.0, 10.0))
        assert line.end == pytest.approx((14.0, 10.0))
        assert line.width == pytest.approx(2.0)

    def test_identity_group_passes_commands_through(self) -> None:
        rect = FillRect((0.0, 0.0), 5.0, 5.0, solid(WHITE))
        assert flatten([Group((rect,), pivot=(3.0, 3.0))]) == [rect]

    def test_rect_under_rotation_becomes_path(self) -> None:
        rect = FillRect((0.0, 0.0), 5.0, 5.0, solid(WHITE))
        (out,) = flatten([Group((rect,), pivot=(0.0, 0.0), rotation=10.0)])
        assert isinstance(out, FillPath)

    def test_order_preserved_across_nesting(self) -> None:
        a = Line((0.0, 0.0), (1.0, 0.0), WHITE, 1.0)
        b = Line((0.0, 1.0), (1.0, 1.0), WHITE, 1.0)
        c = Line((0.0, 2.0), (1.0, 2.0), WHITE, 1.0)
        nested = Group((a, Group((b,), pivot=(0.0, 0.0))), pivot=(0.0, 0.0))
        assert flatten([nested, c]) == [a, b, c]


def test_count_commands_descends_into_groups() -> None:
    line = Line((0.0, 0.0), (1.0, 0.0), WHITE, 1.0)
    tree = [line, Group((line, Group((line, line), pivot=(0.0, 0.0))), pivot=(0.0, 0.0))]
    assert count_commands(tree) == 4
