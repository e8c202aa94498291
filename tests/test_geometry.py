"""Tests for bezier evaluation and arc-length measurement."""

from __future__ import annotations

import math

import pytest

from wintertree.drawing import PathBuilder
from wintertree.geometry import PathMeasure, clamp, cubic_point, flatten_path, quad_point


def test_cubic_point_endpoints() -> None:
    assert cubic_point(1.0, 5.0, -3.0, 7.0, 0.0) == pytest.approx(1.0)
    assert cubic_point(1.0, 5.0, -3.0, 7.0, 1.0) == pytest.approx(7.0)


def test_cubic_point_symmetric_hill_midpoint() -> None:
    # 0.85, 0.80, 0.80, 0.85 evaluated at t = 0.5
    assert cubic_point(0.85, 0.80, 0.80, 0.85, 0.5) == pytest.approx(0.8125)


def test_quad_point_midpoint() -> None:
    assert quad_point(0.0, 2.0, 0.0, 0.5) == pytest.approx(1.0)


def test_clamp() -> None:
    assert clamp(-1.0, 0.0, 1.0) == 0.0
    assert clamp(2.0, 0.0, 1.0) == 1.0
    assert clamp(0.3, 0.0, 1.0) == 0.3


class TestPathMeasure:
    """Tests for PathMeasure on simple paths."""

    def test_straight_line(self) -> None:
        measure = PathMeasure(PathBuilder().move_to(0, 0).line_to(3, 4).build())
        assert measure.length == pytest.approx(5.0)
        assert measure.position_at(2.5) == pytest.approx((1.5, 2.0))

    def test_position_clamped_to_ends(self) -> None:
        measure = PathMeasure(PathBuilder().move_to(0, 0).line_to(10, 0).build())
        assert measure.position_at(-5.0) == pytest.approx((0.0, 0.0))
        assert measure.position_at(50.0) == pytest.approx((10.0, 0.0))

    def test_sample_spacing(self) -> None:
        measure = PathMeasure(PathBuilder().move_to(0, 0).line_to(10, 0).build())
        xs = [x for x, _ in measure.sample(2.5)]
        assert xs == pytest.approx([0.0, 2.5, 5.0, 7.5, 10.0])

    def test_sample_with_offset(self) -> None:
        measure = PathMeasure(PathBuilder().move_to(0, 0).line_to(10, 0).build())
        xs = [x for x, _ in measure.sample(4.0, offset=2.0)]
        assert xs == pytest.approx([2.0, 6.0, 10.0])

    def test_sample_rejects_non_positive_step(self) -> None:
        measure = PathMeasure(PathBuilder().move_to(0, 0).line_to(10, 0).build())
        with pytest.raises(ValueError, match="step"):
            measure.sample(0.0)

    def test_quarter_circle_length(self) -> None:
        # Cubic approximation of a unit quarter circle
        k = 0.5522847498
        path = PathBuilder().move_to(1, 0).cubic_to(1, k, k, 1, 0, 1).build()
        assert PathMeasure(path).length == pytest.approx(math.pi / 2, rel=1e-3)

    def test_empty_path(self) -> None:
        measure = PathMeasure(PathBuilder().build())
        assert measure.length == 0.0


def test_flatten_path_closes_contour() -> None:
    path = PathBuilder().move_to(0, 0).line_to(4, 0).line_to(4, 4).close().build()
    (contour,) = flatten_path(path)
    assert contour[0].tolist() == contour[-1].tolist()
    assert contour.shape == (4, 2)
