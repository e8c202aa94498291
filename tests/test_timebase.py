"""Tests for the oscillator phases."""

from __future__ import annotations

import pytest

from wintertree.timebase import (
    SKY_PERIOD_MS,
    STAR_TWINKLE_PERIOD_MS,
    SWAY_PERIOD_MS,
    TWINKLE_PERIOD_MS,
    phase,
    time_phases,
    wave,
)


class TestPhase:
    """Tests for phase()."""

    def test_wraps_at_period(self) -> None:
        assert phase(0.0, 1000.0) == 0.0
        assert phase(1000.0, 1000.0) == 0.0
        assert phase(1250.0, 1000.0) == pytest.approx(0.25)

    def test_range(self) -> None:
        for ms in (0.0, 1.0, 999.999, 123456.0):
            assert 0.0 <= phase(ms, 1000.0) < 1.0

    def test_rejects_non_positive_period(self) -> None:
        with pytest.raises(ValueError, match="period_ms"):
            phase(10.0, 0.0)


def test_wave_range_and_landmarks() -> None:
    assert wave(0.0) == pytest.approx(0.5)
    assert wave(0.25) == pytest.approx(1.0)
    assert wave(0.75) == pytest.approx(0.0)


def test_time_phases_periods() -> None:
    p = time_phases(1100.0)
    assert p.twinkle == pytest.approx(1100.0 / TWINKLE_PERIOD_MS)
    assert p.sway == pytest.approx(1100.0 / SWAY_PERIOD_MS)
    assert p.sky == pytest.approx(1100.0 / SKY_PERIOD_MS)
    assert p.star_twinkle == pytest.approx(1100.0 / STAR_TWINKLE_PERIOD_MS)


def test_time_phases_repeat_per_oscillator() -> None:
    base = time_phases(500.0)
    assert time_phases(500.0 + TWINKLE_PERIOD_MS).twinkle == pytest.approx(base.twinkle)
    assert time_phases(500.0 + SKY_PERIOD_MS).sky == pytest.approx(base.sky)
