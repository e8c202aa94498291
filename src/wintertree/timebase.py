"""Oscillator phases derived from absolute elapsed time.

Phases are never accumulated frame to frame: each one is recomputed from the
elapsed milliseconds, so long sessions do not drift.
"""

from __future__ import annotations

import math

from wintertree.models import TimePhases

TWINKLE_PERIOD_MS = 2200
SWAY_PERIOD_MS = 6200
SKY_PERIOD_MS = 18000
STAR_TWINKLE_PERIOD_MS = 3500


def phase(elapsed_ms: float, period_ms: float) -> float:
    """Position within a repeating cycle, in [0, 1)."""
    if period_ms <= 0:
        raise ValueError(f"period_ms must be positive, got {period_ms!r}")
    return (elapsed_ms % period_ms) / period_ms


def wave(t: float) -> float:
    """Sine mapped to [0, 1] over one unit of t."""
    return (math.sin(2.0 * math.pi * t) + 1.0) * 0.5


def time_phases(elapsed_ms: float) -> TimePhases:
    return TimePhases(
        twinkle=phase(elapsed_ms, TWINKLE_PERIOD_MS),
        sway=phase(elapsed_ms, SWAY_PERIOD_MS),
        sky=phase(elapsed_ms, SKY_PERIOD_MS),
        star_twinkle=phase(elapsed_ms, STAR_TWINKLE_PERIOD_MS),
    )
