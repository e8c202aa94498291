"""Shared pytest fixtures for scene tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from wintertree.models import FrameContext, LightMode, SkyTheme, ViewportSize
from wintertree.palettes import palette_for
from wintertree.timebase import time_phases


class FixedAdvanceMeasurer:
    """Every glyph is `advance * font_size` wide, so widths scale linearly."""

    def __init__(self, advance: float = 0.6) -> None:
        self.advance = advance

    def measure(self, text: str, font_size: float, bold: bool = True) -> float:
        return len(text) * font_size * self.advance


@pytest.fixture
def measurer() -> FixedAdvanceMeasurer:
    return FixedAdvanceMeasurer()


@pytest.fixture
def viewport() -> ViewportSize:
    """The reference portrait canvas."""
    return ViewportSize(1080.0, 1920.0)


@pytest.fixture
def make_frame(measurer: FixedAdvanceMeasurer) -> Callable[..., FrameContext]:
    """Build a FrameContext from a size and time."""

    def _make(
        width: float = 1080.0,
        height: float = 1920.0,
        elapsed_ms: float = 0.0,
        light_mode: LightMode = LightMode.RAINBOW,
        theme: SkyTheme = SkyTheme.NIGHT_SKY,
    ) -> FrameContext:
        return FrameContext(
            viewport=ViewportSize(width, height),
            phases=time_phases(elapsed_ms),
            light_mode=light_mode,
            theme=theme,
            palette=palette_for(theme),
            measurer=measurer,
        )

    return _make


@pytest.fixture
def frame(make_frame: Callable[..., FrameContext]) -> FrameContext:
    return make_frame()
