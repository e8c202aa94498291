"""Text measurement — the host typography service used by the greeting banner."""

from __future__ import annotations

from typing import Protocol

from matplotlib.font_manager import FontProperties
from matplotlib.textpath import text_to_path

DEFAULT_FONT_FAMILY = "DejaVu Sans"


class TextMeasurer(Protocol):
    def measure(self, text: str, font_size: float, bold: bool = True) -> float:
        """Advance width of `text` at `font_size` pixels."""
        ...


class MatplotlibTextMeasurer:
    """Measures with matplotlib's bundled fonts, so results match across hosts."""

    def __init__(self, family: str = DEFAULT_FONT_FAMILY) -> None:
        self.family = family

    def measure(self, text: str, font_size: float, bold: bool = True) -> float:
        if not text:
            return 0.0
        prop = FontProperties(
            family=self.family, weight="bold" if bold else "normal", size=font_size
        )
        width, _, _ = text_to_path.get_text_width_height_descent(text, prop, ismath=False)
        return float(width)
