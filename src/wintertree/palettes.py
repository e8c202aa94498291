"""Fixed color palettes: the two sky themes plus scene-wide constants."""

from __future__ import annotations

from dataclasses import dataclass

from wintertree.drawing import WHITE, Color
from wintertree.models import GiftPalette, SkyTheme

c = Color.from_argb


@dataclass(frozen=True)
class ThemePalette:
    sky_base: tuple[Color, Color, Color]
    sky_shifted: tuple[Color, Color, Color]
    star: Color
    star_glow_alpha: float
    star_radius: float  # reference pixels
    moon_base: Color
    moon_mask: Color
    cloud: Color
    cloud_highlight: Color
    cloud_shadow: Color
    cloud_alpha: float


NIGHT_SKY = ThemePalette(
    sky_base=(c(0xFF0B1026), c(0xFF152044), c(0xFF1F2D5E)),
    sky_shifted=(c(0xFF2B1308), c(0xFF7A2E12), c(0xFFFF6A1A)),
    star=c(0xFFFFF9C4),
    star_glow_alpha=0.25,
    star_radius=5.0,
    moon_base=c(0xFFFFF3E0),
    moon_mask=c(0xFF0B1026),
    cloud=c(0xFF2B3A52),
    cloud_highlight=c(0xFF3A4A62),
    cloud_shadow=c(0xFF1A2333),
    cloud_alpha=0.6,
)

WINTER_MORNING = ThemePalette(
    sky_base=(c(0xFFE3F2FD), c(0xFFBBDEFB), c(0xFF90CAF9)),
    sky_shifted=(c(0xFFB3E5FC), c(0xFF81D4FA), c(0xFF4FC3F7)),
    star=c(0xFFFFFDE7),
    star_glow_alpha=0.20,
    star_radius=4.0,
    moon_base=c(0xFFFFFDE7),
    moon_mask=c(0xFF90CAF9),
    cloud=c(0xFFE1F5FE),
    cloud_highlight=WHITE,
    cloud_shadow=c(0xFFB3E5FC),
    cloud_alpha=0.7,
)

_THEMES: dict[SkyTheme, ThemePalette] = {
    SkyTheme.NIGHT_SKY: NIGHT_SKY,
    SkyTheme.WINTER_MORNING: WINTER_MORNING,
}


def palette_for(theme: SkyTheme) -> ThemePalette:
    return _THEMES[theme]


# --- Scene-wide constants ---

SNOW_TOP = WHITE
SNOW_BOTTOM = c(0xFFE0F7FA)

FOLIAGE = (c(0xFF2E7D32), c(0xFF2F7E33))
FOLIAGE_SHADOW = c(0xFF1B5E20)
FOLIAGE_HIGHLIGHT = c(0xFF4CAF50)
TRUNK = (c(0xFF6D4C41), c(0xFF5D4037), c(0xFF4E342E))
TRUNK_GRAIN = c(0xFF3E2723)
CANDY_RED = c(0xFFD32F2F)

MOON_CRATER_DARK = c(0xFFE0C9A6)
MOON_CRATER_HIGHLIGHT = c(0xFFFFF8E1)

TOPPER_BODY = (c(0xFFFFF59D), c(0xFFFFD54F), c(0xFFFFC107), c(0x00FFC107))
TOPPER_GLOWS = (c(0xFFFFF8E1), c(0xFFFFFDE7), c(0xFFFFEB3B), c(0xFFFFF59D))

WIRE = c(0xFF37474F)
BULB_RED = c(0xFFFF5252)
BULB_GREEN = c(0xFF69F0AE)
BULB_CYAN = c(0xFF40C4FF)
BULB_AMBER = c(0xFFFFD740)
BULB_VIOLET = c(0xFFEA80FC)
BULBS = (c(0xFFFFF6E5), BULB_RED, BULB_GREEN, BULB_CYAN, BULB_AMBER, BULB_VIOLET)

TINSEL = c(0xFFE0F7FA)
GARLAND_RIBBON = c(0xFFB0BEC5)

HAT_RED = Color(220 / 255, 38 / 255, 38 / 255)
HAT_HIGHLIGHT = Color(240 / 255, 80 / 255, 80 / 255, 120 / 255)

SNOW_TINT_BLUE = c(0xFFE3F2FD)
SNOW_TINT_ALICE = c(0xFFF0F8FF)

_GOLD = (c(0xFFFFB300), c(0xFFFFC107), c(0xFFFFD54F), c(0xFFFFC107), c(0xFFFFB300))
_SILVER = (c(0xFFBDBDBD), c(0xFFE0E0E0), c(0xFFF5F5F5), c(0xFFE0E0E0), c(0xFFBDBDBD))
_WHITE_RIBBON = (c(0xFFBDBDBD), c(0xFFE0E0E0), WHITE, c(0xFFE0E0E0), c(0xFFBDBDBD))

RED_GIFT = GiftPalette(
    front=(c(0xFFE53935), c(0xFFD32F2F), c(0xFFC62828)),
    top=(c(0xFFEF5350), c(0xFFE57373), c(0xFFEF5350)),
    side=(c(0xFF9A0007), c(0xFF7F0000), c(0xFF6A0000)),
    ribbon_front=_GOLD,
    ribbon_band=_GOLD,
    ribbon_top=(c(0xFFFFD54F), c(0xFFFFC107)),
    ribbon_side=(c(0xFFFFB300), c(0xFFFF8F00)),
    bow_tails=c(0xFFFFD54F),
    bow_loops=(c(0xFFFFD54F), c(0xFFFFC107), c(0xFFFFB300)),
    bow_knot=c(0xFFFFA000),
    ribbon_depth=(0.7, 0.5),
)

GREEN_GIFT = GiftPalette(
    front=(c(0xFF43A047), c(0xFF388E3C), c(0xFF2E7D32)),
    top=(c(0xFF4CAF50), c(0xFF66BB6A), c(0xFF4CAF50)),
    side=(c(0xFF003300), c(0xFF1B5E20), c(0xFF003300)),
    ribbon_front=_SILVER,
    ribbon_band=(c(0xFFE0E0E0),),
    ribbon_top=(c(0xFFF5F5F5),),
    ribbon_side=(c(0xFFBDBDBD),),
    bow_tails=c(0xFFF5F5F5),
    bow_loops=(c(0xFFE0E0E0),),
    bow_knot=c(0xFFBDBDBD),
    ribbon_depth=(0.6, 0.4),
)

BLUE_GIFT = GiftPalette(
    front=(c(0xFF1E88E5), c(0xFF1976D2), c(0xFF1565C0)),
    top=(c(0xFF2196F3), c(0xFF42A5F5), c(0xFF2196F3)),
    side=(c(0xFF01579B), c(0xFF0D47A1), c(0xFF01579B)),
    ribbon_front=_WHITE_RIBBON,
    ribbon_band=(WHITE,),
    ribbon_top=(c(0xFFF5F5F5),),
    ribbon_side=(c(0xFFBDBDBD),),
    bow_tails=c(0xFFF5F5F5),
    bow_loops=(WHITE,),
    bow_knot=c(0xFFE0E0E0),
    ribbon_depth=(0.6, 0.4),
)
