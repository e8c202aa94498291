"""Runtime settings read from the environment.

Entry points call `load_dotenv()` first, so a `.env` file in the working
directory is honored.
"""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from wintertree.models import SkyTheme, ViewportSize

_ROOT = Path(__file__).parent.parent.parent

DEFAULT_WIDTH = 1080.0
DEFAULT_HEIGHT = 1920.0
DEFAULT_FPS = 12.0
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Environment variable holds a value the app cannot use."""


@dataclass(frozen=True)
class AppConfig:
    theme: SkyTheme
    viewport: ViewportSize
    fps: float
    output_dir: Path
    log_level: str


def _positive_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


def _theme(env: Mapping[str, str]) -> SkyTheme:
    raw = env.get("WINTERTREE_THEME", SkyTheme.NIGHT_SKY.value).strip().lower()
    try:
        return SkyTheme(raw)
    except ValueError as e:
        choices = ", ".join(t.value for t in SkyTheme)
        raise ConfigError(f"WINTERTREE_THEME must be one of {choices}, got {raw!r}") from e


def _log_level(env: Mapping[str, str]) -> str:
    level = env.get("WINTERTREE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"WINTERTREE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


def load_config(env: Mapping[str, str] | None = None) -> AppConfig:
    """Build the app settings from WINTERTREE_* variables.

    Args:
        env: Variables to read; defaults to os.environ.

    Returns:
        Validated settings with defaults for anything unset.

    Raises:
        ConfigError: If any variable is present but invalid.
    """
    env = os.environ if env is None else env
    output = env.get("WINTERTREE_OUTPUT_DIR")
    return AppConfig(
        theme=_theme(env),
        viewport=ViewportSize(
            _positive_float(env, "WINTERTREE_WIDTH", DEFAULT_WIDTH),
            _positive_float(env, "WINTERTREE_HEIGHT", DEFAULT_HEIGHT),
        ),
        fps=_positive_float(env, "WINTERTREE_FPS", DEFAULT_FPS),
        output_dir=Path(output) if output else _ROOT / "results",
        log_level=_log_level(env),
    )
