"""CLI entry point for saving a single frame.

Edit the frame variables at the top, then run:
    uv run python src/wintertree/snapshot.py
"""

import logging

from dotenv import load_dotenv

load_dotenv()

from wintertree.compute import render  # noqa: E402
from wintertree.config import load_config  # noqa: E402
from wintertree.logging_setup import configure_logging  # noqa: E402
from wintertree.models import LightMode  # noqa: E402
from wintertree.renderers.static import save_static_frame  # noqa: E402
from wintertree.renderers.svg_2d import render_svg  # noqa: E402

elapsed_ms = 4_500
light_mode = LightMode.RAINBOW

config = load_config()
configure_logging(config.log_level)
logger = logging.getLogger("wintertree.snapshot")

scene = render(config.viewport, elapsed_ms, light_mode=light_mode, theme=config.theme)
stem = f"wintertree__{config.theme.value}__{light_mode.name.lower()}__{elapsed_ms}ms"

png_path = save_static_frame(scene, config.output_dir / f"{stem}.png")
svg_path = config.output_dir / f"{stem}.svg"
svg_path.write_text(render_svg(scene), encoding="utf-8")

logger.info("Saved: %s", png_path)
logger.info("Saved: %s", svg_path)
