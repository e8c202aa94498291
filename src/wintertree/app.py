"""Winter Tree — Streamlit app showing the animated holiday scene."""

import logging
import time

import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv

load_dotenv()

from wintertree.compute import on_tap, render  # noqa: E402
from wintertree.config import load_config  # noqa: E402
from wintertree.logging_setup import configure_logging  # noqa: E402
from wintertree.models import LightMode, SkyTheme  # noqa: E402
from wintertree.renderers.svg_2d import render_svg_html  # noqa: E402

_config = load_config()
configure_logging(_config.log_level)
logger = logging.getLogger(__name__)

_THEME_LABELS = {
    SkyTheme.NIGHT_SKY: "Night sky",
    SkyTheme.WINTER_MORNING: "Winter morning",
}
_MODE_LABELS = {
    LightMode.RAINBOW: "Rainbow lights",
    LightMode.ORIGINAL: "Classic lights",
    LightMode.OFF: "Lights off",
}

st.set_page_config(
    page_title="Winter Tree",
    page_icon="🎄",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# --- Dark fullscreen theme CSS ---
st.markdown(
    """
    <style>
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #0b1026 !important;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    .block-container {
        padding-top: 0.5rem !important;
        padding-bottom: 0 !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# --- Session state initialization ---

if "started_at" not in st.session_state:
    st.session_state.started_at = time.monotonic()
if "light_mode" not in st.session_state:
    st.session_state.light_mode = LightMode.RAINBOW
if "theme" not in st.session_state:
    st.session_state.theme = _config.theme

# --- Controls ---

col_tap, col_theme = st.columns([1, 2])
with col_tap:
    if st.button("✦ Tap", key="tap_btn", use_container_width=True):
        st.session_state.light_mode = on_tap(st.session_state.light_mode)
        logger.info("Light mode -> %s", st.session_state.light_mode.name)
    st.caption(_MODE_LABELS[st.session_state.light_mode])
with col_theme:
    st.session_state.theme = st.selectbox(
        "Theme",
        options=list(SkyTheme),
        index=list(SkyTheme).index(st.session_state.theme),
        format_func=lambda theme: _THEME_LABELS[theme],
        label_visibility="collapsed",
    )


@st.fragment(run_every=1.0 / _config.fps)
def _frame() -> None:
    """Re-render the scene at the configured frame rate."""
    elapsed_ms = (time.monotonic() - st.session_state.started_at) * 1000.0
    scene = render(
        _config.viewport,
        elapsed_ms,
        light_mode=st.session_state.light_mode,
        theme=st.session_state.theme,
    )
    components.html(
        render_svg_html(scene),
        height=int(min(_config.viewport.height, 900)),
        scrolling=False,
    )


_frame()
