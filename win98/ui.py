import logging
from typing import Dict, List

import streamlit as st

from .assets import AssetStore
from .effects import overlays_html
from .player import PLAYER_KEY, PLAYER_TITLE, render_music_player
from .styles import ICONS_KEY, build_css
from .taskbar import render_taskbar
from .types import IconDescriptor, WindowDescriptor
from .widgets import render_desktop_icon

logger = logging.getLogger(__name__)


# ---------------------------
# Window visibility state
# ---------------------------
# One boolean per window, owned by the desktop. Children never write it;
# they report the close intent through their on_close callback.

WINDOW_TITLES = {PLAYER_KEY: PLAYER_TITLE}


def _flag(window_key: str) -> str:
    return f"{window_key}_visible"


def init_state() -> None:
    for key in WINDOW_TITLES:
        st.session_state.setdefault(_flag(key), False)
    st.session_state.setdefault("w98_assets", AssetStore())


def is_visible(window_key: str) -> bool:
    return bool(st.session_state.get(_flag(window_key), False))


def set_visible(window_key: str, visible: bool) -> None:
    st.session_state[_flag(window_key)] = bool(visible)
    logger.info("Window %r %s", window_key, "opened" if visible else "closed")


def toggle_window(window_key: str) -> None:
    set_visible(window_key, not is_visible(window_key))


def close_window(window_key: str) -> None:
    set_visible(window_key, False)


def window_descriptors() -> List[WindowDescriptor]:
    return [
        WindowDescriptor(key=k, title=t, visible=is_visible(k), on_close=lambda k=k: close_window(k))
        for k, t in WINDOW_TITLES.items()
    ]


def get_asset_store() -> AssetStore:
    if "w98_assets" not in st.session_state:
        st.session_state.w98_assets = AssetStore()
    return st.session_state.w98_assets


# ---------------------------
# Desktop icons
# ---------------------------

def _log_click(label: str):
    def action() -> None:
        logger.info("%s clicked", label)
    return action


def desktop_icons() -> List[IconDescriptor]:
    return [
        IconDescriptor("computer", "My Computer", "icon1", _log_click("My Computer")),
        IconDescriptor("music", "Music", "icon2", lambda: toggle_window(PLAYER_KEY)),
        IconDescriptor("browser", "Web Browser", "icon3", _log_click("Web Browser")),
    ]


def icon_refs(icons: List[IconDescriptor]) -> Dict[str, str]:
    """Window key -> icon image, used for the taskbar entries."""
    by_key = {i.key: i.image_ref for i in icons}
    return {PLAYER_KEY: by_key["music"]}


# ---------------------------
# Desktop (single screen)
# ---------------------------

def render_desktop() -> None:
    """Teal desktop, icon column, taskbar, player window, CRT overlays."""
    store = get_asset_store()
    icons = desktop_icons()
    windows = window_descriptors()

    st.markdown(build_css(store, icons), unsafe_allow_html=True)

    with st.container(key=ICONS_KEY):
        for icon in icons:
            render_desktop_icon(icon)

    player = next(w for w in windows if w.key == PLAYER_KEY)
    render_music_player(player.visible, player.on_close, store)

    render_taskbar(store, windows, icon_refs(icons))

    # Overlays last so they sit on top; none of them takes pointer events.
    st.markdown(overlays_html(), unsafe_allow_html=True)
