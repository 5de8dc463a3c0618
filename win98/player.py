"""Mock music player window.

Everything inside the window is a static placeholder: there is no audio, no
playlist and no playback clock. The only live control is the title bar's
close button, which reports back to whoever owns the visibility flag.
"""

from __future__ import annotations

import html
from typing import Optional

import streamlit as st

from .assets import AssetStore
from .config import WINDOW
from .palette import THEME, Theme
from .types import Callback
from .widgets import button_html, key_class, progress_html, render_title_bar, sunken_field_html, title_bar_css

PLAYER_KEY = "w98_music"
PLAYER_TITLE = "Music"
MENU_LABELS = ("File", "Edit", "View", "Go", "Help")
ALBUM_ART_REF = "ffx_cover"
STATUS_TEXT = "484 object[s]"
TIME_TEXT = "0:00/2:07"


def titlebar_key(window_key: str = PLAYER_KEY) -> str:
    return f"{window_key}_titlebar"


def menu_html() -> str:
    items = "".join(f"<span>{label}</span>" for label in MENU_LABELS)
    return f"<div class='w98-menubar'>{items}</div>"


def album_art_html(store: AssetStore) -> str:
    return f"<div class='w98-album-art'>{store.img(ALBUM_ART_REF, alt='Album art')}</div>"


def player_body_html(store: AssetStore) -> str:
    """Menu row, album art, info fields, transport row and Previous/Next."""
    fields = (
        "<div class='w98-row'>"
        + sunken_field_html("Id", width=50)
        + sunken_field_html("Besald")
        + sunken_field_html("Besald")
        + "</div>"
        + "<div class='w98-row'>"
        + sunken_field_html("FFX")
        + "</div>"
    )
    transport = (
        "<div class='w98-row w98-transport'>"
        + button_html("||", extra_class="w98-pause")
        + progress_html(WINDOW.progress_fill)
        + f"<span class='w98-time'>{html.escape(TIME_TEXT)}</span>"
        + "</div>"
    )
    nav = (
        "<div class='w98-row w98-nav'>"
        + button_html("Previous")
        + button_html("Next")
        + "</div>"
    )
    return (
        menu_html()
        + "<div class='w98-player-content'>"
        + album_art_html(store)
        + fields
        + transport
        + nav
        + "</div>"
    )


def status_bar_html(text: str = STATUS_TEXT) -> str:
    return f"<div class='w98-bevel sunken w98-statusbar'><span>{html.escape(text)}</span></div>"


def window_css(key: str = PLAYER_KEY, width: int = WINDOW.width, height: int = WINDOW.height, theme: Theme = THEME) -> str:
    """Floating fixed-size frame centered on the desktop."""
    win = key_class(key)
    frame = WINDOW.frame
    return "\n".join(
        [
            f"{win}{{position:fixed !important; top:50%; left:50%; transform:translate(-50%,-50%); "
            f"width:{width}px !important; height:{height}px !important; z-index:2000; "
            f"background:{theme.hex('background')}; box-sizing:border-box; gap:0 !important; "
            f"border:{frame}px solid {theme.hex('border-light')}; "
            f"box-shadow:inset 0 0 0 {frame}px {theme.hex('border-dark')}, 0 0 5px rgba(0,0,0,0.33); "
            f"padding:{frame * 2}px; overflow:hidden;}}",
            f"{win} div.element-container{{margin:0 !important;}}",
            title_bar_css(titlebar_key(key), theme=theme),
            f"{win} .w98-menubar{{display:flex; gap:15px; padding:4px 8px; margin-top:2px; "
            f"{theme.font_css('body')} color:{theme.hex('black')}; "
            f"border:1px solid {theme.hex('gray-light')}; box-shadow:inset 0 0 0 1px {theme.hex('gray-dark')};}}",
            f"{win} .w98-player-content{{display:flex; flex-direction:column; gap:10px; padding:0 10px 10px 10px;}}",
            f"{win} .w98-album-art{{margin-top:10px; max-height:{WINDOW.art_max_height}px; display:flex; "
            f"justify-content:center; background:{theme.hex('gray-dark')}; "
            f"border:2px solid {theme.hex('border-light')}; box-shadow:inset 0 0 0 2px {theme.hex('border-dark')};}}",
            f"{win} .w98-album-art img{{max-width:100%; max-height:{WINDOW.art_max_height - 8}px; object-fit:contain;}}",
            f"{win} .w98-row{{display:flex; align-items:center; gap:8px;}}",
            f"{win} .w98-transport{{gap:10px;}}",
            f"{win} .w98-pause{{width:40px; height:25px; padding:0; text-align:center; line-height:25px;}}",
            f"{win} .w98-time{{{theme.font_css('taskbar-caption')} color:{theme.hex('black')}; white-space:nowrap;}}",
            f"{win} .w98-nav{{justify-content:center; gap:10px;}}",
            f"{win} .w98-statusbar{{height:{WINDOW.status_height}px; display:flex; align-items:center; "
            f"padding:0 5px; {theme.font_css('taskbar-caption')} color:{theme.hex('black')};}}",
        ]
    )


def render_music_player(visible: bool, on_close: Optional[Callback], store: AssetStore) -> bool:
    """Mount the player window if ``visible``; returns whether anything was drawn."""
    if not visible:
        return False

    with st.container(key=PLAYER_KEY, border=False):
        render_title_bar(PLAYER_TITLE, on_close, key=titlebar_key())
        st.markdown(player_body_html(store), unsafe_allow_html=True)
        st.markdown(status_bar_html(), unsafe_allow_html=True)
    return True
