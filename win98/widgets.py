"""Win98 building blocks: title bar, desktop icon, start button and friends.

Interactive pieces are real ``st.button`` widgets skinned through the
``st-key-<key>`` class Streamlit puts on keyed elements. Purely decorative
pieces are HTML strings passed to ``st.markdown``.
"""

from __future__ import annotations

import html
from typing import List, Optional, Tuple

import streamlit as st

from .assets import AssetStore
from .bevel import bevel_css, bevel_html, button_bevel_css
from .config import ICON, TASKBAR, TITLE_BAR, WINDOW
from .palette import THEME, Theme
from .types import Callback, IconDescriptor

# (name, glyph) in display order
TITLE_BAR_CONTROLS = (("minimize", "—"), ("maximize", "□"), ("close", "X"))


def key_class(key: str) -> str:
    """CSS selector for the container Streamlit wraps around a keyed element."""
    return f".st-key-{key}"


# ---------------------------
# Window chrome (title bar)
# ---------------------------

def title_bar_controls(on_close: Optional[Callback]) -> List[Tuple[str, str, Optional[Callback]]]:
    """Control buttons of a title bar with the callback each one triggers.

    Minimize and maximize are decorative and trigger nothing.
    """
    out = []
    for name, glyph in TITLE_BAR_CONTROLS:
        out.append((name, glyph, on_close if name == "close" else None))
    return out


def title_bar_css(key: str, theme: Theme = THEME) -> str:
    bar = key_class(key)
    ctl = f"{bar} .stButton > button"
    return "\n".join(
        [
            f"{bar}{{height:{TITLE_BAR.height}px; min-height:{TITLE_BAR.height}px; "
            f"background:{theme.hex('accent-blue')}; outline:1px solid {theme.hex('black')}; "
            "outline-offset:-1px; box-sizing:border-box; gap:0 !important; overflow:hidden;}",
            f"{bar} [data-testid='stHorizontalBlock']{{height:{TITLE_BAR.height}px; align-items:center; "
            f"gap:{TITLE_BAR.control_spacing}px !important; flex-wrap:nowrap !important; "
            f"padding-right:{TITLE_BAR.trailing}px;}}",
            f"{bar} [data-testid='stColumn']{{width:auto !important; flex:0 0 auto !important; min-width:0 !important;}}",
            f"{bar} [data-testid='stColumn']:first-child{{flex:1 1 auto !important;}}",
            f"{bar} .w98-titlebar-title{{color:{theme.hex('white')}; {theme.font_css('title')} "
            f"padding-left:{TITLE_BAR.title_leading}px; white-space:nowrap; overflow:hidden; "
            f"line-height:{TITLE_BAR.height}px;}}",
            f"{ctl}{{width:{TITLE_BAR.control_width}px !important; height:{TITLE_BAR.control_height}px !important; "
            f"min-height:{TITLE_BAR.control_height}px !important; padding:0 !important; "
            f"color:{theme.hex('black')} !important; {theme.font_css('control-glyph')} line-height:1 !important;}}",
            f"{ctl} p{{{theme.font_css('control-glyph')} margin:0;}}",
            button_bevel_css(ctl, theme=theme),
        ]
    )


def title_bar_html(title: str) -> str:
    return f"<div class='w98-titlebar-title'>{html.escape(title)}</div>"


def render_title_bar(title: str, on_close: Optional[Callback], key: str) -> None:
    """Mount a title bar: blue strip, title, then minimize/maximize/close."""
    controls = title_bar_controls(on_close)
    with st.container(key=key):
        cols = st.columns([1.0] + [0.08] * len(controls), gap="small", vertical_alignment="center")
        with cols[0]:
            st.markdown(title_bar_html(title), unsafe_allow_html=True)
        for col, (name, glyph, callback) in zip(cols[1:], controls):
            with col:
                st.button(glyph, key=f"{key}_{name}", on_click=callback, help=name.capitalize())


# ---------------------------
# Desktop icon
# ---------------------------

def icon_key(icon: IconDescriptor) -> str:
    return f"w98_icon_{icon.key}"


def icon_css(icon: IconDescriptor, image_uri: str, theme: Theme = THEME) -> str:
    """Image above a shadowed caption; the whole stack is one plain button."""
    btn = f"{key_class(icon_key(icon))} .stButton > button"
    size = ICON.image_size
    return "\n".join(
        [
            f"{btn}{{width:{ICON.width}px !important; padding:{size + ICON.caption_gap}px {ICON.padding}px "
            f"{ICON.padding}px {ICON.padding}px !important; background:transparent url('{image_uri}') "
            f"no-repeat center {ICON.padding}px / {size}px {size}px !important; border:0 !important; "
            "outline:none !important; box-shadow:none !important; border-radius:0 !important;}",
            f"{btn}::before, {btn}::after{{display:none !important;}}",
            f"{btn} p{{color:{theme.hex('white')} !important; {theme.font_css('icon-caption')} "
            f"text-align:center; white-space:normal; word-wrap:break-word; margin:0; "
            f"text-shadow:1px 1px 1px {theme.hex('black')};}}",
        ]
    )


def render_desktop_icon(icon: IconDescriptor) -> None:
    st.button(icon.label, key=icon_key(icon), on_click=icon.on_activate)


# ---------------------------
# Start button
# ---------------------------

START_KEY = "w98_start"


def start_button_image(pressed_ref: str, normal_ref: str, is_pressed: bool) -> str:
    """The single asset shown for the given press state."""
    return pressed_ref if is_pressed else normal_ref


def start_button_css(store: AssetStore, pressed_ref: str = "win2", normal_ref: str = "win1") -> str:
    """Two-image skin; the image swaps on ``:active`` with no transition."""
    btn = f"{key_class(START_KEY)} .stButton > button"

    def bg(is_pressed: bool) -> str:
        ref = start_button_image(pressed_ref, normal_ref, is_pressed)
        return f"background:url('{store.data_uri(ref)}') center / cover no-repeat !important;"

    return "\n".join(
        [
            f"{btn}{{width:{TASKBAR.start_width}px !important; height:{TASKBAR.start_height}px !important; "
            f"min-height:{TASKBAR.start_height}px !important; padding:0 !important; border:0 !important; "
            "outline:none !important; border-radius:0 !important; overflow:hidden; transition:none !important; "
            f"{bg(False)}}}",
            f"{btn}:active{{{bg(True)}}}",
            f"{btn}::before, {btn}::after{{display:none !important;}}",
            f"{btn} p{{display:none;}}",
        ]
    )


def render_start_button(on_click: Optional[Callback]) -> None:
    # Label is hidden by the skin; Streamlit needs a non-empty one.
    st.button("Start", key=START_KEY, on_click=on_click)


# ---------------------------
# Small decorative pieces
# ---------------------------

def taskbar_icon_html(store: AssetStore, ref: str) -> str:
    size = TASKBAR.tray_icon_size
    return store.img(
        ref,
        style=f"width:{size}px; height:{size}px; object-fit:contain; padding:{TASKBAR.tray_icon_padding}px;",
    )


def sunken_field_html(text: str, width: Optional[int] = None) -> str:
    """Static text field: left-aligned text in a sunken bevel."""
    style = f"flex:0 0 {width}px;" if width else "flex:1 1 0;"
    return bevel_html(
        f"<span>{html.escape(text)}</span>",
        sunken=True,
        style=style,
        extra_class="w98-field",
    )


def button_html(label: str, extra_class: str = "") -> str:
    """Inert push button that still shows the pressed bevel while held."""
    cls = f"w98-button {extra_class}".strip()
    return f"<div class='{cls}' role='button'>{html.escape(label)}</div>"


def progress_html(fill_width: int) -> str:
    """Fixed progress indicator; the fill does not track any playback."""
    inner = f"<div class='w98-progress-fill' style='width:{fill_width}px;'></div>"
    return bevel_html(inner, sunken=True, extra_class="w98-progress")


def widgets_css(theme: Theme = THEME) -> str:
    return "\n".join(
        [
            bevel_css(".w98-bevel.raised", sunken=False, theme=theme),
            bevel_css(".w98-bevel.sunken", sunken=True, theme=theme),
            f".w98-field{{padding:0 5px; {theme.font_css('body')} color:{theme.hex('black')}; "
            "text-align:left; white-space:nowrap; overflow:hidden;}",
            f".w98-button{{display:inline-block; padding:6px 12px; {theme.font_css('button')} "
            f"color:{theme.hex('black')}; cursor:default; user-select:none;}}",
            button_bevel_css(".w98-button", theme=theme),
            button_bevel_css(".stButton > button", theme=theme),
            f".w98-progress{{flex:1 1 auto; height:{WINDOW.progress_height}px; background:{theme.hex('gray-dark')} !important;}}",
            f".w98-progress-fill{{height:100%; background:{theme.hex('accent-blue')};}}",
        ]
    )
