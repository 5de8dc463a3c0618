import datetime
import html
import logging
from typing import Optional, Sequence

import streamlit as st

from .assets import AssetStore
from .bevel import bevel_css, bevel_html
from .config import TASKBAR
from .palette import THEME, Theme
from .types import WindowDescriptor
from .widgets import key_class, render_start_button, taskbar_icon_html

logger = logging.getLogger(__name__)

TASKBAR_KEY = "w98_taskbar"
QUICK_LAUNCH_TEXT = "Running Apps / Quick Launch Area"


def clock_text(now: Optional[datetime.datetime] = None) -> str:
    """Tray clock in the 12-hour form, e.g. ``9:05 PM``."""
    now = now or datetime.datetime.now()
    hour = now.hour % 12 or 12
    suffix = "AM" if now.hour < 12 else "PM"
    return f"{hour}:{now.minute:02d} {suffix}"


def status_html(store: AssetStore, windows: Sequence[WindowDescriptor], icon_refs: dict) -> str:
    """Quick-launch caption followed by one entry per open window."""
    parts = [f"<span class='w98-taskbar-caption'>{QUICK_LAUNCH_TEXT}</span>"]
    for w in windows:
        if not w.visible:
            continue
        icon = taskbar_icon_html(store, icon_refs[w.key]) if w.key in icon_refs else ""
        parts.append(
            bevel_html(
                f"{icon}<span>{html.escape(w.title)}</span>",
                sunken=True,
                tag="span",
                extra_class="w98-task",
            )
        )
    return "<div class='w98-status'>" + "".join(parts) + "</div>"


def separator_html() -> str:
    return "<div class='w98-separator'></div>"


def clock_html(now: Optional[datetime.datetime] = None) -> str:
    return bevel_html(html.escape(clock_text(now)), sunken=True, extra_class="w98-clock")


def taskbar_css(theme: Theme = THEME) -> str:
    bar = key_class(TASKBAR_KEY)
    return "\n".join(
        [
            bevel_css(bar, sunken=False, theme=theme),
            f"{bar}{{position:fixed !important; left:0; right:0; bottom:0; z-index:1000; "
            f"height:{TASKBAR.height}px; min-height:{TASKBAR.height}px; padding:0 {TASKBAR.clock_trailing}px 0 "
            f"{TASKBAR.start_leading}px; box-sizing:border-box; justify-content:center;}}",
            f"{bar} [data-testid='stHorizontalBlock']{{align-items:center; flex-wrap:nowrap !important; gap:0 !important;}}",
            f"{bar} [data-testid='stColumn']{{width:auto !important; flex:0 0 auto !important; min-width:0 !important;}}",
            f"{bar} [data-testid='stColumn']:nth-child(2){{flex:1 1 auto !important;}}",
            f".w98-separator{{display:inline-block; width:{TASKBAR.separator_width}px; "
            f"height:{TASKBAR.separator_height}px; margin:0 {TASKBAR.separator_margin}px; "
            f"background:{theme.hex('gray-dark')}; vertical-align:middle;}}",
            ".w98-status{display:flex; align-items:center; gap:6px; white-space:nowrap; overflow:hidden;}",
            f".w98-taskbar-caption{{{theme.font_css('taskbar-caption')} color:{theme.hex('black')};}}",
            f".w98-task{{display:inline-flex; align-items:center; padding:0 6px 0 0; "
            f"{theme.font_css('taskbar-caption')} color:{theme.hex('black')};}}",
            f".w98-clock{{{theme.font_css('taskbar-caption')} color:{theme.hex('black')}; "
            f"padding:{TASKBAR.clock_padding_y}px {TASKBAR.clock_padding_x}px; white-space:nowrap;}}",
        ]
    )


def _start_clicked() -> None:
    logger.info("Start button clicked")


def render_taskbar(store: AssetStore, windows: Sequence[WindowDescriptor], icon_refs: dict) -> None:
    """Start button | separator + status text | spacer | clock."""
    with st.container(key=TASKBAR_KEY):
        left, middle, right = st.columns([0.15, 0.70, 0.15], gap="small", vertical_alignment="center")
        with left:
            render_start_button(on_click=_start_clicked)
        with middle:
            st.markdown(
                "<div style='display:flex; align-items:center;'>"
                + separator_html()
                + status_html(store, windows, icon_refs)
                + "</div>",
                unsafe_allow_html=True,
            )
        with right:
            st.markdown(clock_html(), unsafe_allow_html=True)
