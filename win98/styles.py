"""CSS skin for the Win98 Streamlit desktop.

Goal: reproduce the Windows 98 look (teal desktop, grey bevelled chrome,
blue title bars, CRT overlays) while keeping the app reliable across
Streamlit versions. Component rules come from the modules that own them;
this file adds the page-level rules and stitches everything into one
``<style>`` block.
"""

from __future__ import annotations

from typing import Iterable

from .assets import AssetStore
from .config import ICON, SCREEN
from .effects import overlays_css
from .palette import THEME, Theme
from .player import window_css
from .taskbar import taskbar_css
from .types import IconDescriptor
from .widgets import icon_css, start_button_css, widgets_css

ICONS_KEY = "w98_icons"


def page_css(theme: Theme = THEME) -> str:
    return rf"""
/* ---- Hide Streamlit chrome ---- */
[data-testid="stHeader"], [data-testid="stToolbar"], [data-testid="stDecoration"], #MainMenu {{ display:none !important; }}
footer {{ visibility:hidden; }}

/* ---- Disable Streamlit fade/transition artifacts ----
   Reruns fade replaced elements out, which looks like a ghost window.
   Pressed bevels must also flip instantly. The sweep band keeps its
   animation.
*/
div[data-testid="stAppViewContainer"] *:not(.w98-sweep),
div[data-testid="stAppViewContainer"] *::before,
div[data-testid="stAppViewContainer"] *::after{{
  transition:none !important;
  animation:none !important;
}}

/* ---- Desktop ---- */
html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"]{{
  background:{theme.hex('desktop-teal')} !important;
  overflow:hidden;
}}
[data-testid="stAppViewContainer"]{{
  border-radius:{SCREEN.corner_radius}px;
  overflow:hidden;
  box-shadow:0 0 5px rgba(0,0,0,0.33), 0 0 8px {theme.rgba('white', 0.3)};
}}
.block-container{{
  padding:0 !important;
  max-width:none !important;
}}
div[data-testid="stAppViewContainer"] .block-container div.element-container{{ margin-bottom:0 !important; margin-top:0 !important; }}

/* ---- Icon column (top-left) ---- */
.st-key-{ICONS_KEY}{{
  padding:{SCREEN.icons_top}px 0 0 {SCREEN.icons_left}px;
  gap:{SCREEN.icon_spacing}px !important;
  width:{ICON.width + 2 * ICON.padding + 10}px;
}}

"""


def build_css(store: AssetStore, icons: Iterable[IconDescriptor], theme: Theme = THEME) -> str:
    """Full stylesheet for one render of the desktop."""
    parts = [
        page_css(theme),
        widgets_css(theme),
        taskbar_css(theme),
        start_button_css(store),
        window_css(theme=theme),
        overlays_css(theme=theme),
    ]
    for icon in icons:
        parts.append(icon_css(icon, store.data_uri(icon.image_ref), theme))
    return "<style>\n" + "\n".join(parts) + "\n</style>"
