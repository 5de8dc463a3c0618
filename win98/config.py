"""
Configuration & Path Management
===============================
Central registry for asset paths and the layout constants of the skin.

Every size below is in CSS pixels. Nothing here is read from the
environment; the values are the tuned look of the desktop and are treated
as data.

Exports:
    ASSETS_PATH (Path): Directory searched for image assets.
    SCREEN, TASKBAR, TITLE_BAR, ICON, WINDOW, OVERLAY, SWEEP: layout tables.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


ASSETS_PATH: Path = Path(__file__).parent / "assets"

# Searched in order when resolving an asset id such as "icon1".
ASSET_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif")


@dataclass(frozen=True)
class ScreenLayout:
    corner_radius: int = 10
    icons_top: int = 70
    icons_left: int = 5
    icon_spacing: int = 15


@dataclass(frozen=True)
class TaskbarLayout:
    height: int = 30
    start_width: int = 95
    start_height: int = 28
    start_leading: int = 5
    separator_width: int = 1
    separator_height: int = 20
    separator_margin: int = 5
    clock_padding_x: int = 8
    clock_padding_y: int = 2
    clock_trailing: int = 5
    tray_icon_size: int = 20
    tray_icon_padding: int = 2


@dataclass(frozen=True)
class TitleBarLayout:
    height: int = 24
    control_width: int = 20
    control_height: int = 18
    control_spacing: int = 1
    title_leading: int = 8
    trailing: int = 2


@dataclass(frozen=True)
class IconLayout:
    image_size: int = 40
    width: int = 75
    padding: int = 2
    caption_gap: int = 4


@dataclass(frozen=True)
class WindowLayout:
    width: int = 350
    height: int = 500
    frame: int = 2
    art_max_height: int = 250
    progress_fill: int = 50
    progress_height: int = 8
    status_height: int = 20


@dataclass(frozen=True)
class OverlayLayout:
    vignette_alpha: float = 0.1
    scanline_alpha: float = 0.05
    scanline_height: int = 1
    scanline_period: int = 2
    grain_alpha: float = 0.01
    grain_tile: int = 64
    grain_seed: int = 98


@dataclass(frozen=True)
class SweepLayout:
    duration: float = 6.0
    delay: float = 9.0
    band_height: float = 105.0
    alpha: float = 0.015


SCREEN = ScreenLayout()
TASKBAR = TaskbarLayout()
TITLE_BAR = TitleBarLayout()
ICON = IconLayout()
WINDOW = WindowLayout()
OVERLAY = OverlayLayout()
SWEEP = SweepLayout()
