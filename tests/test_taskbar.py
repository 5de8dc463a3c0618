import datetime

import pytest

from win98.assets import AssetStore
from win98.taskbar import QUICK_LAUNCH_TEXT, clock_html, clock_text, separator_html, status_html, taskbar_css
from win98.types import WindowDescriptor


@pytest.mark.parametrize(
    "hour, minute, expected",
    [(0, 5, "12:05 AM"), (9, 0, "9:00 AM"), (12, 0, "12:00 PM"), (13, 30, "1:30 PM"), (23, 59, "11:59 PM")],
)
def test_clock_text(hour, minute, expected):
    assert clock_text(datetime.datetime(2025, 6, 3, hour, minute)) == expected


def test_clock_is_sunken():
    out = clock_html(datetime.datetime(2025, 6, 3, 0, 0))
    assert out == "<div class='w98-bevel sunken w98-clock'>12:00 AM</div>"


def test_status_lists_only_open_windows(tmp_path):
    store = AssetStore(tmp_path)
    windows = [
        WindowDescriptor("w98_music", "Music", visible=True),
        WindowDescriptor("w98_other", "Other", visible=False),
    ]
    out = status_html(store, windows, {"w98_music": "icon2"})
    assert QUICK_LAUNCH_TEXT in out
    assert "<span>Music</span>" in out
    assert "Other" not in out
    assert "width:20px; height:20px" in out


def test_status_without_open_windows(tmp_path):
    out = status_html(AssetStore(tmp_path), [WindowDescriptor("w98_music", "Music", visible=False)], {})
    assert "w98-task'" not in out


def test_taskbar_geometry():
    css = taskbar_css()
    assert "height:30px" in css
    assert "position:fixed !important" in css
    assert ".w98-separator{display:inline-block; width:1px; height:20px;" in css
    assert separator_html() == "<div class='w98-separator'></div>"
