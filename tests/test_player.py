from win98.assets import AssetStore
from win98.player import (
    MENU_LABELS,
    PLAYER_KEY,
    menu_html,
    player_body_html,
    status_bar_html,
    titlebar_key,
    window_css,
)


def test_window_is_fixed_size():
    css = window_css()
    assert f".st-key-{PLAYER_KEY}{{position:fixed !important;" in css
    assert "width:350px !important; height:500px !important" in css


def test_window_css_includes_its_title_bar():
    assert f".st-key-{titlebar_key()}{{height:24px" in window_css()


def test_menu_row_is_static_labels():
    out = menu_html()
    for label in MENU_LABELS:
        assert f"<span>{label}</span>" in out
    assert "<a " not in out and "button" not in out


def test_body_placeholders(tmp_path):
    out = player_body_html(AssetStore(tmp_path))
    assert out.count("w98-bevel sunken w98-field") == 4
    assert out.count("<span>Besald</span>") == 2
    assert "alt='Album art'" in out
    assert "width:50px;" in out
    assert "0:00/2:07" in out
    assert "role='button'>Previous<" in out
    assert "role='button'>Next<" in out
    assert "w98-button w98-pause" in out


def test_body_has_no_status_bar_or_chrome(tmp_path):
    out = player_body_html(AssetStore(tmp_path))
    assert "w98-statusbar" not in out
    assert "w98-titlebar-title" not in out


def test_status_bar():
    assert status_bar_html() == "<div class='w98-bevel sunken w98-statusbar'><span>484 object[s]</span></div>"
