from pathlib import Path

from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parents[1] / "app.py")

CLOSE = "w98_music_titlebar_close"
TITLE_MARKUP = "class='w98-titlebar-title'"
STATUS_MARKUP = "class='w98-bevel sunken w98-statusbar'"


def _run() -> AppTest:
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _markup(at: AppTest) -> str:
    return "\n".join(m.value for m in at.markdown)


def _keys(at: AppTest) -> set:
    return {b.key for b in at.button}


def test_desktop_starts_with_player_hidden():
    at = _run()
    assert at.session_state["w98_music_visible"] is False
    assert {"w98_icon_computer", "w98_icon_music", "w98_icon_browser", "w98_start"} <= _keys(at)
    assert CLOSE not in _keys(at)
    assert TITLE_MARKUP not in _markup(at)


def test_music_icon_opens_player_with_one_chrome_and_status_bar():
    at = _run()
    at.button(key="w98_icon_music").click().run()

    assert at.session_state["w98_music_visible"] is True
    markup = _markup(at)
    assert markup.count(TITLE_MARKUP) == 1
    assert markup.count(STATUS_MARKUP) == 1
    assert CLOSE in _keys(at)


def test_minimize_and_maximize_are_inert():
    at = _run()
    at.button(key="w98_icon_music").click().run()
    at.button(key="w98_music_titlebar_minimize").click().run()
    at.button(key="w98_music_titlebar_maximize").click().run()
    assert at.session_state["w98_music_visible"] is True
    assert not at.exception


def test_close_hides_player():
    at = _run()
    at.button(key="w98_icon_music").click().run()
    at.button(key=CLOSE).click().run()

    assert at.session_state["w98_music_visible"] is False
    assert CLOSE not in _keys(at)
    assert STATUS_MARKUP not in _markup(at)


def test_reopen_shows_same_placeholder():
    at = _run()
    at.button(key="w98_icon_music").click().run()
    first = _markup(at)
    at.button(key=CLOSE).click().run()
    at.button(key="w98_icon_music").click().run()
    assert _markup(at).count("484 object[s]") == first.count("484 object[s]") == 1


def test_other_icons_and_start_do_not_open_windows():
    at = _run()
    for key in ("w98_icon_computer", "w98_icon_browser", "w98_start"):
        at.button(key=key).click().run()
        assert at.session_state["w98_music_visible"] is False
    assert not at.exception
