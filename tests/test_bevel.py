import pytest

from win98.bevel import STROKE_PAIR, bevel_css, bevel_html, bevel_layers, button_bevel_css, invert
from win98.palette import THEME


@pytest.mark.parametrize("sunken", [False, True])
def test_offset_strokes_are_complementary(sunken):
    fill, outer, inner, edge = bevel_layers(sunken)
    assert outer.color != inner.color
    assert {outer.color, inner.color} == set(STROKE_PAIR)
    assert inner.offset == (-outer.offset[0], -outer.offset[1])
    assert edge.offset == (0, 0)
    assert fill.color == "background"


def test_paint_order():
    assert [layer.kind for layer in bevel_layers(False)] == ["fill", "outer", "inner", "edge"]


def test_raised_is_lit_from_upper_left():
    _, outer, inner, edge = bevel_layers(False)
    assert (outer.color, outer.offset) == ("border-light", (-1, -1))
    assert (inner.color, inner.offset) == ("border-dark", (1, 1))
    assert edge.color == "gray-light"


def test_sunken_is_lit_from_lower_right():
    _, outer, inner, edge = bevel_layers(True)
    assert (outer.color, outer.offset) == ("border-dark", (1, 1))
    assert (inner.color, inner.offset) == ("border-light", (-1, -1))
    assert edge.color == "gray-dark"


def test_raised_and_sunken_are_photometric_inverses():
    assert invert(bevel_layers(False)) == bevel_layers(True)
    assert invert(bevel_layers(True)) == bevel_layers(False)


def test_every_layer_color_is_in_palette():
    for sunken in (False, True):
        for layer in bevel_layers(sunken):
            assert layer.color in THEME.colors


def test_css_maps_layers_to_pseudo_elements():
    css = bevel_css(".box", sunken=False)
    before = css.index(".box::before")
    after = css.index(".box::after")
    assert before < after
    assert f"border:1px solid {THEME.hex('border-light')};transform:translate(-1px,-1px)" in css[before:after]
    assert f"border:1px solid {THEME.hex('border-dark')};transform:translate(1px,1px)" in css[after:]
    assert f"outline:1px solid {THEME.hex('gray-light')}" in css
    assert f"background:{THEME.hex('background')}" in css


def test_empty_region_keeps_all_layers():
    # Pseudo-elements are emitted unconditionally; content:'' keeps them alive.
    css = bevel_css(".empty", sunken=True)
    assert css.count("content:''") == 2


def test_button_variant_swaps_on_press_without_transition():
    css = button_bevel_css(".btn")
    assert "transition:none" in css
    pressed = css[css.index(".btn:active{"):]
    assert f"outline:1px solid {THEME.hex('gray-dark')}" in pressed
    assert ".btn:active::before" in pressed


def test_bevel_html_classes():
    assert bevel_html("x", sunken=True) == "<div class='w98-bevel sunken'>x</div>"
    out = bevel_html("12:00", sunken=False, tag="span", extra_class="clock", style="padding:2px;")
    assert out == "<span class='w98-bevel raised clock' style='padding:2px;'>12:00</span>"
