"""Raised/sunken 3D border used by every control of the skin.

A bevel is four layers painted back to front:

    1. background fill
    2. outer-offset stroke   (light at -1,-1 when raised, dark at +1,+1 when sunken)
    3. inner-offset stroke   (the other member of the pair, opposite offset)
    4. edge stroke           (gray-light when raised, gray-dark when sunken)

In CSS the strokes map onto ``::before``, ``::after`` and ``outline``. The
outline paints above both pseudo-elements, which keeps the edge on top.
"""

from __future__ import annotations

from typing import Tuple

from .palette import THEME, Theme
from .types import BevelLayer

STROKE_PAIR = ("border-dark", "border-light")


def bevel_layers(sunken: bool) -> Tuple[BevelLayer, ...]:
    if sunken:
        outer = BevelLayer("outer", "border-dark", (1, 1))
        inner = BevelLayer("inner", "border-light", (-1, -1))
        edge = BevelLayer("edge", "gray-dark")
    else:
        outer = BevelLayer("outer", "border-light", (-1, -1))
        inner = BevelLayer("inner", "border-dark", (1, 1))
        edge = BevelLayer("edge", "gray-light")
    return (BevelLayer("fill", "background"), outer, inner, edge)


_INVERSE_COLOR = {
    "border-dark": "border-light",
    "border-light": "border-dark",
    "gray-dark": "gray-light",
    "gray-light": "gray-dark",
    "background": "background",
}


def invert(layers: Tuple[BevelLayer, ...]) -> Tuple[BevelLayer, ...]:
    """Photometric inverse: swap light/dark and flip the stroke offsets."""
    out = []
    for layer in layers:
        dx, dy = layer.offset
        out.append(BevelLayer(layer.kind, _INVERSE_COLOR[layer.color], (-dx, -dy), layer.width))
    return tuple(out)


def _stroke_rule(selector: str, pseudo: str, layer: BevelLayer, theme: Theme) -> str:
    dx, dy = layer.offset
    return (
        f"{selector}::{pseudo}{{"
        "content:''; position:absolute; inset:0; box-sizing:border-box; pointer-events:none;"
        f"border:{layer.width}px solid {theme.hex(layer.color)};"
        f"transform:translate({dx}px,{dy}px);"
        "}"
    )


def bevel_css(selector: str, sunken: bool, theme: Theme = THEME) -> str:
    """CSS rules that dress ``selector`` in the bevel.

    The pseudo-elements are emitted even for empty elements so that the
    layer stack is identical whatever the content size.
    """
    fill, outer, inner, edge = bevel_layers(sunken)
    return "\n".join(
        [
            f"{selector}{{position:relative; background:{theme.hex(fill.color)};"
            f"outline:{edge.width}px solid {theme.hex(edge.color)}; outline-offset:-{edge.width}px;}}",
            _stroke_rule(selector, "before", outer, theme),
            _stroke_rule(selector, "after", inner, theme),
        ]
    )


def button_bevel_css(selector: str, theme: Theme = THEME) -> str:
    """Raised bevel that flips to sunken while the pointer is held down."""
    return "\n".join(
        [
            f"{selector}{{transition:none !important; border:0 !important; border-radius:0 !important;}}",
            bevel_css(selector, sunken=False, theme=theme),
            bevel_css(f"{selector}:active", sunken=True, theme=theme),
        ]
    )


def bevel_class(sunken: bool) -> str:
    return "w98-bevel sunken" if sunken else "w98-bevel raised"


def bevel_html(content: str, sunken: bool = False, *, tag: str = "div", style: str = "", extra_class: str = "") -> str:
    """Wrap markup in a bevelled region (rules come from :func:`bevel_css`)."""
    cls = bevel_class(sunken)
    if extra_class:
        cls = f"{cls} {extra_class}"
    style_attr = f" style='{style}'" if style else ""
    return f"<{tag} class='{cls}'{style_attr}>{content}</{tag}>"
