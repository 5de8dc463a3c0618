"""Palette and typography tables for the Win98 skin.

One immutable ``THEME`` is built at import time and shared by every
component. Colors are stored as 0–1 RGB floats (the way the desktop's
original palette was specified) and converted to CSS with matplotlib.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping

from matplotlib.colors import to_hex, to_rgba

from .types import ColorToken, FontToken


COLOR_TOKENS = (
    ColorToken("background", (0.75, 0.75, 0.75)),  # light gray face
    ColorToken("gray-dark", (0.5, 0.5, 0.5)),
    ColorToken("gray-light", (0.9, 0.9, 0.9)),
    ColorToken("accent-blue", (0.0, 0.0, 0.66)),  # title bars
    ColorToken("border-dark", (0.25, 0.25, 0.25)),
    ColorToken("border-light", (0.95, 0.95, 0.95)),
    ColorToken("desktop-teal", (0.0, 0.5, 0.5)),
    ColorToken("black", (0.0, 0.0, 0.0)),
    ColorToken("white", (1.0, 1.0, 1.0)),
)

# Referenced by the bevel, chrome, taskbar and overlays.
REQUIRED_COLORS = frozenset(
    {
        "background", "gray-dark", "gray-light", "border-dark", "border-light",
        "accent-blue", "desktop-teal", "black", "white",
    }
)

PIXEL_FAMILY = "PixelEmulator"
GENERIC_FAMILIES = frozenset({"monospace", "sans-serif", "serif"})

# Roles map to the PixelEmulator tokens. Only that face needs installing;
# the Courier New and Tahoma fallbacks ship with the system and end at a
# generic CSS family.
FONT_TOKENS = (
    FontToken("title", PIXEL_FAMILY, 18, fallback="title-fallback"),
    FontToken("body", PIXEL_FAMILY, 14, fallback="body-fallback"),
    FontToken("button", PIXEL_FAMILY, 16, fallback="button-fallback"),
    FontToken("taskbar-caption", PIXEL_FAMILY, 12, fallback="taskbar-fallback"),
    FontToken("title-fallback", "Courier New", 20, "bold", True, fallback="monospace", system=True),
    FontToken("body-fallback", "Courier New", 17, "normal", True, fallback="monospace", system=True),
    FontToken("button-fallback", "Courier New", 17, "bold", True, fallback="monospace", system=True),
    FontToken("taskbar-fallback", "Courier New", 12, "normal", True, fallback="monospace", system=True),
    FontToken("icon-caption", "Courier New", 11, "bold", True, fallback="monospace", system=True),
    FontToken("control-glyph", "Tahoma", 14, "bold", fallback="sans-serif", system=True),
    FontToken("monospace", "monospace", 13, "normal", True, system=True),
    FontToken("sans-serif", "sans-serif", 13, "normal", system=True),
)


@dataclass(frozen=True)
class Theme:
    colors: Mapping[str, ColorToken]
    fonts: Mapping[str, FontToken]
    available_fonts: FrozenSet[str] = field(default_factory=frozenset)

    # ---- colors ----

    def color(self, name: str) -> ColorToken:
        return self.colors[name]

    def hex(self, name: str) -> str:
        return to_hex(self.colors[name].rgb)

    def rgba(self, name: str, alpha: float) -> str:
        r, g, b, _ = to_rgba(self.colors[name].rgb)
        return f"rgba({round(r * 255)},{round(g * 255)},{round(b * 255)},{alpha:g})"

    # ---- fonts ----

    def font_chain(self, role: str) -> List[FontToken]:
        """Return ``role`` followed by its fallbacks, ending at a system font."""
        chain = [self.fonts[role]]
        while chain[-1].fallback is not None:
            chain.append(self.fonts[chain[-1].fallback])
        return chain

    def resolve_font(self, role: str) -> FontToken:
        """First token in the chain whose family can actually be rendered."""
        for token in self.font_chain(role):
            if token.system or token.family in self.available_fonts:
                return token
        # Validation guarantees every chain ends at a system token.
        raise AssertionError(f"font chain for {role!r} has no system fallback")

    def font_stack(self, role: str) -> str:
        """CSS family list from the resolved token down, so metrics and face agree."""
        chain = self.font_chain(role)
        start = chain.index(self.resolve_font(role))
        families: List[str] = []
        for token in chain[start:]:
            family = token.family if token.family in GENERIC_FAMILIES else f"'{token.family}'"
            if family not in families:
                families.append(family)
        return ", ".join(families)

    def font_css(self, role: str) -> str:
        token = self.resolve_font(role)
        return (
            f"font-family:{self.font_stack(role)}; font-size:{token.size}px; "
            f"font-weight:{token.weight};"
        )


def _validate(colors: Dict[str, ColorToken], fonts: Dict[str, FontToken]) -> None:
    for token in colors.values():
        if len(token.rgb) != 3 or not all(0.0 <= c <= 1.0 for c in token.rgb):
            raise ValueError(f"color {token.name!r} has components outside [0, 1]: {token.rgb}")

    missing = sorted(REQUIRED_COLORS - set(colors))
    if missing:
        raise ValueError(f"palette is missing required colors: {', '.join(missing)}")

    for name in fonts:
        seen = [name]
        token = fonts[name]
        while token.fallback is not None:
            if token.fallback not in fonts:
                raise ValueError(f"font {token.name!r} falls back to unknown token {token.fallback!r}")
            if token.fallback in seen:
                raise ValueError(f"font fallback cycle: {' -> '.join(seen + [token.fallback])}")
            seen.append(token.fallback)
            token = fonts[token.fallback]
        if not token.system:
            raise ValueError(f"font chain for {name!r} does not end at a system font")


def build_theme(
    colors: Iterable[ColorToken] = COLOR_TOKENS,
    fonts: Iterable[FontToken] = FONT_TOKENS,
    available_fonts: Iterable[str] = (),
) -> Theme:
    color_map = {c.name: c for c in colors}
    font_map = {f.name: f for f in fonts}
    _validate(color_map, font_map)
    return Theme(
        colors=MappingProxyType(color_map),
        fonts=MappingProxyType(font_map),
        available_fonts=frozenset(available_fonts),
    )


THEME = build_theme()
