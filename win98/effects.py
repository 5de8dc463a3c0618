"""CRT screen effects laid over the desktop.

All overlays are plain fixed-position ``<div>``s with ``pointer-events:none``
so they never intercept clicks. The sweep band is declared as a CSS animation;
:class:`SweepAnimation` is the same timeline expressed in Python so the
cycle can be reasoned about (and tested) without a browser.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .assets import png_data_uri
from .config import OVERLAY, SCREEN, SWEEP
from .palette import THEME, Theme
from .types import SweepState


@dataclass(frozen=True)
class SweepAnimation:
    """Linear sweep of the phase from -1 to +1, then a hold, repeated forever.

    Timeline of one cycle (``duration + delay`` seconds):

        t = 0                  off-screen-top (phase -1)
        0 < t < duration       sweeping
        duration <= t < cycle  off-screen-bottom-reset (phase +1, held)

    At ``t = cycle`` the phase snaps back to -1 and the next cycle starts.
    """

    duration: float = SWEEP.duration
    delay: float = SWEEP.delay
    band_height: float = SWEEP.band_height

    @property
    def cycle(self) -> float:
        return self.duration + self.delay

    def _local(self, t: float) -> float:
        return float(t) % self.cycle

    def phase_at(self, t: float) -> float:
        u = self._local(t)
        if u >= self.duration:
            return 1.0
        return -1.0 + 2.0 * u / self.duration

    def state_at(self, t: float) -> SweepState:
        u = self._local(t)
        if u == 0.0:
            return SweepState.OFF_SCREEN_TOP
        if u < self.duration:
            return SweepState.SWEEPING
        return SweepState.OFF_SCREEN_BOTTOM_RESET

    def offset(self, phase: float, screen_height: float) -> float:
        """Vertical offset of the band's top edge for ``phase`` in [-1, 1].

        -1 puts the band fully above the screen, +1 fully below it.
        """
        normalized = (phase + 1.0) / 2.0
        return normalized * (screen_height + self.band_height) - self.band_height

    def keyframes_css(self, name: str = "w98-sweep") -> str:
        sweep_pct = 100.0 * self.duration / self.cycle
        top = f"translateY(-{self.band_height:g}px)"
        bottom = "translateY(100vh)"
        return (
            f"@keyframes {name}{{"
            f"0%{{transform:{top};}}"
            f"{sweep_pct:.4g}%{{transform:{bottom};}}"
            f"100%{{transform:{bottom};}}"
            "}"
        )

    def animation_css(self, name: str = "w98-sweep") -> str:
        return f"animation:{name} {self.cycle:g}s linear 0s infinite normal none !important;"


SWEEP_ANIMATION = SweepAnimation()


def grain_pixels(size: int = OVERLAY.grain_tile, seed: int = OVERLAY.grain_seed) -> np.ndarray:
    """Deterministic gray noise tile (same pixels every run)."""
    rng = np.random.default_rng(seed)
    noise = rng.random((size, size))
    return np.repeat(noise[:, :, None], 3, axis=2)


def grain_data_uri() -> str:
    return png_data_uri(grain_pixels())


def overlays_css(sweep: SweepAnimation = SWEEP_ANIMATION, theme: Theme = THEME) -> str:
    period = OVERLAY.scanline_period
    line = OVERLAY.scanline_height
    scan = theme.rgba("black", OVERLAY.scanline_alpha)
    return "\n".join(
        [
            ".w98-overlay{position:fixed; inset:0; pointer-events:none; "
            f"border-radius:{SCREEN.corner_radius}px; overflow:hidden;}}",
            f".w98-vignette{{z-index:9990; background:{theme.rgba('black', OVERLAY.vignette_alpha)};}}",
            ".w98-scanlines{z-index:9991; "
            f"background:repeating-linear-gradient(to bottom, {scan} 0px, {scan} {line}px, "
            f"transparent {line}px, transparent {period}px);}}",
            ".w98-sweep-track{z-index:9992;}",
            ".w98-sweep{position:absolute; left:0; right:0; top:0; "
            f"height:{sweep.band_height:g}px; background:{theme.rgba('white', SWEEP.alpha)}; "
            f"will-change:transform; {sweep.animation_css()}}}",
            sweep.keyframes_css(),
            ".w98-grain{z-index:9993; mix-blend-mode:overlay; "
            f"background-color:{theme.hex('gray-dark')}; opacity:{OVERLAY.grain_alpha:g};"
            f"background-image:url('{grain_data_uri()}'); background-repeat:repeat;}}",
        ]
    )


def overlays_html() -> str:
    """Vignette, scanlines, sweep band and grain, back to front."""
    return (
        "<div class='w98-overlay w98-vignette'></div>"
        "<div class='w98-overlay w98-scanlines'></div>"
        "<div class='w98-overlay w98-sweep-track'><div class='w98-sweep'></div></div>"
        "<div class='w98-overlay w98-grain'></div>"
    )
