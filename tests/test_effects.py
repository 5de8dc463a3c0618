import numpy as np
import pytest

from win98.effects import SWEEP_ANIMATION, SweepAnimation, grain_pixels, overlays_css, overlays_html
from win98.types import SweepState


def test_cycle_is_sweep_plus_hold():
    assert SWEEP_ANIMATION.cycle == pytest.approx(15.0)


@pytest.mark.parametrize(
    "t, phase",
    [(0.0, -1.0), (1.5, -0.5), (3.0, 0.0), (6.0, 1.0), (10.0, 1.0), (14.9, 1.0)],
)
def test_phase_over_one_cycle(t, phase):
    assert SWEEP_ANIMATION.phase_at(t) == pytest.approx(phase)


def test_phase_returns_to_start_and_repeats():
    sweep = SweepAnimation()
    for n in range(1, 5):
        start = n * sweep.cycle
        assert sweep.phase_at(start) == pytest.approx(-1.0)
        assert sweep.phase_at(start + 3.0) == pytest.approx(sweep.phase_at(3.0))
        assert sweep.state_at(start + 1.0) is SweepState.SWEEPING


def test_state_machine_sequence():
    sweep = SweepAnimation(duration=2.0, delay=1.0)
    assert sweep.state_at(0.0) is SweepState.OFF_SCREEN_TOP
    assert sweep.state_at(0.5) is SweepState.SWEEPING
    assert sweep.state_at(2.0) is SweepState.OFF_SCREEN_BOTTOM_RESET
    assert sweep.state_at(2.9) is SweepState.OFF_SCREEN_BOTTOM_RESET
    assert sweep.state_at(3.0) is SweepState.OFF_SCREEN_TOP


def test_offset_covers_screen_plus_band():
    sweep = SweepAnimation(band_height=105)
    assert sweep.offset(-1.0, 800) == pytest.approx(-105)
    assert sweep.offset(1.0, 800) == pytest.approx(800)
    assert sweep.offset(0.0, 800) == pytest.approx((800 + 105) / 2 - 105)


def test_keyframes_match_timeline():
    css = SweepAnimation().keyframes_css()
    assert css.startswith("@keyframes w98-sweep{")
    assert "0%{transform:translateY(-105px);}" in css
    assert "40%{transform:translateY(100vh);}" in css
    assert "100%{transform:translateY(100vh);}" in css
    assert "15s linear 0s infinite normal" in SweepAnimation().animation_css()


def test_grain_is_deterministic():
    a = grain_pixels(16, seed=1)
    b = grain_pixels(16, seed=1)
    assert a.shape == (16, 16, 3)
    assert np.array_equal(a, b)
    assert a.min() >= 0.0 and a.max() <= 1.0


def test_overlays_never_take_input():
    css = overlays_css()
    assert ".w98-overlay{position:fixed; inset:0; pointer-events:none;" in css
    assert "mix-blend-mode:overlay" in css
    assert "rgba(0,0,0,0.05)" in css
    assert "rgba(0,0,0,0.1)" in css


def test_overlay_stack_order():
    out = overlays_html()
    order = [out.index(c) for c in ("w98-vignette", "w98-scanlines", "w98-sweep-track", "w98-grain")]
    assert order == sorted(order)
