from __future__ import annotations

from dataclasses import replace
from typing import Tuple

from ..conf import hangman_settings
from .state import ScreenShake


# PUBLIC_INTERFACE
def trigger_shake() -> ScreenShake:
    """Start (or restart) the screen shake from zero elapsed time."""
    return ScreenShake(
        active=True,
        intensity=float(hangman_settings.SHAKE_INTENSITY),
        duration=float(hangman_settings.SHAKE_DURATION_SECS),
        elapsed=0.0,
    )


# PUBLIC_INTERFACE
def advance_shake(shake: ScreenShake, dt: float) -> ScreenShake:
    """Advance an active shake by ``dt`` seconds; it switches off at its duration."""
    if not shake.active:
        return shake
    elapsed = shake.elapsed + dt
    if elapsed >= shake.duration:
        return replace(shake, active=False, intensity=0.0, elapsed=elapsed)
    return replace(shake, elapsed=elapsed)


def current_intensity(shake: ScreenShake) -> float:
    """Intensity decays linearly from full strength to zero over the duration."""
    if not shake.active or shake.duration <= 0:
        return 0.0
    progress = min(shake.elapsed / shake.duration, 1.0)
    return shake.intensity * (1 - progress)


# PUBLIC_INTERFACE
def shake_offset(shake: ScreenShake, rng) -> Tuple[float, float]:
    """Return a random (dx, dy) render offset for the current frame."""
    intensity = current_intensity(shake)
    if intensity <= 0:
        return 0.0, 0.0
    return rng.uniform(-intensity, intensity), rng.uniform(-intensity, intensity)
