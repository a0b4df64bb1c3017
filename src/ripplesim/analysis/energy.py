"""
Energy bookkeeping for the ripple field.

Damping should drain the surface: with no new splashes the total height
magnitude falls roughly like damping**t once the initial wave has spread.
run_decay records that history and fit_decay_rate recovers the per-tick
rate from it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy.optimize import curve_fit

if TYPE_CHECKING:
    from ripplesim.core.ripple_field import RippleField


@dataclass
class DecayFit:
    """Result of fitting magnitude(t) = amplitude * exp(-rate * t)."""

    amplitude: float
    rate: float  # Per tick
    r_squared: float

    @property
    def half_life(self) -> float:
        """Ticks for the magnitude to halve (inf when nothing decays)."""
        if self.rate <= 0:
            return float("inf")
        return float(np.log(2.0) / self.rate)


def _heights(field: "RippleField | np.ndarray") -> np.ndarray:
    if isinstance(field, np.ndarray):
        return field
    return field.previous


def field_magnitude(field: "RippleField | np.ndarray") -> float:
    """Total absolute height of the surface."""
    return float(np.abs(_heights(field)).sum())


def field_energy(field: "RippleField | np.ndarray") -> float:
    """Sum of squared heights."""
    heights = _heights(field)
    return float(np.sum(heights * heights))


def run_decay(field: "RippleField", n_steps: int) -> np.ndarray:
    """
    Step the field without further disturbances and record its magnitude.

    Args:
        field: Field to advance (modified in place)
        n_steps: Number of steps

    Returns:
        Magnitude history, length n_steps + 1 (index 0 is before stepping)
    """
    history = np.empty(n_steps + 1, dtype=np.float64)
    history[0] = field_magnitude(field)
    for t in range(1, n_steps + 1):
        field.step()
        history[t] = field_magnitude(field)
    return history


def _exp_decay(t, a, rate):
    return a * np.exp(-rate * t)


def fit_decay_rate(history: np.ndarray) -> DecayFit:
    """
    Fit an exponential envelope to a magnitude history.

    Args:
        history: Magnitudes per tick (e.g. from run_decay)

    Returns:
        DecayFit with amplitude, per-tick rate and R²
    """
    history = np.asarray(history, dtype=np.float64)
    t = np.arange(len(history), dtype=np.float64)

    peak = float(history.max())
    if peak <= 0.0:
        return DecayFit(amplitude=0.0, rate=0.0, r_squared=1.0)

    popt, _ = curve_fit(
        _exp_decay,
        t,
        history,
        p0=[peak, 0.01],
        bounds=([0.0, 0.0], [np.inf, 10.0]),
        maxfev=5000,
    )

    fitted = _exp_decay(t, *popt)
    ss_res = np.sum((history - fitted) ** 2)
    ss_tot = np.sum((history - history.mean()) ** 2)
    r_squared = 1.0 - ss_res / ss_tot if ss_tot > 0 else 1.0

    return DecayFit(amplitude=float(popt[0]), rate=float(popt[1]), r_squared=float(r_squared))
