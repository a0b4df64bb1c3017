"""
Analysis layer: derived quantities for inspecting the water surface.

IMPORTANT: The simulation never reads these. One-way derivation only.

- field_magnitude / field_energy: how much motion is left on the surface
- run_decay + fit_decay_rate: measure how fast damping drains the waves
- compute_radial_profile: ring-averaged heights around a splash
"""

from ripplesim.analysis.energy import (
    DecayFit,
    field_energy,
    field_magnitude,
    fit_decay_rate,
    run_decay,
)
from ripplesim.analysis.profile import compute_radial_profile

__all__ = [
    "DecayFit",
    "field_energy",
    "field_magnitude",
    "fit_decay_rate",
    "run_decay",
    "compute_radial_profile",
]
