#!/usr/bin/env python3
"""
Demo: Ripple Energy Decay

This demonstration drops a single splash into a still tank and watches
damping drain the surface:

1. A splash at the centre spreads as a ring
2. The one-cell border never moves; waves bounce off it
3. Total |height| falls roughly exponentially with the damping factor
4. Lower viscosity (damping) → faster decay

Output: output/demo_decay/decay.png, output/demo_decay/profile.png
"""

from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from ripplesim.core import RippleField
from ripplesim.analysis import compute_radial_profile, fit_decay_rate, run_decay
from ripplesim.viz import plot_decay, plot_height_field, save_figure


def main():
    print("=" * 60)
    print("  RIPPLE ENERGY DECAY")
    print("=" * 60)

    output_dir = Path("output/demo_decay")
    output_dir.mkdir(parents=True, exist_ok=True)

    width, height, scale = 400, 400, 2
    cx, cy = width // 2, height // 2
    strength = 40.0
    n_steps = 400

    print("\n1. Measuring decay for several damping values...")
    fits = {}
    for damping in (0.90, 0.94, 0.96, 0.98):
        field = RippleField.from_display(width, height, scale=scale, damping=damping)
        field.disturb(cx, cy, strength)
        history = run_decay(field, n_steps)
        fit = fit_decay_rate(history)
        fits[damping] = (history, fit)
        print(f"   damping={damping:.2f}: rate={fit.rate:.4f}/tick, "
              f"half-life={fit.half_life:.1f} ticks, R²={fit.r_squared:.3f}")

    history, fit = fits[0.96]
    fig, _ = plot_decay(history, fit, title="Surface Magnitude Decay (damping=0.96)")
    save_figure(fig, output_dir / "decay.png")
    plt.close(fig)

    print("\n2. Radial profile of a spreading ring...")
    field = RippleField.from_display(width, height, scale=scale, damping=0.96)
    field.disturb(cx, cy, strength)
    for _ in range(40):
        field.step()

    gx, gy = cx // scale, cy // scale
    radii, values = compute_radial_profile(field, (gx, gy), display_units=True)
    peak = radii[np.argmax(np.abs(values))]
    print(f"   After 40 steps the strongest ring sits {peak} px from the splash")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    plot_height_field(field, title="Height field after 40 steps", ax=axes[0])
    axes[1].plot(radii, values, "b-", linewidth=2)
    axes[1].set_xlabel("Distance from splash (px)")
    axes[1].set_ylabel("Mean height")
    axes[1].set_title("Radial profile")
    axes[1].grid(True, alpha=0.3)
    fig.tight_layout()
    save_figure(fig, output_dir / "profile.png")
    plt.close(fig)

    print(f"\nSaved figures to {output_dir}/")


if __name__ == "__main__":
    main()
