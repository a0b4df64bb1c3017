"""
2D visualization of the water surface.

Provides static plots for:
- the raw height field (signed, diverging colormap)
- a composed frame as the viewer would show it
- the magnitude decay history with its exponential fit

All plots use display orientation (y grows downward), matching the
coordinates pointer input and agents use.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

if TYPE_CHECKING:
    from ripplesim.core.ripple_field import RippleField
    from ripplesim.analysis.energy import DecayFit


# Custom colormap: deep water → surface white → deep water, for signed heights
def _create_water_cmap():
    """Create a diverging colormap for troughs (dark) and crests (light)."""
    from matplotlib.colors import LinearSegmentedColormap

    colors = [
        (0.020, 0.043, 0.180),  # Deep navy (trough)
        (0.055, 0.231, 0.431),  # Dark blue
        (0.192, 0.486, 0.663),  # Sea blue
        (0.878, 0.937, 0.961),  # Foam (flat)
        (0.427, 0.749, 0.784),  # Light teal
        (0.102, 0.482, 0.533),  # Teal
        (0.016, 0.196, 0.227),  # Dark teal (crest)
    ]
    return LinearSegmentedColormap.from_list("water", colors)


CMAP_WATER = _create_water_cmap()


def plot_height_field(
    field: "RippleField | np.ndarray",
    title: str = "Height Field",
    cmap=None,
    limit: float | None = None,
    ax: Axes | None = None,
    colorbar: bool = True,
    figsize: tuple[float, float] = (8, 6),
) -> tuple[Figure, Axes]:
    """
    Plot the height grid as a heatmap.

    Args:
        field: RippleField (its `previous` buffer is used) or 2D array
        title: Plot title
        cmap: Colormap (defaults to CMAP_WATER)
        limit: Symmetric colour limit (auto from max |h| if None)
        ax: Existing axes to plot on (creates new figure if None)
        colorbar: Whether to add a colorbar
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    heights = field if isinstance(field, np.ndarray) else field.previous

    if cmap is None:
        cmap = CMAP_WATER

    if limit is None:
        limit = float(np.abs(heights).max()) or 1.0

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    im = ax.imshow(
        heights,
        origin="upper",
        cmap=cmap,
        vmin=-limit,
        vmax=limit,
        aspect="equal",
    )

    if colorbar:
        plt.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    ax.set_title(title)
    ax.set_xlabel("x (grid)")
    ax.set_ylabel("y (grid)")

    return fig, ax


def plot_frame(
    frame: np.ndarray,
    title: str = "",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (6, 4),
) -> tuple[Figure, Axes]:
    """Show a composed RGBA frame in display pixels."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.imshow(frame, origin="upper", interpolation="nearest")
    ax.set_title(title)
    ax.set_axis_off()

    return fig, ax


def plot_decay(
    history: np.ndarray,
    fit: "DecayFit | None" = None,
    title: str = "Surface Magnitude Decay",
    log_scale: bool = True,
    figsize: tuple[float, float] = (8, 5),
) -> tuple[Figure, Axes]:
    """
    Plot the magnitude history of an undisturbed field.

    Args:
        history: Magnitude per tick (from run_decay)
        fit: Optional exponential fit to overlay
        log_scale: Use a log y-axis

    Returns:
        (fig, ax) tuple
    """
    fig, ax = plt.subplots(figsize=figsize)
    t = np.arange(len(history))

    ax.plot(t, history, "b-", linewidth=1.5, label="Σ|h|")

    if fit is not None:
        ax.plot(
            t,
            fit.amplitude * np.exp(-fit.rate * t),
            "r--",
            linewidth=1.5,
            label=f"fit: rate={fit.rate:.4f}/tick (R²={fit.r_squared:.3f})",
        )

    if log_scale:
        ax.set_yscale("log")

    ax.set_xlabel("Tick")
    ax.set_ylabel("Total |height|")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend()

    fig.tight_layout()
    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
