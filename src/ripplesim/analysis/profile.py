"""
Radial profiles of the height field.

A single splash spreads as a ring; averaging heights over integer-radius
annuli around the splash point turns the 2D surface into a 1D wave profile.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ripplesim.core.ripple_field import RippleField


def compute_radial_profile(
    field: "RippleField | np.ndarray",
    center: tuple[int, int],
    max_radius: int | None = None,
    display_units: bool = False,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Ring-averaged height around a grid cell.

    Every cell falls in the ring whose index is its distance from `center`
    rounded to the nearest cell. Rings with no cells (beyond the corners of
    a small grid) report 0.

    Args:
        field: RippleField (its `previous` buffer is read) or 2D heights [ny, nx]
        center: (gx, gy) in grid cells
        max_radius: Outermost ring in grid cells (default: distance to the nearest edge)
        display_units: Return radii in display pixels, multiplying by the
            field's scale. Plain arrays have scale 1.

    Returns:
        (radii, values): ring radius and mean height per ring
    """
    if isinstance(field, np.ndarray):
        heights, scale = field, 1
    else:
        heights, scale = field.previous, field.scale

    ny, nx = heights.shape
    gx, gy = center
    if max_radius is None:
        max_radius = min(gx, gy, nx - gx - 1, ny - gy - 1)

    yy, xx = np.indices(heights.shape)
    ring = np.floor(np.hypot(xx - gx, yy - gy) + 0.5).astype(np.intp).ravel()
    inside = ring <= max_radius

    n_rings = max_radius + 1
    sums = np.bincount(ring[inside], weights=heights.ravel()[inside], minlength=n_rings)
    counts = np.bincount(ring[inside], minlength=n_rings)
    values = np.divide(sums, counts, out=np.zeros(n_rings), where=counts > 0)

    radii = np.arange(n_rings)
    if display_units:
        radii = radii * scale
    return radii, values
