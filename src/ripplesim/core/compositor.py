"""
Compositing: turn the height field into display pixels.

The compositor knows nothing about waves or agents. It reads a displacement
grid, shifts the brightness of a background image by it, and upscales each
grid cell to a scale x scale block of display pixels.

Backgrounds are reached only through the BackgroundSampler protocol, so the
image can come from disk, from a test array, or be a single fallback colour.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol

import numpy as np


BRIGHTNESS_SENSITIVITY = 0.03  # Brightness shift per unit of height

# JavaFX Color.DARKBLUE, used when no background image could be loaded
FALLBACK_COLOR = (0.0, 0.0, 139.0 / 255.0)


class BackgroundSampler(Protocol):
    """Protocol for background colour sources."""

    @property
    def width(self) -> int:
        """Background width in pixels."""
        ...

    @property
    def height(self) -> int:
        """Background height in pixels."""
        ...

    def sample(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """
        Sample RGB colours at integer pixel coordinates.

        Args:
            xs, ys: Integer coordinate arrays of the same shape, already
                clamped to [0, width-1] and [0, height-1]

        Returns:
            Float array of shape xs.shape + (3,) with channels in [0, 1]
        """
        ...


class ArraySampler:
    """Background backed by an image array of shape (H, W, 3) or (H, W, 4)."""

    def __init__(self, image: np.ndarray):
        image = np.asarray(image)
        if image.ndim == 2:
            image = np.stack([image] * 3, axis=-1)
        if image.ndim != 3 or image.shape[2] < 3:
            raise ValueError(f"Expected an (H, W, 3|4) image, got shape {image.shape}")

        if np.issubdtype(image.dtype, np.integer):
            rgb = image[:, :, :3].astype(np.float64) / np.iinfo(image.dtype).max
        else:
            rgb = image[:, :, :3].astype(np.float64)

        self.pixels = np.clip(rgb, 0.0, 1.0)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def sample(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        return self.pixels[ys, xs]


@dataclass
class ConstantSampler:
    """A background of a single colour."""

    color: tuple[float, float, float] = FALLBACK_COLOR
    width: int = 1
    height: int = 1

    def sample(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        xs = np.asarray(xs)
        return np.broadcast_to(np.asarray(self.color, dtype=np.float64), xs.shape + (3,))


def compose(
    heights: np.ndarray,
    background: BackgroundSampler,
    scale: int,
    sensitivity: float = BRIGHTNESS_SENSITIVITY,
    out: np.ndarray | None = None,
) -> np.ndarray:
    """
    Render a height grid over a background.

    For every grid cell (gy, gx):
    1. shift = heights[gy, gx] * sensitivity
    2. sample the background at display pixel (gx*scale, gy*scale), clamped
       to the background's own size
    3. add the shift to R, G and B, clip each to [0, 1], alpha = 1
    4. paint the colour into the cell's scale x scale display block

    Args:
        heights: Displacement grid, shape [grid_height, grid_width]
            (normally RippleField.previous)
        background: Colour source
        scale: Display pixels per grid cell
        sensitivity: Brightness shift per unit of height
        out: Optional RGBA buffer to reuse

    Returns:
        Float RGBA array, shape [grid_height*scale, grid_width*scale, 4]
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    ny, nx = heights.shape
    shape = (ny * scale, nx * scale, 4)
    if out is None:
        out = np.empty(shape, dtype=np.float64)
    elif out.shape != shape:
        raise ValueError(f"Output buffer has shape {out.shape}, expected {shape}")

    # Clamp so a background smaller than the display repeats its edge pixels
    xs = np.minimum(np.arange(nx) * scale, background.width - 1)
    ys = np.minimum(np.arange(ny) * scale, background.height - 1)
    yy, xx = np.meshgrid(ys, xs, indexing="ij")

    rgb = background.sample(xx, yy) + (heights * sensitivity)[:, :, np.newaxis]
    np.clip(rgb, 0.0, 1.0, out=rgb)

    # Nearest-neighbour block upscale
    out[:, :, :3] = np.repeat(np.repeat(rgb, scale, axis=0), scale, axis=1)
    out[:, :, 3] = 1.0

    return out
