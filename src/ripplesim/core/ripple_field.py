"""
RippleField: the double-buffered height grid that carries the waves.

The field stores ONLY the two height buffers and the damping factor:
- previous: the surface as last computed (disturbances land here, rendering reads it)
- current: the write target for the next step

Propagation is the classic discrete ripple rule: each interior cell takes half
the sum of its four neighbours in `previous`, minus its own stale value in
`current`, then loses a fraction of its energy to damping.

Grid arrays are indexed [y, x] like every other numpy image.
"""

from dataclasses import dataclass
import math

import numpy as np


@dataclass
class RippleFieldConfig:
    """Configuration for a ripple field."""

    grid_width: int  # Simulation columns
    grid_height: int  # Simulation rows
    scale: int = 2  # Display pixels per grid cell (downsample factor)
    damping: float = 0.96  # Viscosity: fraction of energy kept per step
    ripple_strength: float = 40.0  # Default splash height, used by callers

    def __post_init__(self):
        if self.grid_width < 3 or self.grid_height < 3:
            raise ValueError(
                f"Grid must be at least 3x3, got {self.grid_width}x{self.grid_height}"
            )
        if self.scale < 1:
            raise ValueError(f"scale must be >= 1, got {self.scale}")
        _check_damping(self.damping)


def _check_damping(damping: float) -> None:
    if not 0.0 < damping <= 1.0:
        raise ValueError(f"damping must be in (0, 1], got {damping}")


class RippleField:
    """
    The simulated water surface.

    Disturbances are added to `previous`; `step()` writes the interior of
    `current` and then swaps the two handles, so `previous` always holds the
    newest surface. Border cells are never written and keep whatever value
    they had (a fixed edge, not a reflective or absorbing one).
    """

    def __init__(self, config: RippleFieldConfig):
        self.config = config
        ny, nx = config.grid_height, config.grid_width

        self.previous = np.zeros((ny, nx), dtype=np.float64)
        self.current = np.zeros((ny, nx), dtype=np.float64)

        # Interior-sized work buffer so step() never allocates
        self._scratch = np.zeros((ny - 2, nx - 2), dtype=np.float64)

        self._damping = config.damping

    @classmethod
    def from_display(
        cls,
        width: int,
        height: int,
        scale: int = 2,
        damping: float = 0.96,
        ripple_strength: float = 40.0,
    ) -> "RippleField":
        """Build a field whose grid covers a width x height display."""
        config = RippleFieldConfig(
            grid_width=width // scale,
            grid_height=height // scale,
            scale=scale,
            damping=damping,
            ripple_strength=ripple_strength,
        )
        return cls(config)

    @property
    def shape(self) -> tuple[int, int]:
        """Return (grid_height, grid_width)."""
        return self.config.grid_height, self.config.grid_width

    @property
    def grid_width(self) -> int:
        return self.config.grid_width

    @property
    def grid_height(self) -> int:
        return self.config.grid_height

    @property
    def scale(self) -> int:
        return self.config.scale

    @property
    def display_shape(self) -> tuple[int, int]:
        """Return (height, width) of the display area the grid covers."""
        return self.grid_height * self.scale, self.grid_width * self.scale

    @property
    def damping(self) -> float:
        return self._damping

    @damping.setter
    def damping(self, value: float):
        _check_damping(value)
        self._damping = float(value)

    def disturb(self, x: float, y: float, strength: float) -> bool:
        """
        Add a splash at display coordinates (x, y).

        The point is mapped to the grid by integer division with the scale.
        Only cells with 1 < gx < grid_width - 1 and 1 < gy < grid_height - 1
        accept the impulse; anything else, including NaN or infinite
        coordinates, is ignored.

        Returns:
            True if the disturbance landed on the grid
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            return False

        gx = int(x // self.scale)
        gy = int(y // self.scale)

        if 1 < gx < self.grid_width - 1 and 1 < gy < self.grid_height - 1:
            self.previous[gy, gx] += strength
            return True
        return False

    def step(self) -> None:
        """
        Advance the surface by one tick, then swap buffers.

        current = (W + E + N + S of previous) / 2 - current, times damping,
        on interior cells only.
        """
        prev = self.previous
        inner = self.current[1:-1, 1:-1]
        out = self._scratch

        np.add(prev[1:-1, :-2], prev[1:-1, 2:], out=out)
        out += prev[:-2, 1:-1]
        out += prev[2:, 1:-1]
        out *= 0.5
        out -= inner
        out *= self._damping
        inner[...] = out

        self.previous, self.current = self.current, self.previous

    def reset(self) -> None:
        """Flatten the surface."""
        self.previous.fill(0.0)
        self.current.fill(0.0)
