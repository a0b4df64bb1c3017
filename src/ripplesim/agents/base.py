"""
Base classes for agents.

Agents are autonomous bodies that move over the water surface. They:
- Own their position, velocity and random generator
- Advance once per tick through update()
- Never touch the ripple field themselves

The orchestration layer reads an agent's position and decides whether to
splash there; agents stay unaware of the grid.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
import math


@dataclass
class AgentConfig:
    """Base configuration for agents."""

    agent_id: str  # Unique identifier
    x: float = 0.0  # Initial x position (display space)
    y: float = 0.0  # Initial y position (display space)
    world_width: float = 600.0
    world_height: float = 400.0


class Agent(ABC):
    """
    Base class for agents that move in display space.

    Subclasses implement update(); position and heading are shared.
    """

    def __init__(self, config: AgentConfig):
        self.config = config
        self.x: float = float(config.x)
        self.y: float = float(config.y)
        self.vx: float = 0.0
        self.vy: float = 0.0

    @property
    def position(self) -> tuple[float, float]:
        """Current position (x, y)."""
        return self.x, self.y

    def get_position(self) -> tuple[float, float]:
        """Get current position."""
        return self.position

    @property
    def velocity(self) -> tuple[float, float]:
        """Current velocity (vx, vy), in distance per tick."""
        return self.vx, self.vy

    @property
    def current_speed(self) -> float:
        """Magnitude of the current velocity."""
        return math.hypot(self.vx, self.vy)

    @property
    def heading(self) -> float:
        """Direction of travel in radians, atan2(vy, vx)."""
        return math.atan2(self.vy, self.vx)

    @property
    def heading_degrees(self) -> float:
        """Direction of travel in degrees, for renderers."""
        return math.degrees(self.heading)

    @abstractmethod
    def update(self) -> None:
        """
        Advance the agent by one tick.

        Called once per tick by the orchestration layer, before the ripple
        field steps.
        """
        ...
