"""
SteeringAgent: a fish that wanders the tank at constant speed.

Wander steering, once per tick:
1. Nudge the velocity by a small random vector (|component| <= max_turn / 2)
2. Rescale the velocity back to the fixed speed (only the heading wanders)
3. Move by the velocity (unit time step)
4. Push the velocity back inward when inside the boundary margin

Small max_turn gives gentle arcs; the boundary push is a bias on future
headings, not a clamp, so an agent may drift into the margin for a while.

Each agent owns its own numpy Generator. Pass a seed (or a generator) for
reproducible paths.
"""

from __future__ import annotations
from dataclasses import dataclass
import math

import numpy as np

from ripplesim.agents.base import Agent, AgentConfig


@dataclass
class WanderConfig(AgentConfig):
    """Configuration for a wandering agent."""

    speed: float = 3.0  # Distance per tick, held constant
    max_turn: float = 0.2  # Random nudge bound; lower = smoother arcs
    heading: float | None = None  # Initial heading in radians (random if None)
    boundary_margin: float = 50.0  # Width of the soft wall zone
    record_trajectory: bool = False  # Keep (x, y, vx, vy) per tick


class SteeringAgent(Agent):
    """
    An agent driven by wander steering with soft boundary containment.

    Speed stays equal to config.speed after every normalisation; only the
    heading changes from tick to tick.
    """

    def __init__(
        self,
        config: WanderConfig,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ):
        super().__init__(config)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.speed = config.speed
        self.max_turn = config.max_turn

        heading = config.heading
        if heading is None:
            heading = self.rng.random() * 2.0 * math.pi
        self.vx = math.cos(heading) * self.speed
        self.vy = math.sin(heading) * self.speed

        self.trajectory: list[tuple[float, float, float, float]] = []
        if config.record_trajectory:
            self._record_state()

    def update(self) -> None:
        """Wander one tick: perturb, renormalise, move, then contain."""
        cfg = self.config
        old_vx, old_vy = self.vx, self.vy

        self.vx += (self.rng.random() - 0.5) * self.max_turn
        self.vy += (self.rng.random() - 0.5) * self.max_turn

        magnitude = math.hypot(self.vx, self.vy)
        if magnitude != 0.0:
            self.vx = self.vx / magnitude * self.speed
            self.vy = self.vy / magnitude * self.speed
        else:
            self.vx, self.vy = old_vx, old_vy

        self.x += self.vx
        self.y += self.vy

        margin = cfg.boundary_margin
        if self.x < margin:
            self.vx += self.max_turn
        if self.x > cfg.world_width - margin:
            self.vx -= self.max_turn
        if self.y < margin:
            self.vy += self.max_turn
        if self.y > cfg.world_height - margin:
            self.vy -= self.max_turn

        if cfg.record_trajectory:
            self._record_state()

    def _record_state(self):
        self.trajectory.append((self.x, self.y, self.vx, self.vy))

    def get_trajectory_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """Return trajectory as (x_array, y_array) for plotting."""
        if not self.trajectory:
            return np.array([]), np.array([])

        traj = np.array(self.trajectory)
        return traj[:, 0], traj[:, 1]

    def distance_from_start(self) -> float:
        """Straight-line distance from the spawn point."""
        return math.hypot(self.x - self.config.x, self.y - self.config.y)


def create_agent(
    agent_id: str,
    x: float,
    y: float,
    world_width: float,
    world_height: float,
    speed: float = 3.0,
    max_turn: float = 0.2,
    heading: float | None = None,
    seed: int | None = None,
    record_trajectory: bool = False,
) -> SteeringAgent:
    """
    Convenience factory for a wandering agent.

    Args:
        agent_id: Unique identifier
        x, y: Spawn position in display space
        world_width, world_height: Tank size used for the soft walls
        speed: Constant travel speed (distance per tick)
        max_turn: Per-tick random nudge bound
        heading: Initial heading in radians (random if None)
        seed: Seed for the agent's own generator
        record_trajectory: Keep a per-tick trajectory

    Returns:
        Configured SteeringAgent
    """
    config = WanderConfig(
        agent_id=agent_id,
        x=x,
        y=y,
        world_width=world_width,
        world_height=world_height,
        speed=speed,
        max_turn=max_turn,
        heading=heading,
        record_trajectory=record_trajectory,
    )
    return SteeringAgent(config, seed=seed)
