"""
Tank: runs the simulation tick and owns the tunable parameters.

The tank wires the leaf components together:
- agents wander and leave a small splash where they are
- pointer input splashes at full (press) or half (drag) strength
- the ripple field steps once per tick
- the compositor renders the field over the active background

The tank itself holds no physics. Everything runs on one thread; population
and parameter changes happen between ticks.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

import numpy as np

from ripplesim.agents.wander import SteeringAgent, WanderConfig
from ripplesim.core.compositor import (
    BRIGHTNESS_SENSITIVITY,
    FALLBACK_COLOR,
    BackgroundSampler,
    ConstantSampler,
    compose,
)
from ripplesim.core.ripple_field import RippleField

logger = logging.getLogger(__name__)


# Splash strength relative to ripple_strength
PRESS_FACTOR = 1.0
DRAG_FACTOR = 0.5
AGENT_TRAIL_FACTOR = 0.3

# Ranges exposed to control widgets
DAMPING_RANGE = (0.90, 1.0)
STRENGTH_RANGE = (10.0, 100.0)
AGENT_COUNT_RANGE = (1, 5)


@dataclass
class TankConfig:
    """Configuration for a tank."""

    width: int = 600  # Display width in pixels
    height: int = 400  # Display height in pixels
    scale: int = 2  # Physics runs at 1/scale resolution
    damping: float = 0.96
    ripple_strength: float = 40.0
    agent_count: int = 1
    agent_speed: float = 3.0
    agent_max_turn: float = 0.2
    spawn_spread: float = 100.0  # Side of the spawn square around the centre
    sensitivity: float = BRIGHTNESS_SENSITIVITY
    seed: int | None = None  # Seeds spawn positions and per-agent generators

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Display must be non-empty, got {self.width}x{self.height}")


def _clamp(value: float, bounds: tuple[float, float]) -> float:
    lo, hi = bounds
    return max(lo, min(hi, value))


class Tank:
    """
    The whole simulation: ripple field, agents and backgrounds.

    Usage:
        tank = Tank(TankConfig(seed=1))
        tank.press(300, 200)
        frame = tank.tick()  # RGBA array, shape [height, width, 4]
    """

    def __init__(
        self,
        config: TankConfig | None = None,
        backgrounds: list[BackgroundSampler] | None = None,
    ):
        self.config = config if config is not None else TankConfig()
        cfg = self.config

        self.field = RippleField.from_display(
            cfg.width,
            cfg.height,
            scale=cfg.scale,
            damping=_clamp(cfg.damping, DAMPING_RANGE),
            ripple_strength=_clamp(cfg.ripple_strength, STRENGTH_RANGE),
        )
        self.ripple_strength = self.field.config.ripple_strength

        if not backgrounds:
            backgrounds = [ConstantSampler(FALLBACK_COLOR, cfg.width, cfg.height)]
        self.backgrounds = list(backgrounds)
        self.background_index = 0

        self.agents: list[SteeringAgent] = []
        self.tick_count = 0

        self._rng = np.random.default_rng(cfg.seed)
        self._next_agent_id = 0
        self._frame = np.empty(self.field.display_shape + (4,), dtype=np.float64)

        self.set_agent_count(cfg.agent_count)

    # ═══════════════════════════════════════════════════════════════
    # SIMULATION LOOP
    # ═══════════════════════════════════════════════════════════════

    def tick(self) -> np.ndarray:
        """
        Execute one simulation tick.

        Agents move and splash, the field steps, then the frame is composed.

        Returns:
            The composed RGBA frame (reused between ticks)
        """
        trail = self.ripple_strength * AGENT_TRAIL_FACTOR
        for agent in self.agents:
            agent.update()
            self.field.disturb(agent.x, agent.y, trail)

        self.field.step()
        self.tick_count += 1

        return self.render()

    def run(self, n_ticks: int) -> dict:
        """
        Run n ticks without keeping the frames.

        Returns:
            Statistics dictionary
        """
        for _ in range(n_ticks):
            self.tick()

        heights = self.field.previous
        return {
            "n_ticks": n_ticks,
            "tick_count": self.tick_count,
            "n_agents": len(self.agents),
            "max_height": float(heights.max()),
            "min_height": float(heights.min()),
            "mean_abs_height": float(np.abs(heights).mean()),
        }

    def render(self) -> np.ndarray:
        """Compose the current surface over the active background."""
        return compose(
            self.field.previous,
            self.background,
            self.field.scale,
            sensitivity=self.config.sensitivity,
            out=self._frame,
        )

    # ═══════════════════════════════════════════════════════════════
    # INPUT
    # ═══════════════════════════════════════════════════════════════

    def press(self, x: float, y: float) -> bool:
        """Pointer pressed at display (x, y): full-strength splash."""
        return self.field.disturb(x, y, self.ripple_strength * PRESS_FACTOR)

    def drag(self, x: float, y: float) -> bool:
        """Pointer dragged over display (x, y): half-strength splash."""
        return self.field.disturb(x, y, self.ripple_strength * DRAG_FACTOR)

    # ═══════════════════════════════════════════════════════════════
    # TUNABLES (control widgets)
    # ═══════════════════════════════════════════════════════════════

    @property
    def damping(self) -> float:
        return self.field.damping

    def set_damping(self, value: float) -> None:
        """Set viscosity, clamped to DAMPING_RANGE."""
        self.field.damping = _clamp(float(value), DAMPING_RANGE)

    def set_ripple_strength(self, value: float) -> None:
        """Set splash strength, clamped to STRENGTH_RANGE."""
        self.ripple_strength = _clamp(float(value), STRENGTH_RANGE)

    def set_agent_count(self, count: float) -> None:
        """
        Grow or shrink the population to `count` agents.

        The count is rounded and clamped to AGENT_COUNT_RANGE. New agents
        spawn near the display centre; removal drops the newest first.
        """
        target = int(_clamp(int(round(count)), AGENT_COUNT_RANGE))

        while len(self.agents) < target:
            self.agents.append(self._spawn_agent())
        while len(self.agents) > target:
            removed = self.agents.pop()
            logger.debug("Removed agent %s", removed.config.agent_id)

    def _spawn_agent(self) -> SteeringAgent:
        cfg = self.config
        spread = cfg.spawn_spread
        x = cfg.width / 2.0 + (self._rng.random() - 0.5) * spread
        y = cfg.height / 2.0 + (self._rng.random() - 0.5) * spread

        agent_id = f"fish-{self._next_agent_id}"
        self._next_agent_id += 1

        config = WanderConfig(
            agent_id=agent_id,
            x=x,
            y=y,
            world_width=cfg.width,
            world_height=cfg.height,
            speed=cfg.agent_speed,
            max_turn=cfg.agent_max_turn,
        )
        seed = int(self._rng.integers(2**32))
        logger.debug("Spawned agent %s at (%.1f, %.1f)", agent_id, x, y)
        return SteeringAgent(config, seed=seed)

    # ═══════════════════════════════════════════════════════════════
    # BACKGROUNDS
    # ═══════════════════════════════════════════════════════════════

    @property
    def background(self) -> BackgroundSampler:
        """The background currently rendered under the water."""
        return self.backgrounds[self.background_index]

    def next_background(self) -> int:
        """Cycle to the next background; returns the new index."""
        self.background_index = (self.background_index + 1) % len(self.backgrounds)
        logger.debug("Switched to background %d", self.background_index)
        return self.background_index
