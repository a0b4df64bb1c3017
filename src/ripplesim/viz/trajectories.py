"""
Trajectory visualization for wandering agents.

Plots recorded agent paths in display space, optionally over a composed
frame, showing the smooth arcs of wander steering and the soft walls.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes
from matplotlib.patches import Rectangle

if TYPE_CHECKING:
    from ripplesim.agents.wander import SteeringAgent


def plot_agent_path(
    agent: "SteeringAgent",
    background: np.ndarray | None = None,
    title: str = "Agent Path",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (9, 6),
    show_start: bool = True,
    show_end: bool = True,
    show_margin: bool = True,
    line_color: str = "orange",
    line_width: float = 1.5,
) -> tuple[Figure, Axes]:
    """
    Plot a single agent's recorded path.

    Args:
        agent: SteeringAgent created with record_trajectory=True
        background: Optional RGBA frame to draw under the path
        title: Plot title
        ax: Existing axes (creates new if None)
        show_start: Mark spawn position
        show_end: Mark final position
        show_margin: Outline the inner edge of the soft-wall zone

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    cfg = agent.config
    width, height = cfg.world_width, cfg.world_height

    if background is not None:
        ax.imshow(background, origin="upper", extent=(0, width, height, 0))

    x_traj, y_traj = agent.get_trajectory_arrays()

    if len(x_traj) > 0:
        ax.plot(x_traj, y_traj, color=line_color, linewidth=line_width, zorder=2)

        if show_start:
            ax.scatter(
                [x_traj[0]], [y_traj[0]],
                color="green", s=80, marker="o", zorder=3,
                label="Start", edgecolors="white", linewidths=1.5
            )
        if show_end:
            ax.scatter(
                [x_traj[-1]], [y_traj[-1]],
                color="red", s=80, marker="x", zorder=3,
                label="End", linewidths=2
            )

    if show_margin:
        m = cfg.boundary_margin
        ax.add_patch(Rectangle(
            (m, m), width - 2 * m, height - 2 * m,
            fill=False, linestyle=":", edgecolor="gray", alpha=0.7,
        ))

    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect("equal")
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")

    if len(x_traj) > 0 and (show_start or show_end):
        ax.legend(loc="upper right")

    return fig, ax


def plot_agent_paths(
    agents: Sequence["SteeringAgent"],
    background: np.ndarray | None = None,
    title: str = "Agent Paths",
    figsize: tuple[float, float] = (9, 6),
) -> Figure:
    """
    Plot several agent paths on the same axes.

    Each agent gets its own colour from the tab10 cycle.
    """
    fig, ax = plt.subplots(figsize=figsize)
    colors = plt.cm.tab10.colors

    for i, agent in enumerate(agents):
        plot_agent_path(
            agent,
            background=background if i == 0 else None,
            title=title,
            ax=ax,
            show_start=False,
            show_end=False,
            show_margin=(i == 0),
            line_color=colors[i % len(colors)],
        )

    fig.tight_layout()
    return fig
