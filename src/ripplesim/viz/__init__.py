"""
Visualization utilities.

- Height field heatmaps and composed frames
- Decay history plots
- Agent path plots
- Asset loading with fallbacks

The interactive viewer lives in ripplesim.viz.interactive and is not imported
here, so static plotting works on headless backends.
"""

from ripplesim.viz.fields import (
    CMAP_WATER,
    plot_height_field,
    plot_frame,
    plot_decay,
    save_figure,
)

from ripplesim.viz.trajectories import (
    plot_agent_path,
    plot_agent_paths,
)

from ripplesim.viz.assets import (
    load_background,
    load_backgrounds,
    load_sprite,
)

__all__ = [
    "CMAP_WATER",
    "plot_height_field",
    "plot_frame",
    "plot_decay",
    "save_figure",
    "plot_agent_path",
    "plot_agent_paths",
    "load_background",
    "load_backgrounds",
    "load_sprite",
]
