"""
Interactive tank viewer built on matplotlib.

Layout:
- the composed water frame, with fish drawn on top
- "Viscosity", "Strength" and "Fish Count" sliders
- a "Switch Background" button

Click to splash at full strength; drag to splash at half strength.
The animation timer, widgets and mouse callbacks all run on the GUI thread,
so every change reaches the tank between two ticks.
"""

from __future__ import annotations
from typing import Sequence
import argparse
import logging
import math

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.patches import Circle, Ellipse
from matplotlib.transforms import Affine2D
from matplotlib.widgets import Button, Slider

from ripplesim.core.tank import (
    AGENT_COUNT_RANGE,
    DAMPING_RANGE,
    STRENGTH_RANGE,
    Tank,
    TankConfig,
)
from ripplesim.viz.assets import DEFAULT_BACKGROUNDS, DEFAULT_SPRITE, load_backgrounds, load_sprite

logger = logging.getLogger(__name__)


CONTROLS_HEIGHT = 1.0  # Inches reserved under the frame for widgets
SPRITE_SCALE = 0.08  # Sprite drawn at this fraction of its pixel size

# Placeholder fish: body ellipse and eye, in the fish's own frame (facing +x)
BODY_SIZE = (30.0, 20.0)
EYE_OFFSET = (7.5, -2.5)
EYE_RADIUS = 2.5


class TankViewer:
    """
    Matplotlib window around a Tank.

    The viewer owns no simulation state; it forwards input to the tank and
    draws whatever tank.tick() returns.
    """

    def __init__(
        self,
        tank: Tank,
        sprite: np.ndarray | None = None,
        sprite_scale: float = SPRITE_SCALE,
        interval: int = 16,
    ):
        self.tank = tank
        self.sprite = sprite
        self.sprite_scale = sprite_scale
        self.interval = interval
        self.animation: FuncAnimation | None = None

        height, width = tank.field.display_shape
        self.width, self.height = width, height

        fig_h = height / 100.0 + CONTROLS_HEIGHT
        self.fig = plt.figure(figsize=(width / 100.0, fig_h))
        controls_frac = CONTROLS_HEIGHT / fig_h

        self.ax = self.fig.add_axes((0.0, controls_frac, 1.0, 1.0 - controls_frac))
        self.ax.set_axis_off()
        self.image = self.ax.imshow(
            tank.render(),
            origin="upper",
            extent=(0, width, height, 0),
            interpolation="nearest",
        )
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_autoscale_on(False)

        self._build_controls(controls_frac)

        self._dragging = False
        self.fig.canvas.mpl_connect("button_press_event", self._on_press)
        self.fig.canvas.mpl_connect("motion_notify_event", self._on_motion)
        self.fig.canvas.mpl_connect("button_release_event", self._on_release)

        self._agent_artists: list = []
        self._draw_agents()

    def _build_controls(self, controls_frac: float):
        row_y = controls_frac * 0.35
        row_h = controls_frac * 0.3

        ax_damping = self.fig.add_axes((0.10, row_y, 0.16, row_h))
        self.damping_slider = Slider(
            ax_damping, "Viscosity", *DAMPING_RANGE, valinit=self.tank.damping
        )
        self.damping_slider.on_changed(self.tank.set_damping)

        ax_strength = self.fig.add_axes((0.36, row_y, 0.16, row_h))
        self.strength_slider = Slider(
            ax_strength, "Strength", *STRENGTH_RANGE, valinit=self.tank.ripple_strength
        )
        self.strength_slider.on_changed(self.tank.set_ripple_strength)

        ax_count = self.fig.add_axes((0.62, row_y, 0.12, row_h))
        self.count_slider = Slider(
            ax_count,
            "Fish Count",
            *AGENT_COUNT_RANGE,
            valinit=len(self.tank.agents),
            valstep=1,
        )
        self.count_slider.on_changed(self.tank.set_agent_count)

        ax_button = self.fig.add_axes((0.78, row_y - row_h * 0.5, 0.2, row_h * 2))
        self.switch_button = Button(ax_button, "Switch Background")
        self.switch_button.on_clicked(self._on_switch)

    # ═══════════════════════════════════════════════════════════════
    # INPUT
    # ═══════════════════════════════════════════════════════════════

    def _on_press(self, event):
        if event.inaxes is not self.ax or event.xdata is None:
            return
        self._dragging = True
        self.tank.press(event.xdata, event.ydata)

    def _on_motion(self, event):
        if not self._dragging or event.inaxes is not self.ax or event.xdata is None:
            return
        self.tank.drag(event.xdata, event.ydata)

    def _on_release(self, event):
        self._dragging = False

    def _on_switch(self, event):
        self.tank.next_background()

    # ═══════════════════════════════════════════════════════════════
    # DRAWING
    # ═══════════════════════════════════════════════════════════════

    def update_frame(self, frame_number: int = 0) -> list:
        """Advance the tank one tick and redraw. FuncAnimation callback."""
        frame = self.tank.tick()
        self.image.set_data(frame)
        self._draw_agents()
        return [self.image, *self._agent_artists]

    def _draw_agents(self):
        for artist in self._agent_artists:
            artist.remove()
        self._agent_artists = []

        for agent in self.tank.agents:
            if self.sprite is not None:
                self._agent_artists.append(self._draw_sprite(agent.x, agent.y, agent.heading_degrees))
            else:
                self._agent_artists.extend(self._draw_placeholder(agent.x, agent.y, agent.heading))

    def _draw_sprite(self, x: float, y: float, angle_deg: float):
        h, w = self.sprite.shape[:2]
        sw, sh = w * self.sprite_scale, h * self.sprite_scale

        artist = self.ax.imshow(
            self.sprite,
            extent=(x - sw / 2, x + sw / 2, y + sh / 2, y - sh / 2),
            zorder=3,
        )
        artist.set_transform(Affine2D().rotate_deg_around(x, y, angle_deg) + self.ax.transData)
        return artist

    def _draw_placeholder(self, x: float, y: float, heading: float):
        cos_h, sin_h = math.cos(heading), math.sin(heading)
        ex, ey = EYE_OFFSET

        body = Ellipse(
            (x, y), *BODY_SIZE, angle=math.degrees(heading), facecolor="orange", zorder=3
        )
        eye = Circle(
            (x + ex * cos_h - ey * sin_h, y + ex * sin_h + ey * cos_h),
            EYE_RADIUS,
            facecolor="black",
            zorder=4,
        )
        self.ax.add_patch(body)
        self.ax.add_patch(eye)
        return [body, eye]

    def run(self) -> None:
        """Start the animation loop and block until the window closes."""
        self.animation = FuncAnimation(
            self.fig,
            self.update_frame,
            interval=self.interval,
            blit=False,
            cache_frame_data=False,
        )
        plt.show()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the interactive water tank."""
    parser = argparse.ArgumentParser(description="Water ripple tank with wandering fish")
    parser.add_argument(
        "--background",
        action="append",
        help="Background image (repeat for several; default: background*.png)",
    )
    parser.add_argument("--sprite", default=DEFAULT_SPRITE, help="Fish sprite image")
    parser.add_argument("--fish", type=int, default=1, help="Initial fish count (1-5)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = TankConfig(agent_count=args.fish, seed=args.seed)
    backgrounds = load_backgrounds(
        args.background or DEFAULT_BACKGROUNDS, width=config.width, height=config.height
    )
    tank = Tank(config, backgrounds=backgrounds)
    logger.info(
        "Tank %dx%d (grid %dx%d), %d background(s), %d fish",
        config.width, config.height, tank.field.grid_width, tank.field.grid_height,
        len(backgrounds), len(tank.agents),
    )

    viewer = TankViewer(tank, sprite=load_sprite(args.sprite))
    viewer.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
