#!/usr/bin/env python3
"""
Demo: A School of Wandering Fish

This demonstration runs the tank headless with five fish:

1. Each fish wanders at constant speed with its own random generator
2. Soft walls bend the paths back inside the 50-pixel margin
3. Every fish leaves a trail of small splashes behind it
4. The final frame shows the wake over the fallback background

Output: output/demo_school/paths.png, output/demo_school/frame.png
"""

from pathlib import Path

import matplotlib.pyplot as plt

from ripplesim.agents import create_agent
from ripplesim.core import Tank, TankConfig
from ripplesim.viz import plot_agent_paths, plot_frame, save_figure


def main():
    print("=" * 60)
    print("  WANDERING FISH")
    print("=" * 60)

    output_dir = Path("output/demo_school")
    output_dir.mkdir(parents=True, exist_ok=True)

    width, height = 600, 400
    n_ticks = 1500

    print(f"\n1. Tracing 5 fish for {n_ticks} ticks...")
    fish = [
        create_agent(
            f"fish-{i}",
            x=width / 2, y=height / 2,
            world_width=width, world_height=height,
            seed=i,
            record_trajectory=True,
        )
        for i in range(5)
    ]
    for _ in range(n_ticks):
        for f in fish:
            f.update()

    for f in fish:
        print(f"   {f.config.agent_id}: speed={f.current_speed:.2f}, "
              f"end=({f.x:.0f}, {f.y:.0f}), from start={f.distance_from_start():.0f}")

    fig = plot_agent_paths(fish, title="Wander steering with soft walls")
    save_figure(fig, output_dir / "paths.png")
    plt.close(fig)

    print("\n2. Running the tank with 5 fish...")
    tank = Tank(TankConfig(width=width, height=height, agent_count=5, seed=7))
    tank.press(150, 100)
    stats = tank.run(200)
    print(f"   heights in [{stats['min_height']:.2f}, {stats['max_height']:.2f}], "
          f"mean |h|={stats['mean_abs_height']:.3f}")

    fig, _ = plot_frame(tank.render(), title="Tank after 200 ticks", figsize=(9, 6))
    save_figure(fig, output_dir / "frame.png")
    plt.close(fig)

    print(f"\nSaved figures to {output_dir}/")


if __name__ == "__main__":
    main()
