"""
ripplesim: 2D Water Ripple Simulator with Wandering Fish

An interactive water tank where pointer splashes and autonomous fish
disturb a damped wave grid, rendered as brightness ripples over an image.

Core concepts:
- A double-buffered height field propagates ripples and loses energy to damping
- Fish wander at constant speed with soft walls, leaving a trail of splashes
- The compositor shifts background brightness by the local wave height
- Physics runs at a coarser resolution and is block-upscaled for display
"""

__version__ = "0.1.0"
