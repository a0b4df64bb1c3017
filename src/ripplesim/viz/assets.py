"""
Image assets: backgrounds and the fish sprite.

Loading never stops the simulation. A missing or unreadable background is
replaced by a plain dark-blue tank, a missing sprite by the geometric
placeholder the viewer draws itself.
"""

from __future__ import annotations
from pathlib import Path
from typing import Sequence
import logging

import numpy as np
import matplotlib.image as mpimg

from ripplesim.core.compositor import ArraySampler, BackgroundSampler, ConstantSampler, FALLBACK_COLOR

logger = logging.getLogger(__name__)


DEFAULT_BACKGROUNDS = ("background.png", "background1.png", "background2.png")
DEFAULT_SPRITE = "fish.png"


def _read_image(path: str | Path) -> np.ndarray:
    return mpimg.imread(str(path))


def load_background(path: str | Path) -> ArraySampler | None:
    """
    Load one background image.

    Returns:
        ArraySampler over the image, or None if it could not be read
    """
    try:
        return ArraySampler(_read_image(path))
    except (OSError, ValueError) as exc:
        logger.warning("Background %s not loaded: %s", path, exc)
        return None


def load_backgrounds(
    paths: Sequence[str | Path] = DEFAULT_BACKGROUNDS,
    width: int = 600,
    height: int = 400,
) -> list[BackgroundSampler]:
    """
    Load every readable background from `paths`.

    Falls back to a single dark-blue background of width x height when none
    of them can be read.
    """
    samplers: list[BackgroundSampler] = []
    for path in paths:
        sampler = load_background(path)
        if sampler is not None:
            samplers.append(sampler)

    if not samplers:
        logger.warning("No background images found, using fallback color")
        samplers.append(ConstantSampler(FALLBACK_COLOR, width, height))

    return samplers


def load_sprite(path: str | Path = DEFAULT_SPRITE) -> np.ndarray | None:
    """
    Load the fish sprite (assumed to face right).

    Returns:
        Image array, or None so the viewer draws the fallback shape
    """
    try:
        return _read_image(path)
    except (OSError, ValueError) as exc:
        logger.warning("%s not found, using fallback shape: %s", path, exc)
        return None
