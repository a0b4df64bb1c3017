"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def small_field_config():
    """Configuration for a 10x10 grid at display scale 1."""
    from ripplesim.core import RippleFieldConfig
    return RippleFieldConfig(
        grid_width=10,
        grid_height=10,
        scale=1,
        damping=0.96,
    )


@pytest.fixture
def medium_field_config():
    """Configuration for a 40x40 grid at display scale 1."""
    from ripplesim.core import RippleFieldConfig
    return RippleFieldConfig(
        grid_width=40,
        grid_height=40,
        scale=1,
        damping=0.96,
    )


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


class SequenceRng:
    """Stand-in generator returning queued values from random(), then a default."""

    def __init__(self, values=(), default=0.5):
        self._values = list(values)
        self.default = default

    def random(self):
        if self._values:
            return self._values.pop(0)
        return self.default


@pytest.fixture
def sequence_rng():
    """Factory for generators with scripted random() draws."""
    return SequenceRng
