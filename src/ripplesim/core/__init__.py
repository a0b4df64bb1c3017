"""
Core simulation primitives.

This layer knows NOTHING about windows, widgets or image files.
It only knows:
- A height grid with damped wave propagation (RippleField)
- How to turn heights into pixels over a background (compose)
- How to run one tick with agents and input (Tank)
"""

from ripplesim.core.ripple_field import RippleField, RippleFieldConfig
from ripplesim.core.compositor import (
    BRIGHTNESS_SENSITIVITY,
    FALLBACK_COLOR,
    ArraySampler,
    BackgroundSampler,
    ConstantSampler,
    compose,
)
from ripplesim.core.tank import (
    AGENT_COUNT_RANGE,
    DAMPING_RANGE,
    STRENGTH_RANGE,
    Tank,
    TankConfig,
)

__all__ = [
    "RippleField",
    "RippleFieldConfig",
    "BRIGHTNESS_SENSITIVITY",
    "FALLBACK_COLOR",
    "ArraySampler",
    "BackgroundSampler",
    "ConstantSampler",
    "compose",
    "AGENT_COUNT_RANGE",
    "DAMPING_RANGE",
    "STRENGTH_RANGE",
    "Tank",
    "TankConfig",
]
