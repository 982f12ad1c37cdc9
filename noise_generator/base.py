# noise_generator/base.py

"""
================================================================================
NOISE CAPABILITY
================================================================================
The interface every noise generator in this package provides. Code that only
needs to sample a field should depend on Noise rather than on a concrete
generator, so alternative algorithms can be substituted freely.
================================================================================
"""

from typing import Protocol, runtime_checkable

@runtime_checkable
class Noise(Protocol):
    """
    A protocol defining the interface consumers expect from a noise generator.
    Any object with a matching get_value method satisfies it; no inheritance
    is required.
    """
    def get_value(self, x: float, y: float, z: float) -> float: ...
