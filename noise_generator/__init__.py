# noise_generator/__init__.py

# This file makes the 'noise_generator' directory a Python package.
# We can also use it to define the public API of the package.

from .base import Noise
from .kernel import fade, grad, lattice_noise_3d, lerp
from .perlin import Perlin, fractal_noise_3d
from .permutation import PERMUTATION, lookup

__all__ = [
    "Noise",
    "Perlin",
    "PERMUTATION",
    "lookup",
    "fade",
    "lerp",
    "grad",
    "lattice_noise_3d",
    "fractal_noise_3d",
]
