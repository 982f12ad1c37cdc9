# noise_generator/kernel.py

"""
================================================================================
LATTICE NOISE KERNEL
================================================================================
This module provides the single-octave 3D gradient (Perlin) noise kernel and
the small helpers it is built from. It is designed to be a pure, stateless
utility.

Data Contract:
---------------
- Inputs:
    - x, y, z: Float coordinates. Any finite value is accepted, including
      negative ones.
- Outputs:
    - A float of approximately [-1, 1]. It is exactly 0.0 on every integer
      lattice point.
- Side Effects: None.
- Invariants: The output is a deterministic, continuous function of (x, y, z)
  and tiles with a period of 256 on every axis.
================================================================================
"""

import numpy as np
from numba import njit

from . import config as DEFAULTS
from .permutation import PERMUTATION

# Numba freezes module-level globals into the compiled code.
_P = PERMUTATION
_MASK = DEFAULTS.PERMUTATION_MASK
_GRADIENT_MASK = DEFAULTS.GRADIENT_MASK

@njit
def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)

@njit
def lerp(t, a, b):
    "Linear interpolation."
    return a + t * (b - a)

@njit
def grad(hash_value, x, y, z):
    """
    Dot product between the corner's gradient and the offset (x, y, z).

    The low 4 bits of the hash pick one of 12 edge-midpoint directions of a
    cube (four of the 16 codes repeat), without a stored vector table.
    """
    h = hash_value & _GRADIENT_MASK
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h == 12 or h == 14:
        v = x
    else:
        v = z
    return (u if (h & 1) == 0 else -u) + (v if (h & 2) == 0 else -v)

@njit
def lattice_noise_3d(x, y, z):
    """
    Generate one octave of 3D Perlin noise at a single point.
    This function is JIT-compiled with Numba for maximum performance.
    """
    # Find the (signed) integer position of the unit cube that contains the point.
    fx = np.floor(x)
    fy = np.floor(y)
    fz = np.floor(z)
    ix = int(fx)
    iy = int(fy)
    iz = int(fz)

    # Move to the position relative to the cube.
    x = x - fx
    y = y - fy
    z = z - fz

    u = fade(x)
    v = fade(y)
    w = fade(z)

    # Hash coordinates of the cube corners. Masking every index keeps negative
    # cells on the same periodic tiling as positive ones.
    a = _P[ix & _MASK] + iy
    aa = _P[a & _MASK] + iz
    ab = _P[(a + 1) & _MASK] + iz
    b = _P[(ix + 1) & _MASK] + iy
    ba = _P[b & _MASK] + iz
    bb = _P[(b + 1) & _MASK] + iz

    # Blend the eight corner gradients, along x first, then y, then z.
    return lerp(w,
                lerp(v,
                     lerp(u, grad(_P[aa & _MASK], x, y, z),
                             grad(_P[ba & _MASK], x - 1.0, y, z)),
                     lerp(u, grad(_P[ab & _MASK], x, y - 1.0, z),
                             grad(_P[bb & _MASK], x - 1.0, y - 1.0, z))),
                lerp(v,
                     lerp(u, grad(_P[(aa + 1) & _MASK], x, y, z - 1.0),
                             grad(_P[(ba + 1) & _MASK], x - 1.0, y, z - 1.0)),
                     lerp(u, grad(_P[(ab + 1) & _MASK], x, y - 1.0, z - 1.0),
                             grad(_P[(bb + 1) & _MASK], x - 1.0, y - 1.0, z - 1.0))))
