# noise_generator/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the noise
generator. These values are used if they are not explicitly provided by the
caller's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC USE CASE.
Instead, pass a configuration dictionary to the Perlin instance or use its
setters.
================================================================================
"""

# --- Fractal Summation ---
# Six octaves give fine detail while the last octave still contributes ~3%.
DEFAULT_OCTAVE_COUNT = 6
# The frequency of the first octave.
DEFAULT_FREQUENCY = 1.0
# The frequency multiplier between successive octaves.
DEFAULT_LACUNARITY = 2.0
# The amplitude multiplier between successive octaves (controls roughness).
DEFAULT_PERSISTENCE = 0.5

# --- Lattice Hashing ---
# The permutation table has 256 entries, so every index is wrapped to 8 bits.
PERMUTATION_SIZE = 256
PERMUTATION_MASK = 0xFF
# Only the low 4 bits of a corner hash select its gradient direction.
GRADIENT_MASK = 15
