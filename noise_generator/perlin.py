# noise_generator/perlin.py

"""
================================================================================
FRACTAL PERLIN NOISE GENERATOR
================================================================================
This module contains the Perlin class, which sums successive octaves of the
lattice kernel (fractal Brownian motion) into a single bounded value.

Data Contract:
---------------
- Inputs (on initialization):
    - config (dict, optional): Parameters which override the internal
      defaults. Recognized keys: 'octave_count', 'frequency', 'lacunarity',
      'persistence'.
    - logger (optional): A configured Python logging object for runtime
      messages.
- Outputs (from methods):
    - get_value(x, y, z): A float in [-1, 1].
    - get_values(x, y, z): A NumPy float64 array in [-1, 1] with the broadcast
      shape of the inputs.
- Side Effects: Logs messages on construction and reconfiguration only.
- Invariants: Given the same configuration and coordinates, the output is
  bit-identical between calls and between the scalar and array paths.
================================================================================
"""

import logging

import numpy as np
from numba import njit

from . import config as DEFAULTS
from .kernel import lattice_noise_3d

@njit
def fractal_noise_3d(x, y, z, octave_count, frequency, lacunarity, persistence):
    """
    Sums `octave_count` octaves of lattice noise at a single point.

    The sum is divided by the total amplitude only when it leaves [-1, 1];
    values already inside the unit range pass through untouched.
    """
    x = x * frequency
    y = y * frequency
    z = z * frequency

    value = 0.0
    amplitude = 1.0
    total_amplitude = 0.0

    for _ in range(octave_count):
        value += lattice_noise_3d(x, y, z) * amplitude
        x *= lacunarity
        y *= lacunarity
        z *= lacunarity
        total_amplitude += amplitude
        amplitude *= persistence

    # Normalize if necessary. With no octaves the sum stays at 0.0, so the
    # division is never reached with a zero total.
    if abs(value) > 1.0 and total_amplitude != 0.0:
        value /= total_amplitude

    # Only a pathological persistence (e.g. negative) can still overflow here.
    if value > 1.0:
        value = 1.0
    elif value < -1.0:
        value = -1.0
    return value

@njit
def _fractal_noise_3d_flat(x, y, z, octave_count, frequency, lacunarity, persistence):
    """Evaluates fractal_noise_3d over three equally sized 1D arrays."""
    out = np.empty(x.shape[0])
    for i in range(x.shape[0]):
        out[i] = fractal_noise_3d(x[i], y[i], z[i], octave_count, frequency, lacunarity, persistence)
    return out

class Perlin:
    """
    3D fractal Perlin noise generator.
    Satisfies the Noise protocol through get_value().
    """
    def __init__(self, config: dict = None, logger: logging.Logger = None):
        """
        Initializes the generator.

        Args:
            config (dict, optional): User-defined parameters to override defaults.
            logger (logging.Logger, optional): The logger instance for all output.
                Defaults to this module's logger.
        """
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        user_config = config if config is not None else {}

        # --- Consolidate Configuration ---
        self._octave_count = int(user_config.get('octave_count', DEFAULTS.DEFAULT_OCTAVE_COUNT))
        self._frequency = float(user_config.get('frequency', DEFAULTS.DEFAULT_FREQUENCY))
        self._lacunarity = float(user_config.get('lacunarity', DEFAULTS.DEFAULT_LACUNARITY))
        self._persistence = float(user_config.get('persistence', DEFAULTS.DEFAULT_PERSISTENCE))

        self._warn_if_degenerate()
        self.logger.info(f"Perlin noise initialized with settings: {self.get_settings()}")

    # --- Read-only Properties ---
    @property
    def octave_count(self) -> int:
        return self._octave_count

    @property
    def frequency(self) -> float:
        return self._frequency

    @property
    def lacunarity(self) -> float:
        return self._lacunarity

    @property
    def persistence(self) -> float:
        return self._persistence

    def get_settings(self) -> dict:
        """Returns a snapshot of the current configuration."""
        return {
            'octave_count': self._octave_count,
            'frequency': self._frequency,
            'lacunarity': self._lacunarity,
            'persistence': self._persistence,
        }

    # --- Setters ---
    def set_octave_count(self, n: int):
        """Sets the number of octaves."""
        self._octave_count = int(n)
        self.logger.debug(f"Octave count set to {self._octave_count}")
        self._warn_if_degenerate()

    def set_frequency(self, frequency: float):
        """Sets the frequency of the first octave."""
        self._frequency = float(frequency)
        self.logger.debug(f"Frequency set to {self._frequency}")

    def set_persistence(self, persistence: float):
        """Sets the amplitude multiplier between successive octaves."""
        self._persistence = float(persistence)
        self.logger.debug(f"Persistence set to {self._persistence}")

    def set_lacunarity(self, lacunarity: float):
        """Sets the frequency multiplier between successive octaves."""
        self._lacunarity = float(lacunarity)
        self.logger.debug(f"Lacunarity set to {self._lacunarity}")

    def _warn_if_degenerate(self):
        if self._octave_count < 1:
            self.logger.warning(
                f"Octave count is {self._octave_count}; every sample will be 0.0 "
                f"until at least one octave is configured."
            )

    # --- Evaluation ---
    def get_value(self, x: float, y: float, z: float) -> float:
        """Returns the noise value at the point (x, y, z) for the current settings."""
        return fractal_noise_3d(
            float(x), float(y), float(z),
            self._octave_count, self._frequency, self._lacunarity, self._persistence
        )

    def get_values(self, x, y, z) -> np.ndarray:
        """
        Evaluates get_value element-wise over array-like coordinates.

        The inputs are broadcast against each other using NumPy's rules and are
        never modified. The result has the broadcast shape.
        """
        bx, by, bz = np.broadcast_arrays(
            np.asarray(x, dtype=np.float64),
            np.asarray(y, dtype=np.float64),
            np.asarray(z, dtype=np.float64),
        )
        shape = bx.shape
        # ravel() may return views; the kernel only reads them.
        flat = _fractal_noise_3d_flat(
            np.ascontiguousarray(bx).ravel(),
            np.ascontiguousarray(by).ravel(),
            np.ascontiguousarray(bz).ravel(),
            self._octave_count, self._frequency, self._lacunarity, self._persistence
        )
        return flat.reshape(shape)
