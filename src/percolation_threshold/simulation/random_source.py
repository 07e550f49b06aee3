"""
Uniform random integers for picking trial sites.

Any object with a ``uniform(bound)`` method returning an int in [0, bound)
can drive a simulation. UniformSource is the default, backed by numpy's
Generator so that runs are reproducible from a seed.
"""

from typing import Optional

import numpy as np

from ..errors import InvalidArgument


class UniformSource:
    """Adapter exposing ``uniform(bound)`` over a numpy Generator."""

    def __init__(self, seed: Optional[int] = None, generator: Optional[np.random.Generator] = None):
        """
        Args:
            seed: Seed for a fresh Generator (ignored if generator is given)
            generator: Existing Generator to draw from
        """
        self._rng = generator if generator is not None else np.random.default_rng(seed)

    def uniform(self, bound: int) -> int:
        """
        Return an integer drawn uniformly from [0, bound).

        Raises:
            InvalidArgument: if bound is not positive
        """
        if bound <= 0:
            raise InvalidArgument(f"Bound must be positive, got {bound}")
        return int(self._rng.integers(bound))
