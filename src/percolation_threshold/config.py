"""
Simulation run configuration.

The SimulationConfig loads a YAML run definition:

    simulation:
      grid_size: 200
      trials: 100
      seed: 42        # optional
    verbose: false    # optional
"""

import numbers
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import InvalidArgument


class SimulationConfig:
    """
    Loads and validates a simulation configuration YAML.

    Example:
        config = SimulationConfig.from_yaml('config/example.yaml')
        print(config.grid_size, config.trials)
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data or {}
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'SimulationConfig':
        """Load simulation config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Simulation config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls(data)

    def _validate(self):
        """Validate required config section and keys."""
        if not isinstance(self._data, dict):
            raise ValueError(f"Config must be a mapping, got {type(self._data).__name__}")
        if 'simulation' not in self._data:
            raise ValueError("Missing required config section: 'simulation'")

        sim = self._data['simulation'] or {}
        if not isinstance(sim, dict):
            raise ValueError(f"Config section 'simulation' must be a mapping, got {type(sim).__name__}")
        for key in ('grid_size', 'trials'):
            if key not in sim:
                raise ValueError(f"Missing required key 'simulation.{key}'")
            value = sim[key]
            if not isinstance(value, numbers.Integral) or isinstance(value, bool) or value <= 0:
                raise InvalidArgument(f"'simulation.{key}' must be a positive integer, got {value!r}")

        seed = sim.get('seed')
        if seed is not None and (not isinstance(seed, numbers.Integral) or isinstance(seed, bool)):
            raise ValueError(f"'simulation.seed' must be an integer, got {seed!r}")

    # --- Properties ---

    @property
    def grid_size(self) -> int:
        return self._data['simulation']['grid_size']

    @property
    def trials(self) -> int:
        return self._data['simulation']['trials']

    @property
    def seed(self) -> Optional[int]:
        return self._data['simulation'].get('seed')

    @property
    def verbose(self) -> bool:
        return bool(self._data.get('verbose', False))
